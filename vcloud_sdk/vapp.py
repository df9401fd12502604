# -*- coding: utf-8 -*-

##
# Copyright 2016-2018 VMware Inc.
# This file is part of vcloud-sdk
# All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License"); you may
# not use this file except in compliance with the License. You may obtain
# a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
# WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
# License for the specific language governing permissions and limitations
# under the License.
#
# For those usages not covered by the Apache License, Version 2.0 please
# contact:  osslegalrouting@vmware.com
##

"""
vApps and the virtual machines they contain.
"""
from vcloud_sdk.errors import ObjectNotFoundError
from vcloud_sdk.resource import Resource
from vcloud_sdk.xml import MEDIA_TYPE, RELATION_TYPE, RESOURCE_STATUS
from vcloud_sdk.xml.builders import disk_attach_or_detach_params, undeploy_vapp_params
from vcloud_sdk.xml.wrapper import children, descendants, find_child, get_link


class PoweredResource(Resource):
    """Common status handling of vApps and VMs"""

    @property
    def status(self):
        return int(self.entity_xml.get('status'))

    @property
    def power_state(self):
        return RESOURCE_STATUS.get(self.status, 'UNKNOWN')

    def _action(self, rel, data=None, content_type=None):
        href = self._link_href(rel)
        self._logger.debug("{} {}: {}".format(self.__class__.__name__, self.name, rel))
        return self._task(self._connection.post(href, data, content_type=content_type))

    def power_on(self):
        xml = self.entity_xml
        if RESOURCE_STATUS.get(int(xml.get('status'))) == 'POWERED_ON':
            self._logger.info("{} {} is already powered on".format(self.__class__.__name__, self.name))
            return None
        self._logger.info("Powering on {}".format(self.name))
        return self._action(RELATION_TYPE['POWER_ON'])

    def power_off(self):
        xml = self.entity_xml
        if get_link(xml, rel=RELATION_TYPE['POWER_OFF']) is None:
            self._logger.info("{} {} is already powered off".format(self.__class__.__name__, self.name))
            return None
        self._logger.info("Powering off {}".format(self.name))
        return self._action(RELATION_TYPE['POWER_OFF'])

    def undeploy(self, power_action='powerOff'):
        self._logger.info("Undeploying {}".format(self.name))
        return self._action(RELATION_TYPE['UNDEPLOY'], undeploy_vapp_params(power_action),
                            content_type=MEDIA_TYPE['UNDEPLOY_VAPP_PARAMS'])


class Vapp(PoweredResource):

    @property
    def vms(self):
        vms = find_child(self.entity_xml, 'Children')
        return [VM(self._session, vm.get('href'), name=vm.get('name'))
                for vm in children(vms, 'Vm')]

    def list_vms(self):
        return [vm.name for vm in self.vms]

    def find_vm_by_name(self, name):
        for vm in self.vms:
            if vm.name == name:
                return vm
        raise ObjectNotFoundError("VM '{}' is not found".format(name))

    def list_networks(self):
        """Names of the vApp networks, the placeholder 'none' network excluded"""
        section = find_child(self.entity_xml, 'NetworkConfigSection')
        return [config.get('networkName') for config in children(section, 'NetworkConfig')
                if config.get('networkName') != 'none']

    def delete(self):
        self._logger.info("Deleting vApp {}".format(self.name))
        return self._task(self._connection.delete(self._remove_link_href()))


class VM(PoweredResource):

    def list_networks(self):
        return [connection.get('network')
                for connection in descendants(self.entity_xml, 'NetworkConnection')
                if connection.get('network') != 'none']

    def _disk_action(self, rel, disk):
        href = self._link_href(rel, MEDIA_TYPE['DISK_ATTACH_DETACH_PARAMS'])
        task_xml = self._connection.post(href, disk_attach_or_detach_params(disk.href),
                                         content_type=MEDIA_TYPE['DISK_ATTACH_DETACH_PARAMS'])
        return self._task(task_xml)

    def attach_disk(self, disk):
        self._logger.info("Attaching disk {} to VM {}".format(disk.name, self.name))
        return self._disk_action(RELATION_TYPE['DISK_ATTACH'], disk)

    def detach_disk(self, disk):
        self._logger.info("Detaching disk {} from VM {}".format(disk.name, self.name))
        return self._disk_action(RELATION_TYPE['DISK_DETACH'], disk)
