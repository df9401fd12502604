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
Independent disks.
"""
from vcloud_sdk.resource import Resource
from vcloud_sdk.xml import BUS_TYPE, MEDIA_TYPE, RELATION_TYPE
from vcloud_sdk.xml.wrapper import children, get_link

BUS_TYPE_NAMES = dict((code, name) for name, code in BUS_TYPE.items())


class Disk(Resource):

    def _disk_attribute(self, attribute):
        return self.entity_xml.get(attribute)

    @property
    def size_mb(self):
        return int(self._disk_attribute('size')) // (1024 * 1024)

    @property
    def bus_type(self):
        code = self._disk_attribute('busType')
        return BUS_TYPE_NAMES.get(code, code)

    @property
    def bus_sub_type(self):
        return self._disk_attribute('busSubType')

    @property
    def status(self):
        return int(self._disk_attribute('status'))

    @property
    def attached_vms(self):
        """Hrefs of the VMs the disk is attached to"""
        link = get_link(self.entity_xml, rel=RELATION_TYPE['DOWN'], type_=MEDIA_TYPE['VMS'])
        if link is None:
            return []
        vms = self._connection.get(link.get('href'))
        return [vm.get('href') for vm in children(vms, 'VmReference')]

    def is_attached(self):
        return len(self.attached_vms) > 0

    def delete(self):
        self._logger.info("Deleting independent disk {} {}".format(self.name, self.href))
        task_xml = self._connection.delete(self._remove_link_href())
        return self._task(task_xml)
