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
Virtual data center: vApps, networks, independent disks and storage profiles.
"""
from collections import namedtuple

from vcloud_sdk.disk import Disk
from vcloud_sdk.errors import CloudError, InvalidParameters, ObjectNotFoundError
from vcloud_sdk.network import Network
from vcloud_sdk.resource import Resource
from vcloud_sdk.vapp import Vapp
from vcloud_sdk.xml import BUS_SUB_TYPE, BUS_TYPE, MEDIA_TYPE, RELATION_TYPE
from vcloud_sdk.xml.builders import disk_create_params
from vcloud_sdk.xml.wrapper import child_text, children, find_child, find_descendant

StorageProfile = namedtuple('StorageProfile', ['name', 'href'])


class Vdc(Resource):

    def _resource_entities(self, media_type):
        entities = find_child(self.entity_xml, 'ResourceEntities')
        return [entity for entity in children(entities, 'ResourceEntity')
                if entity.get('type') == media_type]

    @property
    def instantiate_href(self):
        return self._link_href(RELATION_TYPE['ADD'], MEDIA_TYPE['INSTANTIATE_VAPP_TEMPLATE_PARAMS'])

    # vApps

    @property
    def vapps(self):
        return [Vapp(self._session, entity.get('href'), name=entity.get('name'))
                for entity in self._resource_entities(MEDIA_TYPE['VAPP'])]

    def list_vapps(self):
        return [entity.get('name') for entity in self._resource_entities(MEDIA_TYPE['VAPP'])]

    def find_vapp_by_name(self, name):
        for vapp in self.vapps:
            if vapp.name == name:
                return vapp
        raise ObjectNotFoundError("vApp '{}' is not found".format(name))

    def vapp_exists(self, name):
        return name in self.list_vapps()

    # networks

    @property
    def networks(self):
        available = find_child(self.entity_xml, 'AvailableNetworks')
        return [Network(self._session, network.get('href'), name=network.get('name'))
                for network in children(available, 'Network')]

    def list_networks(self):
        return [network.name for network in self.networks]

    def find_network_by_name(self, name):
        for network in self.networks:
            if network.name == name:
                return network
        raise ObjectNotFoundError("Network '{}' is not found".format(name))

    def network_exists(self, name):
        return name in self.list_networks()

    # independent disks

    @property
    def disks(self):
        return [Disk(self._session, entity.get('href'), name=entity.get('name'))
                for entity in self._resource_entities(MEDIA_TYPE['DISK'])]

    def list_disks(self):
        return [disk.name for disk in self.disks]

    def find_disks_by_name(self, name):
        disks = [disk for disk in self.disks if disk.name == name]
        if not disks:
            raise ObjectNotFoundError("Disk '{}' is not found".format(name))
        return disks

    def find_disk_by_href(self, href):
        for disk in self.disks:
            if disk.href == href:
                return disk
        raise ObjectNotFoundError("Disk '{}' is not found".format(href))

    def disk_exists(self, name):
        return name in self.list_disks()

    def create_disk(self, name, capacity_mb, vm=None, bus_type='scsi', bus_sub_type='lsilogic'):
        """
        Create an independent disk in the VDC

        Args:
            name - disk name, names are not unique in vCloud Director
            capacity_mb - size in megabytes, positive integer
            vm - optional VM the disk should be placed close to
            bus_type - 'scsi', 'ide' or 'sata'
            bus_sub_type - controller, must be valid for bus_type

            Returns:
                The new Disk
        """
        if not isinstance(capacity_mb, int) or isinstance(capacity_mb, bool) or capacity_mb <= 0:
            raise InvalidParameters("Invalid disk capacity '{}', a positive number of MB is required".format(
                capacity_mb))
        bus_type = str(bus_type).lower()
        if bus_type not in BUS_TYPE:
            raise InvalidParameters("Invalid bus type '{}'".format(bus_type))
        if bus_sub_type not in BUS_SUB_TYPE[bus_type]:
            raise InvalidParameters("Invalid bus sub type '{}' for bus type '{}'".format(bus_sub_type, bus_type))

        add_href = self._link_href(RELATION_TYPE['ADD'], MEDIA_TYPE['DISK_CREATE_PARAMS'])
        params = disk_create_params(name, capacity_mb * 1024 * 1024, BUS_TYPE[bus_type], bus_sub_type,
                                    vm_href=vm.href if vm is not None else None)
        self._logger.info("Creating independent disk {} of {} MB in VDC {}".format(name, capacity_mb, self.name))
        disk_xml = self._connection.post(add_href, params, content_type=MEDIA_TYPE['DISK_CREATE_PARAMS'])
        return Disk(self._session, disk_xml.get('href'), name=disk_xml.get('name'))

    def delete_disk_by_name(self, name):
        disks = self.find_disks_by_name(name)
        if len(disks) > 1:
            raise CloudError("{} disks with name '{}' were found".format(len(disks), name))
        return disks[0].delete()

    def delete_all_disks_by_name(self, name):
        failed = []
        for disk in self.find_disks_by_name(name):
            try:
                disk.delete()
            except CloudError as exp:
                self._logger.error("Failed to delete disk {}: {}".format(disk.href, exp))
                failed.append(disk.href)
        if failed:
            raise CloudError("Failed to delete one or more of the disks with name '{}': {}".format(
                name, ', '.join(failed)))

    # storage profiles

    @property
    def storage_profiles(self):
        profiles = find_child(self.entity_xml, 'VdcStorageProfiles')
        return [StorageProfile(profile.get('name'), profile.get('href'))
                for profile in children(profiles, 'VdcStorageProfile')]

    def list_storage_profiles(self):
        return [profile.name for profile in self.storage_profiles]

    def find_storage_profile_by_name(self, name):
        for profile in self.storage_profiles:
            if profile.name == name:
                return profile
        raise ObjectNotFoundError("Storage profile '{}' is not found".format(name))

    def storage_profile_exists(self, name):
        return name in self.list_storage_profiles()

    @property
    def resources(self):
        """
        Compute capacity of the VDC

        Returns:
            dict with 'cpu' (MHz) and 'memory' (MB) entries, each holding
            'limit', 'used' and 'available'. 'available' is None when the
            VDC has no limit.
        """
        capacity = find_descendant(self.entity_xml, 'ComputeCapacity')
        result = {}
        for key, tag in (('cpu', 'Cpu'), ('memory', 'Memory')):
            section = find_child(capacity, tag)
            limit = int(child_text(section, 'Limit', '0'))
            used = int(child_text(section, 'Used', '0'))
            result[key] = {'limit': limit,
                           'used': used,
                           'available': limit - used if limit else None}
        return result
