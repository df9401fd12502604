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
Catalog lookups and vApp instantiation from catalog templates.
"""
from vcloud_sdk.catalog_item import CatalogItem, VappTemplate
from vcloud_sdk.errors import catalog_item_not_found
from vcloud_sdk.resource import Resource
from vcloud_sdk.vapp import Vapp
from vcloud_sdk.xml import MEDIA_TYPE
from vcloud_sdk.xml.builders import instantiate_vapp_template_params
from vcloud_sdk.xml.wrapper import children, find_child


class Catalog(Resource):

    @property
    def items(self):
        catalog_items = find_child(self.entity_xml, 'CatalogItems')
        return [CatalogItem(self._session, item.get('href'), name=item.get('name'))
                for item in children(catalog_items, 'CatalogItem')]

    def list_items(self):
        return [item.name for item in self.items]

    def find_item(self, name, item_type=None):
        """
        Find a catalog item by name and optionally by the type of entity it holds

        Args:
            name - catalog item name
            item_type - optional media type, e.g. MEDIA_TYPE['VAPP_TEMPLATE']

            Returns:
                The matching CatalogItem. An item whose entity type differs from
                item_type is treated as missing.
        """
        for item in self.items:
            if item.name != name:
                continue
            if item_type is None or item.type == item_type:
                return item
            self._logger.debug("Catalog item {} has type {}, expected {}".format(name, item.type, item_type))
        raise catalog_item_not_found(name)

    def item_exists(self, name, item_type=None):
        for item in self.items:
            if item.name == name and (item_type is None or item.type == item_type):
                return True
        return False

    def _list_items_of_type(self, item_type):
        return [item.name for item in self.items if item.type == item_type]

    def list_vapp_templates(self):
        return self._list_items_of_type(MEDIA_TYPE['VAPP_TEMPLATE'])

    def find_vapp_template_by_name(self, name):
        item = self.find_item(name, MEDIA_TYPE['VAPP_TEMPLATE'])
        return VappTemplate(self._session, item.entity_href, name=item.name, catalog_item=item)

    def vapp_template_exists(self, name):
        return self.item_exists(name, MEDIA_TYPE['VAPP_TEMPLATE'])

    def list_medias(self):
        return self._list_items_of_type(MEDIA_TYPE['MEDIA'])

    def find_media_by_name(self, name):
        return self.find_item(name, MEDIA_TYPE['MEDIA'])

    def delete_item_by_name_and_type(self, name, item_type=None):
        self.find_item(name, item_type).delete()

    def delete_all_items(self):
        for item in self.items:
            item.delete()

    def instantiate_vapp_template(self, vapp_template_name, vdc_name, vapp_name,
                                  description=None, disk_locality=None, network_config=None):
        """
        Create a vApp in a VDC from a template of this catalog

        The vApp is created undeployed and powered off. The call returns as
        soon as vCloud Director accepts the request; pending work is exposed
        through Vapp.running_tasks.

        Args:
            vapp_template_name - name of the vApp template catalog item
            vdc_name - name of the target VDC
            vapp_name - name of the new vApp
            description - optional vApp description
            disk_locality - optional list of independent disk hrefs the new VMs
                            should be placed close to
            network_config - optional NetworkConfig connecting the vApp to a
                             VDC network

            Returns:
                The new Vapp
        """
        self._logger.info("Instantiating vApp {} from template {} in VDC {}".format(
            vapp_name, vapp_template_name, vdc_name))
        template = self.find_vapp_template_by_name(vapp_template_name)
        vdc = self._session.org.find_vdc_by_name(vdc_name)

        network = None
        if network_config is not None:
            vdc_network = vdc.find_network_by_name(network_config.network_name)
            network = {'name': network_config.vapp_net_name,
                       'parent_href': vdc_network.href,
                       'fence_mode': network_config.fence_mode}

        sourced_items = None
        if disk_locality:
            disk_hrefs = self._locality_disks(vdc, disk_locality)
            if disk_hrefs:
                sourced_items = [(vm['href'], disk_hrefs) for vm in template.vms]

        params = instantiate_vapp_template_params(vapp_name, template.href,
                                                  description=description,
                                                  network=network,
                                                  sourced_items=sourced_items)
        vapp_xml = self._connection.post(vdc.instantiate_href, params,
                                         content_type=MEDIA_TYPE['INSTANTIATE_VAPP_TEMPLATE_PARAMS'])
        self._logger.info("vApp {} created: {}".format(vapp_name, vapp_xml.get('href')))
        return Vapp(self._session, vapp_xml.get('href'), name=vapp_xml.get('name'))

    def _locality_disks(self, vdc, disk_locality):
        known = set(disk.href for disk in vdc.disks)
        hrefs = []
        for href in disk_locality:
            if href in known:
                hrefs.append(href)
            else:
                self._logger.warning("Disk {} not found in VDC {}, ignoring it for disk locality".format(
                    href, vdc.name))
        return hrefs
