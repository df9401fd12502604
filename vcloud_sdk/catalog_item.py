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
Catalog items and the vApp templates they reference.
"""
from vcloud_sdk.resource import Resource
from vcloud_sdk.xml.wrapper import descendants, find_child


class CatalogItem(Resource):
    """Entry of a catalog pointing at a vApp template or a media"""

    @property
    def entity(self):
        return find_child(self.entity_xml, 'Entity')

    @property
    def type(self):
        return self.entity.get('type')

    @property
    def entity_href(self):
        return self.entity.get('href')

    def delete(self):
        self._logger.info("Deleting catalog item {}".format(self.name))
        self._connection.delete(self.href)


class VappTemplate(Resource):

    def __init__(self, session, href, name=None, catalog_item=None):
        super(VappTemplate, self).__init__(session, href, name=name)
        self.catalog_item = catalog_item

    @property
    def vms(self):
        """Template VMs as a list of dicts with 'name' and 'href'"""
        return [{'name': vm.get('name'), 'href': vm.get('href')}
                for vm in descendants(self.entity_xml, 'Vm')]

    def list_vms(self):
        return [vm['name'] for vm in self.vms]
