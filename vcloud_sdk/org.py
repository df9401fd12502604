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
Organization level lookups: virtual data centers and catalogs.
"""
from vcloud_sdk.catalog import Catalog
from vcloud_sdk.errors import ObjectExistsError, ObjectNotFoundError
from vcloud_sdk.resource import Resource
from vcloud_sdk.vdc import Vdc
from vcloud_sdk.xml import MEDIA_TYPE, RELATION_TYPE
from vcloud_sdk.xml.builders import admin_catalog
from vcloud_sdk.xml.wrapper import get_link, links


class Org(Resource):

    def _references(self, media_type):
        return links(self.entity_xml, rel=RELATION_TYPE['DOWN'], type_=media_type)

    @property
    def vdcs(self):
        return [Vdc(self._session, link.get('href'), name=link.get('name'))
                for link in self._references(MEDIA_TYPE['VDC'])]

    def list_vdcs(self):
        return [link.get('name') for link in self._references(MEDIA_TYPE['VDC'])]

    def find_vdc_by_name(self, name):
        link = get_link(self.entity_xml, rel=RELATION_TYPE['DOWN'], type_=MEDIA_TYPE['VDC'], name=name)
        if link is None:
            raise ObjectNotFoundError("VDC '{}' is not found".format(name))
        return Vdc(self._session, link.get('href'), name=name)

    def vdc_exists(self, name):
        return name in self.list_vdcs()

    @property
    def catalogs(self):
        return [Catalog(self._session, link.get('href'), name=link.get('name'))
                for link in self._references(MEDIA_TYPE['CATALOG'])]

    def list_catalogs(self):
        return [link.get('name') for link in self._references(MEDIA_TYPE['CATALOG'])]

    def find_catalog_by_name(self, name):
        link = get_link(self.entity_xml, rel=RELATION_TYPE['DOWN'], type_=MEDIA_TYPE['CATALOG'], name=name)
        if link is None:
            raise ObjectNotFoundError("Catalog '{}' is not found".format(name))
        return Catalog(self._session, link.get('href'), name=name)

    def catalog_exists(self, name):
        return name in self.list_catalogs()

    def create_catalog(self, name, description=''):
        """
        Create a catalog in the organization

        Args:
            name - catalog name, must not be in use
            description - optional description

            Returns:
                The new Catalog
        """
        org_xml = self.entity_xml
        existing = get_link(org_xml, rel=RELATION_TYPE['DOWN'], type_=MEDIA_TYPE['CATALOG'], name=name)
        if existing is not None:
            raise ObjectExistsError("Catalog '{}' already exists".format(name))

        add_href = self._link_href(RELATION_TYPE['ADD'], MEDIA_TYPE['ADMIN_CATALOG'], xml=org_xml)
        self._logger.info("Creating catalog {} in organization {}".format(name, self.name))
        catalog = self._connection.post(add_href, admin_catalog(name, description),
                                        content_type=MEDIA_TYPE['ADMIN_CATALOG'])
        # the admin answer points to the admin view, the user view is the alternate link
        href = catalog.get('href')
        alternate = get_link(catalog, rel=RELATION_TYPE['ALTERNATE'], type_=MEDIA_TYPE['CATALOG'])
        if alternate is not None:
            href = alternate.get('href')
        return Catalog(self._session, href, name=name)

    def delete_catalog_by_name(self, name):
        catalog = self.find_catalog_by_name(name)
        self._logger.info("Deleting catalog {}".format(name))
        catalog.delete_all_items()
        admin_href = catalog.href.replace('/api/catalog/', '/api/admin/catalog/')
        self._connection.delete(admin_href)
