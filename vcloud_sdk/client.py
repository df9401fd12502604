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
Entry point of the SDK.

    client = Client('https://vcd.example.com', 'admin@org1', 'secret')
    catalog = client.find_catalog_by_name('templates')
    vapp = catalog.instantiate_vapp_template('ubuntu', 'vdc1', 'my-vapp')
"""
import logging

from vcloud_sdk.connection import Connection
from vcloud_sdk.resource import Session


class Client(object):
    """Logged-in vCloud Director client

    Arguments:
        url (str): base url of vCloud Director
        username (str): user in ``user@org`` form
        password (str): password of the user
        options (dict): connection options, see :class:`Connection`
        logger (logging.Logger): logger used by the client and every object
            it returns
    """

    def __init__(self, url, username, password, options=None, logger=None):
        self.logger = logger or logging.getLogger('vcloud_sdk')
        self.url = url
        self.username = username
        self.connection = Connection(url, options=options,
                                     logger=self.logger.getChild('connection'))
        session_xml = self.connection.login(username, password)
        self.session = Session(self.connection, session_xml, logger=self.logger)

    def __repr__(self):
        return '<Client url={!r} user={!r}>'.format(self.url, self.username)

    @property
    def org(self):
        return self.session.org

    @property
    def vdcs(self):
        return self.org.vdcs

    def list_vdcs(self):
        return self.org.list_vdcs()

    def find_vdc_by_name(self, name):
        return self.org.find_vdc_by_name(name)

    def vdc_exists(self, name):
        return self.org.vdc_exists(name)

    @property
    def catalogs(self):
        return self.org.catalogs

    def list_catalogs(self):
        return self.org.list_catalogs()

    def find_catalog_by_name(self, name):
        return self.org.find_catalog_by_name(name)

    def catalog_exists(self, name):
        return self.org.catalog_exists(name)

    def create_catalog(self, name, description=''):
        return self.org.create_catalog(name, description)

    def delete_catalog_by_name(self, name):
        self.org.delete_catalog_by_name(name)

    def logout(self):
        self.logger.debug("Logging out from {}".format(self.url))
        self.connection.logout()
