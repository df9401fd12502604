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

import logging
import unittest

import mock

from vcloud_sdk.connection import Connection
from vcloud_sdk.errors import ObjectNotFoundError
from vcloud_sdk.resource import Session
from vcloud_sdk.tests import xml_responses as xml_resp
from vcloud_sdk.xml.wrapper import parse


class VcdTestCase(unittest.TestCase):
    """Answers GET calls from the canned responses, POST/DELETE are plain mocks"""

    get_responses = xml_resp.GET_RESPONSES

    def setUp(self):
        self.connection = Connection(xml_resp.BASE_URL)
        self.session = Session(self.connection, parse(xml_resp.session_xml_response),
                               logger=logging.getLogger('vcloud_sdk.tests'))
        self.get = self._patch('get', side_effect=self._get)
        self.post = self._patch('post')
        self.delete = self._patch('delete')

    def _patch(self, method, **kwargs):
        patcher = mock.patch.object(Connection, method, **kwargs)
        self.addCleanup(patcher.stop)
        return patcher.start()

    def _get(self, href):
        if href not in self.get_responses:
            raise ObjectNotFoundError("REST API call GET {} failed. Return status code 404".format(href))
        return parse(self.get_responses[href])

    @property
    def org(self):
        return self.session.org

    @property
    def vdc(self):
        return self.org.find_vdc_by_name('vdc1')

    @property
    def catalog(self):
        return self.org.find_catalog_by_name('templates')
