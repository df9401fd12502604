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
Options and fixtures for the tests running against a live vCloud Director.

Connection settings come from the command line options or from the
VCLOUD_URL, VCLOUD_USERNAME, VCLOUD_PWD, VDC_NAME, CATALOG_NAME and
EXISTING_VAPP_TEMPLATE_NAME environment variables. The tests using them are
skipped when they are not set.
"""
import logging
import os

import pytest

pytest_plugins = ['pytester']

OPTIONS = (('--vcd-url', 'VCLOUD_URL', "vCloud Director url"),
           ('--vcd-username', 'VCLOUD_USERNAME', "vCloud Director user, user@org"),
           ('--vcd-password', 'VCLOUD_PWD', "vCloud Director password"),
           ('--vcd-vdc', 'VDC_NAME', "VDC the tests create vApps in"),
           ('--vcd-catalog', 'CATALOG_NAME', "catalog holding the vApp template"),
           ('--vcd-vapp-template', 'EXISTING_VAPP_TEMPLATE_NAME', "existing vApp template name"))


def pytest_addoption(parser):
    for option, envvar, help_text in OPTIONS:
        parser.addoption(option, default=None, help=help_text + ".  Also can set " + envvar)


@pytest.fixture(scope='session')
def vcd_settings(request):
    settings = {}
    for option, envvar, _ in OPTIONS:
        value = request.config.getoption(option) or os.environ.get(envvar)
        if not value:
            pytest.skip("Missing {} option or {} environment variable".format(option, envvar))
        settings[envvar] = value
    return settings


@pytest.fixture(scope='session')
def client(vcd_settings):
    from vcloud_sdk.client import Client
    client = Client(vcd_settings['VCLOUD_URL'], vcd_settings['VCLOUD_USERNAME'], vcd_settings['VCLOUD_PWD'],
                    options={}, logger=logging.getLogger('vcloud_sdk.tests.integration'))
    yield client
    client.logout()


@pytest.fixture
def vdc(client, vcd_settings):
    return client.find_vdc_by_name(vcd_settings['VDC_NAME'])
