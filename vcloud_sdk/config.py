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

"""Global configuration."""

import logging
import os

import yaml

from vcloud_sdk.connection import DEFAULT_TIMEOUT
from vcloud_sdk.xml import API_VERSION

log = logging.getLogger(__name__)

# environment variable -> (group, name)
ENV_OVERRIDES = {
    'VCLOUD_URL': ('vcd', 'url'),
    'VCLOUD_USERNAME': ('vcd', 'username'),
    'VCLOUD_PWD': ('vcd', 'password'),
    'VDC_NAME': ('vcd', 'vdc'),
    'CATALOG_NAME': ('vcd', 'catalog'),
    'EXISTING_VAPP_TEMPLATE_NAME': ('vcd', 'vapp_template'),
}


class Config(object):
    """Global configuration."""

    def __init__(self):
        # Default config values
        self.config = {
            'vcd': {
                'url': None,
                'username': None,
                'password': None,
                'vdc': None,
                'catalog': None,
                'vapp_template': None,
            },
            'connection': {
                'verify': False,
                'timeout': DEFAULT_TIMEOUT,
                'api_version': API_VERSION,
            },
            'log': {
                'log_dir': 'stdout',
                'log_level': 'INFO',
            },
        }

    def load_file(self, config_file_path):
        if config_file_path:
            with open(config_file_path) as config_file:
                content = yaml.safe_load(config_file) or {}
            for section, values in content.items():
                if not isinstance(values, dict):
                    log.warning("Ignoring config section %s, a mapping is expected", section)
                    continue
                if section not in self.config:
                    self.config[section] = {}
                self.config[section].update(values)

    def load_environment(self, environ=None):
        environ = os.environ if environ is None else environ
        for variable, (group, name) in ENV_OVERRIDES.items():
            if environ.get(variable):
                self.config[group][name] = environ[variable]

    def get(self, group, name=None, default=None):
        if group in self.config:
            if name is None:
                return self.config[group]
            value = self.config[group].get(name)
            return default if value is None else value
        return default

    def client_options(self):
        connection = self.config['connection']
        return {'verify': bool(connection.get('verify')),
                'timeout': int(connection.get('timeout') or DEFAULT_TIMEOUT),
                'api_version': str(connection.get('api_version') or API_VERSION)}

    def __str__(self):
        # never print the password
        shown = dict((group, dict(values)) for group, values in self.config.items())
        if shown['vcd'].get('password'):
            shown['vcd']['password'] = '********'
        return str(shown)
