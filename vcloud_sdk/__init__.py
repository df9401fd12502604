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
vCloud Director client SDK.
"""
from vcloud_sdk.client import Client
from vcloud_sdk.errors import (
    ApiRequestError,
    ApiTimeoutError,
    CloudError,
    InvalidParameters,
    ObjectExistsError,
    ObjectNotFoundError,
    UnauthorizedError
)
from vcloud_sdk.network_config import NetworkConfig

__version__ = '1.0.0'
