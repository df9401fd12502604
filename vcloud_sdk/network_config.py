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

from vcloud_sdk.errors import InvalidParameters
from vcloud_sdk.xml import FENCE_MODES


class NetworkConfig(object):
    """Connection of a new vApp to an existing VDC network

    Arguments:
        network_name (str): name of the VDC network
        vapp_net_name (str): name of the network inside the vApp, defaults
            to ``network_name``
        fence_mode (str): ``bridged``, ``isolated`` or ``natRouted``
    """

    def __init__(self, network_name, vapp_net_name=None, fence_mode='bridged'):
        if not network_name:
            raise InvalidParameters("Network name can not be empty")
        if fence_mode not in FENCE_MODES:
            raise InvalidParameters("Invalid fence mode '{}'".format(fence_mode))
        self.network_name = network_name
        self.vapp_net_name = vapp_net_name or network_name
        self.fence_mode = fence_mode

    def __repr__(self):
        return '<NetworkConfig network={!r} vapp_net={!r} fence_mode={!r}>'.format(
            self.network_name, self.vapp_net_name, self.fence_mode)
