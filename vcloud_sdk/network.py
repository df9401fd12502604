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
Organization VDC networks.
"""
import netaddr

from vcloud_sdk.resource import Resource
from vcloud_sdk.xml.wrapper import child_text, children, descendants, find_descendant


class Network(Resource):
    """
    Network available to a VDC

    The IP configuration is read from the first IpScope of the network:

        <Configuration>
          <IpScopes>
            <IpScope>
                <Gateway>172.16.252.100</Gateway>
                <Netmask>255.255.255.0</Netmask>
                <IpRanges>
                    <IpRange>
                        <StartAddress>172.16.252.1</StartAddress>
                        <EndAddress>172.16.252.99</EndAddress>
                    </IpRange>
                </IpRanges>
            </IpScope>
        </IpScopes>
        <FenceMode>bridged</FenceMode>
    """

    def _ip_scope(self, xml=None):
        if xml is None:
            xml = self.entity_xml
        return find_descendant(xml, 'IpScope')

    @property
    def fence_mode(self):
        return child_text(self.entity_xml, 'FenceMode')

    @property
    def gateway(self):
        return child_text(self._ip_scope(), 'Gateway')

    @property
    def netmask(self):
        return child_text(self._ip_scope(), 'Netmask')

    @property
    def cidr(self):
        scope = self._ip_scope()
        gateway = child_text(scope, 'Gateway')
        netmask = child_text(scope, 'Netmask')
        if gateway is None or netmask is None:
            return None
        return netaddr.IPNetwork('{}/{}'.format(gateway, netmask)).cidr

    @property
    def ip_ranges(self):
        ip_set = netaddr.IPSet()
        for ip_range in descendants(self._ip_scope(), 'IpRange'):
            start = child_text(ip_range, 'StartAddress')
            end = child_text(ip_range, 'EndAddress')
            ip_set.add(netaddr.IPRange(start, end))
        return ip_set

    def contains_address(self, address):
        return netaddr.IPAddress(address) in self.ip_ranges

    @property
    def dns_servers(self):
        scope = self._ip_scope()
        return [child.text.strip() for name in ('Dns1', 'Dns2')
                for child in children(scope, name) if child.text]
