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
Request bodies sent to vCloud Director.
"""
from lxml import etree

from vcloud_sdk.xml.constants import NSMAP, OVF_NS, VCLOUD_NS
from vcloud_sdk.xml.wrapper import tostring


def _vcloud(tag):
    return '{{{}}}{}'.format(VCLOUD_NS, tag)


def instantiate_vapp_template_params(name, source_href, description=None,
                                     network=None, sourced_items=None):
    """
    Build InstantiateVAppTemplateParams

    The vApp is created neither deployed nor powered on.

    Args:
        name - name of the new vApp
        source_href - href of the vApp template entity
        description - optional vApp description
        network - optional dict with keys 'name' (vApp network name),
                  'parent_href' (VDC network href) and 'fence_mode'
        sourced_items - optional list of (vm_href, [disk_href, ...]) tuples
                        requesting disk locality for each template VM

        Returns:
            The serialized document as bytes
    """
    root = etree.Element(_vcloud('InstantiateVAppTemplateParams'), nsmap=NSMAP)
    root.set('name', name)
    root.set('deploy', 'false')
    root.set('powerOn', 'false')

    if description is not None:
        etree.SubElement(root, _vcloud('Description')).text = description

    if network is not None:
        params = etree.SubElement(root, _vcloud('InstantiationParams'))
        section = etree.SubElement(params, _vcloud('NetworkConfigSection'))
        info = etree.SubElement(section, '{{{}}}Info'.format(OVF_NS))
        info.text = 'Configuration parameters for logical networks'
        config = etree.SubElement(section, _vcloud('NetworkConfig'))
        config.set('networkName', network['name'])
        configuration = etree.SubElement(config, _vcloud('Configuration'))
        parent = etree.SubElement(configuration, _vcloud('ParentNetwork'))
        parent.set('href', network['parent_href'])
        etree.SubElement(configuration, _vcloud('FenceMode')).text = network['fence_mode']

    source = etree.SubElement(root, _vcloud('Source'))
    source.set('href', source_href)

    for vm_href, disk_hrefs in sourced_items or []:
        item = etree.SubElement(root, _vcloud('SourcedItem'))
        etree.SubElement(item, _vcloud('Source')).set('href', vm_href)
        locality = etree.SubElement(item, _vcloud('LocalityParams'))
        for disk_href in disk_hrefs:
            etree.SubElement(locality, _vcloud('ResourceEntity')).set('href', disk_href)

    etree.SubElement(root, _vcloud('AllEULAsAccepted')).text = 'true'
    return tostring(root)


def _params(tag, **attributes):
    root = etree.Element(_vcloud(tag), nsmap={None: VCLOUD_NS})
    for name, value in attributes.items():
        root.set(name, value)
    return root


def disk_create_params(name, size_bytes, bus_type, bus_sub_type, vm_href=None):
    """
    Build DiskCreateParams

    Args:
        name - disk name
        size_bytes - disk size in bytes
        bus_type - busType code, see BUS_TYPE
        bus_sub_type - controller name
        vm_href - optional VM the disk is placed close to

        Returns:
            The serialized document as bytes
    """
    root = _params('DiskCreateParams')
    disk = etree.SubElement(root, _vcloud('Disk'))
    disk.set('name', name)
    disk.set('size', str(size_bytes))
    disk.set('busType', bus_type)
    disk.set('busSubType', bus_sub_type)
    if vm_href is not None:
        etree.SubElement(root, _vcloud('Locality')).set('href', vm_href)
    return tostring(root)


def disk_attach_or_detach_params(disk_href):
    root = _params('DiskAttachOrDetachParams')
    etree.SubElement(root, _vcloud('Disk')).set('href', disk_href)
    return tostring(root)


def admin_catalog(name, description=''):
    root = _params('AdminCatalog', name=name)
    etree.SubElement(root, _vcloud('Description')).text = description or ''
    return tostring(root)


def undeploy_vapp_params(power_action='powerOff'):
    root = _params('UndeployVAppParams')
    etree.SubElement(root, _vcloud('UndeployPowerAction')).text = power_action
    return tostring(root)
