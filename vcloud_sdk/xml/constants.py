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
Media types, link relations and namespaces used by the vCloud Director API.
"""

VCLOUD_NS = 'http://www.vmware.com/vcloud/v1.5'
OVF_NS = 'http://schemas.dmtf.org/ovf/envelope/1'
XSI_NS = 'http://www.w3.org/2001/XMLSchema-instance'

NSMAP = {None: VCLOUD_NS,
         'ovf': OVF_NS,
         'xsi': XSI_NS}

API_VERSION = '5.1'

MEDIA_TYPE = {
    'ADMIN_CATALOG': 'application/vnd.vmware.admin.catalog+xml',
    'CATALOG': 'application/vnd.vmware.vcloud.catalog+xml',
    'CATALOG_ITEM': 'application/vnd.vmware.vcloud.catalogItem+xml',
    'DISK': 'application/vnd.vmware.vcloud.disk+xml',
    'DISK_ATTACH_DETACH_PARAMS': 'application/vnd.vmware.vcloud.diskAttachOrDetachParams+xml',
    'DISK_CREATE_PARAMS': 'application/vnd.vmware.vcloud.diskCreateParams+xml',
    'ERROR': 'application/vnd.vmware.vcloud.error+xml',
    'INSTANTIATE_VAPP_TEMPLATE_PARAMS': 'application/vnd.vmware.vcloud.instantiateVAppTemplateParams+xml',
    'MEDIA': 'application/vnd.vmware.vcloud.media+xml',
    'NETWORK': 'application/vnd.vmware.vcloud.network+xml',
    'NETWORK_CONFIG_SECTION': 'application/vnd.vmware.vcloud.networkConfigSection+xml',
    'NETWORK_CONNECTION_SECTION': 'application/vnd.vmware.vcloud.networkConnectionSection+xml',
    'ORG': 'application/vnd.vmware.vcloud.org+xml',
    'ORG_LIST': 'application/vnd.vmware.vcloud.orgList+xml',
    'ORG_VDC_NETWORK': 'application/vnd.vmware.vcloud.orgVdcNetwork+xml',
    'SESSION': 'application/vnd.vmware.vcloud.session+xml',
    'STORAGE_PROFILE': 'application/vnd.vmware.vcloud.vdcStorageProfile+xml',
    'TASK': 'application/vnd.vmware.vcloud.task+xml',
    'UNDEPLOY_VAPP_PARAMS': 'application/vnd.vmware.vcloud.undeployVAppParams+xml',
    'VAPP': 'application/vnd.vmware.vcloud.vApp+xml',
    'VAPP_TEMPLATE': 'application/vnd.vmware.vcloud.vAppTemplate+xml',
    'VDC': 'application/vnd.vmware.vcloud.vdc+xml',
    'VM': 'application/vnd.vmware.vcloud.vm+xml',
    'VMS': 'application/vnd.vmware.vcloud.vms+xml',
}

RELATION_TYPE = {
    'ADD': 'add',
    'ALTERNATE': 'alternate',
    'DISK_ATTACH': 'disk:attach',
    'DISK_DETACH': 'disk:detach',
    'DOWN': 'down',
    'EDIT': 'edit',
    'POWER_OFF': 'power:powerOff',
    'POWER_ON': 'power:powerOn',
    'REMOVE': 'remove',
    'TASK_CANCEL': 'task:cancel',
    'UNDEPLOY': 'undeploy',
    'UP': 'up',
}

# busType codes accepted by DiskCreateParams
BUS_TYPE = {'ide': '5',
            'scsi': '6',
            'sata': '20'}

BUS_SUB_TYPE = {'ide': ('ide',),
                'scsi': ('buslogic', 'lsilogic', 'lsilogicsas', 'VirtualSCSI'),
                'sata': ('vmware.sata.ahci',)}

FENCE_MODES = ('bridged', 'isolated', 'natRouted')

# vApp / VM status codes as reported by vCloud Director
RESOURCE_STATUS = {-1: 'FAILED_CREATION',
                   0: 'UNRESOLVED',
                   1: 'RESOLVED',
                   2: 'DEPLOYED',
                   3: 'SUSPENDED',
                   4: 'POWERED_ON',
                   5: 'WAITING_FOR_INPUT',
                   6: 'UNKNOWN',
                   7: 'UNRECOGNIZED',
                   8: 'POWERED_OFF',
                   9: 'INCONSISTENT_STATE',
                   10: 'MIXED'}
