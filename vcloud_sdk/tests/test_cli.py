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

import unittest

from click.testing import CliRunner
import mock

from vcloud_sdk.errors import ObjectNotFoundError, UnauthorizedError, catalog_item_not_found
from vcloud_sdk.scripts import vcd
from vcloud_sdk.xml import MEDIA_TYPE

CONNECTION_ARGS = ['--url', 'https://vcd.test', '--username', 'admin@Org1', '--password', 'secret']


class TestCli(unittest.TestCase):

    def setUp(self):
        self.runner = CliRunner()
        patcher = mock.patch.object(vcd, 'Client')
        self.addCleanup(patcher.stop)
        self.client_class = patcher.start()
        self.client = self.client_class.return_value
        patcher = mock.patch.object(vcd, 'setup_logging')
        self.addCleanup(patcher.stop)
        patcher.start()

    def invoke(self, *args, **kwargs):
        return self.runner.invoke(vcd.cli, CONNECTION_ARGS + list(args), **kwargs)

    def test_missing_url(self):
        result = self.runner.invoke(vcd.cli, ['catalog-list'], env={'VCLOUD_URL': '', 'VCLOUD_USERNAME': ''})
        self.assertEqual(result.exit_code, 1)
        self.assertIn('VCLOUD_URL', result.output)
        self.client_class.assert_not_called()
        self.client.logout.assert_not_called()

    def test_client_options(self):
        self.client.list_catalogs.return_value = []
        result = self.invoke('catalog-list')
        self.assertEqual(result.exit_code, 0)
        self.client_class.assert_called_once_with('https://vcd.test', 'admin@Org1', 'secret',
                                                  options={'verify': False, 'timeout': 60,
                                                           'api_version': '5.1'})

    def test_logout_after_command(self):
        self.client.list_catalogs.return_value = []
        result = self.invoke('catalog-list')
        self.assertEqual(result.exit_code, 0)
        self.client.logout.assert_called_once_with()

    def test_logout_after_failed_command(self):
        self.client.find_vdc_by_name.side_effect = ObjectNotFoundError("VDC 'vdc9' is not found")
        result = self.invoke('vapp-list', '--vdc', 'vdc9')
        self.assertEqual(result.exit_code, 1)
        self.client.logout.assert_called_once_with()

    def test_logout_failure_does_not_change_result(self):
        self.client.list_catalogs.return_value = ['templates']
        self.client.logout.side_effect = UnauthorizedError('session expired')
        result = self.invoke('catalog-list')
        self.assertEqual(result.exit_code, 0)
        self.assertIn('templates', result.output)

    def test_catalog_list(self):
        self.client.list_catalogs.return_value = ['templates', 'isos']
        result = self.invoke('catalog-list')
        self.assertEqual(result.exit_code, 0)
        self.assertIn('templates', result.output)
        self.assertIn('isos', result.output)

    def test_catalog_item_list(self):
        items = [mock.Mock(type=MEDIA_TYPE['VAPP_TEMPLATE']), mock.Mock(type=MEDIA_TYPE['MEDIA'])]
        items[0].name = 'ubuntu'
        items[1].name = 'installer'
        self.client.find_catalog_by_name.return_value.items = items
        result = self.invoke('catalog-item-list', '--catalog', 'templates')

        self.assertEqual(result.exit_code, 0)
        self.client.find_catalog_by_name.assert_called_once_with('templates')
        self.assertIn('vapp template', result.output)
        self.assertIn('media', result.output)

    def test_catalog_from_environment(self):
        self.client.find_catalog_by_name.return_value.items = []
        result = self.invoke('catalog-item-list', env={'CATALOG_NAME': 'from-env'})
        self.assertEqual(result.exit_code, 0)
        self.client.find_catalog_by_name.assert_called_once_with('from-env')

    def test_vdc_required(self):
        result = self.invoke('vapp-list', env={'VDC_NAME': ''})
        self.assertEqual(result.exit_code, 1)
        self.assertIn('VDC_NAME', result.output)

    def test_vdc_list(self):
        vdc = mock.Mock(resources={'cpu': {'used': 2000, 'limit': 10000},
                                   'memory': {'used': 512, 'limit': 0}})
        vdc.name = 'vdc1'
        self.client.vdcs = [vdc]
        result = self.invoke('vdc-list')
        self.assertEqual(result.exit_code, 0)
        self.assertIn('2000/10000', result.output)

    def test_disk_list(self):
        disk = mock.Mock(size_mb=1024, bus_type='scsi', bus_sub_type='lsilogic',
                         attached_vms=['https://vcd.test/api/vApp/vm-1'])
        disk.name = 'data'
        self.client.find_vdc_by_name.return_value.disks = [disk]
        result = self.invoke('disk-list', '--vdc', 'vdc1')
        self.assertEqual(result.exit_code, 0)
        self.assertIn('scsi/lsilogic', result.output)

    def test_vapp_instantiate(self):
        vdc = self.client.find_vdc_by_name.return_value
        vdc.name = 'vdc1'
        catalog = self.client.find_catalog_by_name.return_value
        catalog.instantiate_vapp_template.return_value.href = 'https://vcd.test/api/vApp/vapp-2'
        result = self.invoke('vapp-instantiate', 'new-vapp', '--template', 'ubuntu', '--catalog', 'templates',
                             '--vdc', 'vdc1', '--network', 'mgmt', '--fence-mode', 'isolated',
                             '--disk', 'https://vcd.test/api/disk/disk-1')

        self.assertEqual(result.exit_code, 0)
        self.assertIn('https://vcd.test/api/vApp/vapp-2', result.output)
        args, kwargs = catalog.instantiate_vapp_template.call_args
        self.assertEqual(args, ('ubuntu', 'vdc1', 'new-vapp'))
        self.assertEqual(kwargs['disk_locality'], ['https://vcd.test/api/disk/disk-1'])
        self.assertEqual(kwargs['network_config'].network_name, 'mgmt')
        self.assertEqual(kwargs['network_config'].fence_mode, 'isolated')

    def test_vapp_instantiate_missing_template(self):
        self.client.find_vdc_by_name.return_value.name = 'vdc1'
        catalog = self.client.find_catalog_by_name.return_value
        catalog.instantiate_vapp_template.side_effect = catalog_item_not_found('centos')
        result = self.invoke('vapp-instantiate', 'new-vapp', '--template', 'centos', '--catalog', 'templates',
                             '--vdc', 'vdc1')

        self.assertEqual(result.exit_code, 1)
        self.assertIn("Catalog Item 'centos' is not found", result.output)

    def test_disk_create(self):
        vdc = self.client.find_vdc_by_name.return_value
        vdc.create_disk.return_value.href = 'https://vcd.test/api/disk/disk-4'
        result = self.invoke('disk-create', 'new-disk', '--size', '2048', '--vdc', 'vdc1')
        self.assertEqual(result.exit_code, 0)
        vdc.create_disk.assert_called_once_with('new-disk', 2048, bus_type='scsi', bus_sub_type='lsilogic')

    def test_disk_delete(self):
        vdc = self.client.find_vdc_by_name.return_value
        result = self.invoke('disk-delete', 'scratch', '--vdc', 'vdc1', '--all')
        self.assertEqual(result.exit_code, 0)
        vdc.delete_all_disks_by_name.assert_called_once_with('scratch')
        vdc.delete_disk_by_name.assert_not_called()

    def test_vapp_delete_not_found(self):
        vdc = self.client.find_vdc_by_name.return_value
        vdc.find_vapp_by_name.side_effect = ObjectNotFoundError("vApp 'db' is not found")
        result = self.invoke('vapp-delete', 'db', '--vdc', 'vdc1')
        self.assertEqual(result.exit_code, 1)
        self.assertIn("vApp 'db' is not found", result.output)


if __name__ == '__main__':
    unittest.main()
