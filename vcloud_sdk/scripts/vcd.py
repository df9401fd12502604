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
vcloud-sdk shell/cli
"""
import logging
import sys

import click
from prettytable import PrettyTable

from vcloud_sdk.client import Client
from vcloud_sdk.config import Config
from vcloud_sdk.errors import CloudError
from vcloud_sdk.network_config import NetworkConfig
from vcloud_sdk.xml import FENCE_MODES, MEDIA_TYPE

ITEM_TYPES = {MEDIA_TYPE['VAPP_TEMPLATE']: 'vapp template',
              MEDIA_TYPE['MEDIA']: 'media'}


class CliContext(object):
    """Configuration of the current invocation, the client is logged in on first use"""

    def __init__(self, config):
        self.config = config
        self._client = None

    @property
    def client(self):
        if self._client is None:
            url = self.config.get('vcd', 'url')
            username = self.config.get('vcd', 'username')
            if not url or not username:
                raise CloudError("either --url/--username options or VCLOUD_URL/VCLOUD_USERNAME "
                                 "environment variables need to be specified")
            self._client = Client(url, username, self.config.get('vcd', 'password'),
                                  options=self.config.client_options())
        return self._client

    def close(self):
        if self._client is None:
            return
        try:
            self._client.logout()
        except CloudError as exp:
            logging.getLogger(__name__).warning("Failed to log out from {}: {}".format(self._client.url, exp))
        self._client = None

    def vdc(self, name):
        name = name or self.config.get('vcd', 'vdc')
        if not name:
            raise CloudError("either --vdc option or VDC_NAME environment variable needs to be specified")
        return self.client.find_vdc_by_name(name)

    def catalog(self, name):
        name = name or self.config.get('vcd', 'catalog')
        if not name:
            raise CloudError("either --catalog option or CATALOG_NAME environment variable needs to be specified")
        return self.client.find_catalog_by_name(name)


def setup_logging(config, debug):
    level = logging.DEBUG if debug else getattr(logging, str(config.get('log', 'log_level', 'INFO')).upper(),
                                                logging.INFO)
    log_dir = config.get('log', 'log_dir', 'stdout')
    if log_dir == 'stdout':
        logging.basicConfig(stream=sys.stdout,
                            format='%(asctime)s %(levelname)s %(name)s %(message)s',
                            datefmt='%m/%d/%Y %I:%M:%S %p',
                            level=level)
    else:
        logging.basicConfig(filename=log_dir + 'vcloud_sdk.log',
                            format='%(asctime)s %(levelname)s %(name)s %(message)s',
                            datefmt='%m/%d/%Y %I:%M:%S %p', filemode='a',
                            level=level)


def fail(exp):
    print(exp.message)
    sys.exit(1)


@click.group()
@click.option('--url',
              default=None,
              envvar='VCLOUD_URL',
              help='vCloud Director url.  ' +
                   'Also can set VCLOUD_URL in environment')
@click.option('--username',
              default=None,
              envvar='VCLOUD_USERNAME',
              help='user in user@org form.  ' +
                   'Also can set VCLOUD_USERNAME in environment')
@click.option('--password',
              default=None,
              envvar='VCLOUD_PWD',
              help='password of the user.  ' +
                   'Also can set VCLOUD_PWD in environment')
@click.option('--config-file',
              default=None,
              type=click.Path(exists=True, dir_okay=False),
              help='YAML configuration file')
@click.option('--debug',
              is_flag=True,
              help='log every REST API call')
@click.pass_context
def cli(ctx, url, username, password, config_file, debug):
    config = Config()
    config.load_file(config_file)
    config.load_environment()
    for name, value in (('url', url), ('username', username), ('password', password)):
        if value is not None:
            config.config['vcd'][name] = value
    setup_logging(config, debug)
    ctx.obj = CliContext(config)
    ctx.call_on_close(ctx.obj.close)


####################
# LIST operations
####################

@cli.command(name='vdc-list')
@click.pass_context
def vdc_list(ctx):
    '''list the VDCs of the organization'''
    try:
        vdcs = ctx.obj.client.vdcs
        table = PrettyTable(['vdc name', 'cpu used/limit (MHz)', 'memory used/limit (MB)'])
        for vdc in vdcs:
            resources = vdc.resources
            table.add_row([vdc.name,
                           '{}/{}'.format(resources['cpu']['used'], resources['cpu']['limit']),
                           '{}/{}'.format(resources['memory']['used'], resources['memory']['limit'])])
    except CloudError as inst:
        fail(inst)
    table.align = 'l'
    print(table)


@cli.command(name='catalog-list')
@click.pass_context
def catalog_list(ctx):
    '''list the catalogs of the organization'''
    try:
        names = ctx.obj.client.list_catalogs()
    except CloudError as inst:
        fail(inst)
    table = PrettyTable(['catalog name'])
    for name in names:
        table.add_row([name])
    table.align = 'l'
    print(table)


@cli.command(name='catalog-item-list')
@click.option('--catalog', default=None, help='catalog name, defaults to CATALOG_NAME')
@click.pass_context
def catalog_item_list(ctx, catalog):
    '''list the vApp templates and medias of a catalog'''
    try:
        table = PrettyTable(['item name', 'type'])
        for item in ctx.obj.catalog(catalog).items:
            table.add_row([item.name, ITEM_TYPES.get(item.type, item.type)])
    except CloudError as inst:
        fail(inst)
    table.align = 'l'
    print(table)


@cli.command(name='vapp-list')
@click.option('--vdc', default=None, help='VDC name, defaults to VDC_NAME')
@click.pass_context
def vapp_list(ctx, vdc):
    '''list the vApps of a VDC'''
    try:
        table = PrettyTable(['vapp name', 'status', 'vms'])
        for vapp in ctx.obj.vdc(vdc).vapps:
            table.add_row([vapp.name, vapp.power_state, ', '.join(vapp.list_vms())])
    except CloudError as inst:
        fail(inst)
    table.align = 'l'
    print(table)


@cli.command(name='network-list')
@click.option('--vdc', default=None, help='VDC name, defaults to VDC_NAME')
@click.pass_context
def network_list(ctx, vdc):
    '''list the networks available to a VDC'''
    try:
        table = PrettyTable(['network name', 'fence mode', 'cidr'])
        for network in ctx.obj.vdc(vdc).networks:
            table.add_row([network.name, network.fence_mode, network.cidr])
    except CloudError as inst:
        fail(inst)
    table.align = 'l'
    print(table)


@cli.command(name='disk-list')
@click.option('--vdc', default=None, help='VDC name, defaults to VDC_NAME')
@click.pass_context
def disk_list(ctx, vdc):
    '''list the independent disks of a VDC'''
    try:
        table = PrettyTable(['disk name', 'size (MB)', 'bus', 'attached to'])
        for disk in ctx.obj.vdc(vdc).disks:
            table.add_row([disk.name, disk.size_mb,
                           '{}/{}'.format(disk.bus_type, disk.bus_sub_type),
                           '\n'.join(disk.attached_vms)])
    except CloudError as inst:
        fail(inst)
    table.align = 'l'
    print(table)


####################
# CREATE/DELETE operations
####################

@cli.command(name='vapp-instantiate', short_help='creates a vApp from a catalog template')
@click.argument('name')
@click.option('--template', required=True, help='vApp template name')
@click.option('--catalog', default=None, help='catalog name, defaults to CATALOG_NAME')
@click.option('--vdc', default=None, help='VDC name, defaults to VDC_NAME')
@click.option('--description', default=None, help='human readable description')
@click.option('--network', default=None, help='VDC network the vApp is connected to')
@click.option('--fence-mode', default='bridged', type=click.Choice(FENCE_MODES),
              help='fence mode of the vApp network')
@click.option('--disk', 'disks', multiple=True,
              help='href of an independent disk the VMs are placed close to, can be repeated')
@click.pass_context
def vapp_instantiate(ctx, name, template, catalog, vdc, description, network, fence_mode, disks):
    '''creates a new vApp

    NAME: name of the vApp
    '''
    try:
        vdc_name = ctx.obj.vdc(vdc).name
        network_config = NetworkConfig(network, fence_mode=fence_mode) if network else None
        vapp = ctx.obj.catalog(catalog).instantiate_vapp_template(template, vdc_name, name,
                                                                  description=description,
                                                                  disk_locality=list(disks) or None,
                                                                  network_config=network_config)
    except CloudError as inst:
        fail(inst)
    print(vapp.href)


@cli.command(name='vapp-delete')
@click.argument('name')
@click.option('--vdc', default=None, help='VDC name, defaults to VDC_NAME')
@click.pass_context
def vapp_delete(ctx, name, vdc):
    '''deletes an undeployed vApp

    NAME: name of the vApp
    '''
    try:
        task = ctx.obj.vdc(vdc).find_vapp_by_name(name).delete()
    except CloudError as inst:
        fail(inst)
    print(task.href)


@cli.command(name='disk-create')
@click.argument('name')
@click.option('--size', required=True, type=int, help='disk size in MB')
@click.option('--vdc', default=None, help='VDC name, defaults to VDC_NAME')
@click.option('--bus-type', default='scsi', type=click.Choice(['ide', 'scsi', 'sata']), help='bus type')
@click.option('--bus-sub-type', default='lsilogic', help='bus sub type, e.g. lsilogic')
@click.pass_context
def disk_create(ctx, name, size, vdc, bus_type, bus_sub_type):
    '''creates an independent disk

    NAME: name of the disk
    '''
    try:
        disk = ctx.obj.vdc(vdc).create_disk(name, size, bus_type=bus_type, bus_sub_type=bus_sub_type)
    except CloudError as inst:
        fail(inst)
    print(disk.href)


@cli.command(name='disk-delete')
@click.argument('name')
@click.option('--vdc', default=None, help='VDC name, defaults to VDC_NAME')
@click.option('--all', 'delete_all', is_flag=True, help='delete every disk with that name')
@click.pass_context
def disk_delete(ctx, name, vdc, delete_all):
    '''deletes an independent disk

    NAME: name of the disk
    '''
    try:
        target = ctx.obj.vdc(vdc)
        if delete_all:
            target.delete_all_disks_by_name(name)
        else:
            target.delete_disk_by_name(name)
    except CloudError as inst:
        fail(inst)


if __name__ == '__main__':
    cli()
