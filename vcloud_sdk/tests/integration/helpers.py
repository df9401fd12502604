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
Task waiting and cleanup for the tests running against a live vCloud Director.
"""
import logging
import time

from vcloud_sdk.errors import CloudError, ObjectNotFoundError

log = logging.getLogger('vcloud_sdk.tests.integration')

TASK_TIMEOUT = 600


def wait_for_task(task, timeout=TASK_TIMEOUT):
    """Refresh task until it leaves the running states"""
    if task is None:
        return
    deadline = time.time() + timeout
    while task.is_running():
        if time.time() > deadline:
            raise CloudError("Task {} did not complete in {} seconds".format(task.href, timeout))
        time.sleep(5)
        task.refresh()
    if task.is_error():
        raise CloudError("Task {} failed: {}".format(task.href, task.error_message))


def wait_for_running_tasks(resource, timeout=TASK_TIMEOUT):
    for task in resource.running_tasks:
        wait_for_task(task, timeout)


def safe_remove_vapp(vdc, vapp_name):
    """Power off, undeploy and delete vapp_name if it exists, errors are only logged"""
    try:
        vapp = vdc.find_vapp_by_name(vapp_name)
    except ObjectNotFoundError:
        return
    try:
        wait_for_running_tasks(vapp)
        wait_for_task(vapp.power_off())
        if vapp.links(rel='undeploy'):
            wait_for_task(vapp.undeploy())
        wait_for_task(vapp.delete())
    except CloudError as exp:
        log.error("Failed to remove vApp {}: {}".format(vapp_name, exp))
