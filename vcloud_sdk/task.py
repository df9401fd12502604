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
vCloud Director asynchronous tasks.

Operations that change state answer with a Task document. The SDK hands the
task back to the caller without waiting on it; ``refresh`` reloads it once.
"""
from vcloud_sdk.xml.wrapper import find_child

RUNNING_STATUSES = ('queued', 'preRunning', 'running')


class Task(object):

    def __init__(self, session, task_xml):
        self._session = session
        self._xml = task_xml

    def __repr__(self):
        return '<Task operation={!r} status={!r}>'.format(self.operation_name, self.status)

    @property
    def href(self):
        return self._xml.get('href')

    @property
    def status(self):
        return self._xml.get('status')

    @property
    def operation(self):
        return self._xml.get('operation')

    @property
    def operation_name(self):
        return self._xml.get('operationName')

    @property
    def error_message(self):
        error = find_child(self._xml, 'Error')
        if error is None:
            return None
        return error.get('message')

    def is_running(self):
        return self.status in RUNNING_STATUSES

    def is_success(self):
        return self.status == 'success'

    def is_error(self):
        return self.status in ('error', 'aborted', 'canceled')

    def refresh(self):
        self._xml = self._session.connection.get(self.href)
        return self
