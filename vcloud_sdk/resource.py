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
Base classes shared by every vCloud Director object.
"""
import logging

from vcloud_sdk.errors import CloudError, ObjectNotFoundError
from vcloud_sdk.task import Task
from vcloud_sdk.xml import MEDIA_TYPE, RELATION_TYPE
from vcloud_sdk.xml.wrapper import children, find_child, get_link, links


class Session(object):
    """Logged-in context: the connection plus the organization it belongs to

    Arguments:
        connection (Connection): authenticated connection
        session_xml: Session element returned by the login call
        logger (logging.Logger): logger handed to every object
    """

    def __init__(self, connection, session_xml, logger=None):
        self.connection = connection
        self.logger = logger or logging.getLogger('vcloud_sdk')
        self.xml = session_xml
        self.org_name = session_xml.get('org')
        self.user = session_xml.get('user')
        self._org = None

    @property
    def org(self):
        if self._org is None:
            self._org = self._find_org()
        return self._org

    def _find_org(self):
        # imported here, org imports vdc/catalog which need this module
        from vcloud_sdk.org import Org

        link = get_link(self.xml, type_=MEDIA_TYPE['ORG'], name=self.org_name)
        if link is not None:
            return Org(self, link.get('href'), name=self.org_name)

        org_list_link = get_link(self.xml, type_=MEDIA_TYPE['ORG_LIST'])
        if org_list_link is None:
            raise CloudError("Session for {} does not reference an organization list".format(self.user))
        org_list = self.connection.get(org_list_link.get('href'))
        for org in children(org_list, 'Org'):
            if org.get('name') == self.org_name:
                self.logger.debug("Setting organization {} href {}".format(self.org_name, org.get('href')))
                return Org(self, org.get('href'), name=self.org_name)
        raise ObjectNotFoundError("Organization '{}' is not found".format(self.org_name))


class Resource(object):
    """Handle on a vCloud Director entity identified by its href

    The entity document is fetched again on each access, so attributes always
    reflect the state on the server.
    """

    def __init__(self, session, href, name=None):
        self._session = session
        self._href = href
        self._name = name

    def __repr__(self):
        return '<{} name={!r} href={!r}>'.format(self.__class__.__name__, self._name, self._href)

    @property
    def href(self):
        return self._href

    @property
    def name(self):
        if self._name is None:
            self._name = self.entity_xml.get('name')
        return self._name

    @property
    def id(self):
        return self.entity_xml.get('id')

    @property
    def entity_xml(self):
        return self._connection.get(self._href)

    def links(self, rel=None, type_=None, name=None):
        return links(self.entity_xml, rel=rel, type_=type_, name=name)

    @property
    def tasks(self):
        tasks = find_child(self.entity_xml, 'Tasks')
        return [Task(self._session, task) for task in children(tasks, 'Task')]

    @property
    def running_tasks(self):
        return [task for task in self.tasks if task.is_running()]

    @property
    def _connection(self):
        return self._session.connection

    @property
    def _logger(self):
        return self._session.logger

    def _link_href(self, rel, type_=None, xml=None):
        if xml is None:
            xml = self.entity_xml
        link = get_link(xml, rel=rel, type_=type_)
        if link is None:
            raise CloudError("{} '{}' does not offer a '{}' link".format(
                self.__class__.__name__, self.name, rel))
        return link.get('href')

    def _task(self, task_xml):
        """Task answered by an action, None when the answer has no body"""
        if task_xml is None:
            return None
        return Task(self._session, task_xml)

    def _remove_link_href(self):
        return self._link_href(RELATION_TYPE['REMOVE'])
