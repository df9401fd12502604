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
HTTP transport to the vCloud Director REST API.

The connection logs in once and reuses the ``x-vcloud-authorization`` token
for every call. Failures are translated into :mod:`vcloud_sdk.errors`.
"""
import logging
from http import HTTPStatus

import requests
from requests.packages.urllib3.exceptions import InsecureRequestWarning

from vcloud_sdk.errors import (
    ApiRequestError,
    ApiTimeoutError,
    ObjectNotFoundError,
    UnauthorizedError
)
from vcloud_sdk.xml import API_VERSION
from vcloud_sdk.xml.wrapper import error_message, parse

DEFAULT_TIMEOUT = 60
AUTH_HEADER = 'x-vcloud-authorization'


class Connection(object):
    """Authenticated requests session bound to one vCloud Director endpoint

    Arguments:
        url (str): base url of vCloud Director, e.g. ``https://vcd.example.com``
        options (dict): optional ``verify`` (bool), ``timeout`` (seconds) and
            ``api_version`` (str)
        logger (logging.Logger): optional logger, ``vcloud_sdk.connection``
            is used by default
    """

    def __init__(self, url, options=None, logger=None):
        if not url:
            raise ValueError('url param can not be empty')
        options = options or {}
        self.logger = logger or logging.getLogger('vcloud_sdk.connection')
        self.url = url.rstrip('/')
        self.verify = options.get('verify', False)
        self.timeout = options.get('timeout', DEFAULT_TIMEOUT)
        self.api_version = options.get('api_version', API_VERSION)
        self._token = None
        self._session = requests.Session()
        if not self.verify:
            requests.packages.urllib3.disable_warnings(InsecureRequestWarning)

    @property
    def logged_in(self):
        return self._token is not None

    def login(self, username, password):
        """Open a session

        Args:
            username - vCloud Director user, in ``user@org`` form
            password - password for the user

            Returns:
                The Session element returned by vCloud Director
        """
        self.logger.debug("Logging in to {} as {}".format(self.url, username))
        response = self._send('POST', '{}/api/sessions'.format(self.url),
                              auth=(username, password))
        token = response.headers.get(AUTH_HEADER)
        if not token:
            raise UnauthorizedError("Can't connect to a vCloud director as: {}".format(username))
        self._token = token
        self.logger.info("Successfully logged to a vcloud director {} as user: {}".format(self.url, username))
        return parse(response.content)

    def logout(self):
        if self._token is None:
            return
        self._send('DELETE', '{}/api/session'.format(self.url))
        self._token = None

    def get(self, href):
        return parse(self._send('GET', href).content)

    def post(self, href, data=None, content_type=None):
        return parse(self._send('POST', href, data=data, content_type=content_type).content)

    def put(self, href, data=None, content_type=None):
        return parse(self._send('PUT', href, data=data, content_type=content_type).content)

    def delete(self, href):
        return parse(self._send('DELETE', href).content)

    def _absolute(self, href):
        if href.startswith('/'):
            return self.url + href
        return href

    def _headers(self, content_type=None):
        headers = {'Accept': 'application/*+xml;version={}'.format(self.api_version)}
        if self._token is not None:
            headers[AUTH_HEADER] = self._token
        if content_type is not None:
            headers['Content-Type'] = content_type
        return headers

    def _send(self, method, href, data=None, content_type=None, auth=None):
        url = self._absolute(href)
        self.logger.debug("REST API call {} {}".format(method, url))
        try:
            response = self._session.request(method, url,
                                             data=data,
                                             headers=self._headers(content_type),
                                             auth=auth,
                                             verify=self.verify,
                                             timeout=self.timeout)
        except requests.exceptions.Timeout as exp:
            raise ApiTimeoutError("REST API call {} {} timed out: {}".format(method, url, exp))
        except requests.exceptions.RequestException as exp:
            raise ApiRequestError("REST API call {} {} failed: {}".format(method, url, exp),
                                  http_code=HTTPStatus.SERVICE_UNAVAILABLE)

        self.logger.debug("REST API call {} {} returned status code {}".format(method, url,
                                                                             response.status_code))
        if response.status_code >= 400:
            self._raise_for_status(method, url, response)
        return response

    def _raise_for_status(self, method, url, response):
        try:
            message = error_message(parse(response.content))
        except ApiRequestError:
            message = None
        if not message:
            message = "REST API call {} {} failed. Return status code {}".format(
                method, url, response.status_code)
        self.logger.debug("Response content: {}".format(response.content))

        code = response.status_code
        if code in (HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN):
            raise UnauthorizedError(message, http_code=HTTPStatus(code))
        if code == HTTPStatus.NOT_FOUND:
            raise ObjectNotFoundError(message)
        try:
            http_code = HTTPStatus(code)
        except ValueError:
            http_code = code
        raise ApiRequestError(message, http_code=http_code)
