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

"""Exceptions raised by the vCloud Director client.

Every error carries an ``http_code`` (``http.HTTPStatus``) so callers can map
failures back to the REST answer that caused them.
"""
from http import HTTPStatus


class CloudError(Exception):
    """Base class for all vcloud_sdk errors

    Arguments:
        message (str): human readable description
        http_code (HTTPStatus): status associated with the failure
    """

    def __init__(self, message, http_code=HTTPStatus.INTERNAL_SERVER_ERROR):
        Exception.__init__(self, message)
        self.message = message
        self.http_code = http_code


class ObjectNotFoundError(CloudError):
    """The requested object does not exist"""

    def __init__(self, message, http_code=HTTPStatus.NOT_FOUND):
        super(ObjectNotFoundError, self).__init__(message, http_code)


class ObjectExistsError(CloudError):
    """An object with the same name already exists"""

    def __init__(self, message, http_code=HTTPStatus.CONFLICT):
        super(ObjectExistsError, self).__init__(message, http_code)


class UnauthorizedError(CloudError):
    """Credentials or session token were rejected"""

    def __init__(self, message, http_code=HTTPStatus.UNAUTHORIZED):
        super(UnauthorizedError, self).__init__(message, http_code)


class ApiRequestError(CloudError):
    """vCloud Director answered with an unexpected status"""


class ApiTimeoutError(ApiRequestError):
    """The request did not complete in time"""

    def __init__(self, message, http_code=HTTPStatus.REQUEST_TIMEOUT):
        super(ApiTimeoutError, self).__init__(message, http_code)


class InvalidParameters(CloudError):
    """The given parameters are invalid"""

    def __init__(self, message, http_code=HTTPStatus.BAD_REQUEST):
        super(InvalidParameters, self).__init__(message, http_code)


def catalog_item_not_found(name):
    return ObjectNotFoundError("Catalog Item '{}' is not found".format(name))
