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
Helpers to read the XML documents returned by vCloud Director.

Only the handful of elements the SDK needs are looked up; the schema itself is
not modelled.
"""
from lxml import etree

from vcloud_sdk.errors import ApiRequestError


def parse(content):
    """Parse a response body into an lxml element

    Args:
        content - bytes or str as returned by the REST call

        Returns:
            The root element or None for an empty body
    """
    if content is None:
        return None
    if isinstance(content, str):
        content = content.encode('utf-8')
    if not content.strip():
        return None
    try:
        return etree.fromstring(content)
    except etree.XMLSyntaxError as exp:
        raise ApiRequestError("Failed to parse vCloud Director response: {}".format(exp))


def tostring(element):
    return etree.tostring(element, xml_declaration=True, encoding='UTF-8')


def local_name(element):
    if not isinstance(element.tag, str):
        return None
    return etree.QName(element).localname


def children(element, name):
    """Direct children of element with the given local name"""
    if element is None:
        return []
    return [child for child in element if local_name(child) == name]


def find_child(element, name):
    found = children(element, name)
    return found[0] if found else None


def descendants(element, name):
    if element is None:
        return []
    return [child for child in element.iter() if local_name(child) == name]


def find_descendant(element, name):
    found = descendants(element, name)
    return found[0] if found else None


def child_text(element, name, default=None):
    child = find_descendant(element, name)
    if child is None or child.text is None:
        return default
    return child.text.strip()


def links(element, rel=None, type_=None, name=None):
    """Link children of element filtered by rel, type and name"""
    result = []
    for link in children(element, 'Link'):
        if rel is not None and link.get('rel') != rel:
            continue
        if type_ is not None and link.get('type') != type_:
            continue
        if name is not None and link.get('name') != name:
            continue
        result.append(link)
    return result


def get_link(element, rel=None, type_=None, name=None):
    found = links(element, rel=rel, type_=type_, name=name)
    return found[0] if found else None


def error_message(element):
    """Message carried by a vCloud Director Error document, if any"""
    if element is None or local_name(element) != 'Error':
        return None
    return element.get('message')
