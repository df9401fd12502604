#!/usr/bin/env python3

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

import setuptools


def parse_requirements(requirements):
    with open(requirements) as f:
        return [l.strip('\n') for l in f if l.strip('\n') and not l.startswith('#')]


_name = 'vcloud-sdk'
_version = '1.0.0'
_description = 'Client SDK for the VMware vCloud Director REST API'
_license = 'Apache 2.0'

setuptools.setup(
    name=_name,
    version=_version,
    description=_description,
    long_description=open('README.rst').read(),
    license=_license,
    python_requires='>=3.5',
    packages=setuptools.find_packages(include=['vcloud_sdk', 'vcloud_sdk.*']),
    include_package_data=True,
    install_requires=parse_requirements('requirements.txt'),
    extras_require={
        'test': parse_requirements('test-requirements.txt'),
    },
    entry_points={
        "console_scripts": [
            "vcloud-sdk = vcloud_sdk.scripts.vcd:cli",
        ]
    }
)
