# -*- coding: utf-8 -*-

# Copyright (c) 2015 - 2016 EMC Corporation.
# All Rights Reserved.
#
#    Licensed under the Apache License, Version 2.0 (the "License"); you may
#    not use this file except in compliance with the License. You may obtain
#    a copy of the License at
#
#         http://www.apache.org/licenses/LICENSE-2.0
#
#    Unless required by applicable law or agreed to in writing, software
#    distributed under the License is distributed on an "AS IS" BASIS, WITHOUT
#    WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied. See the
#    License for the specific language governing permissions and limitations
#    under the License.

"""
 Utility functions for CoprHD API library
"""

import re
from urllib.parse import quote

# urn:storageos:<Type>:<uuid>:<vdc short id, may be empty>
URN_RE = re.compile(r'urn:storageos:[A-Za-z]+:[0-9A-Za-z-]+:[0-9A-Za-z-]*')


def encode_string(value, double=False):
    """
    Url encode a string to ASCII in order to escape any characters not
     allowed :, /, ?, #, &, =. If parameter 'double=True' perform two passes
     of encoding which may be required for some REST api endpoints. This is
     usually done to remove any additional special characters produce by the
     single encoding pass.
    :param value: Value to encode
    :param double: Double encode string
    :return:
    """

    # Replace special characters in string using the %xx escape
    encoded_str = quote(value, '')
    if double:  # double encode
        encoded_str = quote(encoded_str, '')

    return encoded_str


def is_urn(value):
    """
    Check if a value looks like a CoprHD resource identifier, e.g.
    urn:storageos:BlockConsistencyGroup:2d5b1a38-...:vdc1
    :param value: Candidate identifier
    :return: True if value is a well formed CoprHD URN
    """

    if not isinstance(value, str):
        return False
    return URN_RE.fullmatch(value) is not None
