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
Resource objects shared by the CoprHD services
"""

import collections


class ResourceId(collections.namedtuple('ResourceId', ['id'])):

    """
    Reference to a remote resource by its URN
    """

    __slots__ = ()

    @classmethod
    def from_json(cls, res_json):
        if isinstance(res_json, str):
            return cls(res_json)
        return cls(res_json.get('id'))

    def to_json(self):
        return {'id': self.id}


class NamedResource(collections.namedtuple('NamedResource', ['id', 'name'])):

    """
    Weak reference to a related resource, the referenced resource is
    not owned by the object holding it
    """

    __slots__ = ()

    @classmethod
    def from_json(cls, res_json):
        res_json = res_json or {}
        return cls(res_json.get('id'), res_json.get('name'))


class BaseObject(object):

    """
    Identity, name and metadata common to all CoprHD resources
    """

    def __init__(self, obj_json):
        """
        Create a resource object from the decoded JSON representation
        :param obj_json: CoprHD resource as a dict
        :return: Nothing
        """

        self.id = None
        self.name = None
        self.link = None
        self.inactive = False
        self.vdc = None
        self.tags = []
        self.internal = False
        self.creation_time = None
        # populate object based on JSON properties
        for k, v in obj_json.items():
            self.__setattr__(k, v)  # set class attribs based on json

    def __eq__(self, other):
        if type(self) is not type(other):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __ne__(self, other):
        equal = self.__eq__(other)
        if equal is NotImplemented:
            return equal
        return not equal

    __hash__ = None

    def __repr__(self):
        return '<%s %s (%s)>' % (type(self).__name__, self.id, self.name)
