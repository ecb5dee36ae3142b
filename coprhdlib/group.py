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
CoprHD block consistency groups
"""

import logging

from coprhdlib import exceptions
from coprhdlib import resources
from coprhdlib import utilities

LOG = logging.getLogger(__name__)

QUERY_GROUP_URI_TPL = 'block/consistency-groups/%s.json'
SEARCH_GROUP_URI = 'block/consistency-groups/search.json?'


class Group(resources.BaseObject):
    pass


class GroupService(object):

    def __init__(self, client):
        self.client = client
        self.id = None
        self.name = None

    def with_id(self, group_id):
        self.id = group_id
        return self

    def with_name(self, name):
        self.name = name
        return self

    def query(self):
        """
        Fetch the consistency group. If the id is not a CoprHD URN the
        group is looked up by name.
        :return: Group object
        """

        if not utilities.is_urn(self.id):
            if not self.name:
                raise ValueError(
                    'Group id %r is not a CoprHD URN and no name is set'
                    % self.id)
            LOG.debug('%s is not a valid CoprHD URN, searching group by '
                      'name %s', self.id, self.name)
            return self.search('name=' + utilities.encode_string(self.name))

        return self._get()

    def _get(self):
        return Group(self.client.get(QUERY_GROUP_URI_TPL % self.id))

    def search(self, query):
        """
        Search consistency groups and bind this service to the first match
        :param query: Search query string, e.g. 'name=cg1'
        :return: Group object
        """

        found = [r for r in self.client.search(SEARCH_GROUP_URI + query)
                 if r.get('id')]
        if not found:
            raise exceptions.GroupNotFound(
                "No consistency group matches '%s'" % query)
        if len(found) > 1:
            LOG.warning("%d consistency groups match '%s', using the first "
                        "one %s", len(found), query, found[0].get('id'))

        self.id = found[0].get('id')

        # search results carry URNs, fetch without re-checking the id
        return self._get()
