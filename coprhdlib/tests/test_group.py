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
Consistency group service unit tests
"""

from fakes import GET, GROUP_ID, FakeResponse, UnitTest, search_json
import coprhdlib

OTHER_GROUP_ID = \
    'urn:storageos:BlockConsistencyGroup:0f0e0d0c-0b0a-4908-8706-050403020100:'
QUERY_URI = 'block/consistency-groups/%s.json' % GROUP_ID
SEARCH_URI = 'block/consistency-groups/search.json?name=cg1'


def group_json(group_id=GROUP_ID, name='cg1'):
    return {'id': group_id, 'name': name, 'inactive': False,
            'global': False, 'remote': False, 'vdc': {'id': 'vdc1'},
            'tags': [], 'internal': False}


class Test_Group(UnitTest):

    def test_query_by_urn(self):
        self.gateway.on(GET, QUERY_URI, FakeResponse(200, group_json()))

        group = self.coprhd.group().with_id(GROUP_ID).with_name('cg1').query()

        self.assertIsInstance(group, coprhdlib.Group)
        self.assertEqual(GROUP_ID, group.id)
        self.assertEqual('cg1', group.name)
        self.assertEqual([], self.gateway.requests_to(GET, SEARCH_URI))

    def test_query_by_name_when_id_is_not_urn(self):
        self.gateway.on(GET, SEARCH_URI, FakeResponse(200,
                                                      search_json(GROUP_ID)))
        self.gateway.on(GET, QUERY_URI, FakeResponse(200, group_json()))

        svc = self.coprhd.group().with_id('cg1').with_name('cg1')
        group = svc.query()

        self.assertEqual(GROUP_ID, group.id)
        self.assertEqual(GROUP_ID, svc.id)
        self.assertEqual(1, len(self.gateway.requests_to(GET, SEARCH_URI)))

        # bound to the URN now, the next query fetches directly
        svc.query()
        self.assertEqual(1, len(self.gateway.requests_to(GET, SEARCH_URI)))
        self.assertEqual(2, len(self.gateway.requests_to(GET, QUERY_URI)))

    def test_query_by_name_without_id(self):
        self.gateway.on(GET, SEARCH_URI, FakeResponse(200,
                                                      search_json(GROUP_ID)))
        self.gateway.on(GET, QUERY_URI, FakeResponse(200, group_json()))

        group = self.coprhd.group().with_name('cg1').query()

        self.assertEqual(GROUP_ID, group.id)

    def test_query_without_id_and_name(self):
        self.assertRaises(ValueError, self.coprhd.group().query)

    def test_search_without_result(self):
        self.gateway.on(GET, SEARCH_URI, FakeResponse(200, {'resource': []}))

        self.assertRaises(coprhdlib.GroupNotFound,
                          self.coprhd.group().with_name('cg1').query)

    def test_search_binds_first_result(self):
        self.gateway.on(GET, SEARCH_URI, FakeResponse(
            200, search_json(GROUP_ID, OTHER_GROUP_ID)))
        self.gateway.on(GET, QUERY_URI, FakeResponse(200, group_json()))

        svc = self.coprhd.group()
        group = svc.search('name=cg1')

        self.assertEqual(GROUP_ID, svc.id)
        self.assertEqual(GROUP_ID, group.id)

    def test_search_skips_results_without_id(self):
        self.gateway.on(GET, SEARCH_URI, FakeResponse(
            200, {'resource': [{'match': 'cg1'}]}))

        self.assertRaises(coprhdlib.GroupNotFound,
                          self.coprhd.group().search, 'name=cg1')
