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
Fake CoprHD controller used by the unit tests
"""

import datetime
import json
from unittest import TestCase
from unittest import mock

import coprhdlib
from coprhdlib import httphelper

GET = httphelper.HttpAction.GET
POST = httphelper.HttpAction.POST

EXPORT_ID = 'urn:storageos:ExportGroup:0c2a6f40-4d5e-4b8e-9b1a-2f6d1d1e7c11:vdc1'
OTHER_EXPORT_ID = \
    'urn:storageos:ExportGroup:7f3e1b2a-9c4d-4e5f-8a6b-1c2d3e4f5a6b:vdc1'
GROUP_ID = \
    'urn:storageos:BlockConsistencyGroup:5b6c7d8e-1a2b-4c3d-9e8f-0a1b2c3d4e5f:'
TASK_ID = 'urn:storageos:Task:a1b2c3d4-e5f6-4a7b-8c9d-0e1f2a3b4c5d:vdc1'
VOLUME_ID = 'urn:storageos:Volume:11111111-2222-4333-8444-555555555555:vdc1'
PROJECT_ID = 'urn:storageos:Project:99999999-8888-4777-8666-555555555555:global'
VARRAY_ID = \
    'urn:storageos:VirtualArray:12345678-1234-4234-8234-123456789012:vdc1'


class FakeResponse(object):

    def __init__(self, status_code=200, body=None, headers=None):
        self.status_code = status_code
        self.text = '' if body is None else json.dumps(body)
        self.content = self.text.encode('utf-8')
        self.headers = headers or {}
        self.elapsed = datetime.timedelta(milliseconds=5)

    def json(self):
        return json.loads(self.text)


def task_json(state, resource_id=EXPORT_ID, task_id=TASK_ID, message=None):
    return {'id': task_id,
            'name': 'CREATE EXPORT GROUP',
            'state': state,
            'message': message,
            'resource': {'id': resource_id, 'name': 'exp1'},
            'link': {'rel': 'self', 'href': '/vdc/tasks/%s' % task_id}}


def export_json(export_id=EXPORT_ID, name='exp1'):
    return {'id': export_id,
            'name': name,
            'generated_name': 'vdc1_%s_1234' % name,
            'type': 'Exclusive',
            'inactive': False,
            'project': {'id': PROJECT_ID},
            'varray': {'id': VARRAY_ID},
            'volumes': [{'id': VOLUME_ID, 'lun': 1}],
            'initiators': [],
            'hosts': [{'id': 'urn:storageos:Host:1:vdc1', 'name': 'host1'}],
            'clusters': [],
            'path_params': []}


def search_json(*ids):
    return {'resource': [{'id': i, 'match': 'exp1',
                          'link': {'rel': 'self', 'href': '/x/%s' % i}}
                         for i in ids]}


class FakeGateway(object):

    """
    Stand in for httphelper.api_request. Responses are registered per
    (op, uri); when several are registered they are returned in order and
    the last one is repeated.
    """

    def __init__(self):
        self.routes = {}
        self.calls = []

    def on(self, op, uri, *responses):
        self.routes[(op, uri)] = list(responses)

    def __call__(self, **kwargs):
        self.calls.append(kwargs)
        responses = self.routes[(kwargs['op'], kwargs['uri'])]
        resp = responses.pop(0) if len(responses) > 1 else responses[0]
        if isinstance(resp, Exception):
            raise resp
        return resp

    def requests_to(self, op, uri):
        return [c for c in self.calls
                if c['op'] == op and c['uri'] == uri]


class FakeTime(object):

    """
    Replaces the time module in coprhdlib.task, sleeping advances the clock
    """

    def __init__(self):
        self.now = 0.0
        self.sleeps = []

    def monotonic(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


class UnitTest(TestCase):

    def setUp(self):
        self.gateway = FakeGateway()
        self.time = FakeTime()
        for target, new in (('coprhdlib.httphelper.api_request', self.gateway),
                            ('coprhdlib.task.time', self.time)):
            patcher = mock.patch(target, new)
            patcher.start()
            self.addCleanup(patcher.stop)

        self.coprhd = coprhdlib.CoprHD(rest_server_ip='10.0.0.1',
                                       rest_server_username='root',
                                       rest_server_password='secret')
