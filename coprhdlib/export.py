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
CoprHD block export groups
"""

import logging

from coprhdlib import exceptions
from coprhdlib import resources
from coprhdlib import task
from coprhdlib import utilities

LOG = logging.getLogger(__name__)

CREATE_EXPORT_URI = 'block/exports.json'
QUERY_EXPORT_URI_TPL = 'block/exports/%s.json'
SEARCH_EXPORT_URI = 'block/exports/search.json?'
DELETE_EXPORT_URI_TPL = 'block/exports/%s/deactivate.json'

EXPORT_TYPE_EXCLUSIVE = 'Exclusive'


class Export(resources.BaseObject):

    """
    CoprHD export group, maps volumes to initiators
    """

    def __init__(self, exp_json):
        self.initiators = []
        self.type = None
        self.generated_name = None
        self.path_params = []
        super(Export, self).__init__(exp_json)
        self.volumes = [resources.ResourceId.from_json(v)
                        for v in exp_json.get('volumes') or []]
        self.hosts = [resources.NamedResource.from_json(h)
                      for h in exp_json.get('hosts') or []]
        self.clusters = [resources.NamedResource.from_json(c)
                         for c in exp_json.get('clusters') or []]


class ExportService(object):

    """
    Chainable builder for CoprHD export group operations.

        client.export().with_project(project).with_array(varray) \\
            .with_volumes(vol_id).with_initiators(itr_id).create('exp1')

    An ExportService is bound to a single export at a time and is not
    thread safe, search() rebinds it to the first matching export.
    """

    def __init__(self, client):
        self.client = client
        self.id = None
        self.initiators = []
        self.project = None
        self.type = EXPORT_TYPE_EXCLUSIVE
        self.array = None
        self.volumes = []

    def with_id(self, export_id):
        self.id = export_id
        return self

    def with_initiators(self, *initiators):
        self.initiators.extend(initiators)
        return self

    def with_volumes(self, *volumes):
        self.volumes.extend(resources.ResourceId(v) for v in volumes)
        return self

    def with_project(self, project):
        self.project = project
        return self

    def with_array(self, array):
        self.array = array
        return self

    def with_type(self, export_type):
        self.type = export_type
        return self

    def _create_request(self, name):
        return {'initiators': list(self.initiators),
                'name': name,
                'project': self.project,
                'type': self.type,
                'varray': self.array,
                'volumes': [v.to_json() for v in self.volumes]}

    def create(self, name):
        """
        Create an export group and wait for the controller to finish it.
        If the controller reports the export as a duplicate, the existing
        export with the same name is returned instead.
        :param name: Export group name
        :return: Export object
        """

        try:
            created = task.Task(self.client.post(
                CREATE_EXPORT_URI, params=self._create_request(name)))
        except exceptions.ExportVolumeDuplicate as err:
            LOG.info("Export '%s' already exists, looking it up by name: %s",
                     name, err)
            return self.search('name=' + utilities.encode_string(name))

        self.client.task().wait_done(created.id, task.TASK_STATE_READY,
                                     self.client.task_timeout)

        self.id = created.resource.id
        LOG.debug('Created export %s (%s) successfully', name, self.id)

        return self.query()

    def query(self):
        """
        Fetch the export this service is bound to
        :return: Export object
        """

        if not self.id:
            raise ValueError('Export id is not set, id=%s' % self.id)

        return Export(self.client.get(QUERY_EXPORT_URI_TPL % self.id))

    def search(self, query):
        """
        Search exports and bind this service to the first match
        :param query: Search query string, e.g. 'name=exp1'
        :return: Export object
        """

        found = [r for r in self.client.search(SEARCH_EXPORT_URI + query)
                 if r.get('id')]
        if not found:
            raise exceptions.ExportNotFound("No export matches '%s'" % query)
        if len(found) > 1:
            LOG.warning("%d exports match '%s', using the first one %s",
                        len(found), query, found[0].get('id'))

        self.id = found[0].get('id')

        return self.query()

    def delete(self, export_id):
        """
        Deactivate an export group and wait for the controller to finish.
        The export id this service is bound to is left as is.
        :param export_id: Export group URN
        :return: Nothing
        """

        if not export_id:
            raise ValueError('Invalid export_id parameter, export_id=%s'
                             % export_id)

        deleting = task.Task(self.client.post(
            DELETE_EXPORT_URI_TPL % export_id))

        self.client.task().wait_done(deleting.id, task.TASK_STATE_READY,
                                     self.client.task_timeout)
        LOG.debug('Removed export %s successfully', export_id)
