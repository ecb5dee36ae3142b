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
CoprHD API library
"""

import logging
import os.path
from urllib.parse import urlencode

from oslo_config import cfg

from coprhdlib import config
from coprhdlib import exceptions
from coprhdlib import export
from coprhdlib import group
from coprhdlib import httphelper
from coprhdlib import task

LOG = logging.getLogger(__name__)

# CoprHD service codes
API_PARAMETER_INVALID = 1008

# details fragments CoprHD uses when an export or one of its volumes exists
EXPORT_DUPLICATE_MARKERS = ('already exists', 'already in export',
                            'already part of')


def is_export_vol_dup(code, description, details):
    """
    Classify a CoprHD service error as a duplicate export / export volume
    :param code: CoprHD service code
    :param description: Service error description
    :param details: Service error details
    :return: True if the error means the export already exists
    """

    if code != API_PARAMETER_INVALID:
        return False
    text = ('%s %s' % (description or '', details or '')).lower()
    return any(marker in text for marker in EXPORT_DUPLICATE_MARKERS)


class CoprHD(object):

    """
    CoprHD API class
    """

    def __init__(self, rest_server_ip='', rest_server_port=4443,
                 rest_server_username='', rest_server_password='',
                 verify_server_certificate=False, server_certificate_path='',
                 task_timeout=task.TASK_TIMEOUT,
                 task_poll_interval=task.TASK_POLL_INTERVAL):
        """
        Create a CoprHD API object
        :param rest_server_ip: CoprHD controller address
        :param rest_server_port: CoprHD controller REST API port
        :param rest_server_username: User name
        :param rest_server_password: Password
        :param verify_server_certificate: Verify the controller certificate
        :param server_certificate_path: CA bundle used for verification
        :param task_timeout: Seconds to wait for a task to finish
        :param task_poll_interval: Seconds between two task status requests
        :return: Nothing
        """

        self.host_addr = (rest_server_ip, str(rest_server_port))
        self.auth = (rest_server_username, rest_server_password)
        self.server_authtoken = httphelper.TokenFactory().get_token(
            self.host_addr, self.auth)
        self.task_timeout = task_timeout
        self.task_poll_interval = task_poll_interval

        self.verify_cert = False
        self.cert_path = None
        # Check if we will be using a certificate
        if verify_server_certificate:
            self._set_certificate(server_certificate_path)

    @classmethod
    def from_config(cls, conf=None):
        """
        Create a CoprHD API object from the [coprhd] configuration group
        :param conf: oslo.config ConfigOpts, global CONF if not set
        :return: CoprHD API object
        """

        conf = conf if conf is not None else cfg.CONF
        if config.GROUP_NAME not in conf:
            config.register_opts(conf)
        opts = conf[config.GROUP_NAME]
        return cls(rest_server_ip=opts.rest_server_ip,
                   rest_server_port=opts.rest_server_port,
                   rest_server_username=opts.rest_server_username,
                   rest_server_password=opts.rest_server_password,
                   verify_server_certificate=opts.verify_server_certificate,
                   server_certificate_path=opts.server_certificate_path,
                   task_timeout=opts.task_timeout,
                   task_poll_interval=opts.task_poll_interval)

    def copy(self):
        """
        Return a new CoprHD API object with the same settings. The auth
        token is shared through the TokenFactory.
        :return: CoprHD API object
        """

        return CoprHD(rest_server_ip=self.host_addr[0],
                      rest_server_port=self.host_addr[1],
                      rest_server_username=self.auth[0],
                      rest_server_password=self.auth[1],
                      verify_server_certificate=self.verify_cert,
                      server_certificate_path=self.cert_path or '',
                      task_timeout=self.task_timeout,
                      task_poll_interval=self.task_poll_interval)

    def export(self):
        """
        Return a new export service
        """
        return export.ExportService(self.copy())

    def group(self):
        """
        Return a new consistency group service
        """
        return group.GroupService(self.copy())

    def task(self, clock=None, sleep=None):
        """
        Return a task service
        :param clock: Monotonic clock function (optional)
        :param sleep: Sleep function (optional)
        """
        return task.TaskService(self, clock=clock, sleep=sleep)

    def _set_certificate(self, server_certificate_path):
        """
        Set certificate to use for CoprHD REST calls
        :return: Nothing
        """

        if os.path.isabs(server_certificate_path):
            self.verify_cert = True
            self.cert_path = server_certificate_path
        else:
            LOG.warning('Certificate path %r is not absolute, server '
                        'certificate will not be verified',
                        server_certificate_path)

    def _verify(self):
        if self.verify_cert:
            return self.cert_path
        return False

    def _get(self, r_uri):
        return httphelper.api_request(
            uri=r_uri, data=None, op=httphelper.HttpAction.GET,
            host=self.host_addr, auth=self.auth, token=self.server_authtoken,
            verify=self._verify())

    def _post(self, r_uri, params=None):
        return httphelper.api_request(
            uri=r_uri, data=params, op=httphelper.HttpAction.POST,
            host=self.host_addr, auth=self.auth, token=self.server_authtoken,
            verify=self._verify())

    def _error(self, req, r_uri):
        """
        Build the exception for a failed request from the CoprHD service
        error document
        :param req: HTTP response
        :param r_uri: Request uri
        :return: HttpError instance
        """

        try:
            err = req.json()
        except ValueError:
            err = {}
        if not isinstance(err, dict):
            err = {}

        code = err.get('code')
        description = err.get('description')
        details = err.get('details')
        message = ('Error requesting %s: [%s] %s %s'
                   % (r_uri, req.status_code, description or req.text,
                      details or '')).strip()

        if is_export_vol_dup(code, description, details):
            klass = exceptions.ExportVolumeDuplicate
        else:
            klass = exceptions.HttpError
        return klass(message, status_code=req.status_code, code=code,
                     description=description, details=details,
                     retryable=err.get('retryable', False))

    def _decode(self, req, r_uri):
        if not 200 <= req.status_code < 300:
            raise self._error(req, r_uri)
        if not req.content:
            return {}
        return req.json()

    def get(self, r_uri, params=None):
        """
        GET a CoprHD resource
        :param r_uri: Resource path
        :param params: Query string parameters (optional)
        :return: Decoded JSON response
        """

        if params:
            r_uri = '%s?%s' % (r_uri, urlencode(params))
        return self._decode(self._get(r_uri), r_uri)

    def post(self, r_uri, params=None):
        """
        POST to a CoprHD resource
        :param r_uri: Resource path
        :param params: Request payload, None posts an empty body
        :return: Decoded JSON response
        """

        return self._decode(self._post(r_uri, params=params), r_uri)

    def search(self, r_uri):
        """
        Run a CoprHD search request
        :param r_uri: Search path including the query string
        :return: List of matching resource references
        """

        return self.get(r_uri).get('resource') or []
