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
Configuration options for the CoprHD API library
"""

from oslo_config import cfg

GROUP_NAME = 'coprhd'

coprhd_opts = [
    cfg.StrOpt('rest_server_ip',
               default='',
               help='CoprHD controller REST API address'),
    cfg.PortOpt('rest_server_port',
                default=4443,
                help='CoprHD controller REST API port'),
    cfg.StrOpt('rest_server_username',
               default='',
               help='User name for the CoprHD controller'),
    cfg.StrOpt('rest_server_password',
               default='',
               secret=True,
               help='Password for the CoprHD controller'),
    cfg.BoolOpt('verify_server_certificate',
                default=False,
                help='Verify the controller TLS certificate'),
    cfg.StrOpt('server_certificate_path',
               default='',
               help='Absolute path to the CA bundle used to verify the '
                    'controller certificate'),
    cfg.IntOpt('task_timeout',
               default=180,
               min=1,
               help='Seconds to wait for an asynchronous task to finish'),
    cfg.FloatOpt('task_poll_interval',
                 default=2.0,
                 min=0.1,
                 help='Seconds between two task status requests'),
]


def _group():
    # oslo.config stores overrides in the group, one per ConfigOpts
    return cfg.OptGroup(name=GROUP_NAME, title='CoprHD controller options')


def register_opts(conf):
    conf.register_group(_group())
    conf.register_opts(coprhd_opts, group=GROUP_NAME)


def list_opts():
    return [(_group(), coprhd_opts)]
