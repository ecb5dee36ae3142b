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

""" CoprHD API base library

This package provides a module for wrapping the CoprHD HTTP
RESTful API, exposing export groups and consistency groups through
chainable service objects.

This module is a stand alone module and may be used by any tool
to manage CoprHD block exports.
"""

__version__ = '0.1.0'
__license__ = 'Apache License 2.0'
__author__ = 'EMC Corporation'
__author_email__ = 'support@emc.com'

from .coprhd import CoprHD
from .export import Export, ExportService
from .group import Group, GroupService
from .task import Task, TaskService
from .exceptions import (Error,
                         Unauthorized,
                         HttpError,
                         ExportVolumeDuplicate,
                         NotFound,
                         ExportNotFound,
                         GroupNotFound,
                         TaskError,
                         TaskFailed,
                         TaskTimeout,
                         )

__all__ = ['CoprHD',
           'Export',
           'ExportService',
           'Group',
           'GroupService',
           'Task',
           'TaskService',
           'Error',
           'Unauthorized',
           'HttpError',
           'ExportVolumeDuplicate',
           'NotFound',
           'ExportNotFound',
           'GroupNotFound',
           'TaskError',
           'TaskFailed',
           'TaskTimeout',
           ]
