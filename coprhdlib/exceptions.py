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
Exceptions raised by the CoprHD API library
"""


class Error(Exception):
    """
    Base class for all CoprHD library errors
    """


class Unauthorized(Error):
    """
    Login on the CoprHD controller failed
    """


class HttpError(Error):

    """
    The CoprHD controller answered with a non 2xx status. CoprHD reports
    failures as a service error document, its fields are kept here.
    """

    def __init__(self, message, status_code=None, code=None,
                 description=None, details=None, retryable=False):
        super(HttpError, self).__init__(message)
        self.status_code = status_code
        self.code = code
        self.description = description
        self.details = details
        self.retryable = retryable


class ExportVolumeDuplicate(HttpError):
    """
    The export (or one of its volumes) already exists on the controller
    """


class NotFound(Error):
    """
    A search returned no resources
    """


class ExportNotFound(NotFound):
    pass


class GroupNotFound(NotFound):
    pass


class TaskError(Error):

    """
    Base class for errors of asynchronous controller tasks
    """

    def __init__(self, message, task_id=None, task=None):
        super(TaskError, self).__init__(message)
        self.task_id = task_id
        self.task = task


class TaskFailed(TaskError):
    """
    The task finished in the error state
    """


class TaskTimeout(TaskError):
    """
    The task did not reach the expected state in time
    """
