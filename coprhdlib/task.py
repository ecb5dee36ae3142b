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
CoprHD asynchronous tasks
"""

import logging
import time

from coprhdlib import exceptions
from coprhdlib import resources

LOG = logging.getLogger(__name__)

QUERY_TASK_URI_TPL = 'vdc/tasks/%s.json'

TASK_STATE_PENDING = 'pending'
TASK_STATE_READY = 'ready'
TASK_STATE_ERROR = 'error'

TASK_TIMEOUT = 180
TASK_POLL_INTERVAL = 2.0


class Task(resources.BaseObject):

    """
    Handle of an asynchronous CoprHD operation
    """

    def __init__(self, task_json):
        self.state = None
        self.message = None
        self.service_error = None
        super(Task, self).__init__(task_json)
        self.resource = resources.NamedResource.from_json(
            task_json.get('resource'))


class TaskService(object):

    """
    Polls CoprHD tasks until they finish
    """

    def __init__(self, client, clock=None, sleep=None):
        """
        :param client: CoprHD API object
        :param clock: Monotonic clock function, time.monotonic by default
        :param sleep: Sleep function, time.sleep by default
        """

        if not client.task_poll_interval or client.task_poll_interval <= 0:
            raise ValueError('Invalid task_poll_interval value: %s'
                             % client.task_poll_interval)

        self.client = client
        self.poll_interval = client.task_poll_interval
        self._clock = clock or time.monotonic
        self._sleep = sleep or time.sleep

    def query(self, task_id):
        """
        Return the current state of a task
        :param task_id: Task URN
        :return: Task object
        """

        if not task_id:
            raise ValueError('Invalid task_id parameter, task_id=%s'
                             % task_id)

        return Task(self.client.get(QUERY_TASK_URI_TPL % task_id))

    def wait_done(self, task_id, state=TASK_STATE_READY,
                  timeout=TASK_TIMEOUT):
        """
        Block until the task reaches the given state, fails or the timeout
        elapses, whichever comes first.
        :param task_id: Task URN
        :param state: Expected terminal state
        :param timeout: Seconds to wait for
        :return: Task object in the expected state
        """

        deadline = self._clock() + timeout

        while True:
            current = self.query(task_id)
            if current.state == state:
                LOG.debug('Task %s reached state %s', task_id, state)
                return current
            if current.state == TASK_STATE_ERROR:
                LOG.warning('Task %s failed: %s %s', task_id,
                            current.message, current.service_error)
                raise exceptions.TaskFailed(
                    "Task '%s' failed: %s" % (task_id, current.message),
                    task_id=task_id, task=current)

            remaining = deadline - self._clock()
            if remaining <= 0:
                raise exceptions.TaskTimeout(
                    "Task '%s' did not reach state '%s' within %s seconds, "
                    "last state '%s'" % (task_id, state, timeout,
                                         current.state),
                    task_id=task_id, task=current)

            self._sleep(min(self.poll_interval, remaining))
