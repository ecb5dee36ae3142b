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
 HTTP helper script for communicating with RESTful services
"""

import datetime
import enum
import functools
import json
import logging
import time

import requests
import urllib3

from coprhdlib import exceptions

logging.getLogger('requests').setLevel(logging.WARNING)
urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

LOG = logging.getLogger(__name__)

API_LOGIN_PATH = 'login'
AUTH_TOKEN_HEADER = 'X-SDS-AUTH-TOKEN'

GW_REQ_TIMEOUT = 30.0
GW_REQ_RETRIES = 4
TOKEN_INACTIVITY_LIFETIME = 60 * 60 * 2  # 2 hours


def basicauth(func):
    """
    Decorator that will acquire an HTTP token that will be used for
    authentication between the client and the CoprHD controller.
    :param func: Function decorated
    :return: None
    """

    @functools.wraps(func)
    def auth(*args, **kwargs):
        """
        Check if Token is valid, if not create a new Token
        """

        # get current Token or create a new Token
        token = kwargs.get('token') or Token()
        # get the ip/port address pair of the controller
        addr = kwargs.get('host', ())
        # get current credentials
        httpauth = kwargs.get('auth', ())

        if not token.valid():  # token has expired get a new one
            http_resp = request(op=HttpAction.GET, addr=addr,
                                uri=API_LOGIN_PATH, auth=httpauth,
                                verify=kwargs.get('verify', False))
            if http_resp.status_code != 200:
                raise exceptions.Unauthorized(
                    'Could not authenticate on CoprHD with: [%s] %s'
                    % (http_resp.status_code, http_resp.text))
            token.token = http_resp.headers.get(AUTH_TOKEN_HEADER)
            if not token.valid():
                raise exceptions.Unauthorized(
                    'CoprHD login did not return the %s header'
                    % AUTH_TOKEN_HEADER)
            LOG.debug('Token %x acquired', id(token))

        kwargs['token'] = token
        # call function/method this decorator wraps
        ret = func(*args, **kwargs)
        return ret

    return auth


@basicauth
def api_request(**kwargs):
    """
    Perform a HTTP RESTful request call. The Token passed in is shared with
    the caller, so a renewed token is visible to the next request.
    :param op: HttpAction GET, PUT, POST, DELETE
    :param uri: HTTP resource endpoint
    :param host: CoprHD controller (ip, port) pair
    :param data: HTTP Payload (optional)
    :param auth: HTTP basic authentication credentials used for login
    :param token: HTTP token (optional)
    :param verify: TLS verification flag or CA bundle path (optional)
    :param renew: Re-run the request once with a new token on 401
    :return: HTTP response object
    """

    server_authtoken = kwargs.get('token')

    req = request(op=kwargs.get('op'), addr=kwargs.get('host'),
                  uri=kwargs.get('uri'), data=kwargs.get('data'),
                  token=server_authtoken.token,
                  verify=kwargs.get('verify', False))

    if req.status_code == 401 and kwargs.get('renew', True):
        LOG.info('Auth error [%s] occured with request of %s on %s with '
                 'token %x. Trying to re-new the token and re-run the request',
                 req.status_code, kwargs.get('uri'), kwargs.get('host'),
                 id(server_authtoken))
        server_authtoken.expire()
        kwargs['renew'] = False
        req = api_request(**kwargs)
    elif req.status_code != 401:
        server_authtoken.touch()  # idle time restarts on every use

    return req


def request(op, addr, uri, data=None, headers=None, auth=None, token=None,
            verify=False):
    """
    Perform HTTP request
    :param op: HttpAction verb GET, PUT, POST, DELETE
    :param addr: (ip, port) address of http endpoint
    :param uri: Request url
    :param data: Request payload, None sends no body
    :param headers: Request headers
    :param auth: Request basic authentication tuple (login only)
    :param token: CoprHD auth token
    :param verify: TLS verification flag or CA bundle path
    :return: HTTP response Object
    """

    u_prefix = 'https://'  # default to secure https
    headers = dict(headers or {'Content-Type': 'application/json',
                               'Accept': 'application/json'})
    if token:
        headers[AUTH_TOKEN_HEADER] = token

    op_value = op.value if isinstance(op, HttpAction) else op

    # always remove slashes at beginning of uri
    uri = uri.strip('/')
    session = requests.Session()  # Get session
    session.mount(u_prefix,
                  requests.adapters.HTTPAdapter(max_retries=GW_REQ_RETRIES))
    session.headers.update(headers)  # update headers
    r_url = '%s%s:%s/%s' % ((u_prefix,) + tuple(addr) + (uri,))

    http_func = getattr(session, op_value)  # get request method
    http_kwargs = {'verify': verify, 'timeout': GW_REQ_TIMEOUT}
    if auth:
        user, password = auth  # split up auth tuple
        # create HTTP basic auth object
        http_kwargs['auth'] = requests.auth.HTTPBasicAuth(user, password)

    if op_value in ('put', 'post', 'patch') and data is not None:
        data_str = json.dumps(data)
        LOG.debug('REQ: %s %s %s', op_value, r_url, data_str)
        http_resp = http_func(r_url, data=data_str, **http_kwargs)
    else:
        LOG.debug('REQ: %s %s', op_value, r_url)
        http_resp = http_func(r_url, **http_kwargs)

    resp_text = http_resp.text
    if uri == API_LOGIN_PATH and http_resp.status_code == 200:
        resp_text = '<new token>'
    LOG.debug('RESP: [%s] (elapsed %s) %s',
              http_resp.status_code, http_resp.elapsed, resp_text)

    return http_resp


class Singleton(type):
    """
    A singleton factory. A defined class behavior expected to be used
    as a metaclass
    """

    _klasses = {}

    def __call__(self, *args, **kwargs):
        """
        Callable used to check if the class is already instanced
        :param self:
        :param args: Class args
        :param kwargs: Class keyword args
        :return: Instance of class or a new instance of the class
        """

        if self not in self._klasses:
            self._klasses[self] = super(Singleton, self).__call__(*args,
                                                                  **kwargs)
        return self._klasses[self]


class Token(object):
    """
    Class represents the CoprHD auth token returned by the login call
    """

    def __init__(self, http_token=None):
        """
        Create a Token instance that will be sent with every request to
        the CoprHD controller.
        :param http_token: Token string if you want to create a
                           new Token with an existing value
        :return: HTTP auth Token object
        """

        self._start_time = 0  # record when we created the token
        self._token = http_token
        if self._token:
            self._start_time = time.time()
        self._expired = not self._token
        LOG.debug('Initialize new %x token', id(self))

    def valid(self):
        if self._expired:
            return False

        if time.time() - self._start_time > TOKEN_INACTIVITY_LIFETIME:
            self._expired = True
            LOG.debug('Token %x is expired at %s',
                      id(self), _utcnow())

        return not self._expired

    def touch(self):
        if not self._expired:
            self._start_time = time.time()

    def expire(self):
        self._expired = True
        LOG.debug('Token %x is forcedly expired', id(self))

    @property
    def token(self):
        """
        Token property getter
        """
        return self._token

    @token.setter
    def token(self, value):
        """
        Token property setter
        """

        if value:
            self._token = value.strip('"')  # strip extra double quotes
        else:
            self._token = value
        self._start_time = time.time()
        self._expired = not self._token
        expire_datetime = (_utcnow() +
                           datetime.timedelta(
                               seconds=TOKEN_INACTIVITY_LIFETIME))
        LOG.debug('Token %x is set at %s, expires at %s',
                  id(self), _utcnow(), expire_datetime)


class TokenFactory(object, metaclass=Singleton):

    def __init__(self):
        self._tokens = {}

    def get_token(self, addr, auth):
        addr_str = '%s:%s' % addr
        auth_str = '%s:%s' % auth
        token_key = '%s@%s' % (auth_str, addr_str)
        if token_key not in self._tokens:
            LOG.debug('Creating new token for %s@%s:%s',
                      auth[0], addr[0], addr[1])
            self._tokens[token_key] = Token()
        token = self._tokens[token_key]
        LOG.debug('Use %x token for %s@%s:%s',
                  id(token), auth[0], addr[0], addr[1])
        return token


class HttpAction(enum.Enum):

    """
    Enumeration object to aid in setting op functions for HTTP requests
    """

    GET = 'get'
    PUT = 'put'
    POST = 'post'
    PATCH = 'patch'
    DELETE = 'delete'


def _utcnow():
    return datetime.datetime.now(datetime.timezone.utc)
