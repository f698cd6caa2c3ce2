# Copyright 2026 OpenStack Foundation
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

"""osbind base exception handling.

Every error raised by the bindings derives from OsbindException. HTTP error
statuses returned by a service are translated with from_response(). Most
operations handle a 404 locally and never let it reach from_response().

"""

from oslo_log import log as logging

from osbind.i18n import _

LOG = logging.getLogger(__name__)


class OsbindException(Exception):
    """Base osbind Exception

    To correctly use this class, inherit from it and define
    a 'msg_fmt' property. That msg_fmt will get printf'd
    with the keyword arguments provided to the constructor.

    """
    msg_fmt = _("An unknown exception occurred.")
    code = 500

    def __init__(self, message=None, **kwargs):
        self.kwargs = kwargs

        if 'code' not in self.kwargs:
            try:
                self.kwargs['code'] = self.code
            except AttributeError:
                pass

        try:
            if not message:
                message = self.msg_fmt % kwargs
            else:
                message = str(message)
        except Exception:
            self._log_exception()
            message = self.msg_fmt

        self.message = message
        super(OsbindException, self).__init__(message)

    def _log_exception(self):
        # kwargs doesn't match a variable in the message
        # log the issue and the kwargs
        LOG.exception('Exception in string format operation')
        for name, value in self.kwargs.items():
            LOG.error("%s: %s" % (name, value))  # noqa

    def format_message(self):
        return self.args[0]

    def __repr__(self):
        dict_repr = dict(self.__dict__)
        dict_repr['class'] = self.__class__.__name__
        return str(dict_repr)


class Invalid(OsbindException):
    msg_fmt = _("Invalid parameters.")
    code = 400


class InvalidPaginationOption(Invalid):
    msg_fmt = _("Invalid pagination option %(option)s: %(reason)s")


class InvalidArchiveFormat(Invalid):
    msg_fmt = _("Archive format %(archive_format)s is not supported. "
                "Supported formats: %(supported)s")


class ParseError(OsbindException):
    msg_fmt = _("Unable to parse the response body: %(reason)s")


class MissingAuthConfiguration(OsbindException):
    msg_fmt = _("Unknown auth type %(auth_type)s for the [%(group)s] "
                "configuration group.")


class ConfGroupForServiceTypeNotFound(OsbindException):
    msg_fmt = _("No conf group name could be found for service type "
                "%(stype)s.")


class ServiceError(OsbindException):
    """A service answered with an HTTP error status."""
    msg_fmt = _("%(method)s %(url)s returned %(code)s: %(reason)s")

    def __init__(self, message=None, **kwargs):
        if 'code' in kwargs:
            self.code = kwargs['code']
        super(ServiceError, self).__init__(message, **kwargs)


class BadRequest(ServiceError):
    code = 400


class Unauthorized(ServiceError):
    code = 401


class Forbidden(ServiceError):
    code = 403


class NotFound(ServiceError):
    code = 404


class Conflict(ServiceError):
    code = 409


class OverQuota(Conflict):
    msg_fmt = _("%(method)s %(url)s exceeded the quota: %(reason)s")


class ServiceUnavailable(ServiceError):
    code = 503


_CODE_MAP = {
    400: BadRequest,
    401: Unauthorized,
    403: Forbidden,
    404: NotFound,
    409: Conflict,
    413: OverQuota,
    503: ServiceUnavailable,
}


def _extract_reason(response):
    """Return the best human readable failure reason of a response.

    Neutron wraps its errors as {"NeutronError": {"type": ..., "message":
    ...}}; Swift and the WSGI layers answer with plain text.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        error = body.get('NeutronError')
        if isinstance(error, dict):
            return error.get('type'), error.get('message') or response.text
        if isinstance(error, str):
            return None, error
    return None, response.text or response.reason


def from_response(response, method, url):
    """Build the exception matching an HTTP error response.

    :param response: the keystoneauth1/requests response with a status code
                     of 400 or higher.
    :param method: the HTTP verb of the failed request.
    :param url: the URL of the failed request.
    :returns: a ServiceError subclass instance, ready to be raised.
    """
    status = response.status_code
    error_type, reason = _extract_reason(response)
    cls = _CODE_MAP.get(status, ServiceError)
    if status == 409 and error_type == 'OverQuota':
        cls = OverQuota
    return cls(method=method, url=url, code=status, reason=reason)
