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

import urllib.parse

from oslo_log import log as logging

from osbind import exception
from osbind.i18n import _

LOG = logging.getLogger(__name__)


class RESTClient(object):
    """Base class of the service bindings.

    Sends requests through a keystoneauth1 Adapter created with
    raise_exc=False. A 404 answer is returned to the caller as None so that
    each operation decides what not-found means for it; requests sent with
    not_found_ok=False raise NotFound instead. Every other error status is
    raised as an OsbindException. Transport failures raised by
    keystoneauth1 propagate unmodified.
    """

    # Path template of a single resource, with one %s for its id.
    resource_path = None

    def __init__(self, adapter):
        """:param adapter: keystoneauth1 Adapter bound to one endpoint."""
        self._client = adapter
        # Set accept header on every request to ensure we notify the
        # service of our response body media type preferences.
        self._client.additional_headers = {'accept': 'application/json'}

    @staticmethod
    def _url(path, params=None):
        if params:
            path += '?' + urllib.parse.urlencode(sorted(params.items()))
        return path

    def _resource_url(self, id):
        """Return the URL of one resource, None when id is empty."""
        if not id:
            return None
        return self.resource_path % urllib.parse.quote(id, safe='')

    def _request(self, method, url, not_found_ok=True, **kwargs):
        resp = self._client.request(url, method, **kwargs)
        LOG.debug('%(method)s %(url)s returned %(status)s',
                  {'method': method, 'url': url, 'status': resp.status_code})

        if resp.status_code == 404 and not_found_ok:
            return None
        if resp.status_code >= 400:
            raise exception.from_response(resp, method, url)
        return resp

    def _get(self, url, **kwargs):
        return self._request('GET', url, **kwargs)

    def _post(self, url, data, **kwargs):
        # NOTE: using json= instead of data= sets the media type to
        # application/json for us.
        return self._request('POST', url, json=data, **kwargs)

    def _put(self, url, data, **kwargs):
        return self._request('PUT', url, json=data, **kwargs)

    def _delete(self, url, **kwargs):
        return self._request('DELETE', url, **kwargs)

    @staticmethod
    def _json(resp):
        """Decode the body of a response, which must be a JSON object."""
        try:
            body = resp.json()
        except ValueError as e:
            raise exception.ParseError(reason=str(e))
        if not isinstance(body, dict):
            raise exception.ParseError(
                reason=_('expected a JSON object, got %s') %
                type(body).__name__)
        return body

    @classmethod
    def _select(cls, resp, key):
        """Return the object wrapped in the ``key`` envelope of a response.
        """
        body = cls._json(resp)
        value = body.get(key)
        if not isinstance(value, dict):
            raise exception.ParseError(
                reason=_('missing the %s envelope') % key)
        return value
