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

from oslo_log import log as logging

from osbind.network import model
from osbind import rest

LOG = logging.getLogger(__name__)

API_PREFIX = '/v2.0'


class ExtensionAPI(rest.RESTClient):
    """Lists the API extensions loaded by one region's neutron server."""

    collection_path = API_PREFIX + '/extensions'
    resource_path = API_PREFIX + '/extensions/%s'

    def list(self):
        resp = self._get(self.collection_path)
        if resp is None:
            return []
        return model.parse_extensions(self._json(resp))

    def get(self, alias):
        """Return the extension with the given alias, or None if not loaded.
        """
        url = self._resource_url(alias)
        resp = self._get(url) if url else None
        if resp is None:
            LOG.debug('Extension %s not found', alias)
            return None
        return model.extension_from_dict(self._select(resp, 'extension'))
