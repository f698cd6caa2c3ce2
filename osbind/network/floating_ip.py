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

"""Bindings of the neutron floating IP resource (L3 ``router`` extension).
"""

from oslo_log import log as logging

import osbind.conf
from osbind.network import model
from osbind import pagination
from osbind import rest

CONF = osbind.conf.CONF

LOG = logging.getLogger(__name__)

API_PREFIX = '/v2.0'


class FloatingIPAPI(rest.RESTClient):
    """Floating IP operations against one region's networking endpoint."""

    collection_path = API_PREFIX + '/floatingips'
    resource_path = API_PREFIX + '/floatingips/%s'

    def list_page(self, options=None):
        """Fetch a single page of the tenant's floating IPs.

        :param options: PaginationOptions of the page; None requests the
                        first page with the server's default size.
        :returns: a Page of FloatingIP, empty when the collection is not
                  found.
        """
        params = options.to_params() if options else None
        resp = self._get(self._url(self.collection_path, params))
        if resp is None:
            LOG.debug('Floating IP collection not found, returning an '
                      'empty page')
            return pagination.Page()
        return model.parse_floating_ips(self._json(resp))

    def list(self, options=None):
        """Lazily iterate over every floating IP allocated to the tenant.

        Pages are fetched on demand, following the marker of each page until
        the server reports no further page.
        """
        if options is None and CONF.neutron.list_page_size:
            options = pagination.PaginationOptions(
                limit=CONF.neutron.list_page_size)
        return pagination.iter_items(self.list_page, options)

    def get(self, id):
        """Return a floating IP, or None if not found."""
        url = self._resource_url(id)
        resp = self._get(url) if url else None
        if resp is None:
            LOG.debug('Floating IP %s not found', id)
            return None
        return model.FloatingIP.from_dict(self._select(resp, 'floatingip'))

    def create(self, floating_ip):
        """Allocate a floating IP.

        When the payload carries port information the floating IP is also
        associated with that internal port.

        :param floating_ip: a FloatingIP built by model.create_options().
        :returns: the newly created floating IP, id included.
        """
        body = {'floatingip': floating_ip.to_dict()}
        resp = self._post(self.collection_path, body, not_found_ok=False)
        fip = model.FloatingIP.from_dict(self._select(resp, 'floatingip'))
        LOG.debug('Created floating IP %s', fip.id)
        return fip

    def update(self, id, floating_ip):
        """Update a floating IP and its association with an internal port.

        :param id: the id of the floating IP to update.
        :param floating_ip: a FloatingIP built by model.update_options(),
                            carrying only the attributes to update.
        :returns: the modified floating IP, or None if not found.
        """
        return self._update(id, floating_ip.to_dict())

    def disassociate(self, id):
        """Detach a floating IP from its port, keeping it allocated.

        :returns: the modified floating IP, or None if not found.
        """
        return self._update(id, {'port_id': None})

    def _update(self, id, fields):
        url = self._resource_url(id)
        resp = self._put(url, {'floatingip': fields}) if url else None
        if resp is None:
            LOG.debug('Floating IP %s not found, nothing updated', id)
            return None
        return model.FloatingIP.from_dict(self._select(resp, 'floatingip'))

    def delete(self, id):
        """Release a floating IP and return it to its pool.

        :returns: True if released, False if the floating IP was not found.
        """
        url = self._resource_url(id)
        resp = self._delete(url) if url else None
        if resp is None:
            LOG.debug('Floating IP %s not found, nothing to release', id)
            return False
        return True
