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

"""Entry point of the networking service (neutron) bindings.

NeutronAPI resolves a region name to a concrete endpoint through the
keystone service catalog and hands out the per-resource APIs bound to it.
"""

from oslo_log import log as logging

import osbind.conf
from osbind.network import extension
from osbind.network import floating_ip
from osbind import utils

CONF = osbind.conf.CONF

LOG = logging.getLogger(__name__)

# Alias of the L3 extension serving routers and floating IPs.
ROUTER_EXTENSION = 'router'


class NeutronAPI(object):
    """API for interacting with the neutron 2.0 API."""

    def __init__(self, session=None):
        """:param session: keystoneauth1 Session to send requests through.
                           If unspecified, one is created, with its auth
                           plugin, from the [neutron] config options.
        """
        self._owns_session = session is None
        if session is None:
            session = utils.get_session(osbind.conf.neutron.NEUTRON_GROUP)
        self._session = session

    def _adapter(self, region):
        return utils.get_ksa_adapter(osbind.conf.neutron.NEUTRON_GROUP,
                                     self._session, region_name=region)

    def get_configured_regions(self):
        """Return the names of the regions serving the networking API."""
        return utils.get_endpoint_regions(
            self._session, osbind.conf.neutron.NEUTRON_GROUP)

    def get_extension_api(self, region=None):
        """Return the extension API of a region, None being the default."""
        return extension.ExtensionAPI(self._adapter(region))

    def get_floating_ip_api(self, region=None):
        """Return the floating IP API of a region.

        :returns: a FloatingIPAPI, or None when the region's neutron does not
                  load the L3 router extension.
        """
        if self.get_extension_api(region).get(ROUTER_EXTENSION) is None:
            LOG.info('The %(ext)s extension is not loaded in region '
                     '%(region)s, floating IPs are unavailable',
                     {'ext': ROUTER_EXTENSION, 'region': region})
            return None
        return floating_ip.FloatingIPAPI(self._adapter(region))

    def list_floating_ips(self, region=None, options=None):
        """Lazily iterate over the floating IPs of a region.

        The region is resolved to an endpoint once, on the first pull; every
        page is then requested from that endpoint.
        """
        api = self.get_floating_ip_api(region)
        if api is None:
            return
        for fip in api.list(options):
            yield fip

    def close(self):
        if self._owns_session and self._session.session is not None:
            self._session.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()
