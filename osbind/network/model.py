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

"""Networking service records and their envelope parsers."""

import collections

from osbind import exception
from osbind.i18n import _
from osbind import pagination


class NetworkStatus(object):
    """Status of a networking resource as reported by neutron."""

    ACTIVE = 'ACTIVE'
    DOWN = 'DOWN'
    BUILD = 'BUILD'
    ERROR = 'ERROR'
    UNRECOGNIZED = 'UNRECOGNIZED'

    ALL = (ACTIVE, DOWN, BUILD, ERROR, UNRECOGNIZED)

    @classmethod
    def from_value(cls, value):
        if value is None:
            return None
        value = str(value).upper()
        if value in cls.ALL:
            return value
        return cls.UNRECOGNIZED


FLOATING_IP_FIELDS = ('id', 'status', 'tenant_id', 'router_id',
                      'floating_network_id', 'fixed_ip_address',
                      'floating_ip_address', 'port_id')

# Assigned by the server, never sent in a request body.
FLOATING_IP_READ_ONLY_FIELDS = ('id', 'status')


class _Record(object):
    """Equality of namedtuple records, limited to records of the same type.
    """
    __slots__ = ()

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((type(self).__name__,) + tuple(self))


class FloatingIP(_Record,
                 collections.namedtuple('FloatingIP', FLOATING_IP_FIELDS)):
    """An externally routable address allocated to a tenant.

    Every field is optional; None means the server did not report it, or the
    caller did not set it on a request payload.
    """
    __slots__ = ()

    def __new__(cls, id=None, status=None, tenant_id=None, router_id=None,
                floating_network_id=None, fixed_ip_address=None,
                floating_ip_address=None, port_id=None):
        return super(FloatingIP, cls).__new__(
            cls, id, status, tenant_id, router_id, floating_network_id,
            fixed_ip_address, floating_ip_address, port_id)

    @classmethod
    def from_dict(cls, data):
        """Build a FloatingIP from one ``floatingip`` object of a response.

        Keys the bindings do not know about are ignored.
        """
        if not isinstance(data, dict):
            raise exception.ParseError(
                reason=_('floating IP must be an object'))
        fields = {k: data.get(k) for k in FLOATING_IP_FIELDS}
        fields['status'] = NetworkStatus.from_value(fields['status'])
        return cls(**fields)

    def to_dict(self):
        """Return the request body form of this record, unset fields left out.
        """
        return {k: v for k, v in self._asdict().items()
                if v is not None and k not in FLOATING_IP_READ_ONLY_FIELDS}

    def replace(self, **fields):
        return self._replace(**fields)


def create_options(tenant_id=None, router_id=None, floating_network_id=None,
                   fixed_ip_address=None, floating_ip_address=None,
                   port_id=None):
    """Build the payload of a floating IP creation.

    When port information is given, the new floating IP is associated with
    that internal port.
    """
    return FloatingIP(tenant_id=tenant_id,
                      router_id=router_id,
                      floating_network_id=floating_network_id,
                      fixed_ip_address=fixed_ip_address,
                      floating_ip_address=floating_ip_address,
                      port_id=port_id)


def update_options(port_id=None, fixed_ip_address=None):
    """Build the payload of a floating IP update.

    Only the association of the floating IP with an internal port can change
    once it is allocated.
    """
    return FloatingIP(port_id=port_id, fixed_ip_address=fixed_ip_address)


def parse_floating_ips(payload):
    """Parse a floating IP list response into a Page of FloatingIP.

    :param payload: the decoded JSON body of ``GET /v2.0/floatingips``.
    :raises: ParseError if the payload is not shaped like a list response.
    """
    if not isinstance(payload, dict):
        raise exception.ParseError(
            reason=_('floating IP list must be an object'))

    records = payload.get('floatingips')
    if records is None:
        records = []
    if not isinstance(records, list):
        raise exception.ParseError(reason=_('floatingips must be a list'))

    return pagination.Page(
        [FloatingIP.from_dict(record) for record in records],
        pagination.marker_from_links(payload.get('floatingips_links')))


class Extension(_Record, collections.namedtuple(
        'Extension',
        ['name', 'alias', 'description', 'namespace', 'updated',
         'links'])):
    """An API extension loaded by a neutron server.

    links holds each link as a tuple of sorted (key, value) pairs.
    """
    __slots__ = ()


def _freeze_link(link):
    if not isinstance(link, dict):
        raise exception.ParseError(reason=_('link must be an object'))
    return tuple(sorted(link.items()))


def extension_from_dict(data):
    if not isinstance(data, dict):
        raise exception.ParseError(reason=_('extension must be an object'))
    return Extension(name=data.get('name'),
                     alias=data.get('alias'),
                     description=data.get('description'),
                     namespace=data.get('namespace'),
                     updated=data.get('updated'),
                     links=tuple(data.get('links') or ()))


def parse_extensions(payload):
    if not isinstance(payload, dict):
        raise exception.ParseError(
            reason=_('extension list must be an object'))
    records = payload.get('extensions') or []
    if not isinstance(records, list):
        raise exception.ParseError(reason=_('extensions must be a list'))
    return [extension_from_dict(record) for record in records]
