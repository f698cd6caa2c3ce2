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

"""Utilities and helper functions."""

from keystoneauth1 import loading as ks_loading
from oslo_log import log as logging

import osbind.conf
from osbind import exception

CONF = osbind.conf.CONF

LOG = logging.getLogger(__name__)


def _get_conf_group(group):
    if not group or not hasattr(CONF, group):
        raise exception.ConfGroupForServiceTypeNotFound(stype=group)
    return CONF[group]


def load_auth_plugin(group):
    """Load the keystoneauth1 auth plugin configured in a conf group.

    :param group: name of the conf group holding the ksa auth options.
    :raises: MissingAuthConfiguration if no plugin could be loaded.
    """
    conf_group = _get_conf_group(group)
    auth_plugin = ks_loading.load_auth_from_conf_options(CONF, group)

    if auth_plugin:
        return auth_plugin

    if conf_group.auth_type is None:
        # Leave a breadcrumb for the operator that is checking the logs.
        LOG.error('The [%s] section of your configuration file must be '
                  'configured for authentication with the service '
                  'endpoint.', group)
    raise exception.MissingAuthConfiguration(
        auth_type=conf_group.auth_type, group=group)


def get_session(group, auth=None):
    """Construct a keystoneauth1 Session from the options of a conf group.

    :param group: name of the conf group holding the ksa session options.
    :param auth: an auth plugin; loaded from the same group if not given.
    """
    if auth is None:
        auth = load_auth_plugin(group)
    return ks_loading.load_session_from_conf_options(CONF, group, auth=auth)


def get_ksa_adapter(group, ksa_session, region_name=None):
    """Construct a keystoneauth1 Adapter for the service of a conf group.

    A raise_exc=False adapter is returned, meaning responses >=400 return the
    Response object rather than raising an exception.

    :param group: name of the conf group providing the ksa adapter options
                  (service_type, valid_interfaces, endpoint_override, ...).
    :param ksa_session: the keystoneauth1 Session to send requests through.
    :param region_name: region of the endpoint to bind to. None keeps the
                        region configured in the group, if any, so that the
                        catalog picks the default endpoint.
    """
    conf_group = _get_conf_group(group)
    kwargs = {}
    if region_name:
        kwargs['region_name'] = region_name
    return ks_loading.load_adapter_from_conf_options(
        CONF, group, session=ksa_session, raise_exc=False,
        connect_retries=conf_group.http_retries, **kwargs)


def get_endpoint_regions(ksa_session, group):
    """Return the regions publishing an endpoint for a conf group's service.

    The configured region_name, when set, restricts the answer to itself.
    """
    conf_group = _get_conf_group(group)
    if conf_group.region_name:
        return {conf_group.region_name}

    access = ksa_session.auth.get_access(ksa_session)
    service_type = conf_group.service_type
    endpoints = access.service_catalog.get_endpoints(
        service_type=service_type)
    regions = set()
    for endpoint in endpoints.get(service_type, []):
        region = endpoint.get('region_id') or endpoint.get('region')
        if region:
            regions.add(region)
    LOG.debug('Regions publishing %(stype)s endpoints: %(regions)s',
              {'stype': service_type, 'regions': sorted(regions)})
    return regions
