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
"""keystoneauth1 option helpers shared by the service option groups."""

from keystoneauth1 import loading as ks_loading
from oslo_config import cfg


_ADAPTER_VERSION_OPTS = ('version', 'min_version', 'max_version')


def get_ksa_adapter_opts(default_service_type):
    """Adapter options of a service group, without the API version options.

    Interfaces default to internal then public.
    """
    opts = [opt for opt in
            ks_loading.get_adapter_conf_options(include_deprecated=False)
            if opt.dest not in _ADAPTER_VERSION_OPTS]

    cfg.set_defaults(opts,
                     valid_interfaces=['internal', 'public'],
                     service_type=default_service_type)
    return opts


def _ignored_opt(name):
    # Reads back as None whatever it is set to. The ksa adapter loader still
    # looks the option up.
    return cfg.Opt(name, type=lambda x: None)


def register_ksa_opts(conf, group, default_service_type):
    """Register the keystoneauth session, auth and adapter options of a group.

    :param conf: the ConfigOpts to register the options in.
    :param group: OptGroup, or its name, of the service.
    :param default_service_type: default of the service_type option.
    """
    # keystoneauth1.loading only accepts group names.
    group = getattr(group, 'name', group)
    ks_loading.register_session_conf_options(conf, group)
    ks_loading.register_auth_conf_options(conf, group)
    conf.register_opts(get_ksa_adapter_opts(default_service_type),
                       group=group)
    for name in _ADAPTER_VERSION_OPTS:
        conf.register_opt(_ignored_opt(name), group=group)


def get_ksa_list_opts(default_service_type):
    """Every keystoneauth option a service group exposes, for list_opts()."""
    return (ks_loading.get_session_conf_options() +
            ks_loading.get_auth_common_conf_options() +
            ks_loading.get_auth_plugin_conf_options('password') +
            ks_loading.get_auth_plugin_conf_options('v3password') +
            ks_loading.get_auth_plugin_conf_options('v3token') +
            get_ksa_adapter_opts(default_service_type))
