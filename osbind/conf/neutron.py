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

from oslo_config import cfg

from osbind.conf import utils as confutils


DEFAULT_SERVICE_TYPE = 'network'
NEUTRON_GROUP = 'neutron'

neutron_group = cfg.OptGroup(
    NEUTRON_GROUP,
    title='Neutron Options',
    help="""
Configuration options for the networking service (neutron) bindings.
""")

neutron_opts = [
    cfg.IntOpt('list_page_size',
               default=0,
               min=0,
               help="""
Number of records requested per page when listing resources lazily.

Each page is fetched with a ``limit`` query parameter of this value and the
next page is requested with the marker returned by the previous one.

Possible values:

* 0: do not send a ``limit``; the server picks the page size
* Any positive integer
"""),
    cfg.IntOpt('http_retries',
               default=3,
               min=0,
               help="""
Number of times the HTTP session should retry a failed connection.

0 means connection is attempted only once. Setting it to any positive integer
means that on failure connection is retried that many times e.g. setting it
to 3 means total attempts to connect will be 4.

Possible values:

* Any integer value. 0 means connection is attempted only once
"""),
]


def register_opts(conf):
    conf.register_group(neutron_group)
    conf.register_opts(neutron_opts, group=neutron_group)
    confutils.register_ksa_opts(conf, neutron_group, DEFAULT_SERVICE_TYPE)


def list_opts():
    return {
        neutron_group: (
            neutron_opts +
            confutils.get_ksa_list_opts(DEFAULT_SERVICE_TYPE))
    }
