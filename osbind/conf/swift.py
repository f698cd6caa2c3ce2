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


DEFAULT_SERVICE_TYPE = 'object-store'
SWIFT_GROUP = 'swift'

swift_group = cfg.OptGroup(
    SWIFT_GROUP,
    title='Swift Options',
    help="""
Configuration options for the object storage service (swift) bindings.
""")

swift_opts = [
    cfg.IntOpt('http_retries',
               default=3,
               min=0,
               help="""
Number of times the HTTP session should retry a failed connection.

0 means connection is attempted only once.
"""),
]


def register_opts(conf):
    conf.register_group(swift_group)
    conf.register_opts(swift_opts, group=swift_group)
    confutils.register_ksa_opts(conf, swift_group, DEFAULT_SERVICE_TYPE)


def list_opts():
    return {
        swift_group: (
            swift_opts +
            confutils.get_ksa_list_opts(DEFAULT_SERVICE_TYPE))
    }
