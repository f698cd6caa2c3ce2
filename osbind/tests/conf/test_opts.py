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

import osbind.conf
from osbind.conf import opts
from osbind import test


class ListOptsTestCase(test.TestCase):

    def _opts_by_group(self):
        return {getattr(group, 'name', group): [opt.dest for opt in group_opts]
                for group, group_opts in opts.list_opts()}

    def test_groups(self):
        self.assertEqual({'neutron', 'swift'}, set(self._opts_by_group()))

    def test_neutron_opts(self):
        names = self._opts_by_group()['neutron']
        for name in ('list_page_size', 'http_retries', 'auth_type',
                     'service_type', 'region_name', 'valid_interfaces',
                     'timeout', 'username', 'password'):
            self.assertIn(name, names)
        self.assertNotIn('min_version', names)

    def test_swift_opts(self):
        names = self._opts_by_group()['swift']
        self.assertIn('http_retries', names)
        self.assertNotIn('list_page_size', names)


class RegisteredOptsTestCase(test.TestCase):

    def test_service_type_defaults(self):
        self.assertEqual('network', osbind.conf.CONF.neutron.service_type)
        self.assertEqual('object-store', osbind.conf.CONF.swift.service_type)

    def test_valid_interfaces_default(self):
        self.assertEqual(['internal', 'public'],
                         osbind.conf.CONF.neutron.valid_interfaces)

    def test_version_opts_ignored(self):
        self.flags(version='2.0', group='neutron')
        self.assertIsNone(osbind.conf.CONF.neutron.version)

    def test_list_page_size_min(self):
        self.assertRaises(ValueError, self.flags, list_page_size=-1,
                          group='neutron')

    def test_unknown_group(self):
        self.assertRaises(cfg.NoSuchOptError, getattr, osbind.conf.CONF,
                          'compute')
