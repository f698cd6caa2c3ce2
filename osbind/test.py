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

"""Base classes for our unit tests.

Allows overriding of config options for use of fakes.

"""

import fixtures
from oslo_log.fixture import logging_error as log_fixture
from oslo_log import log as logging
import testtools

import osbind.conf
from osbind.tests import fixtures as osbind_fixtures

CONF = osbind.conf.CONF

logging.register_options(CONF)
CONF.set_override('use_stderr', False)
logging.setup(CONF, 'osbind')


class TestCase(testtools.TestCase):
    """Test case base class for all unit tests."""

    def setUp(self):
        """Run before each test method to initialize test environment."""
        super(TestCase, self).setUp()
        self.useFixture(log_fixture.get_logging_handle_error_fixture())

        self.stdlog = osbind_fixtures.StandardLogging()
        self.useFixture(self.stdlog)

        self.useFixture(osbind_fixtures.ConfFixture(CONF))
        self.useFixture(fixtures.EnvironmentVariable('http_proxy'))

    def flags(self, **kw):
        """Override config options for a test."""
        group = kw.pop('group', None)
        for k, v in kw.items():
            CONF.set_override(k, v, group)


class TestingException(Exception):
    pass
