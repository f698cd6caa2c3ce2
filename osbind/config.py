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

from oslo_log import log

import osbind.conf
from osbind import version


CONF = osbind.conf.CONF

_EXTRA_DEFAULT_LOG_LEVELS = ['keystoneauth=INFO', 'urllib3=WARN']


def set_log_defaults():
    # We use the oslo.log default log levels and add only the extra levels
    # that the HTTP stack underneath the bindings needs.
    log.set_defaults(default_log_levels=log.get_default_log_levels() +
                     _EXTRA_DEFAULT_LOG_LEVELS)


def parse_args(argv, default_config_files=None, setup_logging=True):
    """Load configuration files and optionally configure oslo.log.

    :param argv: the command line, argv[0] being the program name.
    :param default_config_files: config files to load when none is given
                                 on the command line.
    :param setup_logging: set to False when the embedding application
                          already configured logging.
    """
    log.register_options(CONF)
    set_log_defaults()

    CONF(argv[1:],
         project='osbind',
         version=version.version_string(),
         default_config_files=default_config_files)

    if setup_logging:
        log.setup(CONF, 'osbind')
