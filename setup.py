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
import os
import re

import setuptools

project = 'osbind'


def parse_requirements(filename):
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)), filename)
    with open(path) as f:
        return [line.strip() for line in f
                if line.strip() and not line.startswith('#')]


def get_version():
    path = os.path.join(os.path.dirname(os.path.abspath(__file__)),
                        project, 'version.py')
    with open(path) as f:
        match = re.search(r'^version_info = \(([\d, ]+)\)', f.read(), re.M)
    return '.'.join(part.strip() for part in match.group(1).split(','))


setuptools.setup(
      name=project,
      version=get_version(),
      description='OpenStack networking and object storage API bindings',
      author='OpenStack',
      url='http://www.openstack.org/',
      classifiers=[
          'Environment :: OpenStack',
          'Intended Audience :: Information Technology',
          'Intended Audience :: Developers',
          'License :: OSI Approved :: Apache Software License',
          'Operating System :: POSIX :: Linux',
          'Programming Language :: Python',
          'Programming Language :: Python :: 3',
          ],
      packages=setuptools.find_packages(),
      install_requires=parse_requirements('requirements.txt'),
      extras_require={
          'test': parse_requirements('test-requirements.txt'),
      },
      python_requires='>=3.6',
      include_package_data=True,
      entry_points={
          'oslo.config.opts': [
              'osbind.conf = osbind.conf.opts:list_opts',
          ],
      })
