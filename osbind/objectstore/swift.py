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

"""Bindings of the object storage service (swift) bulk operations."""

import urllib.parse

from oslo_log import log as logging

import osbind.conf
from osbind import exception
from osbind.objectstore import model
from osbind import rest
from osbind import utils

CONF = osbind.conf.CONF

LOG = logging.getLogger(__name__)

ARCHIVE_FORMATS = ('tar', 'tar.gz', 'tar.bz2')


class SwiftAPI(object):
    """API for interacting with the swift 1.0 API."""

    def __init__(self, session=None):
        """:param session: keystoneauth1 Session to send requests through.
                           If unspecified, one is created, with its auth
                           plugin, from the [swift] config options.
        """
        self._owns_session = session is None
        if session is None:
            session = utils.get_session(osbind.conf.swift.SWIFT_GROUP)
        self._session = session

    def get_configured_regions(self):
        """Return the names of the regions serving the object storage API."""
        return utils.get_endpoint_regions(
            self._session, osbind.conf.swift.SWIFT_GROUP)

    def get_bulk_api(self, region=None):
        adapter = utils.get_ksa_adapter(osbind.conf.swift.SWIFT_GROUP,
                                        self._session, region_name=region)
        return BulkAPI(adapter)

    def extract_archive(self, path, archive, archive_format='tar',
                        region=None):
        return self.get_bulk_api(region).extract_archive(
            path, archive, archive_format)

    def close(self):
        if self._owns_session and self._session.session is not None:
            self._session.session.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()


class BulkAPI(rest.RESTClient):
    """Bulk middleware operations against one region's account endpoint."""

    def extract_archive(self, path, archive, archive_format='tar'):
        """Upload an archive whose members become objects under path.

        :param path: ``container`` or ``container/prefix`` the archive is
                     extracted to; an empty path creates one container per
                     top-level directory of the archive.
        :param archive: the archive bytes or a file-like object.
        :param archive_format: one of tar, tar.gz and tar.bz2.
        :returns: an ExtractArchiveResponse, or None if the container was
                  not found.
        """
        if archive_format not in ARCHIVE_FORMATS:
            raise exception.InvalidArchiveFormat(
                archive_format=archive_format,
                supported=', '.join(ARCHIVE_FORMATS))

        url = self._url('/' + urllib.parse.quote(path.strip('/')),
                        {'extract-archive': archive_format})
        resp = self._request('PUT', url, data=archive)
        if resp is None:
            LOG.debug('Container of %s not found, nothing extracted', path)
            return None

        result = model.parse_extract_archive(self._json(resp))
        if result.errors:
            LOG.warning('Extracting the archive to %(path)s failed for '
                        '%(count)d files', {'path': path,
                                            'count': len(result.errors)})
        return result
