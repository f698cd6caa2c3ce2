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

import collections

from osbind import exception
from osbind.i18n import _


class ExtractArchiveResponse(collections.namedtuple('ExtractArchiveResponse',
                                                    ['created', 'errors'])):
    """Outcome of a bulk archive extraction.

    :ivar created: number of files created.
    :ivar errors: for each path that failed to create, the corresponding
                  error status.
    """
    __slots__ = ()

    @classmethod
    def create(cls, created, errors):
        if errors is None:
            raise ValueError('errors')
        return cls(created, dict(errors))

    def __eq__(self, other):
        if type(other) is not type(self):
            return False
        return tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return hash((self.created, tuple(sorted(self.errors.items()))))


def parse_extract_archive(payload):
    """Parse the JSON answer of the bulk middleware to an extract-archive.

    The middleware reports {"Number Files Created": N, "Errors": [[path,
    status], ...]} along with its own response status and body.
    """
    if not isinstance(payload, dict):
        raise exception.ParseError(
            reason=_('extract archive response must be an object'))

    created = payload.get('Number Files Created', 0)
    if isinstance(created, bool) or not isinstance(created, int):
        raise exception.ParseError(
            reason=_('Number Files Created must be an integer'))

    errors = {}
    for error in payload.get('Errors') or []:
        if not isinstance(error, (list, tuple)) or len(error) != 2:
            raise exception.ParseError(
                reason=_('each error must be a [path, status] pair'))
        path, status = error
        errors[path] = status
    return ExtractArchiveResponse.create(created, errors)
