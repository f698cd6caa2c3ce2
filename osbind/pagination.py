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

"""Marker based pagination of the OpenStack list APIs.

A list call returns one bounded page of records together with a ``*_links``
collection. When more records exist, the ``next`` link carries the marker
(the id of the last record of the page) the following request resumes
after. The iterators below turn repeated page fetches into a single lazy,
forward-only sequence.
"""

import collections
import urllib.parse

from oslo_log import log as logging

from osbind import exception
from osbind.i18n import _

LOG = logging.getLogger(__name__)


class PaginationOptions(collections.namedtuple('PaginationOptions',
                                               ['marker', 'limit'])):
    """Query options of a single page request.

    :param marker: resume after the record with this id.
    :param limit: maximum number of records in the page.
    """
    __slots__ = ()

    def __new__(cls, marker=None, limit=None):
        if limit is not None:
            if isinstance(limit, bool) or not isinstance(limit, int):
                raise exception.InvalidPaginationOption(
                    option='limit', reason=_('must be an integer'))
            if limit < 1:
                raise exception.InvalidPaginationOption(
                    option='limit', reason=_('must be greater than 0'))
        return super(PaginationOptions, cls).__new__(cls, marker, limit)

    def with_marker(self, marker):
        return self._replace(marker=marker)

    def to_params(self):
        """Return the query parameters of these options, unset ones left out.
        """
        params = {}
        if self.limit is not None:
            params['limit'] = self.limit
        if self.marker is not None:
            params['marker'] = self.marker
        return params


class Page(object):
    """One page of a list response.

    Holds the records in server order and the opaque marker of the next
    page, None when this page is the last one.
    """

    __slots__ = ('_items', '_next_marker')

    def __init__(self, items=(), next_marker=None):
        self._items = tuple(items)
        self._next_marker = next_marker

    @property
    def items(self):
        return self._items

    @property
    def next_marker(self):
        return self._next_marker

    def __iter__(self):
        return iter(self._items)

    def __len__(self):
        return len(self._items)

    def __eq__(self, other):
        if not isinstance(other, Page):
            return NotImplemented
        return (self._items == other._items and
                self._next_marker == other._next_marker)

    def __ne__(self, other):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __hash__(self):
        return hash((self._items, self._next_marker))

    def __repr__(self):
        return '%s(items=%r, next_marker=%r)' % (
            self.__class__.__name__, list(self._items), self._next_marker)


def marker_from_links(links):
    """Extract the next page marker from a ``*_links`` collection.

    :param links: the list of link dicts of a list response, or None.
    :returns: the marker query parameter of the ``next`` link, or None when
              there is no next page.
    :raises: ParseError if the links are not a list of objects.
    """
    if links is None:
        return None
    if not isinstance(links, list):
        raise exception.ParseError(reason=_('links must be a list'))

    for link in links:
        if not isinstance(link, dict):
            raise exception.ParseError(reason=_('link must be an object'))
        if link.get('rel') != 'next':
            continue
        href = link.get('href')
        if not isinstance(href, str):
            raise exception.ParseError(
                reason=_('the next link href must be a string'))
        query = urllib.parse.urlsplit(href).query
        markers = urllib.parse.parse_qs(query).get('marker')
        if markers:
            return markers[-1]
    return None


def iter_pages(fetch_page, options=None):
    """Lazily fetch pages until one comes back without a next marker.

    Pages are requested one at a time, only when the caller pulls past the
    previous one. Exceptions raised by fetch_page propagate to that pull.

    :param fetch_page: callable taking PaginationOptions, returning a Page.
    :param options: options of the first request; their limit is kept for
                    every following request.
    """
    options = options or PaginationOptions()
    while True:
        page = fetch_page(options)
        yield page

        marker = page.next_marker
        if marker is None:
            return
        if marker == options.marker:
            LOG.warning('The server returned the marker %s of the page it '
                        'was asked for; stopping pagination.', marker)
            return
        options = options.with_marker(marker)


def iter_items(fetch_page, options=None):
    """Lazily yield the records of every page, in server order."""
    for page in iter_pages(fetch_page, options):
        for item in page:
            yield item
