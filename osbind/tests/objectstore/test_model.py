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

from osbind import exception
from osbind.objectstore import model
from osbind import test


class ExtractArchiveResponseTestCase(test.TestCase):

    def test_create(self):
        errors = {'/c/a.txt': '400 Bad Request'}
        resp = model.ExtractArchiveResponse.create(2, errors)
        self.assertEqual(2, resp.created)
        self.assertEqual(errors, resp.errors)
        self.assertIsNot(errors, resp.errors)

    def test_create_copies_errors(self):
        errors = {}
        resp = model.ExtractArchiveResponse.create(1, errors)
        errors['/c/b.txt'] = '401 Unauthorized'
        self.assertEqual({}, resp.errors)

    def test_create_without_errors(self):
        self.assertRaises(ValueError,
                          model.ExtractArchiveResponse.create, 1, None)

    def test_equality(self):
        one = model.ExtractArchiveResponse.create(
            3, {'/c/x': '400 Bad Request', '/c/y': '413 Too Large'})
        two = model.ExtractArchiveResponse.create(
            3, {'/c/y': '413 Too Large', '/c/x': '400 Bad Request'})
        self.assertEqual(one, two)
        self.assertEqual(hash(one), hash(two))
        self.assertNotEqual(one, model.ExtractArchiveResponse.create(3, {}))
        self.assertNotEqual(one, one._replace(created=4))

    def test_not_equal_to_plain_tuple(self):
        resp = model.ExtractArchiveResponse.create(1, {})
        self.assertNotEqual((1, {}), resp)
        self.assertFalse(resp == (1, {}))

    def test_usable_in_set(self):
        resp = model.ExtractArchiveResponse.create(0, {})
        self.assertEqual(1, len({resp, model.ExtractArchiveResponse(0, {})}))


class ParseExtractArchiveTestCase(test.TestCase):

    def test_parse(self):
        resp = model.parse_extract_archive({
            'Number Files Created': 10,
            'Response Status': '400 Bad Request',
            'Response Body': '',
            'Errors': [['/c/bad', '403 Forbidden'],
                       ['/c/huge', '413 Request Entity Too Large']],
        })
        self.assertEqual(10, resp.created)
        self.assertEqual({'/c/bad': '403 Forbidden',
                          '/c/huge': '413 Request Entity Too Large'},
                         resp.errors)

    def test_parse_no_errors(self):
        resp = model.parse_extract_archive({'Number Files Created': 4,
                                            'Errors': []})
        self.assertEqual(model.ExtractArchiveResponse(4, {}), resp)

    def test_parse_defaults(self):
        resp = model.parse_extract_archive({})
        self.assertEqual(0, resp.created)
        self.assertEqual({}, resp.errors)

    def test_parse_null_errors(self):
        resp = model.parse_extract_archive({'Number Files Created': 1,
                                            'Errors': None})
        self.assertEqual({}, resp.errors)

    def test_parse_not_an_object(self):
        self.assertRaises(exception.ParseError,
                          model.parse_extract_archive, [])

    def test_parse_bad_created(self):
        for created in ('3', None, True, 1.5):
            self.assertRaises(exception.ParseError,
                              model.parse_extract_archive,
                              {'Number Files Created': created})

    def test_parse_bad_error_entry(self):
        for errors in (['/c/a'], [['/c/a']], [['/c/a', '400', 'x']]):
            self.assertRaises(exception.ParseError,
                              model.parse_extract_archive,
                              {'Number Files Created': 0, 'Errors': errors})
