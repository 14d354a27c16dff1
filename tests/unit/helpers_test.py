# -*- coding: utf-8 -*-
# objsto, minimal Python client for Amazon S3 Compatible Cloud Storage,
# (C) 2026 objsto authors.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

import hashlib
import io
from unittest import TestCase

from objsto.error import HashError, SeekError, ValidationError
from objsto.helpers import (ZERO_SHA256_HASH, check_object_name,
                            hash_payload, headers_to_strings)

from .objsto_mocks import SpyStream


class HashPayloadTest(TestCase):
    def test_none_body(self):
        self.assertEqual(hash_payload(None), (ZERO_SHA256_HASH, 0))

    def test_empty_body(self):
        self.assertEqual(hash_payload(io.BytesIO()), (ZERO_SHA256_HASH, 0))

    def test_body_is_hashed_and_rewound(self):
        data = b"upload content"
        stream = io.BytesIO(data)
        content_sha256, size = hash_payload(stream)
        self.assertEqual(content_sha256, hashlib.sha256(data).hexdigest())
        self.assertEqual(size, len(data))
        self.assertEqual(stream.tell(), 0)
        self.assertEqual(stream.read(), data)

    def test_large_body(self):
        data = b"x" * (200 * 1024 + 7)
        content_sha256, size = hash_payload(io.BytesIO(data))
        self.assertEqual(content_sha256, hashlib.sha256(data).hexdigest())
        self.assertEqual(size, len(data))

    def test_stream_is_rewound_to_start(self):
        stream = SpyStream(b"abc")
        hash_payload(stream)
        self.assertEqual(stream.seeks, [(0, 0)])
        self.assertEqual(stream.tell(), 0)

    def test_stream_is_rewound_to_current_position(self):
        data = b"header|upload content"
        stream = io.BytesIO(data)
        stream.seek(7)
        content_sha256, size = hash_payload(stream)
        self.assertEqual(content_sha256, hashlib.sha256(data[7:]).hexdigest())
        self.assertEqual(size, len(data) - 7)
        self.assertEqual(stream.tell(), 7)

    def test_read_failure(self):
        with self.assertRaises(HashError) as ctx:
            hash_payload(SpyStream(b"abc", fail_read=True))
        self.assertIn("failed to hash body", str(ctx.exception))
        self.assertIsInstance(ctx.exception.cause, OSError)

    def test_seek_failure(self):
        with self.assertRaises(SeekError) as ctx:
            hash_payload(SpyStream(b"abc", fail_seek=True))
        self.assertIn("failed to seek body", str(ctx.exception))

    def test_text_stream(self):
        with self.assertRaises(HashError):
            hash_payload(io.StringIO("text"))


class CheckObjectNameTest(TestCase):
    def test_blank(self):
        with self.assertRaises(ValidationError) as ctx:
            check_object_name("")
        self.assertIn("cannot be blank", str(ctx.exception))

    def test_blank_is_value_error(self):
        with self.assertRaises(ValueError):
            check_object_name("")

    def test_not_string(self):
        with self.assertRaises(TypeError):
            check_object_name(1234)

    def test_valid(self):
        check_object_name("dir/object.txt")


class HeadersToStringsTest(TestCase):
    def test_signature_redacted(self):
        text = headers_to_strings(
            {
                "authorization": (
                    "AWS4-HMAC-SHA256 Credential=minio/20150620/us-east-1/"
                    "s3/aws4_request, SignedHeaders=host, Signature=abcdef01"
                ),
                "x-amz-date": "20150620T010203Z",
            },
            titled_key=True,
        )
        self.assertIn("Signature=*REDACTED*", text)
        self.assertNotIn("abcdef01", text)
        self.assertIn("X-Amz-Date: 20150620T010203Z", text)

    def test_plain(self):
        self.assertEqual(
            headers_to_strings({"a": ["1", "2"], "b": "3"}),
            "a: 1\na: 2\nb: 3",
        )
