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

import json
import os
import pickle
import tempfile
from unittest import TestCase

import mock

from objsto import Client
from objsto.config import Config
from objsto.error import ConfigError
from objsto.redact import Redact

SECRET = "zuf+tfteSlswRu7BJ86wekitnifILbZam1KYY3TG"


def _config(**kwargs):
    values = {
        "region": "us-east-1",
        "host": "localhost:9000",
        "bucket": "test-bucket",
        "access_key": "minio",
        "secret_key": SECRET,
    }
    values.update(kwargs)
    return Config(**values)


class RedactTest(TestCase):
    def test_redacted_rendering(self):
        secret = Redact(SECRET)
        self.assertEqual(str(secret), "--redacted--")
        self.assertEqual(repr(secret), "--redacted--")
        self.assertEqual(f"{secret}", "--redacted--")
        self.assertEqual("%s" % secret, "--redacted--")
        self.assertEqual(secret.reveal(), SECRET)

    def test_unset(self):
        self.assertEqual(str(Redact()), "--unset--")
        self.assertFalse(Redact(""))

    def test_immutable(self):
        with self.assertRaises(AttributeError):
            Redact(SECRET)._value = "other"

    def test_not_string(self):
        with self.assertRaises(TypeError):
            Redact(1234)

    def test_pickle(self):
        self.assertEqual(
            pickle.loads(pickle.dumps(Redact(SECRET))).reveal(), SECRET,
        )


class ConfigTest(TestCase):
    def test_secret_is_wrapped(self):
        config = _config()
        self.assertIsInstance(config.secret_key, Redact)
        self.assertEqual(config.secret_key.reveal(), SECRET)
        self.assertNotIn(SECRET, repr(config))
        self.assertIn("--redacted--", repr(config))

    def test_to_json(self):
        data = json.loads(_config().to_json())
        self.assertEqual(data["secret_key"], "--redacted--")
        self.assertEqual(data["bucket"], "test-bucket")
        self.assertEqual(data["scheme"], "https")

    def test_missing_values(self):
        for name in ("region", "host", "bucket", "access_key", "secret_key"):
            with self.assertRaises(ConfigError):
                _config(**{name: ""})

    def test_invalid_scheme(self):
        with self.assertRaises(ValueError):
            _config(scheme="ftp")

    def test_frozen(self):
        with self.assertRaises(AttributeError):
            _config().bucket = "other"

    def test_secret_from_file(self):
        with tempfile.NamedTemporaryFile(
                "w", suffix=".secret", delete=False,
        ) as secret_file:
            secret_file.write(SECRET + "\n")
        try:
            config = _config(secret_key=secret_file.name)
        finally:
            os.remove(secret_file.name)
        self.assertEqual(config.secret_key.reveal(), SECRET)

    @mock.patch.dict(os.environ, {
        "S3_REGION": "garage",
        "S3_SCHEME": "http",
        "S3_HOST": "container4:3900",
        "S3_BUCKET": "testbucket",
        "S3_ACCESS_KEY": "GKdf62cf3b0b0edb99e0eb138c",
        "S3_SECRET_KEY": SECRET,
    })
    def test_from_env(self):
        config = Config.from_env()
        self.assertEqual(config.region, "garage")
        self.assertEqual(config.scheme, "http")
        self.assertEqual(config.host, "container4:3900")
        self.assertEqual(config.bucket, "testbucket")
        self.assertEqual(config.access_key, "GKdf62cf3b0b0edb99e0eb138c")
        self.assertEqual(config.secret_key.reveal(), SECRET)

    @mock.patch.dict(os.environ, {
        "OBJ_REGION": "us-east-1",
        "OBJ_HOST": "s3.example.com",
        "OBJ_BUCKET": "b",
        "OBJ_ACCESS_KEY": "a",
        "OBJ_SECRET_KEY": "s",
    }, clear=True)
    def test_from_env_prefix_and_default_scheme(self):
        config = Config.from_env(prefix="OBJ_")
        self.assertEqual(config.scheme, "https")
        self.assertEqual(config.host, "s3.example.com")

    @mock.patch.dict(os.environ, {}, clear=True)
    def test_from_env_missing(self):
        with self.assertRaises(ConfigError):
            Config.from_env()

    def test_new(self):
        http_client = mock.Mock()
        client = _config().new(http_client=http_client)
        self.assertIsInstance(client, Client)
        self.assertEqual(client.config.bucket, "test-bucket")
