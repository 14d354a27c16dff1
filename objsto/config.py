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

"""Client configuration."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass, field, fields
from typing import TYPE_CHECKING, Any, Optional

from .error import ConfigError
from .redact import Redact

if TYPE_CHECKING:
    from .api import Client, HttpClient
    from .logger import Logger

_SCHEMES = ("http", "https")


def _read_secret(value: str) -> str:
    """Return content of file if value names an existing file."""
    if value and os.path.isfile(value):
        with open(value, encoding="utf-8") as secret_file:
            return secret_file.read().strip()
    return value


@dataclass(frozen=True)
class Config:
    """
    Represents client configuration of an S3 compatible service.

    `secret_key` is either the secret itself or path to a file containing
    it; it is stored as `Redact` and never rendered in clear text.
    """

    region: str
    host: str
    bucket: str
    access_key: str
    secret_key: Redact = field(default_factory=Redact)
    scheme: str = "https"

    def __post_init__(self):
        secret = self.secret_key
        if isinstance(secret, Redact):
            secret = secret.reveal()
        object.__setattr__(self, "secret_key", Redact(_read_secret(secret)))

        for name in ("region", "host", "bucket", "access_key"):
            if not getattr(self, name):
                raise ConfigError(f"{name} must not be empty")
        if not self.secret_key:
            raise ConfigError("secret_key must not be empty")
        if self.scheme not in _SCHEMES:
            raise ConfigError(
                f"scheme must be one of {', '.join(_SCHEMES)}; "
                f"got {self.scheme!r}"
            )

    @classmethod
    def from_env(cls, prefix: str = "S3_") -> Config:
        """Create new config with values from environment variables."""
        def _get(name: str) -> str:
            return os.environ.get(prefix + name) or ""

        return cls(
            region=_get("REGION"),
            host=_get("HOST"),
            bucket=_get("BUCKET"),
            access_key=_get("ACCESS_KEY"),
            secret_key=Redact(_get("SECRET_KEY")),
            scheme=_get("SCHEME") or "https",
        )

    def to_dict(self) -> dict[str, str]:
        """Convert to dictionary with redacted secret."""
        values = {}
        for item in fields(self):
            value = getattr(self, item.name)
            values[item.name] = (
                value.redacted() if isinstance(value, Redact) else value
            )
        return values

    def to_json(self, **kwargs: Any) -> str:
        """Convert to JSON text with redacted secret."""
        return json.dumps(self.to_dict(), **kwargs)

    def new(
            self,
            logger: Optional[Logger] = None,
            http_client: Optional[HttpClient] = None,
    ) -> Client:
        """Create new client from this config."""
        from .api import Client  # pylint: disable=import-outside-toplevel
        return Client(self, logger=logger, http_client=http_client)
