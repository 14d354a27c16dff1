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

"""Helper functions."""

from __future__ import absolute_import, annotations

import hashlib
import platform
import re
from typing import BinaryIO, Mapping

from . import __title__, __version__
from .error import HashError, SeekError, ValidationError

_DEFAULT_USER_AGENT = (
    f"objsto ({platform.system()}; {platform.machine()}) "
    f"{__title__}/{__version__}"
)

ZERO_SHA256_HASH = (
    "e3b0c44298fc1c149afbf4c8996fb92427ae41e4649b934ca495991b7852b855"
)

_READ_CHUNK_SIZE = 64 * 1024  # 64KiB


def sha256_hash(data: str | bytes | None) -> str:
    """Compute SHA-256 of data and return hash as hex encoded value."""
    data = data or b""
    hasher = hashlib.sha256()
    hasher.update(data.encode() if isinstance(data, str) else data)
    return hasher.hexdigest()


def hash_payload(stream: BinaryIO | None) -> tuple[str, int]:
    """
    Compute SHA-256 hex digest and length of given stream.

    The stream is read from its current position till EOF and then rewound
    to that position, so exactly the hashed bytes are sent as request body
    afterwards. Absent stream gives hash of zero bytes and zero length.
    """
    if stream is None:
        return ZERO_SHA256_HASH, 0

    try:
        start = stream.tell()
    except (OSError, AttributeError, ValueError) as exc:
        raise SeekError("failed to seek body", exc) from exc

    hasher = hashlib.sha256()
    size = 0
    try:
        while True:
            data = stream.read(_READ_CHUNK_SIZE)
            if not data:
                break  # EOF reached
            if not isinstance(data, bytes):
                raise TypeError("read() must return 'bytes' object")
            hasher.update(data)
            size += len(data)
    except (OSError, AttributeError, TypeError, ValueError) as exc:
        raise HashError("failed to hash body", exc) from exc

    try:
        stream.seek(start)
    except (OSError, AttributeError, ValueError) as exc:
        raise SeekError("failed to seek body", exc) from exc

    return hasher.hexdigest(), size


def check_object_name(object_name: str):
    """Check object name is a non-empty string."""
    if not isinstance(object_name, str):
        raise TypeError(
            f"object name must be str, got {type(object_name).__name__}",
        )
    if not object_name:
        raise ValidationError("object cannot be blank")


def headers_to_strings(
        headers: Mapping[str, str | list[str] | tuple[str]],
        titled_key: bool = False,
) -> str:
    """Convert HTTP headers to multi-line string."""
    values = []
    for key, value in headers.items():
        key = key.title() if titled_key else key
        for item in value if isinstance(value, (list, tuple)) else [value]:
            item = re.sub(
                r"Signature=([0-9a-f]+)", "Signature=*REDACTED*", item,
            ) if titled_key else item
            values.append(f"{key}: {item}")
    return "\n".join(values)
