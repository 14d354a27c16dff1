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


"""
objsto.signer
~~~~~~~~~~~~~

This module implements AWS Signature version '4' request signing for the
S3 service. Every request signs exactly the host, x-amz-content-sha256 and
x-amz-date headers; query strings are never signed.

"""

from __future__ import absolute_import, annotations

import hashlib
import hmac
from datetime import datetime

from . import time
from .helpers import sha256_hash

SIGN_V4_ALGORITHM = "AWS4-HMAC-SHA256"
SERVICE_NAME = "s3"
SIGNED_HEADERS = "host;x-amz-content-sha256;x-amz-date"


def _hmac_hash(key: bytes, data: bytes) -> bytes:
    """Return HMacSHA256 digest of given key and data."""
    return hmac.new(key, data, hashlib.sha256).digest()


def _get_scope(date: datetime, region: str) -> str:
    """Get scope string."""
    return (
        f"{time.to_signer_date(date)}/{region}/{SERVICE_NAME}/aws4_request"
    )


def _get_canonical_request(
        method: str,
        path: str,
        host: str,
        content_sha256: str,
        date: datetime,
) -> str:
    """Get canonical request."""
    canonical_headers = (
        f"host:{host}\n"
        f"x-amz-content-sha256:{content_sha256}\n"
        f"x-amz-date:{time.to_amz_date(date)}\n"
    )

    # CanonicalRequest =
    #   HTTPRequestMethod + '\n' +
    #   CanonicalURI + '\n' +
    #   CanonicalQueryString + '\n' +
    #   CanonicalHeaders + '\n' +
    #   SignedHeaders + '\n' +
    #   HexEncode(Hash(RequestPayload))
    return (
        f"{method}\n"
        f"{path}\n"
        f"\n"
        f"{canonical_headers}\n"
        f"{SIGNED_HEADERS}\n"
        f"{content_sha256}"
    )


def _get_string_to_sign(
        date: datetime,
        scope: str,
        canonical_request_hash: str,
) -> str:
    """Get string-to-sign."""
    return (
        f"{SIGN_V4_ALGORITHM}\n{time.to_amz_date(date)}\n{scope}\n"
        f"{canonical_request_hash}"
    )


def _get_signing_key(secret_key: str, date: datetime, region: str) -> bytes:
    """Get signing key."""

    date_key = _hmac_hash(
        ("AWS4" + secret_key).encode(),
        time.to_signer_date(date).encode(),
    )
    date_region_key = _hmac_hash(date_key, region.encode())
    date_region_service_key = _hmac_hash(
        date_region_key, SERVICE_NAME.encode(),
    )
    return _hmac_hash(date_region_service_key, b"aws4_request")


def _get_signature(signing_key: bytes, string_to_sign: str) -> str:
    """Get signature."""
    return hmac.new(
        signing_key, string_to_sign.encode(), hashlib.sha256,
    ).hexdigest()


def _get_authorization(access_key: str, scope: str, signature: str) -> str:
    """Get authorization."""
    return (
        f"{SIGN_V4_ALGORITHM} Credential={access_key}/{scope}, "
        f"SignedHeaders={SIGNED_HEADERS}, Signature={signature}"
    )


def sign_v4_s3(  # pylint: disable=too-many-arguments
        method: str,
        region: str,
        host: str,
        path: str,
        access_key: str,
        secret_key: str,
        content_sha256: str,
        date: datetime,
) -> dict[str, str]:
    """
    Do signature V4 of given request for S3 service.

    Returns the headers to be set on the request: Authorization, x-amz-date
    and x-amz-content-sha256. The same `date` and `content_sha256` go into
    the signature and into the returned headers.
    """

    scope = _get_scope(date, region)
    canonical_request = _get_canonical_request(
        method, path, host, content_sha256, date,
    )
    string_to_sign = _get_string_to_sign(
        date, scope, sha256_hash(canonical_request),
    )
    signing_key = _get_signing_key(secret_key, date, region)
    signature = _get_signature(signing_key, string_to_sign)
    return {
        "Authorization": _get_authorization(access_key, scope, signature),
        "x-amz-date": time.to_amz_date(date),
        "x-amz-content-sha256": content_sha256,
    }
