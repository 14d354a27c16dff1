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
Simple Storage Service (aka S3) client to get and put objects.
"""

from __future__ import absolute_import, annotations

import os
from dataclasses import dataclass
from datetime import timedelta
from time import monotonic
from typing import Any, BinaryIO, Optional

import certifi
import urllib3
from typing_extensions import Protocol
from urllib3._collections import HTTPHeaderDict
from urllib3.exceptions import HTTPError

try:
    from urllib3.response import BaseHTTPResponse  # type: ignore[attr-defined]
except ImportError:
    from urllib3.response import HTTPResponse as BaseHTTPResponse

from urllib3.util import Timeout

from . import time
from .config import Config
from .error import HttpError, S3Error, TransportError
from .helpers import (_DEFAULT_USER_AGENT, check_object_name, hash_payload,
                      headers_to_strings)
from .logger import Logger, StdLogger
from .signer import sign_v4_s3

_MAX_ERROR_BODY_SIZE = 4 * 1024  # 4KiB


class HttpClient(Protocol):
    """typing stub for urllib3.PoolManager like HTTP client."""

    def urlopen(
            self, method: str, url: str, redirect: bool = True, **kw: Any,
    ) -> BaseHTTPResponse:
        """Perform HTTP request and return the response."""


@dataclass(frozen=True)
class Request:
    """Signed HTTP request ready to be sent."""

    method: str
    url: str
    headers: HTTPHeaderDict
    body: Optional[BinaryIO] = None


class Client:
    """
    Simple Storage Service (aka S3) client to get and put objects of one
    bucket with path-style addressing.
    """
    _config: Config
    _logger: Logger
    _http: HttpClient

    def __init__(
            self,
            config: Config,
            logger: Optional[Logger] = None,
            http_client: Optional[HttpClient] = None,
            cert_check: bool = True,
    ):
        """
        Initializes a new client object.

        Args:
            config (Config):
                Region, endpoint, bucket and credentials of the S3 service.

            logger (Optional[Logger], default=None):
                Structured logger; logs to `objsto` standard logger if not
                provided.

            http_client (Optional[HttpClient], default=None):
                Customized HTTP client, usually `urllib3.PoolManager`.
                Timeouts and retries are up to this client.

            cert_check (bool, default=True):
                Flag to enable/disable server certificate validation
                for HTTPS connections of the default HTTP client.

        Notes:
            The client holds only immutable configuration, so it is safe to
            share between threads. A body stream passed to `put_object` must
            not be shared by concurrent calls.

        Example:
            >>> import urllib3
            >>> from objsto import Client, Config
            >>>
            >>> client = Client(
            ...     Config(
            ...         region="us-east-1",
            ...         host="localhost:9000",
            ...         bucket="my-bucket",
            ...         access_key="ACCESS-KEY",
            ...         secret_key="SECRET-KEY",
            ...         scheme="http",
            ...     ),
            ...     http_client=urllib3.PoolManager(timeout=30),
            ... )
        """
        if http_client is not None and not callable(
                getattr(http_client, "urlopen", None),
        ):
            raise TypeError(
                "HTTP client should be urllib3.PoolManager like object, "
                f"got {type(http_client).__name__}",
            )

        self._config = config
        self._logger = logger or StdLogger()
        self._owns_http = http_client is None

        timeout = timedelta(minutes=5).seconds
        self._http = http_client or urllib3.PoolManager(
            timeout=Timeout(connect=timeout, read=timeout),
            maxsize=10,
            cert_reqs='CERT_REQUIRED' if cert_check else 'CERT_NONE',
            ca_certs=os.environ.get('SSL_CERT_FILE') or certifi.where(),
            retries=False,
        )

    def __del__(self):
        if getattr(self, "_owns_http", False):
            self._http.clear()

    @property
    def config(self) -> Config:
        """Get client configuration."""
        return self._config

    def _build_request(
            self,
            method: str,
            object_name: str,
            body: Optional[BinaryIO] = None,
    ) -> Request:
        """Build signed HTTP request of given object."""
        check_object_name(object_name)

        config = self._config
        path = f"/{config.bucket}/{object_name}"
        url = f"{config.scheme}://{config.host}{path}"
        date = time.utcnow()

        self._logger.debug(
            "signing request",
            "region", config.region,
            "host", config.host,
            "path", path,
            "access_key", config.access_key,
            "now", time.to_amz_date(date),
        )

        content_sha256, size = hash_payload(body)

        headers = HTTPHeaderDict()
        headers["Host"] = config.host
        headers["User-Agent"] = _DEFAULT_USER_AGENT
        if method == "PUT":
            headers["Content-Length"] = str(size)
        headers.update(
            sign_v4_s3(
                method=method,
                region=config.region,
                host=config.host,
                path=path,
                access_key=config.access_key,
                secret_key=config.secret_key.reveal(),
                content_sha256=content_sha256,
                date=date,
            ),
        )

        self._logger.debug(
            "signed request",
            "url", url,
            "host", config.host,
            "headers", headers_to_strings(headers, titled_key=True),
        )

        return Request(method=method, url=url, headers=headers, body=body)

    def _send_request(self, request: Request) -> BaseHTTPResponse:
        """Send HTTP request and return successful response unconsumed."""
        start = monotonic()
        try:
            response = self._http.urlopen(
                request.method,
                request.url,
                body=request.body,
                headers=request.headers,
                preload_content=False,
                redirect=False,
            )
        except (HTTPError, OSError) as exc:
            raise TransportError(request.url, exc) from exc
        elapsed = timedelta(seconds=monotonic() - start)

        if response.status < 200 or response.status >= 300:
            try:
                data = response.read(_MAX_ERROR_BODY_SIZE) or b""
            except (HTTPError, OSError) as exc:
                raise TransportError(request.url, exc) from exc
            finally:
                response.close()
                response.release_conn()

            try:
                error = S3Error.fromxml(
                    response.status, data, response.headers,
                )
            except ValueError:
                raise HttpError(
                    response.status,
                    data.decode(errors="replace"),
                    response.headers,
                ) from None
            raise error

        self._logger.info(
            "received response",
            "status", response.status,
            "elapsed", elapsed,
        )
        return response

    def get_object(self, object_name: str) -> BaseHTTPResponse:
        """
        Get data of an object. Returned response should be closed after use
        to release network resources. To reuse the connection, it's required
        to call `response.release_conn()` explicitly.

        Args:
            object_name (str):
                Object name in the bucket.

        Returns:
            BaseHTTPResponse:
                An :class:`urllib3.response.BaseHTTPResponse` object.

        Example:
            >>> response = None
            >>> try:
            ...     response = client.get_object("my-object")
            ...     data = response.read()
            ... finally:
            ...     if response:
            ...         response.close()
            ...         response.release_conn()
        """
        request = self._build_request("GET", object_name)
        return self._send_request(request)

    def put_object(self, object_name: str, data: BinaryIO):
        """
        Uploads data from a seekable stream to an object in the bucket.

        Args:
            object_name (str):
                Object name in the bucket.

            data (BinaryIO):
                Seekable stream having `read()` and `seek()` methods. It is
                read once for hashing and rewound to its start before sending.

        Example:
            >>> client.put_object("my-object", io.BytesIO(b"hello"))
        """
        request = self._build_request("PUT", object_name, data)
        response = self._send_request(request)
        response.close()
        response.release_conn()
