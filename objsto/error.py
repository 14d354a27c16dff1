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
objsto.error
~~~~~~~~~~~~

This module provides custom exception classes for objsto library and S3
API specific errors.

"""

from __future__ import absolute_import, annotations

from typing import Mapping, Optional, Type, TypeVar
from xml.etree import ElementTree as ET

from .xml import findtext


def _headers_text(headers: Optional[Mapping[str, str]]) -> str:
    """Render response headers for error messages."""
    return str(dict(headers.items())) if headers else "{}"


class ObjstoError(Exception):
    """Base objsto exception."""


class ValidationError(ObjstoError, ValueError):
    """Raised to indicate invalid argument detected before any I/O."""


class ConfigError(ObjstoError, ValueError):
    """Raised to indicate missing or invalid client configuration."""


class _StreamError(ObjstoError):
    """Base class for errors on caller supplied body stream."""

    def __init__(self, message: str, cause: BaseException):
        self._message = message
        self._cause = cause
        super().__init__(f"{message}: {cause}")

    @property
    def cause(self) -> BaseException:
        """Get underlying exception."""
        return self._cause

    def __reduce__(self):
        return type(self), (self._message, self._cause)


class HashError(_StreamError):
    """Raised to indicate that body stream could not be read for hashing."""


class SeekError(_StreamError):
    """Raised to indicate that body stream could not be rewound."""


class TransportError(ObjstoError):
    """Raised to indicate that HTTP request could not be performed."""

    def __init__(self, url: str, cause: BaseException):
        self._url = url
        self._cause = cause
        super().__init__(f"failed request to {url!r}: {cause}")

    @property
    def url(self) -> str:
        """Get target URL."""
        return self._url

    @property
    def cause(self) -> BaseException:
        """Get underlying exception."""
        return self._cause

    def __reduce__(self):
        return type(self), (self._url, self._cause)


class HttpError(ObjstoError):
    """
    Raised to indicate non-2xx response whose body is not an S3 error
    document.
    """

    def __init__(
            self,
            status: int,
            body: Optional[str],
            headers: Optional[Mapping[str, str]] = None,
    ):
        self._status = status
        self._body = body
        self._headers = headers
        super().__init__(
            f"http error; status: {status}, body: {body}, "
            f"headers: {_headers_text(headers)}"
        )

    @property
    def status(self) -> int:
        """Get HTTP status code."""
        return self._status

    @property
    def body(self) -> Optional[str]:
        """Get truncated response body."""
        return self._body

    @property
    def headers(self) -> Optional[Mapping[str, str]]:
        """Get response headers."""
        return self._headers

    def __reduce__(self):
        return type(self), (self._status, self._body, self._headers)


A = TypeVar("A", bound="S3Error")


class S3Error(ObjstoError):
    """
    Raised to indicate that error response is received
    when executing S3 operation.
    """

    def __init__(  # pylint: disable=too-many-positional-arguments
        self,
        status: int,
        code: Optional[str],
        message: Optional[str],
        request_id: Optional[str],
        resource: Optional[str] = None,
        host_id: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.status = status
        self.code = code
        self.message = message
        self.request_id = request_id
        self.resource = resource
        self.host_id = host_id
        self.headers = headers
        super().__init__(
            f"S3 operation failed; code: {code}, message: {message}, "
            f"resource: {resource}, request_id: {request_id}, "
            f"host_id: {host_id}, headers: {_headers_text(headers)}"
        )

    @classmethod
    def fromxml(
            cls: Type[A],
            status: int,
            data: bytes,
            headers: Optional[Mapping[str, str]] = None,
    ) -> A:
        """
        Create new object with values from S3 error XML document.
        Raises ValueError if data is not an S3 error document having Code.
        """
        try:
            element = ET.fromstring(data.decode())
        except (ET.ParseError, UnicodeDecodeError) as exc:
            raise ValueError(f"invalid S3 error document; {exc}") from exc
        if element.tag.rsplit("}", 1)[-1] != "Error":
            raise ValueError(
                f"invalid S3 error document; root element <{element.tag}>",
            )
        return cls(
            status=status,
            code=findtext(element, "Code", True),
            message=findtext(element, "Message"),
            request_id=findtext(element, "RequestId"),
            resource=findtext(element, "Resource"),
            host_id=findtext(element, "HostId"),
            headers=headers,
        )

    def __reduce__(self):
        return type(self), (
            self.status, self.code, self.message, self.request_id,
            self.resource, self.host_id, self.headers,
        )

    def __repr__(self):
        return (
            f"S3Error(status={self.status!r}, code={self.code!r}, "
            f"message={self.message!r}, request_id={self.request_id!r}, "
            f"resource={self.resource!r}, host_id={self.host_id!r})"
        )
