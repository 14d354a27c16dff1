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

"""Structured logger interface and standard logging adapter."""

from __future__ import annotations

import logging
from typing import Any, Optional

from typing_extensions import Protocol

TRACE = 5
logging.addLevelName(TRACE, "TRACE")


class Logger(Protocol):
    """
    typing stub for contextual, structured logger. `kv` is a flat sequence
    of alternating keys and values.
    """

    def info(self, msg: str, *kv: Any):
        """Log at info level."""

    def debug(self, msg: str, *kv: Any):
        """Log at debug level."""

    def trace(self, msg: str, *kv: Any):
        """Log at trace level."""

    def error(self, msg: str, err: BaseException, *kv: Any):
        """Log error at error level."""


def format_kv(kv: tuple[Any, ...]) -> str:
    """Render alternating keys and values as `key=value` pairs."""
    if len(kv) % 2:
        kv = kv + ("MISSING",)
    return " ".join(
        f"{kv[idx]}={kv[idx + 1]!s}" for idx in range(0, len(kv), 2)
    )


class StdLogger:
    """Logger implementation on top of standard logging module."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self._logger = logger or logging.getLogger("objsto")

    def _log(self, level: int, msg: str, kv: tuple[Any, ...]):
        if not self._logger.isEnabledFor(level):
            return
        if kv:
            self._logger.log(level, "%s %s", msg, format_kv(kv))
        else:
            self._logger.log(level, "%s", msg)

    def info(self, msg: str, *kv: Any):
        self._log(logging.INFO, msg, kv)

    def debug(self, msg: str, *kv: Any):
        self._log(logging.DEBUG, msg, kv)

    def trace(self, msg: str, *kv: Any):
        self._log(TRACE, msg, kv)

    def error(self, msg: str, err: BaseException, *kv: Any):
        self._log(logging.ERROR, msg, ("error", err) + kv)
