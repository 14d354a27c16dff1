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

"""Secret value wrapper that never renders its content."""

from __future__ import annotations

UNSET = "--unset--"
REDACTED = "--redacted--"


class Redact:
    """
    Holds a secret string. Formatting, repr() and JSON encoding through
    `Config.to_json()` only ever show `--redacted--`, or `--unset--` for an
    empty secret. `reveal()` returns the live value.
    """
    __slots__ = ("_value",)

    def __init__(self, value: str = ""):
        if isinstance(value, Redact):
            value = value.reveal()
        if not isinstance(value, str):
            raise TypeError(
                f"secret must be str, got {type(value).__name__}",
            )
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def reveal(self) -> str:
        """Return underlying secret value."""
        return self._value

    def redacted(self) -> str:
        """Return redacted text of this secret."""
        return REDACTED if self._value else UNSET

    def __bool__(self) -> bool:
        return bool(self._value)

    def __str__(self) -> str:
        return self.redacted()

    def __repr__(self) -> str:
        return self.redacted()

    def __format__(self, format_spec: str) -> str:
        return format(self.redacted(), format_spec)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Redact):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __reduce__(self):
        return type(self), (self._value,)
