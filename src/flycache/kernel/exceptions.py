# Copyright 2026 Firefly Software Solutions Inc.
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
"""Exception hierarchy for flycache.

All library exceptions inherit from CacheException, so callers can catch
every cache error with a single handler.

Categories:
- InvalidArgumentError: malformed keys, TTLs, bulk arguments, connection parameters
- CacheOperationError: unexpected failures of the backing store

Transport errors raised by the Redis client are not wrapped.
"""

from __future__ import annotations

from typing import Any


class CacheException(Exception):
    """Base exception for all flycache errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_ARGUMENT").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    default_code: str | None = None

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code if code is not None else self.default_code
        self.context: dict = context if context is not None else {}


class InvalidArgumentError(CacheException, ValueError):
    """An argument handed to the cache is not a legal value."""

    default_code = "INVALID_ARGUMENT"


class InvalidArgumentTypeError(InvalidArgumentError, TypeError):
    """An argument has the wrong type.

    The message is compiled from the argument name, a description of what
    was expected and the type of what was actually given::

        >>> str(InvalidArgumentTypeError("database", "integer >= 0", "X"))
        'database must be integer >= 0, str given!'
    """

    def __init__(self, arg_name: str, expected: str, given: Any) -> None:
        self.arg_name = arg_name
        self.expected = expected
        self.given_type = type_name(given)
        super().__init__(
            f"{arg_name} must be {expected}, {self.given_type} given!",
            context={"argument": arg_name, "given_type": self.given_type},
        )


class CacheOperationError(CacheException):
    """The backing store returned something the cache could not handle."""

    default_code = "CACHE_OPERATION"


def type_name(value: Any) -> str:
    """Name of the type of *value*, as used in error messages."""
    return type(value).__name__
