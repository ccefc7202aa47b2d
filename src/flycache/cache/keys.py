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
"""Stateless validation helpers for cache keys and Redis host names.

Keys are restricted to ``[A-Za-z0-9_.]``. Keys with any other character are
rejected rather than rewritten, so two distinct caller keys can never collide
on the same Redis key and :func:`normalize_key` is idempotent.
"""

from __future__ import annotations

import ipaddress
import re
from collections.abc import Iterable, Mapping
from typing import Any

from flycache.kernel.exceptions import InvalidArgumentError, InvalidArgumentTypeError, type_name

_KEY_RE = re.compile(r"[A-Za-z0-9_.]+")

_HOSTNAME_RE = re.compile(r"([a-z\d](-*[a-z\d])*)(\.([a-z\d](-*[a-z\d])*))*", re.IGNORECASE)
_MAX_HOSTNAME_LENGTH = 253
_MAX_LABEL_LENGTH = 63


def normalize_key(key: str | int) -> str:
    """Validate *key* and return the string Redis stores it under.

    Integers are coerced to their decimal form; ``bool`` is not accepted
    as an integer key.

    Raises:
        InvalidArgumentError: the key is not a ``str``/``int``, is empty, or
            contains characters outside ``[A-Za-z0-9_.]``.
    """
    if isinstance(key, bool) or not isinstance(key, (str, int)):
        raise InvalidArgumentError(
            f'Expected key to be a string, "{type_name(key)}" given!',
            context={"given_type": type_name(key)},
        )
    try:
        key_str = str(key)
    except ValueError as exc:
        # int too long for the interpreter's digit limit
        raise InvalidArgumentError(f"Invalid key given: '<int of {key.bit_length()} bits>'") from exc
    if not key_str:
        raise InvalidArgumentError("Given key is empty!")
    if not _KEY_RE.fullmatch(key_str):
        raise InvalidArgumentError(f"Invalid key given: '{key_str}'", context={"key": key_str})
    return key_str


def is_valid_key(key: Any) -> bool:
    """Would :func:`normalize_key` accept *key*?"""
    try:
        normalize_key(key)
    except InvalidArgumentError:
        return False
    return True


def is_valid_keys_sequence(keys: Any) -> bool:
    """Check the shape of a bulk ``keys`` argument without consuming it.

    Any iterable qualifies except strings, bytes and mappings; a mapping is a
    key/value structure, not a sequence of keys.
    """
    if isinstance(keys, (str, bytes, bytearray, Mapping)):
        return False
    return isinstance(keys, Iterable)


def ensure_key_sequence(keys: Any) -> list[Any]:
    """Materialize a bulk ``keys`` argument into a list of caller keys."""
    if not is_valid_keys_sequence(keys):
        raise InvalidArgumentTypeError("Keys", "an iterable of keys", keys)
    return list(keys)


def normalize_keys(keys: Any) -> list[str]:
    """Validate the shape of *keys* and normalize every entry.

    The first invalid key aborts the whole call.
    """
    return [normalize_key(key) for key in ensure_key_sequence(keys)]


def is_valid_host(host: Any) -> bool:
    """Is *host* an RFC-1123 host name or an IPv4/IPv6 literal?"""
    if not isinstance(host, str):
        return False
    try:
        ipaddress.ip_address(host)
        return True
    except ValueError:
        pass
    if not 0 < len(host) <= _MAX_HOSTNAME_LENGTH:
        return False
    if not _HOSTNAME_RE.fullmatch(host):
        return False
    return all(len(label) <= _MAX_LABEL_LENGTH for label in host.split("."))


def validate_host(host: Any) -> str:
    """Return *host* unchanged, or raise InvalidArgumentError quoting it."""
    if not is_valid_host(host):
        raise InvalidArgumentError(f"Invalid hostname/IP given: '{host}'", context={"host": host})
    return host
