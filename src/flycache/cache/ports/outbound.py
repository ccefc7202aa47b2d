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
"""Simple cache protocol."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Protocol, runtime_checkable

from flycache.cache.ttl import Ttl


@runtime_checkable
class SimpleCache(Protocol):
    """Abstract key/value cache interface.

    Keys are ``str`` or ``int``. Every operation raises
    :class:`~flycache.kernel.exceptions.InvalidArgumentError` for malformed
    keys, TTLs or bulk arguments; a miss is never an error.
    """

    def get(self, key: str | int, default: Any = None) -> Any: ...

    def set(self, key: str | int, value: Any, ttl: Ttl = None) -> bool: ...

    def delete(self, key: str | int) -> bool: ...

    def clear(self) -> bool: ...

    def has(self, key: str | int) -> bool: ...

    def get_multiple(self, keys: Iterable[str | int], default: Any = None) -> dict[Any, Any]: ...

    def set_multiple(self, values: Mapping[str | int, Any], ttl: Ttl = None) -> bool: ...

    def delete_multiple(self, keys: Iterable[str | int]) -> bool: ...
