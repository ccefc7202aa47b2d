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
"""Time-to-live normalization."""

from __future__ import annotations

from datetime import timedelta

from flycache.kernel.exceptions import InvalidArgumentError, type_name

Ttl = int | timedelta | None


def normalize_ttl(ttl: Ttl) -> int | None:
    """Convert *ttl* to whole seconds.

    Returns ``None`` for "no expiry" and ``0`` when the entry should be
    deleted instead of stored (any TTL that is not positive). A
    ``timedelta`` is truncated to the whole seconds it spans.

    Raises:
        InvalidArgumentError: *ttl* is not ``None``, an ``int`` or a ``timedelta``.
    """
    if ttl is None:
        return None
    if isinstance(ttl, timedelta):
        ttl = int(ttl.total_seconds())
    if isinstance(ttl, int) and not isinstance(ttl, bool):
        return ttl if ttl > 0 else 0
    raise InvalidArgumentError(
        f'Time-to-live must either be an integer, a timedelta or None, "{type_name(ttl)}" given',
        context={"given_type": type_name(ttl)},
    )
