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
"""Redis-backed simple cache adapter."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

import structlog

from flycache.cache.codecs import JsonCodec, ValueCodec
from flycache.cache.keys import ensure_key_sequence, normalize_key
from flycache.cache.ttl import Ttl, normalize_ttl
from flycache.kernel.exceptions import InvalidArgumentError, InvalidArgumentTypeError, type_name

logger = structlog.get_logger("flycache.cache.redis")

_DEFAULT_CODEC = JsonCodec()

_RAW_VALUE_TYPES = (str, bytes, int, float)


class RedisCache:
    """Simple cache that delegates to a ``redis.Redis``-like client.

    Values are encoded with *codec* before storage (JSON by default). Pass
    ``codec=None`` when the client owns serialization: values are then
    limited to ``str``, ``bytes``, ``int`` and ``float`` and replies come back
    as the client returns them, so a client built with
    ``decode_responses=True`` hands back ``str``.

    The client is owned by the caller: the adapter never connects, closes or
    reconfigures it, and it must not be shared between threads without
    external locking. Cluster clients are detected by their
    ``mget_nonatomic``/``mset_nonatomic`` methods, which split bulk calls per
    hash slot.
    """

    def __init__(self, client: Any, codec: ValueCodec | None = _DEFAULT_CODEC) -> None:
        self._client = client
        self._codec = codec
        self._mget = getattr(client, "mget_nonatomic", None) or client.mget
        self._mset = getattr(client, "mset_nonatomic", None) or client.mset

    @property
    def client(self) -> Any:
        """The backing Redis client."""
        return self._client

    @property
    def codec(self) -> ValueCodec | None:
        return self._codec

    def get(self, key: str | int, default: Any = None) -> Any:
        """Fetch a value, or *default* on a miss."""
        raw = self._client.get(normalize_key(key))
        return self._decode(raw, default)

    def set(self, key: str | int, value: Any, ttl: Ttl = None) -> bool:
        """Store a value. A TTL that is not positive deletes the key instead."""
        key_norm = normalize_key(key)
        ttl_norm = normalize_ttl(ttl)
        if ttl_norm == 0:
            self._client.delete(key_norm)
            return True
        payload = self._encode(value)
        if ttl_norm is None:
            return bool(self._client.set(key_norm, payload))
        return bool(self._client.setex(key_norm, ttl_norm, payload))

    def delete(self, key: str | int) -> bool:
        """Delete a key. Deleting a missing key still reports success."""
        self._client.delete(normalize_key(key))
        return True

    def clear(self) -> bool:
        """Flush the whole Redis database."""
        self._client.flushdb()
        return True

    def has(self, key: str | int) -> bool:
        """Check whether a key exists.

        Only use this for cache warming. Another client may delete the key
        right after this returns ``True``; ``has`` followed by ``get`` is not
        atomic.
        """
        return self._client.exists(normalize_key(key)) > 0

    def get_multiple(self, keys: Iterable[str | int], default: Any = None) -> dict[Any, Any]:
        """Fetch several keys in one round trip.

        The result is keyed by the caller's keys (an ``int`` key stays an
        ``int``); misses map to *default*.
        """
        caller_keys = ensure_key_sequence(keys)
        normalized = [normalize_key(key) for key in caller_keys]
        if not normalized:
            return {}
        raws = self._mget(normalized)
        return {key: self._decode(raw, default) for key, raw in zip(caller_keys, raws)}

    def set_multiple(self, values: Mapping[str | int, Any], ttl: Ttl = None) -> bool:
        """Store several values under one shared TTL.

        Every key and value is validated before the first write. Without a
        TTL a single ``MSET`` is issued; with one, keys are written one by
        one and the first failed write stops the loop and returns ``False``.
        """
        if not isinstance(values, Mapping):
            raise InvalidArgumentTypeError("Values", "a mapping of key to value", values)
        ttl_norm = normalize_ttl(ttl)
        normalized = {normalize_key(key): value for key, value in values.items()}
        if not normalized:
            return True

        if ttl_norm == 0:
            self._client.delete(*normalized)
            return True

        payloads = {key: self._encode(value) for key, value in normalized.items()}
        if ttl_norm is None:
            return _all_ok(self._mset(payloads))

        for key, payload in payloads.items():
            if not self._client.setex(key, ttl_norm, payload):
                logger.warning("cache_set_multiple_aborted", key=key, ttl=ttl_norm)
                return False
        return True

    def delete_multiple(self, keys: Iterable[str | int]) -> bool:
        """Delete several keys in one round trip.

        Returns ``True`` only if every requested key existed and was deleted.
        """
        normalized = {normalize_key(key) for key in ensure_key_sequence(keys)}
        if not normalized:
            return True
        deleted = self._client.delete(*normalized)
        return deleted == len(normalized)

    def _encode(self, value: Any) -> Any:
        if self._codec is None:
            # redis-py only writes these natively
            if isinstance(value, bool) or not isinstance(value, _RAW_VALUE_TYPES):
                raise InvalidArgumentError(
                    f'Value of type "{type_name(value)}" cannot be stored without a codec',
                    context={"given_type": type_name(value)},
                )
            return value
        return self._codec.encode(value)

    def _decode(self, raw: Any, default: Any) -> Any:
        if raw is None or raw == b"" or raw == "":
            return default
        if self._codec is None:
            return raw
        return self._codec.decode(raw)


def _all_ok(result: Any) -> bool:
    # RedisCluster.mset_nonatomic answers with one reply per hash slot.
    if isinstance(result, list):
        return all(result)
    return bool(result)
