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
"""Value codecs turning cache values into the bytes Redis stores."""

from __future__ import annotations

import json
import pickle
from typing import Any, Protocol, runtime_checkable

from flycache.kernel.exceptions import CacheOperationError, InvalidArgumentError, type_name


@runtime_checkable
class ValueCodec(Protocol):
    """Serializes values on write and deserializes them on read."""

    def encode(self, value: Any) -> bytes: ...

    def decode(self, raw: bytes) -> Any: ...


class JsonCodec:
    """UTF-8 JSON codec; the default.

    Only JSON-compatible values survive a round trip unchanged (tuples come
    back as lists).
    """

    name = "json"

    def encode(self, value: Any) -> bytes:
        try:
            return json.dumps(value, separators=(",", ":")).encode("utf-8")
        except (TypeError, ValueError) as exc:
            raise InvalidArgumentError(
                f'Value of type "{type_name(value)}" is not JSON serializable',
                context={"given_type": type_name(value)},
            ) from exc

    def decode(self, raw: bytes) -> Any:
        try:
            return json.loads(raw)
        except (json.JSONDecodeError, UnicodeDecodeError, TypeError) as exc:
            raise CacheOperationError("Failed to deserialize cached JSON value") from exc


class PickleCodec:
    """Pickle codec for arbitrary Python objects.

    Only use it against a Redis instance no untrusted party can write to:
    unpickling executes code embedded in the payload.
    """

    name = "pickle"

    def __init__(self, protocol: int = pickle.HIGHEST_PROTOCOL) -> None:
        self._protocol = protocol

    def encode(self, value: Any) -> bytes:
        try:
            return pickle.dumps(value, protocol=self._protocol)
        except (pickle.PicklingError, TypeError, AttributeError) as exc:
            raise InvalidArgumentError(
                f'Value of type "{type_name(value)}" cannot be pickled',
                context={"given_type": type_name(value)},
            ) from exc

    def decode(self, raw: bytes) -> Any:
        try:
            return pickle.loads(raw)
        except (
            pickle.UnpicklingError,
            EOFError,
            TypeError,
            ValueError,
            AttributeError,
            ImportError,
            IndexError,
        ) as exc:
            raise CacheOperationError("Failed to deserialize cached pickle value") from exc


_CODECS: dict[str, type[JsonCodec] | type[PickleCodec]] = {
    JsonCodec.name: JsonCodec,
    PickleCodec.name: PickleCodec,
}


def get_codec(name: str | None) -> ValueCodec | None:
    """Resolve a codec by name.

    ``None`` or ``"none"`` selects client-owned serialization: the adapter
    hands values to the client unchanged.
    """
    if name is None or name.lower() == "none":
        return None
    codec_cls = _CODECS.get(name.lower())
    if codec_cls is None:
        raise InvalidArgumentError(
            f"Unknown codec '{name}', expected one of: {', '.join(sorted(_CODECS))}, none",
            context={"codec": name},
        )
    return codec_cls()
