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
"""Type-safe configuration with YAML/TOML files, env vars, and dataclass binding."""

from __future__ import annotations

import dataclasses
import os
import tomllib
import types
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar, Union, get_args, get_origin, get_type_hints

import yaml  # type: ignore[import-untyped]

from flycache.kernel.exceptions import InvalidArgumentError

T = TypeVar("T")

_CONFIG_PROPERTIES_ATTR = "__flycache_config_prefix__"

_ENV_PREFIX = "FLYCACHE_"


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable to a configuration prefix.

    Usage:
        @config_properties(prefix="flycache.redis")
        @dataclass
        class RedisProperties:
            host: str = "127.0.0.1"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _CONFIG_PROPERTIES_ATTR, prefix)
        return cls

    return decorator


class Config:
    """Hierarchical configuration with dot-notation access and env var overrides.

    Priority (highest wins):
    1. Environment variables (FLYCACHE_SECTION_KEY format)
    2. Configuration dict / YAML / TOML file values
    3. Dataclass defaults
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}

    @classmethod
    def from_file(cls, path: str | Path) -> Config:
        """Load configuration from a YAML or TOML file. A missing file yields an empty config."""
        path = Path(path)
        if not path.exists():
            return cls()
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return cls(tomllib.load(f))
        with open(path) as f:
            return cls(yaml.safe_load(f) or {})

    @staticmethod
    def env_key(key: str) -> str:
        """Environment variable overriding *key*: flycache.redis.host -> FLYCACHE_REDIS_HOST."""
        base = key.removeprefix("flycache.")
        return _ENV_PREFIX + base.upper().replace(".", "_").replace("-", "_")

    def get(self, key: str, default: Any = None) -> Any:
        """Get a value by dot-notation key, checking env vars first."""
        env_val = os.environ.get(self.env_key(key))
        if env_val is not None:
            return env_val

        current: Any = self._data
        for part in key.split("."):
            if not isinstance(current, dict):
                return default
            current = current.get(part)
            if current is None:
                return default
        return current

    def bind(self, config_cls: type[T]) -> T:
        """Bind configuration to a @config_properties dataclass.

        Every field is read through :meth:`get`, so environment overrides
        apply. String values are coerced to the field's type.

        Raises:
            InvalidArgumentError: a string value cannot be converted to the
                field's numeric type.
        """
        prefix = getattr(config_cls, _CONFIG_PROPERTIES_ATTR, None)
        if prefix is None:
            raise ValueError(f"{config_cls.__name__} is not decorated with @config_properties")

        hints = get_type_hints(config_cls)
        kwargs: dict[str, Any] = {}
        for field in dataclasses.fields(config_cls):  # type: ignore[arg-type]
            key = f"{prefix}.{field.name}"
            value = self.get(key)
            if value is None:
                continue
            kwargs[field.name] = _coerce(key, value, hints.get(field.name))

        return config_cls(**kwargs)


def _coerce(key: str, value: Any, expected_type: Any) -> Any:
    """Coerce a string (typically from an env var) to the annotated type."""
    if not isinstance(value, str) or expected_type is None:
        return value

    # Optional[X] / X | None
    if get_origin(expected_type) in (Union, types.UnionType):
        args = [arg for arg in get_args(expected_type) if arg is not type(None)]
        if len(args) == 1:
            expected_type = args[0]

    if expected_type in (int, float):
        try:
            return expected_type(value)
        except ValueError as exc:
            raise InvalidArgumentError(
                f"Invalid value for '{key}': '{value}' is not a valid {expected_type.__name__}",
                context={"key": key, "value": value},
            ) from exc
    if expected_type is bool:
        return value.lower() in ("true", "1", "yes")
    if expected_type is list or get_origin(expected_type) is list:
        return [item.strip() for item in value.split(",") if item.strip()]
    return value
