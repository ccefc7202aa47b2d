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
"""Redis connection configuration properties."""

from __future__ import annotations

from dataclasses import dataclass, field

from flycache.core.config import config_properties


@config_properties(prefix="flycache.redis")
@dataclass
class RedisProperties:
    """Configuration for the Redis backing client (flycache.redis.*).

    ``cluster_nodes`` entries are ``host`` or ``host:port`` strings; when the
    list is non-empty a cluster client is built and ``host``/``database`` are
    ignored.
    """

    host: str = "127.0.0.1"
    port: int = 6379
    database: int = 0
    password: str | None = None
    codec: str = "json"
    socket_timeout: float | None = None
    cluster_nodes: list[str] = field(default_factory=list)
