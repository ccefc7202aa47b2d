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
"""Convenience constructors building a RedisCache around a fresh client."""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from typing import Any

import structlog
from redis import Redis
from redis.cluster import ClusterNode, RedisCluster
from redis.exceptions import AuthenticationError, AuthenticationWrongNumberOfArgsError, ResponseError

from flycache.cache.adapters.redis import RedisCache
from flycache.cache.codecs import get_codec
from flycache.cache.keys import validate_host
from flycache.config.auto import AutoConfiguration
from flycache.config.properties.redis import RedisProperties
from flycache.core.config import Config
from flycache.kernel.exceptions import InvalidArgumentError, InvalidArgumentTypeError

logger = structlog.get_logger("flycache.cache.factory")

DEFAULT_PORT = 6379

ClusterHost = str | tuple[str, int]


def connect_tcp(
    host: str,
    database: int = 0,
    password: str | None = None,
    port: int = DEFAULT_PORT,
    *,
    codec: str | None = "json",
    socket_timeout: float | None = None,
) -> RedisCache:
    """Connect to a single Redis server over TCP.

    All parameters are validated before any connection is attempted. The
    connection is then opened eagerly so that a wrong password or database
    index fails here instead of on the first cache call.

    Args:
        host: Host name or IP address of the Redis server.
        database: Database index to ``SELECT``.
        password: Optional password for ``AUTH``.
        port: TCP port of the server.
        codec: Value codec name (``"json"``, ``"pickle"``, or ``None`` for raw
            ``str`` values read back through ``decode_responses``).
        socket_timeout: Socket timeout in seconds, passed to the client.

    Raises:
        InvalidArgumentError: a parameter is invalid, authentication failed
            or the database index does not exist.
    """
    validate_host(host)
    _validate_database(database)
    _validate_password(password)
    _validate_port(port)
    value_codec = get_codec(codec)

    logger.debug(
        "redis_connecting",
        host=host,
        port=port,
        database=database,
        parser=AutoConfiguration.detect_parser(),
    )
    client = Redis(
        host=host,
        port=port,
        db=database,
        password=password,
        socket_timeout=socket_timeout,
        decode_responses=value_codec is None,
    )
    with _handshake_errors(client, database):
        client.ping()
    logger.info("redis_connected", host=host, port=port, database=database)
    return RedisCache(client, codec=value_codec)


def connect_cluster(
    hosts: Sequence[ClusterHost],
    password: str | None = None,
    port: int = DEFAULT_PORT,
    *,
    codec: str | None = "json",
    socket_timeout: float | None = None,
) -> RedisCache:
    """Connect to a Redis Cluster through a list of startup nodes.

    Each entry of *hosts* is a host name or a ``(host, port)`` pair; bare
    host names use *port*. Redis Cluster only serves database 0, so no
    database index is accepted.
    """
    nodes = [ClusterNode(node_host, node_port) for node_host, node_port in _cluster_hosts(hosts, port)]
    _validate_password(password)
    value_codec = get_codec(codec)

    logger.debug("redis_cluster_connecting", nodes=[node.name for node in nodes])
    with _handshake_errors(None, 0):
        client = RedisCluster(
            startup_nodes=nodes,
            password=password,
            socket_timeout=socket_timeout,
            decode_responses=value_codec is None,
        )
    logger.info("redis_cluster_connected", nodes=len(nodes))
    return RedisCache(client, codec=value_codec)


def from_config(config: Config) -> RedisCache:
    """Build a RedisCache from the ``flycache.redis`` configuration section."""
    props = config.bind(RedisProperties)
    if props.cluster_nodes:
        return connect_cluster(
            [parse_node(node) for node in props.cluster_nodes],
            password=props.password,
            port=props.port,
            codec=props.codec,
            socket_timeout=props.socket_timeout,
        )
    return connect_tcp(
        props.host,
        props.database,
        props.password,
        props.port,
        codec=props.codec,
        socket_timeout=props.socket_timeout,
    )


def parse_node(node: str) -> ClusterHost:
    """Split a ``host:port`` / ``[v6]:port`` string; a bare host is returned as-is."""
    if node.startswith("["):
        host, sep, rest = node[1:].partition("]")
        if not sep:
            raise InvalidArgumentError(f"Invalid cluster node given: '{node}'")
        if not rest:
            return host
        if not rest.startswith(":"):
            raise InvalidArgumentError(f"Invalid cluster node given: '{node}'")
        return host, _parse_port(rest[1:], node)
    if node.count(":") == 1:
        host, _, port = node.partition(":")
        return host, _parse_port(port, node)
    return node


def _parse_port(port: str, node: str) -> int:
    if not port.isdigit():
        raise InvalidArgumentError(f"Invalid cluster node given: '{node}'")
    return int(port)


def _cluster_hosts(hosts: Any, default_port: int) -> list[tuple[str, int]]:
    if isinstance(hosts, (str, bytes)) or not isinstance(hosts, Sequence):
        raise InvalidArgumentTypeError("hosts", "a sequence of hosts", hosts)
    if not hosts:
        raise InvalidArgumentError("At least one cluster host is required!")
    result: list[tuple[str, int]] = []
    for entry in hosts:
        if isinstance(entry, tuple) and len(entry) == 2:
            host, port = entry
        else:
            host, port = entry, default_port
        validate_host(host)
        _validate_port(port)
        result.append((host, port))
    return result


def _validate_database(database: Any) -> None:
    if isinstance(database, bool) or not isinstance(database, int) or database < 0:
        raise InvalidArgumentTypeError("database", "integer >= 0", database)


def _validate_password(password: Any) -> None:
    if password is not None and not isinstance(password, str):
        raise InvalidArgumentTypeError("password", "a string", password)


def _validate_port(port: Any) -> None:
    if isinstance(port, bool) or not isinstance(port, int) or not 0 < port < 65536:
        raise InvalidArgumentTypeError("port", "integer 1-65535", port)


@contextmanager
def _handshake_errors(client: Redis | None, database: int) -> Iterator[None]:
    """Translate AUTH/SELECT replies into InvalidArgumentError.

    Any other failure (refused connection, timeout, ...) propagates as the
    client raised it.
    """
    try:
        yield
    except (AuthenticationError, AuthenticationWrongNumberOfArgsError) as exc:
        _close(client)
        raise InvalidArgumentError("Password authentication failed!") from exc
    except ResponseError as exc:
        _close(client)
        if "DB index" in str(exc):
            raise InvalidArgumentError(
                f"Invalid database index {database}!",
                context={"database": database},
            ) from exc
        raise


def _close(client: Redis | None) -> None:
    if client is not None:
        client.close()
