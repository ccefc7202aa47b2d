"""flycache — a simple key/value cache on top of Redis."""

from flycache.cache import (
    JsonCodec,
    PickleCodec,
    RedisCache,
    SimpleCache,
    connect_cluster,
    connect_tcp,
    from_config,
)
from flycache.kernel.exceptions import (
    CacheException,
    CacheOperationError,
    InvalidArgumentError,
    InvalidArgumentTypeError,
)

__version__ = "0.1.0"

__all__ = [
    "CacheException",
    "CacheOperationError",
    "InvalidArgumentError",
    "InvalidArgumentTypeError",
    "JsonCodec",
    "PickleCodec",
    "RedisCache",
    "SimpleCache",
    "connect_cluster",
    "connect_tcp",
    "from_config",
]
