"""flycache cache — Redis-backed simple cache."""

from flycache.cache.adapters.redis import RedisCache
from flycache.cache.codecs import JsonCodec, PickleCodec, ValueCodec, get_codec
from flycache.cache.factory import connect_cluster, connect_tcp, from_config
from flycache.cache.keys import is_valid_host, is_valid_key, normalize_key
from flycache.cache.ports.outbound import SimpleCache
from flycache.cache.ttl import normalize_ttl

__all__ = [
    "JsonCodec",
    "PickleCodec",
    "RedisCache",
    "SimpleCache",
    "ValueCodec",
    "connect_cluster",
    "connect_tcp",
    "from_config",
    "get_codec",
    "is_valid_host",
    "is_valid_key",
    "normalize_key",
    "normalize_ttl",
]
