"""Cache adapters — concrete cache implementations."""

from flycache.cache.adapters.redis import RedisCache

__all__ = ["RedisCache"]
