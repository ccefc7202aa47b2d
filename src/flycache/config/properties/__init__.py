"""Typed configuration property classes."""

from flycache.config.properties.redis import RedisProperties

__all__ = ["RedisProperties"]
