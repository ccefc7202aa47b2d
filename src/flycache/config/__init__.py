"""flycache configuration — property classes and provider detection."""

from flycache.config.auto import AutoConfiguration
from flycache.config.properties import RedisProperties

__all__ = ["AutoConfiguration", "RedisProperties"]
