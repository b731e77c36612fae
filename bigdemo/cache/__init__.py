"""Cache layer package for cache store probing."""

from .interfaces import CacheProbePort
from .probe import REDIS_URL_VARIABLE, RedisCacheProbeService

__all__ = ["CacheProbePort", "REDIS_URL_VARIABLE", "RedisCacheProbeService"]
