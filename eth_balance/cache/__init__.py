"""Balance cache implementations and backend selection."""
from __future__ import annotations

import logging

from ..config import CacheConfig
from ..errors import CacheUnavailable
from ..interfaces.cache import BalanceCache
from .memory import MemoryBalanceCache
from .null import NullBalanceCache
from .redis_cache import RedisBalanceCache

logger = logging.getLogger(__name__)


async def open_cache(config: CacheConfig) -> BalanceCache:
    """Build the configured cache, degrading to ``NullBalanceCache``.

    An unreachable redis is never fatal: the service keeps answering from
    the upstream node for the lifetime of the returned cache.
    """
    if config.backend == "memory":
        return MemoryBalanceCache()

    if config.backend == "redis" and config.url:
        try:
            return await RedisBalanceCache.connect(config.url)
        except CacheUnavailable as e:
            logger.warning("Cache unavailable, continuing without it: %s", e)

    return NullBalanceCache()


__all__ = [
    "MemoryBalanceCache",
    "NullBalanceCache",
    "RedisBalanceCache",
    "open_cache",
]
