"""Redis-backed balance cache."""
from __future__ import annotations

import logging

import redis.asyncio as aioredis
from redis.exceptions import RedisError

from ..errors import CacheOperationError, CacheUnavailable

logger = logging.getLogger(__name__)


class RedisBalanceCache:
    """Stores balances as ``SET <address> <balance> PX <ttl_ms>``.

    Keys are addresses exactly as given. The asyncio client keeps a
    connection pool, so one instance is shared by all requests.
    """

    def __init__(self, client: aioredis.Redis) -> None:
        self._client = client

    @classmethod
    async def connect(
        cls, url: str, connect_timeout: float = 5.0
    ) -> RedisBalanceCache:
        """Open a pool for ``url`` and check it with PING.

        Raises:
            CacheUnavailable: the URL is invalid or the server is unreachable.
        """
        try:
            client = aioredis.from_url(
                url,
                decode_responses=True,
                socket_connect_timeout=connect_timeout,
            )
        except ValueError as e:
            raise CacheUnavailable(f"invalid redis url {url!r}: {e}") from e

        try:
            await client.ping()
        except (RedisError, OSError) as e:
            await client.aclose()
            raise CacheUnavailable(f"failed to connect to redis: {e}") from e

        logger.info("Connected to redis cache")
        return cls(client)

    async def read(self, address: str) -> float | None:
        try:
            value = await self._client.get(address)
        except (RedisError, OSError) as e:
            raise CacheOperationError("read", address, str(e)) from e

        if value is None:
            return None
        try:
            return float(value)
        except ValueError as e:
            raise CacheOperationError("read", address, f"not a number: {value!r}") from e

    async def write(self, address: str, balance: float, ttl: float) -> None:
        try:
            await self._client.set(address, repr(balance), px=max(1, int(ttl * 1000)))
        except (RedisError, OSError) as e:
            raise CacheOperationError("write", address, str(e)) from e

    async def close(self) -> None:
        await self._client.aclose()
