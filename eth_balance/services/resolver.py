"""Cache-aside balance resolution against the upstream node."""
from __future__ import annotations

import logging

from ..cache.null import NullBalanceCache
from ..errors import CacheOperationError
from ..interfaces.cache import BalanceCache
from ..interfaces.observer import BalanceObserver
from ..interfaces.transport import RpcTransport
from ..metrics import NullObserver
from ..rpc.codec import GET_BALANCE, build_request, decode_balance

logger = logging.getLogger(__name__)

DEFAULT_TTL_SECONDS = 10.0


class BalanceResolver:
    """Reads through the cache, calls upstream on a miss, then fills the cache.

    A failed cache *read* is treated as a miss. A failed cache *write*
    aborts the resolution even though the upstream answer was decoded.
    One instance is shared by all concurrent requests; it keeps no
    per-request state.
    """

    def __init__(
        self,
        transport: RpcTransport,
        cache: BalanceCache | None = None,
        observer: BalanceObserver | None = None,
        ttl: float = DEFAULT_TTL_SECONDS,
        method: str = GET_BALANCE,
    ) -> None:
        self._transport = transport
        self._cache: BalanceCache = cache if cache is not None else NullBalanceCache()
        self._observer: BalanceObserver = observer if observer is not None else NullObserver()
        self._ttl = ttl
        self._method = method

    @property
    def cache(self) -> BalanceCache:
        return self._cache

    async def resolve_balance(self, address: str) -> float:
        """Return the balance of ``address`` in ether."""
        cached = await self._check_cache(address)
        if cached is not None:
            self._observer.cache_hit(address)
            logger.debug("Cache hit for %s", address)
            return cached

        self._observer.upstream_call(address)
        logger.debug("Cache miss for %s, calling upstream", address)
        response = await self._transport.call(build_request(address, self._method))
        balance = decode_balance(response)

        await self._cache.write(address, balance, self._ttl)
        return balance

    async def _check_cache(self, address: str) -> float | None:
        try:
            return await self._cache.read(address)
        except CacheOperationError as e:
            logger.warning("Bypassing cache for %s: %s", address, e)
            return None
