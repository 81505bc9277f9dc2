"""Balance service — retrying resolver plus route-level payloads."""
from __future__ import annotations

import logging
from typing import Any

from ..cache import open_cache
from ..config import AppConfig, RetryConfig
from ..errors import BalanceError
from ..metrics import CountingObserver
from ..models import BalanceResult
from ..retry import retry_with_backoff
from ..rpc.client import EthRpcClient
from .resolver import BalanceResolver

logger = logging.getLogger(__name__)


class BalanceService:
    """Entry point used by request handlers.

    Wraps every resolution in the retry policy and turns the outcome into
    the ``{"balance": n}`` / ``{"kind", "message"}`` response bodies.
    """

    def __init__(
        self,
        resolver: BalanceResolver,
        retry_config: RetryConfig,
        observer: CountingObserver | None = None,
    ) -> None:
        self.resolver = resolver
        self.retry_config = retry_config
        self.observer = observer

    @classmethod
    async def from_config(cls, config: AppConfig) -> BalanceService:
        """Wire client, cache and observer from configuration.

        Never fails on the cache: an unreachable one is replaced by a no-op.
        """
        observer = CountingObserver()
        cache = await open_cache(config.cache)
        resolver = BalanceResolver(
            EthRpcClient(config.upstream),
            cache=cache,
            observer=observer,
            ttl=config.cache.ttl_seconds,
            method=config.upstream.method,
        )
        logger.info(
            "Balance service ready (cache: %s)", type(cache).__name__
        )
        return cls(resolver, config.retry, observer)

    async def get_balance(self, address: str) -> BalanceResult:
        balance = await retry_with_backoff(
            lambda: self.resolver.resolve_balance(address), self.retry_config
        )
        return BalanceResult(address=address, balance=balance)

    async def balance_payload(self, address: str) -> tuple[int, dict[str, Any]]:
        """Return ``(http_status, body)`` for a balance request."""
        try:
            result = await self.get_balance(address)
        except BalanceError as e:
            logger.error("Balance request for %s failed: %s", address, e)
            return e.http_status, e.to_dict()
        except Exception as e:
            logger.exception("Unexpected error resolving %s", address)
            return 500, {"kind": "internal", "message": str(e)}
        return 200, result.to_dict()

    async def close(self) -> None:
        await self.resolver.cache.close()

    async def __aenter__(self) -> BalanceService:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()
