"""Bounded exponential-backoff retry for async operations."""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Iterator
from typing import TypeVar

from .config import RetryConfig

logger = logging.getLogger(__name__)

T = TypeVar("T")


def backoff_delays(config: RetryConfig) -> Iterator[float]:
    """Yield the sleep before each retry: ``max_attempts - 1`` values.

    The sequence starts at ``min_delay``, grows by ``factor`` and never
    exceeds ``max_delay``.
    """
    delay = config.min_delay
    for _ in range(config.max_attempts - 1):
        yield min(delay, config.max_delay)
        delay *= config.factor


async def retry_with_backoff(
    operation: Callable[[], Awaitable[T]],
    config: RetryConfig,
    *,
    retryable: Callable[[Exception], bool] | None = None,
    sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
) -> T:
    """Await ``operation()`` until it succeeds or attempts run out.

    Every ``Exception`` is retried unless ``retryable`` says otherwise. The
    last error is re-raised once ``config.max_attempts`` calls have failed.

    Args:
        operation: Zero-argument callable returning a fresh awaitable per call.
        config: Backoff settings.
        retryable: Optional predicate; errors for which it returns False are
            raised immediately.
        sleep: Awaitable sleep, replaceable in tests.
    """
    delays = backoff_delays(config)
    attempt = 1
    while True:
        try:
            return await operation()
        except Exception as e:
            if retryable is not None and not retryable(e):
                raise
            delay = next(delays, None)
            if delay is None:
                logger.error(
                    "Giving up after %d attempt(s): %s", attempt, e
                )
                raise
            logger.warning(
                "Attempt %d/%d failed (%s), retrying in %.2fs",
                attempt,
                config.max_attempts,
                e,
                delay,
            )
        await sleep(delay)
        attempt += 1
