"""In-process balance cache with per-entry expiry."""
from __future__ import annotations

import time
from typing import Callable

from ..models import CacheEntry


class MemoryBalanceCache:
    """Dict-backed cache for single-process deployments and tests.

    Expired entries are dropped lazily when read.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._entries: dict[str, CacheEntry] = {}

    async def read(self, address: str) -> float | None:
        entry = self._entries.get(address)
        if entry is None:
            return None
        if entry.is_expired(self._clock()):
            self._entries.pop(address, None)
            return None
        return entry.balance

    async def write(self, address: str, balance: float, ttl: float) -> None:
        self._entries[address] = CacheEntry(
            balance=balance, expires_at=self._clock() + ttl
        )

    async def close(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)
