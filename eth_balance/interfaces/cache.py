"""Balance cache protocol — address → balance store with a fixed TTL."""
from typing import Protocol


class BalanceCache(Protocol):
    """Abstract interface for the cache in front of the upstream node.

    ``read`` returns ``None`` for absent or expired entries. ``write``
    overwrites any previous entry and restarts its TTL.
    """

    async def read(self, address: str) -> float | None: ...

    async def write(self, address: str, balance: float, ttl: float) -> None: ...

    async def close(self) -> None: ...
