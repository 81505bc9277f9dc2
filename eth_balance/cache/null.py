"""No-op cache used when no cache is configured or reachable."""


class NullBalanceCache:
    """Never holds anything; every read is a miss."""

    async def read(self, address: str) -> float | None:
        return None

    async def write(self, address: str, balance: float, ttl: float) -> None:
        return None

    async def close(self) -> None:
        return None
