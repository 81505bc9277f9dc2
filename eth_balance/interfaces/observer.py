"""Observer protocol — receives resolution events for metrics."""
from typing import Protocol


class BalanceObserver(Protocol):
    """Abstract interface for recording cache hits and upstream calls."""

    def cache_hit(self, address: str) -> None: ...

    def upstream_call(self, address: str) -> None: ...
