"""Resolution observers — counters for cache hits and upstream calls."""
from __future__ import annotations

from collections import Counter


class NullObserver:
    """Discards every event."""

    def cache_hit(self, address: str) -> None:
        return None

    def upstream_call(self, address: str) -> None:
        return None


class CountingObserver:
    """In-memory counters, one instance per service.

    Totals are exposed as ``cache_hit_count`` and
    ``api_endpoint_request_count``; per-address counts are kept for
    inspection from the CLI and tests.
    """

    def __init__(self) -> None:
        self.cache_hit_count = 0
        self.api_endpoint_request_count = 0
        self.hits_by_address: Counter[str] = Counter()
        self.calls_by_address: Counter[str] = Counter()

    def cache_hit(self, address: str) -> None:
        self.cache_hit_count += 1
        self.hits_by_address[address] += 1

    def upstream_call(self, address: str) -> None:
        self.api_endpoint_request_count += 1
        self.calls_by_address[address] += 1

    def snapshot(self) -> dict[str, int]:
        return {
            "cache_hit_count": self.cache_hit_count,
            "api_endpoint_request_count": self.api_endpoint_request_count,
        }
