"""Error taxonomy for balance resolution.

Every error carries a stable ``kind`` string and an HTTP status so the route
layer can answer with ``{"kind": ..., "message": ...}`` without inspecting
exception types.
"""
from __future__ import annotations


class BalanceError(Exception):
    """Base balance-service error."""

    kind = "internal"

    def __init__(self, message: str, http_status: int = 500) -> None:
        self.message = message
        self.http_status = http_status
        super().__init__(message)

    def to_dict(self) -> dict[str, str]:
        return {"kind": self.kind, "message": self.message}


# --- Startup ---

class ConfigurationError(BalanceError):
    kind = "configuration"

    def __init__(self, message: str) -> None:
        super().__init__(message, 500)


# --- Cache ---

class CacheUnavailable(BalanceError):
    """Cache connection could not be established."""

    kind = "cache_unavailable"

    def __init__(self, message: str) -> None:
        super().__init__(message, 503)


class CacheOperationError(BalanceError):
    """A connected cache failed on a single read or write."""

    kind = "cache_operation"

    def __init__(self, operation: str, key: str, detail: str) -> None:
        self.operation = operation
        self.key = key
        super().__init__(f"failed to {operation} cache key {key!r}: {detail}", 500)


# --- Upstream ---

class UpstreamHTTPError(BalanceError):
    kind = "upstream_http"

    def __init__(self, status: int) -> None:
        self.status = status
        super().__init__(f"request failed with status code {status}", 502)


class UpstreamRPCError(BalanceError):
    kind = "upstream_rpc"

    def __init__(self, code: int | None, detail: str) -> None:
        self.code = code
        super().__init__(f"RPC error {code}: {detail}", 502)


class UpstreamConnectionError(BalanceError):
    kind = "upstream_connection"

    def __init__(self, detail: str) -> None:
        super().__init__(f"could not reach upstream node: {detail}", 502)


# --- Decoding ---

class MalformedResponse(BalanceError):
    kind = "malformed_response"

    def __init__(self, detail: str) -> None:
        super().__init__(detail, 502)


class NumericDecodeError(BalanceError):
    kind = "numeric_decode"

    def __init__(self, detail: str) -> None:
        super().__init__(detail, 502)
