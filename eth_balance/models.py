"""Data models — all frozen (immutable)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from .errors import MalformedResponse, UpstreamRPCError

JSONRPC_VERSION = "2.0"
LATEST_BLOCK = "latest"


@dataclass(frozen=True)
class RpcRequest:
    """JSON-RPC request envelope sent to the upstream node."""

    method: str
    params: tuple[str, ...]
    id: int = 1
    jsonrpc: str = JSONRPC_VERSION

    def to_payload(self) -> dict[str, Any]:
        return {
            "jsonrpc": self.jsonrpc,
            "method": self.method,
            "params": list(self.params),
            "id": self.id,
        }


@dataclass(frozen=True)
class RpcResponse:
    """JSON-RPC response carrying a hex quantity as ``result``."""

    result: str
    id: int | None = None
    jsonrpc: str = JSONRPC_VERSION

    @classmethod
    def from_payload(cls, payload: Any) -> RpcResponse:
        """Build a response from a decoded JSON body.

        Raises:
            UpstreamRPCError: the body carries a JSON-RPC ``error`` member.
            MalformedResponse: the body is not an object or has no string
                ``result``.
        """
        if not isinstance(payload, dict):
            raise MalformedResponse(
                f"expected a JSON object, got {type(payload).__name__}"
            )

        error = payload.get("error")
        if error is not None:
            if isinstance(error, dict):
                raise UpstreamRPCError(error.get("code"), str(error.get("message", "")))
            raise UpstreamRPCError(None, str(error))

        result = payload.get("result")
        if not isinstance(result, str):
            raise MalformedResponse("response has no string 'result' field")

        return cls(
            result=result,
            id=payload.get("id"),
            jsonrpc=payload.get("jsonrpc", JSONRPC_VERSION),
        )


@dataclass(frozen=True)
class CacheEntry:
    """One cached balance with its expiry on the cache's clock."""

    balance: float
    expires_at: float

    def is_expired(self, now: float) -> bool:
        return now >= self.expires_at


@dataclass(frozen=True)
class BalanceResult:
    """Resolved balance for a single address."""

    address: str
    balance: float

    def to_dict(self) -> dict[str, float]:
        return {"balance": self.balance}
