"""Transport protocol — sends one JSON-RPC request upstream."""
from typing import Protocol

from ..models import RpcRequest, RpcResponse


class RpcTransport(Protocol):
    """Abstract interface for the upstream JSON-RPC call."""

    async def call(self, request: RpcRequest) -> RpcResponse: ...
