"""Upstream JSON-RPC codec and client."""
from .client import EthRpcClient
from .codec import build_request, decode_balance, encode_quantity

__all__ = ["EthRpcClient", "build_request", "decode_balance", "encode_quantity"]
