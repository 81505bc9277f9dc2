"""Ethereum JSON-RPC request building and hex quantity decoding."""
from __future__ import annotations

import re

from ..errors import MalformedResponse, NumericDecodeError
from ..models import LATEST_BLOCK, RpcRequest, RpcResponse

GET_BALANCE = "eth_getBalance"
HEX_PREFIX = "0x"
WEI_PER_ETHER = 1e18

_HEX_DIGITS_RE = re.compile(r"[0-9a-fA-F]+")


def build_request(address: str, method: str = GET_BALANCE) -> RpcRequest:
    """Build the request envelope for ``method`` against the latest block."""
    return RpcRequest(method=method, params=(address, LATEST_BLOCK))


def encode_quantity(wei: int) -> str:
    """Encode a non-negative integer as a ``0x``-prefixed hex quantity."""
    if wei < 0:
        raise ValueError(f"quantity must be non-negative, got {wei}")
    return f"{HEX_PREFIX}{wei:x}"


def decode_wei(result: str) -> int:
    """Parse a hex quantity such as ``0xde0b6b3a7640000`` into wei."""
    if not result.startswith(HEX_PREFIX):
        raise MalformedResponse("string is not in hex format (prefixed with 0x)")

    digits = result[len(HEX_PREFIX):]
    # int(..., 16) would also accept signs, underscores, whitespace and a second prefix
    if not _HEX_DIGITS_RE.fullmatch(digits):
        raise NumericDecodeError(f"couldn't parse the wei hex value {digits!r}")
    return int(digits, 16)


def decode_balance(response: RpcResponse) -> float:
    """Convert the wei quantity in ``response.result`` to ether.

    The wei integer is rounded to the nearest double before dividing, so the
    result matches plain IEEE-754 ``wei / 1e18``.
    """
    wei = decode_wei(response.result)
    try:
        return float(wei) / WEI_PER_ETHER
    except OverflowError as e:
        raise NumericDecodeError(f"wei value too large to represent: {e}") from e
