"""Unit tests for the JSON-RPC codec — request building and hex decoding."""
from __future__ import annotations

import json

import pytest

from eth_balance.errors import MalformedResponse, NumericDecodeError
from eth_balance.models import RpcResponse
from eth_balance.rpc.codec import (
    build_request,
    decode_balance,
    decode_wei,
    encode_quantity,
)


def _response(result: str) -> RpcResponse:
    return RpcResponse(result=result, id=1)


class TestBuildRequest:
    def test_wire_format(self) -> None:
        request = build_request("0xabc")
        assert json.dumps(request.to_payload(), separators=(",", ":")) == (
            '{"jsonrpc":"2.0","method":"eth_getBalance",'
            '"params":["0xabc","latest"],"id":1}'
        )

    def test_custom_method(self) -> None:
        request = build_request("0xabc", "eth_getTransactionCount")
        assert request.method == "eth_getTransactionCount"
        assert request.params == ("0xabc", "latest")

    def test_address_passed_verbatim(self) -> None:
        request = build_request("0xDeAdBeEf ")
        assert request.params[0] == "0xDeAdBeEf "

    def test_request_is_frozen(self) -> None:
        request = build_request("0xabc")
        with pytest.raises(AttributeError):
            request.method = "other"  # type: ignore[misc]


class TestDecodeBalance:
    def test_one_ether(self) -> None:
        assert decode_balance(_response("0xde0b6b3a7640000")) == 1.0

    def test_zero(self) -> None:
        assert decode_balance(_response("0x0")) == 0.0

    def test_uppercase_digits(self) -> None:
        assert decode_balance(_response("0xDE0B6B3A7640000")) == 1.0

    @pytest.mark.parametrize(
        "wei",
        [1, 10**18 - 1, 123456789012345678901234567, 2**127 - 1, 2**200 + 12345],
    )
    def test_matches_float_division(self, wei: int) -> None:
        assert decode_balance(_response(encode_quantity(wei))) == float(wei) / 1e18

    @pytest.mark.parametrize("result", ["not-hex", "de0b6b3a7640000", "0Xde0b", "", "x0"])
    def test_missing_prefix(self, result: str) -> None:
        with pytest.raises(MalformedResponse, match="prefixed with 0x"):
            decode_balance(_response(result))

    @pytest.mark.parametrize(
        "result", ["0x", "0xzz", "0x-1", "0x+1", "0x1_000", "0x 1", "0x0x1", "0x12g"]
    )
    def test_non_hex_digits(self, result: str) -> None:
        with pytest.raises(NumericDecodeError):
            decode_balance(_response(result))

    def test_too_large_for_a_double(self) -> None:
        with pytest.raises(NumericDecodeError, match="too large"):
            decode_balance(_response("0x" + "f" * 300))


class TestEncodeQuantity:
    def test_encodes_lowercase_hex(self) -> None:
        assert encode_quantity(10**18) == "0xde0b6b3a7640000"

    def test_zero(self) -> None:
        assert encode_quantity(0) == "0x0"

    def test_negative_rejected(self) -> None:
        with pytest.raises(ValueError):
            encode_quantity(-1)

    def test_decode_wei_inverse(self) -> None:
        assert decode_wei(encode_quantity(987654321)) == 987654321
