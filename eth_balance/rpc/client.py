"""Ethereum JSON-RPC client for the upstream node."""
from __future__ import annotations

import asyncio
import logging
import ssl

import aiohttp
import certifi

from ..config import UpstreamConfig
from ..errors import MalformedResponse, UpstreamConnectionError, UpstreamHTTPError
from ..models import RpcRequest, RpcResponse

logger = logging.getLogger(__name__)


class EthRpcClient:
    """POSTs JSON-RPC requests to ``<base_url>/<api_key>``."""

    def __init__(self, config: UpstreamConfig) -> None:
        self.base_url = config.base_url.rstrip("/")
        self.timeout = config.timeout
        self._api_key = config.api_key

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}/{self._api_key}"

    async def call(self, request: RpcRequest) -> RpcResponse:
        """Send one request and parse the response envelope.

        Raises:
            UpstreamHTTPError: non-2xx status.
            UpstreamConnectionError: network failure or timeout.
            MalformedResponse: the body is not a JSON-RPC result.
        """
        ssl_context = ssl.create_default_context(cafile=certifi.where())
        connector = aiohttp.TCPConnector(ssl=ssl_context)

        try:
            async with aiohttp.ClientSession(connector=connector) as session:
                async with session.post(
                    self.endpoint,
                    json=request.to_payload(),
                    timeout=aiohttp.ClientTimeout(total=self.timeout),
                ) as response:
                    if not 200 <= response.status < 300:
                        logger.warning(
                            "%s to %s failed: HTTP %s",
                            request.method,
                            self.base_url,
                            response.status,
                        )
                        raise UpstreamHTTPError(response.status)

                    try:
                        body = await response.json(content_type=None)
                    except ValueError as e:
                        raise MalformedResponse(f"response is not valid JSON: {e}") from e
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("%s to %s failed: %s", request.method, self.base_url, e)
            raise UpstreamConnectionError(str(e) or type(e).__name__) from e

        return RpcResponse.from_payload(body)
