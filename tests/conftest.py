"""Shared test fixtures and sample data."""
from __future__ import annotations

import textwrap
from pathlib import Path

import pytest

from eth_balance.config import AppConfig, CacheConfig, RetryConfig, UpstreamConfig
from eth_balance.models import RpcRequest, RpcResponse


# ---------------------------------------------------------------------------
# Config fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def sample_upstream_config() -> UpstreamConfig:
    return UpstreamConfig(
        base_url="https://rpc.example.com/v3",
        api_key="test-key",
        timeout=5,
    )


@pytest.fixture()
def sample_retry_config() -> RetryConfig:
    return RetryConfig(factor=2.0, min_delay=0.0, max_delay=0.0, max_attempts=3)


@pytest.fixture()
def sample_app_config(
    sample_upstream_config: UpstreamConfig,
    sample_retry_config: RetryConfig,
) -> AppConfig:
    return AppConfig(
        upstream=sample_upstream_config,
        cache=CacheConfig(backend="memory", url="", ttl_seconds=10.0),
        retry=sample_retry_config,
    )


# ---------------------------------------------------------------------------
# Config YAML fixture
# ---------------------------------------------------------------------------

SAMPLE_YAML = textwrap.dedent("""\
    upstream:
      base_url: "https://rpc.example.com/v3"
      api_key: "yaml-key"
      timeout: 10
    cache:
      backend: redis
      url: "redis://localhost:6379/0"
      ttl_seconds: 10
    retry:
      factor: 2.0
      min_delay: 0.1
      max_delay: 5
      max_attempts: 4
""")


@pytest.fixture()
def sample_yaml_path(tmp_path: Path) -> Path:
    cfg_file = tmp_path / "config.yaml"
    cfg_file.write_text(SAMPLE_YAML)
    return cfg_file


# ---------------------------------------------------------------------------
# Fakes
# ---------------------------------------------------------------------------


class FakeTransport:
    """Records requests and replays queued results or errors."""

    def __init__(self, *outcomes: str | Exception) -> None:
        self.outcomes = list(outcomes)
        self.requests: list[RpcRequest] = []

    async def call(self, request: RpcRequest) -> RpcResponse:
        self.requests.append(request)
        outcome = self.outcomes.pop(0) if len(self.outcomes) > 1 else self.outcomes[0]
        if isinstance(outcome, Exception):
            raise outcome
        return RpcResponse(result=outcome, id=1)


class FakeClock:
    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture()
def fake_clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def make_transport() -> type[FakeTransport]:
    return FakeTransport
