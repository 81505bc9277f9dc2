"""Configuration loader — reads config.yaml, interpolates env vars, validates."""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

CACHE_BACKENDS = ("redis", "memory", "none")

# ---------------------------------------------------------------------------
# Frozen config dataclasses
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class UpstreamConfig:
    base_url: str = "https://mainnet.infura.io/v3"
    api_key: str = ""
    timeout: int = 30
    method: str = "eth_getBalance"


@dataclass(frozen=True)
class CacheConfig:
    backend: str = "redis"
    url: str = "redis://redis-service:6379"
    ttl_seconds: float = 10.0


@dataclass(frozen=True)
class RetryConfig:
    """Exponential backoff: ``min_delay * factor**n`` capped at ``max_delay``.

    ``max_attempts`` counts every call, the first one included.
    """

    factor: float = 2.0
    min_delay: float = 0.1
    max_delay: float = 500.0
    max_attempts: int = 5


@dataclass(frozen=True)
class AppConfig:
    upstream: UpstreamConfig = field(default_factory=UpstreamConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)
    retry: RetryConfig = field(default_factory=RetryConfig)


# ---------------------------------------------------------------------------
# Env interpolation
# ---------------------------------------------------------------------------

_ENV_VAR_RE = re.compile(r"\$\{([^}:]+)(?::-([^}]*))?}")


def _interpolate_env(value: Any) -> Any:
    """Recursively replace ${VAR} and ${VAR:-default} with environment values."""
    if isinstance(value, str):
        return _ENV_VAR_RE.sub(
            lambda m: os.environ.get(m.group(1)) or (m.group(2) or ""), value
        )
    if isinstance(value, dict):
        return {k: _interpolate_env(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_interpolate_env(item) for item in value]
    return value


# ---------------------------------------------------------------------------
# YAML → dataclass builders
# ---------------------------------------------------------------------------


def _build_upstream(raw: dict[str, Any]) -> UpstreamConfig:
    return UpstreamConfig(
        base_url=raw.get("base_url", UpstreamConfig.base_url),
        api_key=raw.get("api_key", ""),
        timeout=int(raw.get("timeout", 30)),
        method=raw.get("method", UpstreamConfig.method),
    )


def _build_cache(raw: dict[str, Any]) -> CacheConfig:
    return CacheConfig(
        backend=str(raw.get("backend", "redis")).lower(),
        url=raw.get("url", CacheConfig.url),
        ttl_seconds=float(raw.get("ttl_seconds", 10.0)),
    )


def _build_retry(raw: dict[str, Any]) -> RetryConfig:
    return RetryConfig(
        factor=float(raw.get("factor", 2.0)),
        min_delay=float(raw.get("min_delay", 0.1)),
        max_delay=float(raw.get("max_delay", 500.0)),
        max_attempts=int(raw.get("max_attempts", 5)),
    )


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def load_config(config_path: str | Path | None = None) -> AppConfig:
    """Load and validate application configuration from YAML + .env.

    Args:
        config_path: Path to config.yaml. Defaults to ``config.yaml`` in the
            project root (two levels up from this file).

    Raises:
        FileNotFoundError: the config file does not exist.
        ConfigurationError: no upstream API key is configured.
        ValueError: any other invalid setting.
    """
    load_dotenv()

    if config_path is None:
        config_path = Path(__file__).resolve().parent.parent / "config.yaml"
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(config_path) as f:
        raw = yaml.safe_load(f) or {}

    raw = _interpolate_env(raw)

    cfg = AppConfig(
        upstream=_build_upstream(raw.get("upstream", {})),
        cache=_build_cache(raw.get("cache", {})),
        retry=_build_retry(raw.get("retry", {})),
    )

    _validate(cfg)
    logger.info("Configuration loaded from %s", config_path)
    return cfg


def _validate(cfg: AppConfig) -> None:
    """Raise on invalid configuration."""
    if not cfg.upstream.api_key:
        raise ConfigurationError("couldn't get API key from environment")
    if not cfg.upstream.base_url:
        raise ValueError("Upstream base_url must not be empty")
    if cfg.upstream.timeout <= 0:
        raise ValueError("Upstream timeout must be positive")

    if cfg.cache.backend not in CACHE_BACKENDS:
        raise ValueError(
            f"Unknown cache backend '{cfg.cache.backend}' "
            f"(expected one of {', '.join(CACHE_BACKENDS)})"
        )
    if cfg.cache.ttl_seconds <= 0:
        raise ValueError("Cache ttl_seconds must be positive")

    retry = cfg.retry
    if retry.max_attempts < 1:
        raise ValueError("Retry max_attempts must be at least 1")
    if retry.factor < 1:
        raise ValueError("Retry factor must be at least 1")
    if retry.min_delay < 0:
        raise ValueError("Retry min_delay must not be negative")
    if retry.min_delay > retry.max_delay:
        raise ValueError("Retry min_delay must not exceed max_delay")
