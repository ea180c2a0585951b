# netflix_fun/config/settings.py
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import List

_TRUTHY = frozenset({"1", "true", "yes", "y", "on"})


def _raw(name: str) -> str | None:
    """Env value with surrounding whitespace removed; blank counts as unset."""
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def env_str(name: str, default: str) -> str:
    return _raw(name) or default


def env_int(name: str, default: int) -> int:
    value = _raw(name)
    return default if value is None else int(value)


def env_float(name: str, default: float) -> float:
    value = _raw(name)
    return default if value is None else float(value)


def env_bool(name: str, default: bool) -> bool:
    value = _raw(name)
    return default if value is None else value.lower() in _TRUTHY


def env_list(name: str, default: List[str]) -> List[str]:
    """Comma separated names, lower-cased, blanks dropped."""
    value = _raw(name)
    if value is None:
        return list(default)
    return [part.strip().lower() for part in value.split(",") if part.strip()]


def _base_url(name: str, default: str) -> str:
    return env_str(name, default).rstrip("/")


@dataclass(frozen=True)
class Settings:
    PUMPFUN_API_BASE: str
    DEXSCREENER_API_BASE: str
    UPSTREAM_DELAY_MS: int
    UPSTREAM_TIMEOUT_SECONDS: float
    FEED_LIMIT: int
    INCLUDE_NSFW: bool
    MARKET_CAP_FILTER_ENABLED: bool
    MARKET_CAP_MIN: float
    MARKET_CAP_MAX: float
    IPFS_GATEWAY: str
    PRICE_ORACLES: List[str]
    SOL_FALLBACK_PRICE: str
    FLAGSHIP_MINT: str
    LOG_LEVEL: str

    @staticmethod
    def from_env() -> "Settings":
        return Settings(
            PUMPFUN_API_BASE=_base_url("PUMPFUN_API_BASE", "https://frontend-api-v3.pump.fun"),
            DEXSCREENER_API_BASE=_base_url("DEXSCREENER_API_BASE", "https://api.dexscreener.com"),
            UPSTREAM_DELAY_MS=env_int("UPSTREAM_DELAY_MS", 500),
            UPSTREAM_TIMEOUT_SECONDS=env_float("UPSTREAM_TIMEOUT_SECONDS", 10.0),
            FEED_LIMIT=env_int("FEED_LIMIT", 48),
            INCLUDE_NSFW=env_bool("INCLUDE_NSFW", False),
            MARKET_CAP_FILTER_ENABLED=env_bool("MARKET_CAP_FILTER_ENABLED", True),
            MARKET_CAP_MIN=env_float("MARKET_CAP_MIN", 10_000.0),
            MARKET_CAP_MAX=env_float("MARKET_CAP_MAX", 50_000.0),
            IPFS_GATEWAY=env_str("IPFS_GATEWAY", "ipfs.io"),
            PRICE_ORACLES=env_list("PRICE_ORACLES", ["coingecko", "binance", "coinbase"]),
            SOL_FALLBACK_PRICE=env_str("SOL_FALLBACK_PRICE", "150.25"),
            FLAGSHIP_MINT=env_str("FLAGSHIP_MINT", "2M2bJXedS3kpk9LabvJ7C4mcmgjZzUJMrK1J9QQCpump"),
            LOG_LEVEL=env_str("LOG_LEVEL", "INFO").upper(),
        )


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings.from_env()
    return _settings
