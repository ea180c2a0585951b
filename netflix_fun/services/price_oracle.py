"""SOL/USD spot price from the first public oracle that answers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from netflix_fun.config.settings import get_settings
from netflix_fun.services.errors import UpstreamError
from netflix_fun.services.upstream import fetch_json, safe_number


logger = logging.getLogger("netflix_fun.price_oracle")


def _dig(payload: Any, *keys: str) -> Any:
    for key in keys:
        if not isinstance(payload, dict):
            return None
        payload = payload.get(key)
    return payload


def _coingecko(payload: Any) -> Any:
    return _dig(payload, "solana", "usd")


def _binance(payload: Any) -> Any:
    return _dig(payload, "price")


def _coinbase(payload: Any) -> Any:
    return _dig(payload, "data", "amount")


@dataclass(frozen=True)
class PriceOracle:
    name: str
    url: str
    extract: Callable[[Any], Any]


ORACLES: dict[str, PriceOracle] = {
    "coingecko": PriceOracle(
        "coingecko",
        "https://api.coingecko.com/api/v3/simple/price?ids=solana&vs_currencies=usd",
        _coingecko,
    ),
    "binance": PriceOracle(
        "binance",
        "https://api.binance.com/api/v3/ticker/price?symbol=SOLUSDT",
        _binance,
    ),
    "coinbase": PriceOracle(
        "coinbase",
        "https://api.coinbase.com/v2/prices/SOL-USD/spot",
        _coinbase,
    ),
}


async def _query(oracle: PriceOracle) -> Optional[str]:
    result = await fetch_json(oracle.url, source=oracle.name, delay=False)
    if not result.ok or not isinstance(result.payload, dict):
        return None
    price = safe_number(oracle.extract(result.payload), 0.0)
    if price <= 0:
        return None
    return f"{price:.2f}"


async def get_solana_price() -> dict[str, Any]:
    s = get_settings()
    for name in s.PRICE_ORACLES:
        oracle = ORACLES.get(name)
        if oracle is None:
            logger.warning("⚠️ unknown price oracle %r, skipping", name)
            continue

        logger.info("trying SOL price from %s", oracle.name)
        try:
            price = await _query(oracle)
        except UpstreamError as exc:
            logger.info("price oracle %s failed: %s", oracle.name, exc)
            continue

        if price is not None:
            return {"price": price, "source": oracle.name, "fallback": False}

    logger.warning("⚠️ all price oracles failed, using fallback price")
    return {"price": s.SOL_FALLBACK_PRICE, "source": "fallback", "fallback": True}
