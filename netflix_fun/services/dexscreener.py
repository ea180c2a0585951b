"""DexScreener market data for a single mint."""

from __future__ import annotations

import logging
from typing import Any
from urllib.parse import quote

from netflix_fun.config.settings import get_settings
from netflix_fun.services import mock_data
from netflix_fun.services.upstream import ResultStatus, fetch_json, safe_number


logger = logging.getLogger("netflix_fun.dexscreener")

SOURCE = "DexScreener"

_TIMEFRAMES = {"24h": "h24", "6h": "h6", "1h": "h1", "5m": "m5"}


def _section(pair: dict[str, Any], key: str) -> dict[str, Any]:
    value = pair.get(key)
    return value if isinstance(value, dict) else {}


def map_pair(pair: dict[str, Any]) -> dict[str, Any]:
    """Flatten the first DexScreener pair into our DexData fields."""
    volume = _section(pair, "volume")
    change = _section(pair, "priceChange")
    price = safe_number(pair.get("priceUsd"), 0)

    data: dict[str, Any] = {}
    for suffix, key in _TIMEFRAMES.items():
        data[f"volume_{suffix}"] = safe_number(volume.get(key), 0)
    for suffix, key in _TIMEFRAMES.items():
        data[f"price_change_{suffix}"] = safe_number(change.get(key), 0)

    data.update(
        ath_price=price,
        current_price=price,
        liquidity=safe_number(_section(pair, "liquidity").get("usd"), 0),
        fdv=safe_number(pair.get("fdv"), 0),
        pairAddress=pair.get("pairAddress") or "",
        dexId=pair.get("dexId") or "",
        url=pair.get("url") or "",
    )
    return data


async def get_dexscreener_data(mint: str) -> dict[str, Any]:
    url = f"{get_settings().DEXSCREENER_API_BASE}/latest/dex/tokens/{quote(mint, safe='')}"
    try:
        result = await fetch_json(url, source=SOURCE)

        if result.status is ResultStatus.NO_DATA:
            if result.status_code == 204:
                return {"success": False, "message": "No data found"}
            return {"success": False, "message": "Empty response"}
        if result.status is ResultStatus.PARSE_FAILURE:
            return {"success": False, "message": "Failed to parse response"}

        payload = result.payload
        pairs = payload.get("pairs") if isinstance(payload, dict) else None
        if isinstance(pairs, list) and pairs and isinstance(pairs[0], dict):
            return {"success": True, "data": map_pair(pairs[0])}

        return {"success": False, "message": "No pairs found"}
    except Exception as exc:
        logger.error("error fetching DexScreener data for %s: %s", mint, exc)
        return {
            "success": False,
            "message": str(exc) or "Unknown error",
            "data": mock_data.empty_dex_data(),
        }
