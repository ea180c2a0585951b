# netflix_fun/api/health.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Dict

from fastapi import APIRouter

from netflix_fun.config.settings import get_settings
from netflix_fun.utils.time import now_ms

router = APIRouter(tags=["health"])

STARTED_MS = now_ms()


def _clock() -> Dict[str, Any]:
    """Server time in the same epoch-millisecond unit the upstream feeds use."""
    current = now_ms()
    stamp = datetime.fromtimestamp(current / 1000, tz=timezone.utc)
    return {
        "server_time_ms": current,
        "server_time": stamp.strftime("%Y-%m-%dT%H:%M:%SZ"),
        "started_ms": STARTED_MS,
        "uptime_seconds": (current - STARTED_MS) // 1000,
    }


@router.get("/live")
async def live():
    return {"status": "ok"}


@router.get("/health")
async def health():
    # configuration only; upstreams are not probed
    s = get_settings()
    return {
        "status": "ok",
        **_clock(),
        "upstreams": {
            "pumpfun": s.PUMPFUN_API_BASE,
            "dexscreener": s.DEXSCREENER_API_BASE,
            "price_oracles": list(s.PRICE_ORACLES),
        },
        "upstream_delay_ms": s.UPSTREAM_DELAY_MS,
        "market_cap_band": {
            "enabled": s.MARKET_CAP_FILTER_ENABLED,
            "min": s.MARKET_CAP_MIN,
            "max": s.MARKET_CAP_MAX,
        },
    }
