"""Shared fetch path for every third-party coin API call."""

from __future__ import annotations

import asyncio
import enum
import json
import logging
from dataclasses import dataclass
from typing import Any

import httpx

from netflix_fun.config.settings import get_settings
from netflix_fun.services.errors import (
    UpstreamRateLimitError,
    UpstreamStatusError,
    UpstreamUnavailableError,
)
from netflix_fun.utils.number_format import parse_number


logger = logging.getLogger("netflix_fun.upstream")

DEFAULT_HEADERS = {
    "Accept": "application/json",
    "Cache-Control": "no-store",
}

# keys that may hold the coin list in an object-shaped response
_ARRAY_KEYS = ("data", "coins", "results")


class ResultStatus(str, enum.Enum):
    OK = "ok"
    NO_DATA = "no_data"
    PARSE_FAILURE = "parse_failure"


@dataclass
class UpstreamResult:
    source: str
    status: ResultStatus
    status_code: int
    payload: Any = None

    @property
    def ok(self) -> bool:
        return self.status is ResultStatus.OK


def build_client() -> httpx.AsyncClient:
    return httpx.AsyncClient(timeout=get_settings().UPSTREAM_TIMEOUT_SECONDS)


async def _pause(seconds: float) -> None:
    if seconds > 0:
        await asyncio.sleep(seconds)


def _preview(payload: Any, limit: int = 500) -> str:
    try:
        return json.dumps(payload)[:limit]
    except (TypeError, ValueError):
        return repr(payload)[:limit]


async def fetch_json(
    url: str,
    *,
    source: str,
    params: dict[str, Any] | None = None,
    delay: bool = True,
) -> UpstreamResult:
    """
    Single GET against an upstream JSON API.

    Waits UPSTREAM_DELAY_MS first to stay under upstream rate limits, then:
      - 429            -> UpstreamRateLimitError
      - other non-2xx  -> UpstreamStatusError
      - network error  -> UpstreamUnavailableError
      - 204 / blank    -> NO_DATA result
      - invalid JSON   -> PARSE_FAILURE result
    One attempt only, no retry.
    """
    if delay:
        await _pause(get_settings().UPSTREAM_DELAY_MS / 1000)

    try:
        async with build_client() as client:
            response = await client.get(url, params=params, headers=DEFAULT_HEADERS)
    except httpx.HTTPError as exc:
        logger.warning("upstream unreachable | source=%s | err=%s", source, exc)
        raise UpstreamUnavailableError(source, f"Unable to reach {source}: {exc}") from exc

    logger.info("upstream response | source=%s | status=%s", source, response.status_code)

    if response.status_code == 429:
        logger.error("rate limit exceeded | source=%s", source)
        raise UpstreamRateLimitError(source)
    if not response.is_success:
        raise UpstreamStatusError(source, response.status_code)

    if response.status_code == 204:
        logger.info("upstream returned 204 No Content | source=%s", source)
        return UpstreamResult(source, ResultStatus.NO_DATA, response.status_code)

    text = response.text
    if not text.strip():
        logger.info("upstream returned empty body | source=%s", source)
        return UpstreamResult(source, ResultStatus.NO_DATA, response.status_code)

    try:
        payload = json.loads(text)
    except ValueError as exc:
        logger.error("failed to parse JSON | source=%s | err=%s | body=%s", source, exc, text[:100])
        return UpstreamResult(source, ResultStatus.PARSE_FAILURE, response.status_code)

    logger.debug("upstream payload | source=%s | %s", source, _preview(payload))
    return UpstreamResult(source, ResultStatus.OK, response.status_code, payload)


def extract_coin_array(payload: Any) -> list[Any]:
    """Find the coin list in a bare array or under .data / .coins / .results."""
    if isinstance(payload, list):
        return payload
    if isinstance(payload, dict):
        for key in _ARRAY_KEYS:
            value = payload.get(key)
            if isinstance(value, list):
                return value
    return []


def unwrap_coin(item: Any) -> dict[str, Any]:
    """Top-runner entries nest the coin under "coin"; others are the coin."""
    if isinstance(item, dict):
        nested = item.get("coin")
        if isinstance(nested, dict):
            return nested
        return item
    return {}


def safe_number(value: Any, default: float = 0.0) -> float:
    num = parse_number(value)
    return default if num is None else num


def filter_by_market_cap(coins: list[Any], low: float, high: float) -> list[Any]:
    """Keep coins whose usd_market_cap (missing counts as 0) is within [low, high]."""
    kept = []
    for coin in coins:
        cap = safe_number(unwrap_coin(coin).get("usd_market_cap"), 0.0)
        if low <= cap <= high:
            kept.append(coin)
    return kept
