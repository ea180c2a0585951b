"""
Coin detail lookup across the listing feeds.

A coin id (mint) is searched in an ordered list of feeds; the first feed that
knows the mint wins and the result is enriched with DexScreener figures. Ids
nobody knows get a placeholder detail instead of an error.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Optional

from netflix_fun.config.settings import get_settings
from netflix_fun.schemas.coins import CoinCard, CoinDetail
from netflix_fun.services import dexscreener, mock_data, pumpfun
from netflix_fun.services.presenters import (
    apply_dex_data,
    fallback_coin_detail,
    to_coin_card,
    to_coin_detail,
)
from netflix_fun.services.upstream import extract_coin_array, unwrap_coin


logger = logging.getLogger("netflix_fun.coin_lookup")

UNKNOWN_PREFIX = "unknown-"


@dataclass(frozen=True)
class LookupStrategy:
    name: str
    load: Callable[[], Awaitable[dict[str, Any]]]
    category: str
    rating: str
    default_description: str

    async def find(self, mint: str) -> Optional[dict[str, Any]]:
        payload = await self.load()
        for item in extract_coin_array(payload):
            if unwrap_coin(item).get("mint") == mint:
                return item
        return None


# feed functions resolved at call time
async def _pumpfun_originals() -> dict[str, Any]:
    return await pumpfun.get_pumpfun_originals()


async def _live() -> dict[str, Any]:
    return await pumpfun.get_live_coins()


async def _featured() -> dict[str, Any]:
    return await pumpfun.get_featured_coins()


STRATEGIES: list[LookupStrategy] = [
    LookupStrategy(
        name="pumpfun-originals",
        load=_pumpfun_originals,
        category="Pump.fun Top Runner",
        rating="98% Match",
        default_description="A popular Solana meme coin on Pump.fun",
    ),
    LookupStrategy(
        name="live",
        load=_live,
        category="Live Coin",
        rating="98% Match",
        default_description=(
            "This popular Solana meme coin has taken the crypto world by storm "
            "with its community-driven approach and viral appeal."
        ),
    ),
    LookupStrategy(
        name="featured",
        load=_featured,
        category="Featured Coin",
        rating="95% Match",
        default_description=(
            "This featured Solana meme coin has been selected for its potential "
            "and community engagement."
        ),
    ),
]


def similar_coins() -> list[CoinCard]:
    return [to_coin_card(coin, i) for i, coin in enumerate(mock_data.SIMILAR_COINS)]


async def _enrich(detail: CoinDetail) -> CoinDetail:
    dex = await dexscreener.get_dexscreener_data(detail.id)
    if dex.get("success") and dex.get("data"):
        return apply_dex_data(detail, dex["data"])
    logger.info("no DexScreener data for %s: %s", detail.id, dex.get("message"))
    return detail


async def find_coin(
    coin_id: str,
    strategies: Optional[list[LookupStrategy]] = None,
) -> Optional[CoinDetail]:
    """Try each strategy in order; stop at the first one that knows the mint."""
    if strategies is None:
        strategies = STRATEGIES

    for strategy in strategies:
        try:
            item = await strategy.find(coin_id)
        except Exception:
            logger.exception("❌ lookup failed | strategy=%s | coin=%s", strategy.name, coin_id)
            continue

        if item is None:
            continue

        logger.info("found coin %s in %s", coin_id, strategy.name)
        detail = to_coin_detail(
            item,
            category=strategy.category,
            rating=strategy.rating,
            default_description=strategy.default_description,
            source=strategy.name,
        )
        return await _enrich(detail)

    return None


async def get_coin_detail(
    coin_id: str,
    strategies: Optional[list[LookupStrategy]] = None,
) -> CoinDetail:
    if coin_id.startswith(UNKNOWN_PREFIX):
        logger.info("unknown coin id %s, using fallback data", coin_id)
        detail = fallback_coin_detail(coin_id)
    else:
        try:
            detail = await find_coin(coin_id, strategies)
        except Exception:
            logger.exception("❌ error building coin detail for %s", coin_id)
            detail = None
        if detail is None:
            logger.info("coin %s not found in any data source, using fallback data", coin_id)
            detail = fallback_coin_detail(coin_id)

    return detail.model_copy(update={"similar_coins": similar_coins()})


async def get_specific_coin() -> CoinDetail:
    """The flagship coin: looked up like any other, else the built-in record."""
    mint = get_settings().FLAGSHIP_MINT
    try:
        detail = await find_coin(mint)
    except Exception:
        logger.exception("❌ error building flagship coin detail")
        detail = None

    if detail is None:
        detail = to_coin_detail(
            mock_data.flagship_coin(),
            category="Featured Coin",
            rating="99% Match",
            default_description="",
            source="built-in",
        )
    return detail.model_copy(update={"similar_coins": similar_coins()})
