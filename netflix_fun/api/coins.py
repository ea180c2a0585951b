from fastapi import APIRouter

from netflix_fun.schemas.coins import DexResponse, FeedResponse
from netflix_fun.services.dexscreener import get_dexscreener_data
from netflix_fun.services.pumpfun import (
    get_featured_coins,
    get_live_coins,
    get_pumpfun_originals,
    get_trending_coins,
)


router = APIRouter(prefix="/api/coins", tags=["coins"])


@router.get("/live", response_model=FeedResponse)
async def live_coins():
    return await get_live_coins()


@router.get("/trending", response_model=FeedResponse)
async def trending_coins():
    """For-you feed restricted to the market-cap band."""
    return await get_trending_coins()


@router.get("/featured", response_model=FeedResponse)
async def featured_coins():
    return await get_featured_coins()


@router.get("/pumpfun-originals", response_model=FeedResponse)
async def pumpfun_originals():
    """
    Pump.fun top-runners. Items keep the upstream {"coin": {...}} nesting.
    Example: /api/coins/pumpfun-originals
    """
    return await get_pumpfun_originals()


@router.get("/dexscreener/{mint}", response_model=DexResponse, response_model_exclude_none=True)
async def dexscreener_data(mint: str):
    """
    Volume / price change / liquidity for a mint from its first DexScreener pair.
    Example: /api/coins/dexscreener/2M2bJXedS3kpk9LabvJ7C4mcmgjZzUJMrK1J9QQCpump
    """
    return await get_dexscreener_data(mint)
