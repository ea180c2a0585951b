from __future__ import annotations

import asyncio

from fastapi import APIRouter, HTTPException

from netflix_fun.schemas.coins import CoinDetail, CoinRow, HomePage, SolanaPrice
from netflix_fun.services.coin_lookup import get_coin_detail, get_specific_coin
from netflix_fun.services.price_oracle import get_solana_price
from netflix_fun.services.rows import ROWS, get_row


router = APIRouter(prefix="/views", tags=["views"])

HOME_ROWS = ("live", "featured", "pumpfun")


@router.get("/rows/{key}", response_model=CoinRow)
async def coin_row(key: str):
    """
    One browse row of coin cards.
    Example: /views/rows/trending
    """
    if key not in ROWS:
        raise HTTPException(
            status_code=404,
            detail={"error": "Unknown row", "supported": list(ROWS.keys()), "received": key},
        )
    return await get_row(key)


@router.get("/coins/{coin_id}", response_model=CoinDetail)
async def coin_detail(coin_id: str):
    return await get_coin_detail(coin_id)


@router.get("/specific", response_model=CoinDetail)
async def specific_coin():
    return await get_specific_coin()


@router.get("/sol-price", response_model=SolanaPrice)
async def sol_price():
    return await get_solana_price()


@router.get("/home", response_model=HomePage)
async def home():
    """Hero coin, the home rows and the SOL ticker; each part fetched independently."""
    hero, sol, *rows = await asyncio.gather(
        get_specific_coin(),
        get_solana_price(),
        *(get_row(key) for key in HOME_ROWS),
    )
    return HomePage(hero=hero, rows=rows, sol_price=SolanaPrice(**sol))
