"""Pydantic models for the coin proxy routes and the view endpoints."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class FeedResponse(BaseModel):
    """Listing proxy payload. `data` is never empty: mock coins stand in."""

    success: bool
    data: List[Dict[str, Any]]
    message: Optional[str] = None


class DexData(BaseModel):
    volume_24h: float = 0
    volume_6h: float = 0
    volume_1h: float = 0
    volume_5m: float = 0

    price_change_24h: float = 0
    price_change_6h: float = 0
    price_change_1h: float = 0
    price_change_5m: float = 0

    # DexScreener has no ATH; the current price stands in
    ath_price: float = 0
    current_price: float = 0

    liquidity: float = 0
    fdv: float = 0
    pairAddress: str = ""
    dexId: str = ""
    url: str = ""


class DexResponse(BaseModel):
    success: bool
    data: Optional[DexData] = None
    message: Optional[str] = None


class CoinCard(BaseModel):
    """One tile in a coin row."""

    id: str
    name: str
    symbol: str
    description: Optional[str] = None
    image_url: str
    thumbnail_url: str
    price_change: str
    market_cap: str
    usd_market_cap: str
    volume: str
    launch_time: str
    created_timestamp: Optional[float] = None
    twitter: Optional[str] = None
    telegram: Optional[str] = None
    website: Optional[str] = None
    api_description: Optional[str] = None
    modified_by: Optional[str] = None


class CoinRow(BaseModel):
    key: str
    title: str
    coins: List[CoinCard]
    fallback: bool = False
    error: Optional[str] = None


class Timeframes(BaseModel):
    h24: str = "N/A"
    h6: str = "N/A"
    h1: str = "N/A"
    m5: str = "N/A"


class CoinDetail(BaseModel):
    id: str
    name: str
    symbol: str
    description: str
    market_cap: str
    usd_market_cap: str
    price_change: str
    image_url: str
    thumbnail_url: str
    creator: str
    created_timestamp: Optional[float] = None
    launch_time: str
    category: str
    rating: str
    price: str
    volume: Timeframes = Field(default_factory=Timeframes)
    price_changes: Timeframes = Field(default_factory=Timeframes)
    ath_price: Optional[str] = None
    twitter: Optional[str] = None
    telegram: Optional[str] = None
    website: Optional[str] = None
    discord: Optional[str] = None
    dex: Optional[DexData] = None
    source: Optional[str] = None
    not_found: bool = False
    similar_coins: List[CoinCard] = Field(default_factory=list)


class SolanaPrice(BaseModel):
    price: str
    source: str
    fallback: bool = False


class HomePage(BaseModel):
    hero: CoinDetail
    rows: List[CoinRow]
    sol_price: SolanaPrice
