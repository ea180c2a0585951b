"""Hardcoded records served whenever an upstream feed is unusable."""

from __future__ import annotations

from typing import Any

from netflix_fun.utils.ipfs import PLACEHOLDER_IMAGE
from netflix_fun.utils.time import now_ms


HOUR_MS = 3_600_000
DAY_MS = 24 * HOUR_MS


def _listing(
    mint: str,
    name: str,
    symbol: str,
    *,
    cap: float,
    change: float,
    volume: float,
    age_ms: int,
    social: str,
    website: str,
    image: str = PLACEHOLDER_IMAGE,
) -> dict[str, Any]:
    return {
        "mint": mint,
        "name": name,
        "symbol": symbol,
        "image_uri": image,
        "price_change_24h": change,
        "market_cap": cap,
        "usd_market_cap": cap,
        "volume_24h": volume,
        "created_timestamp": now_ms() - age_ms,
        "twitter": f"https://twitter.com/{social}",
        "telegram": f"https://t.me/{social}",
        "website": website,
    }


def mock_live_coins() -> list[dict[str, Any]]:
    coins = [
        _listing("live1", "PUMP Token", "PUMP", cap=1_200_000, change=67.2, volume=450_000,
                 age_ms=2 * HOUR_MS, social="pumptoken", website="https://pump.fun"),
        _listing("live2", "Solana Doge", "SOLDOGE", cap=890_000, change=42.8, volume=320_000,
                 age_ms=5 * HOUR_MS, social="solanadoge", website="https://solanadoge.com"),
        _listing("live3", "Meme Rocket", "MRKT", cap=2_100_000, change=103.5, volume=780_000,
                 age_ms=1 * HOUR_MS, social="memerocket", website="https://memerocket.io"),
    ]
    for coin in coins:
        coin["thumbnail"] = PLACEHOLDER_IMAGE
    return coins


_MICRO_CAPS = [
    # (index, usd_market_cap, price_change_24h, volume_24h, age in hours)
    (1, 15_000, 42.8, 5_000, 2),
    (2, 25_000, 22.1, 8_000, 5),
    (3, 35_000, 103.5, 12_000, 1),
    (4, 45_000, 67.2, 15_000, 3),
    (5, 18_000, 33.9, 6_000, 4),
]


def mock_trending_coins() -> list[dict[str, Any]]:
    return [
        _listing(f"trending{i}", f"Micro Cap {i}", f"MC{i}", cap=cap, change=change, volume=volume,
                 age_ms=hours * HOUR_MS, social=f"microcap{i}", website=f"https://microcap{i}.io")
        for i, cap, change, volume, hours in _MICRO_CAPS
    ]


_FEATURED_DESCRIPTIONS = {
    1: "A featured micro cap coin",
    2: "Another featured micro cap coin",
    3: "A third featured micro cap coin",
}


def mock_featured_coins() -> list[dict[str, Any]]:
    coins = []
    for i, cap, change, volume, hours in _MICRO_CAPS[:3]:
        coin = _listing(
            f"featured{i}", f"Micro Cap {i}", f"MC{i}", cap=cap, change=change, volume=volume,
            age_ms=hours * HOUR_MS, social=f"microcap{i}", website=f"https://microcap{i}.io",
            image=f"https://frontend-api-v3.pump.fun/images/coins/featured{i}.png",
        )
        coin.update(
            description=_FEATURED_DESCRIPTIONS[i],
            creator="Anonymous",
            complete=True,
            total_supply=i * 1_000_000,
            raydium_pool=None,
            nsfw=False,
            is_currently_live=False,
            last_trade_timestamp=now_ms() - (hours * HOUR_MS) // 2,
        )
        coins.append(coin)
    return coins


_TOP_RUNNERS = [
    (1, "A popular Solana meme coin on Pump.fun", 1_200_000, 67.2, 450_000, 2),
    (2, "A trending Solana meme coin on Pump.fun", 890_000, 42.8, 320_000, 5),
    (3, "An exciting new Solana meme coin on Pump.fun", 1_500_000, 103.5, 780_000, 1),
]


def mock_pumpfun_coins() -> list[dict[str, Any]]:
    """Top-runner shaped entries: {"coin": {...}, "description", "modifiedBy"}."""
    entries = []
    for i, description, cap, change, volume, hours in _TOP_RUNNERS:
        coin = _listing(
            f"pumpfun{i}", f"Pump Token {i}", f"PUMP{i}", cap=cap, change=change, volume=volume,
            age_ms=hours * HOUR_MS, social=f"pumptoken{i}", website="https://pump.fun",
        )
        coin.update(description=description, creator="Anonymous")
        entries.append({"coin": coin, "description": description, "modifiedBy": "Anonymous"})
    return entries


def empty_dex_data() -> dict[str, Any]:
    return {
        "volume_24h": 0,
        "volume_6h": 0,
        "volume_1h": 0,
        "volume_5m": 0,
        "price_change_24h": 0,
        "price_change_6h": 0,
        "price_change_1h": 0,
        "price_change_5m": 0,
        "ath_price": 0,
        "current_price": 0,
        "liquidity": 0,
        "fdv": 0,
        "pairAddress": "",
        "dexId": "",
        "url": "",
    }


def flagship_coin() -> dict[str, Any]:
    return {
        "mint": "2M2bJXedS3kpk9LabvJ7C4mcmgjZzUJMrK1J9QQCpump",
        "name": "Netflix.Fun",
        "symbol": "Netflix",
        "description": "",
        "image_uri": "https://ipfs.io/ipfs/QmU7VdkieJN5gVmaTNbxLZffkDHhok39bU5S3Mmkj2SCcy",
        "creator": "3JgLppCZVHK3diAQTHZcNptWQwLLS3ZhDzTJTcZYiPk7",
        "created_timestamp": now_ms() - 90 * DAY_MS,
        "market_cap": 49.072545157,
        "usd_market_cap": 7330.45679555266,
        "price_change_24h": 12.4,
        "volume_24h": 3_500_000,
        "twitter": None,
        "telegram": "https://t.me/ThreeStoogesLounge",
        "website": "https://netflixsolana.com/",
    }


SIMILAR_COINS: list[dict[str, Any]] = [
    {"mint": "shib", "name": "Shiba Inu", "symbol": "SHIB", "price_change_24h": 12.5},
    {"mint": "pepe", "name": "Pepe", "symbol": "PEPE", "price_change_24h": 8.3},
    {"mint": "floki", "name": "Floki Inu", "symbol": "FLOKI", "price_change_24h": 15.7},
    {"mint": "bonk", "name": "Bonk", "symbol": "BONK", "price_change_24h": 22.1},
    {"mint": "wojak", "name": "Wojak", "symbol": "WOJAK", "price_change_24h": 15.8},
]


# Curated Solana row; static in the product, never fetched.
SOLANA_COINS: list[dict[str, Any]] = [
    {"mint": "dbhzjrkg5jfunupn4cxuzidt2kmsewmdjnzgrmgipnwn", "name": "PUMP Token", "symbol": "PUMP",
     "price_change_24h": 67.2, "usd_market_cap": 1_200_000, "volume_24h": 450_000},
    {"mint": "8oosbx7jJrZxm5m4ThKhBpvwwG4QpoAe6i4GiG19pump", "name": "GiG19 PUMP", "symbol": "GIG19",
     "price_change_24h": 42.8, "usd_market_cap": 890_000, "volume_24h": 320_000},
    {"mint": "B91Nyc6SnWqr5DRR34eEMKuZrWh4zBhW9VhX4UNLpump", "name": "UNL PUMP", "symbol": "UNLP",
     "price_change_24h": 103.5, "usd_market_cap": 2_100_000, "volume_24h": 780_000},
    {"mint": "5HV956n7UQT1XdJzv43fHPocest5YAmi9ipsuiJx7zt7", "name": "Solana X", "symbol": "SOLX",
     "price_change_24h": 89.4, "usd_market_cap": 1_800_000, "volume_24h": 650_000},
    {"mint": "8BtoThi2ZoXnF7QQK1Wjmh2JuBw9FjVvhnGMVZ2vpump", "name": "MV2V PUMP", "symbol": "MV2V",
     "price_change_24h": 54.3, "usd_market_cap": 1_500_000, "volume_24h": 420_000},
    {"mint": "DitHyRMQiSDhn5cnKMJV2CDDt6sVct96YrECiM49pump", "name": "CiM49 PUMP", "symbol": "CIM49",
     "price_change_24h": 76.1, "usd_market_cap": 1_300_000, "volume_24h": 510_000},
    {"mint": "FtUEW73K6vEYHfbkfpdBZfWpxgQar2HipGdbutEhpump", "name": "butEh PUMP", "symbol": "BUTEH",
     "price_change_24h": 38.7, "usd_market_cap": 950_000, "volume_24h": 280_000},
    {"mint": "C3DwDjT17gDvvCYC2nsdGHxDHVmQRdhKfpAdqQ29pump", "name": "Q29 PUMP", "symbol": "Q29P",
     "price_change_24h": 92.5, "usd_market_cap": 1_700_000, "volume_24h": 630_000},
]
