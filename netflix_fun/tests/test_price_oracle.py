from __future__ import annotations

from dataclasses import replace

import httpx
import pytest

from netflix_fun.config import settings as settings_module
from netflix_fun.services.price_oracle import get_solana_price

COINGECKO = "api.coingecko.com"
BINANCE = "api.binance.com"
COINBASE = "api.coinbase.com"


@pytest.mark.asyncio
async def test_first_oracle_wins(fake_upstream):
    fake_upstream.add(COINGECKO, json_body={"solana": {"usd": 172.5}})
    fake_upstream.add(BINANCE, json_body={"price": "1.00"})

    result = await get_solana_price()

    assert result == {"price": "172.50", "source": "coingecko", "fallback": False}
    assert len(fake_upstream.requests) == 1


@pytest.mark.asyncio
async def test_falls_through_to_next_oracle(fake_upstream):
    fake_upstream.add(COINGECKO, status=429)
    fake_upstream.add(BINANCE, json_body={"symbol": "SOLUSDT"})
    fake_upstream.add(COINBASE, json_body={"data": {"amount": "149.9"}})

    result = await get_solana_price()

    assert result["price"] == "149.90"
    assert result["source"] == "coinbase"
    hosts = [r.url.host for r in fake_upstream.requests]
    assert hosts == [COINGECKO, BINANCE, COINBASE]


@pytest.mark.asyncio
async def test_network_errors_are_skipped(fake_upstream):
    fake_upstream.add(COINGECKO, exc=httpx.ConnectError("dns"))
    fake_upstream.add(BINANCE, json_body={"price": "151.2"})

    result = await get_solana_price()

    assert result["source"] == "binance"
    assert result["price"] == "151.20"


@pytest.mark.asyncio
async def test_all_oracles_fail_uses_fallback(fake_upstream):
    fake_upstream.add(COINGECKO, text="garbage")
    fake_upstream.add(BINANCE, status=500)
    fake_upstream.add(COINBASE, json_body=["unexpected"])

    result = await get_solana_price()

    assert result == {"price": "150.25", "source": "fallback", "fallback": True}


@pytest.mark.asyncio
async def test_oracle_order_comes_from_settings(monkeypatch, fake_upstream, fast_settings):
    monkeypatch.setattr(
        settings_module,
        "_settings",
        replace(fast_settings, PRICE_ORACLES=["nope", "binance"], SOL_FALLBACK_PRICE="99.99"),
    )
    fake_upstream.add(BINANCE, status=503)

    result = await get_solana_price()

    assert result["price"] == "99.99"
    assert [r.url.host for r in fake_upstream.requests] == [BINANCE]
