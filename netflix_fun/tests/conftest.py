from __future__ import annotations

import json
from dataclasses import replace
from typing import Any

import httpx
import pytest

from netflix_fun.config import settings as settings_module
from netflix_fun.config.settings import Settings
from netflix_fun.services import upstream


class FakeUpstream:
    """Routes requests by URL fragment; unmatched URLs answer 404."""

    def __init__(self) -> None:
        self.routes: list[tuple[str, Any]] = []
        self.requests: list[httpx.Request] = []

    def add(
        self,
        fragment: str,
        *,
        status: int = 200,
        json_body: Any = None,
        text: str | None = None,
        exc: Exception | None = None,
    ) -> None:
        self.routes.append((fragment, (status, json_body, text, exc)))

    def urls(self) -> list[str]:
        return [str(r.url) for r in self.requests]

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        for fragment, (status, json_body, text, exc) in self.routes:
            if fragment not in str(request.url):
                continue
            if exc is not None:
                raise exc
            if json_body is not None:
                return httpx.Response(status, content=json.dumps(json_body).encode())
            return httpx.Response(status, content=(text or "").encode())
        return httpx.Response(404)


@pytest.fixture(autouse=True)
def fast_settings(monkeypatch):
    s = replace(Settings.from_env(), UPSTREAM_DELAY_MS=0)
    monkeypatch.setattr(settings_module, "_settings", s)
    return s


@pytest.fixture()
def fake_upstream(monkeypatch):
    fake = FakeUpstream()
    transport = httpx.MockTransport(fake.handler)
    monkeypatch.setattr(upstream, "build_client", lambda: httpx.AsyncClient(transport=transport))
    return fake


def _make_coin(mint: str, usd_market_cap: float | None = 20_000, **extra: Any) -> dict[str, Any]:
    coin = {
        "mint": mint,
        "name": f"Coin {mint}",
        "symbol": mint[:4].upper(),
        "image_uri": f"ipfs://Qm{mint}",
        "market_cap": 100.0,
        "price_change_24h": 12.5,
        "volume_24h": 4_200,
        "created_timestamp": 1_700_000_000_000,
    }
    if usd_market_cap is not None:
        coin["usd_market_cap"] = usd_market_cap
    coin.update(extra)
    return coin


@pytest.fixture()
def coin_factory():
    return _make_coin
