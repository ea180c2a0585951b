from __future__ import annotations

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from netflix_fun.api import views as views_module
from netflix_fun.services import rows as rows_module
from netflix_fun.services.rows import ROWS, RowProfile

LIVE = "/coins/currently-live"
FOR_YOU = "/coins/for-you"
TOP_RUNNERS = "/coins/top-runners"


@pytest.fixture()
def client(fake_upstream):
    app = FastAPI()
    app.include_router(views_module.router)
    return TestClient(app)


@pytest.mark.parametrize("key", sorted(ROWS))
def test_every_row_is_non_empty_when_upstreams_are_down(client, key):
    # fake upstream answers 404 for everything
    resp = client.get(f"/views/rows/{key}")

    assert resp.status_code == 200
    row = resp.json()
    assert row["key"] == key
    assert row["title"] == ROWS[key].title
    assert len(row["coins"]) >= 3


def test_row_from_live_feed(client, fake_upstream, coin_factory):
    fake_upstream.add(LIVE, json_body=[coin_factory("alpha", 1_500_000), coin_factory("beta")])

    row = client.get("/views/rows/live").json()

    assert row["fallback"] is False
    assert row["error"] is None
    first = row["coins"][0]
    assert first["id"] == "alpha"
    assert first["usd_market_cap"] == "1.5M"
    assert first["price_change"] == "+12.50%"
    assert first["image_url"] == "https://ipfs.io/ipfs/Qmalpha"
    assert first["launch_time"].endswith("ago")


def test_rate_limited_row_reports_error(client, fake_upstream):
    fake_upstream.add(FOR_YOU, status=429)

    row = client.get("/views/rows/trending").json()

    assert row["fallback"] is True
    assert row["error"] == "Rate limit exceeded. Please try again later."
    assert [c["id"] for c in row["coins"]] == [f"trending{i}" for i in range(1, 6)]


def test_pumpfun_row_uses_wrapper_fields(client, fake_upstream, coin_factory):
    fake_upstream.add(TOP_RUNNERS, json_body=[
        {"coin": coin_factory("runner", description=None), "description": "curated", "modifiedBy": "ops"},
    ])

    card = client.get("/views/rows/pumpfun").json()["coins"][0]

    assert card["id"] == "runner"
    assert card["description"] == "curated"
    assert card["api_description"] == "curated"
    assert card["modified_by"] == "ops"


def test_solana_row_is_static(client, fake_upstream):
    row = client.get("/views/rows/solana").json()

    assert row["fallback"] is False
    assert len(row["coins"]) == 8
    assert fake_upstream.requests == []


def test_row_loader_exception_falls_back(client, monkeypatch):
    async def boom():
        raise RuntimeError("kaput")

    profile = ROWS["featured"]
    patched = dict(ROWS, featured=RowProfile(profile.key, profile.title, boom, profile.fallback, profile.missing))
    monkeypatch.setattr(rows_module, "ROWS", patched)

    row = client.get("/views/rows/featured").json()

    assert row["fallback"] is True
    assert row["error"] == "kaput"
    assert [c["id"] for c in row["coins"]] == ["featured1", "featured2", "featured3"]


def test_unknown_row_is_404(client):
    resp = client.get("/views/rows/classics")

    assert resp.status_code == 404
    detail = resp.json()["detail"]
    assert detail["error"] == "Unknown row"
    assert detail["received"] == "classics"
    assert "trending" in detail["supported"]


def test_coin_detail_for_unknown_mint(client):
    resp = client.get("/views/coins/unknown-7")

    assert resp.status_code == 200
    body = resp.json()
    assert body["not_found"] is True
    assert body["category"] == "Unknown"
    assert len(body["similar_coins"]) == 5


def test_coin_detail_found_in_live_feed(client, fake_upstream, coin_factory):
    fake_upstream.add(LIVE, json_body=[coin_factory("target", creator="dev")])
    fake_upstream.add("/latest/dex/tokens/", json_body={"pairs": [{"priceUsd": "0.5", "volume": {"h24": 2000}}]})

    body = client.get("/views/coins/target").json()

    assert body["not_found"] is False
    assert body["category"] == "Live Coin"
    assert body["creator"] == "dev"
    assert body["price"] == "0.50000000"
    assert body["volume"]["h24"] == "2.0K"
    assert body["dex"]["current_price"] == 0.5


def test_sol_price_fallback(client):
    body = client.get("/views/sol-price").json()

    assert body == {"price": "150.25", "source": "fallback", "fallback": True}


def test_specific_coin_built_in(client):
    body = client.get("/views/specific").json()

    assert body["name"] == "Netflix.Fun"
    assert body["category"] == "Featured Coin"
    assert body["rating"] == "99% Match"


def test_home_page_survives_dead_upstreams(client):
    resp = client.get("/views/home")

    assert resp.status_code == 200
    body = resp.json()
    assert body["hero"]["name"] == "Netflix.Fun"
    assert [r["key"] for r in body["rows"]] == ["live", "featured", "pumpfun"]
    assert all(r["fallback"] for r in body["rows"])
    assert all(r["coins"] for r in body["rows"])
    assert body["sol_price"]["fallback"] is True


def test_numeric_text_fields_do_not_drop_the_row(client, fake_upstream, coin_factory):
    fake_upstream.add(LIVE, json_body=[
        coin_factory("good"),
        coin_factory("odd", symbol=42, name=2024, twitter=7),
    ])

    row = client.get("/views/rows/live").json()

    assert row["fallback"] is False
    assert [c["id"] for c in row["coins"]] == ["good", "odd"]
    odd = row["coins"][1]
    assert odd["symbol"] == "42"
    assert odd["name"] == "2024"
    assert odd["twitter"] == "7"
