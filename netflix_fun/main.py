# netflix_fun/main.py
from __future__ import annotations

import logging

from fastapi import FastAPI

from netflix_fun.api.coins import router as coins_router
from netflix_fun.api.health import router as health_router
from netflix_fun.api.views import router as views_router

from netflix_fun.config.settings import get_settings


logging.basicConfig(
    level=get_settings().LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s | %(message)s",
)

app = FastAPI(title="Netflix.Fun API")

# Routers
app.include_router(health_router)
app.include_router(coins_router)
app.include_router(views_router)


@app.get("/")
def root() -> dict[str, str]:
    return {"message": "Netflix.Fun is streaming!"}
