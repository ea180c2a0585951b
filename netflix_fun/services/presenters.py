"""Map raw upstream coin records onto display view models."""

from __future__ import annotations

from typing import Any, Optional

from netflix_fun.schemas.coins import CoinCard, CoinDetail, DexData, Timeframes
from netflix_fun.services.upstream import safe_number, unwrap_coin
from netflix_fun.utils.ipfs import PLACEHOLDER_HERO_IMAGE, convert_ipfs_url, log_image_url
from netflix_fun.utils.number_format import (
    NOT_AVAILABLE,
    format_number,
    format_percent_change,
    safe_number_format,
)
from netflix_fun.utils.time import format_time_ago, minutes_since_creation, now_ms


DAY_MS = 86_400_000

UNAVAILABLE_DESCRIPTION = (
    "Information about this coin is currently unavailable. "
    "This Solana token may be new or not yet widely tracked."
)


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _launch_time(created: Any, missing: str = NOT_AVAILABLE) -> str:
    if not _is_number(created) or not created:
        return missing
    return format_time_ago(minutes_since_creation(created))


def _has_value(value: Any) -> bool:
    # zero and unparseable figures both count as absent
    return safe_number(value) != 0


def _figure(value: Any, missing: str) -> str:
    return format_number(value) if _is_number(value) and _has_value(value) else missing


def _text(value: Any, default: Optional[str] = None) -> Optional[str]:
    """Upstream strings sometimes arrive as numbers; anything non-scalar is dropped."""
    if value is None or isinstance(value, (dict, list)):
        return default
    text = str(value)
    return text if text else default


def to_coin_card(item: Any, index: int, *, missing: str = NOT_AVAILABLE) -> CoinCard:
    """
    Row tile for a listing entry. Accepts both bare coin dicts and
    top-runner {"coin": {...}} entries; absent figures render as `missing`.
    """
    coin = unwrap_coin(item)
    wrapper = item if isinstance(item, dict) and coin is not item else {}

    image = convert_ipfs_url(_text(coin.get("image_uri")) or _text(coin.get("imageUrl")))
    thumb = _text(coin.get("thumbnail"))
    thumbnail = convert_ipfs_url(thumb) if thumb else image
    change = coin.get("price_change_24h")
    created = coin.get("created_timestamp")

    return CoinCard(
        id=_text(coin.get("mint")) or _text(coin.get("id"), f"unknown-{index}"),
        name=_text(coin.get("name"), f"Unknown Coin {index + 1}"),
        symbol=_text(coin.get("symbol"), "???"),
        description=_text(coin.get("description")) or _text(wrapper.get("description")),
        image_url=image,
        thumbnail_url=thumbnail,
        price_change=format_percent_change(change, missing) if _has_value(change) else missing,
        market_cap=_figure(coin.get("market_cap"), missing),
        usd_market_cap=_figure(coin.get("usd_market_cap"), missing),
        volume=_figure(coin.get("volume_24h"), missing),
        launch_time=_launch_time(created, missing),
        created_timestamp=created if _is_number(created) else None,
        twitter=_text(coin.get("twitter")),
        telegram=_text(coin.get("telegram")),
        website=_text(coin.get("website")),
        api_description=_text(wrapper.get("description")),
        modified_by=_text(wrapper.get("modifiedBy")),
    )


def _when_set(value: Any, fmt) -> str:
    return fmt(value) if _has_value(value) else NOT_AVAILABLE


def _timeframes(coin: dict[str, Any], flat_key: str, nested_key: str, fmt) -> Timeframes:
    """24h comes from the flat field, shorter windows from a nested {h6, h1, m5} block."""
    section = coin.get(nested_key)
    if not isinstance(section, dict):
        section = {}
    return Timeframes(
        h24=_when_set(coin.get(flat_key), fmt),
        h6=_when_set(section.get("h6"), fmt),
        h1=_when_set(section.get("h1"), fmt),
        m5=_when_set(section.get("m5"), fmt),
    )


def to_coin_detail(
    item: Any,
    *,
    category: str,
    rating: str,
    default_description: str,
    source: Optional[str] = None,
) -> CoinDetail:
    coin = unwrap_coin(item)
    wrapper = item if isinstance(item, dict) and coin is not item else {}
    image_uri = _text(coin.get("image_uri"))
    log_image_url(image_uri)

    created = coin.get("created_timestamp") if _is_number(coin.get("created_timestamp")) else None
    percent_24h = _when_set(coin.get("price_change_24h"), format_percent_change)

    return CoinDetail(
        id=_text(coin.get("mint"), ""),
        name=_text(coin.get("name"), ""),
        symbol=_text(coin.get("symbol"), ""),
        description=(
            _text(coin.get("description"))
            or _text(wrapper.get("description"))
            or default_description
        ),
        market_cap=_when_set(coin.get("market_cap"), format_number),
        usd_market_cap=_when_set(coin.get("usd_market_cap"), format_number),
        price_change=percent_24h,
        image_url=convert_ipfs_url(image_uri, placeholder=PLACEHOLDER_HERO_IMAGE),
        thumbnail_url=convert_ipfs_url(
            image_uri or _text(coin.get("thumbnail")), placeholder=PLACEHOLDER_HERO_IMAGE
        ),
        creator=_text(coin.get("creator"), "Anonymous"),
        created_timestamp=created,
        launch_time=format_time_ago(minutes_since_creation(created or now_ms())),
        category=category,
        rating=rating,
        price=_when_set(coin.get("price"), safe_number_format),
        volume=_timeframes(coin, "volume_24h", "volume", format_number),
        price_changes=_timeframes(coin, "price_change_24h", "price_change", format_percent_change),
        twitter=_text(coin.get("twitter")),
        telegram=_text(coin.get("telegram")),
        website=_text(coin.get("website")),
        discord=_text(coin.get("discord")),
        source=source,
    )


def apply_dex_data(detail: CoinDetail, dex: dict[str, Any]) -> CoinDetail:
    """Overlay DexScreener price, ATH and per-timeframe figures onto a detail view."""
    data = DexData(**dex)
    update: dict[str, Any] = {"dex": data}

    if data.current_price:
        update["price"] = safe_number_format(data.current_price)
    update["ath_price"] = safe_number_format(data.ath_price) if data.ath_price else None

    update["price_changes"] = Timeframes(
        h24=format_percent_change(data.price_change_24h),
        h6=format_percent_change(data.price_change_6h),
        h1=format_percent_change(data.price_change_1h),
        m5=format_percent_change(data.price_change_5m),
    )
    update["volume"] = Timeframes(
        h24=format_number(data.volume_24h),
        h6=format_number(data.volume_6h),
        h1=format_number(data.volume_1h),
        m5=format_number(data.volume_5m),
    )
    return detail.model_copy(update=update)


def display_name(coin_id: str) -> str:
    if len(coin_id) > 12:
        return f"{coin_id[:8]}...{coin_id[-4:]}"
    return coin_id


def fallback_coin_detail(coin_id: str) -> CoinDetail:
    """Placeholder detail for a coin no source knows about."""
    created = now_ms() - DAY_MS
    blank = Timeframes(h24="", h6="", h1="", m5="")
    return CoinDetail(
        id=coin_id,
        name=display_name(coin_id),
        symbol=coin_id[:4].upper(),
        description=UNAVAILABLE_DESCRIPTION,
        market_cap="",
        usd_market_cap="",
        price_change="0%",
        image_url=PLACEHOLDER_HERO_IMAGE,
        thumbnail_url=PLACEHOLDER_HERO_IMAGE,
        creator="Unknown",
        created_timestamp=created,
        launch_time="Unknown",
        category="Unknown",
        rating="Unrated",
        price="",
        volume=blank,
        price_changes=Timeframes(h24="0%", h6="0%", h1="0%", m5="0%"),
        not_found=True,
    )

