"""IPFS URL helpers for coin artwork."""

from __future__ import annotations

import logging

from netflix_fun.config.settings import get_settings


logger = logging.getLogger("netflix_fun.images")

PLACEHOLDER_IMAGE = "/placeholder.svg?height=400&width=600"
PLACEHOLDER_HERO_IMAGE = "/placeholder.svg?height=600&width=1200"

_CID_PREFIXES = ("Qm", "bafy")


def is_ipfs_url(url: str | None) -> bool:
    if not url:
        return False
    return url.startswith("ipfs://") or url.startswith("/ipfs/") or url.startswith(_CID_PREFIXES)


def convert_ipfs_url(
    url: str | None,
    gateway: str | None = None,
    placeholder: str = PLACEHOLDER_IMAGE,
) -> str:
    """
    Rewrite an IPFS reference into an HTTP(S) gateway URL usable in an <img>.

    Handles ipfs://CID, /ipfs/CID and bare CIDv0/CIDv1 strings. HTTP(S) URLs
    and unknown formats pass through untouched; a blank URL yields the
    placeholder image.
    """
    if not url:
        return placeholder

    host = gateway or get_settings().IPFS_GATEWAY

    if url.startswith("http://") or url.startswith("https://"):
        return url
    if url.startswith("ipfs://"):
        cid = url[len("ipfs://"):]
        return f"https://{host}/ipfs/{cid}"
    if url.startswith("/ipfs/"):
        return f"https://{host}{url}"
    if url.startswith(_CID_PREFIXES):
        return f"https://{host}/ipfs/{url}"
    return url


def log_image_url(url: str | None) -> None:
    if not url:
        logger.debug("image url missing")
        return
    logger.debug(
        "image url | original=%s | converted=%s | ipfs=%s",
        url,
        convert_ipfs_url(url),
        is_ipfs_url(url),
    )
