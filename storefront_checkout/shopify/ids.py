"""
Shopify global id helpers.

Raw ids look like ``gid://shopify/Cart/<token>``. The Storefront API hands
them out base64 encoded; ``encode``/``decode`` convert between both forms.
"""

from __future__ import annotations

import base64
from typing import Optional

from storefront_checkout.config import GID_PREFIX, PRODUCT_VARIANT_PREFIX


def encode(entity_id: Optional[str]) -> Optional[str]:
    if entity_id and entity_id.startswith(GID_PREFIX):
        return base64.b64encode(entity_id.encode()).decode()
    return entity_id


def decode(entity_id: Optional[str]) -> Optional[str]:
    """Unwrap an encoded id. Raw gids and strings that are not encoded gids pass through."""
    if not entity_id or entity_id.startswith(GID_PREFIX):
        return entity_id
    try:
        decoded = base64.b64decode(entity_id, validate=True).decode()
    except ValueError:
        # binascii.Error, UnicodeDecodeError and non-ASCII input
        return entity_id
    return decoded if decoded.startswith(GID_PREFIX) else entity_id


def normalise_id(entity_id: str, prefix: str) -> str:
    """Prefix bare numeric/opaque ids so they become raw gids."""
    if entity_id.startswith(GID_PREFIX):
        return entity_id
    return prefix + entity_id


def normalise_variant_id(variant_id: str) -> str:
    return normalise_id(str(variant_id), PRODUCT_VARIANT_PREFIX)


def strip_prefix(entity_id: Optional[str], prefix: str) -> Optional[str]:
    if entity_id and entity_id.startswith(prefix):
        return entity_id[len(prefix):]
    return entity_id
