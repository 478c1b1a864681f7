"""
Read-only helpers that turn a cart payload into display-friendly values.
"""

from __future__ import annotations

import json
from datetime import datetime
from typing import Any, Optional

from storefront_checkout.config import CART_PREFIX, TIMESTAMP_FORMAT
from storefront_checkout.shopify.ids import decode, strip_prefix


def _human_date(value: Optional[str]) -> str:
    """``2023-01-05T14:03:00Z`` → ``Jan 5, 2023 at 2:03pm``."""
    if not value:
        return ""
    try:
        moment = datetime.strptime(value, TIMESTAMP_FORMAT)
    except ValueError:
        moment = datetime.fromisoformat(value.replace("Z", "+00:00"))
    hour = moment.hour % 12 or 12
    meridiem = "am" if moment.hour < 12 else "pm"
    return f"{moment:%b} {moment.day}, {moment.year} at {hour}:{moment:%M}{meridiem}"


def _format_price(price: Optional[dict]) -> str:
    if not price:
        return "N/A"
    return "%s %.2f" % (price.get("currencyCode", ""), float(price.get("amount") or 0))


class Beautifier:
    def __init__(self, cart: Optional[dict]):
        self.cart = cart or {}

    def get_cart_id(self) -> Optional[str]:
        return decode(self.cart.get("id"))

    def get_cart_id_without_prefix(self) -> str:
        return strip_prefix(self.get_cart_id(), CART_PREFIX) or ""

    def get_country_code(self) -> str:
        return (self.cart.get("buyerIdentity") or {}).get("countryCode") or ""

    def get_created_at(self) -> str:
        return _human_date(self.cart.get("createdAt"))

    def get_updated_at(self) -> str:
        return _human_date(self.cart.get("updatedAt"))

    def get_checkout_url(self) -> str:
        return self.cart.get("checkoutUrl") or ""

    def get_note(self) -> str:
        return self.cart.get("note") or ""

    def get_estimated_costs(self) -> dict[str, str]:
        cost = self.cart.get("estimatedCost") or {}
        return {
            "net": _format_price(cost.get("subtotalAmount")),
            "tax": _format_price(cost.get("totalTaxAmount")),
            "total": _format_price(cost.get("totalAmount")),
        }

    @staticmethod
    def _format_line_item(edge: dict, more_details: bool) -> Optional[dict[str, Any]]:
        node = edge.get("node")
        if not node:
            return None

        merchandise = node.get("merchandise") or {}
        product = merchandise.get("product") or {}
        item = {
            "id": decode(node.get("id")),
            "title": product.get("title", ""),
            "product_id": None,
            "variant_id": None,
            "quantity": node.get("quantity", 0),
            "price": _format_price(merchandise.get("priceV2")),
            "image": None,
        }
        if more_details:
            item["product_id"] = decode(product.get("id"))
            variants = (product.get("variants") or {}).get("edges") or []
            if variants:
                item["variant_id"] = decode(variants[0]["node"].get("id"))
            images = (product.get("images") or {}).get("edges") or []
            if images:
                item["image"] = images[0]["node"].get("src")
        return item

    def get_line_items(self, more_details: bool = False) -> list[dict[str, Any]]:
        edges = (self.cart.get("lines") or {}).get("edges") or []
        items = (self._format_line_item(edge, more_details) for edge in edges)
        return [item for item in items if item]

    def get_line_item(self, line_item_id: str, more_details: bool = False) -> Optional[dict[str, Any]]:
        line_item_id = decode(line_item_id)
        for edge in (self.cart.get("lines") or {}).get("edges") or []:
            if decode((edge.get("node") or {}).get("id")) == line_item_id:
                return self._format_line_item(edge, more_details)
        return None

    def get_attributes(self) -> list[dict]:
        return self.cart.get("attributes") or []

    def get_discount_codes(self) -> list[dict]:
        return self.cart.get("discountCodes") or []

    def json(self) -> str:
        return json.dumps(self.cart, indent=4)
