"""
Cart domain engine.

Carts live in the entity store keyed by their raw gid. Every successful
mutation and every read re-derives buyer identity, line prices and totals
for the requested market, so stored costs never go stale.
"""

from __future__ import annotations

import copy
from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Iterable, Optional

from storefront_checkout.config import CART_LINE_PREFIX, CART_PREFIX, TIMESTAMP_FORMAT, ZERO_AMOUNT
from storefront_checkout.shopify.ids import decode, encode, strip_prefix

if TYPE_CHECKING:
    from storefront_checkout.mock.shopify import MockShopify


def _now() -> str:
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def format_amount(amount: float) -> str:
    # A zero amount renders with a single decimal, like the live API does
    return ZERO_AMOUNT if not amount else "%.2f" % amount


def format_price(amount: float, currency: str) -> dict:
    return {"amount": format_amount(amount), "currencyCode": currency}


def _quantity(line: dict) -> int:
    try:
        return int(line.get("quantity") or 0)
    except (TypeError, ValueError):
        return 0


class MockCart:
    def __init__(self, shopify: "MockShopify"):
        self.shopify = shopify

    # ── Helpers ─────────────────────────────────────────────────────────────
    def _load(self, cart_id: Optional[str]) -> Optional[dict]:
        cart_id = decode(cart_id)
        if not cart_id:
            return None
        cart = self.shopify.store.get(CART_PREFIX, cart_id)
        return copy.deepcopy(cart) if cart else None

    def _save(self, cart_id: str, cart: dict, touch: bool = True) -> None:
        if touch:
            cart["updatedAt"] = _now()
        self.shopify.store.set(CART_PREFIX, decode(cart_id), cart)

    def _reprice(self, cart_id: str, country_code: Optional[str]) -> Optional[dict]:
        cart = self._load(cart_id)
        if not cart:
            return None

        markets = self.shopify.markets
        country_code = country_code or cart["buyerIdentity"]["countryCode"]
        currency = markets.get_currency(country_code)
        cart["buyerIdentity"]["countryCode"] = country_code

        net_amount = 0.0
        for edge in cart["lines"]["edges"]:
            node = edge["node"]
            product = self.shopify.products.get_product_by_variant_id(decode(node["merchandise"]["id"]))
            price = markets.get_price(product["price"], country_code)
            line_amount = price * node["quantity"]
            net_amount += line_amount

            node["estimatedCost"]["subtotalAmount"] = format_price(line_amount, currency)
            node["estimatedCost"]["totalAmount"] = format_price(line_amount, currency)
            node["merchandise"]["priceV2"] = format_price(price, currency)

        tax_amount = net_amount * markets.get_vat(country_code)
        cart["estimatedCost"]["totalAmount"] = format_price(net_amount + tax_amount, currency)
        cart["estimatedCost"]["subtotalAmount"] = format_price(net_amount, currency)
        cart["estimatedCost"]["totalTaxAmount"] = format_price(tax_amount, currency)

        self._save(cart_id, cart, touch=False)
        return cart

    def _new_line(self, variant_id: str, quantity: int, attributes: list, currency: str) -> dict:
        product = self.shopify.products.get_product_by_variant_id(variant_id)
        image = dict(product["images"][0])
        image["id"] = encode(image["id"])
        return {
            "node": {
                "id": encode(self.shopify.ids.create_random_id(CART_LINE_PREFIX)),
                "attributes": list(attributes),
                "quantity": quantity,
                "discountAllocations": [],
                "estimatedCost": {
                    "subtotalAmount": {"amount": ZERO_AMOUNT, "currencyCode": currency},
                    "totalAmount": {"amount": ZERO_AMOUNT, "currencyCode": currency},
                },
                "merchandise": {
                    "id": encode(variant_id),
                    "title": "Default Title",
                    "priceV2": {"amount": ZERO_AMOUNT, "currencyCode": currency},
                    "product": {
                        "id": encode(product["product_id"]),
                        "availableForSale": True,
                        "variants": {"edges": [{"node": {"id": encode(variant_id)}}]},
                        "title": product["title"],
                        "images": {"edges": [{"node": image}]},
                    },
                },
            }
        }

    @staticmethod
    def _find_line(cart: dict, line_id: str, key: str = "id") -> Optional[dict]:
        for edge in cart["lines"]["edges"]:
            node = edge["node"]
            node_id = node["merchandise"]["id"] if key == "merchandise" else node["id"]
            if decode(node_id) == line_id:
                return node
        return None

    # ── Lifecycle ───────────────────────────────────────────────────────────
    def exists(self, cart_id: Optional[str]) -> bool:
        cart_id = decode(cart_id)
        return bool(cart_id) and self.shopify.store.has(CART_PREFIX, cart_id)

    def create(self, country_code: str, cart_id: Optional[str] = None) -> Optional[dict]:
        """Create an empty cart for ``country_code``; ``None`` for unknown markets."""
        markets = self.shopify.markets
        if not markets.has(country_code):
            return None

        cart_id = decode(cart_id) or self.shopify.ids.create_random_id(CART_PREFIX)
        currency = markets.get_currency(country_code)
        now = _now()
        cart = {
            "id": encode(cart_id),
            "createdAt": now,
            "updatedAt": now,
            "checkoutUrl": f"https://{self.shopify.context.shop_base_url}/cart/c/{strip_prefix(cart_id, CART_PREFIX)}",
            "buyerIdentity": {"countryCode": country_code},
            "attributes": [],
            "discountCodes": [],
            "note": "",
            "lines": {"edges": []},
            "estimatedCost": {
                "totalAmount": {"amount": ZERO_AMOUNT, "currencyCode": currency},
                "subtotalAmount": {"amount": ZERO_AMOUNT, "currencyCode": currency},
                "totalTaxAmount": None,
                "totalDutyAmount": None,
            },
        }
        self._save(cart_id, cart, touch=False)
        return cart

    def get(self, cart_id: Optional[str], country_code: Optional[str] = None) -> Optional[dict]:
        return self.update_buyer_identity(cart_id, country_code)

    def update_buyer_identity(self, cart_id: Optional[str], country_code: Optional[str] = None) -> Optional[dict]:
        if not self.exists(cart_id):
            return None
        return self._reprice(cart_id, country_code)

    # ── Lines ───────────────────────────────────────────────────────────────
    def add_lines(self, cart_id: Optional[str], country_code: Optional[str], lines: Iterable[dict]) -> Optional[dict]:
        """
        Add ``{merchandiseId, quantity, attributes}`` lines. A variant already in
        the cart has its quantity incremented and attributes appended. One
        invalid line rejects the whole batch before anything is written.
        """
        cart = self._load(cart_id)
        lines = list(lines or [])
        if not cart or not lines:
            return None

        for line in lines:
            if not line.get("merchandiseId") or _quantity(line) < 1:
                return None

        currency = self.shopify.markets.get_currency(country_code or cart["buyerIdentity"]["countryCode"])
        for line in lines:
            variant_id = decode(line["merchandiseId"])
            attributes = line.get("attributes") or []
            node = self._find_line(cart, variant_id, key="merchandise")
            if node:
                node["quantity"] += _quantity(line)
                node["attributes"] = node["attributes"] + list(attributes)
            else:
                cart["lines"]["edges"].append(self._new_line(variant_id, _quantity(line), attributes, currency))

        self._save(cart_id, cart)
        return self._reprice(cart_id, country_code)

    def update_lines(self, cart_id: Optional[str], country_code: Optional[str], lines: Iterable[dict]) -> Optional[dict]:
        """Increment quantity and append attributes of existing lines; unknown line ids are skipped."""
        cart = self._load(cart_id)
        lines = list(lines or [])
        if not cart or not lines:
            return None

        for line in lines:
            if not line.get("id") or _quantity(line) < 1:
                return None

        for line in lines:
            node = self._find_line(cart, decode(line["id"]))
            if node:
                node["quantity"] += _quantity(line)
                node["attributes"] = node["attributes"] + list(line.get("attributes") or [])

        self._save(cart_id, cart)
        return self._reprice(cart_id, country_code)

    def remove_lines(self, cart_id: Optional[str], country_code: Optional[str], line_ids: Iterable[Optional[str]]) -> Optional[dict]:
        cart = self._load(cart_id)
        line_ids = list(line_ids or [])
        if not cart or not line_ids or not all(line_ids):
            return None

        removed = {decode(line_id) for line_id in line_ids}
        cart["lines"]["edges"] = [
            edge for edge in cart["lines"]["edges"] if decode(edge["node"]["id"]) not in removed
        ]

        self._save(cart_id, cart)
        return self._reprice(cart_id, country_code)

    def empty(self, cart_id: Optional[str], country_code: Optional[str] = None) -> bool:
        """Remove every line. ``False`` when the cart is missing or already empty."""
        cart = self.get(cart_id, country_code)
        if not cart:
            return False
        line_ids = [edge["node"]["id"] for edge in cart["lines"]["edges"]]
        if not line_ids:
            return False
        return self.remove_lines(cart_id, country_code, line_ids) is not None

    # ── Cart fields ─────────────────────────────────────────────────────────
    def update_note(self, cart_id: Optional[str], country_code: Optional[str], note: str) -> Optional[dict]:
        cart = self._load(cart_id)
        if not cart:
            return None
        cart["note"] = note or ""
        self._save(cart_id, cart)
        return self._reprice(cart_id, country_code)

    def update_attributes(self, cart_id: Optional[str], country_code: Optional[str], key: Any, value: Any) -> Optional[dict]:
        """Set a cart attribute. Keys match case-insensitively; a match is replaced in place."""
        cart = self._load(cart_id)
        if not cart or not key or not value:
            return None

        attribute = {"key": key, "value": value}
        for index, row in enumerate(cart["attributes"]):
            if str(row["key"]).lower() == str(key).lower():
                cart["attributes"][index] = attribute
                break
        else:
            cart["attributes"].append(attribute)

        self._save(cart_id, cart)
        return self._reprice(cart_id, country_code)

    def update_discount_codes(self, cart_id: Optional[str], country_code: Optional[str], codes: Iterable[str]) -> Optional[dict]:
        cart = self._load(cart_id)
        codes = list(codes or [])
        if not cart or not codes:
            return None

        # Only one code is kept at a time
        code = codes[0]
        cart["discountCodes"] = [{"code": code, "applicable": self.shopify.discount_codes.has(code)}]

        self._save(cart_id, cart)
        return self._reprice(cart_id, country_code)
