"""
Storefront API cart operations.

Every method takes and returns raw gids; the Storefront API's base64 ids are
decoded on the way out. Mutations answer with the cart id, or ``None`` when
Shopify (or the mock) rejected them. Rejections accumulate in ``errors()``.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from storefront_checkout.config import DEFAULT_MARKET
from storefront_checkout.mock.graphql.endpoints import Endpoint
from storefront_checkout.models import CartLineInput, CartLineUpdateInput, LineItemInput, LineValue
from storefront_checkout.services import queries
from storefront_checkout.services.base import BaseService
from storefront_checkout.shopify.ids import decode, encode, normalise_variant_id
from storefront_checkout.utils.beautifier import Beautifier


class CartService(BaseService):
    use_storefront_api = True

    # ── Helpers ─────────────────────────────────────────────────────────────
    def _set_last_error(self, endpoint: Endpoint, error: Any) -> None:
        last_error = self.graphql.last_error or error
        if not last_error:
            return
        self.error_messages.append(last_error)
        self.logger.warning(
            "Shopify Cart error",
            extra={"endpoint": endpoint.value, "error": last_error},
        )

    def _mutate(self, endpoint: Endpoint, query: str, variables: dict[str, Any]) -> Optional[str]:
        data = self.graphql.query(query, variables) or {}
        payload = data.get(endpoint.root_field) or {}
        self._set_last_error(endpoint, payload.get("userErrors"))
        return decode((payload.get("cart") or {}).get("id"))

    # ── Cart lifecycle ──────────────────────────────────────────────────────
    def get_new_cart(self, country_code: str = DEFAULT_MARKET) -> Optional[str]:
        variables = {"input": {"buyerIdentity": {"countryCode": country_code}}}
        return self._mutate(Endpoint.CART_CREATE, queries.CART_CREATE, variables)

    def set_buyer_identity(
        self,
        cart_id: str,
        country_code: str,
        buyer_identity: Optional[Mapping[str, Any]] = None,
    ) -> Optional[str]:
        """Move the cart to ``country_code``; extra buyer identity fields are sent as given."""
        variables = {
            "cartId": encode(cart_id),
            "buyerIdentity": {**(buyer_identity or {}), "countryCode": country_code},
        }
        return self._mutate(Endpoint.CART_BUYER_IDENTITY_UPDATE, queries.CART_BUYER_IDENTITY_UPDATE, variables)

    def get_cart(
        self,
        cart_id: str,
        country_code: str = DEFAULT_MARKET,
        include_selling_plan_allocation: bool = False,
    ) -> Optional[dict]:
        allocation = queries.SELLING_PLAN_ALLOCATION_FRAGMENT if include_selling_plan_allocation else ""
        query = queries.CART_GET.replace("{selling_plan_allocation}", allocation)
        data = self.graphql.query(query, {"cartId": encode(cart_id), "countryCode": country_code}) or {}
        cart = data.get("cart")
        if not cart:
            self._set_last_error(Endpoint.CART_GET, f"Cart {cart_id} not found")
        return cart

    def cart_exists(self, cart_id: str, country_code: str = DEFAULT_MARKET) -> bool:
        return bool(cart_id) and self.get_cart(cart_id, country_code) is not None

    def get_checkout_url(self, cart_id: str, country_code: str = DEFAULT_MARKET) -> Optional[str]:
        cart = self.get_cart(cart_id, country_code)
        return cart.get("checkoutUrl") if cart else None

    # ── Lines ───────────────────────────────────────────────────────────────
    def add_line(
        self,
        cart_id: str,
        variant_id: str,
        quantity: LineValue,
        selling_plan_id: Optional[str] = None,
    ) -> Optional[str]:
        return self.add_lines(cart_id, {variant_id: quantity}, selling_plan_id)

    def add_lines(
        self,
        cart_id: str,
        lines: Mapping[str, LineValue],
        selling_plan_id: Optional[str] = None,
    ) -> Optional[str]:
        """Add ``{variant_id: quantity | {quantity, attributes}}`` in one call."""
        payload = []
        for variant_id, value in lines.items():
            item = LineItemInput.coerce(value)
            payload.append(
                CartLineInput(
                    merchandiseId=encode(normalise_variant_id(variant_id)),
                    quantity=item.quantity,
                    attributes=item.attributes,
                    sellingPlanId=encode(selling_plan_id),
                ).to_variables()
            )
        variables = {"cartId": encode(cart_id), "lines": payload}
        return self._mutate(Endpoint.CART_LINES_ADD, queries.CART_LINES_ADD, variables)

    def update_line(self, cart_id: str, line_id: str, quantity: LineValue) -> Optional[str]:
        return self.update_lines(cart_id, {line_id: quantity})

    def update_lines(self, cart_id: str, lines: Mapping[str, LineValue]) -> Optional[str]:
        """Update ``{line_id: quantity | {quantity, attributes}}`` in one call."""
        payload = []
        for line_id, value in lines.items():
            item = LineItemInput.coerce(value)
            payload.append(
                CartLineUpdateInput(id=encode(line_id), quantity=item.quantity, attributes=item.attributes).to_variables()
            )
        variables = {"cartId": encode(cart_id), "lines": payload}
        return self._mutate(Endpoint.CART_LINES_UPDATE, queries.CART_LINES_UPDATE, variables)

    def remove_line(self, cart_id: str, line_id: str) -> Optional[str]:
        return self.remove_lines(cart_id, [line_id])

    def remove_lines(self, cart_id: str, line_ids: Iterable[str]) -> Optional[str]:
        variables = {"cartId": encode(cart_id), "lineIds": [encode(line_id) for line_id in line_ids]}
        return self._mutate(Endpoint.CART_LINES_REMOVE, queries.CART_LINES_REMOVE, variables)

    def empty_cart(self, cart_id: str, country_code: str = DEFAULT_MARKET) -> bool:
        """Remove every line. ``False`` when the cart is missing or has no lines."""
        cart = self.get_cart(cart_id, country_code)
        if not cart:
            return False
        line_ids = [decode(edge["node"]["id"]) for edge in cart["lines"]["edges"]]
        if not line_ids:
            return False
        return self.remove_lines(cart_id, line_ids) is not None

    # ── Cart fields ─────────────────────────────────────────────────────────
    def update_note(self, cart_id: str, note: str) -> Optional[str]:
        variables = {"cartId": encode(cart_id), "note": note}
        return self._mutate(Endpoint.CART_NOTE_UPDATE, queries.CART_NOTE_UPDATE, variables)

    def update_attributes(self, cart_id: str, key: str, value: Any) -> Optional[str]:
        variables = {"cartId": encode(cart_id), "attributes": [{"key": key, "value": value}]}
        return self._mutate(Endpoint.CART_ATTRIBUTES_UPDATE, queries.CART_ATTRIBUTES_UPDATE, variables)

    def update_discount_codes(self, cart_id: str, codes: Iterable[str]) -> Optional[str]:
        variables = {"cartId": encode(cart_id), "discountCodes": list(codes)}
        return self._mutate(Endpoint.CART_DISCOUNT_CODES_UPDATE, queries.CART_DISCOUNT_CODES_UPDATE, variables)

    # ── Introspection ───────────────────────────────────────────────────────
    @property
    def last_error(self) -> Any:
        return self.graphql.last_error

    @property
    def last_response(self) -> Optional[dict]:
        return self.graphql.last_response

    @staticmethod
    def beautifier(cart: Optional[dict]) -> Beautifier:
        return Beautifier(cart)
