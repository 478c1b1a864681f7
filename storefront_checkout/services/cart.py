"""
Stateful cart façade.

Remembers the current cart id and market so callers can work with a single
cart without threading ids through every call. Mutations report success as a
bool and refresh the remembered cart id.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Iterable, Mapping, Optional

from storefront_checkout.config import DEFAULT_MARKET
from storefront_checkout.models import LineValue
from storefront_checkout.services.cart_service import CartService
from storefront_checkout.shopify.context import Context
from storefront_checkout.shopify.graphql import LogLevel
from storefront_checkout.utils.beautifier import Beautifier

if TYPE_CHECKING:
    from storefront_checkout.mock.graphql.router import MockGraphql


class Cart:
    def __init__(
        self,
        context: Context,
        cart_id: Optional[str] = None,
        country_code: str = DEFAULT_MARKET,
        logger: Optional[logging.Logger] = None,
        mock: Optional["MockGraphql"] = None,
        log_level: LogLevel = LogLevel.NORMAL,
        service: Optional[CartService] = None,
    ):
        self.service = service or CartService(context, logger, mock, log_level)
        self.cart_id = cart_id
        self.country_code = country_code
        self.include_selling_plan_allocation = False

    def _track(self, cart_id: Optional[str]) -> bool:
        if cart_id:
            self.cart_id = cart_id
            return True
        return False

    # ── Lifecycle ───────────────────────────────────────────────────────────
    def get_new_cart(self, country_code: Optional[str] = None) -> Optional[str]:
        if country_code:
            self.country_code = country_code
        cart_id = self.service.get_new_cart(self.country_code)
        self._track(cart_id)
        return cart_id

    def set_cart_id(self, cart_id: str) -> "Cart":
        self.cart_id = cart_id
        return self

    def set_country_code(self, country_code: str) -> bool:
        """Move the current cart to another market."""
        if not self.cart_id:
            self.country_code = country_code
            return True
        if self._track(self.service.set_buyer_identity(self.cart_id, country_code)):
            self.country_code = country_code
            return True
        return False

    def set_include_selling_plan_allocation(self, include: bool = True) -> "Cart":
        self.include_selling_plan_allocation = include
        return self

    def get_cart(self) -> Optional[dict]:
        if not self.cart_id:
            return None
        return self.service.get_cart(self.cart_id, self.country_code, self.include_selling_plan_allocation)

    def exists(self) -> bool:
        return bool(self.cart_id) and self.service.cart_exists(self.cart_id, self.country_code)

    def get_checkout_url(self) -> Optional[str]:
        if not self.cart_id:
            return None
        return self.service.get_checkout_url(self.cart_id, self.country_code)

    # ── Lines ───────────────────────────────────────────────────────────────
    def add_line(self, variant_id: str, quantity: LineValue = 1, selling_plan_id: Optional[str] = None) -> bool:
        return self._track(self.service.add_line(self.cart_id, variant_id, quantity, selling_plan_id))

    def add_lines(self, lines: Mapping[str, LineValue], selling_plan_id: Optional[str] = None) -> bool:
        return self._track(self.service.add_lines(self.cart_id, lines, selling_plan_id))

    def update_line(self, line_id: str, quantity: LineValue) -> bool:
        return self._track(self.service.update_line(self.cart_id, line_id, quantity))

    def update_lines(self, lines: Mapping[str, LineValue]) -> bool:
        return self._track(self.service.update_lines(self.cart_id, lines))

    def remove_line(self, line_id: str) -> bool:
        return self._track(self.service.remove_line(self.cart_id, line_id))

    def remove_lines(self, line_ids: Iterable[str]) -> bool:
        return self._track(self.service.remove_lines(self.cart_id, line_ids))

    def empty_cart(self) -> bool:
        return self.service.empty_cart(self.cart_id, self.country_code)

    # ── Cart fields ─────────────────────────────────────────────────────────
    def update_note(self, note: str) -> bool:
        return self._track(self.service.update_note(self.cart_id, note))

    def update_attributes(self, key: str, value: Any) -> bool:
        return self._track(self.service.update_attributes(self.cart_id, key, value))

    def update_discount_codes(self, codes: Iterable[str]) -> bool:
        return self._track(self.service.update_discount_codes(self.cart_id, codes))

    # ── Introspection ───────────────────────────────────────────────────────
    def errors(self) -> list[Any]:
        return self.service.errors()

    def get_last_response(self) -> Optional[dict]:
        return self.service.get_last_response()

    def beautifier(self) -> Beautifier:
        return Beautifier(self.get_cart())
