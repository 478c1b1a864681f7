"""Mock handlers for the Storefront cart operations."""

from __future__ import annotations

from typing import Any, Optional

from storefront_checkout.config import DEFAULT_MARKET
from storefront_checkout.mock.factory import FACTORY_CART_CREATE
from storefront_checkout.mock.graphql.base import Handler, MockBaseGraphql, user_error
from storefront_checkout.mock.graphql.endpoints import Endpoint
from storefront_checkout.mock.graphql.query import ParsedQuery, parse
from storefront_checkout.shopify.ids import decode

CART_NOT_FOUND = "The specified cart does not exist."


def _payload(endpoint: Endpoint, cart: Optional[dict], errors: Optional[list] = None) -> dict:
    return {endpoint.root_field: {"cart": cart, "userErrors": errors or []}}


def _country(parsed: ParsedQuery) -> Optional[str]:
    # Without @inContext the cart keeps its current market
    return parsed.get_context("country")


class MockCartGraphql(MockBaseGraphql):
    def _mutation(self, endpoint: Endpoint, cart: Optional[dict], field: str, message: str) -> dict:
        if cart:
            return _payload(endpoint, cart)
        return _payload(endpoint, None, [user_error([field], message)])

    def cart_create(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        buyer_identity = (variables.get("input") or {}).get("buyerIdentity") or variables.get("buyerIdentity") or {}
        country_code = buyer_identity.get("countryCode") or DEFAULT_MARKET

        cart = self.shopify.cart.create(country_code)
        if cart:
            return _payload(Endpoint.CART_CREATE, cart)
        return _payload(
            Endpoint.CART_CREATE,
            None,
            [user_error(["input", "buyerIdentity", "countryCode"], f"Country code {country_code} is not a valid market.")],
        )

    def cart_buyer_identity_update(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        cart_id = decode(variables.get("cartId"))
        country_code = (variables.get("buyerIdentity") or {}).get("countryCode") or DEFAULT_MARKET

        if not self.shopify.cart.exists(cart_id) and self.factory is not None:
            self.factory.handle(FACTORY_CART_CREATE, self.shopify, cart_id, country_code)

        cart = self.shopify.cart.update_buyer_identity(cart_id, country_code)
        return self._mutation(Endpoint.CART_BUYER_IDENTITY_UPDATE, cart, "cartId", CART_NOT_FOUND)

    def cart_get(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        parsed = parse(query, variables)
        cart = self.shopify.cart.get(decode(variables.get("cartId")), _country(parsed))
        return {"cart": cart}

    def cart_lines_add(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        parsed = parse(query, variables)
        cart_id = decode(variables.get("cartId"))
        if not self.shopify.cart.exists(cart_id):
            return _payload(Endpoint.CART_LINES_ADD, None, [user_error(["cartId"], CART_NOT_FOUND)])

        cart = self.shopify.cart.add_lines(cart_id, _country(parsed), variables.get("lines"))
        return self._mutation(
            Endpoint.CART_LINES_ADD, cart, "lines", "Every line needs a merchandise id and a quantity of at least 1."
        )

    def cart_lines_update(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        parsed = parse(query, variables)
        cart_id = decode(variables.get("cartId"))
        if not self.shopify.cart.exists(cart_id):
            return _payload(Endpoint.CART_LINES_UPDATE, None, [user_error(["cartId"], CART_NOT_FOUND)])

        cart = self.shopify.cart.update_lines(cart_id, _country(parsed), variables.get("lines"))
        return self._mutation(
            Endpoint.CART_LINES_UPDATE, cart, "lines", "Every line needs an id and a quantity of at least 1."
        )

    def cart_lines_remove(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        parsed = parse(query, variables)
        cart_id = decode(variables.get("cartId"))
        if not self.shopify.cart.exists(cart_id):
            return _payload(Endpoint.CART_LINES_REMOVE, None, [user_error(["cartId"], CART_NOT_FOUND)])

        cart = self.shopify.cart.remove_lines(cart_id, _country(parsed), variables.get("lineIds"))
        return self._mutation(Endpoint.CART_LINES_REMOVE, cart, "lineIds", "Line ids cannot be empty.")

    def cart_note_update(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        parsed = parse(query, variables)
        cart = self.shopify.cart.update_note(decode(variables.get("cartId")), _country(parsed), variables.get("note") or "")
        return self._mutation(Endpoint.CART_NOTE_UPDATE, cart, "cartId", CART_NOT_FOUND)

    def cart_attributes_update(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        parsed = parse(query, variables)
        cart_id = decode(variables.get("cartId"))
        if not self.shopify.cart.exists(cart_id):
            return _payload(Endpoint.CART_ATTRIBUTES_UPDATE, None, [user_error(["cartId"], CART_NOT_FOUND)])

        attributes = variables.get("attributes") or []
        if isinstance(attributes, dict):
            attributes = [attributes]
        if not attributes or not all(row.get("key") and row.get("value") for row in attributes):
            return _payload(
                Endpoint.CART_ATTRIBUTES_UPDATE,
                None,
                [user_error(["attributes"], "Attributes need a non-empty key and value.")],
            )

        cart = None
        for row in attributes:
            cart = self.shopify.cart.update_attributes(cart_id, _country(parsed), row["key"], row["value"])
        return _payload(Endpoint.CART_ATTRIBUTES_UPDATE, cart)

    def cart_discount_codes_update(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        parsed = parse(query, variables)
        cart_id = decode(variables.get("cartId"))
        if not self.shopify.cart.exists(cart_id):
            return _payload(Endpoint.CART_DISCOUNT_CODES_UPDATE, None, [user_error(["cartId"], CART_NOT_FOUND)])

        cart = self.shopify.cart.update_discount_codes(cart_id, _country(parsed), variables.get("discountCodes"))
        return self._mutation(Endpoint.CART_DISCOUNT_CODES_UPDATE, cart, "discountCodes", "Discount codes cannot be empty.")

    def get_endpoints(self) -> dict[Endpoint, Handler]:
        return {
            Endpoint.CART_GET: self.cart_get,
            Endpoint.CART_CREATE: self.cart_create,
            Endpoint.CART_BUYER_IDENTITY_UPDATE: self.cart_buyer_identity_update,
            Endpoint.CART_LINES_ADD: self.cart_lines_add,
            Endpoint.CART_LINES_UPDATE: self.cart_lines_update,
            Endpoint.CART_LINES_REMOVE: self.cart_lines_remove,
            Endpoint.CART_NOTE_UPDATE: self.cart_note_update,
            Endpoint.CART_ATTRIBUTES_UPDATE: self.cart_attributes_update,
            Endpoint.CART_DISCOUNT_CODES_UPDATE: self.cart_discount_codes_update,
        }
