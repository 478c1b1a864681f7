"""
Named hooks the mock runs to materialise state on demand.

The default ``cartCreate`` hook creates a cart under a caller-supplied id, so
a cart id known to a client (e.g. kept in a session) can be revived by the
mock after a reset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Optional

if TYPE_CHECKING:
    from storefront_checkout.mock.shopify import MockShopify

FACTORY_CART_CREATE = "cartCreate"


class MockFactoryHandler:
    def __init__(self, callback: Optional[Callable[..., Any]]):
        self.callback = callback

    def handle(self, shopify: "MockShopify", *params: Any) -> Any:
        if callable(self.callback):
            return self.callback(shopify, *params)
        return None


def _create_cart(shopify: "MockShopify", cart_id: str, country_code: Optional[str]) -> Optional[dict]:
    if shopify.cart.exists(cart_id):
        return None
    return shopify.cart.create(country_code, cart_id)


class MockFactory:
    def __init__(self, factories: Optional[dict[str, MockFactoryHandler]] = None):
        self.factories: dict[str, MockFactoryHandler] = {
            FACTORY_CART_CREATE: MockFactoryHandler(_create_cart),
            **(factories or {}),
        }

    def register(self, name: str, handler: MockFactoryHandler) -> "MockFactory":
        self.factories[name] = handler
        return self

    def handle(self, name: str, shopify: "MockShopify", *params: Any) -> Any:
        handler = self.factories.get(name)
        if handler is None:
            return None
        return handler.handle(shopify, *params)
