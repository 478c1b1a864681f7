"""
Shopify Storefront checkout client with a stateful in-process mock of the
Storefront and Admin GraphQL APIs.
"""

from storefront_checkout.mock import MockFactory, MockGraphql
from storefront_checkout.services import Cart, CartService, SellingPlanGroupService
from storefront_checkout.shopify import Context, LogLevel

__version__ = "0.1.0"

__all__ = [
    "Cart",
    "CartService",
    "Context",
    "LogLevel",
    "MockFactory",
    "MockGraphql",
    "SellingPlanGroupService",
]
