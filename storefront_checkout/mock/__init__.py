# Mock Shopify engine
"""
Stateful in-memory stand-in for the Shopify Storefront and Admin GraphQL APIs.
- MockShopify: store, id generator and domain engines (cart, selling plans)
- MockGraphql: routes GraphQL documents to handlers backed by MockShopify
- MockFactory: hooks that materialise entities on demand
"""

from storefront_checkout.mock.factory import MockFactory, MockFactoryHandler
from storefront_checkout.mock.graphql.router import MockGraphql
from storefront_checkout.mock.shopify import MockShopify
from storefront_checkout.mock.store import MockStore

__all__ = ["MockFactory", "MockFactoryHandler", "MockGraphql", "MockShopify", "MockStore"]
