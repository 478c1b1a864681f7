# Shopify connection layer
"""
Shopify connection primitives.
- Context: shop url, API version and access tokens
- Graphql: Storefront/Admin GraphQL transport (httpx or in-process mock)
- ids: encode/decode helpers for global ids
"""

from storefront_checkout.shopify.context import Context
from storefront_checkout.shopify.graphql import Graphql, GraphqlResponseError, LogLevel, QueryModel
from storefront_checkout.shopify.ids import decode, encode, normalise_variant_id

__all__ = [
    "Context",
    "Graphql",
    "GraphqlResponseError",
    "LogLevel",
    "QueryModel",
    "decode",
    "encode",
    "normalise_variant_id",
]
