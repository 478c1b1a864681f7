"""Shop connection context shared by the transport, the services and the mock."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from storefront_checkout import config


class Context(BaseModel):
    shop_base_url: str
    api_version: str = config.SHOPIFY_API_VERSION
    storefront_access_token: Optional[str] = None
    access_token: Optional[str] = None
    # Explicit GraphQL endpoint, e.g. a local mock server
    graphql_url: Optional[str] = None

    @classmethod
    def from_env(cls) -> "Context":
        return cls(
            shop_base_url=config.SHOPIFY_SHOP_BASE_URL,
            api_version=config.SHOPIFY_API_VERSION,
            storefront_access_token=config.SHOPIFY_STOREFRONT_ACCESS_TOKEN or None,
            access_token=config.SHOPIFY_ACCESS_TOKEN or None,
            graphql_url=config.SHOPIFY_GRAPHQL_URL or None,
        )

    def set_storefront_access_token(self, token: Optional[str]) -> "Context":
        self.storefront_access_token = token
        return self

    def set_access_token(self, token: Optional[str]) -> "Context":
        self.access_token = token
        return self
