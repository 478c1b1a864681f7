"""
Configuration module: environment variables and constants.
- Loads .env values through python-dotenv
- Exposes Shopify connection settings read from the environment
- Provides GID prefixes and mock engine constants
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

load_dotenv()


# ── Environment ──────────────────────────────────────────────────────────────
SHOPIFY_SHOP_BASE_URL: str = os.getenv("SHOPIFY_SHOP_BASE_URL", "mock.myshopify.com")
SHOPIFY_API_VERSION: str = os.getenv("SHOPIFY_API_VERSION", "2023-01")
SHOPIFY_STOREFRONT_ACCESS_TOKEN: str = os.getenv("SHOPIFY_STOREFRONT_ACCESS_TOKEN", "")
SHOPIFY_ACCESS_TOKEN: str = os.getenv("SHOPIFY_ACCESS_TOKEN", "")
SHOPIFY_GRAPHQL_URL: str = os.getenv("SHOPIFY_GRAPHQL_URL", "")
SHOPIFY_HTTP_TIMEOUT: float = float(os.getenv("SHOPIFY_HTTP_TIMEOUT", "30"))
SHOPIFY_LOG_LEVEL: str = os.getenv("SHOPIFY_LOG_LEVEL", "normal").lower()


# ── GID Prefixes ─────────────────────────────────────────────────────────────
GID_PREFIX: str = "gid:"
CART_PREFIX: str = "gid://shopify/Cart/"
CART_LINE_PREFIX: str = "gid://shopify/CartLine/"
PRODUCT_PREFIX: str = "gid://shopify/Product/"
PRODUCT_VARIANT_PREFIX: str = "gid://shopify/ProductVariant/"
PRODUCT_IMAGE_PREFIX: str = "gid://shopify/ProductImage/"
SELLING_PLAN_PREFIX: str = "gid://shopify/SellingPlan/"
SELLING_PLAN_GROUP_PREFIX: str = "gid://shopify/SellingPlanGroup/"


# ── Constants ────────────────────────────────────────────────────────────────
DEFAULT_MARKET: str = "IE"
MAX_ID_ATTEMPTS: int = 20
SELLING_PLAN_CATEGORY_PRE_ORDER: str = "PRE_ORDER"
TIMESTAMP_FORMAT: str = "%Y-%m-%dT%H:%M:%SZ"

ZERO_AMOUNT: str = "0.0"
USER_ERROR_CODE_RANGE: tuple[int, int] = (10000, 20000)

APPLICABLE_DISCOUNT_CODES: tuple[str, ...] = ("FOC", "TENPERCENT")
