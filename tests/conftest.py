"""Shared fixtures: every test gets its own mock engine, no state leaks between tests."""

import pytest

from storefront_checkout.config import PRODUCT_VARIANT_PREFIX
from storefront_checkout.mock import MockFactory, MockGraphql, MockShopify
from storefront_checkout.services import Cart, CartService, SellingPlanGroupService
from storefront_checkout.shopify import Context

SHOP = "dummy.myshopify.com"


@pytest.fixture
def context():
    return Context(
        shop_base_url=SHOP,
        api_version="2023-01",
        storefront_access_token="storefront-token",
        access_token="admin-token",
    )


@pytest.fixture
def shopify(context):
    return MockShopify(context)


@pytest.fixture
def mock(context, shopify):
    return MockGraphql(context, MockFactory(), shopify)


@pytest.fixture
def cart_service(context, mock):
    return CartService(context, mock=mock)


@pytest.fixture
def cart(context, mock):
    return Cart(context, mock=mock)


@pytest.fixture
def group_service(context, mock):
    return SellingPlanGroupService(context, mock=mock)


@pytest.fixture
def priced_variant(shopify):
    """Return a helper that pins a fabricated variant to a known base price."""

    def _pin(number: str, price: float) -> str:
        variant_id = PRODUCT_VARIANT_PREFIX + number
        shopify.products.get_variant(variant_id)["price"] = price
        return variant_id

    return _pin
