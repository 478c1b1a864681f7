"""
Root of the mock engine: one store, one id generator and every domain engine
wired onto them. ``reset()`` wipes all mock state.
"""

from __future__ import annotations

from typing import Optional

from storefront_checkout.mock.cart import MockCart
from storefront_checkout.mock.connections import MockConnections
from storefront_checkout.mock.discount_codes import MockDiscountCodes
from storefront_checkout.mock.ids import MockIds
from storefront_checkout.mock.markets import MockMarkets
from storefront_checkout.mock.products import MockProducts
from storefront_checkout.mock.selling_plan_groups import MockSellingPlanGroups
from storefront_checkout.mock.selling_plans import MockSellingPlans
from storefront_checkout.mock.store import MockStore
from storefront_checkout.shopify.context import Context


class MockShopify:
    def __init__(self, context: Context, store: Optional[MockStore] = None, ids: Optional[MockIds] = None):
        self.context = context
        self.store = store if store is not None else MockStore()
        self.ids = ids if ids is not None else MockIds()

        self.markets = MockMarkets()
        self.discount_codes = MockDiscountCodes()
        self.connections = MockConnections(self.store)
        self.products = MockProducts(self.store, self.ids)
        self.cart = MockCart(self)
        self.selling_plans = MockSellingPlans(self)
        self.selling_plan_groups = MockSellingPlanGroups(self)

    def reset(self) -> None:
        self.store.clear()
        self.ids.clear()
