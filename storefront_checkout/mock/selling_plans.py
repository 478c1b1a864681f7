"""Selling plan entities. Plans are attached to groups through connections."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Optional

from storefront_checkout.config import SELLING_PLAN_CATEGORY_PRE_ORDER, SELLING_PLAN_PREFIX, TIMESTAMP_FORMAT
from storefront_checkout.shopify.ids import decode, encode

if TYPE_CHECKING:
    from storefront_checkout.mock.shopify import MockShopify

PLAN_FIELDS = (
    "billingPolicy",
    "deliveryPolicy",
    "description",
    "inventoryPolicy",
    "name",
    "options",
    "position",
    "pricingPolicies",
)


class MockSellingPlans:
    def __init__(self, shopify: "MockShopify"):
        self.shopify = shopify

    def create(self, options: dict[str, Any], entity_id: Optional[str] = None) -> dict:
        entity_id = decode(entity_id) or self.shopify.ids.create_random_id(SELLING_PLAN_PREFIX)
        now = datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
        entity = {
            "id": encode(entity_id),
            "createdAt": now,
            "updatedAt": now,
            "category": SELLING_PLAN_CATEGORY_PRE_ORDER,
        }
        entity.update({name: options.get(name) for name in PLAN_FIELDS})
        self.shopify.store.set(SELLING_PLAN_PREFIX, entity_id, entity)
        return entity

    def get(self, entity_id: str) -> Optional[dict]:
        return self.shopify.store.get(SELLING_PLAN_PREFIX, decode(entity_id))

    def update(self, entity_id: str, options: dict[str, Any]) -> Optional[dict]:
        entity_id = decode(entity_id)
        entity = self.shopify.store.get(SELLING_PLAN_PREFIX, entity_id)
        if not entity:
            return None
        entity = dict(entity)
        entity.update({key: value for key, value in options.items() if key in PLAN_FIELDS})
        entity["updatedAt"] = datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
        self.shopify.store.set(SELLING_PLAN_PREFIX, entity_id, entity)
        return entity

    def delete(self, entity_id: str) -> bool:
        return self.shopify.store.delete(SELLING_PLAN_PREFIX, decode(entity_id))
