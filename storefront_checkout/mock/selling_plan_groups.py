"""
Selling plan group domain engine.

Groups are stored without their relations. Selling plans, products and
variants are joined from the connection store on every read, together with
the derived product and variant counts. Deleting a group leaves its
connections in place.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import TYPE_CHECKING, Any, Iterable, Optional

from storefront_checkout.config import SELLING_PLAN_GROUP_PREFIX, TIMESTAMP_FORMAT
from storefront_checkout.mock.exceptions import MockGraphqlValidationError, MockNotFoundError
from storefront_checkout.shopify.ids import decode, encode

if TYPE_CHECKING:
    from storefront_checkout.mock.shopify import MockShopify

CONNECTION_SELLING_PLANS = "sellingPlans"
CONNECTION_PRODUCTS = "products"
CONNECTION_VARIANTS = "variants"

REQUIRED_FIELDS = ("name", "merchantCode")


def _as_list(value: Any) -> list:
    if not value:
        return []
    if isinstance(value, dict):
        return [value]
    return list(value)


class MockSellingPlanGroups:
    def __init__(self, shopify: "MockShopify"):
        self.shopify = shopify

    # ── Helpers ─────────────────────────────────────────────────────────────
    def _entity_id(self, entity_id: Optional[str]) -> str:
        entity_id = decode(entity_id)
        if not entity_id or not self.shopify.store.has(SELLING_PLAN_GROUP_PREFIX, entity_id):
            raise MockNotFoundError()
        return entity_id

    def _joined(self, entity_id: str) -> dict:
        entity = dict(self.shopify.store.get(SELLING_PLAN_GROUP_PREFIX, entity_id))
        connections = self.shopify.connections
        products = self.shopify.products

        entity["sellingPlans"] = [
            self.shopify.selling_plans.get(plan_id)
            for plan_id in connections.get_connections(entity_id, CONNECTION_SELLING_PLANS)
        ]
        entity["products"] = [
            products.get_product(product_id)
            for product_id in connections.get_connections(entity_id, CONNECTION_PRODUCTS)
        ]
        entity["productCount"] = len(entity["products"])
        entity["productVariants"] = [
            products.get_variant(variant_id)
            for variant_id in connections.get_connections(entity_id, CONNECTION_VARIANTS)
        ]
        entity["productVariantCount"] = len(entity["productVariants"])
        return entity

    @staticmethod
    def validate_create(entity: dict) -> None:
        missing = [field for field in REQUIRED_FIELDS if not entity.get(field)]
        if missing:
            raise MockGraphqlValidationError(missing)

    # ── Operations ──────────────────────────────────────────────────────────
    def create(self, options: dict[str, Any], entity_id: Optional[str] = None) -> dict:
        """
        Persist a new group and apply ``sellingPlansToCreate``,
        ``sellingPlansToDelete`` and ``sellingPlansToUpdate``.

        Raises ``MockGraphqlValidationError`` listing every missing required
        field; nothing is stored in that case.
        """
        now = datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)
        entity = {
            "createdAt": now,
            "updatedAt": now,
            "appId": options.get("appId"),
            "appliesToProduct": False,
            "appliesToProductVariant": False,
            "appliesToProductVariants": False,
            "description": options.get("description"),
            "merchantCode": options.get("merchantCode"),
            "name": options.get("name"),
            "options": options.get("options") or [],
            "position": options.get("position"),
            "productCount": 0,
            "productVariantCount": 0,
            "summary": options.get("summary"),
        }
        self.validate_create(entity)

        entity_id = decode(entity_id) or self.shopify.ids.create_random_id(SELLING_PLAN_GROUP_PREFIX)
        entity = {"id": encode(entity_id), **entity}
        self.shopify.store.set(SELLING_PLAN_GROUP_PREFIX, entity_id, entity)

        connections = self.shopify.connections
        plans = self.shopify.selling_plans
        for plan_options in _as_list(options.get("sellingPlansToCreate")):
            plan = plans.create(plan_options)
            connections.connect(entity_id, decode(plan["id"]), CONNECTION_SELLING_PLANS)

        for plan in _as_list(options.get("sellingPlansToDelete")):
            plan_id = decode(plan["id"] if isinstance(plan, dict) else plan)
            plans.delete(plan_id)
            connections.disconnect(entity_id, plan_id, CONNECTION_SELLING_PLANS)

        for plan_options in _as_list(options.get("sellingPlansToUpdate")):
            plan_id = decode(plan_options.get("id"))
            if plans.update(plan_id, plan_options):
                connections.connect(entity_id, plan_id, CONNECTION_SELLING_PLANS)

        return self._joined(entity_id)

    def get(self, entity_id: Optional[str]) -> dict:
        return self._joined(self._entity_id(entity_id))

    def add_products(self, entity_id: Optional[str], product_ids: Iterable[str]) -> dict:
        entity_id = self._entity_id(entity_id)
        for product_id in product_ids or []:
            self.shopify.connections.connect(entity_id, decode(product_id), CONNECTION_PRODUCTS)
        return self._joined(entity_id)

    def add_product_variants(self, entity_id: Optional[str], variant_ids: Iterable[str]) -> dict:
        entity_id = self._entity_id(entity_id)
        for variant_id in variant_ids or []:
            self.shopify.connections.connect(entity_id, decode(variant_id), CONNECTION_VARIANTS)
        return self._joined(entity_id)

    def delete(self, entity_id: Optional[str]) -> bool:
        return self.shopify.store.delete(SELLING_PLAN_GROUP_PREFIX, self._entity_id(entity_id))

    def list(self, start: int = 0, limit: Optional[int] = None) -> list[dict]:
        entities = self.shopify.store.all(SELLING_PLAN_GROUP_PREFIX, start, limit)
        return [self._joined(decode(entity["id"])) for entity in entities]
