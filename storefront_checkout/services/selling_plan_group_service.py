"""
Admin API selling plan groups for pre-order deposits.

``create`` builds a group holding one PRE_ORDER selling plan that charges a
percentage deposit at checkout and the remaining balance later, then attaches
the given products and variants.
"""

from __future__ import annotations

from typing import Any, Iterable, Mapping, Optional

from storefront_checkout.config import (
    PRODUCT_PREFIX,
    PRODUCT_VARIANT_PREFIX,
    SELLING_PLAN_CATEGORY_PRE_ORDER,
)
from storefront_checkout.mock.graphql.endpoints import Endpoint
from storefront_checkout.services import queries
from storefront_checkout.services.base import BaseService
from storefront_checkout.shopify.graphql import QueryModel
from storefront_checkout.shopify.ids import encode, normalise_id

PLAN_OPTION = "Purchase Options with deposit"


def build_group_input(options: Mapping[str, Any]) -> dict[str, Any]:
    merchant_code = str(options.get("merchantCode") or "")
    plan = {
        "name": options.get("name"),
        "category": SELLING_PLAN_CATEGORY_PRE_ORDER,
        "options": PLAN_OPTION,
        "billingPolicy": {
            "fixed": {
                "checkoutCharge": {
                    "type": "PERCENTAGE",
                    "value": {"percentage": options.get("deposit")},
                },
                "remainingBalanceChargeExactTime": options.get("remainingBalanceChargeTime"),
                "remainingBalanceChargeTrigger": options.get("remainingBalanceChargeTrigger"),
            }
        },
        "deliveryPolicy": {"fixed": {"fulfillmentTrigger": options.get("fulfillmentTrigger")}},
        "inventoryPolicy": {"reserve": options.get("inventoryReserve")},
    }

    group = {
        "name": options.get("name"),
        "merchantCode": merchant_code,
        "options": [merchant_code[:1].upper() + merchant_code[1:]],
        "sellingPlansToCreate": [plan],
    }
    if options.get("description"):
        group["description"] = options["description"]
    if options.get("position") is not None:
        group["position"] = int(options["position"])
    return group


class SellingPlanGroupService(BaseService):
    use_storefront_api = False

    def create(self, options: Mapping[str, Any]) -> Optional[str]:
        """
        Create a pre-order group and attach ``productIds`` and
        ``productVariantIds``. Returns the encoded group id.
        """
        model = QueryModel(queries.SELLING_PLAN_GROUP_CREATE, {"input": build_group_input(options)})
        payload = self.query(model, Endpoint.SELLING_PLAN_GROUP_CREATE.root_field)
        if not payload or not payload.get("sellingPlanGroup"):
            return None

        group_id = payload["sellingPlanGroup"]["id"]
        if options.get("productIds") and not self.add_products(group_id, options["productIds"]):
            return None
        if options.get("productVariantIds") and not self.add_product_variants(group_id, options["productVariantIds"]):
            return None
        return group_id

    def add_products(self, group_id: str, product_ids: Iterable[str]) -> Optional[dict]:
        variables = {
            "id": group_id,
            "productIds": [normalise_id(str(product_id), PRODUCT_PREFIX) for product_id in product_ids],
        }
        payload = self.query(
            QueryModel(queries.SELLING_PLAN_GROUP_ADD_PRODUCTS, variables),
            Endpoint.SELLING_PLAN_GROUP_ADD_PRODUCTS.root_field,
        )
        return payload.get("sellingPlanGroup") if payload else None

    def add_product_variants(self, group_id: str, variant_ids: Iterable[str]) -> Optional[dict]:
        variables = {
            "id": group_id,
            "productVariantIds": [normalise_id(str(variant_id), PRODUCT_VARIANT_PREFIX) for variant_id in variant_ids],
        }
        payload = self.query(
            QueryModel(queries.SELLING_PLAN_GROUP_ADD_PRODUCT_VARIANTS, variables),
            Endpoint.SELLING_PLAN_GROUP_ADD_PRODUCT_VARIANTS.root_field,
        )
        return payload.get("sellingPlanGroup") if payload else None

    def remove(self, group_id: str) -> Optional[str]:
        payload = self.query(
            QueryModel(queries.SELLING_PLAN_GROUP_DELETE, {"id": encode(group_id)}),
            Endpoint.SELLING_PLAN_GROUP_DELETE.root_field,
        )
        return payload.get("deletedSellingPlanGroupId") if payload else None

    def get(self, group_id: str) -> Optional[dict]:
        return self.query(
            QueryModel(queries.SELLING_PLAN_GROUP_GET, {"sellingPlanGroupId": encode(group_id)}),
            "sellingPlanGroup",
        )

    def list(self, first: int = 10, offset: int = 0) -> list[dict]:
        payload = self.query(
            QueryModel(queries.SELLING_PLAN_GROUPS_LIST, {"first": first, "offset": offset}),
            "sellingPlanGroups",
        )
        if not payload:
            return []
        return [edge["node"] for edge in payload.get("edges") or []]

