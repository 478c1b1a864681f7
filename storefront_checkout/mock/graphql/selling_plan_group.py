"""Mock handlers for the Admin API selling plan group operations."""

from __future__ import annotations

import random
from typing import Any, Optional

from storefront_checkout.mock.exceptions import MockGraphqlValidationError
from storefront_checkout.mock.graphql.base import Handler, MockBaseGraphql, prepare_errors
from storefront_checkout.mock.graphql.endpoints import Endpoint
from storefront_checkout.mock.graphql.query import parse
from storefront_checkout.shopify.ids import decode


class MockSellingPlanGroupGraphql(MockBaseGraphql):
    def selling_plan_group_get(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        try:
            group = self.shopify.selling_plan_groups.get(decode(variables.get("sellingPlanGroupId")))
        except MockGraphqlValidationError as exc:
            return {"sellingPlanGroup": {"userErrors": prepare_errors(exc)}}
        return {"sellingPlanGroup": group}

    def selling_plan_groups_list(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        parsed = parse(query, variables)
        groups = self.shopify.selling_plan_groups.list(
            int(variables.get("offset") or 0),
            variables.get("first"),
        )

        if not parsed.has_field("edges"):
            return {"sellingPlanGroups": groups}

        cursor = random.randint(1111111, 22222222)
        return {"sellingPlanGroups": {"edges": [{"cursor": cursor, "node": group} for group in groups]}}

    def selling_plan_group_create(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        root = Endpoint.SELLING_PLAN_GROUP_CREATE.root_field
        try:
            group = self.shopify.selling_plan_groups.create(variables.get("input") or {})
        except MockGraphqlValidationError as exc:
            return {root: {"sellingPlanGroup": None, "userErrors": prepare_errors(exc)}}
        return {root: {"sellingPlanGroup": group, "userErrors": []}}

    def selling_plan_group_add_products(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        root = Endpoint.SELLING_PLAN_GROUP_ADD_PRODUCTS.root_field
        try:
            group = self.shopify.selling_plan_groups.add_products(
                decode(variables.get("id")), variables.get("productIds") or []
            )
        except MockGraphqlValidationError as exc:
            return {root: {"sellingPlanGroup": None, "userErrors": prepare_errors(exc)}}
        return {root: {"sellingPlanGroup": group, "userErrors": []}}

    def selling_plan_group_add_product_variants(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        root = Endpoint.SELLING_PLAN_GROUP_ADD_PRODUCT_VARIANTS.root_field
        try:
            group = self.shopify.selling_plan_groups.add_product_variants(
                decode(variables.get("id")), variables.get("productVariantIds") or []
            )
        except MockGraphqlValidationError as exc:
            return {root: {"sellingPlanGroup": None, "userErrors": prepare_errors(exc)}}
        return {root: {"sellingPlanGroup": group, "userErrors": []}}

    def selling_plan_group_delete(self, query: Optional[str], variables: dict[str, Any]) -> dict:
        root = Endpoint.SELLING_PLAN_GROUP_DELETE.root_field
        try:
            if not self.shopify.selling_plan_groups.delete(decode(variables.get("id"))):
                raise MockGraphqlValidationError(["id"])
        except MockGraphqlValidationError as exc:
            return {root: {"deletedSellingPlanGroupId": None, "userErrors": prepare_errors(exc)}}
        return {root: {"deletedSellingPlanGroupId": variables.get("id"), "userErrors": []}}

    def get_endpoints(self) -> dict[Endpoint, Handler]:
        return {
            Endpoint.SELLING_PLAN_GROUP_GET: self.selling_plan_group_get,
            Endpoint.SELLING_PLAN_GROUPS_LIST: self.selling_plan_groups_list,
            Endpoint.SELLING_PLAN_GROUP_CREATE: self.selling_plan_group_create,
            Endpoint.SELLING_PLAN_GROUP_ADD_PRODUCTS: self.selling_plan_group_add_products,
            Endpoint.SELLING_PLAN_GROUP_ADD_PRODUCT_VARIANTS: self.selling_plan_group_add_product_variants,
            Endpoint.SELLING_PLAN_GROUP_DELETE: self.selling_plan_group_delete,
        }
