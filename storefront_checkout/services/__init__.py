# Services package - Storefront and Admin API façades
"""
Service layer over the GraphQL transport.
- CartService: Storefront API cart operations keyed by cart id
- Cart: stateful wrapper around CartService for a single cart
- SellingPlanGroupService: Admin API pre-order selling plan groups
"""

from storefront_checkout.services.base import BaseService
from storefront_checkout.services.cart import Cart
from storefront_checkout.services.cart_service import CartService
from storefront_checkout.services.selling_plan_group_service import SellingPlanGroupService

__all__ = ["BaseService", "Cart", "CartService", "SellingPlanGroupService"]
