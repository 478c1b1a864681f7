"""Operations the mock engine can answer, keyed by ``"<type> <rootField>"``."""

from __future__ import annotations

import re
from enum import Enum
from typing import Optional

_WITH_ARGS_RE = re.compile(r"^([a-z ]*)\(", re.IGNORECASE)
_WITHOUT_ARGS_RE = re.compile(r"^([a-z ]*)\s*{", re.IGNORECASE)


class Endpoint(str, Enum):
    CART_GET = "query cart"
    CART_CREATE = "mutation cartCreate"
    CART_BUYER_IDENTITY_UPDATE = "mutation cartBuyerIdentityUpdate"
    CART_LINES_ADD = "mutation cartLinesAdd"
    CART_LINES_UPDATE = "mutation cartLinesUpdate"
    CART_LINES_REMOVE = "mutation cartLinesRemove"
    CART_NOTE_UPDATE = "mutation cartNoteUpdate"
    CART_ATTRIBUTES_UPDATE = "mutation cartAttributesUpdate"
    CART_DISCOUNT_CODES_UPDATE = "mutation cartDiscountCodesUpdate"

    SELLING_PLAN_GROUP_GET = "query SellingPlanGroup"
    SELLING_PLAN_GROUPS_LIST = "query SellingPlanGroupsList"
    SELLING_PLAN_GROUP_CREATE = "mutation sellingPlanGroupCreate"
    SELLING_PLAN_GROUP_ADD_PRODUCTS = "mutation sellingPlanGroupAddProducts"
    SELLING_PLAN_GROUP_ADD_PRODUCT_VARIANTS = "mutation sellingPlanGroupAddProductVariants"
    SELLING_PLAN_GROUP_DELETE = "mutation sellingPlanGroupDelete"

    @property
    def root_field(self) -> str:
        return self.value.split(" ", 1)[1]


def match_signature(query: Optional[str]) -> Optional[str]:
    """Leading ``type name`` of a document, ignoring its argument list."""
    query = (query or "").strip()
    match = _WITH_ARGS_RE.match(query) or _WITHOUT_ARGS_RE.match(query)
    return match.group(1).strip() if match else None


def resolve_endpoint(query: Optional[str]) -> Optional[Endpoint]:
    signature = match_signature(query)
    try:
        return Endpoint(signature)
    except ValueError:
        return None
