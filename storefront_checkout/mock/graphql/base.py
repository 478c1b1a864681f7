"""Shared plumbing for mock GraphQL handler groups."""

from __future__ import annotations

import random
from typing import Any, Callable, Optional

from storefront_checkout.config import USER_ERROR_CODE_RANGE
from storefront_checkout.mock.exceptions import MockGraphqlValidationError
from storefront_checkout.mock.factory import MockFactory
from storefront_checkout.mock.graphql.endpoints import Endpoint
from storefront_checkout.mock.shopify import MockShopify

Handler = Callable[[Optional[str], dict[str, Any]], Optional[dict]]


def user_error(field: Any, message: str, code: Optional[int] = None) -> dict:
    return {
        "code": code if code is not None else random.randint(*USER_ERROR_CODE_RANGE),
        "field": field,
        "message": message,
    }


def prepare_errors(exc: Exception) -> list[dict]:
    """Render an exception raised inside a handler as ``userErrors`` entries."""
    if not isinstance(exc, MockGraphqlValidationError):
        return [user_error("unknown", str(exc))]

    errors = []
    for failure in exc.failures:
        if isinstance(failure, dict):
            errors.append(user_error(failure.get("field", "unknown"), failure.get("message", "Unknown")))
        else:
            errors.append(user_error(failure, f"Field {failure} is mandatory"))
    return errors


class MockBaseGraphql:
    def __init__(self, shopify: MockShopify, factory: Optional[MockFactory] = None):
        self.shopify = shopify
        self.factory = factory

    def get_endpoints(self) -> dict[Endpoint, Handler]:
        raise NotImplementedError
