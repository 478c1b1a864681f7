"""
Dispatch router for the in-process mock.

The handler table is built once from every handler group and keyed by
``Endpoint``. Extra handlers can be registered under any ``"<type> <name>"``
signature.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from storefront_checkout.mock.exceptions import (
    EmptyPrefixError,
    EmptyQueryError,
    GenerationExhaustedError,
    MockGraphqlValidationError,
)
from storefront_checkout.mock.factory import MockFactory
from storefront_checkout.mock.graphql.base import Handler, prepare_errors
from storefront_checkout.mock.graphql.cart import MockCartGraphql
from storefront_checkout.mock.graphql.endpoints import Endpoint, match_signature
from storefront_checkout.mock.graphql.query import parse
from storefront_checkout.mock.graphql.selling_plan_group import MockSellingPlanGroupGraphql
from storefront_checkout.mock.shopify import MockShopify
from storefront_checkout.shopify.context import Context

logger = logging.getLogger(__name__)


class MockGraphql:
    def __init__(
        self,
        context: Context,
        factory: Optional[MockFactory] = None,
        shopify: Optional[MockShopify] = None,
    ):
        self.context = context
        self.factory = factory
        self.shopify = shopify if shopify is not None else MockShopify(context)
        self._handlers: dict[str, Handler] = {
            **MockCartGraphql(self.shopify, factory).get_endpoints(),
            **MockSellingPlanGroupGraphql(self.shopify, factory).get_endpoints(),
        }

    def get_endpoints(self) -> dict[str, Handler]:
        return dict(self._handlers)

    def register(self, endpoint: Union[Endpoint, str], handler: Handler) -> "MockGraphql":
        self._handlers[endpoint] = handler
        return self

    def resolve(self, query: Optional[str]) -> Optional[str]:
        """Registered signature matching the first line of ``query``, if any."""
        signature = match_signature(query)
        return signature if signature in self._handlers else None

    def dispatch(self, query: Optional[str], variables: Optional[dict[str, Any]] = None) -> Optional[dict]:
        """
        Answer ``query`` from the mock state.

        Returns ``None`` when no handler matches. Any other exception escaping a
        handler comes back as ``userErrors`` under the operation's root field;
        ``EmptyQueryError`` and id generator errors propagate.
        """
        variables = variables or {}
        parsed = parse(query, variables)

        signature = self.resolve(query)
        if signature is None:
            logger.debug("No mock endpoint for %r", match_signature(query))
            return None

        try:
            return self._handlers[signature](query, variables)
        except (EmptyQueryError, EmptyPrefixError, GenerationExhaustedError):
            raise
        except Exception as exc:
            if not isinstance(exc, MockGraphqlValidationError):
                logger.warning("Mock handler for %r failed: %s", signature, exc)
            root_field = parsed.root_field or signature.split(" ", 1)[-1]
            return {root_field: {"userErrors": prepare_errors(exc)}}

    def reset(self) -> None:
        self.shopify.reset()
