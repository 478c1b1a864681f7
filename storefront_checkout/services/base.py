"""Shared plumbing for the Storefront and Admin API services."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from storefront_checkout.shopify.context import Context
from storefront_checkout.shopify.graphql import Graphql, LogLevel, QueryModel

if TYPE_CHECKING:
    from storefront_checkout.mock.graphql.router import MockGraphql

log = logging.getLogger(__name__)


class BaseService:
    use_storefront_api: bool = True

    def __init__(
        self,
        context: Context,
        logger: Optional[logging.Logger] = None,
        mock: Optional["MockGraphql"] = None,
        log_level: LogLevel = LogLevel.NORMAL,
        graphql: Optional[Graphql] = None,
    ):
        self.context = context
        self.logger = logger or log
        self.graphql = graphql or Graphql(context, self.use_storefront_api, self.logger, mock, log_level)
        self.error_messages: list[Any] = []

    def errors(self) -> list[Any]:
        return self.error_messages

    def get_last_response(self) -> Optional[dict]:
        return self.graphql.last_response

    def query(self, model: QueryModel, field: str) -> Optional[dict]:
        """
        Run ``model`` and return the payload under ``field``.

        Transport errors and ``userErrors`` are collected in ``errors()`` and
        yield ``None``.
        """
        self.error_messages = []
        data = self.graphql.query(model.query, model.variables)
        if data is None:
            self.error_messages.append(self.graphql.last_error)
            return None

        payload = data.get(field)
        if not payload:
            self.error_messages.append(f"Missing {field} in response")
            return None

        user_errors = payload.get("userErrors") if isinstance(payload, dict) else None
        if user_errors:
            self.error_messages.extend(user_errors)
            self.logger.warning("%s.%s failed", type(self).__name__, field, extra={"userErrors": user_errors})
            return None
        return payload
