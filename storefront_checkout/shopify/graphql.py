"""
GraphQL transport for the Storefront and Admin APIs.

Queries go either to Shopify over httpx (one retry on timeout) or, when a
``MockGraphql`` router is supplied, to the in-process mock engine. Failures
never raise to the caller: they are logged, kept in ``last_error`` and the
query returns ``None``.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import IntEnum
from typing import TYPE_CHECKING, Any, Optional

import httpx

from storefront_checkout.config import SHOPIFY_HTTP_TIMEOUT
from storefront_checkout.mock.exceptions import MockGraphqlError
from storefront_checkout.shopify.context import Context

if TYPE_CHECKING:
    from storefront_checkout.mock.graphql.router import MockGraphql

log = logging.getLogger(__name__)


class LogLevel(IntEnum):
    NORMAL = 0
    DETAILED = 1

    @classmethod
    def from_name(cls, name: str) -> "LogLevel":
        return cls.DETAILED if name.lower() == "detailed" else cls.NORMAL


class GraphqlResponseError(Exception):
    """Raised for empty responses or responses carrying errors."""


@dataclass
class QueryModel:
    query: str
    variables: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


class Graphql:
    def __init__(
        self,
        context: Context,
        use_storefront_api: bool,
        logger: Optional[logging.Logger] = None,
        mock: Optional["MockGraphql"] = None,
        log_level: LogLevel = LogLevel.NORMAL,
        client: Optional[httpx.Client] = None,
    ):
        self.context = context
        self.use_storefront_api = use_storefront_api
        self.logger = logger or log
        self.mock = mock
        self.log_level = log_level
        self.client = client
        self.last_error: Any = None
        self.last_response: Optional[dict] = None

    # ── Request building ───────────────────────────────────────────────────
    @property
    def api_path(self) -> str:
        if self.context.graphql_url:
            return self.context.graphql_url
        admin = "" if self.use_storefront_api else "/admin"
        return f"https://{self.context.shop_base_url}{admin}/api/{self.context.api_version}/graphql.json"

    def headers(self) -> dict[str, str]:
        headers = {"Content-Type": "application/json"}
        if self.use_storefront_api:
            headers["X-Shopify-Storefront-Access-Token"] = self.context.storefront_access_token or ""
        else:
            headers["X-Shopify-Access-Token"] = self.context.access_token or ""
        return headers

    # ── Logging ────────────────────────────────────────────────────────────
    def _log(self, level: int, source: str, message: str, model: QueryModel, **data: Any) -> None:
        self.logger.log(level, "Graphql.%s %s", source, message, extra={"graphql": {**model.to_dict(), **data}})

    def _debug(self, source: str, message: str, model: QueryModel, **data: Any) -> None:
        if self.log_level == LogLevel.DETAILED:
            self._log(logging.DEBUG, source, message, model, **data)

    def _validate(self, source: str, response: Any, model: QueryModel) -> None:
        self._debug(source, "result", model, response=response)

        if not response:
            raise GraphqlResponseError("Empty response")
        if response.get("errors"):
            self.last_error = response["errors"]
            raise GraphqlResponseError("Errors: " + json.dumps(response["errors"], default=str))
        if response.get("userErrors"):
            self.last_error = response["userErrors"]
            raise GraphqlResponseError("UserErrors: " + json.dumps(response["userErrors"], default=str))

    # ── Transports ─────────────────────────────────────────────────────────
    def _mock_query(self, model: QueryModel) -> Optional[dict]:
        self._debug("mock_query", "request", model, endpoint=self.mock.resolve(model.query))
        try:
            response = self.mock.dispatch(model.query, model.variables)
            self._validate("mock_query", response, model)
            return response
        except (GraphqlResponseError, MockGraphqlError) as exc:
            if self.last_error is None:
                self.last_error = str(exc)
            self._log(logging.ERROR, "mock_query", "failed", model, error=str(exc))
            return None

    def _post(self, model: QueryModel) -> httpx.Response:
        payload = {"query": model.query.strip(), "variables": model.variables or {}}
        for attempt in range(2):
            try:
                if self.client is not None:
                    return self.client.post(self.api_path, json=payload, headers=self.headers())
                return httpx.post(self.api_path, json=payload, headers=self.headers(), timeout=SHOPIFY_HTTP_TIMEOUT)
            except httpx.TimeoutException:
                if attempt == 0:
                    continue  # retry once
                raise
        raise httpx.TimeoutException("API timeout after retry")

    def _http_query(self, model: QueryModel) -> Optional[dict]:
        self._debug("http_query", "request", model, url=self.api_path)
        try:
            response = self._post(model).json()
            self.last_response = response if isinstance(response, dict) else None
            self._validate("http_query", self.last_response, model)
            return self.last_response.get("data")
        except (GraphqlResponseError, httpx.HTTPError, ValueError) as exc:
            if self.last_error is None:
                self.last_error = str(exc)
            self._log(logging.ERROR, "http_query", "failed", model, error=str(exc))
            return None

    def query(self, query: str, variables: Optional[dict[str, Any]] = None) -> Optional[dict]:
        self.last_error = None
        self.last_response = None
        model = QueryModel(query, variables or {})
        if self.mock is not None:
            return self._mock_query(model)
        return self._http_query(model)
