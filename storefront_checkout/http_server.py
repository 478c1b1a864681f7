"""
HTTP front for the mock engine.

Serves the Storefront and Admin GraphQL paths so any GraphQL client (or this
package's own transport via ``SHOPIFY_GRAPHQL_URL``) can talk to the mock.

Run:  storefront-checkout serve --port 8080
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from storefront_checkout.mock.exceptions import MockGraphqlError
from storefront_checkout.mock.factory import MockFactory
from storefront_checkout.mock.graphql.endpoints import match_signature
from storefront_checkout.mock.graphql.router import MockGraphql
from storefront_checkout.shopify.context import Context

logger = logging.getLogger(__name__)


class GraphqlRequest(BaseModel):
    query: str = ""
    variables: Optional[dict[str, Any]] = Field(default_factory=dict)


def _errors(message: str) -> dict:
    return {"errors": [{"message": message}]}


def create_app(mock: Optional[MockGraphql] = None) -> FastAPI:
    mock = mock if mock is not None else MockGraphql(Context.from_env(), MockFactory())

    app = FastAPI(title="Storefront Checkout Mock API", version="0.1.0")
    app.add_middleware(
        CORSMiddleware, allow_origins=["*"], allow_methods=["*"], allow_headers=["*"]
    )
    app.state.mock = mock

    def execute(request: GraphqlRequest) -> dict:
        try:
            data = mock.dispatch(request.query, request.variables or {})
        except MockGraphqlError as exc:
            logger.warning("Rejected query: %s", exc)
            return _errors(str(exc))
        if data is None:
            return _errors(f"No mock endpoint for {match_signature(request.query)!r}")
        return {"data": data}

    # ── Health & Admin Endpoints ────────────────────────────────────────────
    @app.get("/health")
    async def health():
        return {"service": "Storefront Checkout Mock API", "status": "ok"}

    @app.post("/admin/reset")
    async def admin_reset():
        mock.reset()
        return {"success": True, "message": "Mock state cleared"}

    @app.get("/admin/state")
    async def admin_state():
        return {"prefixes": mock.shopify.store.prefixes()}

    # ── GraphQL ─────────────────────────────────────────────────────────────
    @app.post("/api/{version}/graphql.json")
    async def storefront_graphql(version: str, request: GraphqlRequest):
        return execute(request)

    @app.post("/admin/api/{version}/graphql.json")
    async def admin_graphql(version: str, request: GraphqlRequest):
        return execute(request)

    return app


def run_http_server(host: str = "127.0.0.1", port: int = 8080) -> None:
    uvicorn.run(create_app(), host=host, port=port)
