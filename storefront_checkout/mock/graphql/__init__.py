# Mock GraphQL layer
"""
In-process GraphQL mock.
- query: line-oriented reader for the documents this package sends
- endpoints: supported operations and first-line routing
- cart / selling_plan_group: handler groups answering from the mock state
- router: MockGraphql, the dispatch entry point
"""

from storefront_checkout.mock.graphql.endpoints import Endpoint, resolve_endpoint
from storefront_checkout.mock.graphql.query import ParsedQuery, parse
from storefront_checkout.mock.graphql.router import MockGraphql

__all__ = ["Endpoint", "MockGraphql", "ParsedQuery", "parse", "resolve_endpoint"]
