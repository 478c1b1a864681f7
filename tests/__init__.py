# Tests package
"""
Test suite for the storefront checkout client and mock Shopify engine.
- test_query_parser / test_router: query scanning and dispatch
- test_store / test_catalog: entity store, connections, ids, markets, products
- test_cart_engine / test_selling_plan_groups: mock domain engines
- test_services / test_transport: façade services and the GraphQL transport
- test_http_server / test_cli: HTTP mock server and command line
"""
