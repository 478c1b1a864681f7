"""Command-line interface for the storefront checkout client and mock server."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Optional

from storefront_checkout import config
from storefront_checkout.services.cart_service import CartService
from storefront_checkout.shopify.context import Context
from storefront_checkout.shopify.graphql import LogLevel


def build_cart_service() -> CartService:
    return CartService(Context.from_env(), log_level=LogLevel.from_name(config.SHOPIFY_LOG_LEVEL))


def _parse_attributes(pairs: Optional[list[str]]) -> dict[str, str]:
    attributes = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            raise argparse.ArgumentTypeError(f"Expected KEY=VALUE, got {pair!r}")
        attributes[key] = value
    return attributes


def _print_cart(service: CartService, cart_id: str, country: str, as_json: bool) -> int:
    cart = service.get_cart(cart_id, country)
    if cart is None:
        return _fail(service)
    if as_json:
        print(json.dumps(cart, indent=2))
        return 0

    view = service.beautifier(cart)
    print(f"Cart:     {view.get_cart_id()}")
    print(f"Country:  {view.get_country_code()}")
    print(f"Updated:  {view.get_updated_at()}")
    for line in view.get_line_items():
        print(f"  {line['quantity']} x {line['title']}  {line['price']}  ({line['id']})")
    for label, value in view.get_estimated_costs().items():
        print(f"{label.capitalize() + ':':<10}{value}")
    print(f"Checkout: {view.get_checkout_url()}")
    return 0


def _fail(service: CartService) -> int:
    for error in service.errors():
        print(f"error: {error}", file=sys.stderr)
    return 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="storefront-checkout",
        description="Shopify Storefront cart client with a local mock GraphQL server",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    serve = commands.add_parser("serve", help="Run the mock GraphQL HTTP server")
    serve.add_argument("--host", default="127.0.0.1", help="HTTP server host (default: 127.0.0.1)")
    serve.add_argument("--port", type=int, default=8080, help="HTTP server port (default: 8080)")

    cart = commands.add_parser("cart", help="Drive a cart through the Storefront API")
    cart.add_argument("--country", default=config.DEFAULT_MARKET, help="Market country code")
    cart.add_argument("--json", action="store_true", help="Print the raw cart JSON")
    actions = cart.add_subparsers(dest="action", required=True)

    actions.add_parser("create", help="Create an empty cart")

    show = actions.add_parser("show", help="Show a cart")
    show.add_argument("cart_id")

    add = actions.add_parser("add", help="Add a product variant")
    add.add_argument("cart_id")
    add.add_argument("variant_id")
    add.add_argument("--quantity", type=int, default=1)
    add.add_argument("--attribute", action="append", metavar="KEY=VALUE")

    update = actions.add_parser("update", help="Add to the quantity of an existing line")
    update.add_argument("cart_id")
    update.add_argument("line_id")
    update.add_argument("--quantity", type=int, default=1)
    update.add_argument("--attribute", action="append", metavar="KEY=VALUE")

    remove = actions.add_parser("remove", help="Remove lines")
    remove.add_argument("cart_id")
    remove.add_argument("line_ids", nargs="+")

    empty = actions.add_parser("empty", help="Remove every line")
    empty.add_argument("cart_id")

    note = actions.add_parser("note", help="Set the cart note")
    note.add_argument("cart_id")
    note.add_argument("note")

    attribute = actions.add_parser("attribute", help="Set a cart attribute")
    attribute.add_argument("cart_id")
    attribute.add_argument("key")
    attribute.add_argument("value")

    discount = actions.add_parser("discount", help="Apply a discount code")
    discount.add_argument("cart_id")
    discount.add_argument("codes", nargs="+")

    return parser


def _run_cart(args: argparse.Namespace) -> int:
    service = build_cart_service()

    if args.action == "create":
        cart_id = service.get_new_cart(args.country)
        if not cart_id:
            return _fail(service)
        if args.json:
            return _print_cart(service, cart_id, args.country, True)
        print(cart_id)
        return 0

    if args.action == "show":
        return _print_cart(service, args.cart_id, args.country, args.json)

    if args.action == "empty":
        if not service.empty_cart(args.cart_id, args.country):
            return _fail(service)
        return _print_cart(service, args.cart_id, args.country, args.json)

    if args.action in ("add", "update"):
        line = {"quantity": args.quantity, "attributes": _parse_attributes(args.attribute)}
        if args.action == "add":
            cart_id = service.add_line(args.cart_id, args.variant_id, line)
        else:
            cart_id = service.update_line(args.cart_id, args.line_id, line)
    elif args.action == "remove":
        cart_id = service.remove_lines(args.cart_id, args.line_ids)
    elif args.action == "note":
        cart_id = service.update_note(args.cart_id, args.note)
    elif args.action == "attribute":
        cart_id = service.update_attributes(args.cart_id, args.key, args.value)
    else:
        cart_id = service.update_discount_codes(args.cart_id, args.codes)

    if not cart_id:
        return _fail(service)
    return _print_cart(service, cart_id, args.country, args.json)


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    args = _build_parser().parse_args(argv)
    level = logging.DEBUG if LogLevel.from_name(config.SHOPIFY_LOG_LEVEL) == LogLevel.DETAILED else logging.WARNING
    logging.basicConfig(level=level)

    if args.command == "serve":
        from storefront_checkout.http_server import run_http_server

        print(f"Starting mock GraphQL server on {args.host}:{args.port}")
        print(f"Storefront API: http://{args.host}:{args.port}/api/{config.SHOPIFY_API_VERSION}/graphql.json")
        run_http_server(host=args.host, port=args.port)
        return 0

    try:
        return _run_cart(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    sys.exit(main())
