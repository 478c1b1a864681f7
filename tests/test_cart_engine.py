"""
Tests for the mock cart engine: lifecycle, line batches, cart fields and
market-dependent repricing.
"""

from storefront_checkout.config import CART_PREFIX, PRODUCT_VARIANT_PREFIX
from storefront_checkout.mock.cart import format_amount, format_price
from storefront_checkout.shopify.ids import decode


def _new_cart(shopify, country_code="IE"):
    return decode(shopify.cart.create(country_code)["id"])


def _line(variant_id, quantity=1, attributes=None):
    return {"merchandiseId": variant_id, "quantity": quantity, "attributes": attributes or []}


def _nodes(cart):
    return [edge["node"] for edge in cart["lines"]["edges"]]


# ═══ Money formatting ════════════════════════════════════════════════════════

class TestMoneyFormatting:
    def test_zero_has_one_decimal(self):
        assert format_amount(0) == "0.0"
        assert format_amount(0.0) == "0.0"

    def test_non_zero_has_two_decimals(self):
        assert format_amount(24.4) == "24.40"
        assert format_amount(5.658) == "5.66"

    def test_price_shape(self):
        assert format_price(3, "GBP") == {"amount": "3.00", "currencyCode": "GBP"}


# ═══ Lifecycle ═══════════════════════════════════════════════════════════════

class TestCartLifecycle:
    def test_create_seeds_zero_costs(self, shopify):
        cart = shopify.cart.create("GB")
        cost = cart["estimatedCost"]
        assert cost["totalAmount"] == {"amount": "0.0", "currencyCode": "GBP"}
        assert cost["subtotalAmount"] == {"amount": "0.0", "currencyCode": "GBP"}
        assert cost["totalTaxAmount"] is None
        assert cost["totalDutyAmount"] is None
        assert cart["lines"]["edges"] == []
        assert cart["note"] == ""

    def test_create_rejects_unknown_market(self, shopify):
        assert shopify.cart.create("ZZ") is None
        assert shopify.store.all(CART_PREFIX) == []

    def test_ids_are_encoded(self, shopify):
        cart = shopify.cart.create("IE")
        assert not cart["id"].startswith("gid:")
        assert decode(cart["id"]).startswith(CART_PREFIX)

    def test_checkout_url(self, shopify):
        cart_id = _new_cart(shopify)
        token = cart_id[len(CART_PREFIX):]
        assert shopify.cart.get(cart_id)["checkoutUrl"] == f"https://dummy.myshopify.com/cart/c/{token}"

    def test_exists(self, shopify):
        cart_id = _new_cart(shopify)
        assert shopify.cart.exists(cart_id)
        assert not shopify.cart.exists(CART_PREFIX + "missing")
        assert not shopify.cart.exists(None)

    def test_get_missing(self, shopify):
        assert shopify.cart.get(CART_PREFIX + "missing", "IE") is None

    def test_refetch_is_stable(self, shopify, priced_variant):
        cart_id = _new_cart(shopify)
        shopify.cart.add_lines(cart_id, None, [_line(priced_variant("1", 19.99), 3)])
        first = shopify.cart.get(cart_id, "DE")
        second = shopify.cart.get(cart_id, "DE")
        assert first["estimatedCost"] == second["estimatedCost"]
        assert _nodes(first) == _nodes(second)


# ═══ Pricing ═════════════════════════════════════════════════════════════════

class TestPricing:
    def test_totals_in_home_market(self, shopify, priced_variant):
        cart_id = _new_cart(shopify)
        cart = shopify.cart.add_lines(cart_id, None, [_line(priced_variant("1", 10.0), 2)])
        cost = cart["estimatedCost"]
        assert cost["subtotalAmount"] == {"amount": "20.00", "currencyCode": "EUR"}
        assert cost["totalTaxAmount"] == {"amount": "4.40", "currencyCode": "EUR"}
        assert cost["totalAmount"] == {"amount": "24.40", "currencyCode": "EUR"}

        node = _nodes(cart)[0]
        assert node["merchandise"]["priceV2"] == {"amount": "10.00", "currencyCode": "EUR"}
        assert node["estimatedCost"]["subtotalAmount"]["amount"] == "20.00"
        assert node["estimatedCost"]["totalAmount"]["amount"] == "20.00"

    def test_fetch_in_other_market_reprices(self, shopify, priced_variant):
        cart_id = _new_cart(shopify)
        shopify.cart.add_lines(cart_id, None, [_line(priced_variant("1", 10.0), 2)])
        cart = shopify.cart.get(cart_id, "GB")
        cost = cart["estimatedCost"]
        assert cart["buyerIdentity"]["countryCode"] == "GB"
        assert cost["subtotalAmount"] == {"amount": "24.60", "currencyCode": "GBP"}
        assert cost["totalTaxAmount"] == {"amount": "5.66", "currencyCode": "GBP"}
        assert cost["totalAmount"] == {"amount": "30.26", "currencyCode": "GBP"}

    def test_market_switch_changes_currency(self, shopify, priced_variant):
        cart_id = _new_cart(shopify)
        shopify.cart.add_lines(cart_id, None, [_line(priced_variant("1", 10.0))])
        for country_code, currency in (("AU", "AUD"), ("JP", "JPY"), ("IE", "EUR")):
            total = shopify.cart.get(cart_id, country_code)["estimatedCost"]["totalAmount"]
            assert total["currencyCode"] == currency
            assert total["amount"] != "0.0"

    def test_mutation_without_country_keeps_market(self, shopify, priced_variant):
        cart_id = _new_cart(shopify)
        shopify.cart.get(cart_id, "GB")
        cart = shopify.cart.add_lines(cart_id, None, [_line(priced_variant("1", 10.0))])
        assert cart["buyerIdentity"]["countryCode"] == "GB"
        assert cart["estimatedCost"]["totalAmount"]["currencyCode"] == "GBP"
        assert _nodes(cart)[0]["merchandise"]["priceV2"]["currencyCode"] == "GBP"

    def test_emptied_cart_returns_to_zero(self, shopify, priced_variant):
        cart_id = _new_cart(shopify)
        shopify.cart.add_lines(cart_id, None, [_line(priced_variant("1", 10.0))])
        shopify.cart.empty(cart_id)
        cart = shopify.cart.get(cart_id)
        assert cart["estimatedCost"]["totalAmount"]["amount"] == "0.0"
        assert cart["estimatedCost"]["totalTaxAmount"]["amount"] == "0.0"


# ═══ Lines ═══════════════════════════════════════════════════════════════════

class TestCartLines:
    def test_add_lines_snapshot(self, shopify):
        cart_id = _new_cart(shopify)
        variant_id = PRODUCT_VARIANT_PREFIX + "7"
        node = _nodes(shopify.cart.add_lines(cart_id, "IE", [_line(variant_id)]))[0]
        product = shopify.products.get_variant(variant_id)
        assert decode(node["merchandise"]["id"]) == variant_id
        assert decode(node["merchandise"]["product"]["id"]) == product["product_id"]
        assert node["merchandise"]["product"]["title"] == product["title"]
        assert node["merchandise"]["product"]["images"]["edges"][0]["node"]["src"] == product["images"][0]["src"]

    def test_duplicate_variant_merges(self, shopify):
        cart_id = _new_cart(shopify)
        variant_id = PRODUCT_VARIANT_PREFIX + "1"
        shopify.cart.add_lines(cart_id, None, [_line(variant_id, 1)])
        cart = shopify.cart.add_lines(cart_id, None, [_line(variant_id, 2)])
        nodes = _nodes(cart)
        assert len(nodes) == 1
        assert nodes[0]["quantity"] == 3

    def test_line_attributes_are_appended(self, shopify):
        cart_id = _new_cart(shopify)
        variant_id = PRODUCT_VARIANT_PREFIX + "1"
        shopify.cart.add_lines(cart_id, None, [_line(variant_id, 1, [{"key": "gift", "value": "yes"}])])
        cart = shopify.cart.add_lines(cart_id, None, [_line(variant_id, 1, [{"key": "gift", "value": "no"}])])
        assert _nodes(cart)[0]["attributes"] == [{"key": "gift", "value": "yes"}, {"key": "gift", "value": "no"}]

    def test_add_batch_is_all_or_nothing(self, shopify):
        cart_id = _new_cart(shopify)
        lines = [_line(PRODUCT_VARIANT_PREFIX + "1", 1), _line(PRODUCT_VARIANT_PREFIX + "2", 0)]
        assert shopify.cart.add_lines(cart_id, None, lines) is None
        assert shopify.cart.get(cart_id)["lines"]["edges"] == []

    def test_add_rejects_missing_variant_and_empty_batch(self, shopify):
        cart_id = _new_cart(shopify)
        assert shopify.cart.add_lines(cart_id, None, [{"quantity": 1}]) is None
        assert shopify.cart.add_lines(cart_id, None, []) is None
        assert shopify.cart.add_lines(CART_PREFIX + "missing", None, [_line(PRODUCT_VARIANT_PREFIX + "1")]) is None

    def test_update_increments_quantity(self, shopify):
        cart_id = _new_cart(shopify)
        cart = shopify.cart.add_lines(cart_id, None, [_line(PRODUCT_VARIANT_PREFIX + "1", 2)])
        line_id = _nodes(cart)[0]["id"]
        cart = shopify.cart.update_lines(cart_id, None, [{"id": line_id, "quantity": 3}])
        assert _nodes(cart)[0]["quantity"] == 5

    def test_update_batch_is_all_or_nothing(self, shopify):
        cart_id = _new_cart(shopify)
        cart = shopify.cart.add_lines(cart_id, None, [_line(PRODUCT_VARIANT_PREFIX + "1", 2)])
        line_id = _nodes(cart)[0]["id"]
        lines = [{"id": line_id, "quantity": 1}, {"id": line_id, "quantity": 0}]
        assert shopify.cart.update_lines(cart_id, None, lines) is None
        assert _nodes(shopify.cart.get(cart_id))[0]["quantity"] == 2

    def test_update_skips_unknown_line(self, shopify):
        cart_id = _new_cart(shopify)
        cart = shopify.cart.add_lines(cart_id, None, [_line(PRODUCT_VARIANT_PREFIX + "1", 1)])
        line_id = _nodes(cart)[0]["id"]
        lines = [{"id": "gid://shopify/CartLine/unknown", "quantity": 4}, {"id": line_id, "quantity": 1}]
        cart = shopify.cart.update_lines(cart_id, None, lines)
        assert [node["quantity"] for node in _nodes(cart)] == [2]

    def test_remove_reindexes(self, shopify):
        cart_id = _new_cart(shopify)
        lines = [_line(PRODUCT_VARIANT_PREFIX + "1"), _line(PRODUCT_VARIANT_PREFIX + "2")]
        first, second = _nodes(shopify.cart.add_lines(cart_id, None, lines))
        cart = shopify.cart.remove_lines(cart_id, None, [first["id"]])
        nodes = _nodes(cart)
        assert len(nodes) == 1
        assert nodes[0]["id"] == second["id"]

    def test_remove_accepts_raw_line_ids(self, shopify):
        cart_id = _new_cart(shopify)
        node = _nodes(shopify.cart.add_lines(cart_id, None, [_line(PRODUCT_VARIANT_PREFIX + "1")]))[0]
        assert _nodes(shopify.cart.remove_lines(cart_id, None, [decode(node["id"])])) == []

    def test_remove_with_null_id_fails_whole_call(self, shopify):
        cart_id = _new_cart(shopify)
        node = _nodes(shopify.cart.add_lines(cart_id, None, [_line(PRODUCT_VARIANT_PREFIX + "1")]))[0]
        assert shopify.cart.remove_lines(cart_id, None, [node["id"], None]) is None
        assert len(_nodes(shopify.cart.get(cart_id))) == 1

    def test_remove_unknown_id_is_noop(self, shopify):
        cart_id = _new_cart(shopify)
        shopify.cart.add_lines(cart_id, None, [_line(PRODUCT_VARIANT_PREFIX + "1")])
        cart = shopify.cart.remove_lines(cart_id, None, ["gid://shopify/CartLine/unknown"])
        assert len(_nodes(cart)) == 1

    def test_empty(self, shopify):
        cart_id = _new_cart(shopify)
        lines = [_line(PRODUCT_VARIANT_PREFIX + "1"), _line(PRODUCT_VARIANT_PREFIX + "2")]
        shopify.cart.add_lines(cart_id, None, lines)
        assert shopify.cart.empty(cart_id) is True
        assert _nodes(shopify.cart.get(cart_id)) == []
        assert shopify.cart.empty(cart_id) is False
        assert shopify.cart.empty(CART_PREFIX + "missing") is False


# ═══ Cart fields ═════════════════════════════════════════════════════════════

class TestCartFields:
    def test_note(self, shopify):
        cart_id = _new_cart(shopify)
        assert shopify.cart.update_note(cart_id, None, "Leave at the door")["note"] == "Leave at the door"
        assert shopify.cart.update_note(cart_id, None, "")["note"] == ""
        assert shopify.cart.update_note(CART_PREFIX + "missing", None, "x") is None

    def test_attributes_replace_case_insensitively(self, shopify):
        cart_id = _new_cart(shopify)
        shopify.cart.update_attributes(cart_id, None, "test", "v1")
        cart = shopify.cart.update_attributes(cart_id, None, "Test", "v2")
        assert cart["attributes"] == [{"key": "Test", "value": "v2"}]

    def test_attributes_append_new_keys(self, shopify):
        cart_id = _new_cart(shopify)
        shopify.cart.update_attributes(cart_id, None, "a", "1")
        cart = shopify.cart.update_attributes(cart_id, None, "b", "2")
        assert [row["key"] for row in cart["attributes"]] == ["a", "b"]

    def test_attributes_require_key_and_value(self, shopify):
        cart_id = _new_cart(shopify)
        assert shopify.cart.update_attributes(cart_id, None, "", "v") is None
        assert shopify.cart.update_attributes(cart_id, None, "k", "") is None

    def test_single_discount_code_kept(self, shopify):
        cart_id = _new_cart(shopify)
        cart = shopify.cart.update_discount_codes(cart_id, None, ["FOC", "BOGUS"])
        assert cart["discountCodes"] == [{"code": "FOC", "applicable": True}]

    def test_unknown_discount_code_not_applicable(self, shopify):
        cart_id = _new_cart(shopify)
        cart = shopify.cart.update_discount_codes(cart_id, None, ["BOGUS", "FOC"])
        assert cart["discountCodes"] == [{"code": "BOGUS", "applicable": False}]

    def test_discount_codes_required(self, shopify):
        cart_id = _new_cart(shopify)
        assert shopify.cart.update_discount_codes(cart_id, None, []) is None
