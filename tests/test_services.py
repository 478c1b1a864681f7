"""
Tests for the façade services running against the in-process mock.
"""

import logging

from storefront_checkout.config import CART_PREFIX, PRODUCT_PREFIX, PRODUCT_VARIANT_PREFIX, SELLING_PLAN_GROUP_PREFIX
from storefront_checkout.services.selling_plan_group_service import build_group_input
from storefront_checkout.shopify.ids import decode

GROUP_OPTIONS = {
    "name": "Summer pre-order",
    "description": "Ships in June",
    "merchantCode": "deposit",
    "deposit": 20,
    "remainingBalanceChargeTime": "2024-06-01T00:00:00Z",
    "remainingBalanceChargeTrigger": "EXACT_TIME",
    "fulfillmentTrigger": "UNKNOWN",
    "inventoryReserve": "ON_FULFILLMENT",
    "position": "2",
}


def _lines(cart):
    return [edge["node"] for edge in cart["lines"]["edges"]]


# ═══ CartService ═════════════════════════════════════════════════════════════

class TestCartService:
    def test_new_cart(self, cart_service):
        cart_id = cart_service.get_new_cart("IE")
        assert cart_id.startswith(CART_PREFIX)
        assert cart_service.errors() == []

    def test_new_cart_invalid_market(self, cart_service, caplog):
        with caplog.at_level(logging.WARNING):
            assert cart_service.get_new_cart("ZZ") is None
        assert cart_service.errors()[0][0]["message"] == "Country code ZZ is not a valid market."
        assert any(record.getMessage() == "Shopify Cart error" for record in caplog.records)

    def test_get_cart_in_market(self, cart_service):
        cart_id = cart_service.get_new_cart("IE")
        cart = cart_service.get_cart(cart_id, "GB")
        assert decode(cart["id"]) == cart_id
        assert cart["estimatedCost"]["totalAmount"]["currencyCode"] == "GBP"

    def test_get_cart_with_selling_plan_allocation(self, cart_service):
        cart_id = cart_service.get_new_cart()
        assert cart_service.get_cart(cart_id, include_selling_plan_allocation=True) is not None

    def test_missing_cart(self, cart_service):
        assert cart_service.get_cart(CART_PREFIX + "missing") is None
        assert cart_service.cart_exists(CART_PREFIX + "missing") is False
        assert cart_service.get_checkout_url(CART_PREFIX + "missing") is None
        assert cart_service.errors()

    def test_exists_and_checkout_url(self, cart_service):
        cart_id = cart_service.get_new_cart()
        assert cart_service.cart_exists(cart_id) is True
        assert cart_service.get_checkout_url(cart_id).startswith("https://dummy.myshopify.com/cart/c/")

    def test_set_buyer_identity(self, cart_service, shopify):
        cart_id = cart_service.get_new_cart("IE")
        assert cart_service.set_buyer_identity(cart_id, "DE", {"email": "sarah@example.com"}) == cart_id
        assert shopify.cart.get(cart_id)["buyerIdentity"]["countryCode"] == "DE"

    def test_set_buyer_identity_revives_known_cart(self, cart_service, shopify):
        cart_id = CART_PREFIX + "from-session"
        assert cart_service.set_buyer_identity(cart_id, "GB") == cart_id
        assert shopify.cart.exists(cart_id)

    def test_add_line_normalises_variant_id(self, cart_service):
        cart_id = cart_service.get_new_cart()
        assert cart_service.add_line(cart_id, "123", 2) == cart_id
        line = _lines(cart_service.get_cart(cart_id))[0]
        assert decode(line["merchandise"]["id"]) == PRODUCT_VARIANT_PREFIX + "123"
        assert line["quantity"] == 2

    def test_add_lines_with_attributes(self, cart_service):
        cart_id = cart_service.get_new_cart()
        cart_service.add_lines(cart_id, {"1": {"quantity": 1, "attributes": {"engraving": "A.B."}}, "2": 3})
        lines = _lines(cart_service.get_cart(cart_id))
        assert [line["quantity"] for line in lines] == [1, 3]
        assert lines[0]["attributes"] == [{"key": "engraving", "value": "A.B."}]

    def test_add_lines_rejected(self, cart_service):
        cart_id = cart_service.get_new_cart()
        assert cart_service.add_lines(cart_id, {"1": 1, "2": 0}) is None
        assert cart_service.errors()
        assert _lines(cart_service.get_cart(cart_id)) == []

    def test_update_line(self, cart_service):
        cart_id = cart_service.get_new_cart()
        cart_service.add_line(cart_id, "1", 1)
        line_id = decode(_lines(cart_service.get_cart(cart_id))[0]["id"])
        assert cart_service.update_line(cart_id, line_id, 2) == cart_id
        assert _lines(cart_service.get_cart(cart_id))[0]["quantity"] == 3

    def test_update_lines_rejected_keeps_quantities(self, cart_service):
        cart_id = cart_service.get_new_cart()
        cart_service.add_line(cart_id, "1", 2)
        line_id = decode(_lines(cart_service.get_cart(cart_id))[0]["id"])
        assert cart_service.update_lines(cart_id, {line_id: 0}) is None
        assert _lines(cart_service.get_cart(cart_id))[0]["quantity"] == 2

    def test_remove_and_empty(self, cart_service):
        cart_id = cart_service.get_new_cart()
        cart_service.add_lines(cart_id, {"1": 1, "2": 1, "3": 1})
        first = decode(_lines(cart_service.get_cart(cart_id))[0]["id"])
        assert cart_service.remove_line(cart_id, first) == cart_id
        assert len(_lines(cart_service.get_cart(cart_id))) == 2
        assert cart_service.empty_cart(cart_id) is True
        assert cart_service.empty_cart(cart_id) is False

    def test_cart_fields(self, cart_service):
        cart_id = cart_service.get_new_cart()
        assert cart_service.update_note(cart_id, "Gift wrap please") == cart_id
        assert cart_service.update_attributes(cart_id, "Channel", "web") == cart_id
        assert cart_service.update_discount_codes(cart_id, ["TENPERCENT", "FOC"]) == cart_id
        cart = cart_service.get_cart(cart_id)
        assert cart["note"] == "Gift wrap please"
        assert cart["attributes"] == [{"key": "Channel", "value": "web"}]
        assert cart["discountCodes"] == [{"code": "TENPERCENT", "applicable": True}]

    def test_mutation_on_missing_cart(self, cart_service):
        assert cart_service.update_note(CART_PREFIX + "missing", "x") is None
        assert cart_service.errors()[-1][0]["message"] == "The specified cart does not exist."

    def test_beautifier(self, cart_service):
        cart_id = cart_service.get_new_cart("GB")
        view = cart_service.beautifier(cart_service.get_cart(cart_id, "GB"))
        assert view.get_cart_id() == cart_id
        assert view.get_estimated_costs()["total"] == "GBP 0.00"


# ═══ Cart ════════════════════════════════════════════════════════════════════

class TestCart:
    def test_new_cart_tracked(self, cart):
        cart_id = cart.get_new_cart("FR")
        assert cart.cart_id == cart_id
        assert cart.country_code == "FR"
        assert cart.exists()

    def test_no_cart_yet(self, cart):
        assert cart.get_cart() is None
        assert cart.get_checkout_url() is None
        assert cart.exists() is False

    def test_line_operations(self, cart):
        cart.get_new_cart()
        assert cart.add_line("1", 2) is True
        line_id = cart.beautifier().get_line_items()[0]["id"]
        assert cart.update_line(line_id, {"quantity": 1, "attributes": {"gift": "yes"}}) is True
        item = cart.get_cart()["lines"]["edges"][0]["node"]
        assert item["quantity"] == 3
        assert item["attributes"] == [{"key": "gift", "value": "yes"}]
        assert cart.remove_line(line_id) is True
        assert cart.beautifier().get_line_items() == []

    def test_failed_mutation(self, cart):
        cart.get_new_cart()
        assert cart.add_lines({"1": 0}) is False
        assert cart.errors()

    def test_set_country_code(self, cart):
        cart.get_new_cart("IE")
        cart.add_line("1")
        assert cart.set_country_code("JP") is True
        assert cart.get_cart()["estimatedCost"]["totalAmount"]["currencyCode"] == "JPY"

    def test_set_country_code_before_cart(self, cart):
        assert cart.set_country_code("GB") is True
        assert cart.country_code == "GB"

    def test_set_cart_id(self, cart, cart_service):
        cart_id = cart_service.get_new_cart()
        assert cart.set_cart_id(cart_id).get_cart() is not None

    def test_fields_and_empty(self, cart):
        cart.get_new_cart()
        cart.add_lines({"1": 1, "2": 1})
        assert cart.update_note("n") is True
        assert cart.update_attributes("k", "v") is True
        assert cart.update_discount_codes(["FOC"]) is True
        assert cart.empty_cart() is True
        assert cart.empty_cart() is False
        assert cart.get_checkout_url().startswith("https://dummy.myshopify.com/cart/c/")

    def test_selling_plan_allocation_flag(self, cart):
        cart.get_new_cart()
        assert cart.set_include_selling_plan_allocation().include_selling_plan_allocation is True
        assert cart.get_cart() is not None


# ═══ SellingPlanGroupService ═════════════════════════════════════════════════

class TestSellingPlanGroupService:
    def test_build_group_input(self):
        group = build_group_input(GROUP_OPTIONS)
        assert group["options"] == ["Deposit"]
        assert group["position"] == 2
        assert group["description"] == "Ships in June"
        plan = group["sellingPlansToCreate"][0]
        assert plan["category"] == "PRE_ORDER"
        assert plan["options"] == "Purchase Options with deposit"
        assert plan["billingPolicy"]["fixed"]["checkoutCharge"] == {"type": "PERCENTAGE", "value": {"percentage": 20}}
        assert plan["billingPolicy"]["fixed"]["remainingBalanceChargeTrigger"] == "EXACT_TIME"
        assert plan["deliveryPolicy"] == {"fixed": {"fulfillmentTrigger": "UNKNOWN"}}
        assert plan["inventoryPolicy"] == {"reserve": "ON_FULFILLMENT"}

    def test_build_group_input_optional_fields(self):
        group = build_group_input({"name": "n", "merchantCode": "m"})
        assert "description" not in group
        assert "position" not in group

    def test_create_attaches_products(self, group_service):
        group_id = group_service.create(
            {**GROUP_OPTIONS, "productIds": ["1", "2"], "productVariantIds": [PRODUCT_VARIANT_PREFIX + "9"]}
        )
        assert decode(group_id).startswith(SELLING_PLAN_GROUP_PREFIX)

        group = group_service.get(group_id)
        assert group["name"] == "Summer pre-order"
        assert group["productCount"] == 2
        assert [product["id"] for product in group["products"]] == [PRODUCT_PREFIX + "1", PRODUCT_PREFIX + "2"]
        assert group["productVariantCount"] == 1
        assert group["sellingPlans"][0]["category"] == "PRE_ORDER"

    def test_create_requires_name(self, group_service):
        assert group_service.create({"merchantCode": "deposit"}) is None
        errors = group_service.errors()
        assert len(errors) == 1
        assert errors[0]["field"] == "name"

    def test_get_accepts_raw_id(self, group_service):
        group_id = group_service.create(GROUP_OPTIONS)
        assert group_service.get(decode(group_id))["name"] == "Summer pre-order"

    def test_get_unknown(self, group_service):
        assert group_service.get(SELLING_PLAN_GROUP_PREFIX + "missing") is None
        assert group_service.errors()[0]["message"] == "Non existing"

    def test_list(self, group_service):
        group_service.create(GROUP_OPTIONS)
        group_service.create({**GROUP_OPTIONS, "name": "Winter pre-order"})
        assert [group["name"] for group in group_service.list()] == ["Summer pre-order", "Winter pre-order"]
        assert [group["name"] for group in group_service.list(first=1, offset=1)] == ["Winter pre-order"]

    def test_list_empty(self, group_service):
        assert group_service.list() == []

    def test_remove(self, group_service):
        group_id = group_service.create(GROUP_OPTIONS)
        assert group_service.remove(group_id) == group_id
        assert group_service.get(group_id) is None
        assert group_service.remove(group_id) is None
