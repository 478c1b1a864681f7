# Utils package - display and input formatting helpers
from storefront_checkout.utils.attribute_formatter import AttributeFormatter
from storefront_checkout.utils.beautifier import Beautifier
from storefront_checkout.utils.cost_formatter import CostFormatter

__all__ = ["AttributeFormatter", "Beautifier", "CostFormatter"]
