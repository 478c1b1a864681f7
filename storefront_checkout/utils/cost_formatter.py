"""Currency symbol rendering for cart totals."""

from __future__ import annotations

from typing import Optional

CURRENCY_SYMBOLS: dict[str, str] = {
    "AUD": "$",
    "CHF": "CHF",
    "CNY": "¥",
    "EUR": "€",
    "JPY": "¥",
    "GBP": "£",
    "NZD": "$",
    "SGD": "$",
    "ZAR": "R",
    "USD": "$",
}


class CostFormatter:
    def __init__(self, cart: Optional[dict]):
        self.cart = cart or {}

    @staticmethod
    def symbol(currency_code: str) -> str:
        return CURRENCY_SYMBOLS.get(currency_code, currency_code)

    def estimated_cost(self) -> str:
        total = (self.cart.get("estimatedCost") or {}).get("totalAmount")
        if not total:
            return ""
        return self.symbol(total.get("currencyCode", "")) + str(total.get("amount", ""))
