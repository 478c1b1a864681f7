"""
Static market catalog: country code → VAT rate, currency, price multiplier.

Unknown country codes fall back to the default market in every getter except
``has``.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront_checkout.config import DEFAULT_MARKET


@dataclass(frozen=True)
class Market:
    vat: float
    currency: str
    price_adjustment: float


MARKETS: dict[str, Market] = {
    "AU": Market(vat=0.10, currency="AUD", price_adjustment=1.10),
    "CH": Market(vat=0.077, currency="CHF", price_adjustment=1.077),
    "CN": Market(vat=0.13, currency="CNY", price_adjustment=1.13),
    "DE": Market(vat=0.19, currency="EUR", price_adjustment=1.19),
    "FR": Market(vat=0.20, currency="EUR", price_adjustment=1.20),
    "IE": Market(vat=0.22, currency="EUR", price_adjustment=1.0),
    "GB": Market(vat=0.23, currency="GBP", price_adjustment=1.23),
    "JP": Market(vat=0.10, currency="JPY", price_adjustment=1.10),
    "NZ": Market(vat=0.15, currency="NZD", price_adjustment=1.15),
    "SG": Market(vat=0.07, currency="SGD", price_adjustment=1.07),
    "ZA": Market(vat=0.15, currency="ZAR", price_adjustment=1.15),
}


class MockMarkets:
    def __init__(self, default_market: str = DEFAULT_MARKET):
        self.default_market = default_market

    def all(self) -> dict[str, Market]:
        return dict(MARKETS)

    def has(self, country_code: str) -> bool:
        return country_code in MARKETS

    def get(self, country_code: str) -> Market:
        return MARKETS.get(country_code, MARKETS[self.default_market])

    def get_currency(self, country_code: str) -> str:
        return self.get(country_code).currency

    def get_vat(self, country_code: str) -> float:
        return self.get(country_code).vat

    def get_price(self, price: float, country_code: str) -> float:
        return price * self.get(country_code).price_adjustment
