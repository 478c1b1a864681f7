"""Whitelist of discount codes the mock treats as applicable."""

from __future__ import annotations

from storefront_checkout.config import APPLICABLE_DISCOUNT_CODES


class MockDiscountCodes:
    def __init__(self, codes: tuple[str, ...] = APPLICABLE_DISCOUNT_CODES):
        self._codes = list(codes)

    def all(self) -> list[str]:
        return list(self._codes)

    def has(self, code: str) -> bool:
        return code in self._codes
