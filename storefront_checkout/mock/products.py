"""
Fabricated product catalog.

Products and variants are invented on first lookup and persisted, so repeated
lookups of the same id return the same title, price and image.
"""

from __future__ import annotations

import random
import time
import uuid
from typing import Optional

from storefront_checkout.config import PRODUCT_IMAGE_PREFIX, PRODUCT_PREFIX, PRODUCT_VARIANT_PREFIX
from storefront_checkout.mock.ids import MockIds
from storefront_checkout.mock.store import MockStore

NAME_POOL: tuple[list[str], ...] = (
    ["dry", "cold", "icy", "hot", "strong", "light", "heavy", "sweet", "bitter", "fresh"],
    ["red", "yellow", "white", "pale", "pink", "golden", "black", "brown", ""],
    ["whiskey", "gin", "beer", "cognac", "rum", "ale", "brandy", "vodka", "tequila", "aquavit"],
)


def random_product_name() -> str:
    name = " ".join(random.choice(words) for words in NAME_POOL).replace("  ", " ")
    return name[:1].upper() + name[1:]


def _random_image_src() -> str:
    folders = "/".join(str(random.randint(1111, 9999)) for _ in range(3))
    return (
        f"https://cdn.shopify.com/s/files/{random.randint(1, 9)}/{folders}"
        f"/products/{uuid.uuid4().hex[:10]}.png?v={int(time.time())}"
    )


class MockProducts:
    def __init__(self, store: MockStore, ids: MockIds):
        self.store = store
        self.ids = ids

    def _create_variant(self, product_id: str, variant_id: Optional[str] = None) -> dict:
        return {
            "id": variant_id or self.ids.create_random_id(PRODUCT_VARIANT_PREFIX),
            "title": random_product_name(),
            "product_id": product_id,
            "price": random.randint(1000, 20000) / 100,
            "currency": "EUR",
            "images": [
                {
                    "id": self.ids.create_random_id(PRODUCT_IMAGE_PREFIX),
                    "src": _random_image_src(),
                    "altText": None,
                }
            ],
        }

    def get_product_by_variant_id(self, variant_id: str, create: bool = True) -> Optional[dict]:
        if create and not self.store.has(PRODUCT_VARIANT_PREFIX, variant_id):
            product_id = self.ids.create_random_id(PRODUCT_PREFIX)
            self.store.set(PRODUCT_VARIANT_PREFIX, variant_id, self._create_variant(product_id, variant_id))
        return self.store.get(PRODUCT_VARIANT_PREFIX, variant_id)

    def get_variant(self, variant_id: str, create: bool = True) -> Optional[dict]:
        return self.get_product_by_variant_id(variant_id, create)

    def get_product(self, product_id: str, create: bool = True) -> Optional[dict]:
        if create and not self.store.has(PRODUCT_PREFIX, product_id):
            self.store.set(
                PRODUCT_PREFIX,
                product_id,
                {
                    "id": product_id,
                    "title": random_product_name(),
                    "variants": [self._create_variant(product_id)],
                },
            )
        return self.store.get(PRODUCT_PREFIX, product_id)
