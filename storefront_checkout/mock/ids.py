"""Random prefixed id generator with collision tracking."""

from __future__ import annotations

import uuid

from storefront_checkout.config import MAX_ID_ATTEMPTS
from storefront_checkout.mock.exceptions import EmptyPrefixError, GenerationExhaustedError


def _random_token() -> str:
    return uuid.uuid4().hex


class MockIds:
    def __init__(self) -> None:
        self._seen: set[str] = set()

    def create_random_id(self, prefix: str) -> str:
        """
        Return ``<prefix>/<token>`` with a token never handed out before by this
        generator. Gives up after ``MAX_ID_ATTEMPTS`` collisions.
        """
        if not prefix:
            raise EmptyPrefixError()

        if not prefix.endswith("/"):
            prefix += "/"

        attempts = 0
        while True:
            token = _random_token()
            if token not in self._seen:
                self._seen.add(token)
                return prefix + token

            attempts += 1
            if attempts > MAX_ID_ATTEMPTS:
                raise GenerationExhaustedError()

    def clear(self) -> None:
        self._seen.clear()
