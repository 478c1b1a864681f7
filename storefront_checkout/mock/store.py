"""
In-memory entity store shared by every mock domain engine.

Entities are grouped by type prefix (``gid://shopify/Cart/``) and keyed by id
inside each group. Insertion order is preserved so listings are stable.
Nothing here enforces referential integrity between entities.
"""

from __future__ import annotations

from typing import Any, Optional


class MockStore:
    def __init__(self) -> None:
        self._entities: dict[str, dict[str, Any]] = {}

    def set(self, prefix: str, entity_id: str, data: Any) -> None:
        self._entities.setdefault(prefix, {})[entity_id] = data

    def get(self, prefix: str, entity_id: str) -> Optional[Any]:
        return self._entities.get(prefix, {}).get(entity_id)

    def has(self, prefix: str, entity_id: str) -> bool:
        # A stored None counts as absent
        return self.get(prefix, entity_id) is not None

    def delete(self, prefix: str, entity_id: str) -> bool:
        if not self.has(prefix, entity_id):
            return False
        del self._entities[prefix][entity_id]
        return True

    def all(self, prefix: str, start: int = 0, limit: Optional[int] = None) -> list[Any]:
        entities = list(self._entities.get(prefix, {}).values())
        if limit:
            return entities[start:start + limit]
        return entities

    def prefixes(self) -> dict[str, int]:
        """Entity count per prefix, used by the admin state endpoint."""
        return {prefix: len(entities) for prefix, entities in self._entities.items()}

    def clear(self) -> None:
        self._entities.clear()
