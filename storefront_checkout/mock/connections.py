"""
Many-to-many relations between an owner entity and other entity ids.

Each (owner, relation) pair is kept in the entity store under the prefix
``connection@<owner_id>`` as an ordered set of related ids.
"""

from __future__ import annotations

from storefront_checkout.mock.store import MockStore

CONNECTION_PREFIX = "connection@"


class MockConnections:
    def __init__(self, store: MockStore):
        self.store = store

    def _get(self, owner_id: str, relation: str) -> dict[str, str]:
        return dict(self.store.get(CONNECTION_PREFIX + owner_id, relation) or {})

    def _set(self, owner_id: str, relation: str, connections: dict[str, str]) -> None:
        self.store.set(CONNECTION_PREFIX + owner_id, relation, connections)

    def connect(self, owner_id: str, entity_id: str, relation: str) -> list[str]:
        connections = self._get(owner_id, relation)
        connections[entity_id] = entity_id
        self._set(owner_id, relation, connections)
        return list(connections)

    def disconnect(self, owner_id: str, entity_id: str, relation: str) -> list[str]:
        connections = self._get(owner_id, relation)
        connections.pop(entity_id, None)
        self._set(owner_id, relation, connections)
        return list(connections)

    def get_connections(self, owner_id: str, relation: str) -> list[str]:
        return list(self._get(owner_id, relation))
