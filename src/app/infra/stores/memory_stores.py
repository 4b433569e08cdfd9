"""Stores em memória: apenas para desenvolvimento e testes.

ATENÇÃO: Não usar em staging/production. Sem persistência entre reinícios.
Os documentos são guardados serializados para imitar o round-trip do Firestore.
"""

from __future__ import annotations

import copy
import json
from typing import Any

from app.domain.discovery_config import DiscoveryConfig
from app.domain.session import Session
from app.protocols.config_store import DiscoveryConfigStoreProtocol
from app.protocols.plan_snapshot_store import PlanSnapshotStoreProtocol
from app.protocols.session_store import SessionStoreProtocol


class MemorySessionStore(SessionStoreProtocol):
    """Store de sessões em memória."""

    def __init__(self) -> None:
        self._store: dict[str, str] = {}  # session_id -> json

    async def get(self, session_id: str) -> Session | None:
        data = self._store.get(session_id)
        if data is None:
            return None
        return Session.from_document(json.loads(data))

    async def create(self, session: Session) -> None:
        self._store[session.id] = json.dumps(session.to_document())

    async def replace(self, session: Session) -> None:
        self._store[session.id] = json.dumps(session.to_document())

    def put_document(self, document: dict[str, Any]) -> None:
        """Grava documento bruto (sessões legadas em testes)."""
        self._store[document["id"]] = json.dumps(document)


class MemoryDiscoveryConfigStore(DiscoveryConfigStoreProtocol):
    """Store de configuração em memória."""

    def __init__(self, config: DiscoveryConfig | None = None) -> None:
        self._data: dict[str, Any] | None = config.to_data() if config else None

    async def get(self) -> DiscoveryConfig | None:
        if self._data is None:
            return None
        return DiscoveryConfig.model_validate(self._data)

    async def save(self, config: DiscoveryConfig) -> None:
        self._data = config.to_data()


class MemoryPlanSnapshotStore(PlanSnapshotStoreProtocol):
    """Snapshots de plano em memória."""

    def __init__(self) -> None:
        self._store: dict[str, dict[str, Any]] = {}

    async def save(self, snapshot_id: str, payload: dict[str, Any]) -> None:
        self._store[snapshot_id] = copy.deepcopy(payload)

    async def get(self, snapshot_id: str) -> dict[str, Any] | None:
        payload = self._store.get(snapshot_id)
        return copy.deepcopy(payload) if payload is not None else None

    async def delete(self, snapshot_id: str) -> None:
        self._store.pop(snapshot_id, None)
