"""Use case do histórico de planos (salvar, listar, carregar, remover).

A sessão guarda apenas as entradas (id, nome, data, snapshotId); o payload
completo de cada plano fica no store de snapshots.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from app.domain.session import PlanHistoryEntry
from app.use_cases._common import load_session, require_fields
from utils.errors import NotFoundError, TransportError

if TYPE_CHECKING:
    from app.domain.session import Session
    from app.protocols import PlanSnapshotStoreProtocol, SessionStoreProtocol

logger = logging.getLogger(__name__)


def _history_view(session: Session) -> list[dict[str, Any]]:
    return [entry.model_dump(by_alias=True, mode="json") for entry in session.plan_history]


class PlanHistoryUseCase:
    """Operações sobre o histórico de planos de uma sessão."""

    def __init__(
        self,
        *,
        session_store: SessionStoreProtocol,
        snapshot_store: PlanSnapshotStoreProtocol,
    ) -> None:
        self._session_store = session_store
        self._snapshot_store = snapshot_store

    async def save(
        self,
        *,
        session_id: str | None,
        name: str | None = None,
        nodes: list[Any] | None = None,
        edges: list[Any] | None = None,
    ) -> list[dict[str, Any]]:
        """Grava snapshot e insere entrada no topo do histórico.

        Falha ao gravar o snapshot não impede a entrada (snapshotId fica vazio).
        """
        require_fields(sessionId=session_id)
        session = await load_session(self._session_store, session_id)
        now = datetime.now(UTC)
        document = session.to_document()

        snapshot_id: str | None = str(uuid.uuid4())
        payload = {
            "sessionId": session_id,
            "createdAt": now.isoformat(),
            "discoveryData": document["discoveryData"],
            "executionPlan": document["executionPlan"],
            "nodes": nodes,
            "edges": edges,
        }
        try:
            await self._snapshot_store.save(snapshot_id, payload)
        except TransportError as exc:
            logger.warning(
                "plan_snapshot_save_failed",
                extra={"session_id": session_id, "error_type": type(exc).__name__},
            )
            snapshot_id = None

        entry = PlanHistoryEntry(
            id=str(uuid.uuid4()),
            name=name or f"Plan {now:%Y-%m-%d %H:%M:%S}",
            created_at=now.isoformat(),
            snapshot_id=snapshot_id,
        )
        session.plan_history.insert(0, entry)
        await self._session_store.replace(session)

        logger.info(
            "plan_history_saved",
            extra={"session_id": session_id, "plan_id": entry.id, "has_snapshot": bool(snapshot_id)},
        )
        return _history_view(session)

    async def list_entries(self, *, session_id: str | None) -> list[dict[str, Any]]:
        require_fields(sessionId=session_id)
        session = await load_session(self._session_store, session_id)
        return _history_view(session)

    async def load(self, *, session_id: str | None, plan_id: str | None) -> dict[str, Any]:
        """Retorna nome, data, plano e diagrama de uma entrada do histórico."""
        require_fields(sessionId=session_id, planId=plan_id)
        session = await load_session(self._session_store, session_id)
        entry = session.find_plan_entry(plan_id)
        if entry is None or not entry.snapshot_id:
            raise NotFoundError("Plan history entry not found")

        payload = await self._snapshot_store.get(entry.snapshot_id)
        if payload is None:
            raise NotFoundError("Plan snapshot not found")

        return {
            "name": entry.name,
            "createdAt": entry.created_at,
            "executionPlan": payload.get("executionPlan"),
            "nodes": payload.get("nodes") or [],
            "edges": payload.get("edges") or [],
        }

    async def delete(self, *, session_id: str | None, plan_id: str | None) -> list[dict[str, Any]]:
        """Remove entrada do histórico; remoção do snapshot é best effort."""
        require_fields(sessionId=session_id, planId=plan_id)
        session = await load_session(self._session_store, session_id)
        entry = session.find_plan_entry(plan_id)
        if entry is None:
            raise NotFoundError("Plan history entry not found")

        if entry.snapshot_id:
            try:
                await self._snapshot_store.delete(entry.snapshot_id)
            except TransportError as exc:
                logger.warning(
                    "plan_snapshot_delete_failed",
                    extra={"session_id": session_id, "plan_id": plan_id, "error_type": type(exc).__name__},
                )

        session.plan_history = [item for item in session.plan_history if item.id != plan_id]
        await self._session_store.replace(session)

        logger.info("plan_history_deleted", extra={"session_id": session_id, "plan_id": plan_id})
        return _history_view(session)
