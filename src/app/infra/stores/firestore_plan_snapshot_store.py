"""Firestore Plan Snapshot Store.

Estrutura no Firestore:
    plan_history/{snapshot_id} -> {sessionId, createdAt, discoveryData, executionPlan, nodes, edges}
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.protocols.plan_snapshot_store import PlanSnapshotStoreProtocol
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

PLAN_HISTORY_COLLECTION = "plan_history"


class FirestorePlanSnapshotStore(PlanSnapshotStoreProtocol):
    """Snapshots de plano, um documento por entrada do histórico."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection: str = PLAN_HISTORY_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection

    async def save(self, snapshot_id: str, payload: dict[str, Any]) -> None:
        await asyncio.to_thread(self._save_sync, snapshot_id, payload)

    def _save_sync(self, snapshot_id: str, payload: dict[str, Any]) -> None:
        try:
            self._db.collection(self._collection).document(snapshot_id).set(payload)
        except Exception as exc:
            logger.error(
                "plan_snapshot_save_failed",
                extra={"snapshot_id": snapshot_id, "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError(f"Erro ao gravar snapshot: {exc}") from exc

    async def get(self, snapshot_id: str) -> dict[str, Any] | None:
        return await asyncio.to_thread(self._get_sync, snapshot_id)

    def _get_sync(self, snapshot_id: str) -> dict[str, Any] | None:
        try:
            doc = self._db.collection(self._collection).document(snapshot_id).get()
        except Exception as exc:
            logger.error(
                "plan_snapshot_get_failed",
                extra={"snapshot_id": snapshot_id, "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError(f"Erro ao ler snapshot: {exc}") from exc
        if not doc.exists:
            return None
        return doc.to_dict() or {}

    async def delete(self, snapshot_id: str) -> None:
        await asyncio.to_thread(self._delete_sync, snapshot_id)

    def _delete_sync(self, snapshot_id: str) -> None:
        try:
            self._db.collection(self._collection).document(snapshot_id).delete()
        except Exception as exc:
            raise FirestoreUnavailableError(f"Erro ao remover snapshot: {exc}") from exc
