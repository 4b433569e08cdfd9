"""Firestore Session Store: documento de sessão por id.

Estrutura no Firestore:
    sessions/{session_id}

O SDK do Firestore é síncrono; as chamadas rodam em asyncio.to_thread.
"""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from app.domain.session import Session
from app.protocols.session_store import SessionStoreProtocol
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

SESSIONS_COLLECTION = "sessions"


class FirestoreSessionStore(SessionStoreProtocol):
    """Store de sessões usando Firestore (replace completo, sem precondição)."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection: str = SESSIONS_COLLECTION,
    ) -> None:
        self._db = firestore_client
        self._collection = collection

    async def get(self, session_id: str) -> Session | None:
        return await asyncio.to_thread(self._get_sync, session_id)

    def _get_sync(self, session_id: str) -> Session | None:
        try:
            doc = self._db.collection(self._collection).document(session_id).get()
        except Exception as exc:
            logger.error(
                "session_get_failed",
                extra={"session_id": session_id, "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError(f"Erro ao ler sessão: {exc}") from exc
        if not doc.exists:
            return None
        data = doc.to_dict() or {}
        data.setdefault("id", session_id)
        return Session.from_document(data)

    async def create(self, session: Session) -> None:
        await asyncio.to_thread(self._write_sync, session, "session_created")

    async def replace(self, session: Session) -> None:
        await asyncio.to_thread(self._write_sync, session, "session_replaced")

    def _write_sync(self, session: Session, event: str) -> None:
        try:
            # set() sem merge sobrescreve o documento inteiro
            self._db.collection(self._collection).document(session.id).set(
                session.to_document()
            )
        except Exception as exc:
            logger.error(
                "session_write_failed",
                extra={"session_id": session.id, "error_type": type(exc).__name__},
            )
            raise FirestoreUnavailableError(f"Erro ao gravar sessão: {exc}") from exc
        logger.debug(event, extra={"session_id": session.id})
