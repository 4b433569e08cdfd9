"""Use cases de sessão: criação, leitura e edição manual de fatos."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from app.domain.session import Session
from app.use_cases._common import load_session, require_fields
from utils.errors import InvalidRequestError

if TYPE_CHECKING:
    from app.protocols import SessionStoreProtocol

logger = logging.getLogger(__name__)


class InitSessionUseCase:
    """Cria sessão vazia (status active)."""

    def __init__(self, *, session_store: SessionStoreProtocol) -> None:
        self._session_store = session_store

    async def execute(self) -> dict[str, Any]:
        session = Session.new()
        await self._session_store.create(session)
        logger.info("session_created", extra={"session_id": session.id})
        return {
            "sessionId": session.id,
            "status": session.status,
            "createdAt": session.created_at,
        }


class GetSessionUseCase:
    """Retorna a visão da sessão consumida pelo front-end."""

    def __init__(self, *, session_store: SessionStoreProtocol) -> None:
        self._session_store = session_store

    async def execute(self, *, session_id: str | None) -> dict[str, Any]:
        require_fields(sessionId=session_id)
        session = await load_session(self._session_store, session_id)
        document = session.to_document()
        return {
            "sessionId": session.id,
            "discoveryData": document["discoveryData"],
            "createdAt": session.created_at,
            "messages": document["messages"],
        }


class UpdateDiscoveryUseCase:
    """Substitui por inteiro os fatos de uma categoria (edição manual)."""

    def __init__(self, *, session_store: SessionStoreProtocol) -> None:
        self._session_store = session_store

    async def execute(
        self,
        *,
        session_id: str | None,
        category: str | None,
        data: Any,
    ) -> dict[str, Any]:
        require_fields(sessionId=session_id, category=category)
        if not isinstance(data, dict):
            raise InvalidRequestError("data must be an object")

        session = await load_session(self._session_store, session_id)
        session.discovery_data[category] = dict(data)
        await self._session_store.replace(session)

        logger.info(
            "discovery_category_replaced",
            extra={"session_id": session_id, "category": category, "facts_count": len(data)},
        )
        return {"discoveryData": session.to_document()["discoveryData"][category]}
