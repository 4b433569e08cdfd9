"""Endpoints de discovery: sessões, chat por categoria e ingestão de arquivos.

Endpoints:
- POST /api/session-init
- GET /api/session-get?sessionId=
- POST /api/chat-process
- POST /api/discovery-update
- POST /api/file-ingest
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from api.routes._responses import run_route
from api.routes.discovery.schemas import (
    ChatProcessRequest,
    DiscoveryUpdateRequest,
    FileIngestRequest,
)

router = APIRouter()


def _get_session_store():
    from app.bootstrap import get_session_store

    return get_session_store()


def _get_chat_use_case():
    from app.bootstrap import get_completion_client_factory, get_config_provider
    from app.use_cases.discovery import ProcessChatTurnUseCase

    return ProcessChatTurnUseCase(
        session_store=_get_session_store(),
        config_provider=get_config_provider(),
        client_factory=get_completion_client_factory(),
    )


def _get_ingest_use_case():
    from app.bootstrap import get_completion_client_factory, get_config_provider
    from app.use_cases.discovery import IngestFileUseCase

    return IngestFileUseCase(
        session_store=_get_session_store(),
        config_provider=get_config_provider(),
        client_factory=get_completion_client_factory(),
    )


@router.post("/session-init")
async def session_init(request: Request) -> JSONResponse:
    """Cria sessão de onboarding vazia."""
    from app.use_cases.discovery import InitSessionUseCase

    async def _call() -> dict[str, Any]:
        return await InitSessionUseCase(session_store=_get_session_store()).execute()

    return await run_route(request, "session_init", "Failed to create session", _call)


@router.get("/session-get")
async def session_get(
    request: Request,
    session_id: str | None = Query(None, alias="sessionId"),
) -> JSONResponse:
    """Retorna mensagens e fatos de discovery da sessão."""
    from app.use_cases.discovery import GetSessionUseCase

    async def _call() -> dict[str, Any]:
        use_case = GetSessionUseCase(session_store=_get_session_store())
        return await use_case.execute(session_id=session_id)

    return await run_route(request, "session_get", "Failed to retrieve session", _call)


@router.post("/chat-process")
async def chat_process(body: ChatProcessRequest, request: Request) -> JSONResponse:
    """Processa um turno de chat de discovery."""

    async def _call() -> dict[str, Any]:
        result = await _get_chat_use_case().execute(
            session_id=body.session_id,
            message=body.message,
            category=body.category,
            context=body.context_dicts(),
        )
        return result.to_response()

    return await run_route(request, "chat_process", "Failed to process chat message", _call)


@router.post("/discovery-update")
async def discovery_update(body: DiscoveryUpdateRequest, request: Request) -> JSONResponse:
    """Substitui manualmente os fatos de uma categoria."""
    from app.use_cases.discovery import UpdateDiscoveryUseCase

    async def _call() -> dict[str, Any]:
        use_case = UpdateDiscoveryUseCase(session_store=_get_session_store())
        return await use_case.execute(
            session_id=body.session_id,
            category=body.category,
            data=body.data,
        )

    return await run_route(request, "discovery_update", "Failed to update discovery data", _call)


@router.post("/file-ingest")
async def file_ingest(body: FileIngestRequest, request: Request) -> JSONResponse:
    """Mapeia o conteúdo de um arquivo para categorias de discovery."""

    async def _call() -> dict[str, Any]:
        result = await _get_ingest_use_case().execute(
            session_id=body.session_id,
            file_name=body.file_name,
            content=body.content,
        )
        return result.to_response()

    return await run_route(request, "file_ingest", "Failed to ingest file", _call)
