"""Testes dos use cases de sessão."""

from __future__ import annotations

import pytest

from app.domain.session import Session
from app.infra.stores.memory_stores import MemorySessionStore
from app.use_cases.discovery import GetSessionUseCase, InitSessionUseCase, UpdateDiscoveryUseCase
from utils.errors import InvalidRequestError, NotFoundError


@pytest.mark.asyncio
async def test_init_creates_active_session(session_store: MemorySessionStore) -> None:
    result = await InitSessionUseCase(session_store=session_store).execute()

    assert result["status"] == "active"
    assert result["createdAt"]
    assert await session_store.get(result["sessionId"]) is not None


@pytest.mark.asyncio
async def test_get_returns_messages_and_discovery(session_store: MemorySessionStore) -> None:
    session = Session.new()
    session.append_message("user", "hi")
    session.discovery_data["data"] = {"volume": "2TB"}
    await session_store.create(session)

    result = await GetSessionUseCase(session_store=session_store).execute(session_id=session.id)

    assert result["sessionId"] == session.id
    assert result["discoveryData"] == {"data": {"volume": "2TB"}}
    assert result["messages"][0]["content"] == "hi"
    assert result["createdAt"] == session.created_at


@pytest.mark.asyncio
async def test_get_requires_session_id(session_store: MemorySessionStore) -> None:
    with pytest.raises(InvalidRequestError, match="sessionId is required"):
        await GetSessionUseCase(session_store=session_store).execute(session_id=None)


@pytest.mark.asyncio
async def test_get_unknown_session(session_store: MemorySessionStore) -> None:
    with pytest.raises(NotFoundError):
        await GetSessionUseCase(session_store=session_store).execute(session_id="missing")


@pytest.mark.asyncio
async def test_update_replaces_category_wholesale(session_store: MemorySessionStore) -> None:
    session = Session.new()
    session.discovery_data = {"data": {"volume": "2TB", "sql": "2019"}, "security": {"mfa": True}}
    await session_store.create(session)

    result = await UpdateDiscoveryUseCase(session_store=session_store).execute(
        session_id=session.id, category="data", data={"volume": "3TB"}
    )

    assert result == {"discoveryData": {"volume": "3TB"}}
    saved = await session_store.get(session.id)
    assert saved.discovery_data == {"data": {"volume": "3TB"}, "security": {"mfa": True}}


@pytest.mark.asyncio
async def test_update_requires_fields(session_store: MemorySessionStore) -> None:
    use_case = UpdateDiscoveryUseCase(session_store=session_store)

    with pytest.raises(InvalidRequestError, match="sessionId and category are required"):
        await use_case.execute(session_id=None, category=None, data={})


@pytest.mark.asyncio
async def test_update_rejects_non_object_data(session_store: MemorySessionStore) -> None:
    session = Session.new()
    await session_store.create(session)

    with pytest.raises(InvalidRequestError, match="data must be an object"):
        await UpdateDiscoveryUseCase(session_store=session_store).execute(
            session_id=session.id, category="data", data=["x"]
        )
