"""Testes do use case de ingestão de arquivo."""

from __future__ import annotations

import pytest

from app.domain.session import Session
from app.infra.stores.memory_stores import MemoryDiscoveryConfigStore, MemorySessionStore
from app.services.config_provider import StoreConfigProvider
from app.use_cases.discovery import IngestFileUseCase
from app.use_cases.discovery.ingest_file import FILE_INGEST_LABEL
from tests.fakes.fake_completion_client import FakeClientFactory, FakeCompletionClient
from utils.errors import ExtractionParseError, InvalidRequestError


def _use_case(session_store: MemorySessionStore, client: FakeCompletionClient) -> IngestFileUseCase:
    return IngestFileUseCase(
        session_store=session_store,
        config_provider=StoreConfigProvider(MemoryDiscoveryConfigStore()),
        client_factory=FakeClientFactory(client),
    )


@pytest.mark.asyncio
async def test_merges_each_object_category(session_store: MemorySessionStore) -> None:
    session = Session.new()
    session.discovery_data = {"infrastructure": {"servers": 2, "os": "Windows"}}
    await session_store.create(session)
    client = FakeCompletionClient(
        [
            '{"infrastructure": {"servers": 3}, "data": {"volume": "1TB"}, '
            '"notes": "ignored", "security": {}}'
        ]
    )

    result = await _use_case(session_store, client).execute(
        session_id=session.id, file_name="inventory.csv", content="host,os\nsrv1,win"
    )

    response = result.to_response()
    assert response["updatedCategories"] == ["infrastructure", "data", "security"]
    assert response["discoveryData"]["infrastructure"] == {"servers": 3, "os": "Windows"}
    assert response["discoveryData"]["data"] == {"volume": "1TB"}
    assert "notes" not in response["discoveryData"]
    assert client.calls[0].label == FILE_INGEST_LABEL
    assert "inventory.csv" in client.calls[0].messages[1]["content"]
    saved = await session_store.get(session.id)
    assert saved.discovery_data["data"] == {"volume": "1TB"}


@pytest.mark.asyncio
async def test_unparseable_output_raises_and_keeps_session(
    session_store: MemorySessionStore, stored_session: Session
) -> None:
    client = FakeCompletionClient(["Here is what I found: servers=3"])

    with pytest.raises(ExtractionParseError):
        await _use_case(session_store, client).execute(
            session_id=stored_session.id, file_name=None, content="srv1"
        )

    assert (await session_store.get(stored_session.id)).discovery_data == {}


@pytest.mark.asyncio
async def test_requires_session_and_content(session_store: MemorySessionStore) -> None:
    with pytest.raises(InvalidRequestError, match="content is required"):
        await _use_case(session_store, FakeCompletionClient()).execute(
            session_id="s1", file_name="a.txt", content=""
        )
