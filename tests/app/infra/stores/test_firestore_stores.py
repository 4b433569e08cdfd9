"""Testes dos stores Firestore com cliente mockado."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.domain.discovery_config import DiscoveryConfig
from app.domain.session import Session
from app.infra.stores import (
    FirestoreDiscoveryConfigStore,
    FirestorePlanSnapshotStore,
    FirestoreSessionStore,
)
from utils.errors import FirestoreUnavailableError, TransportError


def _client_with_document(data: dict | None) -> tuple[MagicMock, MagicMock]:
    client = MagicMock()
    doc_ref = client.collection.return_value.document.return_value
    doc_ref.get.return_value = SimpleNamespace(
        exists=data is not None,
        to_dict=lambda: data,
    )
    return client, doc_ref


class TestFirestoreSessionStore:
    @pytest.mark.asyncio
    async def test_get_existing_session(self) -> None:
        client, _ = _client_with_document(
            {"status": "active", "discoveryData": {"security": {"mfa": True}}}
        )
        store = FirestoreSessionStore(client, collection="sessions")

        session = await store.get("s1")

        client.collection.assert_called_with("sessions")
        client.collection.return_value.document.assert_called_with("s1")
        assert session.id == "s1"
        assert session.facts_for("security") == {"mfa": True}

    @pytest.mark.asyncio
    async def test_get_missing_session(self) -> None:
        client, _ = _client_with_document(None)

        assert await FirestoreSessionStore(client).get("s1") is None

    @pytest.mark.asyncio
    async def test_replace_sets_full_document(self) -> None:
        client, doc_ref = _client_with_document(None)
        session = Session.new()

        await FirestoreSessionStore(client).replace(session)

        doc_ref.set.assert_called_once_with(session.to_document())

    @pytest.mark.asyncio
    async def test_read_failure_is_transport_error(self) -> None:
        client = MagicMock()
        client.collection.return_value.document.return_value.get.side_effect = RuntimeError("503")

        with pytest.raises(FirestoreUnavailableError) as exc_info:
            await FirestoreSessionStore(client).get("s1")
        assert isinstance(exc_info.value, TransportError)


class TestFirestoreDiscoveryConfigStore:
    @pytest.mark.asyncio
    async def test_reads_data_field(self) -> None:
        client, _ = _client_with_document(
            {"id": "discovery_config", "data": {"categories": [{"id": "data"}]}}
        )

        config = await FirestoreDiscoveryConfigStore(client).get()

        client.collection.return_value.document.assert_called_with("discovery_config")
        assert config.category("data") is not None

    @pytest.mark.asyncio
    async def test_absent_document(self) -> None:
        client, _ = _client_with_document(None)

        assert await FirestoreDiscoveryConfigStore(client).get() is None

    @pytest.mark.asyncio
    async def test_save_wraps_data_with_metadata(self) -> None:
        client, doc_ref = _client_with_document(None)
        config = DiscoveryConfig.model_validate({"categories": [{"id": "security"}]})

        await FirestoreDiscoveryConfigStore(client).save(config)

        written = doc_ref.set.call_args[0][0]
        assert written["id"] == "discovery_config"
        assert written["data"] == {"globalSettings": {"openAi": {}}, "categories": [{"id": "security"}]}
        assert written["updatedAt"]


class TestFirestorePlanSnapshotStore:
    @pytest.mark.asyncio
    async def test_save_get_delete(self) -> None:
        client, doc_ref = _client_with_document({"nodes": []})
        store = FirestorePlanSnapshotStore(client, collection="plan_history")

        await store.save("snap-1", {"nodes": []})
        assert await store.get("snap-1") == {"nodes": []}
        await store.delete("snap-1")

        client.collection.assert_called_with("plan_history")
        doc_ref.set.assert_called_once_with({"nodes": []})
        doc_ref.delete.assert_called_once_with()

    @pytest.mark.asyncio
    async def test_write_failure_is_transport_error(self) -> None:
        client = MagicMock()
        client.collection.return_value.document.return_value.set.side_effect = RuntimeError("x")

        with pytest.raises(TransportError):
            await FirestorePlanSnapshotStore(client).save("snap-1", {})
