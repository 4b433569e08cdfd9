"""Testes do turno de chat de discovery (memória + fake de completion)."""

from __future__ import annotations

import pytest

from ai.services.discovery_extractor import EXTRACTION_LABEL
from app.domain.discovery_config import DiscoveryConfig
from app.domain.session import Session
from app.infra.stores.memory_stores import MemoryDiscoveryConfigStore, MemorySessionStore
from app.services.config_provider import StoreConfigProvider
from app.use_cases.discovery import ProcessChatTurnUseCase
from app.use_cases.discovery.process_chat_turn import CHAT_REPLY_LABEL
from tests.fakes.fake_completion_client import FakeClientFactory, FakeCompletionClient
from utils.errors import MissingDeploymentError, NotFoundError, TransportError


def _use_case(
    session_store: MemorySessionStore,
    client: FakeCompletionClient,
    config: DiscoveryConfig | None = None,
) -> ProcessChatTurnUseCase:
    return ProcessChatTurnUseCase(
        session_store=session_store,
        config_provider=StoreConfigProvider(MemoryDiscoveryConfigStore(config)),
        client_factory=FakeClientFactory(client),
    )


@pytest.mark.asyncio
async def test_turn_appends_messages_and_merges_facts(
    session_store: MemorySessionStore, stored_session: Session
) -> None:
    client = FakeCompletionClient(
        by_label={
            CHAT_REPLY_LABEL: "Which hypervisor do you use?",
            EXTRACTION_LABEL: '{"servers": 12}',
        }
    )

    result = await _use_case(session_store, client).execute(
        session_id=stored_session.id,
        message="We have 12 servers",
        category="infrastructure",
        context=[],
    )

    assert result.to_response() == {
        "response": "Which hypervisor do you use?",
        "discoveryData": {"infrastructure": {"servers": 12}},
        "categoryComplete": False,
    }
    saved = await session_store.get(stored_session.id)
    assert [(m.role, m.content) for m in saved.messages] == [
        ("user", "We have 12 servers"),
        ("assistant", "Which hypervisor do you use?"),
    ]
    assert all(m.timestamp for m in saved.messages)
    assert saved.discovery_data == {"infrastructure": {"servers": 12}}


@pytest.mark.asyncio
async def test_response_contains_merged_category_only(session_store: MemorySessionStore) -> None:
    session = Session.new()
    session.discovery_data = {"infrastructure": {"os": "Windows"}, "data": {"sql": "2019"}}
    await session_store.create(session)
    client = FakeCompletionClient(
        by_label={CHAT_REPLY_LABEL: "Thanks", EXTRACTION_LABEL: '{"servers": 12}'}
    )

    result = await _use_case(session_store, client).execute(
        session_id=session.id, message="12 servers", category="infrastructure", context=[]
    )

    assert result.discovery_data == {"infrastructure": {"os": "Windows", "servers": 12}}
    saved = await session_store.get(session.id)
    assert saved.discovery_data["data"] == {"sql": "2019"}


@pytest.mark.asyncio
async def test_unparseable_extraction_keeps_facts_and_returns_null(
    session_store: MemorySessionStore, stored_session: Session
) -> None:
    client = FakeCompletionClient(
        by_label={CHAT_REPLY_LABEL: "Got it", EXTRACTION_LABEL: "not json"}
    )

    result = await _use_case(session_store, client).execute(
        session_id=stored_session.id, message="hello", category="security", context=[]
    )

    assert result.discovery_data is None
    saved = await session_store.get(stored_session.id)
    assert saved.discovery_data == {}
    assert len(saved.messages) == 2


@pytest.mark.asyncio
async def test_extraction_transport_error_does_not_fail_turn(
    session_store: MemorySessionStore, stored_session: Session
) -> None:
    client = FakeCompletionClient(
        by_label={CHAT_REPLY_LABEL: "Got it", EXTRACTION_LABEL: TransportError("timeout")}
    )

    result = await _use_case(session_store, client).execute(
        session_id=stored_session.id, message="hello", category="security", context=[]
    )

    assert result.response == "Got it"
    assert result.discovery_data is None


@pytest.mark.asyncio
async def test_done_completes_category_without_criteria(
    session_store: MemorySessionStore, stored_session: Session
) -> None:
    client = FakeCompletionClient(by_label={CHAT_REPLY_LABEL: "Great", EXTRACTION_LABEL: "{}"})

    result = await _use_case(session_store, client).execute(
        session_id=stored_session.id, message="done", category="security", context=[]
    )

    assert result.category_complete is True


@pytest.mark.asyncio
async def test_done_respects_configured_min_facts(
    session_store: MemorySessionStore, stored_session: Session
) -> None:
    config = DiscoveryConfig.model_validate(
        {"categories": [{"id": "security", "completionCriteria": {"minFacts": 2}}]}
    )
    client = FakeCompletionClient(
        by_label={CHAT_REPLY_LABEL: "Great", EXTRACTION_LABEL: '{"mfa": "enforced"}'}
    )

    result = await _use_case(session_store, client, config).execute(
        session_id=stored_session.id, message="MFA is enforced, done", category="security", context=[]
    )

    assert result.category_complete is False


@pytest.mark.asyncio
async def test_configured_prompt_and_context_reach_the_model(
    session_store: MemorySessionStore, stored_session: Session
) -> None:
    config = DiscoveryConfig.model_validate(
        {
            "globalSettings": {"aiModel": "custom-model"},
            "categories": [{"id": "security", "extractionPrompt": "Ask about MFA."}],
        }
    )
    client = FakeCompletionClient(by_label={CHAT_REPLY_LABEL: "Ok", EXTRACTION_LABEL: "{}"})
    context = [{"role": "assistant", "content": "Hi"}, {"role": "user", "content": "Hello"}]

    await _use_case(session_store, client, config).execute(
        session_id=stored_session.id, message="We use Duo", category="security", context=context
    )

    chat_call = client.calls_for(CHAT_REPLY_LABEL)[0]
    assert chat_call.deployment == "custom-model"
    assert chat_call.messages[0] == {"role": "system", "content": "Ask about MFA."}
    assert [m["content"] for m in chat_call.messages[1:]] == ["Hi", "Hello", "We use Duo"]
    extraction_call = client.calls_for(EXTRACTION_LABEL)[0]
    assert extraction_call.messages[1]["content"] == "We use Duo Hi Hello"


@pytest.mark.asyncio
async def test_missing_custom_deployment_falls_back_for_both_calls(
    session_store: MemorySessionStore, stored_session: Session
) -> None:
    config = DiscoveryConfig.model_validate(
        {"globalSettings": {"aiModel": "retired-model"}, "categories": []}
    )
    missing = MissingDeploymentError("The API deployment retired-model does not exist")
    client = FakeCompletionClient(
        by_label={
            CHAT_REPLY_LABEL: [missing, "Reply"],
            EXTRACTION_LABEL: [missing, '{"users": 50}'],
        }
    )

    result = await _use_case(session_store, client, config).execute(
        session_id=stored_session.id, message="50 users", category="data", context=[]
    )

    assert result.response == "Reply"
    assert result.discovery_data == {"data": {"users": 50}}
    assert [call.deployment for call in client.calls] == [
        "retired-model",
        "gpt-4.1-mini",
        "retired-model",
        "gpt-4.1-mini",
    ]


@pytest.mark.asyncio
async def test_chat_failure_propagates_and_nothing_is_saved(
    session_store: MemorySessionStore, stored_session: Session
) -> None:
    client = FakeCompletionClient(by_label={CHAT_REPLY_LABEL: TransportError("401")})

    with pytest.raises(TransportError):
        await _use_case(session_store, client).execute(
            session_id=stored_session.id, message="hello", category="data", context=[]
        )

    assert (await session_store.get(stored_session.id)).messages == []


@pytest.mark.asyncio
async def test_unknown_session(session_store: MemorySessionStore) -> None:
    client = FakeCompletionClient()

    with pytest.raises(NotFoundError, match="Session not found"):
        await _use_case(session_store, client).execute(
            session_id="missing", message="hello", category="data", context=[]
        )
    assert client.calls == []


@pytest.mark.parametrize(
    "legacy_fields",
    [
        {"discoveryData": {"infrastructure": ["legacy", "array"]}},
        {"discoveryData": {"security": "free text"}},
        {"messages": [{"role": "system", "content": "seed"}]},
        {"messages": [{"role": "user"}]},
    ],
)
@pytest.mark.asyncio
async def test_turn_on_legacy_session_document(
    session_store: MemorySessionStore, legacy_fields: dict
) -> None:
    session_store.put_document({"id": "s1", **legacy_fields})
    client = FakeCompletionClient(
        by_label={CHAT_REPLY_LABEL: "Tell me more", EXTRACTION_LABEL: '{"servers": 12}'}
    )

    result = await _use_case(session_store, client).execute(
        session_id="s1", message="hi", category="infrastructure", context=[]
    )

    assert result.response == "Tell me more"
    assert result.discovery_data == {"infrastructure": {"servers": 12}}
    saved = await session_store.get("s1")
    assert saved.facts_for("infrastructure") == {"servers": 12}
    assert [m.content for m in saved.messages][-2:] == ["hi", "Tell me more"]
