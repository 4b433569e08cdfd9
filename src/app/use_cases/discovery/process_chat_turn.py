"""Use case do turno de chat de discovery.

Fluxo (uma única escrita no final):
1. Carrega a sessão (NotFoundError se não existir)
2. Resolve o system prompt da categoria (configurado, padrão ou genérico)
3. Gera a resposta do assistente via gateway (falha aqui é fatal)
4. Anexa mensagem do usuário e resposta, ambas carimbadas
5. Extrai fatos da mensagem do usuário (falha degrada para sem fatos)
6. Faz merge dos fatos na categoria e avalia conclusão
7. Persiste a sessão com replace completo
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ai.config.settings import CallPointOptions, get_call_point_options
from ai.prompts.discovery_prompts import build_chat_messages, resolve_chat_system_prompt
from ai.services.discovery_extractor import DiscoveryExtractor
from app.observability import record_latency
from app.services.completion_criteria import evaluate_category_completion
from app.services.discovery_merge import merge_discovery_facts
from app.use_cases._common import gateway_for, load_session

if TYPE_CHECKING:
    from app.protocols import (
        CompletionClientFactoryProtocol,
        ConfigProviderProtocol,
        SessionStoreProtocol,
    )

logger = logging.getLogger(__name__)

CHAT_REPLY_LABEL = "chat-process reply"


@dataclass(frozen=True, slots=True)
class ChatTurnResult:
    """Resultado de um turno de chat."""

    response: str
    discovery_data: dict[str, dict[str, Any]] | None
    category_complete: bool

    def to_response(self) -> dict[str, Any]:
        return {
            "response": self.response,
            "discoveryData": self.discovery_data,
            "categoryComplete": self.category_complete,
        }


class ProcessChatTurnUseCase:
    """Processa uma mensagem do usuário dentro de uma categoria de discovery."""

    def __init__(
        self,
        *,
        session_store: SessionStoreProtocol,
        config_provider: ConfigProviderProtocol,
        client_factory: CompletionClientFactoryProtocol,
        options: CallPointOptions | None = None,
    ) -> None:
        self._session_store = session_store
        self._config_provider = config_provider
        self._client_factory = client_factory
        self._options = options or get_call_point_options()

    async def execute(
        self,
        *,
        session_id: str,
        message: str,
        category: str,
        context: Sequence[dict[str, Any]],
    ) -> ChatTurnResult:
        """Executa o turno e retorna resposta, fatos do turno e conclusão."""
        started = time.perf_counter()
        session = await load_session(self._session_store, session_id)

        config = await self._config_provider.load()
        category_config = config.category(category)
        configured_prompt = category_config.extraction_prompt if category_config else None
        system_prompt = resolve_chat_system_prompt(category, configured_prompt)

        gateway, target = gateway_for(config, self._client_factory)
        reply = await gateway.complete(
            target.deployment,
            target.fallback_deployment,
            build_chat_messages(system_prompt, context, message),
            self._options.chat_reply,
            label=CHAT_REPLY_LABEL,
        )

        session.append_message("user", message)
        session.append_message("assistant", reply)

        extractor = DiscoveryExtractor(gateway, self._options.discovery_extraction)
        facts = await extractor.extract(
            category,
            message,
            context,
            primary_deployment=target.deployment,
            fallback_deployment=target.fallback_deployment,
            extraction_prompt=configured_prompt,
        )

        turn_discovery: dict[str, dict[str, Any]] | None = None
        if facts is not None:
            merged = merge_discovery_facts(session.facts_for(category), facts)
            session.discovery_data[category] = merged
            turn_discovery = {category: merged}

        category_complete = evaluate_category_completion(
            category,
            session.discovery_data,
            category_config.completion_criteria if category_config else None,
            message,
        )

        await self._session_store.replace(session)

        elapsed_ms = (time.perf_counter() - started) * 1000
        record_latency("chat_turn", "process", elapsed_ms)
        logger.info(
            "chat_turn_processed",
            extra={
                "session_id": session_id,
                "category": category,
                "facts_extracted": facts is not None,
                "category_complete": category_complete,
                "messages_count": len(session.messages),
            },
        )
        return ChatTurnResult(
            response=reply,
            discovery_data=turn_discovery,
            category_complete=category_complete,
        )
