"""Use case dos dados do SOW builder.

Converte o plano salvo na sessão para o schema do SOW builder via modelo;
qualquer falha cai no mapeamento determinístico.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ai.config.settings import CallPointOptions, get_call_point_options
from ai.prompts.planning_prompts import SOW_TRANSFORM_LABEL, build_sow_messages
from ai.utils._json_extractor import extract_json_from_response
from app.services.sow_mapping import map_plan_to_sow
from app.use_cases._common import gateway_for, load_session, require_fields
from config.logging import log_fallback
from utils.errors import ConfigurationError, ExtractionParseError, NotFoundError, TransportError

if TYPE_CHECKING:
    from app.protocols import (
        CompletionClientFactoryProtocol,
        ConfigProviderProtocol,
        SessionStoreProtocol,
    )

logger = logging.getLogger(__name__)


class BuildSowDataUseCase:
    """Gera dados do SOW builder a partir do plano de execução."""

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

    async def execute(self, *, session_id: str | None) -> dict[str, Any]:
        require_fields(sessionId=session_id)
        session = await load_session(self._session_store, session_id)
        if not session.execution_plan:
            raise NotFoundError("Execution plan not found for session")

        document = session.to_document()
        try:
            return await self._transform(document["discoveryData"], document["executionPlan"])
        except (TransportError, ConfigurationError, ExtractionParseError) as exc:
            logger.warning(
                "sow_transform_failed",
                extra={"session_id": session_id, "error_type": type(exc).__name__},
            )
            log_fallback(logger, "sow_builder", "deterministic_mapping")
            return map_plan_to_sow(document["executionPlan"], session.model_extra)

    async def _transform(
        self,
        discovery_data: dict[str, Any],
        execution_plan: dict[str, Any],
    ) -> dict[str, Any]:
        config = await self._config_provider.load()
        gateway, target = gateway_for(config, self._client_factory)
        raw = await gateway.complete(
            target.deployment,
            target.fallback_deployment,
            build_sow_messages(discovery_data, execution_plan),
            self._options.sow_transform,
            label=SOW_TRANSFORM_LABEL,
        )
        sow = extract_json_from_response(raw)
        if sow is None:
            raise ExtractionParseError("Resposta do SOW não contém objeto JSON")
        return sow
