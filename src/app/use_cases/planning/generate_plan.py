"""Use case de geração do plano de execução.

O plano é gerado pelo modelo a partir do discovery; saída não parseável
resulta no plano padrão de três fases. O plano normalizado fica salvo na
sessão e é projetado em nós/arestas para o diagrama.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from ai.config.settings import CallPointOptions, get_call_point_options
from ai.prompts.planning_prompts import PLAN_GENERATION_LABEL, build_plan_messages
from ai.utils._json_extractor import extract_json_from_response
from app.observability import record_latency
from app.services.plan_graph import build_plan_graph, default_execution_plan, normalize_phases
from app.use_cases._common import gateway_for, load_session, require_fields
from config.logging import log_fallback

if TYPE_CHECKING:
    from app.protocols import (
        CompletionClientFactoryProtocol,
        ConfigProviderProtocol,
        SessionStoreProtocol,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class PlanGenerationResult:
    plan_nodes: list[dict[str, Any]]
    plan_edges: list[dict[str, Any]]
    connectwise_tickets: list[Any]

    def to_response(self) -> dict[str, Any]:
        return {
            "planNodes": self.plan_nodes,
            "planEdges": self.plan_edges,
            "connectwiseTickets": self.connectwise_tickets,
        }


class GeneratePlanUseCase:
    """Gera, normaliza e persiste o plano de execução da sessão."""

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
        session_id: str | None,
        discovery_data: dict[str, Any] | None,
        decision_tree_nodes: int,
        decision_tree_edges: int,
    ) -> PlanGenerationResult:
        started = time.perf_counter()
        require_fields(sessionId=session_id)
        session = await load_session(self._session_store, session_id)
        if discovery_data is None:
            discovery_data = session.to_document()["discoveryData"]

        config = await self._config_provider.load()
        gateway, target = gateway_for(config, self._client_factory)
        raw = await gateway.complete(
            target.deployment,
            target.fallback_deployment,
            build_plan_messages(discovery_data, decision_tree_nodes, decision_tree_edges),
            self._options.plan_generation,
            label=PLAN_GENERATION_LABEL,
        )

        plan = extract_json_from_response(raw)
        if plan is None or not isinstance(plan.get("phases"), list):
            log_fallback(logger, "plan_generation", "parse_error")
            plan = default_execution_plan()

        plan = normalize_phases(plan)
        nodes, edges = build_plan_graph(plan)

        session.execution_plan = plan
        await self._session_store.replace(session)

        record_latency("plan_generation", "generate", (time.perf_counter() - started) * 1000)
        logger.info(
            "execution_plan_generated",
            extra={
                "session_id": session_id,
                "phases_count": len(plan["phases"]),
                "nodes_count": len(nodes),
            },
        )
        tickets = plan.get("connectwiseTickets")
        return PlanGenerationResult(
            plan_nodes=nodes,
            plan_edges=edges,
            connectwise_tickets=tickets if isinstance(tickets, list) else [],
        )
