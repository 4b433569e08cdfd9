"""Endpoints de planejamento: plano de execução, histórico e SOW builder.

Endpoints:
- POST /api/plan-generate
- POST /api/plan-history-save
- GET /api/plan-history-list?sessionId=
- POST /api/plan-history-load
- POST /api/plan-history-delete
- GET /api/sow-builder-data?sessionId=
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Query, Request
from fastapi.responses import JSONResponse

from api.routes._responses import run_route
from api.routes.planning.schemas import (
    PlanGenerateRequest,
    PlanHistoryRefRequest,
    PlanHistorySaveRequest,
)

router = APIRouter()


def _get_plan_use_case():
    from app.bootstrap import (
        get_completion_client_factory,
        get_config_provider,
        get_session_store,
    )
    from app.use_cases.planning import GeneratePlanUseCase

    return GeneratePlanUseCase(
        session_store=get_session_store(),
        config_provider=get_config_provider(),
        client_factory=get_completion_client_factory(),
    )


def _get_history_use_case():
    from app.bootstrap import get_plan_snapshot_store, get_session_store
    from app.use_cases.planning import PlanHistoryUseCase

    return PlanHistoryUseCase(
        session_store=get_session_store(),
        snapshot_store=get_plan_snapshot_store(),
    )


def _get_sow_use_case():
    from app.bootstrap import (
        get_completion_client_factory,
        get_config_provider,
        get_session_store,
    )
    from app.use_cases.planning import BuildSowDataUseCase

    return BuildSowDataUseCase(
        session_store=get_session_store(),
        config_provider=get_config_provider(),
        client_factory=get_completion_client_factory(),
    )


@router.post("/plan-generate")
async def plan_generate(body: PlanGenerateRequest, request: Request) -> JSONResponse:
    """Gera plano de execução e sua projeção em diagrama."""

    async def _call() -> dict[str, Any]:
        result = await _get_plan_use_case().execute(
            session_id=body.session_id,
            discovery_data=body.discovery_data,
            decision_tree_nodes=len(body.decision_tree.nodes),
            decision_tree_edges=len(body.decision_tree.edges),
        )
        return result.to_response()

    return await run_route(request, "plan_generate", "Failed to generate execution plan", _call)


@router.post("/plan-history-save")
async def plan_history_save(body: PlanHistorySaveRequest, request: Request) -> JSONResponse:
    async def _call() -> dict[str, Any]:
        history = await _get_history_use_case().save(
            session_id=body.session_id,
            name=body.name,
            nodes=body.nodes,
            edges=body.edges,
        )
        return {"success": True, "history": history}

    return await run_route(request, "plan_history_save", "Failed to save plan history", _call)


@router.get("/plan-history-list")
async def plan_history_list(
    request: Request,
    session_id: str | None = Query(None, alias="sessionId"),
) -> JSONResponse:
    async def _call() -> dict[str, Any]:
        history = await _get_history_use_case().list_entries(session_id=session_id)
        return {"history": history}

    return await run_route(request, "plan_history_list", "Failed to list plan history", _call)


@router.post("/plan-history-load")
async def plan_history_load(body: PlanHistoryRefRequest, request: Request) -> JSONResponse:
    async def _call() -> dict[str, Any]:
        return await _get_history_use_case().load(
            session_id=body.session_id,
            plan_id=body.plan_id,
        )

    return await run_route(request, "plan_history_load", "Failed to load plan history", _call)


@router.post("/plan-history-delete")
async def plan_history_delete(body: PlanHistoryRefRequest, request: Request) -> JSONResponse:
    async def _call() -> dict[str, Any]:
        history = await _get_history_use_case().delete(
            session_id=body.session_id,
            plan_id=body.plan_id,
        )
        return {"success": True, "history": history}

    return await run_route(request, "plan_history_delete", "Failed to delete plan history", _call)


@router.get("/sow-builder-data")
async def sow_builder_data(
    request: Request,
    session_id: str | None = Query(None, alias="sessionId"),
) -> JSONResponse:
    """Dados do SOW builder derivados do plano salvo."""

    async def _call() -> dict[str, Any]:
        return await _get_sow_use_case().execute(session_id=session_id)

    return await run_route(request, "sow_builder_data", "Failed to generate SOW builder data", _call)
