"""Endpoints de administração da configuração de discovery.

Endpoints:
- GET /api/config-get
- POST /api/config-set
"""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from api.routes._responses import run_route

router = APIRouter()


class ConfigSetRequest(BaseModel):
    config: Any = None


def _get_admin_use_case():
    from app.bootstrap import get_config_store
    from app.use_cases.admin import DiscoveryConfigAdminUseCase

    return DiscoveryConfigAdminUseCase(config_store=get_config_store())


@router.get("/config-get")
async def config_get(request: Request) -> JSONResponse:
    async def _call() -> dict[str, Any]:
        return {"config": await _get_admin_use_case().get()}

    return await run_route(request, "config_get", "Failed to load configuration", _call)


@router.post("/config-set")
async def config_set(body: ConfigSetRequest, request: Request) -> JSONResponse:
    async def _call() -> dict[str, Any]:
        return await _get_admin_use_case().set(body.config)

    return await run_route(request, "config_set", "Failed to save configuration", _call)
