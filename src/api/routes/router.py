"""Agregador de rotas: registra health e os routers da API de discovery.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.admin.router import router as admin_router
from api.routes.discovery.router import router as discovery_router
from api.routes.health.router import router as health_router
from api.routes.planning.router import router as planning_router

API_PREFIX = "/api"


def create_api_router() -> APIRouter:
    """Cria router principal com todos os sub-routers registrados.

    Returns:
        APIRouter configurado com todos os endpoints.
    """
    api_router = APIRouter()

    # Health checks (sem prefixo para /health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    api_router.include_router(discovery_router, prefix=API_PREFIX, tags=["discovery"])
    api_router.include_router(planning_router, prefix=API_PREFIX, tags=["planning"])
    api_router.include_router(admin_router, prefix=API_PREFIX, tags=["admin"])

    return api_router
