"""Factories de stores: criação de implementações concretas.

Centraliza a escolha de backend a partir de DOCUMENT_STORE_BACKEND:
- "memory": stores em memória (dev/test)
- "firestore": stores Firestore (staging/production)
"""

from __future__ import annotations

import logging

from app.bootstrap.clients import create_firestore_client
from app.infra.stores import (
    FirestoreDiscoveryConfigStore,
    FirestorePlanSnapshotStore,
    FirestoreSessionStore,
    MemoryDiscoveryConfigStore,
    MemoryPlanSnapshotStore,
    MemorySessionStore,
)
from app.protocols import (
    DiscoveryConfigStoreProtocol,
    PlanSnapshotStoreProtocol,
    SessionStoreProtocol,
)
from config.settings import get_base_settings, get_firestore_settings

logger = logging.getLogger(__name__)


def _resolve_backend(store_name: str) -> str:
    settings = get_base_settings()
    backend = settings.document_store_backend
    if backend == "memory" and not settings.is_development:
        logger.warning(
            "memory_store_in_non_dev",
            extra={"store": store_name, "environment": settings.environment},
        )
    if backend not in ("memory", "firestore"):
        msg = f"DOCUMENT_STORE_BACKEND inválido: {backend}"
        raise ValueError(msg)
    logger.info(f"{store_name}_created", extra={"backend": backend})
    return backend


def create_session_store() -> SessionStoreProtocol:
    """Cria store de sessões conforme backend configurado."""
    if _resolve_backend("session_store") == "firestore":
        return FirestoreSessionStore(
            create_firestore_client(),
            collection=get_firestore_settings().collection_sessions,
        )
    return MemorySessionStore()


def create_config_store() -> DiscoveryConfigStoreProtocol:
    """Cria store da configuração de discovery."""
    if _resolve_backend("config_store") == "firestore":
        settings = get_firestore_settings()
        return FirestoreDiscoveryConfigStore(
            create_firestore_client(),
            collection=settings.collection_configurations,
            document_id=settings.config_document_id,
        )
    return MemoryDiscoveryConfigStore()


def create_plan_snapshot_store() -> PlanSnapshotStoreProtocol:
    """Cria store de snapshots do histórico de planos."""
    if _resolve_backend("plan_snapshot_store") == "firestore":
        return FirestorePlanSnapshotStore(
            create_firestore_client(),
            collection=get_firestore_settings().collection_plan_history,
        )
    return MemoryPlanSnapshotStore()
