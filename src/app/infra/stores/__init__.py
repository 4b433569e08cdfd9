"""Implementações de stores (Firestore para produção, memória para dev/test)."""

from app.infra.stores.firestore_config_store import FirestoreDiscoveryConfigStore
from app.infra.stores.firestore_plan_snapshot_store import FirestorePlanSnapshotStore
from app.infra.stores.firestore_session_store import FirestoreSessionStore
from app.infra.stores.memory_stores import (
    MemoryDiscoveryConfigStore,
    MemoryPlanSnapshotStore,
    MemorySessionStore,
)

__all__ = [
    "FirestoreDiscoveryConfigStore",
    "FirestorePlanSnapshotStore",
    "FirestoreSessionStore",
    "MemoryDiscoveryConfigStore",
    "MemoryPlanSnapshotStore",
    "MemorySessionStore",
]
