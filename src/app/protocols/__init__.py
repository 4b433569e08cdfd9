"""Protocolos e contratos do core da aplicação."""

from .completion_client_factory import CompletionClientFactoryProtocol
from .config_store import ConfigProviderProtocol, DiscoveryConfigStoreProtocol
from .plan_snapshot_store import PlanSnapshotStoreProtocol
from .session_store import SessionStoreProtocol

__all__ = [
    "CompletionClientFactoryProtocol",
    "ConfigProviderProtocol",
    "DiscoveryConfigStoreProtocol",
    "PlanSnapshotStoreProtocol",
    "SessionStoreProtocol",
]
