"""Agregador de settings de infraestrutura GCP.

Re-exporta todas as settings de infraestrutura para uso externo.
"""

from __future__ import annotations

from config.settings.infra.firestore import (
    DISCOVERY_CONFIG_DOCUMENT_ID,
    FirestoreSettings,
    get_firestore_settings,
)

__all__ = [
    "DISCOVERY_CONFIG_DOCUMENT_ID",
    "FirestoreSettings",
    "get_firestore_settings",
]
