"""Firestore Discovery Config Store.

Estrutura no Firestore:
    configurations/discovery_config -> {id, data, updatedAt}
"""

from __future__ import annotations

import asyncio
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from app.domain.discovery_config import DiscoveryConfig
from app.protocols.config_store import DiscoveryConfigStoreProtocol
from config.settings.infra.firestore import DISCOVERY_CONFIG_DOCUMENT_ID
from utils.errors import FirestoreUnavailableError

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

CONFIGURATIONS_COLLECTION = "configurations"


class FirestoreDiscoveryConfigStore(DiscoveryConfigStoreProtocol):
    """Store do documento de configuração de discovery."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        collection: str = CONFIGURATIONS_COLLECTION,
        document_id: str = DISCOVERY_CONFIG_DOCUMENT_ID,
    ) -> None:
        self._db = firestore_client
        self._collection = collection
        self._document_id = document_id

    async def get(self) -> DiscoveryConfig | None:
        return await asyncio.to_thread(self._get_sync)

    def _get_sync(self) -> DiscoveryConfig | None:
        try:
            doc = self._db.collection(self._collection).document(self._document_id).get()
        except Exception as exc:
            logger.error("discovery_config_get_failed", extra={"error_type": type(exc).__name__})
            raise FirestoreUnavailableError(f"Erro ao ler configuração: {exc}") from exc
        if not doc.exists:
            return None
        data = (doc.to_dict() or {}).get("data") or {}
        return DiscoveryConfig.model_validate(data)

    async def save(self, config: DiscoveryConfig) -> None:
        await asyncio.to_thread(self._save_sync, config)

    def _save_sync(self, config: DiscoveryConfig) -> None:
        doc_data = {
            "id": self._document_id,
            "data": config.to_data(),
            "updatedAt": datetime.now(UTC).isoformat(),
        }
        try:
            self._db.collection(self._collection).document(self._document_id).set(doc_data)
        except Exception as exc:
            logger.error("discovery_config_save_failed", extra={"error_type": type(exc).__name__})
            raise FirestoreUnavailableError(f"Erro ao gravar configuração: {exc}") from exc
        logger.info(
            "discovery_config_saved",
            extra={"categories_count": len(config.categories)},
        )
