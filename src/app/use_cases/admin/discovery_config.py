"""Use cases de administração da configuração de discovery."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from app.domain.discovery_config import DiscoveryConfig
from utils.errors import InvalidRequestError, NotFoundError

if TYPE_CHECKING:
    from app.protocols import DiscoveryConfigStoreProtocol

logger = logging.getLogger(__name__)

CONFIG_NOT_FOUND_MESSAGE = "Configuration not found - using defaults"
CONFIG_SAVED_MESSAGE = "Configuration saved successfully"


class DiscoveryConfigAdminUseCase:
    """Leitura e gravação do documento de configuração."""

    def __init__(self, *, config_store: DiscoveryConfigStoreProtocol) -> None:
        self._config_store = config_store

    async def get(self) -> dict[str, Any]:
        """Retorna `data` do documento (NotFoundError se nunca foi gravado)."""
        config = await self._config_store.get()
        if config is None:
            raise NotFoundError(CONFIG_NOT_FOUND_MESSAGE)
        return config.to_data()

    async def set(self, raw_config: Any) -> dict[str, Any]:
        """Valida e grava a configuração (upsert)."""
        if not isinstance(raw_config, dict) or not isinstance(raw_config.get("categories"), list):
            raise InvalidRequestError("Invalid configuration format: categories array required")
        try:
            config = DiscoveryConfig.model_validate(raw_config)
        except ValidationError as exc:
            raise InvalidRequestError(f"Invalid configuration format: {exc.error_count()} errors") from exc

        await self._config_store.save(config)
        logger.info(
            "discovery_config_updated",
            extra={"categories": [category.id for category in config.categories]},
        )
        return {"success": True, "message": CONFIG_SAVED_MESSAGE}
