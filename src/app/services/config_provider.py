"""Provider da configuração de discovery por requisição."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from pydantic import ValidationError

from app.domain.discovery_config import DiscoveryConfig
from utils.errors import TransportError

if TYPE_CHECKING:
    from app.protocols.config_store import DiscoveryConfigStoreProtocol

logger = logging.getLogger(__name__)


class StoreConfigProvider:
    """Carrega a configuração do store; ausência ou falha de leitura -> defaults."""

    __slots__ = ("_store",)

    def __init__(self, store: DiscoveryConfigStoreProtocol) -> None:
        self._store = store

    async def load(self) -> DiscoveryConfig:
        try:
            config = await self._store.get()
        except (TransportError, ValidationError) as exc:
            logger.warning(
                "discovery_config_load_failed",
                extra={"component": "config_provider", "error_type": type(exc).__name__},
            )
            return DiscoveryConfig.defaults()

        if config is None:
            logger.debug("discovery_config_absent_using_defaults")
            return DiscoveryConfig.defaults()
        return config
