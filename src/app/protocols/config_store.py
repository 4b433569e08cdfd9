"""Protocolos para a configuração de discovery."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.domain.discovery_config import DiscoveryConfig


class DiscoveryConfigStoreProtocol(ABC):
    """Leitura/gravação do documento de configuração (id fixo)."""

    @abstractmethod
    async def get(self) -> DiscoveryConfig | None:
        """Retorna a configuração salva ou None se nunca foi gravada."""
        ...

    @abstractmethod
    async def save(self, config: DiscoveryConfig) -> None:
        """Cria ou substitui o documento de configuração."""
        ...


class ConfigProviderProtocol(Protocol):
    """Fornece a configuração efetiva de uma requisição (com defaults)."""

    async def load(self) -> DiscoveryConfig:
        ...
