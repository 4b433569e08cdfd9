"""Protocolo de persistência de sessões de onboarding.

O documento da sessão é lido e substituído por inteiro (sem ETag): dois turnos
concorrentes na mesma sessão disputam a escrita e o último vence.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from app.domain.session import Session


class SessionStoreProtocol(ABC):
    """Contrato assíncrono para o document store de sessões."""

    @abstractmethod
    async def get(self, session_id: str) -> Session | None:
        """Busca sessão por id (None se não existir)."""
        ...

    @abstractmethod
    async def create(self, session: Session) -> None:
        """Persiste sessão nova."""
        ...

    @abstractmethod
    async def replace(self, session: Session) -> None:
        """Substitui o documento inteiro da sessão."""
        ...
