"""Protocolo para snapshots do histórico de planos."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any


class PlanSnapshotStoreProtocol(ABC):
    """Armazena o payload completo de cada plano salvo no histórico."""

    @abstractmethod
    async def save(self, snapshot_id: str, payload: dict[str, Any]) -> None: ...

    @abstractmethod
    async def get(self, snapshot_id: str) -> dict[str, Any] | None: ...

    @abstractmethod
    async def delete(self, snapshot_id: str) -> None: ...
