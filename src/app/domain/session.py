"""Session - estado de trabalho de um engajamento de onboarding.

Documento persistido inteiro (replace por id) no document store.
Nomes de campo no documento seguem o formato camelCase consumido pelo front-end.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

logger = logging.getLogger(__name__)


def _utcnow_iso() -> str:
    return datetime.now(UTC).isoformat()


class ChatMessage(BaseModel):
    """Mensagem individual da conversa (append-only).

    Documentos legados podem ter outros roles ou mensagens sem conteúdo;
    ambos são aceitos como estão.
    """

    model_config = ConfigDict(extra="allow")

    role: str
    content: str = ""
    timestamp: str | None = None

    @field_validator("content", mode="before")
    @classmethod
    def _none_as_empty_content(cls, value: Any) -> Any:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


class PlanHistoryEntry(BaseModel):
    """Entrada do histórico de planos (snapshot fica em store próprio)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    name: str
    created_at: str = Field(default_factory=_utcnow_iso, alias="createdAt")
    snapshot_id: str | None = Field(None, alias="snapshotId")


class Session(BaseModel):
    """Sessão de onboarding armazenada no document store.

    Campos desconhecidos do documento são preservados (extra="allow") para que
    o replace completo não apague dados gravados por outras versões.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str = Field(..., min_length=1)
    status: str = "active"
    created_at: str | None = Field(None, alias="createdAt")
    messages: list[ChatMessage] = Field(default_factory=list)
    discovery_data: dict[str, Any] = Field(default_factory=dict, alias="discoveryData")
    execution_plan: dict[str, Any] | None = Field(None, alias="executionPlan")
    plan_history: list[PlanHistoryEntry] = Field(default_factory=list, alias="planHistory")

    @field_validator("plan_history", mode="before")
    @classmethod
    def _none_as_empty_list(cls, value: Any) -> Any:
        # Sessões legadas/parciais podem não ter a lista
        return [] if value is None else value

    @field_validator("messages", mode="before")
    @classmethod
    def _normalize_messages(cls, value: Any) -> Any:
        if value is None:
            return []
        if not isinstance(value, list):
            return value
        kept = [
            item
            for item in value
            if isinstance(item, ChatMessage)
            or (isinstance(item, dict) and isinstance(item.get("role"), str))
        ]
        if len(kept) != len(value):
            logger.warning(
                "session_messages_dropped",
                extra={"dropped_count": len(value) - len(kept)},
            )
        return kept

    @field_validator("discovery_data", mode="before")
    @classmethod
    def _normalize_discovery_data(cls, value: Any) -> Any:
        if value is None:
            return {}
        if not isinstance(value, dict):
            return value
        normalized: dict[str, Any] = {}
        for category, facts in value.items():
            if facts is None:
                normalized[category] = {}
            elif isinstance(facts, dict):
                normalized[category] = facts
            else:
                # Fatos legados fora do formato objeto não chegam ao merge
                logger.warning(
                    "session_category_facts_reset",
                    extra={"category": category, "value_type": type(facts).__name__},
                )
                normalized[category] = {}
        return normalized

    @classmethod
    def new(cls) -> Session:
        """Cria sessão vazia com id estável."""
        return cls(id=str(uuid.uuid4()), created_at=_utcnow_iso())

    def append_message(self, role: Literal["user", "assistant"], content: str) -> ChatMessage:
        """Anexa mensagem carimbada no momento do append."""
        message = ChatMessage(role=role, content=content, timestamp=_utcnow_iso())
        self.messages.append(message)
        return message

    def facts_for(self, category: str) -> dict[str, Any]:
        """Fatos acumulados da categoria (vazio se nunca extraídos)."""
        return self.discovery_data.get(category) or {}

    def find_plan_entry(self, plan_id: str) -> PlanHistoryEntry | None:
        return next((entry for entry in self.plan_history if entry.id == plan_id), None)

    def to_document(self) -> dict[str, Any]:
        """Converte para documento (camelCase, com extras preservados)."""
        return self.model_dump(by_alias=True, mode="json")

    @classmethod
    def from_document(cls, data: dict[str, Any]) -> Session:
        return cls.model_validate(data)
