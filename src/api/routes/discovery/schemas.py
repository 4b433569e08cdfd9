"""Modelos de request dos endpoints de discovery.

Campos obrigatórios do chat são validados pelo pydantic (422); nos demais
endpoints a ausência de campos é tratada pelo use case (400).
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class ContextMessage(BaseModel):
    """Mensagem anterior enviada pelo front-end como contexto."""

    model_config = ConfigDict(extra="ignore")

    role: Literal["user", "assistant", "system"]
    content: str


class ChatProcessRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str = Field(..., min_length=1, alias="sessionId")
    message: str
    category: str = Field(..., min_length=1)
    context: list[ContextMessage] = Field(default_factory=list)

    def context_dicts(self) -> list[dict[str, Any]]:
        return [item.model_dump() for item in self.context]


class DiscoveryUpdateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(None, alias="sessionId")
    category: str | None = None
    data: Any = None


class FileIngestRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(None, alias="sessionId")
    file_name: str | None = Field(None, alias="fileName")
    content: str | None = None
