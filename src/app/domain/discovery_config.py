"""Configuração de discovery mantida pelo admin.

Documento único (id fixo) com settings globais de modelo e a lista de
categorias com prompt e critérios de conclusão. Ausência do documento é
condição normal: valem os defaults embutidos.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

KeySlot = Literal["primary", "secondary"]


class CompletionCriteria(BaseModel):
    """Critérios para considerar uma categoria concluída."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    required_fields: list[str] = Field(default_factory=list, alias="requiredFields")
    min_facts: int | None = Field(None, ge=0, alias="minFacts")


class CategoryConfig(BaseModel):
    """Categoria de discovery (ex.: infrastructure, security)."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    id: str
    name: str | None = None
    extraction_prompt: str | None = Field(None, alias="extractionPrompt")
    completion_criteria: CompletionCriteria | None = Field(None, alias="completionCriteria")


class OpenAIOverrides(BaseModel):
    """Bloco `openAi` dentro de globalSettings."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    key_slot: KeySlot | None = Field(None, alias="keySlot")
    endpoint: str | None = None


class GlobalSettings(BaseModel):
    """Settings globais de modelo.

    `keySlot`/`endpoint` podem vir tanto em `openAi` quanto diretamente aqui;
    o bloco `openAi` tem precedência.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    ai_model: str | None = Field(None, alias="aiModel")
    open_ai: OpenAIOverrides = Field(default_factory=OpenAIOverrides, alias="openAi")
    key_slot: KeySlot | None = Field(None, alias="keySlot")
    endpoint: str | None = None

    @property
    def effective_key_slot(self) -> KeySlot | None:
        return self.open_ai.key_slot or self.key_slot

    @property
    def effective_endpoint(self) -> str | None:
        return self.open_ai.endpoint or self.endpoint


class DiscoveryConfig(BaseModel):
    """Conteúdo (`data`) do documento de configuração."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    global_settings: GlobalSettings = Field(
        default_factory=GlobalSettings, alias="globalSettings"
    )
    categories: list[CategoryConfig] = Field(default_factory=list)

    @classmethod
    def defaults(cls) -> DiscoveryConfig:
        """Configuração vazia: prompts embutidos e conclusão só por palavra-chave."""
        return cls()

    def category(self, category_id: str) -> CategoryConfig | None:
        return next((c for c in self.categories if c.id == category_id), None)

    def to_data(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)
