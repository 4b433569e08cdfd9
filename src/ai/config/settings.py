"""Parâmetros de geração por ponto de chamada ao modelo.

Cada ponto do pipeline usa seu próprio limite de tokens e temperatura:
- CHAT_REPLY: resposta conversacional do assistente
- DISCOVERY_EXTRACTION: extração de fatos (determinística, saída curta)
- FILE_INGEST: mapeamento de documento enviado para categorias
- PLAN_GENERATION: plano de execução em fases
- SOW_TRANSFORM: conversão do plano para o schema do SOW builder
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class CallPoint(Enum):
    """Pontos de chamada ao serviço de completion."""

    CHAT_REPLY = "chat_reply"
    DISCOVERY_EXTRACTION = "discovery_extraction"
    FILE_INGEST = "file_ingest"
    PLAN_GENERATION = "plan_generation"
    SOW_TRANSFORM = "sow_transform"


@dataclass(frozen=True, slots=True)
class CompletionOptions:
    """Opções de geração.

    Atributos:
        max_tokens: Limite de tokens na resposta
        temperature: Temperatura para geração (0.0-2.0)
    """

    max_tokens: int = 500
    temperature: float = 0.7


@dataclass(frozen=True, slots=True)
class CallPointOptions:
    """Opções específicas por ponto de chamada."""

    chat_reply: CompletionOptions = field(
        default_factory=lambda: CompletionOptions(max_tokens=500, temperature=0.7)
    )
    discovery_extraction: CompletionOptions = field(
        default_factory=lambda: CompletionOptions(max_tokens=400, temperature=0.1)
    )
    file_ingest: CompletionOptions = field(
        default_factory=lambda: CompletionOptions(max_tokens=1200, temperature=0.2)
    )
    plan_generation: CompletionOptions = field(
        default_factory=lambda: CompletionOptions(max_tokens=2000, temperature=0.5)
    )
    sow_transform: CompletionOptions = field(
        default_factory=lambda: CompletionOptions(max_tokens=1200, temperature=0.4)
    )

    def get_for(self, point: CallPoint) -> CompletionOptions:
        """Retorna opções para um ponto de chamada."""
        return {
            CallPoint.CHAT_REPLY: self.chat_reply,
            CallPoint.DISCOVERY_EXTRACTION: self.discovery_extraction,
            CallPoint.FILE_INGEST: self.file_ingest,
            CallPoint.PLAN_GENERATION: self.plan_generation,
            CallPoint.SOW_TRANSFORM: self.sow_transform,
        }[point]


DEFAULT_CALL_POINT_OPTIONS = CallPointOptions()


def get_call_point_options() -> CallPointOptions:
    """Retorna opções padrão de geração."""
    return DEFAULT_CALL_POINT_OPTIONS
