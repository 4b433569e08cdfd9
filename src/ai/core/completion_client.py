"""Protocolo para clientes de completion.

Conforme ai/ não faz IO direto: a implementação Azure OpenAI fica em
app/infra/ai/ e é injetada via este contrato.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Literal, Protocol, TypedDict

if TYPE_CHECKING:
    from ai.config.settings import CompletionOptions


class PromptMessage(TypedDict):
    """Mensagem no formato chat (role + content)."""

    role: Literal["system", "user", "assistant"]
    content: str


class CompletionClientProtocol(Protocol):
    """Contrato para clientes de chat completion.

    Implementações devem levantar MissingDeploymentError quando o deployment
    não existe e TransportError para demais falhas do serviço.
    """

    async def complete(
        self,
        deployment: str,
        messages: Sequence[PromptMessage],
        options: CompletionOptions,
        *,
        label: str,
    ) -> str:
        """Executa uma chamada e retorna o texto da primeira escolha."""
        ...
