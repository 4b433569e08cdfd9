"""Protocolo da fábrica de clientes de completion.

O endpoint e a chave são resolvidos por requisição (configuração de discovery),
então o cliente é obtido a partir do destino selecionado.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ai.core.completion_client import CompletionClientProtocol
    from app.services.deployment_selection import ModelTarget


class CompletionClientFactoryProtocol(Protocol):
    """Retorna cliente para o destino (ConfigurationError se incompleto)."""

    def __call__(self, target: ModelTarget) -> CompletionClientProtocol: ...
