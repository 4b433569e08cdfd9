"""Gateway de completion com fallback de deployment.

Política:
- Usa o deployment primário (ou o fallback quando não há primário)
- Se o deployment não existe, tenta uma única vez o fallback, desde que
  ele seja diferente e não vazio
- Qualquer outra falha, ou a segunda falha, propaga sem alteração
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING

from utils.errors import ConfigurationError, MissingDeploymentError

if TYPE_CHECKING:
    from ai.config.settings import CompletionOptions
    from ai.core.completion_client import CompletionClientProtocol, PromptMessage

logger = logging.getLogger(__name__)


def is_missing_deployment_error(exc: BaseException) -> bool:
    """Indica se o erro sinaliza deployment inexistente."""
    if isinstance(exc, MissingDeploymentError):
        return True
    message = str(exc).lower()
    return "deployment" in message and "does not exist" in message


class CompletionGateway:
    """Ponto único de chamada ao serviço de completion."""

    __slots__ = ("_client",)

    def __init__(self, client: CompletionClientProtocol) -> None:
        self._client = client

    async def complete(
        self,
        primary_deployment: str | None,
        fallback_deployment: str | None,
        messages: Sequence[PromptMessage],
        options: CompletionOptions,
        *,
        label: str = "completion",
    ) -> str:
        """Executa completion aplicando a política de fallback.

        Raises:
            ConfigurationError: Nenhum deployment configurado
        """
        if not primary_deployment and not fallback_deployment:
            raise ConfigurationError(
                "Nenhum deployment configurado (aiModel ou AZURE_OPENAI_DEPLOYMENT)"
            )

        deployment = primary_deployment or fallback_deployment
        try:
            return await self._client.complete(deployment, messages, options, label=label)
        except Exception as exc:
            if not self._should_fallback(exc, primary_deployment, fallback_deployment):
                raise
            logger.warning(
                "deployment_fallback",
                extra={
                    "component": "completion_gateway",
                    "label": label,
                    "primary_deployment": primary_deployment,
                    "fallback_deployment": fallback_deployment,
                    "error_type": type(exc).__name__,
                },
            )

        return await self._client.complete(fallback_deployment, messages, options, label=label)

    @staticmethod
    def _should_fallback(
        exc: Exception,
        primary_deployment: str | None,
        fallback_deployment: str | None,
    ) -> bool:
        if not primary_deployment or not fallback_deployment:
            return False
        if fallback_deployment == primary_deployment:
            return False
        return is_missing_deployment_error(exc)
