"""Cliente Azure OpenAI para chat completion.

Implementação de IO: traduz erros do SDK para a taxonomia do serviço.
- deployment inexistente -> MissingDeploymentError
- demais falhas da API (HTTP, conexão, timeout) -> TransportError
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING

import openai
from openai import AsyncAzureOpenAI

from ai.core.completion_gateway import is_missing_deployment_error
from app.observability import record_latency, record_token_usage
from config.settings.ai import AzureOpenAISettings, get_azure_openai_settings
from utils.errors import ConfigurationError, MissingDeploymentError, TransportError

if TYPE_CHECKING:
    from ai.config.settings import CompletionOptions
    from ai.core.completion_client import PromptMessage

logger = logging.getLogger(__name__)

_DEPLOYMENT_NOT_FOUND_CODE = "DeploymentNotFound"


class AzureOpenAICompletionClient:
    """Cliente de completion sobre AsyncAzureOpenAI."""

    __slots__ = ("_client",)

    def __init__(
        self,
        *,
        endpoint: str | None = None,
        api_key: str | None = None,
        settings: AzureOpenAISettings | None = None,
        client: AsyncAzureOpenAI | None = None,
    ) -> None:
        if client is not None:
            self._client = client
            return

        cfg = settings or get_azure_openai_settings()
        endpoint = endpoint or cfg.endpoint
        api_key = api_key or cfg.key_primary
        if not endpoint:
            raise ConfigurationError("Endpoint do Azure OpenAI não configurado")
        if not api_key:
            raise ConfigurationError("Chave do Azure OpenAI não configurada")

        # Sem retries no SDK: o fallback de deployment é a única nova tentativa
        self._client = AsyncAzureOpenAI(
            azure_endpoint=endpoint,
            api_key=api_key,
            api_version=cfg.api_version,
            timeout=cfg.timeout_seconds,
            max_retries=0,
        )

    async def complete(
        self,
        deployment: str,
        messages: Sequence[PromptMessage],
        options: CompletionOptions,
        *,
        label: str,
    ) -> str:
        """Executa chat completion e retorna o conteúdo da primeira escolha."""
        started = time.perf_counter()
        try:
            response = await self._client.chat.completions.create(
                model=deployment,
                messages=list(messages),
                max_tokens=options.max_tokens,
                temperature=options.temperature,
            )
        except openai.NotFoundError as exc:
            if _is_deployment_not_found(exc):
                logger.warning(
                    "azure_openai_deployment_not_found",
                    extra={"deployment": deployment, "label": label},
                )
                raise MissingDeploymentError(
                    f"The API deployment {deployment} does not exist"
                ) from exc
            raise _transport_error(exc, deployment, label) from exc
        except openai.APIError as exc:
            raise _transport_error(exc, deployment, label) from exc

        record_latency("azure_openai", label, (time.perf_counter() - started) * 1000)
        usage = getattr(response, "usage", None)
        if usage is not None:
            record_token_usage(
                deployment,
                label,
                usage.prompt_tokens,
                usage.completion_tokens,
                usage.total_tokens,
            )

        content = response.choices[0].message.content if response.choices else None
        if not content:
            logger.warning(
                "azure_openai_empty_response",
                extra={"deployment": deployment, "label": label},
            )
            return ""
        return content


def _is_deployment_not_found(exc: openai.NotFoundError) -> bool:
    return getattr(exc, "code", None) == _DEPLOYMENT_NOT_FOUND_CODE or is_missing_deployment_error(
        exc
    )


def _transport_error(exc: openai.APIError, deployment: str, label: str) -> TransportError:
    status_code = getattr(exc, "status_code", None)
    logger.warning(
        "azure_openai_call_failed",
        extra={
            "deployment": deployment,
            "label": label,
            "status_code": status_code,
            "error_type": type(exc).__name__,
        },
    )
    return TransportError(f"Falha na chamada ao Azure OpenAI ({type(exc).__name__}): {exc}")
