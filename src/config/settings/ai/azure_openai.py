"""Settings do Azure OpenAI.

Configurações para o recurso de completion (endpoint, chaves e deployment padrão).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

DEFAULT_DEPLOYMENT = "gpt-4.1-mini"
DEFAULT_API_VERSION = "2024-06-01"


@dataclass(frozen=True)
class AzureOpenAISettings:
    """Configurações do Azure OpenAI.

    Attributes:
        endpoint: URL do recurso Azure OpenAI
        key_primary: Chave do slot primário
        key_secondary: Chave do slot secundário (opcional)
        default_deployment: Deployment padrão, também usado como fallback
        api_version: Versão da API do Azure OpenAI
        timeout_seconds: Timeout para chamadas à API
    """

    endpoint: str = ""
    key_primary: str = ""
    key_secondary: str = ""
    default_deployment: str = DEFAULT_DEPLOYMENT
    api_version: str = DEFAULT_API_VERSION
    timeout_seconds: float = 60.0

    def validate(self) -> list[str]:
        """Valida configurações do Azure OpenAI.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.endpoint:
            errors.append("AZURE_OPENAI_ENDPOINT não configurado")

        if not self.key_primary:
            errors.append("AZURE_OPENAI_KEY_PRIMARY (ou AZURE_OPENAI_KEY) não configurado")

        if not self.default_deployment:
            errors.append("AZURE_OPENAI_DEPLOYMENT não pode ser vazio")

        if self.timeout_seconds <= 0:
            errors.append("AZURE_OPENAI_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _load_azure_openai_from_env() -> AzureOpenAISettings:
    """Carrega AzureOpenAISettings de variáveis de ambiente."""
    return AzureOpenAISettings(
        endpoint=os.getenv("AZURE_OPENAI_ENDPOINT", ""),
        key_primary=os.getenv("AZURE_OPENAI_KEY_PRIMARY") or os.getenv("AZURE_OPENAI_KEY", ""),
        key_secondary=os.getenv("AZURE_OPENAI_KEY_SECONDARY", ""),
        default_deployment=os.getenv("AZURE_OPENAI_DEPLOYMENT") or DEFAULT_DEPLOYMENT,
        api_version=os.getenv("AZURE_OPENAI_API_VERSION", DEFAULT_API_VERSION),
        timeout_seconds=float(os.getenv("AZURE_OPENAI_TIMEOUT_SECONDS", "60")),
    )


@lru_cache(maxsize=1)
def get_azure_openai_settings() -> AzureOpenAISettings:
    """Retorna instância cacheada de AzureOpenAISettings."""
    return _load_azure_openai_from_env()
