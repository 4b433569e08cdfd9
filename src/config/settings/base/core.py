"""Settings base do serviço de onboarding.

Configurações comuns a todos os endpoints.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

Environment = Literal["development", "staging", "production"]
DocumentStoreBackend = Literal["memory", "firestore"]


@dataclass(frozen=True)
class BaseSettings:
    """Configurações base do sistema.

    Attributes:
        environment: Ambiente de execução (development|staging|production)
        service_name: Nome do serviço para logs e tracing
        debug: Modo debug ativo
        gcp_project: ID do projeto GCP
        document_store_backend: Backend dos documentos (memory|firestore)
    """

    # Ambiente
    environment: Environment = "development"
    service_name: str = "ma-onboarding"
    debug: bool = False

    # GCP
    gcp_project: str = ""

    # Persistência de sessões/configuração
    document_store_backend: DocumentStoreBackend = "memory"

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment == "development"

    def validate(self) -> list[str]:
        """Valida configurações base.

        Returns:
            Lista de erros (vazia = OK).
        """
        errors: list[str] = []

        valid_envs = {"development", "staging", "production"}
        if self.environment not in valid_envs:
            errors.append(f"ENVIRONMENT inválido: {self.environment}")

        if not self.service_name:
            errors.append("SERVICE_NAME não pode ser vazio")

        if self.document_store_backend not in ("memory", "firestore"):
            errors.append(f"DOCUMENT_STORE_BACKEND inválido: {self.document_store_backend}")

        return errors


def _parse_environment(env_str: str) -> Environment:
    """Converte string de ambiente para tipo Environment."""
    env_lower = env_str.lower()
    if env_lower in ("production", "prod"):
        return "production"
    if env_lower in ("staging", "stage"):
        return "staging"
    return "development"


def _default_backend_for_env(environment: Environment) -> DocumentStoreBackend:
    return "firestore" if environment in ("staging", "production") else "memory"


def _load_base_from_env() -> BaseSettings:
    """Carrega BaseSettings de variáveis de ambiente."""
    environment = _parse_environment(os.getenv("ENVIRONMENT", "development"))
    backend = os.getenv("DOCUMENT_STORE_BACKEND", _default_backend_for_env(environment))
    return BaseSettings(
        environment=environment,
        service_name=os.getenv("SERVICE_NAME", "ma-onboarding"),
        debug=os.getenv("DEBUG", "").lower() in ("true", "1", "yes"),
        gcp_project=os.getenv("GCP_PROJECT", os.getenv("GOOGLE_CLOUD_PROJECT", "")),
        document_store_backend=backend.lower(),  # type: ignore[arg-type]
    )


@lru_cache(maxsize=1)
def get_base_settings() -> BaseSettings:
    """Retorna instância cacheada de BaseSettings."""
    return _load_base_from_env()
