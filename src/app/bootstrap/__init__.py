"""Bootstrap da aplicação: inicialização e wiring.

Este módulo é o composition root: configura logging, inicializa
dependências e conecta implementações concretas aos protocolos.

Uso:
    from app.bootstrap import initialize_app, get_session_store

    # Na inicialização do serviço
    initialize_app()

    # Obter stores
    session_store = get_session_store()
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_azure_openai_settings,
    get_base_settings,
    get_firestore_settings,
)

# Nome do serviço para logs e métricas
SERVICE_NAME = "ma_onboarding"

# Nível de log padrão (pode ser sobrescrito por env)
DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Inicializa a aplicação.

    Deve ser chamada uma vez no início do serviço. Configura logging
    estruturado JSON com correlation_id.
    """
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=SERVICE_NAME,
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> None:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` mantém alerta sem bloquear execução local.
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())

    azure_errors = get_azure_openai_settings().validate()
    errors.extend(f"azure_openai: {error}" for error in azure_errors)

    if base.document_store_backend == "firestore":
        firestore_errors = get_firestore_settings().validate(base.gcp_project)
        errors.extend(f"firestore: {error}" for error in firestore_errors)

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")


# ──────────────────────────────────────────────────────────────────────────────
# Getters (lazy initialization com cache)
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def get_session_store():
    """Obtém store de sessões (singleton)."""
    from app.bootstrap.dependencies import create_session_store

    return create_session_store()


@lru_cache(maxsize=1)
def get_config_store():
    """Obtém store da configuração de discovery (singleton)."""
    from app.bootstrap.dependencies import create_config_store

    return create_config_store()


@lru_cache(maxsize=1)
def get_plan_snapshot_store():
    """Obtém store de snapshots de planos (singleton)."""
    from app.bootstrap.dependencies import create_plan_snapshot_store

    return create_plan_snapshot_store()


def get_config_provider():
    """Provider da configuração por requisição (defaults quando ausente)."""
    from app.services.config_provider import StoreConfigProvider

    return StoreConfigProvider(get_config_store())


def get_completion_client_factory():
    """Fábrica de clientes Azure OpenAI por destino selecionado."""
    from app.bootstrap.clients import create_completion_client

    return create_completion_client
