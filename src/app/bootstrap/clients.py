"""Factories de clientes externos: Firestore e Azure OpenAI."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

from app.infra.ai import AzureOpenAICompletionClient
from config.settings import get_base_settings, get_firestore_settings

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

    from app.services.deployment_selection import ModelTarget

logger = logging.getLogger(__name__)


# ──────────────────────────────────────────────────────────────────────────────
# Firestore Client Factory
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=1)
def create_firestore_client() -> FirestoreClient:
    """Cria cliente Firestore (singleton).

    Returns:
        Cliente Firestore
    """
    from google.cloud import firestore

    project_id = get_firestore_settings().project_id or get_base_settings().gcp_project or None
    client = firestore.Client(project=project_id)
    logger.info("firestore_client_created", extra={"project": project_id})
    return client


# ──────────────────────────────────────────────────────────────────────────────
# Azure OpenAI Client Factory
# ──────────────────────────────────────────────────────────────────────────────


@lru_cache(maxsize=8)
def _completion_client_for(endpoint: str, api_key: str) -> AzureOpenAICompletionClient:
    client = AzureOpenAICompletionClient(endpoint=endpoint, api_key=api_key)
    logger.info("azure_openai_client_created", extra={"endpoint": endpoint})
    return client


def create_completion_client(target: ModelTarget) -> AzureOpenAICompletionClient:
    """Retorna cliente para endpoint/chave do destino (reutiliza pool HTTP).

    Raises:
        ConfigurationError: Endpoint ou chave ausente
    """
    return _completion_client_for(target.endpoint, target.api_key)
