"""Agregador de settings do serviço de onboarding.

Re-exporta todas as settings e funções de cada módulo.
Organização por domínio para isolamento de mudanças.
"""

from __future__ import annotations

# AI/LLM settings
from config.settings.ai import (
    DEFAULT_DEPLOYMENT,
    AzureOpenAISettings,
    get_azure_openai_settings,
)

# Base settings
from config.settings.base import (
    BaseSettings,
    DocumentStoreBackend,
    Environment,
    get_base_settings,
)

# Infrastructure settings
from config.settings.infra import (
    DISCOVERY_CONFIG_DOCUMENT_ID,
    FirestoreSettings,
    get_firestore_settings,
)

__all__ = [
    # Constants
    "DEFAULT_DEPLOYMENT",
    "DISCOVERY_CONFIG_DOCUMENT_ID",
    # AI
    "AzureOpenAISettings",
    # Base
    "BaseSettings",
    "DocumentStoreBackend",
    "Environment",
    # Infrastructure
    "FirestoreSettings",
    "get_azure_openai_settings",
    "get_base_settings",
    "get_firestore_settings",
]
