"""Agregador de settings de AI/LLM.

Re-exporta todas as settings de IA para uso externo.
"""

from __future__ import annotations

from config.settings.ai.azure_openai import (
    DEFAULT_DEPLOYMENT,
    AzureOpenAISettings,
    get_azure_openai_settings,
)

__all__ = [
    "DEFAULT_DEPLOYMENT",
    "AzureOpenAISettings",
    "get_azure_openai_settings",
]
