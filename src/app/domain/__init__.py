"""Modelos de domínio (sessão de onboarding e configuração de discovery)."""

from app.domain.discovery_config import (
    CategoryConfig,
    CompletionCriteria,
    DiscoveryConfig,
    GlobalSettings,
    OpenAIOverrides,
)
from app.domain.session import ChatMessage, PlanHistoryEntry, Session

__all__ = [
    "CategoryConfig",
    "ChatMessage",
    "CompletionCriteria",
    "DiscoveryConfig",
    "GlobalSettings",
    "OpenAIOverrides",
    "PlanHistoryEntry",
    "Session",
]
