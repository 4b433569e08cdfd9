"""Seleção de endpoint, chave e deployments para uma requisição.

Resolvida a cada chamada a partir da configuração de discovery e do ambiente;
nada é persistido.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from config.settings.ai import get_azure_openai_settings

if TYPE_CHECKING:
    from app.domain.discovery_config import DiscoveryConfig
    from config.settings.ai import AzureOpenAISettings


@dataclass(frozen=True, slots=True)
class ModelTarget:
    """Destino de completion resolvido.

    Attributes:
        endpoint: URL do recurso Azure OpenAI (vazio se não configurado)
        api_key: Chave do slot escolhido (vazio se não configurada)
        deployment: Deployment primário (aiModel ou padrão do ambiente)
        fallback_deployment: Deployment padrão do ambiente
    """

    endpoint: str
    api_key: str
    deployment: str
    fallback_deployment: str


def select_model_target(
    config: DiscoveryConfig,
    settings: AzureOpenAISettings | None = None,
) -> ModelTarget:
    """Resolve o destino de completion.

    - deployment: globalSettings.aiModel, senão AZURE_OPENAI_DEPLOYMENT
    - chave secundária só quando keySlot == "secondary" e ela existe
    - endpoint: configurado, senão AZURE_OPENAI_ENDPOINT
    """
    cfg = settings or get_azure_openai_settings()
    global_settings = config.global_settings

    api_key = cfg.key_primary
    if global_settings.effective_key_slot == "secondary" and cfg.key_secondary:
        api_key = cfg.key_secondary

    return ModelTarget(
        endpoint=global_settings.effective_endpoint or cfg.endpoint,
        api_key=api_key,
        deployment=global_settings.ai_model or cfg.default_deployment,
        fallback_deployment=cfg.default_deployment,
    )
