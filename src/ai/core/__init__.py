"""Core do módulo AI.

Exporta o contrato de completion e o gateway com fallback de deployment.
A implementação Azure OpenAI está em app/infra/ai/ (IO).
"""

from ai.core.completion_client import CompletionClientProtocol, PromptMessage
from ai.core.completion_gateway import CompletionGateway, is_missing_deployment_error

__all__ = [
    "CompletionClientProtocol",
    "CompletionGateway",
    "PromptMessage",
    "is_missing_deployment_error",
]
