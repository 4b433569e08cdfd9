"""Implementações concretas de IO para IA.

ai/ não faz IO direto: o cliente Azure OpenAI vive aqui e é injetado no
gateway de completion via CompletionClientProtocol.
"""

from app.infra.ai.azure_openai_client import AzureOpenAICompletionClient

__all__ = [
    "AzureOpenAICompletionClient",
]
