"""Módulo AI do serviço de onboarding M&A.

Camada sem IO direto:
1. core - contrato de completion e gateway com fallback de deployment
2. prompts - prompts de discovery e planejamento (assets YAML)
3. services - extrator de fatos de discovery
4. utils - parsing de JSON das respostas do modelo
"""

# Config
from ai.config import CallPoint, CompletionOptions, get_call_point_options

# Core
from ai.core import CompletionClientProtocol, CompletionGateway, PromptMessage

# Services
from ai.services import DiscoveryExtractor

# Utils
from ai.utils import extract_json_from_response, parse_json_object

__all__ = [
    "CallPoint",
    "CompletionClientProtocol",
    "CompletionGateway",
    "CompletionOptions",
    "DiscoveryExtractor",
    "PromptMessage",
    "extract_json_from_response",
    "get_call_point_options",
    "parse_json_object",
]
