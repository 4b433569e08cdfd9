"""Configuração de IA: opções por ponto de chamada e assets de prompt."""

from ai.config.prompt_assets_loader import (
    PromptAssetError,
    clear_prompt_assets_cache,
    load_prompt_template,
    load_prompt_yaml,
    load_system_prompt,
)
from ai.config.settings import (
    DEFAULT_CALL_POINT_OPTIONS,
    CallPoint,
    CallPointOptions,
    CompletionOptions,
    get_call_point_options,
)

__all__ = [
    "DEFAULT_CALL_POINT_OPTIONS",
    "CallPoint",
    "CallPointOptions",
    "CompletionOptions",
    "PromptAssetError",
    "clear_prompt_assets_cache",
    "get_call_point_options",
    "load_prompt_template",
    "load_prompt_yaml",
    "load_system_prompt",
]
