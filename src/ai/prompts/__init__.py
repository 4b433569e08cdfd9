"""Prompts do módulo AI.

Arquivos:
- discovery_prompts.py: chat por categoria, extrator de fatos e ingestão de arquivos
- planning_prompts.py: plano de execução e SOW builder

Textos versionados em yaml/ (carregados por ai/config/prompt_assets_loader.py).
"""

from ai.prompts.discovery_prompts import (
    EXTRACTION_CONTEXT_WINDOW,
    FILE_CONTENT_MAX_CHARS,
    build_chat_messages,
    build_extraction_messages,
    build_file_ingest_messages,
    default_category_prompt,
    resolve_chat_system_prompt,
    resolve_extraction_instruction,
)
from ai.prompts.planning_prompts import (
    PLAN_GENERATION_LABEL,
    SOW_TRANSFORM_LABEL,
    build_plan_messages,
    build_sow_messages,
)

__all__ = [
    "EXTRACTION_CONTEXT_WINDOW",
    "FILE_CONTENT_MAX_CHARS",
    "PLAN_GENERATION_LABEL",
    "SOW_TRANSFORM_LABEL",
    "build_chat_messages",
    "build_extraction_messages",
    "build_file_ingest_messages",
    "build_plan_messages",
    "build_sow_messages",
    "default_category_prompt",
    "resolve_chat_system_prompt",
    "resolve_extraction_instruction",
]
