"""Prompts de discovery (chat por categoria, extração de fatos, ingestão de arquivos).

Textos padrão versionados em `yaml/discovery_categories.yaml` e `yaml/file_ingest.yaml`.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ai.config.prompt_assets_loader import (
    load_prompt_template,
    load_prompt_yaml,
    load_system_prompt,
)

if TYPE_CHECKING:
    from ai.core.completion_client import PromptMessage

_CATEGORIES_YAML = "discovery_categories.yaml"
_FILE_INGEST_YAML = "file_ingest.yaml"

FILE_CONTENT_MAX_CHARS = 15000
EXTRACTION_CONTEXT_WINDOW = 3


def _category_entry(category: str) -> dict[str, Any]:
    categories = load_prompt_yaml(_CATEGORIES_YAML).get("categories") or {}
    entry = categories.get(category)
    return entry if isinstance(entry, dict) else {}


def _asset_text(field_name: str) -> str:
    return str(load_prompt_yaml(_CATEGORIES_YAML)[field_name]).strip()


def default_category_prompt(category: str) -> str | None:
    """Prompt padrão do assistente para a categoria, se houver."""
    prompt = _category_entry(category).get("assistant_prompt")
    return prompt.strip() if isinstance(prompt, str) and prompt.strip() else None


def resolve_chat_system_prompt(category: str, configured_prompt: str | None) -> str:
    """Resolve o system prompt: configurado, padrão da categoria ou genérico."""
    if configured_prompt:
        return configured_prompt
    return default_category_prompt(category) or _asset_text("generic_assistant_prompt")


def resolve_extraction_instruction(category: str, configured_prompt: str | None) -> str:
    """Instrução do extrator: configurada, foco padrão da categoria ou genérica."""
    if configured_prompt:
        return configured_prompt
    focus = _category_entry(category).get("extraction_focus")
    if isinstance(focus, str) and focus.strip():
        return focus.strip()
    return _asset_text("generic_extraction_focus").format(category=category)


def build_chat_messages(
    system_prompt: str,
    context: Sequence[dict[str, Any]],
    message: str,
) -> list[PromptMessage]:
    """Monta mensagens: system, contexto com role e mensagem do usuário."""
    messages: list[PromptMessage] = [{"role": "system", "content": system_prompt}]
    for item in context:
        messages.append({"role": item["role"], "content": item["content"]})
    messages.append({"role": "user", "content": message})
    return messages


def build_extraction_messages(
    category: str,
    latest_message: str,
    recent_context: Sequence[dict[str, Any]],
    extraction_prompt: str | None = None,
) -> list[PromptMessage]:
    """Monta mensagens do extrator.

    O conteúdo do usuário é a mensagem mais recente seguida do conteúdo das
    últimas entradas do contexto, unidos por um espaço.
    """
    instruction = resolve_extraction_instruction(category, extraction_prompt)
    system_prompt = f"{instruction}\n\n{_asset_text('extraction_rules')}"

    tail = list(recent_context)[-EXTRACTION_CONTEXT_WINDOW:]
    parts = [latest_message, *(str(item.get("content", "")) for item in tail)]
    return [
        {"role": "system", "content": system_prompt},
        {"role": "user", "content": " ".join(parts)},
    ]


def build_file_ingest_messages(file_name: str | None, content: str) -> list[PromptMessage]:
    """Monta mensagens da ingestão de arquivo (conteúdo truncado)."""
    truncated = content[:FILE_CONTENT_MAX_CHARS]
    user_prompt = load_prompt_template(_FILE_INGEST_YAML).format(
        file_name=file_name or "uploaded file",
        content=truncated,
    )
    return [
        {"role": "system", "content": load_system_prompt(_FILE_INGEST_YAML)},
        {"role": "user", "content": user_prompt},
    ]
