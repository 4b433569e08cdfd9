"""Parsing de JSON em respostas de LLM.

Dois modos:
- parse_json_object: estrito, o texto inteiro deve ser um objeto JSON
- extract_json_from_response: tolerante a markdown e texto ao redor
"""

from __future__ import annotations

import json
from typing import Any

from utils.errors import ExtractionParseError


def parse_json_object(response: str) -> dict[str, Any]:
    """Faz parse estrito de um objeto JSON.

    Raises:
        ExtractionParseError: Texto não é JSON ou não é um objeto
    """
    try:
        data = json.loads(response)
    except (TypeError, json.JSONDecodeError) as exc:
        raise ExtractionParseError(f"Resposta não é JSON válido: {exc}") from exc
    if not isinstance(data, dict):
        raise ExtractionParseError(
            f"Resposta JSON deve ser um objeto, recebido {type(data).__name__}"
        )
    return data


def extract_json_from_response(response: str) -> dict[str, Any] | None:
    """Extrai objeto JSON de resposta de LLM.

    Trata casos comuns:
    - Resposta envolvida em markdown code blocks
    - Whitespace extra
    - JSON embutido em texto (do primeiro "{" ao último "}")

    Returns:
        Dict extraído do JSON ou None se não encontrado
    """
    if not response or not isinstance(response, str):
        return None

    text = response.strip()

    # Remover markdown code blocks se presentes
    if text.startswith("```json"):
        text = text[7:]
    elif text.startswith("```"):
        text = text[3:]
    if text.endswith("```"):
        text = text[:-3]
    text = text.strip()

    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end <= start:
        return None

    for candidate in (text, text[start : end + 1]):
        try:
            data = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(data, dict):
            return data
    return None
