"""Avaliação de conclusão de categoria.

Uma categoria só é concluída quando o usuário sinaliza explicitamente
(palavras-chave) e, se houver critérios configurados, quando os fatos
acumulados os satisfazem.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from app.domain.discovery_config import CompletionCriteria

COMPLETION_SIGNAL_KEYWORDS = ("done", "complete", "finished", "next")
DEFAULT_MIN_FACTS = 3


def has_completion_signal(utterance: str) -> bool:
    """Indica se a mensagem contém sinal de conclusão (substring, sem caixa)."""
    lowered = utterance.lower()
    return any(keyword in lowered for keyword in COMPLETION_SIGNAL_KEYWORDS)


def evaluate_category_completion(
    category: str,
    accumulated: Mapping[str, Mapping[str, Any]],
    criteria: CompletionCriteria | None,
    utterance: str,
) -> bool:
    """Decide se a categoria está concluída neste turno.

    Args:
        category: Categoria ativa
        accumulated: Fatos acumulados por categoria (após o merge do turno)
        criteria: Critérios configurados (None = só palavra-chave)
        utterance: Mensagem bruta do usuário
    """
    if not has_completion_signal(utterance):
        return False
    if criteria is None:
        return True

    facts = accumulated.get(category) or {}
    min_facts = DEFAULT_MIN_FACTS if criteria.min_facts is None else criteria.min_facts
    if len(facts) < min_facts:
        return False
    return all(facts.get(field) for field in criteria.required_fields)
