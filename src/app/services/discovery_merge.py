"""Merge de fatos de discovery.

União rasa: chaves novas sobrescrevem, demais são preservadas. Sem merge
profundo e sem concatenação de listas. Entradas não são mutadas.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any


def merge_discovery_facts(
    existing: Mapping[str, Any] | None,
    new: Mapping[str, Any],
) -> dict[str, Any]:
    """Retorna novo mapeamento com `new` aplicado sobre `existing`.

    Raises:
        TypeError: Alguma chave não é string
    """
    _require_string_keys(new)
    if existing:
        _require_string_keys(existing)
    return {**(existing or {}), **new}


def _require_string_keys(facts: Mapping[Any, Any]) -> None:
    invalid = [key for key in facts if not isinstance(key, str)]
    if invalid:
        raise TypeError(f"Chaves de fatos devem ser strings: {invalid!r}")
