"""Agregador de settings base.

Re-exporta todas as settings base para uso externo.
"""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    DocumentStoreBackend,
    Environment,
    get_base_settings,
)

__all__ = [
    "BaseSettings",
    "DocumentStoreBackend",
    "Environment",
    "get_base_settings",
]
