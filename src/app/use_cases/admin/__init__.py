"""Use cases de administração."""

from .discovery_config import (
    CONFIG_NOT_FOUND_MESSAGE,
    CONFIG_SAVED_MESSAGE,
    DiscoveryConfigAdminUseCase,
)

__all__ = [
    "CONFIG_NOT_FOUND_MESSAGE",
    "CONFIG_SAVED_MESSAGE",
    "DiscoveryConfigAdminUseCase",
]
