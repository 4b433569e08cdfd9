"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    ConfigurationError,
    ExtractionParseError,
    FirestoreUnavailableError,
    InvalidRequestError,
    MissingDeploymentError,
    NotFoundError,
    TransportError,
)

__all__ = [
    "ConfigurationError",
    "ExtractionParseError",
    "FirestoreUnavailableError",
    "InvalidRequestError",
    "MissingDeploymentError",
    "NotFoundError",
    "TransportError",
]
