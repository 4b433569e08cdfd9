"""Exceções de domínio e de infraestrutura do serviço de discovery."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Nenhum deployment/endpoint/chave utilizável configurado."""


class NotFoundError(LookupError):
    """Sessão, entrada de histórico ou snapshot inexistente."""


class TransportError(RuntimeError):
    """Falha ao falar com o serviço de completion ou com o document store."""


class MissingDeploymentError(TransportError):
    """O deployment solicitado não existe no recurso de completion."""


class FirestoreUnavailableError(TransportError):
    """Falha de indisponibilidade ao acessar Firestore."""


class ExtractionParseError(ValueError):
    """Saída do modelo não é um objeto JSON válido."""


class InvalidRequestError(ValueError):
    """Requisição sem campos obrigatórios ou com formato inválido."""
