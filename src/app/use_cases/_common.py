"""Helpers compartilhados pelos casos de uso."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ai.core.completion_gateway import CompletionGateway
from app.services.deployment_selection import ModelTarget, select_model_target
from utils.errors import InvalidRequestError, NotFoundError

if TYPE_CHECKING:
    from app.domain.discovery_config import DiscoveryConfig
    from app.domain.session import Session
    from app.protocols import CompletionClientFactoryProtocol, SessionStoreProtocol


def require_fields(**fields: object) -> None:
    """Levanta InvalidRequestError listando campos vazios/ausentes."""
    missing = [name for name, value in fields.items() if not value]
    if missing:
        verb = "is" if len(missing) == 1 else "are"
        raise InvalidRequestError(f"{' and '.join(missing)} {verb} required")


async def load_session(store: SessionStoreProtocol, session_id: str) -> Session:
    """Carrega sessão ou levanta NotFoundError."""
    session = await store.get(session_id)
    if session is None:
        raise NotFoundError("Session not found")
    return session


def gateway_for(
    config: DiscoveryConfig,
    client_factory: CompletionClientFactoryProtocol,
) -> tuple[CompletionGateway, ModelTarget]:
    """Resolve destino de completion e cria o gateway correspondente."""
    target = select_model_target(config)
    return CompletionGateway(client_factory(target)), target
