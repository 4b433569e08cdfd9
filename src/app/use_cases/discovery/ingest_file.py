"""Use case de ingestão de arquivo.

Mapeia o texto de um documento (planilha, inventário, export) para várias
categorias de uma vez e faz merge de cada uma na sessão.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from ai.config.settings import CallPointOptions, get_call_point_options
from ai.prompts.discovery_prompts import FILE_CONTENT_MAX_CHARS, build_file_ingest_messages
from ai.utils._json_extractor import parse_json_object
from app.services.discovery_merge import merge_discovery_facts
from app.use_cases._common import gateway_for, load_session, require_fields
from utils.errors import ExtractionParseError

if TYPE_CHECKING:
    from app.protocols import (
        CompletionClientFactoryProtocol,
        ConfigProviderProtocol,
        SessionStoreProtocol,
    )

logger = logging.getLogger(__name__)

FILE_INGEST_LABEL = "file-ingest mapping"


@dataclass(frozen=True, slots=True)
class FileIngestResult:
    session_id: str
    discovery_data: dict[str, dict[str, Any]]
    updated_categories: list[str] = field(default_factory=list)

    def to_response(self) -> dict[str, Any]:
        return {
            "sessionId": self.session_id,
            "discoveryData": self.discovery_data,
            "updatedCategories": self.updated_categories,
        }


class IngestFileUseCase:
    """Extrai fatos de um documento e faz merge por categoria."""

    def __init__(
        self,
        *,
        session_store: SessionStoreProtocol,
        config_provider: ConfigProviderProtocol,
        client_factory: CompletionClientFactoryProtocol,
        options: CallPointOptions | None = None,
    ) -> None:
        self._session_store = session_store
        self._config_provider = config_provider
        self._client_factory = client_factory
        self._options = options or get_call_point_options()

    async def execute(
        self,
        *,
        session_id: str | None,
        file_name: str | None,
        content: str | None,
    ) -> FileIngestResult:
        """Executa ingestão.

        Raises:
            ExtractionParseError: Saída do modelo não é um objeto JSON
        """
        require_fields(sessionId=session_id, content=content)
        session = await load_session(self._session_store, session_id)

        config = await self._config_provider.load()
        gateway, target = gateway_for(config, self._client_factory)
        raw = await gateway.complete(
            target.deployment,
            target.fallback_deployment,
            build_file_ingest_messages(file_name, content),
            self._options.file_ingest,
            label=FILE_INGEST_LABEL,
        )

        try:
            extracted = parse_json_object(raw)
        except ExtractionParseError:
            logger.error(
                "file_ingest_parse_failed",
                extra={"session_id": session_id, "content_chars": len(content)},
            )
            raise

        updated: list[str] = []
        for category, incoming in extracted.items():
            if not isinstance(incoming, dict):
                continue
            session.discovery_data[category] = merge_discovery_facts(
                session.discovery_data.get(category), incoming
            )
            updated.append(category)

        await self._session_store.replace(session)

        logger.info(
            "file_ingested",
            extra={
                "session_id": session_id,
                "updated_categories": updated,
                "truncated": len(content) > FILE_CONTENT_MAX_CHARS,
            },
        )
        return FileIngestResult(
            session_id=session_id,
            discovery_data=session.to_document()["discoveryData"],
            updated_categories=updated,
        )
