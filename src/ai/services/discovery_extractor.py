"""Extrator de fatos de discovery.

Transforma a mensagem mais recente do usuário (mais o contexto recente) em um
mapeamento de fatos da categoria ativa. Nunca levanta exceção: falhas de parse
ou de completion resultam em None e o turno segue sem novos fatos.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ai.config.settings import CallPoint, CompletionOptions, get_call_point_options
from ai.prompts.discovery_prompts import build_extraction_messages
from ai.utils._json_extractor import parse_json_object
from config.logging import log_fallback
from utils.errors import ConfigurationError, ExtractionParseError, TransportError

if TYPE_CHECKING:
    from ai.core.completion_gateway import CompletionGateway

logger = logging.getLogger(__name__)

EXTRACTION_LABEL = "discovery extraction"


class DiscoveryExtractor:
    """Extrai fatos estruturados de uma mensagem via gateway de completion."""

    __slots__ = ("_gateway", "_options")

    def __init__(
        self,
        gateway: CompletionGateway,
        options: CompletionOptions | None = None,
    ) -> None:
        self._gateway = gateway
        self._options = options or get_call_point_options().get_for(
            CallPoint.DISCOVERY_EXTRACTION
        )

    async def extract(
        self,
        category: str,
        latest_message: str,
        recent_context: Sequence[dict[str, Any]],
        *,
        primary_deployment: str | None,
        fallback_deployment: str | None,
        extraction_prompt: str | None = None,
    ) -> dict[str, Any] | None:
        """Retorna fatos novos da categoria ou None (vazio ou falha)."""
        started = time.perf_counter()
        messages = build_extraction_messages(
            category, latest_message, recent_context, extraction_prompt
        )
        try:
            raw = await self._gateway.complete(
                primary_deployment,
                fallback_deployment,
                messages,
                self._options,
                label=EXTRACTION_LABEL,
            )
            facts = parse_json_object(raw)
        except ExtractionParseError as exc:
            logger.warning(
                "discovery_extraction_parse_failed",
                extra={"component": "discovery_extractor", "category": category, "error": str(exc)},
            )
            log_fallback(logger, "discovery_extractor", "parse_error", _elapsed_ms(started))
            return None
        except (TransportError, ConfigurationError) as exc:
            logger.warning(
                "discovery_extraction_completion_failed",
                extra={
                    "component": "discovery_extractor",
                    "category": category,
                    "error_type": type(exc).__name__,
                },
            )
            log_fallback(logger, "discovery_extractor", "completion_error", _elapsed_ms(started))
            return None

        if not facts:
            return None

        logger.info(
            "discovery_facts_extracted",
            extra={
                "component": "discovery_extractor",
                "category": category,
                "fact_keys": sorted(str(key) for key in facts),
                "elapsed_ms": _elapsed_ms(started),
            },
        )
        return facts


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 2)
