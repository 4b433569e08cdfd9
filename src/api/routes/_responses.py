"""Execução de handlers HTTP: correlation_id e mapeamento de erros.

Erros da taxonomia viram respostas `{error, details}`:
- InvalidRequestError -> 400
- NotFoundError -> 404
- ConfigurationError, TransportError, ExtractionParseError e inesperados -> 500
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from typing import Any

from fastapi import Request, status
from fastapi.responses import JSONResponse

from app.observability import get_correlation_id, reset_correlation_id, set_correlation_id
from utils.errors import (
    ConfigurationError,
    ExtractionParseError,
    InvalidRequestError,
    NotFoundError,
    TransportError,
)

logger = logging.getLogger(__name__)

CORRELATION_HEADER = "x-correlation-id"
PARSE_FAILURE_MESSAGE = "Failed to parse AI output"


def error_response(exc: Exception, operation: str, failure_message: str) -> JSONResponse:
    """Converte exceção em resposta HTTP com corpo `{error, details}`."""
    if isinstance(exc, InvalidRequestError):
        status_code, body = status.HTTP_400_BAD_REQUEST, {"error": str(exc)}
    elif isinstance(exc, NotFoundError):
        status_code, body = status.HTTP_404_NOT_FOUND, {"error": str(exc)}
    elif isinstance(exc, ExtractionParseError):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        body = {"error": PARSE_FAILURE_MESSAGE, "details": str(exc)}
    elif isinstance(exc, (ConfigurationError, TransportError)):
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        body = {"error": failure_message, "details": str(exc)}
    else:
        logger.exception("route_unexpected_error", extra={"operation": operation})
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        body = {"error": failure_message, "details": str(exc)}

    log = logger.warning if status_code < 500 else logger.error
    log(
        "route_failed",
        extra={
            "operation": operation,
            "status_code": status_code,
            "error_type": type(exc).__name__,
        },
    )
    return JSONResponse(content=body, status_code=status_code)


async def run_route(
    request: Request,
    operation: str,
    failure_message: str,
    call: Callable[[], Awaitable[dict[str, Any]]],
) -> JSONResponse:
    """Executa o handler com correlation_id do header e erros mapeados."""
    token = set_correlation_id(request.headers.get(CORRELATION_HEADER))
    correlation_id = get_correlation_id()
    try:
        payload = await call()
        return JSONResponse(content=payload, headers={CORRELATION_HEADER: correlation_id})
    except Exception as exc:
        response = error_response(exc, operation, failure_message)
        response.headers[CORRELATION_HEADER] = correlation_id
        return response
    finally:
        reset_correlation_id(token)
