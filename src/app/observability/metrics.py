"""Métricas registradas como logs estruturados.

Agregadas depois no backend de logs (ex.: BigQuery via log sink).

Uso:
    start = time.perf_counter()
    ...
    record_latency("chat_turn", "process", (time.perf_counter() - start) * 1000)
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def record_latency(
    component: str,
    operation: str,
    latency_ms: float,
    correlation_id: str | None = None,
) -> None:
    """Registra latência de operação.

    Args:
        component: Nome do componente (ex: "chat_turn", "plan_generation")
        operation: Nome da operação (ex: "process", "generate")
        latency_ms: Latência em milissegundos
        correlation_id: ID de correlação (o filter usa o do contexto se None)
    """
    logger.info(
        "metric_latency",
        extra={
            "metric_type": "latency",
            "component": component,
            "operation": operation,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": correlation_id,
        },
    )


def record_token_usage(
    deployment: str,
    label: str,
    prompt_tokens: int,
    completion_tokens: int,
    total_tokens: int,
) -> None:
    """Registra uso de tokens (custo) por deployment e ponto de chamada."""
    logger.info(
        "metric_token_usage",
        extra={
            "metric_type": "token_usage",
            "deployment": deployment,
            "label": label,
            "prompt_tokens": prompt_tokens,
            "completion_tokens": completion_tokens,
            "total_tokens": total_tokens,
        },
    )
