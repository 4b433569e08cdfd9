"""Mapeamento determinístico do plano de execução para o schema do SOW builder.

Usado quando a transformação via modelo falha.
"""

from __future__ import annotations

from typing import Any

from app.services.plan_graph import task_label

DEFAULT_TASK_HOURS = 4
SOW_DESCRIPTION = "Generated from M&A onboarding execution plan."
SOW_SCOPE_DESCRIPTION = "High-level scope based on discovered systems and migration plan."


def resource_class_for_role(role: str | None) -> str:
    """DIO para director/architect, CXO para cxo/pm, SE no restante."""
    lowered = (role or "SE").lower()
    if "director" in lowered or "architect" in lowered:
        return "DIO"
    if "cxo" in lowered or "pm" in lowered:
        return "CXO"
    return "SE"


def _task_description(task: Any) -> str:
    if isinstance(task, dict):
        return task.get("name") or task.get("description") or "Task"
    return task_label(task)


def _task_hours(task: Any) -> float:
    if isinstance(task, dict):
        hours = task.get("hours")
        if isinstance(hours, int | float) and not isinstance(hours, bool):
            return hours
    return DEFAULT_TASK_HOURS


def map_plan_to_sow(
    execution_plan: dict[str, Any],
    session_extras: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Gera dados do SOW builder: um service item por fase, um sub item por tarefa.

    Args:
        execution_plan: Plano salvo na sessão
        session_extras: Campos extras da sessão (projectName, customerId)
    """
    extras = session_extras or {}
    phases = execution_plan.get("phases") or []
    timeline = execution_plan.get("timeline")
    timeline_text = timeline.get("estimatedDuration") if isinstance(timeline, dict) else None
    next_id = 1
    service_items: list[dict[str, Any]] = []

    for idx, phase in enumerate(phases):
        sub_items: list[dict[str, Any]] = []
        for task in phase.get("tasks") or []:
            role = task.get("role") if isinstance(task, dict) else None
            sub_items.append(
                {
                    "id": next_id,
                    "description": _task_description(task),
                    "resourceClass": resource_class_for_role(role),
                    "hours": _task_hours(task),
                    "afterHours": False,
                    "maintenanceRequired": False,
                    "outageHours": 0,
                }
            )
            next_id += 1
        service_items.append(
            {
                "id": idx + 1,
                "phase": phase.get("name") or phase.get("id") or f"Phase {idx + 1}",
                "editable": True,
                "subItems": sub_items,
            }
        )

    return {
        "coverData": {
            "projectName": extras.get("projectName") or "",
            "customerId": extras.get("customerId") or "",
            "description": SOW_DESCRIPTION,
        },
        "scopeData": {
            "scopeDescription": SOW_SCOPE_DESCRIPTION,
            "deliverables": [phase.get("name") for phase in phases if phase.get("name")],
            "timeline": timeline_text or "",
        },
        "serviceItems": service_items,
    }
