"""Plano de execução: plano padrão, normalização de fases e projeção em grafo.

A projeção gera nós/arestas no formato consumido pelo diagrama do front-end:
fases empilhadas verticalmente e encadeadas por arestas animadas, tarefas
dispostas à direita da sua fase.
"""

from __future__ import annotations

import copy
from typing import Any

PHASE_NAME_MAP: dict[int, str] = {
    0: "Phase 0: Pre-Migration & Discovery",
    1: "Phase 1: Server Migration (Deliverable 1)",
    2: "Phase 2: User Onboarding (Deliverable 2)",
    3: "Phase 3: Data Migration/Lockdown/Backup (Deliverable 3)",
    4: "Phase 4: Email/OneDrive/Website/DNS Cutover (Deliverable 4)",
    5: "Phase 5: Post-Migration & Stabilization",
}

PHASE_NODE_X = 100
PHASE_NODE_START_Y = 50
PHASE_NODE_STEP_Y = 100
TASK_NODE_START_X = 300
TASK_NODE_STEP_X = 150
TASK_NODE_OFFSET_Y = 50

PHASE_NODE_STYLE = {"background": "#4a90e2", "color": "white", "padding": 10}
TASK_NODE_STYLE = {"background": "#e8f4f8", "padding": 8}


def default_execution_plan() -> dict[str, Any]:
    """Plano padrão de três fases, usado quando o modelo não retorna JSON."""
    return {
        "phases": [
            {
                "id": "assessment",
                "name": "Assessment",
                "tasks": ["Initial assessment", "Resource allocation"],
            },
            {
                "id": "migration",
                "name": "Migration",
                "tasks": ["Data migration", "Application migration"],
            },
            {
                "id": "integration",
                "name": "Integration",
                "tasks": ["System integration", "User training"],
            },
        ],
        "timeline": {"totalDays": 90, "milestones": []},
        "risks": [],
        "connectwiseTickets": [],
    }


def normalize_phases(plan: dict[str, Any]) -> dict[str, Any]:
    """Garante id em todas as fases e nome padrão nas fases 0-5.

    Retorna cópia; o plano recebido não é alterado.
    """
    normalized = copy.deepcopy(plan)
    phases = normalized.get("phases")
    if not isinstance(phases, list):
        normalized["phases"] = []
        return normalized

    result: list[dict[str, Any]] = []
    for idx, phase in enumerate(phases):
        mapped = dict(phase) if isinstance(phase, dict) else {"name": str(phase)}
        if idx in PHASE_NAME_MAP:
            mapped["name"] = mapped.get("name") or PHASE_NAME_MAP[idx]
        mapped["id"] = mapped.get("id") or f"phase{idx}"
        result.append(mapped)
    normalized["phases"] = result
    return normalized


def task_label(task: Any) -> str:
    if isinstance(task, str):
        return task
    if isinstance(task, dict):
        return task.get("name") or "Task"
    return "Task"


def build_plan_graph(plan: dict[str, Any]) -> tuple[list[dict[str, Any]], list[dict[str, Any]]]:
    """Projeta o plano (já normalizado) em nós e arestas do diagrama."""
    nodes: list[dict[str, Any]] = []
    edges: list[dict[str, Any]] = []
    node_y = PHASE_NODE_START_Y
    phases = plan.get("phases") or []

    for phase_idx, phase in enumerate(phases):
        phase_id = phase["id"]
        phase_node_id = f"phase-{phase_id}"
        nodes.append(
            {
                "id": phase_node_id,
                "type": "default",
                "data": {"label": phase.get("name"), "type": "phase"},
                "position": {"x": PHASE_NODE_X, "y": node_y},
                "style": dict(PHASE_NODE_STYLE),
            }
        )
        if phase_idx > 0:
            edges.append(
                {
                    "id": f"edge-phase-{phase_idx}",
                    "source": f"phase-{phases[phase_idx - 1]['id']}",
                    "target": phase_node_id,
                    "animated": True,
                }
            )

        node_y += PHASE_NODE_STEP_Y

        tasks = phase.get("tasks")
        if not isinstance(tasks, list):
            continue
        for task_idx, task in enumerate(tasks):
            task_node_id = f"task-{phase_id}-{task_idx}"
            nodes.append(
                {
                    "id": task_node_id,
                    "type": "default",
                    "data": {"label": task_label(task), "type": "task"},
                    "position": {
                        "x": TASK_NODE_START_X + task_idx * TASK_NODE_STEP_X,
                        "y": node_y - TASK_NODE_OFFSET_Y,
                    },
                    "style": dict(TASK_NODE_STYLE),
                }
            )
            edges.append(
                {
                    "id": f"edge-task-{phase_id}-{task_idx}",
                    "source": phase_node_id,
                    "target": task_node_id,
                }
            )

    return nodes, edges
