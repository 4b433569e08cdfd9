"""Testes do plano padrão, normalização de fases e projeção em grafo."""

from __future__ import annotations

from app.services.plan_graph import (
    PHASE_NAME_MAP,
    build_plan_graph,
    default_execution_plan,
    normalize_phases,
)


def test_default_plan_has_three_phases_of_two_tasks() -> None:
    plan = default_execution_plan()

    assert [phase["id"] for phase in plan["phases"]] == ["assessment", "migration", "integration"]
    assert all(len(phase["tasks"]) == 2 for phase in plan["phases"])
    assert plan["timeline"]["totalDays"] == 90


def test_default_plan_graph_shape() -> None:
    nodes, edges = build_plan_graph(default_execution_plan())

    assert len(nodes) == 9
    assert len(edges) == 8
    phase_edges = [edge for edge in edges if edge["id"].startswith("edge-phase-")]
    assert [(e["source"], e["target"]) for e in phase_edges] == [
        ("phase-assessment", "phase-migration"),
        ("phase-migration", "phase-integration"),
    ]
    assert all(edge["animated"] is True for edge in phase_edges)


def test_node_layout() -> None:
    nodes, _ = build_plan_graph(default_execution_plan())
    by_id = {node["id"]: node for node in nodes}

    assert by_id["phase-assessment"]["position"] == {"x": 100, "y": 50}
    assert by_id["phase-migration"]["position"] == {"x": 100, "y": 150}
    assert by_id["task-assessment-0"]["position"] == {"x": 300, "y": 100}
    assert by_id["task-assessment-1"]["position"] == {"x": 450, "y": 100}
    assert by_id["task-assessment-1"]["data"] == {"label": "Resource allocation", "type": "task"}
    assert by_id["phase-assessment"]["style"]["background"] == "#4a90e2"


def test_normalize_fills_ids_and_names_without_mutating() -> None:
    plan = {"phases": [{"tasks": []}, {"id": "custom", "name": "Kickoff"}]}

    normalized = normalize_phases(plan)

    assert normalized["phases"][0] == {"tasks": [], "name": PHASE_NAME_MAP[0], "id": "phase0"}
    assert normalized["phases"][1] == {"id": "custom", "name": "Kickoff"}
    assert plan == {"phases": [{"tasks": []}, {"id": "custom", "name": "Kickoff"}]}


def test_normalize_beyond_mapped_phases_only_fills_id() -> None:
    plan = {"phases": [{"name": f"P{i}"} for i in range(6)] + [{}]}

    normalized = normalize_phases(plan)

    assert normalized["phases"][6] == {"id": "phase6"}


def test_task_labels_from_objects() -> None:
    plan = normalize_phases(
        {"phases": [{"id": "p", "name": "P", "tasks": [{"name": "Image laptops"}, {"hours": 2}, 7]}]}
    )

    nodes, edges = build_plan_graph(plan)

    labels = [node["data"]["label"] for node in nodes if node["data"]["type"] == "task"]
    assert labels == ["Image laptops", "Task", "Task"]
    assert edges[0] == {"id": "edge-task-p-0", "source": "phase-p", "target": "task-p-0"}


def test_phase_without_task_list_has_no_task_nodes() -> None:
    nodes, edges = build_plan_graph({"phases": [{"id": "a", "name": "A", "tasks": "n/a"}]})

    assert [node["id"] for node in nodes] == ["phase-a"]
    assert edges == []
