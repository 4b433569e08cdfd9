"""Testes do mapeamento determinístico plano -> SOW builder."""

from __future__ import annotations

import pytest

from app.services.sow_mapping import map_plan_to_sow, resource_class_for_role

PLAN = {
    "phases": [
        {
            "id": "phase0",
            "name": "Phase 0: Pre-Migration & Discovery",
            "tasks": [
                {"name": "Kickoff", "hours": 2, "role": "PM"},
                {"description": "Design AD trust", "role": "Solutions Architect"},
            ],
        },
        {"id": "phase1", "name": "Phase 1: Server Migration", "tasks": ["Migrate file server"]},
    ],
    "timeline": {"estimatedDuration": "6 weeks"},
}


@pytest.mark.parametrize(
    ("role", "expected"),
    [
        ("Project Director", "DIO"),
        ("Solutions Architect", "DIO"),
        ("CXO", "CXO"),
        ("PM", "CXO"),
        ("Systems Engineer", "SE"),
        (None, "SE"),
    ],
)
def test_resource_class_for_role(role: str | None, expected: str) -> None:
    assert resource_class_for_role(role) == expected


def test_one_service_item_per_phase_with_sequential_sub_item_ids() -> None:
    sow = map_plan_to_sow(PLAN)

    items = sow["serviceItems"]
    assert [item["id"] for item in items] == [1, 2]
    assert [sub["id"] for item in items for sub in item["subItems"]] == [1, 2, 3]
    assert items[0]["phase"] == "Phase 0: Pre-Migration & Discovery"
    assert items[0]["editable"] is True


def test_sub_item_defaults() -> None:
    sub_items = map_plan_to_sow(PLAN)["serviceItems"][0]["subItems"]

    assert sub_items[0]["hours"] == 2
    assert sub_items[0]["resourceClass"] == "CXO"
    assert sub_items[1]["description"] == "Design AD trust"
    assert sub_items[1]["hours"] == 4
    assert sub_items[1]["resourceClass"] == "DIO"
    assert sub_items[1]["afterHours"] is False
    assert sub_items[1]["outageHours"] == 0


def test_string_tasks_are_se_work() -> None:
    sub_item = map_plan_to_sow(PLAN)["serviceItems"][1]["subItems"][0]

    assert sub_item["description"] == "Migrate file server"
    assert sub_item["resourceClass"] == "SE"


def test_cover_and_scope() -> None:
    sow = map_plan_to_sow(PLAN, {"projectName": "Acme Merger", "customerId": "C-42"})

    assert sow["coverData"]["projectName"] == "Acme Merger"
    assert sow["coverData"]["customerId"] == "C-42"
    assert sow["scopeData"]["deliverables"] == [
        "Phase 0: Pre-Migration & Discovery",
        "Phase 1: Server Migration",
    ]
    assert sow["scopeData"]["timeline"] == "6 weeks"


def test_missing_extras_and_timeline_are_blank() -> None:
    sow = map_plan_to_sow({"phases": []})

    assert sow["coverData"]["projectName"] == ""
    assert sow["scopeData"]["timeline"] == ""
    assert sow["serviceItems"] == []
