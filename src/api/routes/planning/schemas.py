"""Modelos de request dos endpoints de planejamento."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class DecisionTree(BaseModel):
    """Árvore de decisão do front-end (só as contagens entram no prompt)."""

    model_config = ConfigDict(extra="allow")

    nodes: list[Any] = Field(default_factory=list)
    edges: list[Any] = Field(default_factory=list)


class PlanGenerateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(None, alias="sessionId")
    discovery_data: dict[str, Any] | None = Field(None, alias="discoveryData")
    decision_tree: DecisionTree = Field(default_factory=DecisionTree, alias="decisionTree")


class PlanHistorySaveRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(None, alias="sessionId")
    name: str | None = None
    nodes: list[Any] | None = None
    edges: list[Any] | None = None


class PlanHistoryRefRequest(BaseModel):
    """Referência a uma entrada do histórico (load/delete)."""

    model_config = ConfigDict(populate_by_name=True)

    session_id: str | None = Field(None, alias="sessionId")
    plan_id: str | None = Field(None, alias="planId")
