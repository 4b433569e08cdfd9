"""Serviços de aplicação.

Unidades reutilizáveis de orquestração (sem IO direto).
Implementações concretas de IO ficam em app/infra/.
"""

from app.services.completion_criteria import (
    COMPLETION_SIGNAL_KEYWORDS,
    DEFAULT_MIN_FACTS,
    evaluate_category_completion,
    has_completion_signal,
)
from app.services.config_provider import StoreConfigProvider
from app.services.deployment_selection import ModelTarget, select_model_target
from app.services.discovery_merge import merge_discovery_facts
from app.services.plan_graph import (
    PHASE_NAME_MAP,
    build_plan_graph,
    default_execution_plan,
    normalize_phases,
)
from app.services.sow_mapping import map_plan_to_sow, resource_class_for_role

__all__ = [
    "COMPLETION_SIGNAL_KEYWORDS",
    "DEFAULT_MIN_FACTS",
    "PHASE_NAME_MAP",
    "ModelTarget",
    "StoreConfigProvider",
    "build_plan_graph",
    "default_execution_plan",
    "evaluate_category_completion",
    "has_completion_signal",
    "map_plan_to_sow",
    "merge_discovery_facts",
    "normalize_phases",
    "resource_class_for_role",
    "select_model_target",
]
