"""Use cases de planejamento (plano de execução, histórico, SOW builder)."""

from .generate_plan import GeneratePlanUseCase, PlanGenerationResult
from .plan_history import PlanHistoryUseCase
from .sow_builder import BuildSowDataUseCase

__all__ = [
    "BuildSowDataUseCase",
    "GeneratePlanUseCase",
    "PlanGenerationResult",
    "PlanHistoryUseCase",
]
