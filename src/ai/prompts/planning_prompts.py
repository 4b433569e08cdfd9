"""Prompts de planejamento (plano de execução e SOW builder)."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any

from ai.config.prompt_assets_loader import (
    load_prompt_template,
    load_prompt_yaml,
    load_system_prompt,
)

if TYPE_CHECKING:
    from ai.core.completion_client import PromptMessage

_PLAN_YAML = "plan_generation.yaml"
_SOW_YAML = "sow_builder.yaml"

PLAN_GENERATION_LABEL = "plan-generate execution plan"
SOW_TRANSFORM_LABEL = "sow-builder transform"


def _asset_field(relative_path: str, field_name: str) -> str:
    return str(load_prompt_yaml(relative_path)[field_name]).strip()


def build_plan_messages(
    discovery_data: dict[str, Any],
    node_count: int,
    edge_count: int,
) -> list[PromptMessage]:
    """Monta mensagens para geração do plano de execução."""
    user_prompt = load_prompt_template(_PLAN_YAML).format(
        calibration=_asset_field(_PLAN_YAML, "calibration"),
        discovery_json=json.dumps(discovery_data, indent=2, ensure_ascii=False),
        node_count=node_count,
        edge_count=edge_count,
        output_schema=_asset_field(_PLAN_YAML, "output_schema"),
    )
    return [
        {"role": "system", "content": load_system_prompt(_PLAN_YAML)},
        {"role": "user", "content": user_prompt},
    ]


def build_sow_messages(
    discovery_data: dict[str, Any],
    execution_plan: dict[str, Any],
) -> list[PromptMessage]:
    """Monta mensagens para conversão do plano no schema do SOW builder."""
    user_prompt = load_prompt_template(_SOW_YAML).format(
        discovery_json=json.dumps(discovery_data, indent=2, ensure_ascii=False),
        plan_json=json.dumps(execution_plan, indent=2, ensure_ascii=False),
        output_schema=_asset_field(_SOW_YAML, "output_schema"),
    )
    return [
        {"role": "system", "content": load_system_prompt(_SOW_YAML)},
        {"role": "user", "content": user_prompt},
    ]
