# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Alternative lease scenarios.

A scenario stores only the parameters it changes. Its NER is the baseline
chain re-run with those overrides, with one simplification: scenario
fit-out is always entered per sqm NLA, whatever mode the baseline uses.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Union

from pydantic import Field, field_serializer, field_validator

from ..core.primitives import FitOutModeEnum, GlobalSettings, Model, ScenarioFieldEnum
from ..lease.parameters import ParameterSet
from .chain import compute_chain

logger = logging.getLogger(__name__)

DEFAULT_SCENARIO_IDS = (2, 3, 4)

# Project-file keys accepted as override names
_FIELD_ALIASES = {
    "addon": ScenarioFieldEnum.ADDON_PCT,
    "duration": ScenarioFieldEnum.DURATION_MONTHS,
    "rf": ScenarioFieldEnum.RENT_FREE_MONTHS,
    "agent": ScenarioFieldEnum.AGENT_FEE_MONTHS,
    "unforeseen": ScenarioFieldEnum.UNFORESEEN_TOTAL,
    "fitPerNLA": ScenarioFieldEnum.FIT_OUT_PER_NLA,
}


def to_scenario_field(key: Union[str, ScenarioFieldEnum]) -> ScenarioFieldEnum:
    """
    Normalise an override key.

    Raises:
        ValueError: If ``key`` names no overridable parameter
    """
    if isinstance(key, ScenarioFieldEnum):
        return key
    if key in _FIELD_ALIASES:
        return _FIELD_ALIASES[key]
    try:
        return ScenarioFieldEnum(key)
    except ValueError:
        raise ValueError(f"'{key}' is not a parameter a scenario can override") from None


class Scenario(Model):
    """
    Sparse set of parameter overrides.

    Attributes:
        scenario_id: Identifier shown as "Scenario <id>"
        overrides: Raw override values by field, read-only; absent fields
            inherit the baseline
    """

    scenario_id: int
    overrides: Mapping[ScenarioFieldEnum, Any] = Field(default_factory=dict)

    @field_validator("overrides", mode="before")
    @classmethod
    def normalise_keys(cls, v: Any) -> Any:
        if isinstance(v, Mapping):
            return {to_scenario_field(k): value for k, value in v.items()}
        return v

    @field_validator("overrides", mode="after")
    @classmethod
    def freeze_overrides(
        cls, v: Mapping[ScenarioFieldEnum, Any]
    ) -> Mapping[ScenarioFieldEnum, Any]:
        return MappingProxyType(dict(v))

    @field_serializer("overrides")
    def serialize_overrides(
        self, v: Mapping[ScenarioFieldEnum, Any]
    ) -> Dict[ScenarioFieldEnum, Any]:
        return dict(v)

    @property
    def name(self) -> str:
        return f"Scenario {self.scenario_id}"

    def with_override(
        self, field: Union[str, ScenarioFieldEnum], value: Any
    ) -> "Scenario":
        """Return a copy with one more (or one replaced) override."""
        overrides = dict(self.overrides)
        overrides[to_scenario_field(field)] = value
        return type(self)(scenario_id=self.scenario_id, overrides=overrides)

    def without_override(self, field: Union[str, ScenarioFieldEnum]) -> "Scenario":
        """Return a copy that inherits ``field`` from the baseline again."""
        overrides = dict(self.overrides)
        overrides.pop(to_scenario_field(field), None)
        return type(self)(scenario_id=self.scenario_id, overrides=overrides)


def default_scenarios() -> List[Scenario]:
    """The three comparison scenarios, all inheriting the baseline."""
    return [Scenario(scenario_id=i) for i in DEFAULT_SCENARIO_IDS]


def effective_parameters(
    baseline: ParameterSet, overrides: Mapping[Any, Any]
) -> ParameterSet:
    """
    Merge ``overrides`` onto ``baseline``.

    Each overridable field takes the override when present and not None,
    else the baseline value. Fit-out mode is forced to per-NLA.
    """
    normalised = {to_scenario_field(k): v for k, v in overrides.items()}
    values: Dict[str, Any] = {}
    for field in ScenarioFieldEnum:
        if normalised.get(field) is not None:
            values[field.value] = normalised[field]
        else:
            values[field.value] = baseline.get(field)
    values["fit_out_mode"] = FitOutModeEnum.PER_NLA
    values["tenant_label"] = baseline.tenant_label
    return ParameterSet.model_validate(values)


def resolve_scenario(
    baseline: ParameterSet,
    overrides: Mapping[Any, Any],
    settings: Optional[GlobalSettings] = None,
) -> float:
    """
    Final NER of a scenario.

    Args:
        baseline: Baseline parameters (left untouched)
        overrides: Sparse raw overrides keyed by field
        settings: Engine settings

    Returns:
        ner4 of the effective parameter set
    """
    params = effective_parameters(baseline, overrides)
    ner = compute_chain(params, settings).ner4
    logger.debug(f"Scenario with {len(overrides)} override(s) -> NER {ner:.4f}")
    return ner


def resolve_field(
    scenario: Scenario, baseline: ParameterSet, field: Union[str, ScenarioFieldEnum]
) -> Any:
    """Value a scenario shows for ``field``: its override, or the baseline value."""
    field = to_scenario_field(field)
    if scenario.overrides.get(field) is not None:
        return scenario.overrides[field]
    return baseline.get(field)


def resolve_scenarios(
    baseline: ParameterSet,
    scenarios: List[Scenario],
    settings: Optional[GlobalSettings] = None,
) -> Dict[int, float]:
    """Final NER per scenario id, each resolved against the same baseline."""
    return {
        scenario.scenario_id: resolve_scenario(baseline, scenario.overrides, settings)
        for scenario in scenarios
    }
