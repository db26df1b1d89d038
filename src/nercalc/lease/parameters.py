# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lease parameter set.

The single baseline input of the engine. Every numeric field accepts raw
form text and is coerced while the model is built (parse, then clamp at
zero), so constructing a ``ParameterSet`` from whatever the user typed
never fails.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from pydantic import Field, field_validator

from ..core.primitives import (
    FitOutModeEnum,
    Model,
    NonNegativeFloat,
    NonNegativeInt,
    ScenarioFieldEnum,
    coerce_finite,
    parse_months,
    parse_non_negative,
)

logger = logging.getLogger(__name__)

_AMOUNT_FIELDS = (
    "nla",
    "addon_pct",
    "rent",
    "rent_free_months",
    "agent_fee_months",
    "unforeseen_total",
    "fit_out_per_nla",
    "fit_out_per_gla",
    "fit_out_total",
)


class ParameterSet(Model):
    """
    Baseline lease parameters.

    Field aliases are the keys used by saved project files, so
    ``ParameterSet.model_validate(project_dict)`` and
    ``model_dump(by_alias=True)`` speak the same format.

    Attributes:
        tenant_label: Free text, display only.
        nla: Net lettable area in sqm.
        addon_pct: Common-area add-on as a percentage of NLA.
        rent: Headline rent per sqm per month.
        duration_months: Lease term in whole months.
        rent_free_months: Months without rent at lease start.
        agent_fee_months: Agent fee as a multiple of monthly rent.
        unforeseen_total: Lump-sum unforeseen costs.
        fit_out_mode: Which of the three fit-out fields is authoritative.
        fit_out_per_nla: Fit-out per sqm NLA.
        fit_out_per_gla: Fit-out per sqm GLA.
        fit_out_total: Absolute fit-out amount.
    """

    tenant_label: str = Field(default="", alias="tenant")
    nla: NonNegativeFloat = Field(default=0.0, alias="nla")
    addon_pct: NonNegativeFloat = Field(default=0.0, alias="addon")
    rent: NonNegativeFloat = Field(default=0.0, alias="rent")
    duration_months: NonNegativeInt = Field(default=0, alias="duration")
    rent_free_months: NonNegativeFloat = Field(default=0.0, alias="rf")
    agent_fee_months: NonNegativeFloat = Field(default=0.0, alias="agent")
    unforeseen_total: NonNegativeFloat = Field(default=0.0, alias="unforeseen")
    fit_out_mode: FitOutModeEnum = Field(default=FitOutModeEnum.PER_NLA, alias="fitMode")
    fit_out_per_nla: NonNegativeFloat = Field(default=0.0, alias="fitPerNLA")
    fit_out_per_gla: NonNegativeFloat = Field(default=0.0, alias="fitPerGLA")
    fit_out_total: NonNegativeFloat = Field(default=0.0, alias="fitTot")

    @field_validator(*_AMOUNT_FIELDS, mode="before")
    @classmethod
    def parse_amount(cls, v: Any) -> float:
        return parse_non_negative(v)

    @field_validator("duration_months", mode="before")
    @classmethod
    def parse_duration(cls, v: Any) -> int:
        return parse_months(v)

    @field_validator("tenant_label", mode="before")
    @classmethod
    def parse_tenant(cls, v: Any) -> str:
        return "" if v is None else str(v)

    @field_validator("fit_out_mode", mode="before")
    @classmethod
    def parse_fit_out_mode(cls, v: Any) -> FitOutModeEnum:
        """Unrecognised modes fall through to TOTAL."""
        if isinstance(v, FitOutModeEnum):
            return v
        try:
            return FitOutModeEnum(v)
        except ValueError:
            logger.debug(f"Unknown fit-out mode {v!r}, using {FitOutModeEnum.TOTAL.value}")
            return FitOutModeEnum.TOTAL

    @property
    def gla(self) -> float:
        """Gross lettable area: NLA plus the add-on share, 0 on overflow."""
        return coerce_finite(self.nla * (1 + self.addon_pct / 100))

    def get(self, field: ScenarioFieldEnum) -> float:
        """Value of an overridable parameter."""
        return getattr(self, ScenarioFieldEnum(field).value)

    def with_updates(self, **changes: Any) -> "ParameterSet":
        """
        Return a copy with ``changes`` applied and re-coerced.

        Keys may be python field names or project-file aliases.
        """
        data: Dict[str, Any] = self.model_dump()
        data.update(_to_field_names(changes))
        return type(self).model_validate(data)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "ParameterSet":
        """Build from a loose mapping, ignoring keys that are not parameters."""
        return cls.model_validate(_to_field_names(data))


def _to_field_names(data: Mapping[str, Any]) -> Dict[str, Any]:
    aliases = {
        info.alias: name
        for name, info in ParameterSet.model_fields.items()
        if info.alias is not None
    }
    result: Dict[str, Any] = {}
    for key, value in data.items():
        if key in ParameterSet.model_fields:
            result[key] = value
        elif key in aliases:
            result[aliases[key]] = value
    return result


DEFAULT_PARAMETERS = ParameterSet(
    tenant="",
    nla="1000",
    addon="5.00",
    rent="15.00",
    duration="60",
    rf="5.0",
    agent="2.0",
    fitMode="perNLA",
    fitPerNLA="300.00",
    fitPerGLA="",
    fitTot="300000.00",
    unforeseen="0",
)
