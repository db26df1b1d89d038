# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
nercalc Core Primitives

Essential building blocks shared by the engine: the immutable model base,
enums, settings, constrained types and the tolerant numeric parser.
"""

from .enums import (
    FieldFormatEnum,
    FitOutModeEnum,
    ScenarioFieldEnum,
    WaterfallStepEnum,
)
from .model import Model
from .numeric import (
    clamp_non_negative,
    coerce_finite,
    parse_months,
    parse_non_negative,
    parse_number,
    step_value,
)
from .settings import CalculationSettings, GlobalSettings, ReportingSettings
from .types import NonNegativeFloat, NonNegativeInt, PositiveFloat

__all__ = [
    # Core models
    "Model",
    # Settings
    "GlobalSettings",
    "CalculationSettings",
    "ReportingSettings",
    # Enums
    "FieldFormatEnum",
    "FitOutModeEnum",
    "ScenarioFieldEnum",
    "WaterfallStepEnum",
    # Parsing and guards
    "parse_number",
    "parse_non_negative",
    "parse_months",
    "step_value",
    "clamp_non_negative",
    "coerce_finite",
    # Types
    "NonNegativeFloat",
    "NonNegativeInt",
    "PositiveFloat",
]
