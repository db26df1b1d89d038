# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
nercalc Core Framework

Foundational building blocks for the NER engine.
"""

from . import primitives
from .primitives import (
    CalculationSettings,
    FitOutModeEnum,
    GlobalSettings,
    Model,
    ReportingSettings,
    ScenarioFieldEnum,
    WaterfallStepEnum,
)

__all__ = [
    "primitives",
    "Model",
    "GlobalSettings",
    "CalculationSettings",
    "ReportingSettings",
    "FitOutModeEnum",
    "ScenarioFieldEnum",
    "WaterfallStepEnum",
]
