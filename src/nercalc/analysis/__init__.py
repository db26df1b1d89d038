# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
nercalc Analysis Engine

NER chain, waterfall decomposition and scenario comparison, tied together
by ``run`` for a full recalculation pass.
"""

from .api import run
from .chain import NerChain, compute_chain, deviation_pct
from .results import NerAnalysisResult
from .scenario import (
    DEFAULT_SCENARIO_IDS,
    Scenario,
    default_scenarios,
    effective_parameters,
    resolve_field,
    resolve_scenario,
    resolve_scenarios,
)
from .waterfall import (
    NerBar,
    WaterfallStep,
    build_ner_bars,
    build_waterfall,
    build_waterfall_from_chain,
    round_half_up,
    waterfall_frame,
)

__all__ = [
    # Main API function
    "run",
    "NerAnalysisResult",
    # NER chain
    "NerChain",
    "compute_chain",
    "deviation_pct",
    # Waterfall and bars
    "WaterfallStep",
    "NerBar",
    "build_waterfall",
    "build_waterfall_from_chain",
    "build_ner_bars",
    "waterfall_frame",
    "round_half_up",
    # Scenarios
    "Scenario",
    "DEFAULT_SCENARIO_IDS",
    "default_scenarios",
    "effective_parameters",
    "resolve_scenario",
    "resolve_scenarios",
    "resolve_field",
]
