# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
NER Analysis API

Single entry point for a full recalculation. Callers run it after every
input change; it holds no state between calls.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from ..core.primitives import GlobalSettings
from ..lease.fit_out import sync_fit_out
from ..lease.parameters import ParameterSet
from .chain import compute_chain
from .results import NerAnalysisResult
from .scenario import Scenario, default_scenarios, resolve_scenarios
from .waterfall import build_ner_bars, build_waterfall_from_chain

logger = logging.getLogger(__name__)


def run(
    params: ParameterSet,
    scenarios: Optional[List[Scenario]] = None,
    settings: Optional[GlobalSettings] = None,
) -> NerAnalysisResult:
    """
    Run the recalculation pass.

    Workflow:
      1) Synchronise the derived fit-out fields
      2) Compute the baseline NER chain
      3) Build the waterfall and the NER level bars
      4) Resolve every scenario against the synchronised baseline

    Args:
        params: Baseline parameters, already coerced by ParameterSet
        scenarios: Scenarios to compare; defaults to three empty ones
        settings: Engine settings

    Returns:
        NerAnalysisResult. The caller should keep ``result.parameters`` as
        its new baseline so the rewritten fit-out fields stick.
    """
    settings = settings or GlobalSettings()
    if scenarios is None:
        scenarios = default_scenarios()

    # Step 1: Fit-out fields first, so the chain and scenarios see one snapshot
    sync = sync_fit_out(params, settings)
    baseline = sync.params

    # Step 2: Baseline chain
    chain = compute_chain(baseline, settings)

    # Step 3: Chart data
    waterfall = build_waterfall_from_chain(chain)
    bars = build_ner_bars(chain)

    # Step 4: Scenarios, independent of one another
    scenario_ners = resolve_scenarios(baseline, scenarios, settings)

    logger.debug(
        f"Recalculated NER {chain.ner4:.4f} with {len(scenarios)} scenario(s), "
        f"fit-out updates: {list(sync.updated_fields) or 'none'}"
    )

    return NerAnalysisResult(
        parameters=baseline,
        chain=chain,
        waterfall=waterfall,
        bars=bars,
        fit_out_updates=sync.updated_fields,
        scenarios=list(scenarios),
        scenario_ners=scenario_ners,
    )
