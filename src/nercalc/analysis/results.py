# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Result of one recalculation pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Tuple

import pandas as pd

from ..lease.parameters import ParameterSet
from .chain import NerChain
from .scenario import Scenario
from .waterfall import NerBar, WaterfallStep, waterfall_frame


@dataclass
class NerAnalysisResult:
    """
    Everything the caller renders after an input change.

    Attributes:
        parameters: Baseline parameters after fit-out synchronisation
        fit_out_updates: Fit-out fields the synchronisation rewrote
        chain: Baseline NER chain
        waterfall: Waterfall steps derived from the chain
        bars: NER level bars derived from the chain
        scenarios: Scenarios that were resolved
        scenario_ners: Final NER by scenario id
    """

    parameters: ParameterSet
    chain: NerChain
    waterfall: List[WaterfallStep]
    bars: List[NerBar]
    fit_out_updates: Tuple[str, ...] = ()
    scenarios: List[Scenario] = field(default_factory=list)
    scenario_ners: Dict[int, float] = field(default_factory=dict)

    @property
    def final_ner(self) -> float:
        return self.chain.ner4

    @property
    def waterfall_df(self) -> pd.DataFrame:
        """Waterfall steps as a DataFrame indexed by label."""
        return waterfall_frame(self.waterfall)
