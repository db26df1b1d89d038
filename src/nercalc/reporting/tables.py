# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tabular views of NER results.

These translate engine outputs into the rows and columns a results panel
or comparison table shows. They only arrange numbers, never recompute
them beyond calling the engine.
"""

from __future__ import annotations

from typing import List, Optional

import pandas as pd

from ..analysis.chain import NerChain, compute_chain
from ..analysis.scenario import Scenario, effective_parameters, resolve_scenario
from ..core.primitives import GlobalSettings, ScenarioFieldEnum
from ..lease.parameters import ParameterSet


def _scenario_rows(symbol: str):
    return [
        (f"Headline Rent ({symbol}/sqm)", ScenarioFieldEnum.RENT),
        ("Lease Term (months)", ScenarioFieldEnum.DURATION_MONTHS),
        ("Rent-Free (months)", ScenarioFieldEnum.RENT_FREE_MONTHS),
        (f"Fit-Out ({symbol}/sqm NLA)", ScenarioFieldEnum.FIT_OUT_PER_NLA),
        ("Agent Fees (months)", ScenarioFieldEnum.AGENT_FEE_MONTHS),
        (f"Unforeseen ({symbol} total)", ScenarioFieldEnum.UNFORESEEN_TOTAL),
    ]


def scenario_table(
    baseline: ParameterSet,
    scenarios: List[Scenario],
    settings: Optional[GlobalSettings] = None,
) -> pd.DataFrame:
    """
    Side-by-side comparison of the baseline and each scenario.

    Args:
        baseline: Baseline parameters (ideally after fit-out sync)
        scenarios: Scenarios to compare
        settings: Engine settings

    Returns:
        DataFrame indexed by parameter label with a ``Current`` column and
        one ``Scenario <id>`` column per scenario. The last row is the final
        NER.
    """
    settings = settings or GlobalSettings()
    symbol = settings.reporting.currency_symbol
    rows = _scenario_rows(symbol)
    final_label = f"FINAL NER ({symbol}/sqm)"

    columns = {
        "Current": [baseline.get(field) for _, field in rows]
        + [compute_chain(baseline, settings).ner4]
    }
    for scenario in scenarios:
        effective = effective_parameters(baseline, scenario.overrides)
        columns[scenario.name] = [effective.get(field) for _, field in rows] + [
            resolve_scenario(baseline, scenario.overrides, settings)
        ]

    index = pd.Index([label for label, _ in rows] + [final_label], name="Parameters")
    return pd.DataFrame(columns, index=index, dtype=float)


def results_summary(chain: NerChain) -> pd.Series:
    """
    Figures of the results panel, costs shown as negative amounts.
    """
    return pd.Series(
        {
            "Headline Rent": chain.rent,
            "Total Headline Rent": chain.total_headline,
            "Total Rent Frees": -chain.total_rent_free,
            "Total Agent Fees": -chain.agent_fees,
            "Unforeseen Costs": -chain.unforeseen,
            "Total Fit Out": chain.total_fit,
            "NER incl. Rent Frees": chain.ner1,
            "NER incl. Fit-Outs": chain.ner2,
            "NER incl. Agent Fees": chain.ner3,
            "Final NER": chain.ner4,
        },
        name="NER Results",
        dtype=float,
    )
