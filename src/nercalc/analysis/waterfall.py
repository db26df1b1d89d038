# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Chart-ready decompositions of the NER chain.

The waterfall splits headline-to-final NER into named deltas; the bar view
shows each NER level with its deviation from headline rent. Rendering is
left to the caller.
"""

from __future__ import annotations

import math
from typing import List, Optional

import pandas as pd

from ..core.primitives import GlobalSettings, Model, WaterfallStepEnum, coerce_finite
from .chain import NerChain, deviation_pct


def round_half_up(value: float, digits: int = 2) -> float:
    """Round with halves going up (towards positive infinity)."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


class WaterfallStep(Model):
    """
    One bar of the NER waterfall.

    Anchor steps (headline and final NER) stand on zero: ``baseline`` is 0
    and ``delta`` holds the absolute value. Intermediate steps float at the
    running total of everything before them.
    """

    label: WaterfallStepEnum
    baseline: float
    delta: float
    is_total: bool = False

    @property
    def end(self) -> float:
        return self.baseline + self.delta

    def display_value(self, settings: Optional[GlobalSettings] = None) -> Optional[float]:
        """
        Rounded label value, or None when an intermediate step is too small to label.

        Rounding applies to the label only; baselines keep full precision.
        """
        settings = settings or GlobalSettings()
        rounded = round_half_up(self.delta, settings.reporting.decimal_precision)
        if not self.is_total and abs(rounded) < settings.reporting.label_threshold:
            return None
        return rounded


def build_waterfall(
    rent: float, ner1: float, ner2: float, ner3: float, ner4: float
) -> List[WaterfallStep]:
    """
    Decompose the NER progression into six ordered steps.

    Args:
        rent: Headline rent (first anchor)
        ner1: NER after rent-free
        ner2: NER after fit-out
        ner3: NER after agent fees
        ner4: Final NER

    Returns:
        Headline, RF, FO, AF, UC and Final NER steps. The final anchor is the
        running total, so it always equals rent plus the four deltas.
    """
    running_total = coerce_finite(rent)
    steps = [
        WaterfallStep(
            label=WaterfallStepEnum.HEADLINE,
            baseline=0.0,
            delta=running_total,
            is_total=True,
        )
    ]

    deltas = [
        (WaterfallStepEnum.RENT_FREE, ner1 - rent),
        (WaterfallStepEnum.FIT_OUT, ner2 - ner1),
        (WaterfallStepEnum.AGENT_FEES, ner3 - ner2),
        (WaterfallStepEnum.UNFORESEEN, ner4 - ner3),
    ]
    for label, delta in deltas:
        delta = coerce_finite(delta)
        steps.append(WaterfallStep(label=label, baseline=running_total, delta=delta))
        running_total += delta

    steps.append(
        WaterfallStep(
            label=WaterfallStepEnum.FINAL,
            baseline=0.0,
            delta=running_total,
            is_total=True,
        )
    )
    return steps


def build_waterfall_from_chain(chain: NerChain) -> List[WaterfallStep]:
    return build_waterfall(chain.rent, chain.ner1, chain.ner2, chain.ner3, chain.ner4)


def waterfall_frame(steps: List[WaterfallStep]) -> pd.DataFrame:
    """
    Tabulate waterfall steps for plotting.

    ``bar_start``/``bar_end`` give the vertical extent of each bar whatever
    the sign of its delta.
    """
    data = []
    for order, step in enumerate(steps):
        data.append({
            "label": step.label.value,
            "baseline": step.baseline,
            "delta": step.delta,
            "end": step.end,
            "bar_start": min(step.baseline, step.end),
            "bar_end": max(step.baseline, step.end),
            "is_total": step.is_total,
            "order": order,
        })
    return pd.DataFrame(data).set_index("label")


class NerBar(Model):
    """One bar of the NER level view."""

    label: str
    value: float
    pct: Optional[float] = None


def build_ner_bars(chain: NerChain) -> List[NerBar]:
    """
    Headline rent followed by each NER level and its deviation from headline.

    The headline bar carries no percentage, and neither does any bar when
    headline rent is zero.
    """
    levels = [
        ("NER 1", chain.ner1),
        ("NER 2", chain.ner2),
        ("NER 3", chain.ner3),
        ("Final", chain.ner4),
    ]
    bars = [NerBar(label="Headline", value=coerce_finite(chain.rent))]
    for label, value in levels:
        bars.append(
            NerBar(
                label=label,
                value=coerce_finite(value),
                pct=deviation_pct(value, chain.rent),
            )
        )
    return bars
