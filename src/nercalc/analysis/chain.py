# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Net Effective Rent chain.

Headline rent is reduced step by step: rent-free period (NER 1), fit-out
(NER 2), agent fees (NER 3) and unforeseen costs (NER 4, the reported
figure). Income counts only billable months, while every cost is spread
over the full lease term.
"""

from __future__ import annotations

import logging
from typing import Dict, Optional

from ..core.primitives import GlobalSettings, Model, coerce_finite
from ..lease.fit_out import total_fit_out
from ..lease.parameters import ParameterSet

logger = logging.getLogger(__name__)


class NerChain(Model):
    """
    Result of one NER computation.

    NER values are per sqm GLA per month and may be negative when costs
    exceed income.

    Attributes:
        rent: Headline rent the chain starts from
        gla: Gross lettable area
        months: Billable months (term minus rent-free, never negative)
        gross: Rent collected over the billable months
        total_fit: Fit-out from the driving representation
        agent_fees: Agent fee amount
        unforeseen: Unforeseen costs
        denom: Amortisation base, duration x GLA with an epsilon floor
        ner1: NER after rent-free
        ner2: NER after fit-out
        ner3: NER after agent fees
        ner4: NER after unforeseen costs
        total_headline: Rent over the full term without concessions
        total_rent_free: Rent given up during the rent-free months
    """

    rent: float
    gla: float
    months: float
    gross: float
    total_fit: float
    agent_fees: float
    unforeseen: float
    denom: float
    ner1: float
    ner2: float
    ner3: float
    ner4: float
    total_headline: float
    total_rent_free: float

    @property
    def final_ner(self) -> float:
        return self.ner4

    @property
    def total_agent_fees(self) -> float:
        return self.agent_fees

    @property
    def total_unforeseen(self) -> float:
        return self.unforeseen

    @property
    def deviations(self) -> Dict[str, Optional[float]]:
        """Percent deviation of each NER from headline rent."""
        return {
            name: deviation_pct(getattr(self, name), self.rent)
            for name in ("ner1", "ner2", "ner3", "ner4")
        }


def deviation_pct(value: float, rent: float) -> Optional[float]:
    """``(value - rent) / rent * 100``; undefined (None) against a zero rent."""
    if rent > 0:
        return (value - rent) / rent * 100
    return None


def compute_chain(
    params: ParameterSet, settings: Optional[GlobalSettings] = None
) -> NerChain:
    """
    Compute GLA, gross rent and the four progressive NER figures.

    Args:
        params: Coerced baseline parameters
        settings: Engine settings (denominator floor)

    Returns:
        NerChain with finite values for any parameter set
    """
    settings = settings or GlobalSettings()

    # Products of very large inputs overflow; every stored figure is kept finite
    gla = params.gla
    rent = params.rent
    duration = params.duration_months
    months = max(0.0, duration - params.rent_free_months)
    gross = coerce_finite(rent * gla * months)

    total_fit = total_fit_out(params)
    agent_fees = coerce_finite(params.agent_fee_months * rent * gla)
    unforeseen = params.unforeseen_total
    denom = max(settings.calculation.denominator_floor, coerce_finite(duration * gla))

    ner1 = coerce_finite(gross / denom)
    ner2 = coerce_finite((gross - total_fit) / denom)
    ner3 = coerce_finite((gross - total_fit - agent_fees) / denom)
    ner4 = coerce_finite((gross - total_fit - agent_fees - unforeseen) / denom)

    logger.debug(
        f"NER chain: gla={gla:.2f} months={months:g} gross={gross:.2f} "
        f"fit={total_fit:.2f} agent={agent_fees:.2f} -> ner4={ner4:.4f}"
    )

    return NerChain(
        rent=rent,
        gla=gla,
        months=months,
        gross=gross,
        total_fit=total_fit,
        agent_fees=agent_fees,
        unforeseen=unforeseen,
        denom=denom,
        ner1=ner1,
        ner2=ner2,
        ner3=ner3,
        ner4=ner4,
        total_headline=coerce_finite(rent * gla * duration),
        total_rent_free=coerce_finite(rent * gla * params.rent_free_months),
    )
