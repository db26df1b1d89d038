# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from enum import Enum


class FitOutModeEnum(str, Enum):
    """
    Which fit-out representation is authoritative.

    The string values match the keys stored in saved project files.

    Attributes:
        PER_NLA: Fit-out entered per sqm of net lettable area.
        PER_GLA: Fit-out entered per sqm of gross lettable area.
        TOTAL: Fit-out entered as an absolute amount.
    """

    PER_NLA = "perNLA"
    PER_GLA = "perGLA"
    TOTAL = "total"


class ScenarioFieldEnum(str, Enum):
    """
    Parameters a scenario may override.

    Values are the python field names on ``ParameterSet``.
    """

    NLA = "nla"
    ADDON_PCT = "addon_pct"
    RENT = "rent"
    DURATION_MONTHS = "duration_months"
    RENT_FREE_MONTHS = "rent_free_months"
    AGENT_FEE_MONTHS = "agent_fee_months"
    UNFORESEEN_TOTAL = "unforeseen_total"
    FIT_OUT_PER_NLA = "fit_out_per_nla"


class WaterfallStepEnum(str, Enum):
    """Ordered labels of the NER waterfall."""

    HEADLINE = "Headline"
    RENT_FREE = "RF"
    FIT_OUT = "FO"
    AGENT_FEES = "AF"
    UNFORESEEN = "UC"
    FINAL = "Final NER"


class FieldFormatEnum(str, Enum):
    """Display precision of an input field when it is not being edited."""

    INT = "int"
    ONE_DECIMAL = "1dec"
    TWO_DECIMALS = "2dec"
