# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
nercalc Reporting

Number formatting and tabular views for presenting engine results.
Reports only arrange and format; all figures come from the engine.
"""

from .formatting import (
    MINUS_SIGN,
    format_currency,
    format_deviation,
    format_field,
    format_number,
    format_step_label,
)
from .tables import results_summary, scenario_table

__all__ = [
    "format_number",
    "format_currency",
    "format_deviation",
    "format_field",
    "format_step_label",
    "MINUS_SIGN",
    "scenario_table",
    "results_summary",
]
