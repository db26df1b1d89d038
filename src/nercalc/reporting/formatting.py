# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Display formatting for engine outputs.

en-US grouping with a fixed currency. The engine itself never formats;
these helpers exist so every caller renders numbers the same way.
"""

from __future__ import annotations

from typing import Any, Optional

from ..analysis.waterfall import WaterfallStep
from ..core.primitives import FieldFormatEnum, GlobalSettings, coerce_finite, parse_number

MINUS_SIGN = "−"

_FIELD_DECIMALS = {
    FieldFormatEnum.INT: 0,
    FieldFormatEnum.ONE_DECIMAL: 1,
    FieldFormatEnum.TWO_DECIMALS: 2,
}


def format_number(value: float, decimals: int = 2) -> str:
    """Grouped fixed-point text, e.g. ``1,234.50``. Non-finite reads as 0."""
    return f"{coerce_finite(value):,.{decimals}f}"


def format_currency(
    value: float, decimals: int = 2, settings: Optional[GlobalSettings] = None
) -> str:
    """Currency text, e.g. ``€1,234.50`` or ``-€300,000``."""
    settings = settings or GlobalSettings()
    value = coerce_finite(value)
    sign = "-" if value < 0 else ""
    return f"{sign}{settings.reporting.currency_symbol}{abs(value):,.{decimals}f}"


def format_deviation(pct: Optional[float]) -> str:
    """
    Deviation marker with signed percentage.

    ``▲ +2.50%`` above headline, ``▼ -8.33%`` below, ``■ 0.00%`` when equal
    or undefined.
    """
    pct = coerce_finite(pct) if pct is not None else 0.0
    if pct > 0:
        return f"▲ +{format_number(pct)}%"
    if pct < 0:
        return f"▼ {format_number(pct)}%"
    return f"■ {format_number(pct)}%"


def format_field(value: Any, kind: FieldFormatEnum = FieldFormatEnum.TWO_DECIMALS) -> str:
    """Text shown in an input field that is not being edited."""
    return format_number(parse_number(value), _FIELD_DECIMALS[FieldFormatEnum(kind)])


def format_step_label(
    step: WaterfallStep, settings: Optional[GlobalSettings] = None
) -> Optional[str]:
    """
    Label above a waterfall bar, or None when the step is too small to label.

    Negative values use a typographic minus.
    """
    settings = settings or GlobalSettings()
    value = step.display_value(settings)
    if value is None:
        return None
    text = format_number(abs(value), settings.reporting.decimal_precision)
    return text if value >= 0 else f"{MINUS_SIGN}{text}"
