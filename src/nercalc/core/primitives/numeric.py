# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Tolerant numeric parsing and guards.

Form fields arrive as free text typed in either decimal convention
("1,5" or "1.5", "1.234,56" or "1,234.56"). Nothing in here raises: text
that cannot be read as a finite number degrades to zero, which keeps live
typing (blank field, lone minus sign) from breaking a recalculation.
"""

from __future__ import annotations

import math
import re
from typing import Any

_WHITESPACE = re.compile(r"\s+")
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
# "1,234" / "12,500": a single comma followed by exactly one group of three digits
_THOUSANDS_GROUP = re.compile(r"[+-]?[1-9]\d{0,2},\d{3}", re.ASCII)


def coerce_finite(n: float) -> float:
    """Return ``n`` when finite, else 0."""
    return n if math.isfinite(n) else 0.0


def clamp_non_negative(n: float, minimum: float = 0.0) -> float:
    """Return ``n`` when it is finite and at least ``minimum``, else ``minimum``."""
    if math.isfinite(n) and n >= minimum:
        return n
    return minimum


def _normalize_separators(text: str) -> str:
    has_dot = "." in text
    commas = text.count(",")

    if not has_dot and commas == 1:
        if _THOUSANDS_GROUP.fullmatch(text):
            return text.replace(",", "")
        return text.replace(",", ".")

    if has_dot and commas and text.rfind(",") > text.rfind("."):
        # European grouping: dots group thousands, the trailing comma is decimal
        return text.replace(".", "").replace(",", ".")

    return text.replace(",", "")


def parse_number(value: Any) -> float:
    """
    Parse free-form numeric text into a finite float.

    Separator rules, applied after removing all whitespace:

    - no dot and exactly one comma: the comma is the decimal point
      (``"1,5"`` -> 1.5) unless the text is shaped like a single thousands
      group (``"1,234"`` -> 1234)
    - dot and comma present with the last comma after the last dot:
      European grouping (``"1.234,56"`` -> 1234.56)
    - otherwise commas are thousands separators (``"1,234.50"`` -> 1234.5)

    Args:
        value: Raw field content. Numbers pass through, ``None`` reads as 0.

    Returns:
        The parsed value, or 0.0 for empty, malformed or non-finite input.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        try:
            return coerce_finite(float(value))
        except OverflowError:
            return 0.0

    text = _normalize_separators(_WHITESPACE.sub("", str(value)))
    if not _DECIMAL_LITERAL.fullmatch(text):
        return 0.0
    return coerce_finite(float(text))


def parse_non_negative(value: Any, minimum: float = 0.0) -> float:
    """Parse then clamp to ``minimum``."""
    return clamp_non_negative(parse_number(value), minimum)


def parse_months(value: Any) -> int:
    """Parse a month count, floored to a whole non-negative number."""
    return max(0, math.floor(parse_number(value)))


def step_value(value: Any, delta: float, minimum: float = 0.0) -> float:
    """
    Increment or decrement a field by ``delta`` (arrow-key stepping).

    The result never drops below ``minimum``.
    """
    return clamp_non_negative(parse_number(value) + delta, minimum)
