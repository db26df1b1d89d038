# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for display formatting helpers.
"""

from __future__ import annotations

import pytest

from nercalc.analysis import WaterfallStep
from nercalc.core.primitives import FieldFormatEnum, GlobalSettings, ReportingSettings
from nercalc.reporting import (
    MINUS_SIGN,
    format_currency,
    format_deviation,
    format_field,
    format_number,
    format_step_label,
)


class TestNumbers:
    @pytest.mark.parametrize(
        "value,decimals,expected",
        [
            (1234.5, 2, "1,234.50"),
            (0, 2, "0.00"),
            (-8.488095, 2, "-8.49"),
            (1000000, 0, "1,000,000"),
            (float("nan"), 2, "0.00"),
            (float("inf"), 1, "0.0"),
        ],
    )
    def test_format_number(self, value, decimals, expected):
        assert format_number(value, decimals) == expected

    def test_format_currency(self):
        assert format_currency(1234.5) == "€1,234.50"
        assert format_currency(-300000, 0) == "-€300,000"

    def test_currency_symbol_from_settings(self):
        settings = GlobalSettings(reporting=ReportingSettings(currency_symbol="EUR "))
        assert format_currency(15, settings=settings) == "EUR 15.00"


class TestDeviation:
    def test_below_headline(self):
        assert format_deviation(-8.333333) == "▼ -8.33%"

    def test_above_headline(self):
        assert format_deviation(2.5) == "▲ +2.50%"

    def test_equal_or_undefined(self):
        assert format_deviation(0.0) == "■ 0.00%"
        assert format_deviation(None) == "■ 0.00%"


class TestFields:
    def test_field_precision(self):
        assert format_field("60", FieldFormatEnum.INT) == "60"
        assert format_field("5", FieldFormatEnum.ONE_DECIMAL) == "5.0"
        assert format_field("1234.4", FieldFormatEnum.INT) == "1,234"
        assert format_field("300") == "300.00"

    def test_field_kind_by_value(self):
        assert format_field("2", "1dec") == "2.0"

    def test_unparseable_field_reads_zero(self):
        assert format_field("abc") == "0.00"
        assert format_field("") == "0.00"


class TestStepLabels:
    def test_negative_uses_typographic_minus(self):
        step = WaterfallStep(label="FO", baseline=13.75, delta=-4.761905)
        assert format_step_label(step) == f"{MINUS_SIGN}4.76"

    def test_anchor(self):
        step = WaterfallStep(label="Headline", baseline=0.0, delta=15.0, is_total=True)
        assert format_step_label(step) == "15.00"

    def test_small_step_unlabelled(self):
        step = WaterfallStep(label="UC", baseline=8.49, delta=-0.001)
        assert format_step_label(step) is None
