# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from typing import Literal

from pydantic import Field, model_validator

from .model import Model
from .types import NonNegativeFloat, PositiveFloat


class CalculationSettings(Model):
    """
    Numeric guards used by the calculation engine.

    Usage Examples:
        # Default guards
        calc_settings = CalculationSettings()

        # Looser write-back tolerance for a caller that rounds inputs
        calc_settings = CalculationSettings(write_tolerance=1e-6)
    """

    write_tolerance: PositiveFloat = Field(
        default=1e-9,
        description=(
            "A derived fit-out field is only rewritten when its recomputed value "
            "differs from the stored one by more than this amount. Stops "
            "synchronisation from re-triggering itself."
        ),
    )
    denominator_floor: PositiveFloat = Field(
        default=1e-9,
        description="Lower bound of the NER amortisation denominator (duration x GLA).",
    )


class ReportingSettings(Model):
    """Settings related to display formatting of engine outputs."""

    decimal_precision: int = Field(
        default=2, ge=0, le=6, description="Decimal places for rates and deltas."
    )
    label_threshold: NonNegativeFloat = Field(
        default=0.005,
        description="Waterfall steps whose rounded delta is smaller than this get no label.",
    )
    currency_code: Literal["EUR"] = "EUR"
    currency_symbol: str = "€"
    area_unit: Literal["sqm"] = "sqm"

    @model_validator(mode="after")
    def check_threshold_precision(self) -> "ReportingSettings":
        """The label threshold must be resolvable at the display precision."""
        if self.label_threshold and self.label_threshold < 10 ** -(self.decimal_precision + 1):
            raise ValueError(
                f"label_threshold {self.label_threshold} is below the resolution of "
                f"{self.decimal_precision} decimal places"
            )
        return self


# --- Main Global Settings Class ---


class GlobalSettings(Model):
    """Global engine settings

    Groups the calculation guards and the reporting options. Every public
    operation accepts an optional instance and falls back to the defaults.
    """

    calculation: CalculationSettings = Field(default_factory=CalculationSettings)
    reporting: ReportingSettings = Field(default_factory=ReportingSettings)
