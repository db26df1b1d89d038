# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fit-out synchronisation.

Fit-out can be entered three ways: per sqm NLA, per sqm GLA, or as a total.
Exactly one of them drives (``ParameterSet.fit_out_mode``); the other two
are derived so that ``total == per_nla * nla == per_gla * gla``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, NamedTuple, Optional, Tuple

from ..core.primitives import FitOutModeEnum, GlobalSettings, coerce_finite
from .parameters import ParameterSet

logger = logging.getLogger(__name__)


class FitOutValues(NamedTuple):
    per_nla: float
    per_gla: float
    total: float


_FIELD_NAMES = {
    "per_nla": "fit_out_per_nla",
    "per_gla": "fit_out_per_gla",
    "total": "fit_out_total",
}

_AUTHORITATIVE = {
    FitOutModeEnum.PER_NLA: "per_nla",
    FitOutModeEnum.PER_GLA: "per_gla",
    FitOutModeEnum.TOTAL: "total",
}


def reconcile_fit_out(
    mode: FitOutModeEnum,
    nla: float,
    gla: float,
    per_nla: float,
    per_gla: float,
    total: float,
) -> FitOutValues:
    """
    Recompute the two derived fit-out values from the authoritative one.

    Ratios against a zero area are 0, as is a total that overflows. The
    authoritative value is returned unchanged.

    Args:
        mode: Driving representation
        nla: Net lettable area
        gla: Gross lettable area
        per_nla: Stored fit-out per sqm NLA
        per_gla: Stored fit-out per sqm GLA
        total: Stored fit-out total

    Returns:
        FitOutValues consistent with the driving field
    """
    if mode == FitOutModeEnum.PER_NLA:
        total = coerce_finite(per_nla * nla)
        per_gla = total / gla if gla > 0 else 0.0
    elif mode == FitOutModeEnum.PER_GLA:
        total = coerce_finite(per_gla * gla)
        per_nla = total / nla if nla > 0 else 0.0
    else:
        per_nla = total / nla if nla > 0 else 0.0
        per_gla = total / gla if gla > 0 else 0.0
    return FitOutValues(per_nla=per_nla, per_gla=per_gla, total=total)


@dataclass(frozen=True)
class FitOutSync:
    """
    Outcome of one synchronisation pass.

    Attributes:
        params: Parameter set after write-back (the input itself when nothing changed)
        updated_fields: Names of the fields that were rewritten
    """

    params: ParameterSet
    updated_fields: Tuple[str, ...] = ()

    @property
    def changed(self) -> bool:
        return bool(self.updated_fields)


def sync_fit_out(
    params: ParameterSet, settings: Optional[GlobalSettings] = None
) -> FitOutSync:
    """
    Bring the derived fit-out fields of ``params`` in line with the driving one.

    A derived field is only rewritten when the recomputed value differs from
    the stored value by more than ``settings.calculation.write_tolerance``.
    Running the sync on its own output therefore writes nothing, which is
    what stops a change-triggered caller from looping.

    Must be re-run after any change to NLA, add-on, mode or a fit-out field.
    """
    settings = settings or GlobalSettings()
    tolerance = settings.calculation.write_tolerance

    stored = FitOutValues(
        per_nla=params.fit_out_per_nla,
        per_gla=params.fit_out_per_gla,
        total=params.fit_out_total,
    )
    target = reconcile_fit_out(params.fit_out_mode, params.nla, params.gla, *stored)

    driving = _AUTHORITATIVE[params.fit_out_mode]
    changes: Dict[str, float] = {}
    for key, field_name in _FIELD_NAMES.items():
        if key == driving:
            continue
        new_value = getattr(target, key)
        if abs(new_value - getattr(stored, key)) > tolerance:
            changes[field_name] = new_value

    if not changes:
        return FitOutSync(params=params)

    logger.debug(
        f"Fit-out sync ({params.fit_out_mode.value}): "
        + ", ".join(f"{name}={value:.6f}" for name, value in changes.items())
    )
    return FitOutSync(
        params=params.model_copy(update=changes),
        updated_fields=tuple(changes),
    )


def total_fit_out(params: ParameterSet) -> float:
    """
    Fit-out amount read straight from the driving field.

    Used by the NER chain so a result never lags one sync behind the input.
    """
    if params.fit_out_mode == FitOutModeEnum.PER_NLA:
        return coerce_finite(params.fit_out_per_nla * params.nla)
    if params.fit_out_mode == FitOutModeEnum.PER_GLA:
        return coerce_finite(params.fit_out_per_gla * params.gla)
    return params.fit_out_total
