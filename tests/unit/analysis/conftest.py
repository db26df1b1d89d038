# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""Shared fixtures for the analysis tests."""

from __future__ import annotations

import pytest

from nercalc.lease import ParameterSet


@pytest.fixture
def worked_example() -> ParameterSet:
    """
    1,000 sqm NLA, 5% add-on, 15/sqm over 60 months, 5 months rent-free,
    2 months agent fees, 300/sqm NLA fit-out, no unforeseen costs.
    """
    return ParameterSet(
        nla="1000",
        addon="5",
        rent="15",
        duration="60",
        rf="5",
        agent="2",
        fitMode="perNLA",
        fitPerNLA="300",
        unforeseen="0",
    )
