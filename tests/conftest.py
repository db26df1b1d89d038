# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Test utilities and fixtures for nercalc testing.

Helpers build parameter sets from short keyword overrides so tests only
spell out the inputs they care about.
"""

from __future__ import annotations

from typing import Any

import pytest

from nercalc.core.primitives import GlobalSettings
from nercalc.lease import DEFAULT_PARAMETERS, ParameterSet


def create_test_parameters(**overrides: Any) -> ParameterSet:
    """
    Create a parameter set starting from the default lease.

    Args:
        **overrides: Field names or project-file keys with raw values

    Returns:
        ParameterSet ready for testing

    Example:
        >>> params = create_test_parameters(rent="20", fitMode="total")
        >>> params.rent
        20.0
    """
    return DEFAULT_PARAMETERS.with_updates(**overrides)


@pytest.fixture
def default_params() -> ParameterSet:
    """The lease every fresh session starts with."""
    return DEFAULT_PARAMETERS


@pytest.fixture
def make_params():
    return create_test_parameters


@pytest.fixture
def settings() -> GlobalSettings:
    return GlobalSettings()
