# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Lease inputs: the baseline parameter set, fit-out synchronisation and
project file payloads.
"""

from .fit_out import (
    FitOutSync,
    FitOutValues,
    reconcile_fit_out,
    sync_fit_out,
    total_fit_out,
)
from .parameters import DEFAULT_PARAMETERS, ParameterSet
from .project import (
    decode_project,
    encode_project,
    load_project_query,
    project_file_stem,
)

__all__ = [
    "ParameterSet",
    "DEFAULT_PARAMETERS",
    "FitOutValues",
    "FitOutSync",
    "reconcile_fit_out",
    "sync_fit_out",
    "total_fit_out",
    "encode_project",
    "decode_project",
    "load_project_query",
    "project_file_stem",
]
