# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Base Pydantic model shared by parameters, scenarios and results.

    Instances never change after construction; edits produce a new instance
    through ``model_copy`` or ``ParameterSet.with_updates``.
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",  # Unknown keys are programmer errors
        populate_by_name=True,  # Python names and project-file aliases
        validate_default=True,  # Defaults go through the same coercion as input
    )
