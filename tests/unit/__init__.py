# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Unit tests for nercalc components.

Each module exercises one component in isolation with plain parameter
sets; no files or network are touched.
"""
