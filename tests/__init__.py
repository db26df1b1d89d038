# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
nercalc test suite.

Unit tests for the numeric guards, lease inputs, NER engine and reporting
helpers.
"""
