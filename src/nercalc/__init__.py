# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

import importlib
import logging

"""
nercalc - Net Effective Rent calculation engine

Computes the Net Effective Rent of a commercial lease from headline rent,
rent-free period, fit-out, agent fees and unforeseen costs, and compares
the baseline with alternative scenarios.

Key Entry Points:
- nercalc.analysis.run() - Full recalculation pass
- nercalc.lease.ParameterSet - Baseline inputs built from raw form text
- nercalc.analysis.Scenario - Sparse parameter overrides
- nercalc.reporting.* - Formatting and tabular views

Example Usage:
    ```python
    from nercalc.analysis import run
    from nercalc.lease import ParameterSet

    params = ParameterSet(nla="1,000", addon="5", rent="15", duration="60",
                          rf="5", agent="2", fitMode="perNLA", fitPerNLA="300")
    result = run(params)
    print(f"Final NER: {result.final_ner:.2f} EUR/sqm")
    ```
"""

# Libraries leave handler configuration to the application
logging.getLogger(__name__).addHandler(logging.NullHandler())


# Public API surface (lazy-loaded on first attribute access)
__all__ = [  # noqa: F822 - lazy loading
    "analysis",
    "core",
    "lease",
    "reporting",
]


_LAZY_MODULES = {
    "analysis": "nercalc.analysis",
    "core": "nercalc.core",
    "lease": "nercalc.lease",
    "reporting": "nercalc.reporting",
}


def __getattr__(name: str):
    module_path = _LAZY_MODULES.get(name)
    if module_path is None:
        raise AttributeError(f"module 'nercalc' has no attribute '{name}'")
    module = importlib.import_module(module_path)
    globals()[name] = module
    return module
