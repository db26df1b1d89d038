#!/usr/bin/env python3
# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Basic Net Effective Rent Example

Runs one recalculation pass for a 1,000 sqm office lease and prints the
results panel, the waterfall labels and a three-way scenario comparison.

## Lease

- 1,000 sqm NLA with a 5% common-area add-on (1,050 sqm GLA)
- €15.00/sqm/month headline rent over 60 months
- 5 months rent-free, 2 months agent fees
- €300/sqm NLA fit-out, no unforeseen costs

Scenario 2 raises the rent to €20, scenario 3 doubles the rent-free period
and scenario 4 adds a €63,000 contingency.
"""

import logging

from nercalc.analysis import Scenario, run
from nercalc.lease import ParameterSet, encode_project, project_file_stem
from nercalc.reporting import (
    format_currency,
    format_deviation,
    format_step_label,
    results_summary,
    scenario_table,
)


def create_lease() -> ParameterSet:
    """Baseline lease, entered as raw form text."""
    return ParameterSet(
        tenant="Example Tenant GmbH",
        nla="1,000",
        addon="5",
        rent="15.00",
        duration="60",
        rf="5",
        agent="2",
        fitMode="perNLA",
        fitPerNLA="300",
        unforeseen="0",
    )


def create_scenarios():
    return [
        Scenario(scenario_id=2).with_override("rent", "20"),
        Scenario(scenario_id=3).with_override("rf", "10"),
        Scenario(scenario_id=4).with_override("unforeseen", "63000"),
    ]


def main():
    logging.basicConfig(level=logging.INFO)

    params = create_lease()
    scenarios = create_scenarios()
    result = run(params, scenarios=scenarios)

    print("=" * 60)
    print(f"NER ANALYSIS: {result.parameters.tenant_label}")
    print("=" * 60)
    if result.fit_out_updates:
        print(f"Fit-out fields synchronised: {', '.join(result.fit_out_updates)}")
    print()

    summary = results_summary(result.chain)
    for label, value in summary.items():
        print(f"{label:<24} {format_currency(value):>16}")
    print()

    print("NER LEVELS:")
    print("-" * 40)
    for bar in result.bars:
        marker = format_deviation(bar.pct) if bar.pct is not None else ""
        print(f"{bar.label:<10} {format_currency(bar.value):>12}  {marker}")
    print()

    print("WATERFALL:")
    print("-" * 40)
    for step in result.waterfall:
        print(f"{step.label.value:<10} {format_step_label(step) or '':>12}")
    print()

    print("SCENARIOS:")
    print(scenario_table(result.parameters, scenarios).round(2).to_string())
    print()

    stem = project_file_stem(result.parameters.tenant_label)
    print(f"Project file: {stem}.html (?data= payload of {len(encode_project(result.parameters))} chars)")

    return result


if __name__ == "__main__":
    # Execute the NER example
    result = main()
