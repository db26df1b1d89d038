# Copyright 2024-2025 David Gordon Nix
# SPDX-License-Identifier: Apache-2.0

"""
Fit-Out Synchronisation Unit Tests

Test Coverage:
1. Pure reconciliation per driving mode
2. Zero-area guards
3. Cross-field invariant after sync
4. Write-back tolerance and idempotence
5. Authoritative field is never rewritten
6. Fit-out amount read from the driving field
"""

from __future__ import annotations

import pytest

from nercalc.core.primitives import CalculationSettings, FitOutModeEnum, GlobalSettings
from nercalc.lease import (
    DEFAULT_PARAMETERS,
    ParameterSet,
    reconcile_fit_out,
    sync_fit_out,
    total_fit_out,
)


@pytest.fixture
def office() -> ParameterSet:
    """1,000 sqm NLA with a 5% add-on (1,050 sqm GLA)."""
    return ParameterSet(nla=1000, addon=5)


class TestReconcile:
    def test_per_nla_drives(self):
        values = reconcile_fit_out(FitOutModeEnum.PER_NLA, 1000, 1050, 300, 0, 0)
        assert values.per_nla == 300
        assert values.total == pytest.approx(300000)
        assert values.per_gla == pytest.approx(300000 / 1050)

    def test_per_gla_drives(self):
        values = reconcile_fit_out(FitOutModeEnum.PER_GLA, 1000, 1050, 0, 200, 0)
        assert values.per_gla == 200
        assert values.total == pytest.approx(210000)
        assert values.per_nla == pytest.approx(210)

    def test_total_drives(self):
        values = reconcile_fit_out(FitOutModeEnum.TOTAL, 1000, 1050, 0, 0, 105000)
        assert values.total == 105000
        assert values.per_nla == pytest.approx(105)
        assert values.per_gla == pytest.approx(100)

    def test_zero_area_ratios_are_zero(self):
        values = reconcile_fit_out(FitOutModeEnum.TOTAL, 0, 0, 5, 5, 105000)
        assert values.per_nla == 0.0
        assert values.per_gla == 0.0
        assert values.total == 105000

        values = reconcile_fit_out(FitOutModeEnum.PER_GLA, 0, 0, 5, 200, 0)
        assert values.total == 0.0
        assert values.per_nla == 0.0


class TestSync:
    @pytest.mark.parametrize(
        "mode, updates",
        [
            (FitOutModeEnum.PER_NLA, {"fit_out_per_nla": 300}),
            (FitOutModeEnum.PER_GLA, {"fit_out_per_gla": 187.5}),
            (FitOutModeEnum.TOTAL, {"fit_out_total": 123456.78}),
        ],
    )
    # Totals stay below ~1e6 so one float64 ulp is well under 1e-9. Around
    # 1e8 (nla 123456.7, addon 7.77) the rounding error alone reaches ~7e-9.
    @pytest.mark.parametrize("nla, addon", [(1000, 5), (850.5, 12.5), (1, 0), (2500, 3)])
    def test_invariant_holds_after_sync(self, mode, updates, nla, addon):
        params = ParameterSet(nla=nla, addon=addon, fit_out_mode=mode, **updates)
        synced = sync_fit_out(params).params

        assert abs(synced.fit_out_total - synced.fit_out_per_nla * synced.nla) <= 1e-9
        assert abs(synced.fit_out_total - synced.fit_out_per_gla * synced.gla) <= 1e-9

    def test_reports_written_fields(self, office: ParameterSet):
        params = office.with_updates(fitMode="perNLA", fitPerNLA="300")
        sync = sync_fit_out(params)

        assert sync.changed
        assert sync.updated_fields == ("fit_out_per_gla", "fit_out_total")
        assert sync.params.fit_out_total == pytest.approx(300000)
        assert sync.params.fit_out_per_gla == pytest.approx(285.7142857142857)

    def test_second_pass_writes_nothing(self, office: ParameterSet):
        for mode in FitOutModeEnum:
            params = office.with_updates(
                fitMode=mode.value, fitPerNLA="300", fitPerGLA="250", fitTot="280000"
            )
            first = sync_fit_out(params)
            second = sync_fit_out(first.params)

            assert second.updated_fields == ()
            assert not second.changed
            assert second.params is first.params

    def test_authoritative_field_is_never_written(self, office: ParameterSet):
        params = office.with_updates(fitMode="perNLA", fitPerNLA="300", fitTot="1")
        sync = sync_fit_out(params)

        assert "fit_out_per_nla" not in sync.updated_fields
        assert sync.params.fit_out_per_nla == 300.0

    def test_changes_within_tolerance_are_not_written(self, office: ParameterSet):
        params = office.with_updates(
            fitMode="perNLA", fitPerNLA="300", fitTot=300000 + 1e-10, fitPerGLA=300000 / 1050
        )
        sync = sync_fit_out(params)

        assert sync.updated_fields == ()
        assert sync.params.fit_out_total == 300000 + 1e-10

    def test_custom_tolerance(self, office: ParameterSet):
        settings = GlobalSettings(calculation=CalculationSettings(write_tolerance=0.5))
        params = office.with_updates(
            fitMode="perNLA", fitPerNLA="300", fitTot="300000.4", fitPerGLA=300000 / 1050
        )
        assert sync_fit_out(params, settings).updated_fields == ()

    def test_default_parameters_fill_per_gla(self):
        sync = sync_fit_out(DEFAULT_PARAMETERS)
        assert sync.updated_fields == ("fit_out_per_gla",)

    def test_input_is_left_untouched(self, office: ParameterSet):
        params = office.with_updates(fitMode="total", fitTot="105000")
        sync_fit_out(params)
        assert params.fit_out_per_nla == 0.0

    def test_overflowing_gla_reads_as_zero(self):
        params = ParameterSet(nla="1e200", addon="1e200", fitMode="perNLA", fitPerNLA="300")
        synced = sync_fit_out(params).params

        assert params.gla == 0.0
        assert synced.fit_out_total == pytest.approx(3e202)
        assert synced.fit_out_per_gla == 0.0

    def test_overflowing_total_reads_as_zero(self):
        params = ParameterSet(nla="1e300", fitMode="perNLA", fitPerNLA="1e300")
        synced = sync_fit_out(params).params

        assert synced.fit_out_total == 0.0
        assert total_fit_out(params) == 0.0

    def test_area_change_rederives_fields(self, office: ParameterSet):
        synced = sync_fit_out(office.with_updates(fitMode="perNLA", fitPerNLA="300")).params
        resized = sync_fit_out(synced.with_updates(nla="2000")).params

        assert resized.fit_out_per_nla == 300.0
        assert resized.fit_out_total == pytest.approx(600000)


class TestTotalFitOut:
    def test_reads_driving_field_only(self, office: ParameterSet):
        stale = office.with_updates(fitPerNLA="300", fitPerGLA="200", fitTot="1")

        assert total_fit_out(stale.with_updates(fitMode="perNLA")) == pytest.approx(300000)
        assert total_fit_out(stale.with_updates(fitMode="perGLA")) == pytest.approx(210000)
        assert total_fit_out(stale.with_updates(fitMode="total")) == 1.0
