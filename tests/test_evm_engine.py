"""Tests for the EVM calculator."""

import math
from types import SimpleNamespace

import pytest

from core.evm_engine import compute_evm, compute_indices, compute_cost_deviation
from tests.factories import make_project


class TestComputeIndices:
    """Tests for the bare CPI/SPI rule."""

    def test_ratios(self):
        """CPI = EV/AC and SPI = EV/PV."""
        cpi, spi = compute_indices(ev=50, ac=60, pv=55)
        assert cpi == pytest.approx(50 / 60)
        assert spi == pytest.approx(50 / 55)

    def test_zero_denominators_use_default(self):
        """Zero AC and PV return the on-plan default, never NaN/Infinity."""
        cpi, spi = compute_indices(ev=5, ac=0, pv=0)
        assert cpi == 1.0
        assert spi == 1.0

    def test_custom_default(self):
        """Callers can choose the zero-denominator default."""
        assert compute_indices(ev=5, ac=0, pv=0, default=0.0) == (0.0, 0.0)

    def test_negative_denominator_uses_default(self):
        """Only a strictly positive AC/PV is divided by."""
        assert compute_indices(ev=5, ac=-1, pv=-2) == (1.0, 1.0)

    def test_no_rounding(self):
        """Full precision is kept."""
        cpi, _ = compute_indices(ev=1, ac=3, pv=1)
        assert cpi == 1 / 3


class TestComputeEVM:
    """Tests for compute_evm on records."""

    def test_division_guard(self):
        """AC=0 and PV=0 give the default for both indices."""
        result = compute_evm(make_project(ac=0, ev=5, pv=0))
        assert result.cpi == 1.0
        assert result.spi == 1.0
        assert math.isfinite(result.cpi) and math.isfinite(result.spi)

    def test_variances(self):
        """CV, SV and VAC follow their definitions."""
        result = compute_evm(make_project(bac=100, eac=110, pv=55, ev=50, ac=60, schedule_deviation_days=7))
        assert result.cost_variance == pytest.approx(-10)
        assert result.schedule_variance == pytest.approx(-5)
        assert result.cost_deviation == pytest.approx(-10)
        assert result.schedule_variance_days == 7

    def test_percentages(self):
        """Percent complete and budget used are relative to BAC."""
        result = compute_evm(make_project(bac=200, ev=50, ac=80))
        assert result.percent_complete == pytest.approx(25.0)
        assert result.percent_budget_used == pytest.approx(40.0)

    def test_percentages_with_zero_bac(self):
        """Zero BAC gives zero percentages."""
        result = compute_evm(make_project(bac=0, ev=50, ac=80))
        assert result.percent_complete == 0.0
        assert result.percent_budget_used == 0.0

    def test_idempotent(self):
        """Two calls on the same record give identical results."""
        project = make_project(ev=12.3, ac=45.6, pv=7.89)
        assert compute_evm(project) == compute_evm(project)

    def test_bad_fields_coerced(self):
        """Missing, None and NaN fields count as zero."""
        loose = SimpleNamespace(ev=float('nan'), ac=None, pv='abc')
        result = compute_evm(loose)
        assert result.cpi == 1.0
        assert result.spi == 1.0
        assert result.cost_deviation == 0.0

    def test_input_not_modified(self):
        """The record is read-only input."""
        project = make_project(ev=10, ac=5)
        before = project.to_dict()
        compute_evm(project)
        assert project.to_dict() == before


class TestCostDeviation:
    """Tests for VAC."""

    def test_positive_is_under_budget(self):
        assert compute_cost_deviation(100, 90) == 10

    def test_negative_is_over_budget(self):
        assert compute_cost_deviation(100, 130) == -30
