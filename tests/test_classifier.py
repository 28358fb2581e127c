"""Tests for health, status and badge classification."""

import pytest

from core.classifier import (
    classify_health,
    classify_indices,
    classify_status,
    index_severity,
    risk_severity,
    component_progress_bucket,
    is_progress_lagging,
    is_eac_overrun,
    task_status_counts,
)
from models.evm import EVMThresholds, Health, ProjectStatus, Severity
from models.project import ProjectTask
from tests.factories import make_project


class TestClassifyIndices:
    """Tests for the Critical / Healthy / Watch precedence."""

    @pytest.mark.parametrize("cpi, expected", [
        (0.9, Health.WATCH),
        (0.90001, Health.WATCH),
        (0.89999, Health.CRITICAL),
    ])
    def test_critical_boundary_is_strict(self, cpi, expected):
        """Exactly 0.9 is not Critical."""
        assert classify_indices(cpi, 1.0) == expected

    def test_either_index_low_is_critical(self):
        assert classify_indices(1.2, 0.5) == Health.CRITICAL
        assert classify_indices(0.5, 1.2) == Health.CRITICAL

    def test_critical_takes_precedence(self):
        """A low index wins over a high one."""
        assert classify_indices(2.0, 0.85) == Health.CRITICAL

    def test_both_above_one_is_healthy(self):
        assert classify_indices(1.01, 1.01) == Health.HEALTHY

    def test_index_at_one_is_watch(self):
        """Healthy needs both indices strictly above 1.0."""
        assert classify_indices(1.125, 1.0) == Health.WATCH

    def test_nan_falls_through_to_watch(self):
        assert classify_indices(float('nan'), float('nan')) == Health.WATCH

    def test_non_numeric_falls_through_to_watch(self):
        assert classify_indices(None, 'x') == Health.WATCH

    def test_custom_thresholds(self):
        strict = EVMThresholds(critical_index=0.95)
        assert classify_indices(0.92, 1.0, strict) == Health.CRITICAL


class TestClassifyHealth:
    """Tests for classify_health on records."""

    def test_uses_recomputed_indices(self):
        """Indices come from PV/EV/AC, not from any stored value."""
        project = make_project(ev=80, ac=100, pv=80)
        assert classify_health(project) == Health.CRITICAL

    def test_not_started_project_is_watch(self):
        """Zero AC and PV give default indices of 1.0."""
        project = make_project(ev=0, ac=0, pv=0)
        assert classify_health(project) == Health.WATCH


class TestClassifyStatus:
    """Tests for On Track / At Risk / Off Track."""

    def test_on_track(self):
        assert classify_status(make_project(ev=50, ac=50, pv=50)) == ProjectStatus.ON_TRACK

    def test_index_below_critical_is_at_risk(self):
        assert classify_status(make_project(ev=85, ac=100, pv=85)) == ProjectStatus.AT_RISK

    def test_any_high_risk_is_at_risk(self):
        assert classify_status(make_project(risk_contract=3)) == ProjectStatus.AT_RISK
        assert classify_status(make_project(risk_schedule=3)) == ProjectStatus.AT_RISK

    def test_index_below_off_track_threshold(self):
        assert classify_status(make_project(ev=70, ac=100, pv=70)) == ProjectStatus.OFF_TRACK

    def test_schedule_and_cost_risk_high_is_off_track(self):
        project = make_project(risk_schedule=3, risk_cost=3)
        assert classify_status(project) == ProjectStatus.OFF_TRACK

    def test_off_track_boundary_is_strict(self):
        """An index of exactly 0.8 is At Risk, not Off Track."""
        assert classify_status(make_project(ev=80, ac=100, pv=80)) == ProjectStatus.AT_RISK

    @pytest.mark.parametrize("level", [0, 4, 7, -1, None, 'high', float('nan')])
    def test_out_of_range_risk_falls_through(self, level):
        """Unexpected risk levels are treated as low and never raise."""
        project = make_project(risk_schedule=level, risk_cost=level, risk_contract=level)
        assert classify_status(project) == ProjectStatus.ON_TRACK

    def test_custom_thresholds(self):
        lenient = EVMThresholds(critical_index=0.5, off_track_index=0.4)
        project = make_project(ev=70, ac=100, pv=70)
        assert classify_status(project, lenient) == ProjectStatus.ON_TRACK


class TestIndexSeverity:
    """Tests for the asymmetric badge band."""

    @pytest.mark.parametrize("value, expected", [
        (0.89, Severity.BAD),
        (0.9, Severity.NEUTRAL),
        (1.0, Severity.NEUTRAL),
        (1.05, Severity.NEUTRAL),
        (1.051, Severity.GOOD),
    ])
    def test_band(self, value, expected):
        assert index_severity(value) == expected

    def test_band_independent_of_health_threshold(self):
        """Moving the Critical threshold leaves the badge band alone."""
        assert index_severity(0.92, EVMThresholds(critical_index=0.95)) == Severity.NEUTRAL

    def test_custom_bad_badge(self):
        assert index_severity(0.92, EVMThresholds(bad_badge=0.95)) == Severity.BAD

    def test_invalid_value_is_neutral(self):
        assert index_severity(float('nan')) == Severity.NEUTRAL
        assert index_severity(None) == Severity.NEUTRAL


class TestIndicators:
    """Tests for the smaller indicator helpers."""

    @pytest.mark.parametrize("level, expected", [
        (1, 'low'), (2, 'medium'), (3, 'high'), (9, 'low'), (None, 'low'),
    ])
    def test_risk_severity(self, level, expected):
        assert risk_severity(level) == expected

    @pytest.mark.parametrize("progress, expected", [
        (100, 'complete'), (51, 'advanced'), (50, 'early'), (0, 'early'),
    ])
    def test_component_progress_bucket(self, progress, expected):
        assert component_progress_bucket(progress) == expected

    def test_progress_lagging(self):
        assert is_progress_lagging(make_project(smr_plan=55, smr_fact=44))
        assert not is_progress_lagging(make_project(smr_plan=55, smr_fact=45))

    def test_eac_overrun(self):
        assert is_eac_overrun(make_project(bac=100, eac=101))
        assert not is_eac_overrun(make_project(bac=100, eac=100))

    def test_task_status_counts(self):
        project = make_project(tasks=(
            ProjectTask(id='1', status='Done'),
            ProjectTask(id='2', status='Done'),
            ProjectTask(id='3', status='Pending'),
        ))
        assert task_status_counts(project) == {'Pending': 1, 'In Progress': 0, 'Done': 2}

    def test_task_status_counts_no_tasks(self):
        assert task_status_counts(make_project()) == {'Pending': 0, 'In Progress': 0, 'Done': 0}
