"""Tests for portfolio aggregation."""

import pytest

from core.portfolio_engine import aggregate_portfolio, stage_funnel, status_counts
from models.evm import EVMThresholds, PortfolioSummary
from tests.factories import make_project


class TestAggregatePortfolio:
    """Tests for aggregate_portfolio."""

    def test_empty_portfolio_is_all_zero(self):
        """No projects gives zeros everywhere, never NaN."""
        summary = aggregate_portfolio([])
        assert summary == PortfolioSummary()
        assert summary.total_bac == 0
        assert summary.portfolio_cpi == 0
        assert summary.portfolio_spi == 0
        assert summary.critical_risk_count == 0
        assert summary.delayed_count == 0

    def test_cpi_is_ratio_of_sums(self):
        """Portfolio CPI is sum EV / sum AC, not the mean of project CPIs."""
        a = make_project(id='a', ev=10, ac=10, pv=10)
        b = make_project(id='b', ev=10, ac=5, pv=10)
        summary = aggregate_portfolio([a, b])
        assert summary.portfolio_cpi == pytest.approx(20 / 15)
        assert summary.portfolio_cpi != pytest.approx((1.0 + 2.0) / 2)

    def test_spi_is_mean_of_project_spis(self):
        a = make_project(id='a', ev=10, pv=10)
        b = make_project(id='b', ev=5, pv=20)
        summary = aggregate_portfolio([a, b])
        assert summary.portfolio_spi == pytest.approx((1.0 + 0.25) / 2)

    def test_zero_actual_cost_gives_zero_cpi(self):
        """Portfolio CPI falls back to 0.0 when nothing has been spent."""
        summary = aggregate_portfolio([make_project(ev=0, ac=0, pv=0)])
        assert summary.portfolio_cpi == 0.0
        assert summary.portfolio_spi == 1.0

    def test_totals(self, scenario_projects):
        summary = aggregate_portfolio(scenario_projects)
        assert summary.total_bac == 350
        assert summary.total_ev == 175
        assert summary.total_ac == 200
        assert summary.project_count == 3

    def test_critical_risk_count_uses_schedule_or_cost(self):
        """Contract risk alone does not count."""
        projects = [
            make_project(id='1', risk_schedule=3),
            make_project(id='2', risk_cost=3),
            make_project(id='3', risk_schedule=3, risk_cost=3),
            make_project(id='4', risk_contract=3),
        ]
        assert aggregate_portfolio(projects).critical_risk_count == 3

    def test_delayed_count_is_strictly_above_threshold(self):
        projects = [
            make_project(id='1', schedule_deviation_days=10),
            make_project(id='2', schedule_deviation_days=11),
            make_project(id='3', schedule_deviation_days=-30),
        ]
        assert aggregate_portfolio(projects).delayed_count == 1

    def test_custom_delay_threshold(self):
        projects = [make_project(schedule_deviation_days=5)]
        summary = aggregate_portfolio(projects, EVMThresholds(delay_days=3))
        assert summary.delayed_count == 1

    def test_off_track_count(self, scenario_projects):
        assert aggregate_portfolio(scenario_projects).off_track_count == 1

    def test_accepts_generator(self, scenario_projects):
        summary = aggregate_portfolio(p for p in scenario_projects)
        assert summary.project_count == 3

    def test_input_not_modified(self, scenario_projects):
        before = [p.to_dict() for p in scenario_projects]
        aggregate_portfolio(scenario_projects)
        assert [p.to_dict() for p in scenario_projects] == before


class TestStageFunnel:
    """Tests for stage_funnel."""

    def test_every_stage_in_order(self):
        projects = [
            make_project(id='1', stage='Execution'),
            make_project(id='2', stage='Execution'),
            make_project(id='3', stage='Idea'),
            make_project(id='4', stage='Closed'),
        ]
        funnel = stage_funnel(projects)
        assert [row.stage for row in funnel] == [
            'Idea', 'Feasibility', 'Planning', 'Execution', 'Commissioning', 'Closed'
        ]
        counts = {row.stage: row.count for row in funnel}
        assert counts['Execution'] == 2
        assert counts['Planning'] == 0
        shares = {row.stage: row.share_percent for row in funnel}
        assert shares['Execution'] == pytest.approx(50.0)

    def test_empty_portfolio(self):
        funnel = stage_funnel([])
        assert all(row.count == 0 and row.share_percent == 0 for row in funnel)


class TestStatusCounts:
    """Tests for status_counts."""

    def test_scenario(self, scenario_projects):
        assert status_counts(scenario_projects) == {'On Track': 1, 'At Risk': 1, 'Off Track': 1}

    def test_empty(self):
        assert status_counts([]) == {'On Track': 0, 'At Risk': 0, 'Off Track': 0}
