"""Tests for display formatting and table builders."""

import pytest

from models.evm import DisplayConfig
from services.formatting_service import FormattingService, REGISTRY_COLUMNS, PROBLEM_COLUMNS
from tests.factories import make_project


@pytest.fixture
def formatter():
    return FormattingService()


class TestFormatValues:
    """Tests for the scalar formatters."""

    def test_currency(self, formatter):
        assert formatter.format_currency(12500) == "$12,500M"
        assert formatter.format_currency(1.5, decimals=1) == "$1.5M"
        assert formatter.format_currency(None) == "—"

    def test_currency_config(self):
        formatter = FormattingService(DisplayConfig(currency_symbol='€', currency_postfix='K'))
        assert formatter.format_currency(10) == "€10K"

    def test_percentage(self, formatter):
        assert formatter.format_percentage(45.4) == "45%"
        assert formatter.format_percentage('x') == "—"

    def test_performance_index(self, formatter):
        assert formatter.format_performance_index(50 / 60) == "0.83"
        assert formatter.format_performance_index(float('nan')) == "N/A"
        assert formatter.format_performance_index(1.23456, decimals=3) == "1.235"

    def test_round_index(self, formatter):
        assert formatter.round_index(0.83333) == 0.83
        assert formatter.round_index(None) is None

    def test_date(self, formatter):
        assert formatter.format_date('2025-03-01') == '2025-03-01'
        assert formatter.format_date('') == '—'
        assert formatter.format_date('N/A') == '—'
        assert formatter.format_date('TBD') == 'TBD'

    def test_date_day_first(self):
        formatter = FormattingService(DisplayConfig(date_format='DD-MM-YYYY'))
        assert formatter.format_date('2025-03-01') == '01-03-2025'

    def test_cost_deviation(self, formatter):
        assert formatter.format_cost_deviation(700) == "$700M Under"
        assert formatter.format_cost_deviation(-700) == "$700M Over"

    def test_schedule_deviation(self, formatter):
        assert formatter.format_schedule_deviation(47) == "47 Days Late"
        assert formatter.format_schedule_deviation(-3) == "3 Days Early"
        assert formatter.format_schedule_deviation(0) == "0 Days Early"

    @pytest.mark.parametrize("value, marker", [(0.83, '🔴'), (1.0, '🔵'), (1.2, '🟢')])
    def test_index_badge(self, formatter, value, marker):
        assert formatter.format_index_badge('CPI', value).startswith(marker)


class TestTables:
    """Tests for the DataFrame builders."""

    def test_registry_frame(self, formatter, scenario_projects):
        df = formatter.build_registry_frame(scenario_projects)
        assert list(df.columns) == REGISTRY_COLUMNS
        assert list(df['Code']) == ['P1', 'P2', 'P3']
        assert list(df['Health']) == ['Critical', 'Critical', 'Watch']
        assert list(df['Status']) == ['At Risk', 'Off Track', 'On Track']
        assert df.loc[0, 'CPI'] == 0.83

    def test_registry_frame_empty(self, formatter):
        df = formatter.build_registry_frame([])
        assert df.empty
        assert list(df.columns) == REGISTRY_COLUMNS

    def test_problem_frame(self, formatter):
        df = formatter.build_problem_frame([make_project(bac=100, eac=130, pm='J. Doe', risk_cost=3)])
        assert list(df.columns) == PROBLEM_COLUMNS
        assert df.loc[0, 'Cost Deviation'] == "$30M Over"
        assert df.loc[0, 'PM'] == 'J. Doe'
