"""KPI card components."""

import streamlit as st

from config.constants import DELAY_THRESHOLD_DAYS
from core.classifier import classify_health, is_eac_overrun, is_progress_lagging, index_severity
from models.evm import PortfolioSummary, Severity
from services.formatting_service import FormattingService


class KPICardsComponent:
    """Renders portfolio and project KPI rows with ``st.metric``."""

    def __init__(self, formatter: FormattingService = None):
        self.formatter = formatter or FormattingService()

    def render_portfolio(self, summary: PortfolioSummary):
        """Level 1 portfolio KPIs."""
        col1, col2, col3, col4 = st.columns(4)

        with col1:
            st.metric(
                label="Total Budget (BAC)",
                value=self.formatter.format_currency(summary.total_bac),
                delta=f"{summary.project_count} projects",
                delta_color="off"
            )

        with col2:
            cpi = summary.portfolio_cpi
            st.metric(
                label="Portfolio CPI",
                value=self.formatter.format_performance_index(cpi),
                delta="Under Budget" if cpi >= 1 else "Over Budget",
                delta_color="normal" if cpi >= 1 else "inverse"
            )

        with col3:
            st.metric(
                label="Schedule Risk",
                value=f"{summary.delayed_count} Projects",
                delta=f"Delayed > {DELAY_THRESHOLD_DAYS} days",
                delta_color="inverse" if summary.delayed_count else "off"
            )

        with col4:
            st.metric(
                label="Critical Risks",
                value=str(summary.critical_risk_count),
                delta="High Impact/Prob",
                delta_color="inverse" if summary.critical_risk_count else "off"
            )

        st.caption(
            f"Portfolio SPI (mean of project SPIs): "
            f"{self.formatter.format_performance_index(summary.portfolio_spi)} · "
            f"Off Track projects: {summary.off_track_count}"
        )

    def render_project(self, project):
        """KPI row of the project detail page."""
        evm = project.evm
        col1, col2, col3, col4 = st.columns(4)

        with col1:
            st.metric(
                label="Budget Performance (CPI)",
                value=self.formatter.format_performance_index(evm.cpi),
                delta=self.formatter.format_cost_deviation(evm.cost_deviation),
                delta_color="inverse" if index_severity(evm.cpi) == Severity.BAD else "off"
            )

        with col2:
            st.metric(
                label="Schedule Performance (SPI)",
                value=self.formatter.format_performance_index(evm.spi),
                delta=self.formatter.format_schedule_deviation(evm.schedule_variance_days),
                delta_color="inverse" if index_severity(evm.spi) == Severity.BAD else "off"
            )

        with col3:
            st.metric(
                label="Physical Progress (SMR)",
                value=self.formatter.format_percentage(project.smr_fact),
                delta=f"Plan: {self.formatter.format_percentage(project.smr_plan)}",
                delta_color="inverse" if is_progress_lagging(project) else "off"
            )

        with col4:
            st.metric(
                label="Total Budget (EAC)",
                value=self.formatter.format_currency(project.eac),
                delta=f"Baseline: {self.formatter.format_currency(project.bac)}",
                delta_color="inverse" if is_eac_overrun(project) else "off"
            )

        st.caption(
            f"Health: {classify_health(project).value} · "
            f"{self.formatter.format_percentage(evm.percent_complete)} complete · "
            f"{self.formatter.format_percentage(evm.percent_budget_used)} of budget spent"
        )
