"""
Portfolio aggregation.

Reduces a collection of project records to portfolio KPIs. Two different
rollup rules are used on purpose:
- portfolio CPI is a ratio of sums (sum EV / sum AC), the EVM convention;
- portfolio SPI is the simple mean of the per-project SPIs.

Every division is guarded, so an empty portfolio yields zeros, never NaN.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Iterable, List

from config.constants import DEFAULT_PORTFOLIO_RATIO, PROJECT_STAGES
from core.classifier import classify_status, project_indices, risk_level
from core.utils import safe_divide, to_float
from models.evm import (
    EVMThresholds,
    DEFAULT_THRESHOLDS,
    PortfolioSummary,
    ProjectStatus,
    StageCount,
)

logger = logging.getLogger(__name__)


def aggregate_portfolio(projects: Iterable[Any], thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> PortfolioSummary:
    """Calculate portfolio-level KPIs.

    Args:
        projects: Project records (not modified)
        thresholds: Risk level and delay thresholds

    Returns:
        A fresh PortfolioSummary
    """
    projects = list(projects)
    if not projects:
        return PortfolioSummary()

    total_bac = sum(to_float(p.bac) for p in projects)
    total_ev = sum(to_float(p.ev) for p in projects)
    total_ac = sum(to_float(p.ac) for p in projects)
    total_eac = sum(to_float(p.eac) for p in projects)

    spis = [project_indices(p, thresholds)[1] for p in projects]

    high = thresholds.high_risk_level
    critical_risk_count = sum(
        1 for p in projects
        if risk_level(p.risk_schedule) == high or risk_level(p.risk_cost) == high
    )
    delayed_count = sum(
        1 for p in projects
        if to_float(p.schedule_deviation_days) > thresholds.delay_days
    )
    off_track_count = sum(
        1 for p in projects
        if classify_status(p, thresholds) == ProjectStatus.OFF_TRACK
    )

    summary = PortfolioSummary(
        total_bac=total_bac,
        portfolio_cpi=safe_divide(total_ev, total_ac, DEFAULT_PORTFOLIO_RATIO),
        portfolio_spi=safe_divide(sum(spis), len(spis), DEFAULT_PORTFOLIO_RATIO),
        critical_risk_count=critical_risk_count,
        delayed_count=delayed_count,
        project_count=len(projects),
        total_ev=total_ev,
        total_ac=total_ac,
        total_eac=total_eac,
        off_track_count=off_track_count,
    )
    logger.debug(f"Portfolio summary over {len(projects)} projects: {summary}")
    return summary


def stage_funnel(projects: Iterable[Any]) -> List[StageCount]:
    """Project count per funnel stage, in funnel order, zero stages included."""
    projects = list(projects)
    total = len(projects)
    funnel = []
    for stage in PROJECT_STAGES:
        count = sum(1 for p in projects if p.stage == stage)
        funnel.append(StageCount(stage=stage, count=count, share_percent=safe_divide(count, total, 0.0) * 100.0))
    return funnel


def status_counts(projects: Iterable[Any], thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> Dict[str, int]:
    """Number of projects per registry status."""
    counts = {status.value: 0 for status in ProjectStatus}
    for project in projects:
        counts[classify_status(project, thresholds).value] += 1
    return counts
