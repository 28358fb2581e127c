"""Result types and threshold configuration for the EVM engine."""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from config.constants import (
    DEFAULT_INDEX_ON_ZERO,
    DEFAULT_PORTFOLIO_RATIO,
    CRITICAL_INDEX_THRESHOLD,
    HEALTHY_INDEX_THRESHOLD,
    BAD_BADGE_THRESHOLD,
    GOOD_BADGE_THRESHOLD,
    OFF_TRACK_INDEX_THRESHOLD,
    HIGH_RISK_LEVEL,
    DELAY_THRESHOLD_DAYS,
    PROGRESS_LAG_TOLERANCE,
    CURRENCY_SYMBOL,
    CURRENCY_POSTFIX,
    DISPLAY_DECIMALS,
)


class Health(str, Enum):
    """Per-project health bucket used for badges and bubble colours."""
    CRITICAL = 'Critical'
    HEALTHY = 'Healthy'
    WATCH = 'Watch'


class ProjectStatus(str, Enum):
    """Registry status column."""
    ON_TRACK = 'On Track'
    AT_RISK = 'At Risk'
    OFF_TRACK = 'Off Track'


class Severity(str, Enum):
    """Badge severity for a single performance index."""
    GOOD = 'good'
    NEUTRAL = 'neutral'
    BAD = 'bad'


@dataclass(frozen=True)
class EVMThresholds:
    """Thresholds used by the classifier and the query layer."""
    default_index: float = DEFAULT_INDEX_ON_ZERO
    critical_index: float = CRITICAL_INDEX_THRESHOLD
    healthy_index: float = HEALTHY_INDEX_THRESHOLD
    bad_badge: float = BAD_BADGE_THRESHOLD
    good_badge: float = GOOD_BADGE_THRESHOLD
    off_track_index: float = OFF_TRACK_INDEX_THRESHOLD
    high_risk_level: int = HIGH_RISK_LEVEL
    delay_days: int = DELAY_THRESHOLD_DAYS
    progress_lag_tolerance: float = PROGRESS_LAG_TOLERANCE


DEFAULT_THRESHOLDS = EVMThresholds()


@dataclass(frozen=True)
class EVMResult:
    """Performance indices and variances derived from one project record.

    Values carry full float precision; rounding happens at display time.
    """
    cpi: float
    spi: float
    cost_variance: float
    schedule_variance: float
    cost_deviation: float
    schedule_variance_days: int
    percent_complete: float
    percent_budget_used: float


@dataclass(frozen=True)
class PortfolioSummary:
    """Portfolio-level KPIs."""
    total_bac: float = 0.0
    portfolio_cpi: float = DEFAULT_PORTFOLIO_RATIO
    portfolio_spi: float = DEFAULT_PORTFOLIO_RATIO
    critical_risk_count: int = 0
    delayed_count: int = 0
    project_count: int = 0
    total_ev: float = 0.0
    total_ac: float = 0.0
    total_eac: float = 0.0
    off_track_count: int = 0


@dataclass(frozen=True)
class StageCount:
    """One row of the project funnel."""
    stage: str
    count: int
    share_percent: float


@dataclass
class DisplayConfig:
    """Configuration for display formatting."""
    currency_symbol: str = CURRENCY_SYMBOL
    currency_postfix: str = CURRENCY_POSTFIX
    decimals: int = DISPLAY_DECIMALS
    date_format: str = 'YYYY-MM-DD'
