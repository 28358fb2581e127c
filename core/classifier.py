"""
Project classification rules.

Two independent axes are computed per project:
- health (Critical / Healthy / Watch) from CPI and SPI only;
- status (On Track / At Risk / Off Track) from CPI, SPI and the risk levels.

Indices are always recomputed from the record's PV/EV/AC, never read from a
stored value. Values outside their declared ranges (NaN indices, risk levels
other than 1-3) fall through to the least alarming bucket.
"""

from __future__ import annotations
import logging
from typing import Any, Dict, Optional, Tuple

from config.constants import RISK_LEVELS, TASK_STATUSES
from core.evm_engine import compute_indices
from core.utils import is_valid_finite_number, to_float
from models.evm import EVMThresholds, DEFAULT_THRESHOLDS, Health, ProjectStatus, Severity

logger = logging.getLogger(__name__)


def project_indices(project: Any, thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> Tuple[float, float]:
    """(CPI, SPI) of a record, recomputed from its PV/EV/AC."""
    return compute_indices(
        getattr(project, 'ev', None),
        getattr(project, 'ac', None),
        getattr(project, 'pv', None),
        thresholds.default_index,
    )


def risk_level(value: Any) -> Optional[int]:
    """Return the risk level as 1, 2 or 3, or None when out of range."""
    if is_valid_finite_number(value) and float(value) in RISK_LEVELS:
        return int(value)
    logger.warning(f"Unexpected risk level {value!r}, treated as low")
    return None


# ============================================================================
# HEALTH
# ============================================================================

def classify_indices(cpi: Any, spi: Any, thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> Health:
    """Health bucket for a (CPI, SPI) pair.

    Precedence: any index strictly below the critical threshold is Critical;
    both strictly above the healthy threshold is Healthy; anything else,
    including NaN, is Watch.
    """
    try:
        if cpi < thresholds.critical_index or spi < thresholds.critical_index:
            return Health.CRITICAL
        if cpi > thresholds.healthy_index and spi > thresholds.healthy_index:
            return Health.HEALTHY
    except TypeError:
        logger.warning(f"Non-numeric indices CPI={cpi!r}, SPI={spi!r}, treated as Watch")
    return Health.WATCH


def classify_health(project: Any, thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> Health:
    """Health bucket used for table badges and bubble colour."""
    cpi, spi = project_indices(project, thresholds)
    return classify_indices(cpi, spi, thresholds)


# ============================================================================
# STATUS
# ============================================================================

def classify_status(project: Any, thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> ProjectStatus:
    """Registry status of a project.

    - Off Track: CPI or SPI below the off-track threshold, or both schedule
      and cost risk at the high level.
    - At Risk: CPI or SPI below the critical threshold, or any of the three
      risks at the high level.
    - On Track: everything else.
    """
    cpi, spi = project_indices(project, thresholds)
    high = thresholds.high_risk_level
    schedule_risk = risk_level(getattr(project, 'risk_schedule', None))
    cost_risk = risk_level(getattr(project, 'risk_cost', None))
    contract_risk = risk_level(getattr(project, 'risk_contract', None))

    if (cpi < thresholds.off_track_index or spi < thresholds.off_track_index
            or (schedule_risk == high and cost_risk == high)):
        return ProjectStatus.OFF_TRACK
    if (cpi < thresholds.critical_index or spi < thresholds.critical_index
            or high in (schedule_risk, cost_risk, contract_risk)):
        return ProjectStatus.AT_RISK
    return ProjectStatus.ON_TRACK


# ============================================================================
# BADGES & INDICATORS
# ============================================================================

def index_severity(value: Any, thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> Severity:
    """Badge severity for one index: < 0.9 bad, > 1.05 good, else neutral."""
    if not is_valid_finite_number(value):
        return Severity.NEUTRAL
    value = float(value)
    if value < thresholds.bad_badge:
        return Severity.BAD
    if value > thresholds.good_badge:
        return Severity.GOOD
    return Severity.NEUTRAL


def risk_severity(level: Any) -> str:
    """Map a risk level to 'low', 'medium' or 'high' (unknown -> 'low')."""
    level = risk_level(level)
    return RISK_LEVELS.get(level, 'Low').lower()


def component_progress_bucket(progress: Any) -> str:
    """Colour bucket for a component progress bar."""
    progress = to_float(progress)
    if progress == 100:
        return 'complete'
    if progress > 50:
        return 'advanced'
    return 'early'


def is_progress_lagging(project: Any, thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> bool:
    """True when actual construction trails plan by more than the tolerance."""
    smr_fact = to_float(getattr(project, 'smr_fact', None))
    smr_plan = to_float(getattr(project, 'smr_plan', None))
    return smr_fact < smr_plan - thresholds.progress_lag_tolerance


def is_eac_overrun(project: Any) -> bool:
    """True when the forecast cost exceeds the approved budget."""
    return to_float(getattr(project, 'eac', None)) > to_float(getattr(project, 'bac', None))


def task_status_counts(project: Any) -> Dict[str, int]:
    """Count a project's tasks per status, every status present."""
    counts = {status: 0 for status in TASK_STATUSES}
    for task in getattr(project, 'tasks', None) or ():
        if task.status in counts:
            counts[task.status] += 1
    return counts
