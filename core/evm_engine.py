"""
EVM Calculation Engine - Earned Value Management indices for a single project

Every function in this module is pure: it reads the fields it needs from the
record it is handed and returns a new value. Nothing is rounded here;
rounding to two decimals is a display concern (see FormattingService).
"""

from __future__ import annotations
import logging
from typing import Any, Tuple

from config.constants import DEFAULT_INDEX_ON_ZERO
from core.utils import safe_divide, to_float
from models.evm import EVMResult

# Set up logging
logger = logging.getLogger(__name__)


# ============================================================================
# SECTION 1: INDEX FORMULAS
# ============================================================================

def compute_indices(ev: Any, ac: Any, pv: Any, default: float = DEFAULT_INDEX_ON_ZERO) -> Tuple[float, float]:
    """Calculate (CPI, SPI) from loose EV/AC/PV values.

    CPI = EV / AC when AC > 0, SPI = EV / PV when PV > 0. A zero
    denominator yields ``default`` (1.0, "on plan") so a project that has not
    incurred cost yet is not flagged as over budget.
    """
    ev = to_float(ev)
    cpi = safe_divide(ev, to_float(ac), default)
    spi = safe_divide(ev, to_float(pv), default)
    return cpi, spi


def compute_cost_deviation(bac: Any, eac: Any) -> float:
    """Variance at Completion (BAC - EAC); positive is favorable."""
    return to_float(bac) - to_float(eac)


# ============================================================================
# SECTION 2: MAIN API
# ============================================================================

def compute_evm(project: Any, default: float = DEFAULT_INDEX_ON_ZERO) -> EVMResult:
    """Calculate the EVM projection of a project record.

    Args:
        project: Any object exposing ``pv``, ``ev``, ``ac``, ``bac``, ``eac``
            and ``schedule_deviation_days`` attributes (normally a
            ``ProjectRecord``)
        default: Index returned when AC or PV is zero

    Returns:
        EVMResult with CPI, SPI, CV, SV, VAC and percentages. Never raises;
        missing or non-numeric fields count as zero.
    """
    pv = to_float(getattr(project, 'pv', None))
    ev = to_float(getattr(project, 'ev', None))
    ac = to_float(getattr(project, 'ac', None))
    bac = to_float(getattr(project, 'bac', None))
    eac = to_float(getattr(project, 'eac', None))

    cpi, spi = compute_indices(ev, ac, pv, default)

    result = EVMResult(
        cpi=cpi,
        spi=spi,
        cost_variance=ev - ac,
        schedule_variance=ev - pv,
        cost_deviation=compute_cost_deviation(bac, eac),
        schedule_variance_days=int(to_float(getattr(project, 'schedule_deviation_days', None))),
        percent_complete=safe_divide(ev, bac, 0.0) * 100.0,
        percent_budget_used=safe_divide(ac, bac, 0.0) * 100.0,
    )
    logger.debug(f"EVM for {getattr(project, 'code', '?')}: CPI={result.cpi}, SPI={result.spi}")
    return result
