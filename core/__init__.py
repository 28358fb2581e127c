"""
Core calculation engine for the EVM Portfolio Dashboard
"""

# Explicit imports for IDE support and documentation
from .utils import (
    # Validation & Safety
    is_valid_finite_number,
    to_float,
    safe_divide,
)

from .evm_engine import (
    # Main API
    compute_evm,

    # Formulas
    compute_indices,
    compute_cost_deviation,
)

from .portfolio_engine import (
    aggregate_portfolio,
    stage_funnel,
    status_counts,
)

from .classifier import (
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

from .query import (
    filter_by_search,
    is_problem_project,
    top_problem_projects,
    top_by_budget,
    top_off_track_projects,
)

__all__ = [
    # Main APIs
    'compute_evm',
    'aggregate_portfolio',
    'classify_health',
    'classify_status',
    'filter_by_search',
    'top_problem_projects',
    'top_by_budget',

    # EVM formulas
    'compute_indices',
    'compute_cost_deviation',

    # Portfolio breakdowns
    'stage_funnel',
    'status_counts',
    'top_off_track_projects',
    'is_problem_project',

    # Indicators
    'classify_indices',
    'index_severity',
    'risk_severity',
    'component_progress_bucket',
    'is_progress_lagging',
    'is_eac_overrun',
    'task_status_counts',

    # Utility functions (from core.utils)
    'is_valid_finite_number',
    'to_float',
    'safe_divide',
]
