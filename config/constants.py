"""Application constants and configuration."""

import logging

# Application constants
APP_TITLE = "Portfolio Dashboard - EVM Analytics 📊"
CURRENCY_SYMBOL = "$"
CURRENCY_POSTFIX = "M"  # All money fields are in millions
DISPLAY_DECIMALS = 2
LOG_LEVEL = logging.INFO

# Session state keys
STORE_SESSION_KEY = "project_store"
SELECTED_PROJECT_KEY = "selected_project_id"
FLASH_MESSAGE_KEY = "flash_message"

# ============================================================================
# EVM THRESHOLDS
# ============================================================================

# Index returned by the calculator when AC or PV is zero ("on plan")
DEFAULT_INDEX_ON_ZERO = 1.0
# Portfolio ratios returned when there is nothing to aggregate
DEFAULT_PORTFOLIO_RATIO = 0.0

CRITICAL_INDEX_THRESHOLD = 0.9    # strictly below -> Critical
HEALTHY_INDEX_THRESHOLD = 1.0     # strictly above (both indices) -> Healthy
BAD_BADGE_THRESHOLD = 0.9         # strictly below -> bad badge
GOOD_BADGE_THRESHOLD = 1.05       # strictly above -> good badge
OFF_TRACK_INDEX_THRESHOLD = 0.8   # strictly below -> Off Track

HIGH_RISK_LEVEL = 3
DELAY_THRESHOLD_DAYS = 10
PROGRESS_LAG_TOLERANCE = 10.0     # percentage points of construction lag

# Query limits
PROBLEM_PROJECTS_LIMIT = 5
TOP_BUDGET_LIMIT = 5
TOP_RISKS_LIMIT = 3

# ============================================================================
# ENUMERATED VALUES
# ============================================================================

PROJECT_TYPES = ['CAPEX', 'OPEX', 'IT', 'HSE']
PROJECT_CATEGORIES = ['Large', 'Medium', 'Small']
PROJECT_STAGES = ['Idea', 'Feasibility', 'Planning', 'Execution', 'Commissioning', 'Closed']
COMPONENT_TYPES = ['Construction', 'Equipment', 'Design']
TASK_STATUSES = ['Pending', 'In Progress', 'Done']
RISK_LEVELS = {1: 'Low', 2: 'Medium', 3: 'High'}

PERCENT_FIELDS = ['design_percent', 'smr_plan', 'smr_fact', 'equipment_percent', 'pnr_percent']
RISK_FIELDS = ['risk_schedule', 'risk_cost', 'risk_contract']
MONEY_FIELDS = ['bac', 'pv', 'ev', 'ac']
COUNT_FIELDS = ['open_issues_count', 'change_requests_count']

# Defaults for a new record entered through the form
NEW_PROJECT_DEFAULTS = {
    'type': 'CAPEX',
    'category': 'Medium',
    'stage': 'Idea',
    'risk_schedule': 1,
    'risk_cost': 1,
    'risk_contract': 1,
    'is_critical_path': False,
}
NEW_COMPONENT_NAME = "New Component"
NEW_TASK_TITLE = "New Task"
NEW_TASK_CATEGORY = "General"

# ============================================================================
# COLOUR SCHEMES
# ============================================================================

HEALTH_COLORS = {
    'Critical': '#ef4444',  # Red
    'Healthy': '#22c55e',   # Green
    'Watch': '#3b82f6',     # Blue
}

STATUS_COLORS = {
    'On Track': '#10b981',
    'At Risk': '#f59e0b',
    'Off Track': '#ef4444',
}

RISK_COLORS = {
    'low': '#22c55e',
    'medium': '#eab308',
    'high': '#ef4444',
}

COMPONENT_PROGRESS_COLORS = {
    'complete': '#10b981',
    'advanced': '#3b82f6',
    'early': '#6366f1',
}

PROGRESS_SERIES = [
    ('design_percent', 'Design', '#6366f1'),
    ('equipment_percent', 'Procurement', '#8b5cf6'),
    ('smr_fact', 'Construction', '#3b82f6'),
    ('pnr_percent', 'Commissioning', '#10b981'),
]
