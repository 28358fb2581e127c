"""
Query and selection helpers for project collections.

All functions return new lists; the source collection is never reordered.
Sorting relies on Python's stable sort, so ties keep their original order.
"""

from __future__ import annotations
from typing import Any, Iterable, List

from config.constants import PROBLEM_PROJECTS_LIMIT, TOP_BUDGET_LIMIT, TOP_RISKS_LIMIT
from core.classifier import classify_status, project_indices, risk_level
from core.utils import to_float
from models.evm import EVMThresholds, DEFAULT_THRESHOLDS, ProjectStatus


def filter_by_search(projects: Iterable[Any], query: str) -> List[Any]:
    """Case-insensitive substring match on code or name; empty query matches all."""
    needle = (query or '').lower()
    return [
        p for p in projects
        if needle in str(p.code or '').lower() or needle in str(p.name or '').lower()
    ]


def is_problem_project(project: Any, thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> bool:
    """CPI or SPI below the critical threshold, or cost risk at the high level."""
    cpi, spi = project_indices(project, thresholds)
    return (cpi < thresholds.critical_index
            or spi < thresholds.critical_index
            or risk_level(project.risk_cost) == thresholds.high_risk_level)


def top_problem_projects(projects: Iterable[Any], n: int = PROBLEM_PROJECTS_LIMIT,
                         thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> List[Any]:
    """Worst problem projects first (ascending CPI), at most ``n``."""
    problems = [p for p in projects if is_problem_project(p, thresholds)]
    problems.sort(key=lambda p: project_indices(p, thresholds)[0])
    return problems[:max(n, 0)]


def top_by_budget(projects: Iterable[Any], n: int = TOP_BUDGET_LIMIT) -> List[Any]:
    """Largest projects by BAC, at most ``n``."""
    ranked = sorted(projects, key=lambda p: to_float(p.bac), reverse=True)
    return ranked[:max(n, 0)]


def top_off_track_projects(projects: Iterable[Any], n: int = TOP_RISKS_LIMIT,
                           thresholds: EVMThresholds = DEFAULT_THRESHOLDS) -> List[Any]:
    """First ``n`` Off Track projects in collection order."""
    off_track = [p for p in projects if classify_status(p, thresholds) == ProjectStatus.OFF_TRACK]
    return off_track[:max(n, 0)]
