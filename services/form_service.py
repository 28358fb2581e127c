"""Conversions between project children and editable DataFrames."""

from __future__ import annotations
from typing import Any, Dict, Iterable, Tuple

import pandas as pd

from config.constants import NEW_COMPONENT_NAME, NEW_TASK_TITLE, NEW_TASK_CATEGORY
from core.utils import to_float
from models.project import ProjectComponent, ProjectTask
from services.project_store import generate_id


COMPONENT_COLUMNS = ['id', 'name', 'type', 'progress']
TASK_COLUMNS = ['id', 'title', 'category', 'status', 'assignee']


def _cell(value: Any, default: Any = None) -> Any:
    """Value of an editor cell, ``default`` when empty."""
    if value is None or (not isinstance(value, str) and pd.isna(value)):
        return default
    if isinstance(value, str) and not value.strip():
        return default
    return value


def input_bounds(value: Any, min_value: Any = None, max_value: Any = None) -> Dict[str, Any]:
    """``number_input`` bounds that admit the stored value.

    A bound the value already violates is left out, so the value is shown as
    stored and ``ProjectValidator`` reports it on save.
    """
    value = to_float(value)
    bounds = {}
    if min_value is not None and value >= min_value:
        bounds['min_value'] = min_value
    if max_value is not None and value <= max_value:
        bounds['max_value'] = max_value
    return bounds


def components_frame(components: Iterable[ProjectComponent]) -> pd.DataFrame:
    return pd.DataFrame([c.to_dict() for c in components], columns=COMPONENT_COLUMNS)


def tasks_frame(tasks: Iterable[ProjectTask]) -> pd.DataFrame:
    return pd.DataFrame([t.to_dict() for t in tasks], columns=TASK_COLUMNS)


def components_from_frame(df: pd.DataFrame) -> Tuple[ProjectComponent, ...]:
    """Rebuild components from editor rows; rows added in the editor get a new id."""
    components = []
    for row in df.to_dict('records'):
        components.append(ProjectComponent(
            id=str(_cell(row.get('id')) or generate_id()),
            name=str(_cell(row.get('name'), NEW_COMPONENT_NAME)),
            type=str(_cell(row.get('type'), 'Construction')),
            progress=to_float(_cell(row.get('progress'), 0.0)),
        ))
    return tuple(components)


def tasks_from_frame(df: pd.DataFrame) -> Tuple[ProjectTask, ...]:
    """Rebuild tasks from editor rows; rows added in the editor get a new id."""
    tasks = []
    for row in df.to_dict('records'):
        assignee = _cell(row.get('assignee'))
        tasks.append(ProjectTask(
            id=str(_cell(row.get('id')) or generate_id()),
            title=str(_cell(row.get('title'), NEW_TASK_TITLE)),
            category=str(_cell(row.get('category'), NEW_TASK_CATEGORY)),
            status=str(_cell(row.get('status'), 'Pending')),
            assignee=str(assignee) if assignee is not None else None,
        ))
    return tuple(tasks)
