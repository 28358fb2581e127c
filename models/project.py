"""Project data models and validation."""

from __future__ import annotations
import dataclasses
from dataclasses import dataclass, field
from typing import Optional, Dict, Any, List, Tuple

from config.constants import (
    PROJECT_TYPES,
    PROJECT_CATEGORIES,
    PROJECT_STAGES,
    COMPONENT_TYPES,
    TASK_STATUSES,
    RISK_LEVELS,
    PERCENT_FIELDS,
    RISK_FIELDS,
    MONEY_FIELDS,
    COUNT_FIELDS,
    NEW_PROJECT_DEFAULTS,
    NEW_COMPONENT_NAME,
    NEW_TASK_TITLE,
    NEW_TASK_CATEGORY,
)


@dataclass(frozen=True)
class ProjectComponent:
    """A sub-deliverable of a project (e.g. "Turbine Gen 1")."""
    id: str
    name: str = NEW_COMPONENT_NAME
    type: str = 'Construction'
    progress: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class ProjectTask:
    """A tracked to-do item."""
    id: str
    title: str = NEW_TASK_TITLE
    category: str = NEW_TASK_CATEGORY
    status: str = 'Pending'
    assignee: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class ProjectRecord:
    """One tracked initiative.

    Records are immutable: an edit is a full replacement built with
    ``dataclasses.replace`` and upserted into the store by ``id``.
    ``cpi``, ``spi`` and ``cost_deviation`` are computed on every read and
    are never stored.
    """
    # Passport
    id: str = ''
    code: str = ''
    name: str = ''
    type: str = 'CAPEX'
    category: str = 'Medium'
    stage: str = 'Idea'
    pm: str = ''
    business_owner: str = ''

    # Schedule (opaque strings)
    start_date_plan: str = ''
    start_date_fact: str = ''
    end_date_plan: str = ''
    end_date_forecast: str = ''
    is_critical_path: bool = False
    schedule_deviation_days: int = 0

    # Cost (millions)
    bac: float = 0.0
    eac: float = 0.0
    cost_reason: str = ''

    # Physical progress (%)
    design_percent: float = 0.0
    smr_plan: float = 0.0
    smr_fact: float = 0.0
    equipment_percent: float = 0.0
    pnr_percent: float = 0.0

    # EVM inputs
    pv: float = 0.0
    ev: float = 0.0
    ac: float = 0.0

    # Risks & constraints
    risk_schedule: int = 1
    risk_cost: int = 1
    risk_contract: int = 1
    open_issues_count: int = 0
    change_requests_count: int = 0

    # Detailed tracking
    components: Tuple[ProjectComponent, ...] = field(default_factory=tuple)
    tasks: Tuple[ProjectTask, ...] = field(default_factory=tuple)

    @property
    def evm(self):
        """EVM projection of this record (see ``core.evm_engine.compute_evm``)."""
        from core.evm_engine import compute_evm
        return compute_evm(self)

    @property
    def cpi(self) -> float:
        return self.evm.cpi

    @property
    def spi(self) -> float:
        return self.evm.spi

    @property
    def cost_deviation(self) -> float:
        """VAC = BAC - EAC, positive means under budget."""
        return self.evm.cost_deviation

    @classmethod
    def blank(cls) -> 'ProjectRecord':
        """Record pre-filled with the form defaults."""
        return cls(**NEW_PROJECT_DEFAULTS)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ProjectRecord':
        """Build a record from a plain dict.

        Unknown keys are ignored, which includes any stale ``cpi``/``spi``
        values: the indices are always recomputed from ``pv``/``ev``/``ac``.
        """
        known = {f.name for f in dataclasses.fields(cls)}
        values = {k: v for k, v in data.items() if k in known}
        values['components'] = tuple(
            c if isinstance(c, ProjectComponent) else ProjectComponent(**c)
            for c in data.get('components') or ()
        )
        values['tasks'] = tuple(
            t if isinstance(t, ProjectTask) else ProjectTask(**t)
            for t in data.get('tasks') or ()
        )
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to a plain dict that ``from_dict`` accepts. Derived indices are not included."""
        data = {f.name: getattr(self, f.name) for f in dataclasses.fields(self)}
        data['components'] = [c.to_dict() for c in self.components]
        data['tasks'] = [t.to_dict() for t in self.tasks]
        return data


class ProjectValidator:
    """Validation utilities for form input.

    The engine never validates; these checks run before a record is saved.
    """

    @staticmethod
    def validate_numeric_input(value: Any, field_name: str, min_val: float = None, max_val: float = None) -> float:
        """Validate numeric input with optional range checking."""
        try:
            num_value = float(value)
        except (ValueError, TypeError) as e:
            raise ValueError(f"Invalid {field_name}: {value}") from e
        if num_value != num_value or num_value in (float('inf'), float('-inf')):
            raise ValueError(f"Invalid {field_name}: {value}")
        if min_val is not None and num_value < min_val:
            raise ValueError(f"{field_name} must be >= {min_val}")
        if max_val is not None and num_value > max_val:
            raise ValueError(f"{field_name} must be <= {max_val}")
        return num_value

    @classmethod
    def validate_record(cls, record: ProjectRecord) -> List[str]:
        """Return a list of error messages; an empty list means the record can be saved."""
        errors = []

        if not str(record.code).strip() or not str(record.name).strip():
            errors.append("Code and Name are required")

        for attr, options in (('type', PROJECT_TYPES),
                              ('category', PROJECT_CATEGORIES),
                              ('stage', PROJECT_STAGES)):
            if getattr(record, attr) not in options:
                errors.append(f"{attr} must be one of {', '.join(options)}")

        checks = (
            [(name, 0.0, 100.0) for name in PERCENT_FIELDS]
            + [(name, 0.0, None) for name in MONEY_FIELDS]
            + [(name, 0.0, None) for name in COUNT_FIELDS]
        )
        for name, min_val, max_val in checks:
            try:
                cls.validate_numeric_input(getattr(record, name), name, min_val, max_val)
            except ValueError as e:
                errors.append(str(e))

        for name in RISK_FIELDS:
            if getattr(record, name) not in RISK_LEVELS:
                errors.append(f"{name} must be one of {sorted(RISK_LEVELS)}")

        for component in record.components:
            if component.type not in COMPONENT_TYPES:
                errors.append(f"Component '{component.name}' has unknown type {component.type}")
            try:
                cls.validate_numeric_input(component.progress, f"Component '{component.name}' progress", 0.0, 100.0)
            except ValueError as e:
                errors.append(str(e))

        for task in record.tasks:
            if task.status not in TASK_STATUSES:
                errors.append(f"Task '{task.title}' has unknown status {task.status}")

        return errors
