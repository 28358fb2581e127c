"""Project form UI component."""

import dataclasses
from typing import Optional

import streamlit as st

from config.constants import (
    PROJECT_TYPES,
    PROJECT_CATEGORIES,
    PROJECT_STAGES,
    COMPONENT_TYPES,
    TASK_STATUSES,
    RISK_LEVELS,
)
from core.evm_engine import compute_cost_deviation, compute_indices
from core.utils import to_float
from models.project import ProjectRecord
from services.form_service import (
    components_frame,
    tasks_frame,
    components_from_frame,
    input_bounds,
    tasks_from_frame,
)
from services.formatting_service import FormattingService


class ProjectFormComponent:
    """Create/edit form for a project record."""

    def __init__(self, formatter: FormattingService = None):
        self.formatter = formatter or FormattingService()

    def render(self, initial: Optional[ProjectRecord] = None) -> Optional[ProjectRecord]:
        """Render the form; return the edited record when Save is pressed."""
        base = initial or ProjectRecord.blank()
        key = base.id or "new"
        values = {}

        st.markdown("### 1. Project Passport")
        col1, col2, col3 = st.columns(3)
        with col1:
            values['code'] = st.text_input("Project Code *", value=base.code, key=f"code_{key}",
                                           placeholder="e.g. CAPEX-24-001")
            values['type'] = st.selectbox("Type", PROJECT_TYPES, index=self._index(PROJECT_TYPES, base.type),
                                          key=f"type_{key}")
        with col2:
            values['name'] = st.text_input("Project Name *", value=base.name, key=f"name_{key}")
            values['category'] = st.selectbox("Category", PROJECT_CATEGORIES,
                                              index=self._index(PROJECT_CATEGORIES, base.category),
                                              key=f"category_{key}")
        with col3:
            values['stage'] = st.selectbox("Stage", PROJECT_STAGES, index=self._index(PROJECT_STAGES, base.stage),
                                           key=f"stage_{key}")
            values['pm'] = st.text_input("Project Manager", value=base.pm, key=f"pm_{key}")
        values['business_owner'] = st.text_input("Business Owner", value=base.business_owner, key=f"owner_{key}")

        st.markdown("### 2. Schedule")
        col1, col2, col3, col4 = st.columns(4)
        values['start_date_plan'] = col1.text_input("Start (Plan)", value=base.start_date_plan, key=f"sdp_{key}")
        values['start_date_fact'] = col2.text_input("Start (Fact)", value=base.start_date_fact, key=f"sdf_{key}")
        values['end_date_plan'] = col3.text_input("End (Plan)", value=base.end_date_plan, key=f"edp_{key}")
        values['end_date_forecast'] = col4.text_input("End (Forecast)", value=base.end_date_forecast, key=f"edf_{key}")
        col1, col2 = st.columns(2)
        values['schedule_deviation_days'] = int(col1.number_input(
            "Schedule Deviation (days, + = late)", value=int(base.schedule_deviation_days), step=1,
            key=f"sdd_{key}"))
        values['is_critical_path'] = col2.checkbox("On Critical Path", value=bool(base.is_critical_path),
                                                   key=f"crit_{key}")

        st.markdown("### 3. Cost & EVM ($M)")
        col1, col2, col3 = st.columns(3)
        values['bac'] = self._number(col1, "BAC", base, 'bac', key, 0.0)
        values['eac'] = self._number(col2, "EAC", base, 'eac', key, 0.0)
        values['cost_reason'] = col3.text_input("Cost Deviation Reason", value=base.cost_reason, key=f"reason_{key}")
        col1, col2, col3 = st.columns(3)
        values['pv'] = self._number(col1, "Planned Value (PV)", base, 'pv', key, 0.0)
        values['ev'] = self._number(col2, "Earned Value (EV)", base, 'ev', key, 0.0)
        values['ac'] = self._number(col3, "Actual Cost (AC)", base, 'ac', key, 0.0)

        # Live preview, recomputed on every rerun
        cpi, spi = compute_indices(values['ev'], values['ac'], values['pv'])
        col1, col2, col3 = st.columns(3)
        col1.metric("CPI", self.formatter.format_performance_index(cpi))
        col2.metric("SPI", self.formatter.format_performance_index(spi))
        col3.metric("Cost Deviation (VAC)",
                    self.formatter.format_cost_deviation(compute_cost_deviation(values['bac'], values['eac'])))

        st.markdown("### 4. Physical Progress (%)")
        cols = st.columns(5)
        for col, (attr, label) in zip(cols, [('design_percent', 'Design'),
                                             ('smr_plan', 'Construction Plan'),
                                             ('smr_fact', 'Construction Fact'),
                                             ('equipment_percent', 'Procurement'),
                                             ('pnr_percent', 'Commissioning')]):
            values[attr] = self._number(col, label, base, attr, key, 0.0, 100.0)

        st.markdown("### 5. Risks & Constraints")
        cols = st.columns(5)
        for col, (attr, label) in zip(cols[:3], [('risk_schedule', 'Schedule Risk'),
                                                 ('risk_cost', 'Cost Risk'),
                                                 ('risk_contract', 'Contract Risk')]):
            current = getattr(base, attr)
            values[attr] = col.selectbox(label, list(RISK_LEVELS), format_func=RISK_LEVELS.get,
                                         index=list(RISK_LEVELS).index(current) if current in RISK_LEVELS else 0,
                                         key=f"{attr}_{key}")
        values['open_issues_count'] = int(self._number(cols[3], "Open Issues", base, 'open_issues_count',
                                                       key, 0, step=1))
        values['change_requests_count'] = int(self._number(cols[4], "Change Requests", base,
                                                           'change_requests_count', key, 0, step=1))

        st.markdown("### 6. Components")
        components_df = st.data_editor(
            components_frame(base.components),
            num_rows="dynamic",
            width="stretch",
            key=f"components_{key}",
            column_config={
                'id': None,
                'name': st.column_config.TextColumn("Name", required=True),
                'type': st.column_config.SelectboxColumn("Type", options=COMPONENT_TYPES, required=True),
                'progress': st.column_config.NumberColumn("Progress %", min_value=0, max_value=100, step=1),
            }
        )

        st.markdown("### 7. Tasks")
        tasks_df = st.data_editor(
            tasks_frame(base.tasks),
            num_rows="dynamic",
            width="stretch",
            key=f"tasks_{key}",
            column_config={
                'id': None,
                'title': st.column_config.TextColumn("Title", required=True),
                'category': st.column_config.TextColumn("Category"),
                'status': st.column_config.SelectboxColumn("Status", options=TASK_STATUSES, required=True),
                'assignee': st.column_config.TextColumn("Assignee"),
            }
        )

        if not st.button("💾 Save Project", type="primary", key=f"save_{key}"):
            return None

        return dataclasses.replace(
            base,
            components=components_from_frame(components_df),
            tasks=tasks_from_frame(tasks_df),
            **values
        )

    @staticmethod
    def _number(col, label, base, attr, key, min_value=None, max_value=None, step=None):
        """Number input showing the stored value as is, with a warning when it is out of range."""
        value = to_float(getattr(base, attr))
        bounds = input_bounds(value, min_value, max_value)
        if step is not None:
            value = int(value)
        requested = [b for b in (min_value, max_value) if b is not None]
        if len(bounds) < len(requested):
            col.warning(f"Stored {label} is out of range and will be rejected on save.")
        return col.number_input(label, value=value, step=step, key=f"{attr}_{key}", **bounds)

    @staticmethod
    def _index(options, value) -> int:
        return options.index(value) if value in options else 0
