import logging

import streamlit as st

from components.kpi_cards import KPICardsComponent
from components.session import get_store, get_selected_project_id, open_form, pop_flash
from config.constants import RISK_COLORS, STATUS_COLORS
from core.classifier import classify_status, risk_severity, task_status_counts
from services.chart_service import build_component_progress, build_project_milestones
from services.formatting_service import FormattingService

logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="Project Details",
    page_icon="🔎",
    layout="wide",
    initial_sidebar_state="expanded"
)

store = get_store()
formatter = FormattingService()

project_id = get_selected_project_id()
if project_id is None:
    st.info("Select a project on the Dashboard or in the Registry.")
    st.stop()

try:
    project = store.get(project_id)
except ValueError as e:
    logger.error(f"Detail page could not load project: {e}")
    st.error(str(e))
    st.stop()

# Header
col1, col2, col3 = st.columns([4, 1, 1])
with col1:
    status = classify_status(project)
    st.title(f"{project.name}")
    st.markdown(
        f"`{project.code}` · PM: {project.pm or '—'} | Owner: {project.business_owner or '—'} · "
        f"<span style='color:{STATUS_COLORS[status.value]}; font-weight:600'>{status.value}</span>",
        unsafe_allow_html=True
    )
with col2:
    if st.button("✏️ Edit Project", type="primary", width="stretch"):
        open_form(project.id)
with col3:
    if st.button("🗑️ Delete", width="stretch"):
        store.delete(project.id)
        st.switch_page("pages/2_Project_Registry.py")

message = pop_flash()
if message:
    st.success(message)

KPICardsComponent(formatter).render_project(project)

col1, col2 = st.columns([2, 1])

with col1:
    if project.components:
        st.plotly_chart(build_component_progress(project), width="stretch")
    else:
        st.markdown("#### Detailed Component Progress")
        st.caption("No components defined.")

with col2:
    counts = task_status_counts(project)
    st.markdown(f"#### Tasks ({len(project.tasks)})")
    st.caption(" · ".join(f"{status}: {count}" for status, count in counts.items()))
    status_icons = {'Done': '✅', 'In Progress': '🔄', 'Pending': '⏳'}
    for task in project.tasks:
        assignee = f" — {task.assignee}" if task.assignee else ""
        st.markdown(f"{status_icons.get(task.status, '•')} **{task.title}** `{task.category}`{assignee}")

    st.markdown("#### Risks")
    for attr, label in (('risk_schedule', 'Schedule'), ('risk_cost', 'Cost'), ('risk_contract', 'Contract')):
        severity = risk_severity(getattr(project, attr))
        st.markdown(
            f"<span style='color:{RISK_COLORS[severity]}'>●</span> {label}: {severity.title()}",
            unsafe_allow_html=True
        )
    st.caption(f"Open issues: {project.open_issues_count} · Change requests: {project.change_requests_count}")

st.plotly_chart(build_project_milestones(project), width="stretch")

st.markdown("#### Schedule")
col1, col2, col3, col4 = st.columns(4)
col1.metric("Start (Plan)", formatter.format_date(project.start_date_plan))
col2.metric("Start (Fact)", formatter.format_date(project.start_date_fact))
col3.metric("End (Plan)", formatter.format_date(project.end_date_plan))
col4.metric("End (Forecast)", formatter.format_date(project.end_date_forecast))
if project.is_critical_path:
    st.warning("This project is on the portfolio critical path.")
if project.cost_reason:
    st.caption(f"Cost deviation reason: {project.cost_reason}")
