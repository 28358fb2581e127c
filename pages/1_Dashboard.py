import streamlit as st

from components.kpi_cards import KPICardsComponent
from components.session import get_store, open_project
from config.constants import RISK_COLORS
from core.portfolio_engine import aggregate_portfolio
from core.query import top_problem_projects, top_off_track_projects
from services.chart_service import (
    build_health_matrix,
    build_budget_utilization,
    build_physical_progress,
    build_stage_funnel,
    build_status_breakdown,
)
from services.formatting_service import FormattingService

# Page configuration
st.set_page_config(
    page_title="Portfolio Overview",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded"
)

store = get_store()
projects = store.list_all()
formatter = FormattingService()

st.title("Portfolio Overview")
st.caption("Real-time EVM analytics and risk assessment")

# Level 1: KPIs
summary = aggregate_portfolio(projects)
KPICardsComponent(formatter).render_portfolio(summary)

if not projects:
    st.info("No projects yet. Create one from the Project Form page.")
    st.stop()

# Level 2: Portfolio maps
col1, col2 = st.columns([2, 1])
with col1:
    event = st.plotly_chart(build_health_matrix(projects), width="stretch", on_select="rerun",
                            selection_mode="points", key="health_matrix")
    points = event.selection.points if event and event.selection else []
    if points:
        open_project(points[0]['customdata'])
with col2:
    st.plotly_chart(build_stage_funnel(projects), width="stretch")
    st.plotly_chart(build_status_breakdown(projects), width="stretch")

    st.markdown("#### Top Portfolio Risks")
    top_risks = top_off_track_projects(projects)
    if not top_risks:
        st.caption("No Off Track projects.")
    for p in top_risks:
        st.markdown(
            f"<span style='color:{RISK_COLORS['high']}'>⚠️</span> **{p.name}** · "
            f"EAC vs BAC: {formatter.format_cost_deviation(p.cost_deviation)}",
            unsafe_allow_html=True
        )

# Level 3: Deep dive charts
col1, col2 = st.columns(2)
with col1:
    st.plotly_chart(build_physical_progress(projects), width="stretch")
with col2:
    st.plotly_chart(build_budget_utilization(projects), width="stretch")

# Level 4: Problem projects
st.markdown("### ⚠️ Projects Requiring Attention")
problem_df = formatter.build_problem_frame(top_problem_projects(projects))
if problem_df.empty:
    st.success("No projects below the performance thresholds.")
else:
    selection = st.dataframe(
        problem_df,
        width="stretch",
        hide_index=True,
        on_select="rerun",
        selection_mode="single-row",
        column_config={'ID': None},
        key="problem_table"
    )
    if selection.selection.rows:
        open_project(problem_df.iloc[selection.selection.rows[0]]['ID'])
