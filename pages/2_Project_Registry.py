import streamlit as st

from components.session import get_store, open_form, open_project
from config.constants import STATUS_COLORS, HEALTH_COLORS
from core.query import filter_by_search
from services.formatting_service import FormattingService

# Page configuration
st.set_page_config(
    page_title="Project Registry",
    page_icon="📋",
    layout="wide",
    initial_sidebar_state="expanded"
)

store = get_store()
projects = store.list_all()
formatter = FormattingService()

col1, col2 = st.columns([3, 1])
with col1:
    st.title("Project Registry")
    st.caption(f"{len(projects)} Active Projects")
with col2:
    search = st.text_input("🔍 Search", placeholder="Search code or name...", key="registry_search")
    if st.button("➕ New Project", width="stretch"):
        open_form(None)

filtered = filter_by_search(projects, search)
registry_df = formatter.build_registry_frame(filtered)


def _highlight(row):
    """Colour the Health and Status cells."""
    styles = [''] * len(row)
    styles[row.index.get_loc('Health')] = f"color: {HEALTH_COLORS.get(row['Health'], '')}; font-weight: 600"
    styles[row.index.get_loc('Status')] = f"color: {STATUS_COLORS.get(row['Status'], '')}; font-weight: 600"
    return styles


if registry_df.empty:
    st.info("No projects match the search.")
    st.stop()

selection = st.dataframe(
    registry_df.style.apply(_highlight, axis=1).format({'CPI': '{:.2f}', 'SPI': '{:.2f}'}, na_rep='N/A'),
    width="stretch",
    hide_index=True,
    on_select="rerun",
    selection_mode="single-row",
    key="registry_table",
    column_config={
        'ID': None,
        'Budget': st.column_config.NumberColumn("Budget", format="$%.0fM"),
    }
)

if selection.selection.rows:
    open_project(registry_df.iloc[selection.selection.rows[0]]['ID'])

st.caption("🟢 CPI/SPI > 1.05 · 🔵 0.90-1.05 · 🔴 < 0.90")
with st.expander("Index badges"):
    for p in filtered:
        evm = p.evm
        st.markdown(
            f"`{p.code}` {p.name} — "
            f"{formatter.format_index_badge('CPI', evm.cpi)} · {formatter.format_index_badge('SPI', evm.spi)}"
        )
