import logging

import streamlit as st

from components.project_form import ProjectFormComponent
from components.session import flash, get_store, get_selected_project_id, open_project
from services.formatting_service import FormattingService

logger = logging.getLogger(__name__)

# Page configuration
st.set_page_config(
    page_title="Project Form",
    page_icon="📝",
    layout="wide",
    initial_sidebar_state="expanded"
)

store = get_store()
initial = store.find(get_selected_project_id())

if initial:
    st.title(f"Edit Project: {initial.code}")
else:
    st.title("New Project Entry")
st.caption("Fill in all mandatory fields to generate PMO analytics.")

record = ProjectFormComponent(FormattingService()).render(initial)

if record is not None:
    try:
        saved = store.save(record)
    except ValueError as e:
        logger.warning(f"Project form rejected: {e}")
        for message in str(e).split("; "):
            st.error(message)
    else:
        flash(f"Project {saved.code} saved.")
        open_project(saved.id)

if st.button("✖ Cancel"):
    if initial:
        open_project(initial.id)
    else:
        st.switch_page("pages/1_Dashboard.py")
