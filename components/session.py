"""Session state helpers shared by the pages."""

import logging
from typing import Optional

import streamlit as st

from config.constants import LOG_LEVEL, STORE_SESSION_KEY, SELECTED_PROJECT_KEY, FLASH_MESSAGE_KEY
from services.project_store import ProjectStore
from services.sample_data import load_sample_projects

# Every page imports this module, so logging is set up whichever page loads first
logging.basicConfig(
    level=LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s"
)


def get_store() -> ProjectStore:
    """Return this session's project store, seeding it on first use."""
    if STORE_SESSION_KEY not in st.session_state:
        st.session_state[STORE_SESSION_KEY] = ProjectStore(load_sample_projects())
    return st.session_state[STORE_SESSION_KEY]


def get_selected_project_id() -> Optional[str]:
    return st.session_state.get(SELECTED_PROJECT_KEY)


def open_project(project_id: str):
    """Select a project and go to its detail page."""
    st.session_state[SELECTED_PROJECT_KEY] = project_id
    st.switch_page("pages/3_Project_Detail.py")


def open_form(project_id: Optional[str] = None):
    """Open the form for editing ``project_id`` or, when None, for a new project."""
    st.session_state[SELECTED_PROJECT_KEY] = project_id
    st.switch_page("pages/4_Project_Form.py")


def flash(message: str):
    """Keep a message for the next page, which shows it once."""
    st.session_state[FLASH_MESSAGE_KEY] = message


def pop_flash() -> Optional[str]:
    return st.session_state.pop(FLASH_MESSAGE_KEY, None)
