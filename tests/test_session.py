"""Tests for the session helpers shared by the pages."""

import pytest

from components import session
from config.constants import SELECTED_PROJECT_KEY


@pytest.fixture
def fake_streamlit(monkeypatch):
    """Plain dict session state and a recorded page switch."""
    state = {}
    pages = []
    monkeypatch.setattr(session.st, 'session_state', state)
    monkeypatch.setattr(session.st, 'switch_page', pages.append)
    return state, pages


class TestFlashMessage:
    """A message set before a page switch is shown once on the next page."""

    def test_survives_page_switch(self, fake_streamlit):
        state, pages = fake_streamlit
        session.flash("Project P4 saved.")
        session.open_project('4')
        assert pages == ["pages/3_Project_Detail.py"]
        assert state[SELECTED_PROJECT_KEY] == '4'
        assert session.pop_flash() == "Project P4 saved."

    def test_shown_once(self, fake_streamlit):
        session.flash("Saved.")
        session.pop_flash()
        assert session.pop_flash() is None

    def test_nothing_pending(self, fake_streamlit):
        assert session.pop_flash() is None


class TestStore:
    """Tests for get_store."""

    def test_seeded_once_per_session(self, fake_streamlit):
        store = session.get_store()
        assert len(store) == 6
        assert session.get_store() is store

    def test_open_form_for_new_project(self, fake_streamlit):
        state, pages = fake_streamlit
        session.open_form(None)
        assert session.get_selected_project_id() is None
        assert pages == ["pages/4_Project_Form.py"]
