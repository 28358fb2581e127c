"""Shared fixtures for the engine and service tests."""

import pytest

from services.project_store import ProjectStore
from tests.factories import make_project


@pytest.fixture
def scenario_projects():
    """Three-project portfolio with known indices.

    P1: CPI 0.833, SPI 0.909; P2: CPI 0.8 with high cost risk; P3: CPI 1.125, SPI 1.0.
    """
    p1 = make_project(id='1', code='P1', name='Alpha', bac=100, ev=50, ac=60, pv=55, risk_cost=1, risk_schedule=1)
    p2 = make_project(id='2', code='P2', name='Bravo', bac=200, ev=80, ac=100, pv=120, risk_cost=3, risk_schedule=1)
    p3 = make_project(id='3', code='P3', name='Charlie', bac=50, ev=45, ac=40, pv=45, risk_cost=1, risk_schedule=1)
    return [p1, p2, p3]


@pytest.fixture
def store(scenario_projects):
    """Store seeded with the scenario portfolio."""
    return ProjectStore(scenario_projects)
