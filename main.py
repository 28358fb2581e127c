"""
Portfolio Dashboard - Main Navigation
Project portfolio registry with Earned Value Management analytics.
"""

import sys
import os

# Force the root directory into the path
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

import streamlit as st

from config.constants import APP_TITLE
from components.session import get_store, open_form

# Page configuration
st.set_page_config(
    page_title="Portfolio Dashboard",
    page_icon="📊",
    layout="wide",
    initial_sidebar_state="expanded"
)

st.title(APP_TITLE)
st.caption("Real-time EVM analytics and risk assessment for capital and operating projects")

store = get_store()
st.markdown(f"**{len(store)} projects** in the current session.")

# Navigation
st.markdown("## Choose Your Tool")
col1, col2, col3 = st.columns(3)

with col1:
    st.markdown("""
    #### 📊 Portfolio Overview
    - Portfolio KPIs (BAC, CPI, SPI)
    - Health matrix and funnel
    - Projects requiring attention
    """)
    if st.button("📊 Open Dashboard", key="dashboard_btn", width="stretch"):
        st.switch_page("pages/1_Dashboard.py")

with col2:
    st.markdown("""
    #### 📋 Project Registry
    - Search by code or name
    - CPI/SPI badges and status
    - Drill down to project details
    """)
    if st.button("📋 Open Registry", key="registry_btn", width="stretch"):
        st.switch_page("pages/2_Project_Registry.py")

with col3:
    st.markdown("""
    #### ➕ New Project
    - Project passport and schedule
    - Cost, EVM and progress data
    - Components and tasks
    """)
    if st.button("➕ Create Project", key="create_btn", width="stretch"):
        open_form(None)
