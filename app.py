# app.py

import streamlit as st

from ui.state import ensure_state
from ui.pages.analysis_page import render_analysis_page

st.set_page_config(
    page_title="COVID-19 deaths vs cases by state",
    layout="wide",
)

ensure_state()
render_analysis_page()
