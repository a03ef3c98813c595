from __future__ import annotations

import streamlit as st

from core.config import CFG
from core.log import setup_logging
from use_cases.load_tables import load_tables_uc


def ensure_state() -> None:
    if "logging_ready" not in st.session_state:
        setup_logging(CFG.log_level)
        st.session_state["logging_ready"] = True

    if "tables" not in st.session_state:
        # loaded once per session, errors propagate to the page
        st.session_state["tables"] = None

    if "reference_state" not in st.session_state:
        st.session_state["reference_state"] = CFG.reference_state

    if "series_state" not in st.session_state:
        st.session_state["series_state"] = CFG.plotted_state


def get_tables():
    if st.session_state.get("tables") is None:
        with st.spinner("Loading confirmed and deaths tables..."):
            st.session_state["tables"] = load_tables_uc(CFG)
    return st.session_state["tables"]
