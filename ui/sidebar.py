from __future__ import annotations

import streamlit as st


def _index_of(options: list[str], value: str) -> int:
    return options.index(value) if value in options else 0


def render_sidebar(states: list[str]) -> None:
    st.sidebar.header("Settings")

    st.session_state["reference_state"] = st.sidebar.selectbox(
        "Reference state (model fit)",
        states,
        index=_index_of(states, st.session_state["reference_state"]),
    )
    st.session_state["series_state"] = st.sidebar.selectbox(
        "State for time-series charts",
        states,
        index=_index_of(states, st.session_state["series_state"]),
    )

    if st.sidebar.button("Reload data", width="stretch"):
        st.session_state["tables"] = None
        st.rerun()
