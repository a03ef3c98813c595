from __future__ import annotations

import streamlit as st

from core.config import CFG
from core.errors import PipelineError
from ui.components.charts import (
    render_fit_scatter,
    render_state_timeseries,
    render_totals_bar,
)
from ui.components.metrics import render_model_block
from ui.components.tables import render_results_table
from ui.sidebar import render_sidebar
from ui.state import get_tables
from use_cases.run_analysis import RunAnalysisInput, run_analysis_uc
from use_cases.state_series import state_series_uc


def _fail(e: PipelineError) -> None:
    st.error(f"Analysis aborted at stage `{e.stage}`: {e.message}")
    if e.details:
        st.code("\n".join(e.details))
    st.stop()


def render_analysis_page() -> None:
    st.title("COVID-19: deaths vs confirmed cases by US state")

    try:
        tables = get_tables()
    except PipelineError as e:
        _fail(e)
        return

    render_sidebar(tables.states)

    try:
        out = run_analysis_uc(
            CFG,
            RunAnalysisInput(reference_state=st.session_state["reference_state"]),
            tables=tables,
        )
        plotted = state_series_uc(CFG, tables, st.session_state["series_state"])
    except PipelineError as e:
        _fail(e)
        return

    st.subheader("Current totals")
    t1, t2 = st.tabs(["Deaths", "Confirmed cases"])
    with t1:
        render_totals_bar(tables.deaths)
    with t2:
        render_totals_bar(tables.cases)

    st.subheader(f"{plotted.cases.state} over time")
    s1, s2 = st.tabs(["Deaths", "Confirmed cases"])
    with s1:
        render_state_timeseries(plotted.deaths)
    with s2:
        render_state_timeseries(plotted.cases)

    st.subheader("Linear model")
    render_model_block(out.model)
    render_fit_scatter(out.reference.cases, out.reference.deaths, out.model)

    st.subheader("Predicted vs actual deaths, all states")
    render_results_table(out.results)
