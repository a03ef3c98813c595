from __future__ import annotations

import pandas as pd
import streamlit as st


COL_LABELS = {
    "state": "State",
    "most_recent_cases": "Most recent cases",
    "most_recent_deaths": "Most recent deaths",
    "predicted_deaths": "Predicted deaths",
    "rmse": "RMSE",
}


def results_display_frame(results: pd.DataFrame) -> pd.DataFrame:
    df = results.copy()
    df["predicted_deaths"] = df["predicted_deaths"].round(1)
    df["rmse"] = df["rmse"].round(1)
    return df.rename(columns=COL_LABELS)


def render_results_table(results: pd.DataFrame) -> None:
    if results is None or len(results) == 0:
        st.info("No states to show.")
        return

    # every state, no pagination
    st.dataframe(
        results_display_frame(results),
        width="stretch",
        hide_index=True,
        height=min(36 * (len(results) + 1) + 2, 1900),
    )
