from __future__ import annotations

import math

import streamlit as st

from domain.entities import LinearModel


def _fmt(v: float, digits: int) -> str:
    if v is None or math.isnan(v) or math.isinf(v):
        return "n/a"
    return f"{v:,.{digits}f}"


def render_model_block(model: LinearModel) -> None:
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Slope (deaths per case)", _fmt(model.slope, 6))
    c2.metric("Intercept", _fmt(model.intercept, 2))
    c3.metric("R²", _fmt(model.r_squared, 4))
    c4.metric("Days fitted", f"{model.n_points}")
    st.caption(f"Fitted on {model.reference_state}.")
