from __future__ import annotations

import plotly.graph_objects as go
import streamlit as st

from domain.entities import DailySeries, LinearModel, StateSeriesTable
from infrastructure.data.aggregation import latest_totals
from infrastructure.ml.linear import fit_line_points, join_series

METRIC_LABELS = {
    "confirmed": "Confirmed cases",
    "deaths": "Deaths",
}


def _label(metric: str) -> str:
    return METRIC_LABELS.get(metric, metric)


def build_totals_bar(table: StateSeriesTable) -> go.Figure:
    totals = latest_totals(table)
    fig = go.Figure(
        go.Bar(
            x=totals.index.tolist(),
            y=totals.to_numpy(),
            name=_label(table.metric),
        )
    )
    fig.update_layout(
        title=f"{_label(table.metric)} by state ({table.latest_column})",
        xaxis_title="State",
        yaxis_title=_label(table.metric),
        xaxis_tickangle=-45,
    )
    return fig


def build_state_timeseries(series: DailySeries) -> go.Figure:
    fig = go.Figure(
        go.Scatter(
            x=series.dates,
            y=series.values,
            mode="lines",
            name=_label(series.metric),
        )
    )
    fig.update_layout(
        title=f"{series.state}: {_label(series.metric).lower()} over time",
        xaxis_title="Date",
        yaxis_title=_label(series.metric),
        hovermode="x unified",
    )
    fig.update_xaxes(rangeslider=dict(visible=True))
    return fig


def build_fit_scatter(cases: DailySeries, deaths: DailySeries, model: LinearModel) -> go.Figure:
    joined = join_series(cases, deaths)
    x_line, y_line = fit_line_points(model, joined["cases"])

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=joined["cases"],
            y=joined["deaths"],
            mode="markers",
            name="Daily totals",
            opacity=0.6,
            text=joined["date"].dt.strftime("%Y-%m-%d"),
        )
    )
    fig.add_trace(
        go.Scatter(
            x=x_line,
            y=y_line,
            mode="lines",
            name=f"OLS fit (R²={model.r_squared:.3f})",
        )
    )
    fig.update_layout(
        title=f"{model.reference_state}: deaths vs confirmed cases",
        xaxis_title="Confirmed cases",
        yaxis_title="Deaths",
    )
    return fig


def render_totals_bar(table: StateSeriesTable) -> None:
    st.plotly_chart(build_totals_bar(table), config={"responsive": True})


def render_state_timeseries(series: DailySeries) -> None:
    st.plotly_chart(build_state_timeseries(series), config={"responsive": True})


def render_fit_scatter(cases: DailySeries, deaths: DailySeries, model: LinearModel) -> None:
    st.plotly_chart(build_fit_scatter(cases, deaths, model), config={"responsive": True})
