from __future__ import annotations

import pytest

from ui.components.charts import build_fit_scatter, build_state_timeseries, build_totals_bar
from ui.components.tables import COL_LABELS, results_display_frame
from use_cases.load_tables import load_tables_uc
from use_cases.run_analysis import RunAnalysisInput, run_analysis_uc


@pytest.fixture
def analysis(csv_cfg):
    return run_analysis_uc(csv_cfg, RunAnalysisInput(reference_state="Beta"), tables=load_tables_uc(csv_cfg))


def test_totals_bar_sorted_descending(analysis):
    fig = build_totals_bar(analysis.tables.deaths)

    assert list(fig.data[0].x) == ["Beta", "Alpha"]
    assert list(fig.data[0].y) == [3, 2]
    assert "X1.24.20" in fig.layout.title.text


def test_state_timeseries(analysis):
    fig = build_state_timeseries(analysis.reference.cases)

    assert len(fig.data) == 1
    assert list(fig.data[0].y) == [10, 20, 30]
    assert fig.layout.title.text.startswith("Beta")


def test_fit_scatter_has_points_and_line(analysis):
    ref = analysis.reference
    fig = build_fit_scatter(ref.cases, ref.deaths, analysis.model)

    assert [t.mode for t in fig.data] == ["markers", "lines"]
    assert list(fig.data[0].x) == [10, 20, 30]
    assert list(fig.data[1].y) == pytest.approx([1.0, 2.0, 3.0])


def test_results_display_frame(analysis):
    df = results_display_frame(analysis.results)
    assert list(df.columns) == list(COL_LABELS.values())
    assert len(df) == len(analysis.results)
