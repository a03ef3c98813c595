from __future__ import annotations

import logging

import pytest

from infrastructure.data.aggregation import aggregate_by_state, latest_totals
from infrastructure.data.loader import exclude_regions, standardize_headers
from tests.conftest import DATE_LABELS


@pytest.fixture
def prepared(cfg, raw_cases):
    return exclude_regions(standardize_headers(raw_cases, cfg), cfg)


def test_aggregate_sums_per_state(cfg, prepared):
    table = aggregate_by_state(prepared, cfg, "confirmed")

    for state in prepared[cfg.state_col].unique():
        rows = prepared[prepared[cfg.state_col] == state]
        for col in DATE_LABELS:
            assert table.frame.at[state, col] == rows[col].fillna(0).sum()


def test_aggregate_one_row_per_state_in_first_seen_order(cfg, prepared):
    table = aggregate_by_state(prepared, cfg, "confirmed")

    assert table.states == ["Alpha", "Beta"]
    assert table.date_columns == DATE_LABELS
    assert table.latest_column == "X1.24.20"
    assert table.metric == "confirmed"


def test_missing_values_count_as_zero(cfg, prepared):
    table = aggregate_by_state(prepared, cfg, "confirmed")
    # North 4 + South NaN + East 5
    assert table.frame.at["Alpha", "X1.24.20"] == 9


def test_non_numeric_cells_are_zero_and_logged(cfg, prepared, caplog):
    prepared = prepared.copy()
    prepared["X1.22.20"] = prepared["X1.22.20"].astype(object)
    prepared.loc[0, "X1.22.20"] = "n/a"

    with caplog.at_level(logging.WARNING):
        table = aggregate_by_state(prepared, cfg, "confirmed")

    assert table.frame.at["Alpha", "X1.22.20"] == 2
    assert "non-numeric" in caplog.text


def test_identifier_columns_are_dropped(cfg, prepared):
    table = aggregate_by_state(prepared, cfg, "confirmed")
    assert not set(cfg.id_cols) & set(table.frame.columns)


def test_latest_totals_sorted_descending(cfg, prepared):
    totals = latest_totals(aggregate_by_state(prepared, cfg, "confirmed"))
    assert totals.index.tolist() == ["Beta", "Alpha"]
    assert totals.tolist() == [30, 9]
