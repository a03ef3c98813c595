from __future__ import annotations

from typing import Iterable

import numpy as np
import pandas as pd

from core.config import AppConfig
from core.errors import DateParseError, SchemaMismatch, StateNotFound
from core.log import get_logger
from domain.entities import DailySeries, StateSeriesTable

logger = get_logger("reshape")


def parse_date_header(label: str, cfg: AppConfig) -> pd.Timestamp:
    """'X3.15.21' -> Timestamp('2021-03-15') with the default prefix and format."""
    label = str(label)
    if not label.startswith(cfg.date_prefix):
        raise DateParseError(
            f"Column header does not start with '{cfg.date_prefix}'",
            details=[label],
        )

    body = label[len(cfg.date_prefix):]
    try:
        ts = pd.to_datetime(body, format=cfg.date_format)
    except (ValueError, TypeError) as e:
        raise DateParseError(
            f"Column header does not match the date format '{cfg.date_format}'",
            details=[label],
        ) from e

    # an empty body parses to NaT instead of failing
    if pd.isna(ts):
        raise DateParseError(f"Column header has no date after '{cfg.date_prefix}'", details=[label])
    return ts


def parse_date_columns(labels: Iterable[str], cfg: AppConfig) -> pd.DatetimeIndex:
    """
    Parse every header and verify the columns are strictly chronological.

    Duplicate or out-of-order dates are reported as SchemaMismatch; the
    columns are never re-sorted behind the caller's back.
    """
    labels = [str(c) for c in labels]
    dates = pd.DatetimeIndex([parse_date_header(c, cfg) for c in labels])

    dupes = dates.duplicated()
    if dupes.any():
        raise SchemaMismatch(
            "Duplicate date columns",
            details=[labels[i] for i in np.flatnonzero(dupes)],
            stage="reshape",
        )

    if not dates.is_monotonic_increasing:
        steps = np.diff(dates.asi8)
        raise SchemaMismatch(
            "Date columns are not in chronological order",
            details=[labels[i + 1] for i in np.flatnonzero(steps < 0)],
            stage="reshape",
        )

    return dates


def to_daily_series(table: StateSeriesTable, state: str, cfg: AppConfig) -> DailySeries:
    if state not in table.frame.index:
        raise StateNotFound(f"State '{state}' is not present in the {table.metric} table")

    labels = table.date_columns
    dates = parse_date_columns(labels, cfg)
    row = table.frame.loc[state, labels]

    frame = pd.DataFrame(
        {
            "label": labels,
            "date": dates,
            "value": row.to_numpy(),
        }
    )

    if len(frame) > 1 and (np.diff(frame["value"].to_numpy()) < 0).any():
        logger.warning("%s %s: cumulative series decreases on some dates", state, table.metric)

    return DailySeries(state=state, metric=table.metric, frame=frame)


def widen_series(series: DailySeries) -> pd.Series:
    wide = pd.Series(series.frame["value"].to_numpy(), index=pd.Index(series.frame["label"]), name=series.state)
    wide.index.name = None
    return wide
