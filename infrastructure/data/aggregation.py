from __future__ import annotations

import pandas as pd

from core.config import AppConfig
from core.log import get_logger
from domain.entities import StateSeriesTable
from infrastructure.data.loader import date_columns

logger = get_logger("aggregation")


def _numeric_dates(df: pd.DataFrame, cols: list[str], metric: str) -> pd.DataFrame:
    values = df[cols].apply(pd.to_numeric, errors="coerce")

    # cells that were present but not numbers
    bad = int((values.isna() & df[cols].notna()).to_numpy().sum())
    if bad:
        logger.warning("%s: %d non-numeric cells counted as 0", metric, bad)

    return values.fillna(0)


def aggregate_by_state(df: pd.DataFrame, cfg: AppConfig, metric: str) -> StateSeriesTable:
    """
    Sum every date column per state.

    Identifier columns (county, FIPS, coordinates...) are dropped; rows keep
    their first-appearance order and the date columns keep the source order.
    """
    cols = date_columns(df, cfg)

    work = _numeric_dates(df, cols, metric)
    work.insert(0, cfg.state_col, df[cfg.state_col].astype(str).str.strip())

    frame = work.groupby(cfg.state_col, sort=False)[cols].sum()
    frame.index.name = cfg.state_col
    frame.columns.name = None

    logger.info("Aggregated %s: %d states x %d dates", metric, frame.shape[0], frame.shape[1])
    return StateSeriesTable(metric=metric, frame=frame)


def latest_totals(table: StateSeriesTable) -> pd.Series:
    totals = table.frame[table.latest_column].sort_values(ascending=False, kind="stable")
    totals.name = table.metric
    return totals
