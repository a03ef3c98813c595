from __future__ import annotations

from dataclasses import dataclass

from core.config import AppConfig
from domain.entities import DailySeries
from infrastructure.data.reshape import to_daily_series
from use_cases.load_tables import AggregatedTables


@dataclass(frozen=True)
class StateSeriesPair:
    cases: DailySeries
    deaths: DailySeries


def state_series_uc(cfg: AppConfig, tables: AggregatedTables, state: str) -> StateSeriesPair:
    return StateSeriesPair(
        cases=to_daily_series(tables.cases, state, cfg),
        deaths=to_daily_series(tables.deaths, state, cfg),
    )
