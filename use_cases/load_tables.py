from __future__ import annotations

from dataclasses import dataclass

from core.config import AppConfig
from domain.entities import StateSeriesTable
from infrastructure.data.aggregation import aggregate_by_state
from infrastructure.data.loader import load_raw_tables


@dataclass(frozen=True)
class AggregatedTables:
    cases: StateSeriesTable
    deaths: StateSeriesTable

    @property
    def states(self) -> list[str]:
        return self.cases.states


def load_tables_uc(cfg: AppConfig) -> AggregatedTables:
    raw = load_raw_tables(cfg)
    return AggregatedTables(
        cases=aggregate_by_state(raw.cases, cfg, "confirmed"),
        deaths=aggregate_by_state(raw.deaths, cfg, "deaths"),
    )
