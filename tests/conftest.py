from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from core.config import CFG
from domain.entities import DailySeries

RAW_DATES = ["1/22/20", "1/23/20", "1/24/20"]
DATE_LABELS = ["X1.22.20", "X1.23.20", "X1.24.20"]


def _geo(uid, county, state):
    return {
        "UID": uid,
        "iso2": "US",
        "iso3": "USA",
        "code3": 840,
        "FIPS": float(uid),
        "Admin2": county,
        "Province_State": state,
        "Country_Region": "US",
        "Lat": 40.0,
        "Long_": -75.0,
        "Combined_Key": f"{county}, {state}, US",
    }


_ROWS = [
    (1, "North", "Alpha", [1, 2, 4], [0, 1, 1]),
    (2, "South", "Alpha", [2, 3, np.nan], [0, 0, 1]),
    (3, "Central", "Beta", [10, 20, 30], [1, 2, 3]),
    (4, "", "Guam", [5, 5, 5], [0, 0, 0]),
    (5, "", "Diamond Princess", [1, 1, 1], [0, 0, 0]),
    (6, "East", "Alpha", [0, 0, 5], [0, 0, 0]),
]


def make_raw(metric: str) -> pd.DataFrame:
    rows = []
    for uid, county, state, cases, deaths in _ROWS:
        row = _geo(uid, county, state)
        if metric == "deaths":
            row["Population"] = 1000 * uid
        values = cases if metric == "confirmed" else deaths
        row.update(dict(zip(RAW_DATES, values)))
        rows.append(row)
    return pd.DataFrame(rows)


def make_series(state: str, metric: str, dates: list[str], values: list[float]) -> DailySeries:
    parsed = pd.to_datetime(dates)
    frame = pd.DataFrame(
        {
            "label": [d.strftime("X%m.%d.%y") for d in parsed],
            "date": parsed,
            "value": values,
        }
    )
    return DailySeries(state=state, metric=metric, frame=frame)


@pytest.fixture
def cfg():
    return CFG.with_overrides(confirmed_source="missing_confirmed.csv", deaths_source="missing_deaths.csv")


@pytest.fixture
def raw_cases() -> pd.DataFrame:
    return make_raw("confirmed")


@pytest.fixture
def raw_deaths() -> pd.DataFrame:
    return make_raw("deaths")


@pytest.fixture
def csv_cfg(tmp_path, raw_cases, raw_deaths):
    confirmed = tmp_path / "confirmed.csv"
    deaths = tmp_path / "deaths.csv"
    raw_cases.to_csv(confirmed, index=False)
    raw_deaths.to_csv(deaths, index=False)
    return CFG.with_overrides(
        confirmed_source=str(confirmed),
        deaths_source=str(deaths),
        reference_state="Beta",
    )
