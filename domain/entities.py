from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np
import pandas as pd


@dataclass(frozen=True, eq=False)
class StateSeriesTable:
    """One row per state, one column per date label, cumulative counts."""

    metric: str
    frame: pd.DataFrame

    @property
    def states(self) -> List[str]:
        return [str(s) for s in self.frame.index]

    @property
    def date_columns(self) -> List[str]:
        return [str(c) for c in self.frame.columns]

    @property
    def latest_column(self) -> str:
        return self.date_columns[-1]

    def __len__(self) -> int:
        return len(self.frame)


@dataclass(frozen=True, eq=False)
class DailySeries:
    # frame columns: label, date, value
    state: str
    metric: str
    frame: pd.DataFrame

    @property
    def dates(self) -> pd.Series:
        return self.frame["date"]

    @property
    def values(self) -> np.ndarray:
        return self.frame["value"].to_numpy()

    def __len__(self) -> int:
        return len(self.frame)


@dataclass(frozen=True)
class LinearModel:
    slope: float
    intercept: float
    r_squared: float
    reference_state: str
    n_points: int

    def predict(self, cases):
        if np.ndim(cases) == 0:
            return self.slope * float(cases) + self.intercept
        return self.slope * np.asarray(cases, dtype=float) + self.intercept


@dataclass(frozen=True)
class StateEvaluation:
    state: str
    most_recent_deaths: float
    most_recent_cases: float
    predicted_deaths: float
    rmse: float
