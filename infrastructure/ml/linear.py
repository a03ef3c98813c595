from __future__ import annotations

import numpy as np
import pandas as pd
from sklearn.linear_model import LinearRegression
from sklearn.metrics import r2_score

from core.errors import DegenerateInput, InsufficientData
from core.log import get_logger
from domain.entities import DailySeries, LinearModel

logger = get_logger("linear")

MIN_POINTS = 2


def join_series(cases: DailySeries, deaths: DailySeries) -> pd.DataFrame:
    # inner join: dates missing on either side are dropped
    left = cases.frame[["date", "value"]].rename(columns={"value": "cases"})
    right = deaths.frame[["date", "value"]].rename(columns={"value": "deaths"})
    joined = left.merge(right, on="date", how="inner")
    return joined.sort_values("date").reset_index(drop=True)


def fit_linear_model(cases: DailySeries, deaths: DailySeries) -> LinearModel:
    """
    Ordinary least squares of deaths on cases for one state.

    deaths ~ slope * cases + intercept, closed form, R^2 over the joined points.
    """
    if cases.state != deaths.state:
        raise ValueError(f"Series belong to different states: {cases.state!r} vs {deaths.state!r}")

    joined = join_series(cases, deaths)
    n = len(joined)
    if n < MIN_POINTS:
        raise InsufficientData(
            f"Need at least {MIN_POINTS} dates present in both series for {cases.state}, got {n}"
        )

    x = joined["cases"].to_numpy(dtype=float)
    y = joined["deaths"].to_numpy(dtype=float)

    if np.ptp(x) == 0:
        raise DegenerateInput(f"Confirmed cases for {cases.state} are constant ({x[0]:g}); slope is undefined")

    X = x.reshape(-1, 1)
    reg = LinearRegression().fit(X, y)

    model = LinearModel(
        slope=float(reg.coef_[0]),
        intercept=float(reg.intercept_),
        r_squared=float(r2_score(y, reg.predict(X))),
        reference_state=cases.state,
        n_points=int(n),
    )
    logger.info(
        "Fitted %s: deaths = %.6f * cases + %.3f (R^2=%.4f, n=%d)",
        model.reference_state,
        model.slope,
        model.intercept,
        model.r_squared,
        model.n_points,
    )
    return model


def fit_line_points(model: LinearModel, cases) -> tuple[np.ndarray, np.ndarray]:
    x = np.sort(np.asarray(cases, dtype=float))
    return x, model.predict(x)
