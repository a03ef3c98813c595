from __future__ import annotations

from typing import List

import numpy as np
import pandas as pd
from sklearn.metrics import mean_squared_error

from core.errors import SchemaMismatch
from core.log import get_logger
from domain.entities import LinearModel, StateEvaluation, StateSeriesTable

logger = get_logger("evaluation")

RESULT_COLUMNS = ["state", "most_recent_cases", "most_recent_deaths", "predicted_deaths", "rmse"]


def _rmse(actual: float, predicted: float) -> float:
    # one (actual, predicted) pair per state, so this equals |predicted - actual|
    return float(np.sqrt(mean_squared_error([actual], [predicted])))


def evaluate_states(
    model: LinearModel,
    cases: StateSeriesTable,
    deaths: StateSeriesTable,
) -> List[StateEvaluation]:
    """
    Apply the reference-state model to every state's most recent totals.

    States come in the cases table's row order; only states present in both
    tables are evaluated, the reference state included.
    """
    if cases.date_columns != deaths.date_columns:
        raise SchemaMismatch(
            "Cases and deaths tables do not share the same date columns",
            details=[f"confirmed latest: {cases.latest_column}", f"deaths latest: {deaths.latest_column}"],
            stage="evaluate",
        )

    latest = cases.latest_column
    death_states = set(deaths.frame.index)

    out: List[StateEvaluation] = []
    for state in cases.frame.index:
        if state not in death_states:
            logger.warning("%s has no deaths row; skipped", state)
            continue

        c = float(cases.frame.at[state, latest])
        d = float(deaths.frame.at[state, latest])
        pred = float(model.predict(c))
        out.append(
            StateEvaluation(
                state=str(state),
                most_recent_deaths=d,
                most_recent_cases=c,
                predicted_deaths=pred,
                rmse=_rmse(d, pred),
            )
        )

    logger.info("Evaluated %d states on %s", len(out), latest)
    return out


def evaluations_to_frame(evaluations: List[StateEvaluation]) -> pd.DataFrame:
    rows = [
        {
            "state": e.state,
            "most_recent_cases": e.most_recent_cases,
            "most_recent_deaths": e.most_recent_deaths,
            "predicted_deaths": e.predicted_deaths,
            "rmse": e.rmse,
        }
        for e in evaluations
    ]
    return pd.DataFrame(rows, columns=RESULT_COLUMNS)
