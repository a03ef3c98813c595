from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

import pandas as pd

from core.config import AppConfig
from core.log import get_logger
from domain.entities import LinearModel, StateEvaluation
from infrastructure.ml.evaluation import evaluate_states, evaluations_to_frame
from infrastructure.ml.linear import fit_linear_model
from use_cases.load_tables import AggregatedTables, load_tables_uc
from use_cases.state_series import StateSeriesPair, state_series_uc

logger = get_logger("run_analysis")


@dataclass(frozen=True)
class RunAnalysisInput:
    reference_state: str


@dataclass(frozen=True, eq=False)
class RunAnalysisOutput:
    tables: AggregatedTables
    reference: StateSeriesPair
    model: LinearModel
    evaluations: List[StateEvaluation]
    results: pd.DataFrame


def run_analysis_uc(
    cfg: AppConfig,
    inp: RunAnalysisInput,
    tables: Optional[AggregatedTables] = None,
) -> RunAnalysisOutput:
    # any PipelineError aborts the remaining stages
    if tables is None:
        tables = load_tables_uc(cfg)

    reference = state_series_uc(cfg, tables, inp.reference_state)
    model = fit_linear_model(reference.cases, reference.deaths)
    evaluations = evaluate_states(model, tables.cases, tables.deaths)

    logger.info("Analysis for reference state %s finished", inp.reference_state)
    return RunAnalysisOutput(
        tables=tables,
        reference=reference,
        model=model,
        evaluations=evaluations,
        results=evaluations_to_frame(evaluations),
    )
