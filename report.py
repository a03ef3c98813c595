# report.py

import sys

import pandas as pd

from core.config import CFG
from core.errors import PipelineError
from core.log import setup_logging
from domain.entities import LinearModel
from use_cases.run_analysis import RunAnalysisInput, run_analysis_uc


def format_model_line(model: LinearModel) -> str:
    return (
        f"Model ({model.reference_state}, {model.n_points} days): "
        f"deaths = {model.slope:.6f} * cases + {model.intercept:.3f}, R^2 = {model.r_squared:.4f}"
    )


def main() -> int:
    logger = setup_logging(CFG.log_level)

    try:
        out = run_analysis_uc(CFG, RunAnalysisInput(reference_state=CFG.reference_state))
    except PipelineError as e:
        logger.error("Analysis aborted: %s", e)
        return 1

    print(format_model_line(out.model))
    print()
    with pd.option_context(
        "display.max_rows", None,
        "display.max_columns", None,
        "display.width", None,
        "display.float_format", "{:,.2f}".format,
    ):
        print(out.results.to_string(index=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
