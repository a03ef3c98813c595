from __future__ import annotations

import logging
import sys

LOGGER_NAME = "state_fit"


def get_logger(name: str | None = None) -> logging.Logger:
    root = logging.getLogger(LOGGER_NAME)
    return root.getChild(name) if name else root


def setup_logging(level: str = "INFO") -> logging.Logger:
    """Configure the project logger once; repeated calls replace the handler."""
    logger = logging.getLogger(LOGGER_NAME)

    # avoid duplicate lines when Streamlit re-runs the script
    for handler in list(logger.handlers):
        logger.removeHandler(handler)

    logger.setLevel(level.upper())

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))
    logger.addHandler(handler)
    logger.propagate = False
    return logger
