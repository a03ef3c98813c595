from __future__ import annotations

import io
import re
from dataclasses import dataclass
from pathlib import Path

import pandas as pd
import requests

from core.config import AppConfig
from core.errors import DataUnavailable, SchemaMismatch
from core.log import get_logger

logger = get_logger("loader")

_INVALID_NAME_CHARS = re.compile(r"[^0-9A-Za-z._]")
_MANGLED_SUFFIX = re.compile(r"^(.+)\.(\d+)$")


@dataclass(frozen=True, eq=False)
class RawTables:
    cases: pd.DataFrame
    deaths: pd.DataFrame


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def read_table(source: str | Path, cfg: AppConfig) -> pd.DataFrame:
    """
    Read one time-series table from a local path or a URL.

    Single attempt, no retries. Any fetch or parse failure is reported as
    DataUnavailable with the source in the message.
    """
    src = str(source)

    path = Path(src)
    if path.exists():
        try:
            return pd.read_csv(path)
        except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
            raise DataUnavailable(f"Cannot parse CSV file {path}: {e}") from e

    if not _is_url(src):
        raise DataUnavailable(f"Source not found: {src}")

    try:
        resp = requests.get(src, timeout=cfg.request_timeout_s)
    except requests.RequestException as e:
        raise DataUnavailable(f"Failed to fetch {src}: {e}") from e

    if resp.status_code != 200:
        raise DataUnavailable(f"HTTP {resp.status_code} fetching {src}")

    content = resp.content or b""
    try:
        return pd.read_csv(io.BytesIO(content))
    except (pd.errors.EmptyDataError, pd.errors.ParserError, UnicodeDecodeError, OSError) as e:
        raise DataUnavailable(f"Response from {src} is not a CSV table: {e}") from e


def syntactic_name(label: str) -> str:
    # "3/15/21" -> "X3.15.21"; valid names pass through unchanged
    name = _INVALID_NAME_CHARS.sub(".", label)
    if not name or name[0].isdigit() or name[0] == "_" or (name[0] == "." and name[1:2].isdigit()):
        name = "X" + name
    return name


def standardize_headers(df: pd.DataFrame, cfg: AppConfig) -> pd.DataFrame:
    df = df.copy()
    labels = [str(c).strip() for c in df.columns]
    if cfg.syntactic_headers:
        labels = [syntactic_name(c) for c in labels]
    df.columns = pd.Index(labels)
    return df


def date_columns(df: pd.DataFrame, cfg: AppConfig) -> list[str]:
    skip = set(cfg.id_cols) | {cfg.state_col}
    return [str(c) for c in df.columns if c not in skip]


def duplicate_labels(labels: list[str]) -> list[str]:
    # pandas reads a repeated header "a" as "a", "a.1", "a.2", ...
    seen = set(labels)
    dupes = []
    for i, label in enumerate(labels):
        m = _MANGLED_SUFFIX.match(label)
        if m and m.group(1) in seen:
            dupes.append(m.group(1))
        elif label in labels[:i]:
            dupes.append(label)
    return list(dict.fromkeys(dupes))


def validate_raw_table(df: pd.DataFrame, cfg: AppConfig, metric: str) -> pd.DataFrame:
    if df.empty:
        raise DataUnavailable(f"The {metric} table has no rows.")

    if cfg.state_col not in df.columns:
        raise SchemaMismatch(
            f"The {metric} table is missing the state column",
            details=[cfg.state_col],
        )

    dupes = duplicate_labels([str(c) for c in df.columns])
    if dupes:
        raise SchemaMismatch(f"The {metric} table repeats column headers", details=dupes)

    if not date_columns(df, cfg):
        raise SchemaMismatch(f"The {metric} table has no date columns.")

    return df


def exclude_regions(df: pd.DataFrame, cfg: AppConfig) -> pd.DataFrame:
    names = df[cfg.state_col].astype(str).str.strip()
    mask = names.isin(cfg.excluded_regions)
    if mask.any():
        logger.debug("Dropping %d rows of excluded regions", int(mask.sum()))
    return df.loc[~mask].reset_index(drop=True)


def check_date_alignment(cases: pd.DataFrame, deaths: pd.DataFrame, cfg: AppConfig) -> None:
    case_dates = date_columns(cases, cfg)
    death_dates = date_columns(deaths, cfg)
    if case_dates == death_dates:
        return

    only_cases = sorted(set(case_dates) - set(death_dates))
    only_deaths = sorted(set(death_dates) - set(case_dates))
    if not only_cases and not only_deaths:
        raise SchemaMismatch("Date columns of the confirmed and deaths tables are in a different order.")

    details = [f"confirmed only: {c}" for c in only_cases] + [f"deaths only: {c}" for c in only_deaths]
    raise SchemaMismatch("Date columns differ between the confirmed and deaths tables", details=details)


def load_table(source: str | Path, cfg: AppConfig, metric: str) -> pd.DataFrame:
    df = read_table(source, cfg)
    df = standardize_headers(df, cfg)
    df = validate_raw_table(df, cfg, metric)
    df = exclude_regions(df, cfg)
    logger.info("Loaded %s table: %d rows, %d date columns", metric, len(df), len(date_columns(df, cfg)))
    return df


def load_raw_tables(cfg: AppConfig) -> RawTables:
    cases = load_table(cfg.confirmed_source, cfg, "confirmed")
    deaths = load_table(cfg.deaths_source, cfg, "deaths")
    check_date_alignment(cases, deaths, cfg)
    return RawTables(cases=cases, deaths=deaths)
