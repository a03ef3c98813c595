from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import FrozenSet


JHU_BASE_URL = (
    "https://raw.githubusercontent.com/CSSEGISandData/COVID-19/master/"
    "csse_covid_19_data/csse_covid_19_time_series"
)

EXCLUDED_REGIONS: FrozenSet[str] = frozenset(
    {
        "Diamond Princess",
        "Grand Princess",
        "American Samoa",
        "District of Columbia",
        "Guam",
        "Northern Mariana Islands",
        "Puerto Rico",
        "Virgin Islands",
    }
)


@dataclass(frozen=True)
class AppConfig:
    # ---- Sources ----
    confirmed_source: str = f"{JHU_BASE_URL}/time_series_covid19_confirmed_US.csv"
    deaths_source: str = f"{JHU_BASE_URL}/time_series_covid19_deaths_US.csv"
    request_timeout_s: float = 30.0

    # ---- Schema ----
    state_col: str = "Province_State"
    id_cols: tuple[str, ...] = (
        "UID",
        "iso2",
        "iso3",
        "code3",
        "FIPS",
        "Admin2",
        "Country_Region",
        "Lat",
        "Long_",
        "Combined_Key",
        "Population",
    )
    syntactic_headers: bool = True
    date_prefix: str = "X"
    date_format: str = "%m.%d.%y"
    excluded_regions: FrozenSet[str] = field(default_factory=lambda: EXCLUDED_REGIONS)

    # ---- Model ----
    reference_state: str = "New York"
    series_state: str | None = None  # None -> reference_state

    # ---- Logging ----
    log_level: str = "INFO"

    @property
    def plotted_state(self) -> str:
        return self.series_state or self.reference_state

    def with_overrides(self, **kwargs) -> "AppConfig":
        if "excluded_regions" in kwargs:
            kwargs["excluded_regions"] = frozenset(kwargs["excluded_regions"])
        return replace(self, **kwargs)


CFG = AppConfig()

METRICS = ("confirmed", "deaths")
