"""Shared dashboard utilities."""

# --- Constants, config & formatting ---
from .config import Settings, load_settings
from .constants import ENTITY_TYPE_LABELS, PLOTLY_LAYOUT_DEFAULTS, SERIES_COLORS
from .flags import country_to_flag_asset
from .formatters import format_points, format_rank, format_wins

# --- Data layer ---
from .data import (
    DataUnavailable,
    F1DataError,
    ScheduleProvider,
    SnapshotCache,
    StandingsSource,
    filter_completed_races,
)

# --- Service layer ---
from .services import (
    SeasonStandings,
    SeasonStandingsService,
    Series,
    StandingsQueryTracker,
    StandingsResultCache,
)

# --- Charts ---
from .charts import ChartScale, build_standings_figure

__all__ = [
    "ChartScale",
    "DataUnavailable",
    "ENTITY_TYPE_LABELS",
    "F1DataError",
    "PLOTLY_LAYOUT_DEFAULTS",
    "SERIES_COLORS",
    "ScheduleProvider",
    "SeasonStandings",
    "SeasonStandingsService",
    "Series",
    "Settings",
    "SnapshotCache",
    "StandingsQueryTracker",
    "StandingsResultCache",
    "StandingsSource",
    "build_standings_figure",
    "country_to_flag_asset",
    "filter_completed_races",
    "format_points",
    "format_rank",
    "format_wins",
    "load_settings",
]
