"""Service layer — standings pipeline for the dashboard."""

from .season_standings import (
    QueryToken,
    SeasonStandingsService,
    StandingsQueryTracker,
    StandingsResultCache,
)
from .series_builder import DataPoint, SeasonStandings, Series, build_race_axis, build_series

__all__ = [
    "DataPoint",
    "QueryToken",
    "SeasonStandings",
    "SeasonStandingsService",
    "Series",
    "StandingsQueryTracker",
    "StandingsResultCache",
    "build_race_axis",
    "build_series",
]
