"""Data layer — snapshot cache, schedule provider and standings source."""

from __future__ import annotations

from .cache import SnapshotCache, write_snapshot
from .errors import DataUnavailable, F1DataError, MalformedRecord
from .schedule import ScheduleProvider, event_datetime, filter_completed_races
from .standings_source import RoundResult, StandingsSource
from .types import EventData, RaceInfo, StandingEntry

__all__ = [
    "DataUnavailable",
    "EventData",
    "F1DataError",
    "MalformedRecord",
    "RaceInfo",
    "RoundResult",
    "ScheduleProvider",
    "SnapshotCache",
    "StandingEntry",
    "StandingsSource",
    "event_datetime",
    "filter_completed_races",
    "write_snapshot",
]
