"""Data contracts for the standings dashboard data layer."""

from __future__ import annotations

import datetime
from typing import Any, TypedDict


class EventData(TypedDict):
    round: int
    name: str
    date: datetime.date
    time: datetime.time | None
    country: str


class StandingEntry(TypedDict):
    round: int
    entity_id: str
    display_name: str
    attributes: dict[str, Any]  # raw driver / constructor record
    position: int | None  # None only for malformed rows
    points: float | None
    wins: int | None


class RaceInfo(TypedDict):
    round: int
    name: str
    country: str
