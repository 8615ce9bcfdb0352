"""Schedule Provider — season race calendar with cache-first resolution."""

from __future__ import annotations

import datetime

from jolpica_f1 import AsyncJolpicaClient, JolpicaError

from ..api_logging import log_api_call
from .cache import SnapshotCache
from .errors import DataUnavailable
from .normalize import race_to_event
from .types import EventData


def _as_utc(value: datetime.datetime) -> datetime.datetime:
    """Treat naive datetimes as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value


def event_datetime(event: EventData) -> datetime.datetime:
    """Start instant of *event*; an unknown time of day means start of day."""
    start_time = event["time"] or datetime.time(0, 0)
    return _as_utc(datetime.datetime.combine(event["date"], start_time))


def filter_completed_races(
    events: list[EventData], now: datetime.datetime,
) -> list[EventData]:
    """Return events that started strictly before *now*, ordered by round."""
    cutoff = _as_utc(now)
    return sorted(
        (e for e in events if event_datetime(e) < cutoff),
        key=lambda e: e["round"],
    )


class ScheduleProvider:
    """Resolve a season schedule from the snapshot cache, else the live API.

    The two sources are never merged: a non-empty cached schedule is returned
    as-is without network access.
    """

    def __init__(self, cache: SnapshotCache, client: AsyncJolpicaClient) -> None:
        self._cache = cache
        self._client = client

    @log_api_call
    async def get_schedule(self, season: int) -> list[EventData]:
        cached = self._cache.schedule(season)
        if cached:
            return [race_to_event(r) for r in cached]

        try:
            races = await self._client.schedule(season)
        except JolpicaError as exc:
            raise DataUnavailable(f"No schedule available for {season}: {exc}") from exc
        if not races:
            raise DataUnavailable(f"No schedule available for {season}")
        return [race_to_event(r) for r in races]
