"""Season standings query service — schedule + per-round fan-out + series building."""

from __future__ import annotations

import datetime
import itertools
import threading
import time
from collections.abc import Callable
from dataclasses import dataclass

from jolpica_f1 import StandingsType

from ..api_logging import log_service_call, log_warning
from ..data.errors import F1DataError
from ..data.schedule import ScheduleProvider, filter_completed_races
from ..data.standings_source import StandingsSource
from .series_builder import SeasonStandings, build_race_axis, build_series

# Query results stay fresh for a day
RESULT_TTL_SECONDS = 24 * 60 * 60


def _utc_now() -> datetime.datetime:
    return datetime.datetime.now(datetime.timezone.utc)


@dataclass(frozen=True)
class QueryToken:
    generation: int
    season: int
    kind: StandingsType


class StandingsQueryTracker:
    """Hand out query tokens; only the most recently issued one is current."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)
        self._latest: QueryToken | None = None
        self._lock = threading.Lock()

    def issue(self, season: int, kind: StandingsType) -> QueryToken:
        with self._lock:
            self._latest = QueryToken(next(self._counter), season, StandingsType(kind))
            return self._latest

    def is_current(self, token: QueryToken) -> bool:
        with self._lock:
            return self._latest == token


class StandingsResultCache:
    """Latest SeasonStandings per (season, kind), kept for *ttl* seconds."""

    def __init__(
        self,
        ttl: float = RESULT_TTL_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._ttl = ttl
        self._clock = clock
        self._entries: dict[tuple[int, StandingsType], tuple[float, SeasonStandings]] = {}
        self._lock = threading.Lock()

    def get(self, season: int, kind: StandingsType) -> SeasonStandings | None:
        key = (season, StandingsType(kind))
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                return None
            stored_at, standings = entry
            if self._clock() - stored_at >= self._ttl:
                del self._entries[key]
                return None
            return standings

    def put(self, season: int, kind: StandingsType, standings: SeasonStandings) -> None:
        with self._lock:
            self._entries[(season, StandingsType(kind))] = (self._clock(), standings)


class SeasonStandingsService:
    """Encapsulates the standings pipeline for one (season, type) query."""

    def __init__(
        self,
        schedule_provider: ScheduleProvider,
        standings_source: StandingsSource,
        clock: Callable[[], datetime.datetime] = _utc_now,
        tracker: StandingsQueryTracker | None = None,
        results: StandingsResultCache | None = None,
    ) -> None:
        self._schedule = schedule_provider
        self._standings = standings_source
        self._clock = clock
        self._tracker = tracker or StandingsQueryTracker()
        self._results = results

    @log_service_call
    async def load(self, season: int, kind: StandingsType) -> SeasonStandings:
        """Build the season's series from scratch.

        Raises DataUnavailable when no schedule exists for *season*. A season
        with no completed races yields an empty SeasonStandings.
        """
        events = await self._schedule.get_schedule(season)
        completed = filter_completed_races(events, self._clock())
        if not completed:
            return SeasonStandings(series=[], races=[])

        round_results = await self._standings.get_season_standings(
            season, [e["round"] for e in completed], kind,
        )
        return SeasonStandings(
            series=build_series(completed, round_results),
            races=build_race_axis(completed),
        )

    async def query(self, season: int, kind: StandingsType) -> SeasonStandings | None:
        """Run load() as the newest query; return None if superseded before it resolved.

        With a result cache, a fresh stored result for (season, kind) is returned
        without loading again.
        """
        token = self._tracker.issue(season, kind)
        if self._results is not None:
            cached = self._results.get(season, kind)
            if cached is not None:
                return cached
        try:
            result = await self.load(season, kind)
        except F1DataError:
            if self._tracker.is_current(token):
                raise
            log_warning("Discarding failed stale query %r", token)
            return None
        if not self._tracker.is_current(token):
            log_warning("Discarding stale query %r", token)
            return None
        if self._results is not None:
            self._results.put(season, kind, result)
        return result
