"""Standings Source — per-round standings with cache-first resolution."""

from __future__ import annotations

import asyncio

from jolpica_f1 import AsyncJolpicaClient, StandingsType

from ..api_logging import log_api_call, log_warning
from .cache import SnapshotCache
from .normalize import standings_to_entries
from .types import StandingEntry

RoundResult = list[StandingEntry] | BaseException


class StandingsSource:
    """Resolve each round's standings independently: snapshot cache, else the live API.

    Network retries for rate limiting and connection resets are handled by the
    client's RetryPolicy; failures that survive them propagate for that round only.
    The cache is never written here.
    """

    def __init__(self, cache: SnapshotCache, client: AsyncJolpicaClient) -> None:
        self._cache = cache
        self._client = client

    @log_api_call
    async def get_standings(
        self, season: int, round: int, kind: StandingsType,
    ) -> list[StandingEntry]:
        cached = standings_to_entries(self._cache.standings(season, round, kind), round, kind)
        if cached:
            return cached
        fetched = await self._client.standings(season, round, kind)
        return standings_to_entries(fetched, round, kind)

    async def get_season_standings(
        self, season: int, rounds: list[int], kind: StandingsType,
    ) -> dict[int, RoundResult]:
        """Fetch every round concurrently and join into {round: entries or failure}.

        Each task fills its own slot, so completion order does not matter.
        """
        results = await asyncio.gather(
            *(self.get_standings(season, r, kind) for r in rounds),
            return_exceptions=True,
        )
        by_round: dict[int, RoundResult] = {}
        for round, result in zip(rounds, results):
            if isinstance(result, asyncio.CancelledError):
                raise result
            if isinstance(result, BaseException):
                log_warning(
                    "No %s standings for %d round %d: %s: %s",
                    StandingsType(kind).value, season, round, type(result).__name__, result,
                )
            by_round[round] = result
        return by_round
