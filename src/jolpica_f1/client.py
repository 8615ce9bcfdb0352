"""Public client classes for the Jolpica (Ergast-compatible) F1 API."""

from __future__ import annotations

import asyncio
import time
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import TypeAdapter

from jolpica_f1._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport, SyncTransport
from jolpica_f1._retry import RetryPolicy, acall_with_retry, call_with_retry
from jolpica_f1.exceptions import JolpicaValidationError
from jolpica_f1.models.race import Race
from jolpica_f1.models.standings import StandingsList, StandingsType


def validate_races(data: list[dict[str, Any]]) -> list[Race]:
    """Validate a list of race records, ordered by round."""
    try:
        races = TypeAdapter(list[Race]).validate_python(data)
    except Exception as exc:
        raise JolpicaValidationError(f"Failed to validate Race response: {exc}") from exc
    return sorted(races, key=lambda r: r.round)


def validate_standings_list(data: dict[str, Any]) -> StandingsList:
    """Validate a single StandingsList record."""
    try:
        return StandingsList.model_validate(data)
    except Exception as exc:
        raise JolpicaValidationError(
            f"Failed to validate StandingsList response: {exc}"
        ) from exc


def _unwrap(payload: dict[str, Any], *keys: str) -> Any:
    """Walk the MRData envelope down *keys*."""
    node: Any = payload
    for key in ("MRData", *keys):
        if not isinstance(node, dict) or key not in node:
            raise JolpicaValidationError(f"Response envelope is missing {key!r}")
        node = node[key]
    return node


def _schedule_from_payload(payload: dict[str, Any]) -> list[Race]:
    return validate_races(_unwrap(payload, "RaceTable", "Races"))


def _standings_from_payload(payload: dict[str, Any]) -> StandingsList | None:
    lists = _unwrap(payload, "StandingsTable", "StandingsLists")
    if not lists:
        return None
    return validate_standings_list(lists[0])


def _standings_endpoint(season: int, round: int, kind: StandingsType) -> str:
    return f"/{season}/{round}/{StandingsType(kind).endpoint}.json"


class JolpicaClient:
    """Synchronous client for the Jolpica F1 API.

    Usage:
        f1 = JolpicaClient()
        races = f1.schedule(2024)
        f1.close()

        # Or as a context manager:
        with JolpicaClient() as f1:
            standings = f1.standings(2024, 5, StandingsType.DRIVER)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_policy: RetryPolicy | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._transport = SyncTransport(base_url=base_url, timeout=timeout)
        self._retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep

    def __enter__(self) -> JolpicaClient:
        return self

    def __exit__(self, *args: object) -> None:
        self.close()

    def close(self) -> None:
        """Close the underlying HTTP connection."""
        self._transport.close()

    def _get(self, endpoint: str) -> dict[str, Any]:
        return call_with_retry(
            lambda: self._transport.get(endpoint),
            self._retry_policy,
            sleep=self._sleep,
            description=f"GET {endpoint}",
        )

    # ── Endpoints ──────────────────────────────────────────────

    def schedule(self, season: int) -> list[Race]:
        """Get the race schedule for a season, ordered by round."""
        return _schedule_from_payload(self._get(f"/{season}.json"))

    def standings(self, season: int, round: int, kind: StandingsType) -> StandingsList | None:
        """Get the championship standings published after a round."""
        return _standings_from_payload(self._get(_standings_endpoint(season, round, kind)))

    def driver_standings(self, season: int, round: int) -> StandingsList | None:
        """Get driver championship standings after a round."""
        return self.standings(season, round, StandingsType.DRIVER)

    def constructor_standings(self, season: int, round: int) -> StandingsList | None:
        """Get constructor championship standings after a round."""
        return self.standings(season, round, StandingsType.CONSTRUCTOR)


class AsyncJolpicaClient:
    """Asynchronous client for the Jolpica F1 API.

    Usage:
        async with AsyncJolpicaClient() as f1:
            races = await f1.schedule(2024)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        retry_policy: RetryPolicy | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)
        self._retry_policy = retry_policy or RetryPolicy()
        self._sleep = sleep

    async def __aenter__(self) -> AsyncJolpicaClient:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _get(self, endpoint: str) -> dict[str, Any]:
        return await acall_with_retry(
            lambda: self._transport.get(endpoint),
            self._retry_policy,
            sleep=self._sleep,
            description=f"GET {endpoint}",
        )

    # ── Endpoints ──────────────────────────────────────────────

    async def schedule(self, season: int) -> list[Race]:
        """Get the race schedule for a season, ordered by round."""
        return _schedule_from_payload(await self._get(f"/{season}.json"))

    async def standings(
        self, season: int, round: int, kind: StandingsType,
    ) -> StandingsList | None:
        """Get the championship standings published after a round."""
        return _standings_from_payload(await self._get(_standings_endpoint(season, round, kind)))

    async def driver_standings(self, season: int, round: int) -> StandingsList | None:
        """Get driver championship standings after a round."""
        return await self.standings(season, round, StandingsType.DRIVER)

    async def constructor_standings(self, season: int, round: int) -> StandingsList | None:
        """Get constructor championship standings after a round."""
        return await self.standings(season, round, StandingsType.CONSTRUCTOR)
