"""Rebuild the standings snapshot cache from the live API.

Run from the repository root:

    python dashboard/refresh_cache.py            # seasons from settings
    python dashboard/refresh_cache.py 2024 2023  # explicit seasons
"""

from __future__ import annotations

import argparse
import datetime
import logging
import time
from typing import Any

from jolpica_f1 import JolpicaClient, JolpicaError, StandingsType

from shared.config import load_settings
from shared.data.cache import write_snapshot
from shared.data.normalize import race_to_event
from shared.data.schedule import filter_completed_races

logger = logging.getLogger("refresh_cache")

POLITE_DELAY = 0.5  # seconds between standings requests


def _dump(model: Any) -> dict[str, Any]:
    return model.model_dump(by_alias=True, mode="json", exclude_none=True)


def refresh_season(
    client: JolpicaClient,
    season: int,
    now: datetime.datetime,
    sleep=time.sleep,
) -> dict[str, Any]:
    """Fetch one season's schedule and completed-round standings into snapshot form.

    Rounds whose standings cannot be fetched are left out of the snapshot.
    """
    entry: dict[str, Any] = {"schedule": [], "driverStandings": {}, "constructorStandings": {}}
    try:
        races = client.schedule(season)
    except JolpicaError as exc:
        logger.error("Error fetching schedule for %d: %s", season, exc)
        return entry
    entry["schedule"] = [_dump(r) for r in races]

    completed = filter_completed_races([race_to_event(r) for r in races], now)
    logger.info("Found %d completed races for %d", len(completed), season)

    for event in completed:
        for kind in StandingsType:
            logger.info("Fetching %s standings: %d round %d", kind.value, season, event["round"])
            try:
                standings = client.standings(season, event["round"], kind)
            except JolpicaError as exc:
                logger.error(
                    "Error fetching %s standings for %d round %d: %s",
                    kind.value, season, event["round"], exc,
                )
                standings = None
            if standings is not None:
                entry[kind.endpoint][str(event["round"])] = _dump(standings)
            sleep(POLITE_DELAY)
    return entry


def main(argv: list[str] | None = None) -> None:
    settings = load_settings()
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("seasons", nargs="*", type=int, default=list(settings.seasons))
    parser.add_argument("--output", default=settings.cache_file)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s | %(levelname)s | %(message)s")
    now = datetime.datetime.now(datetime.timezone.utc)

    snapshot: dict[str, Any] = {}
    with JolpicaClient(base_url=settings.api_url, timeout=settings.timeout) as client:
        for season in args.seasons:
            snapshot[str(season)] = refresh_season(client, season, now)

    write_snapshot(args.output, snapshot)
    logger.info("Data cached successfully to %s", args.output)


if __name__ == "__main__":
    main()
