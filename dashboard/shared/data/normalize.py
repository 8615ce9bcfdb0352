"""Convert validated API models into the data-layer contracts."""

from __future__ import annotations

from jolpica_f1.models import ConstructorStanding, DriverStanding, Race, StandingsList, StandingsType

from ..api_logging import log_warning
from .errors import MalformedRecord
from .types import EventData, StandingEntry

UNKNOWN_COUNTRY = "Unknown"


def race_to_event(race: Race) -> EventData:
    return {
        "round": race.round,
        "name": race.race_name,
        "date": race.date,
        "time": race.time,
        "country": race.country or UNKNOWN_COUNTRY,
    }


def _parse_count(raw: str | None, field: str, minimum: int) -> int:
    try:
        value = int(str(raw).strip())
    except (TypeError, ValueError) as exc:
        raise MalformedRecord(f"{field}={raw!r} is not an integer") from exc
    if value < minimum:
        raise MalformedRecord(f"{field}={raw!r} is below {minimum}")
    return value


def _parse_points(raw: str | None) -> float:
    try:
        value = float(str(raw).strip())
    except (TypeError, ValueError) as exc:
        raise MalformedRecord(f"points={raw!r} is not a number") from exc
    if value != value or value < 0:  # NaN or negative
        raise MalformedRecord(f"points={raw!r} is not a valid tally")
    return value


def _entry(
    round: int,
    row: DriverStanding | ConstructorStanding,
    entity_id: str,
    display_name: str,
    attributes: dict,
) -> StandingEntry:
    entry: StandingEntry = {
        "round": round,
        "entity_id": entity_id,
        "display_name": display_name,
        "attributes": attributes,
        "position": None,
        "points": None,
        "wins": None,
    }
    try:
        entry["position"] = _parse_count(row.position, "position", 1)
        entry["points"] = _parse_points(row.points)
        entry["wins"] = _parse_count(row.wins, "wins", 0)
    except MalformedRecord as exc:
        log_warning("Malformed standing for %s in round %d: %s", entity_id, round, exc)
        entry["position"] = entry["points"] = entry["wins"] = None
    return entry


def standings_to_entries(
    standings: StandingsList | None, round: int, kind: StandingsType,
) -> list[StandingEntry]:
    """Flatten a standings snapshot into one StandingEntry per entity.

    Malformed rows keep their identity but carry no position, points or wins.
    """
    if standings is None:
        return []
    if StandingsType(kind) is StandingsType.DRIVER:
        return [
            _entry(
                round,
                row,
                row.driver.driver_id,
                row.driver.code or row.driver.family_name or row.driver.driver_id,
                row.driver.model_dump(by_alias=True, exclude_none=True),
            )
            for row in standings.driver_standings
        ]
    return [
        _entry(
            round,
            row,
            row.constructor.constructor_id,
            row.constructor.name or row.constructor.constructor_id,
            row.constructor.model_dump(by_alias=True, exclude_none=True),
        )
        for row in standings.constructor_standings
    ]
