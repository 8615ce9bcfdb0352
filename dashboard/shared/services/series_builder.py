"""Series Builder — merge schedule and per-round standings into dense per-entity series.

Pure functions, no I/O. Given the completed events of a season and a map
``round -> entries | failure``, every discovered entity gets exactly one
DataPoint per completed event, in round order. Rounds without data, and
entities without an entry in a round, yield gap points (all values None).
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from ..data.types import EventData, RaceInfo, StandingEntry


@dataclass(frozen=True)
class DataPoint:
    event_round: int
    event_name: str
    rank: int | None
    points: float | None
    wins: int | None

    @property
    def is_gap(self) -> bool:
        return self.rank is None and self.points is None and self.wins is None


@dataclass(frozen=True)
class Series:
    entity_id: str
    display_name: str
    attributes: dict[str, Any]
    points: list[DataPoint]


@dataclass(frozen=True)
class SeasonStandings:
    """Presentation input: one Series per entity plus the race axis."""

    series: list[Series]
    races: list[RaceInfo]


def _index_rounds(
    events: list[EventData],
    round_results: Mapping[int, list[StandingEntry] | BaseException],
) -> tuple[dict[int, dict[str, StandingEntry]], dict[str, StandingEntry]]:
    """Index entries per round and discover entities in round order.

    Returns (round -> entity_id -> entry, entity_id -> first-seen entry).
    A repeated entity_id within one round keeps only its last row, for both
    values and metadata.
    """
    index: dict[int, dict[str, StandingEntry]] = {}
    first_seen: dict[str, StandingEntry] = {}
    for event in events:
        result = round_results.get(event["round"])
        if not isinstance(result, list) or not result:
            continue
        by_entity: dict[str, StandingEntry] = {}
        for entry in result:
            by_entity[entry["entity_id"]] = entry
        for entity_id, entry in by_entity.items():
            first_seen.setdefault(entity_id, entry)
        index[event["round"]] = by_entity
    return index, first_seen


def _data_point(event: EventData, entry: StandingEntry | None) -> DataPoint:
    if entry is None:
        return DataPoint(event["round"], event["name"], None, None, None)
    return DataPoint(
        event_round=event["round"],
        event_name=event["name"],
        rank=entry["position"],
        points=entry["points"],
        wins=entry["wins"],
    )


def build_series(
    events: list[EventData],
    round_results: Mapping[int, list[StandingEntry] | BaseException],
) -> list[Series]:
    """Build one dense, race-aligned Series per entity seen in any round.

    Args:
        events: Completed events of the season (any order; sorted by round here).
        round_results: Entries per round, or the exception that round failed with.

    Returns:
        Series in discovery order; empty when there are no completed events.
    """
    ordered = sorted(events, key=lambda e: e["round"])
    index, first_seen = _index_rounds(ordered, round_results)

    series: list[Series] = []
    for entity_id, origin in first_seen.items():
        series.append(Series(
            entity_id=entity_id,
            display_name=origin["display_name"],
            attributes=origin["attributes"],
            points=[
                _data_point(event, index.get(event["round"], {}).get(entity_id))
                for event in ordered
            ],
        ))
    return series


def build_race_axis(events: list[EventData]) -> list[RaceInfo]:
    """Return the x-axis races ({round, name, country}) in round order."""
    return [
        {"round": e["round"], "name": e["name"], "country": e["country"]}
        for e in sorted(events, key=lambda e: e["round"])
    ]
