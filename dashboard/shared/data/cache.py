"""Read-only snapshot cache of schedules and per-round standings.

Snapshot layout (JSON)::

    {
      "2024": {
        "schedule": [<Race>, ...],
        "driverStandings": {"1": <StandingsList>, ...},
        "constructorStandings": {"1": <StandingsList>, ...}
      }
    }
"""

from __future__ import annotations

import json
import os
import tempfile
from typing import Any

from jolpica_f1.client import validate_races, validate_standings_list
from jolpica_f1.exceptions import JolpicaValidationError
from jolpica_f1.models import Race, StandingsList, StandingsType

from ..api_logging import log_warning
from .errors import F1DataError


class SnapshotCache:
    """Season-keyed snapshot of API records, injected into the data layer."""

    def __init__(self, snapshot: dict[str, Any] | None = None) -> None:
        self._snapshot = snapshot or {}

    @classmethod
    def from_file(cls, path: str) -> SnapshotCache:
        """Load a snapshot file; a missing file yields an empty cache."""
        if not os.path.exists(path):
            return cls()
        try:
            with open(path, encoding="utf-8") as fh:
                snapshot = json.load(fh)
        except (OSError, ValueError) as exc:
            raise F1DataError(f"Failed to read standings cache {path}: {exc}") from exc
        if not isinstance(snapshot, dict):
            raise F1DataError(f"Standings cache {path} is not a season mapping")
        for season, entry in snapshot.items():
            if not str(season).isdigit() or not isinstance(entry, dict):
                raise F1DataError(
                    f"Standings cache {path} has a malformed season entry {season!r}"
                )
        return cls(snapshot)

    def seasons(self) -> list[int]:
        return sorted((int(s) for s in self._snapshot if str(s).isdigit()), reverse=True)

    def _season(self, season: int) -> dict[str, Any]:
        entry = self._snapshot.get(str(season))
        return entry if isinstance(entry, dict) else {}

    def schedule(self, season: int) -> list[Race]:
        """Return the cached schedule for *season*, or [] when absent or unreadable."""
        records = self._season(season).get("schedule") or []
        if not records:
            return []
        try:
            return validate_races(records)
        except JolpicaValidationError as exc:
            log_warning("Ignoring cached schedule for %d: %s", season, exc)
            return []

    def standings(self, season: int, round: int, kind: StandingsType) -> StandingsList | None:
        """Return the cached standings snapshot for one round, or None."""
        by_round = self._season(season).get(StandingsType(kind).endpoint)
        record = by_round.get(str(round)) if isinstance(by_round, dict) else None
        if not record:
            return None
        try:
            return validate_standings_list(record)
        except JolpicaValidationError as exc:
            log_warning(
                "Ignoring cached %s standings for %d round %d: %s",
                StandingsType(kind).value, season, round, exc,
            )
            return None


def write_snapshot(path: str, snapshot: dict[str, Any]) -> None:
    """Write *snapshot* to *path* atomically (temp file in the same dir, then replace)."""
    directory = os.path.dirname(os.path.abspath(path))
    os.makedirs(directory, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".standings-", suffix=".json")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            json.dump(snapshot, fh, indent=2)
        os.replace(tmp_path, path)
    except BaseException:
        if os.path.exists(tmp_path):
            os.unlink(tmp_path)
        raise
