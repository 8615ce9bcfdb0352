"""Shared fixtures for dashboard tests."""

from __future__ import annotations

import datetime
import logging

import pytest

from shared.data.types import EventData, StandingEntry


@pytest.fixture(autouse=True)
def _isolated_api_log(tmp_path):
    """Redirect the API call log to tmp_path and reset the cached logger."""
    import shared.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger(mod._LOGGER_NAME)
    named_logger.handlers.clear()

    mod._logger = None
    mod._LOG_DIR = str(tmp_path)
    mod._LOG_FILE = str(tmp_path / "api_calls.log")

    yield tmp_path

    # Close file handlers to release file locks (important on Windows)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file


# ── Sample data fixtures ─────────────────────────────────────────────────────


def _make_event(
    round: int,
    name: str | None = None,
    date: datetime.date | None = None,
    time: datetime.time | None = None,
    country: str = "Bahrain",
) -> EventData:
    return {
        "round": round,
        "name": name or f"Round {round} Grand Prix",
        "date": date or datetime.date(2024, 3, 1) + datetime.timedelta(weeks=round - 1),
        "time": time,
        "country": country,
    }


def _make_entry(
    round: int,
    entity_id: str,
    position: int | None,
    points: float | None = 0.0,
    wins: int | None = 0,
    display_name: str | None = None,
    attributes: dict | None = None,
) -> StandingEntry:
    return {
        "round": round,
        "entity_id": entity_id,
        "display_name": display_name or entity_id.upper(),
        "attributes": attributes if attributes is not None else {"id": entity_id},
        "position": position,
        "points": points,
        "wins": wins,
    }


@pytest.fixture
def make_event():
    """Factory fixture for creating EventData dicts."""
    return _make_event


@pytest.fixture
def make_entry():
    """Factory fixture for creating StandingEntry dicts."""
    return _make_entry


@pytest.fixture
def three_events() -> list[EventData]:
    return [_make_event(1), _make_event(2), _make_event(3)]


@pytest.fixture
def sparse_round_results() -> dict[int, list[StandingEntry]]:
    """A has entries in rounds 1 and 3 only; B in all three rounds."""
    return {
        1: [_make_entry(1, "b", 1, 25, 1), _make_entry(1, "a", 2, 18, 0)],
        2: [_make_entry(2, "b", 1, 50, 2)],
        3: [_make_entry(3, "a", 1, 58, 1), _make_entry(3, "b", 2, 55, 2)],
    }
