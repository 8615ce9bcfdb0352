"""Tests for dashboard/refresh_cache.py — offline snapshot maintenance."""

from __future__ import annotations

import datetime
import json
from unittest.mock import MagicMock

import pytest

from jolpica_f1 import JolpicaClient, JolpicaRateLimitError, StandingsType
from jolpica_f1.models import Race, StandingsList

import refresh_cache
from shared.data.cache import SnapshotCache

NOW = datetime.datetime(2024, 3, 10, tzinfo=datetime.timezone.utc)


@pytest.fixture
def client(sample_race, sample_driver_standings_list, sample_constructor_standings_list):
    future = dict(sample_race, round="2", raceName="Saudi Arabian Grand Prix", date="2024-03-20")
    mock = MagicMock(spec=JolpicaClient)
    mock.schedule.return_value = [Race.model_validate(sample_race), Race.model_validate(future)]

    def _standings(season, round, kind):
        if StandingsType(kind) is StandingsType.DRIVER:
            return StandingsList.model_validate(sample_driver_standings_list)
        return StandingsList.model_validate(sample_constructor_standings_list)

    mock.standings.side_effect = _standings
    return mock


class TestRefreshSeason:
    def test_completed_rounds_only(self, client):
        sleeps: list[float] = []
        entry = refresh_cache.refresh_season(client, 2024, NOW, sleep=sleeps.append)

        assert [r["round"] for r in entry["schedule"]] == [1, 2]
        assert list(entry["driverStandings"]) == ["1"]
        assert list(entry["constructorStandings"]) == ["1"]
        assert client.standings.call_count == 2
        assert sleeps == [refresh_cache.POLITE_DELAY] * 2

    def test_snapshot_readable_by_cache(self, client):
        entry = refresh_cache.refresh_season(client, 2024, NOW, sleep=lambda _: None)
        cache = SnapshotCache(json.loads(json.dumps({"2024": entry})))

        assert [r.race_name for r in cache.schedule(2024)] == [
            "Bahrain Grand Prix", "Saudi Arabian Grand Prix",
        ]
        standings = cache.standings(2024, 1, StandingsType.DRIVER)
        assert standings.driver_standings[0].driver.code == "VER"
        assert cache.standings(2024, 1, StandingsType.CONSTRUCTOR) is not None

    def test_failed_round_left_out(self, client):
        client.standings.side_effect = JolpicaRateLimitError(429, "Rate limit exceeded")
        entry = refresh_cache.refresh_season(client, 2024, NOW, sleep=lambda _: None)
        assert entry["schedule"]
        assert entry["driverStandings"] == {}
        assert entry["constructorStandings"] == {}

    def test_failed_schedule_yields_empty_entry(self, client):
        client.schedule.side_effect = JolpicaRateLimitError(429, "Rate limit exceeded")
        entry = refresh_cache.refresh_season(client, 2024, NOW, sleep=lambda _: None)
        assert entry == {"schedule": [], "driverStandings": {}, "constructorStandings": {}}
        client.standings.assert_not_called()


def test_main_writes_snapshot(monkeypatch, tmp_path, client):
    output = tmp_path / "cache.json"
    monkeypatch.setattr(refresh_cache, "JolpicaClient", MagicMock(return_value=client))
    client.__enter__.return_value = client

    refresh_cache.main(["2024", "--output", str(output)])

    snapshot = json.loads(output.read_text())
    assert list(snapshot) == ["2024"]
    client.schedule.assert_called_with(2024)
