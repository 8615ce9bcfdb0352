"""Tests for Pydantic model deserialization."""

from __future__ import annotations

import datetime

import pytest

from jolpica_f1.models import (
    Constructor,
    ConstructorStanding,
    Driver,
    DriverStanding,
    Race,
    StandingsList,
    StandingsType,
)


class TestRaceModel:
    def test_parse(self, sample_race) -> None:
        race = Race.model_validate(sample_race)
        assert race.round == 1
        assert race.season == 2024
        assert race.race_name == "Bahrain Grand Prix"
        assert race.date == datetime.date(2024, 3, 2)
        assert race.time is not None
        assert (race.time.hour, race.time.minute) == (15, 0)
        assert race.time.utcoffset() == datetime.timedelta(0)
        assert race.circuit is not None
        assert race.circuit.circuit_id == "bahrain"
        assert race.country == "Bahrain"

    def test_optional_time(self, sample_race) -> None:
        del sample_race["time"]
        race = Race.model_validate(sample_race)
        assert race.time is None

    def test_missing_circuit(self) -> None:
        race = Race.model_validate({"round": "3", "raceName": "Test GP", "date": "2024-04-01"})
        assert race.country is None

    def test_frozen(self, sample_race) -> None:
        race = Race.model_validate(sample_race)
        with pytest.raises(Exception):
            race.round = 2  # type: ignore[misc]


class TestIdentityModels:
    def test_driver(self) -> None:
        driver = Driver.model_validate({"driverId": "hamilton", "code": "HAM", "familyName": "Hamilton"})
        assert driver.driver_id == "hamilton"
        assert driver.given_name is None

    def test_driver_dump_uses_api_names(self) -> None:
        driver = Driver.model_validate({"driverId": "hamilton", "givenName": "Lewis"})
        assert driver.model_dump(by_alias=True, exclude_none=True) == {
            "driverId": "hamilton",
            "givenName": "Lewis",
        }

    def test_constructor(self) -> None:
        team = Constructor.model_validate({"constructorId": "mclaren", "name": "McLaren"})
        assert team.name == "McLaren"


class TestStandingsModels:
    def test_driver_standings_list(self, sample_driver_standings_list) -> None:
        standings = StandingsList.model_validate(sample_driver_standings_list)
        assert standings.round == 1
        assert len(standings.driver_standings) == 2
        row = standings.driver_standings[0]
        assert isinstance(row, DriverStanding)
        assert row.position == "1"
        assert row.points == "26"
        assert row.constructors[0].constructor_id == "red_bull"
        assert standings.constructor_standings == []

    def test_constructor_standings_list(self, sample_constructor_standings_list) -> None:
        standings = StandingsList.model_validate(sample_constructor_standings_list)
        assert isinstance(standings.constructor_standings[0], ConstructorStanding)
        assert standings.constructor_standings[0].points == "44"

    def test_missing_position_tolerated(self) -> None:
        row = DriverStanding.model_validate({
            "positionText": "-",
            "points": "0",
            "wins": "0",
            "Driver": {"driverId": "doohan"},
        })
        assert row.position is None
        assert row.position_text == "-"


class TestStandingsType:
    def test_endpoints(self) -> None:
        assert StandingsType.DRIVER.endpoint == "driverStandings"
        assert StandingsType.CONSTRUCTOR.endpoint == "constructorStandings"

    def test_from_value(self) -> None:
        assert StandingsType("constructor") is StandingsType.CONSTRUCTOR
