"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import copy

import pytest

BASE_URL = "https://api.jolpi.ca/ergast/f1"


SAMPLE_RACE = {
    "season": "2024",
    "round": "1",
    "url": "https://en.wikipedia.org/wiki/2024_Bahrain_Grand_Prix",
    "raceName": "Bahrain Grand Prix",
    "Circuit": {
        "circuitId": "bahrain",
        "url": "https://en.wikipedia.org/wiki/Bahrain_International_Circuit",
        "circuitName": "Bahrain International Circuit",
        "Location": {"lat": "26.0325", "long": "50.5106", "locality": "Sakhir", "country": "Bahrain"},
    },
    "date": "2024-03-02",
    "time": "15:00:00Z",
}

SAMPLE_DRIVER = {
    "driverId": "max_verstappen",
    "permanentNumber": "33",
    "code": "VER",
    "url": "http://en.wikipedia.org/wiki/Max_Verstappen",
    "givenName": "Max",
    "familyName": "Verstappen",
    "dateOfBirth": "1997-09-30",
    "nationality": "Dutch",
}

SAMPLE_CONSTRUCTOR = {
    "constructorId": "red_bull",
    "url": "http://en.wikipedia.org/wiki/Red_Bull_Racing",
    "name": "Red Bull",
    "nationality": "Austrian",
}

SAMPLE_DRIVER_STANDINGS_LIST = {
    "season": "2024",
    "round": "1",
    "DriverStandings": [
        {
            "position": "1",
            "positionText": "1",
            "points": "26",
            "wins": "1",
            "Driver": SAMPLE_DRIVER,
            "Constructors": [SAMPLE_CONSTRUCTOR],
        },
        {
            "position": "2",
            "positionText": "2",
            "points": "18",
            "wins": "0",
            "Driver": {
                "driverId": "perez",
                "permanentNumber": "11",
                "code": "PER",
                "givenName": "Sergio",
                "familyName": "Pérez",
                "nationality": "Mexican",
            },
            "Constructors": [SAMPLE_CONSTRUCTOR],
        },
    ],
}

SAMPLE_CONSTRUCTOR_STANDINGS_LIST = {
    "season": "2024",
    "round": "1",
    "ConstructorStandings": [
        {
            "position": "1",
            "positionText": "1",
            "points": "44",
            "wins": "1",
            "Constructor": SAMPLE_CONSTRUCTOR,
        },
        {
            "position": "2",
            "positionText": "2",
            "points": "27",
            "wins": "0",
            "Constructor": {"constructorId": "ferrari", "name": "Ferrari", "nationality": "Italian"},
        },
    ],
}


def schedule_payload(races: list[dict]) -> dict:
    """Wrap race records in the MRData envelope."""
    return {"MRData": {"RaceTable": {"season": "2024", "Races": races}}}


def standings_payload(standings_lists: list[dict]) -> dict:
    """Wrap standings lists in the MRData envelope."""
    return {"MRData": {"StandingsTable": {"season": "2024", "StandingsLists": standings_lists}}}


@pytest.fixture
def base_url() -> str:
    return BASE_URL


@pytest.fixture
def sample_race() -> dict:
    return copy.deepcopy(SAMPLE_RACE)


@pytest.fixture
def sample_driver_standings_list() -> dict:
    return copy.deepcopy(SAMPLE_DRIVER_STANDINGS_LIST)


@pytest.fixture
def sample_constructor_standings_list() -> dict:
    return copy.deepcopy(SAMPLE_CONSTRUCTOR_STANDINGS_LIST)


@pytest.fixture
def make_schedule_payload():
    return schedule_payload


@pytest.fixture
def make_standings_payload():
    return standings_payload
