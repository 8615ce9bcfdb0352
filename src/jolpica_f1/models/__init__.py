"""Jolpica F1 data models."""

from jolpica_f1.models.driver import Constructor, Driver
from jolpica_f1.models.race import Circuit, Location, Race
from jolpica_f1.models.standings import (
    ConstructorStanding,
    DriverStanding,
    StandingsList,
    StandingsType,
)

__all__ = [
    "Circuit",
    "Constructor",
    "ConstructorStanding",
    "Driver",
    "DriverStanding",
    "Location",
    "Race",
    "StandingsList",
    "StandingsType",
]
