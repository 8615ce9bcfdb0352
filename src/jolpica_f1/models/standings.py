"""Championship standings models (drivers and constructors).

Numeric fields are kept as the raw strings the API sends so that a single
malformed row does not fail validation of the whole standings list.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from jolpica_f1.models.driver import Constructor, Driver


class DriverStanding(BaseModel):
    """Driver championship standing entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    position: str | None = None
    position_text: str | None = Field(default=None, alias="positionText")
    points: str | None = None
    wins: str | None = None
    driver: Driver = Field(alias="Driver")
    constructors: list[Constructor] = Field(default_factory=list, alias="Constructors")


class ConstructorStanding(BaseModel):
    """Constructor championship standing entry."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    position: str | None = None
    position_text: str | None = Field(default=None, alias="positionText")
    points: str | None = None
    wins: str | None = None
    constructor: Constructor = Field(alias="Constructor")


class StandingsList(BaseModel):
    """Standings snapshot published after a round."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    season: int | None = None
    round: int | None = None
    driver_standings: list[DriverStanding] = Field(default_factory=list, alias="DriverStandings")
    constructor_standings: list[ConstructorStanding] = Field(
        default_factory=list, alias="ConstructorStandings",
    )


class StandingsType(str, Enum):
    """Championship tracked by a standings query."""

    DRIVER = "driver"
    CONSTRUCTOR = "constructor"

    @property
    def endpoint(self) -> str:
        """Resource name used by the API and the snapshot cache."""
        return "driverStandings" if self is StandingsType.DRIVER else "constructorStandings"
