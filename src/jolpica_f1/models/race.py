"""Race (schedule event) models."""

from __future__ import annotations

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field


class Location(BaseModel):
    """Geographic location of a circuit."""

    model_config = ConfigDict(frozen=True)

    lat: float | None = None
    long: float | None = None
    locality: str | None = None
    country: str | None = None


class Circuit(BaseModel):
    """Circuit hosting a race."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    circuit_id: str | None = Field(default=None, alias="circuitId")
    circuit_name: str | None = Field(default=None, alias="circuitName")
    url: str | None = None
    location: Location | None = Field(default=None, alias="Location")


class Race(BaseModel):
    """A championship round in a season schedule."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    season: int | None = None
    round: int
    race_name: str = Field(alias="raceName")
    url: str | None = None
    circuit: Circuit | None = Field(default=None, alias="Circuit")
    date: dt.date
    time: dt.time | None = None

    @property
    def country(self) -> str | None:
        if self.circuit is None or self.circuit.location is None:
            return None
        return self.circuit.location.country
