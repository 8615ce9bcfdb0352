"""Driver and constructor identity models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Driver(BaseModel):
    """Driver identity and biographical metadata."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    driver_id: str = Field(alias="driverId")
    permanent_number: str | None = Field(default=None, alias="permanentNumber")
    code: str | None = None
    url: str | None = None
    given_name: str | None = Field(default=None, alias="givenName")
    family_name: str | None = Field(default=None, alias="familyName")
    date_of_birth: str | None = Field(default=None, alias="dateOfBirth")
    nationality: str | None = None


class Constructor(BaseModel):
    """Constructor (team) identity."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    constructor_id: str = Field(alias="constructorId")
    url: str | None = None
    name: str | None = None
    nationality: str | None = None
