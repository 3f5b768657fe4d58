"""Sort and filter value objects for the query engine."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class SortOption(str, Enum):
    """Driver attributes the query engine can sort by."""

    NAME = "name"
    TEAM = "team"
    DRIVER_NUMBER = "driver_number"
    COUNTRY = "country"


class SortOrder(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortConfig(BaseModel):
    """Sort option and direction."""

    model_config = ConfigDict(frozen=True)

    option: SortOption = SortOption.NAME
    order: SortOrder = SortOrder.ASC


class FilterOptions(BaseModel):
    """Distinct team names and country codes offered as filter choices."""

    model_config = ConfigDict(frozen=True)

    teams: list[str] = Field(default_factory=list)
    countries: list[str] = Field(default_factory=list)
