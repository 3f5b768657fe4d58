"""Navigation and driver detail models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from f1gallery.models.driver import Driver
from f1gallery.models.lap import Lap


class NavigationResult(BaseModel):
    """Neighbours of a driver in ascending driver-number order."""

    model_config = ConfigDict(frozen=True)

    previous: Driver | None = None
    next: Driver | None = None


class DriverDetail(BaseModel):
    """Everything a driver detail view needs, fetched in one fan-out."""

    model_config = ConfigDict(frozen=True)

    driver: Driver
    laps: list[Lap] = Field(default_factory=list)
    navigation: NavigationResult = Field(default_factory=NavigationResult)
