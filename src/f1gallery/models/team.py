"""Team model derived from driver records."""

from __future__ import annotations

from pydantic import BaseModel, Field

from f1gallery.models.driver import Driver


class Team(BaseModel):
    """Drivers grouped under one team name.

    Built fresh by the aggregator; never sourced from the API.
    """

    team_name: str
    team_colour: str | None = None
    drivers: list[Driver] = Field(default_factory=list)
    country_codes: list[str] = Field(default_factory=list)

    @property
    def driver_count(self) -> int:
        return len(self.drivers)

    @property
    def lead_driver(self) -> Driver | None:
        """First driver seen for this team, used as its detail entry point."""
        return self.drivers[0] if self.drivers else None
