"""Fold driver records into teams."""

from __future__ import annotations

from collections.abc import Iterable

from f1gallery.models.driver import Driver
from f1gallery.models.team import Team
from f1gallery.normalizer import INTERNATIONAL

UNKNOWN_TEAM = "Unknown Team"


def team_key(driver: Driver) -> str:
    """Return the name a driver is grouped under."""
    return driver.team_name or UNKNOWN_TEAM


def aggregate_teams(drivers: Iterable[Driver]) -> list[Team]:
    """Group drivers by team name.

    Teams come out in the order they are first encountered. Each team takes
    its colour from the first driver seen for it, lists its drivers in input
    order, and collects distinct country codes in first-seen order.
    """
    teams: dict[str, Team] = {}

    for driver in drivers:
        name = team_key(driver)
        team = teams.get(name)
        if team is None:
            team = Team(team_name=name, team_colour=driver.team_colour)
            teams[name] = team

        team.drivers.append(driver)

        code = driver.country_code or INTERNATIONAL
        if code not in team.country_codes:
            team.country_codes.append(code)

    return list(teams.values())
