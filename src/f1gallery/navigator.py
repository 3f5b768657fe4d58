"""Lookup and previous/next navigation over drivers and teams."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from f1gallery.models.driver import Driver
from f1gallery.models.navigation import NavigationResult
from f1gallery.models.team import Team


def find_by_id(drivers: Iterable[Driver], driver_number: int) -> Driver | None:
    """Return the driver with *driver_number*, or None."""
    return next((d for d in drivers if d.driver_number == driver_number), None)


def navigation_order(drivers: Iterable[Driver]) -> list[Driver]:
    """Return a copy of *drivers* sorted by ascending driver number."""
    return sorted(drivers, key=lambda d: d.driver_number)


def navigate(drivers: Sequence[Driver], driver_number: int) -> NavigationResult:
    """Return the drivers either side of *driver_number* in navigation order.

    An unknown *driver_number* has no neighbours.
    """
    ordered = navigation_order(drivers)
    index = next(
        (i for i, d in enumerate(ordered) if d.driver_number == driver_number), None,
    )
    if index is None:
        return NavigationResult()

    return NavigationResult(
        previous=ordered[index - 1] if index > 0 else None,
        next=ordered[index + 1] if index < len(ordered) - 1 else None,
    )


def find_team(teams: Iterable[Team], team_name: str) -> Team | None:
    return next((t for t in teams if t.team_name == team_name), None)


def team_entry_driver(teams: Iterable[Team], team_name: str) -> Driver | None:
    """Return the driver a team card opens: the first one seen for that team."""
    team = find_team(teams, team_name)
    return team.lead_driver if team is not None else None
