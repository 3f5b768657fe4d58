"""Search, filter and sort over in-memory driver and team collections."""

from __future__ import annotations

import unicodedata
from collections.abc import Callable, Iterable

from f1gallery.models.driver import Driver
from f1gallery.models.query import FilterOptions, SortConfig, SortOption, SortOrder
from f1gallery.models.team import Team
from f1gallery.normalizer import INTERNATIONAL

# Missing country codes sort after every real one.
MISSING_COUNTRY_SORT_KEY = "ZZZ"


def _contains(haystack: str | None, needle: str) -> bool:
    return haystack is not None and needle in haystack.lower()


def matches_query(driver: Driver, query: str) -> bool:
    """Case-insensitive substring match on full name, broadcast name or team."""
    if not query:
        return True
    needle = query.lower()
    return (
        _contains(driver.full_name, needle)
        or _contains(driver.broadcast_name, needle)
        or _contains(driver.team_name, needle)
    )


def _driver_passes(
    driver: Driver, query: str, team_filter: str, country_filter: str,
) -> bool:
    if not matches_query(driver, query):
        return False
    if team_filter and driver.team_name != team_filter:
        return False
    if country_filter and (driver.country_code or INTERNATIONAL) != country_filter:
        return False
    return True


def collation_key(value: str) -> tuple[str, str, tuple[bool, ...]]:
    """Sort key ordering by letter first, then accents, then lowercase before uppercase.

    "Ålpine" sorts with "alpine" and "RB" after "Racing Bulls", independent of
    the process locale.
    """
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(c for c in decomposed if not unicodedata.combining(c))
    return base.casefold(), decomposed.casefold(), tuple(c.isupper() for c in base)


_SORT_KEYS: dict[SortOption, Callable[[Driver], object]] = {
    SortOption.NAME: lambda d: collation_key(d.full_name or ""),
    SortOption.TEAM: lambda d: collation_key(d.team_name or ""),
    SortOption.DRIVER_NUMBER: lambda d: d.driver_number,
    SortOption.COUNTRY: lambda d: collation_key(d.country_code or MISSING_COUNTRY_SORT_KEY),
}


def sort_drivers(drivers: Iterable[Driver], sort_config: SortConfig) -> list[Driver]:
    """Stable sort; drivers with equal keys keep their input order in both directions."""
    return sorted(
        drivers,
        key=_SORT_KEYS[sort_config.option],
        reverse=sort_config.order == SortOrder.DESC,
    )


def filter_and_sort(
    drivers: Iterable[Driver],
    query: str = "",
    team_filter: str = "",
    country_filter: str = "",
    sort_config: SortConfig | None = None,
) -> list[Driver]:
    """Return the drivers passing every filter, ordered by *sort_config*.

    Args:
        drivers: Normalized drivers.
        query: Free text matched against full name, broadcast name and team name.
            Empty matches everything.
        team_filter: Exact team name, or empty for any team.
        country_filter: Exact country code, or empty for any country. Drivers
            without a code match ``"INT"``.
        sort_config: Sort option and direction; defaults to name ascending.

    Returns:
        A new list; *drivers* is left untouched.
    """
    selected = [
        d for d in drivers
        if _driver_passes(d, query, team_filter, country_filter)
    ]
    return sort_drivers(selected, sort_config or SortConfig())


def matches_team_query(team: Team, query: str) -> bool:
    """Match the team name or any member's full or broadcast name."""
    if not query:
        return True
    needle = query.lower()
    if _contains(team.team_name, needle):
        return True
    return any(
        _contains(d.full_name, needle) or _contains(d.broadcast_name, needle)
        for d in team.drivers
    )


def filter_and_sort_teams(
    teams: Iterable[Team],
    query: str = "",
    country_filter: str = "",
    min_drivers: int = 0,
) -> list[Team]:
    """Return the teams passing every filter, in input order."""
    return [
        t for t in teams
        if matches_team_query(t, query)
        and (not country_filter or country_filter in t.country_codes)
        and t.driver_count >= min_drivers
    ]


def toggle_sort(current: SortConfig, option: SortOption) -> SortConfig:
    """Flip the order when re-selecting the active option, else sort ascending."""
    if current.option == option:
        order = SortOrder.DESC if current.order == SortOrder.ASC else SortOrder.ASC
        return SortConfig(option=option, order=order)
    return SortConfig(option=option, order=SortOrder.ASC)


def driver_filter_options(drivers: Iterable[Driver]) -> FilterOptions:
    """Distinct team names and country codes, each sorted."""
    drivers = list(drivers)
    teams = {d.team_name for d in drivers if d.team_name}
    countries = {d.country_code or INTERNATIONAL for d in drivers}
    return FilterOptions(
        teams=sorted(teams, key=collation_key), countries=sorted(countries),
    )


def team_filter_options(teams: Iterable[Team]) -> FilterOptions:
    teams = list(teams)
    return FilterOptions(
        teams=sorted({t.team_name for t in teams}, key=collation_key),
        countries=sorted({code for t in teams for code in t.country_codes}),
    )
