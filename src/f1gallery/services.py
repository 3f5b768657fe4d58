"""Browsing services combining gateway fetches with the pure query layer."""

from __future__ import annotations

import asyncio

from f1gallery.aggregator import aggregate_teams
from f1gallery.api_logging import log_service_call
from f1gallery.exceptions import RemoteUnavailable
from f1gallery.gateway import RaceDataGateway
from f1gallery.models.driver import Driver
from f1gallery.models.navigation import DriverDetail, NavigationResult
from f1gallery.models.query import SortConfig
from f1gallery.models.team import Team
from f1gallery.navigator import navigate
from f1gallery.query import filter_and_sort, filter_and_sort_teams


class DriverBrowser:
    """Driver and team views backed by a ``RaceDataGateway``.

    Every call works on freshly fetched data; the browser keeps no state of
    its own besides the gateway.
    """

    def __init__(self, gateway: RaceDataGateway) -> None:
        self.gateway = gateway

    @log_service_call
    async def fetch_teams(self) -> list[Team]:
        """Teams of the reference session; empty if drivers cannot be fetched."""
        return aggregate_teams(await self.gateway.fetch_drivers())

    @log_service_call
    async def fetch_navigation(self, driver_number: int) -> NavigationResult:
        """Previous/next drivers; no neighbours if drivers cannot be fetched."""
        return navigate(await self.gateway.fetch_drivers(), driver_number)

    @log_service_call
    async def browse_drivers(
        self,
        query: str = "",
        team_filter: str = "",
        country_filter: str = "",
        sort_config: SortConfig | None = None,
    ) -> list[Driver]:
        drivers = await self.gateway.fetch_drivers()
        return filter_and_sort(drivers, query, team_filter, country_filter, sort_config)

    @log_service_call
    async def browse_teams(
        self, query: str = "", country_filter: str = "", min_drivers: int = 0,
    ) -> list[Team]:
        return filter_and_sort_teams(await self.fetch_teams(), query, country_filter, min_drivers)

    @log_service_call
    async def load_driver_detail(self, driver_number: int) -> DriverDetail | None:
        """Fetch a driver, their latest laps and their neighbours concurrently.

        The lap and navigation branches degrade to empty results on their
        own. A failed driver lookup cancels the other branches and is
        re-raised as-is.

        Returns:
            The combined detail, or None if no driver has *driver_number*.

        Raises:
            RemoteUnavailable: The driver lookup failed.
        """
        try:
            async with asyncio.TaskGroup() as tg:
                driver_task = tg.create_task(self.gateway.fetch_driver(driver_number))
                laps_task = tg.create_task(self.gateway.fetch_driver_laps(driver_number))
                nav_task = tg.create_task(self.fetch_navigation(driver_number))
        except ExceptionGroup as group:
            failure = group.subgroup(RemoteUnavailable)
            if failure is None:
                raise
            raise _first_leaf(failure) from None

        driver = driver_task.result()
        if driver is None:
            return None
        return DriverDetail(
            driver=driver,
            laps=laps_task.result(),
            navigation=nav_task.result(),
        )


def _first_leaf(group: BaseExceptionGroup) -> BaseException:
    exc: BaseException = group
    while isinstance(exc, BaseExceptionGroup):
        exc = exc.exceptions[0]
    return exc
