"""Tests for the browsing services and the driver detail fan-out."""

from __future__ import annotations

import httpx
import pytest
import respx

from f1gallery import DriverBrowser, RaceDataGateway, Settings
from f1gallery.exceptions import RemoteAPIError, RemoteTimeoutError
from f1gallery.models import DriverDetail, NavigationResult, SortConfig
from tests.conftest import GRID_PAYLOAD, SAMPLE_LAP

BASE_URL = "https://api.openf1.org/v1"


def _browser() -> DriverBrowser:
    return DriverBrowser(RaceDataGateway(Settings(session_key=9693, season_year=2025)))


def _mock_grid() -> respx.Route:
    return respx.get(f"{BASE_URL}/drivers").mock(
        return_value=httpx.Response(200, json=GRID_PAYLOAD)
    )


def _mock_laps(numbers: list[int]) -> respx.Route:
    return respx.get(f"{BASE_URL}/laps").mock(
        return_value=httpx.Response(
            200, json=[{**SAMPLE_LAP, "lap_number": n} for n in numbers],
        )
    )


class TestFetchTeams:
    @respx.mock
    @pytest.mark.asyncio
    async def test_aggregates_normalized_drivers(self) -> None:
        _mock_grid()
        browser = _browser()
        teams = await browser.fetch_teams()
        await browser.gateway.close()
        assert [t.team_name for t in teams][:3] == ["Red Bull Racing", "McLaren", "Ferrari"]
        mclaren = teams[1]
        assert mclaren.country_codes == ["GBR", "AUS"]
        assert "INT" not in mclaren.country_codes

    @respx.mock
    @pytest.mark.asyncio
    async def test_degrades_to_empty(self) -> None:
        respx.get(f"{BASE_URL}/drivers").mock(return_value=httpx.Response(500))
        browser = _browser()
        assert await browser.fetch_teams() == []
        await browser.gateway.close()


class TestFetchNavigation:
    @respx.mock
    @pytest.mark.asyncio
    async def test_neighbours(self) -> None:
        _mock_grid()
        browser = _browser()
        nav = await browser.fetch_navigation(44)
        await browser.gateway.close()
        assert nav.previous.driver_number == 22
        assert nav.next.driver_number == 81

    @respx.mock
    @pytest.mark.asyncio
    async def test_fetch_failure_has_no_neighbours(self) -> None:
        respx.get(f"{BASE_URL}/drivers").mock(side_effect=httpx.ConnectError("down"))
        browser = _browser()
        assert await browser.fetch_navigation(44) == NavigationResult()
        await browser.gateway.close()


class TestBrowse:
    @respx.mock
    @pytest.mark.asyncio
    async def test_browse_drivers(self) -> None:
        _mock_grid()
        browser = _browser()
        drivers = await browser.browse_drivers(
            country_filter="GBR", sort_config=SortConfig(option="driver_number", order="desc"),
        )
        await browser.gateway.close()
        assert [d.driver_number for d in drivers] == [44, 4]

    @respx.mock
    @pytest.mark.asyncio
    async def test_browse_teams(self) -> None:
        _mock_grid()
        browser = _browser()
        teams = await browser.browse_teams(min_drivers=2)
        await browser.gateway.close()
        assert [t.team_name for t in teams] == ["McLaren", "Ferrari"]


class TestLoadDriverDetail:
    @respx.mock
    @pytest.mark.asyncio
    async def test_combines_all_branches(self) -> None:
        drivers_route = _mock_grid()
        _mock_laps(list(range(1, 13)))
        browser = _browser()
        detail = await browser.load_driver_detail(16)
        await browser.gateway.close()

        assert isinstance(detail, DriverDetail)
        assert detail.driver.full_name == "Charles LECLERC"
        assert [lap.lap_number for lap in detail.laps] == [12, 11, 10, 9, 8, 7, 6, 5, 4, 3]
        assert detail.navigation.previous.driver_number == 7
        assert detail.navigation.next.driver_number == 22
        assert drivers_route.call_count == 2

    @respx.mock
    @pytest.mark.asyncio
    async def test_unknown_driver_is_none(self) -> None:
        _mock_grid()
        _mock_laps([])
        browser = _browser()
        assert await browser.load_driver_detail(99) is None
        await browser.gateway.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_lap_failure_degrades(self) -> None:
        _mock_grid()
        respx.get(f"{BASE_URL}/laps").mock(side_effect=httpx.ReadTimeout("slow"))
        browser = _browser()
        detail = await browser.load_driver_detail(1)
        await browser.gateway.close()
        assert detail is not None
        assert detail.laps == []
        assert detail.navigation.next.driver_number == 4

    @respx.mock
    @pytest.mark.asyncio
    async def test_driver_lookup_failure_propagates_unwrapped(self) -> None:
        respx.get(f"{BASE_URL}/drivers").mock(
            return_value=httpx.Response(503, text="Service Unavailable")
        )
        _mock_laps([1, 2])
        browser = _browser()
        with pytest.raises(RemoteAPIError) as exc_info:
            await browser.load_driver_detail(1)
        await browser.gateway.close()
        assert exc_info.value.status_code == 503

    @respx.mock
    @pytest.mark.asyncio
    async def test_driver_lookup_timeout_propagates(self) -> None:
        respx.get(f"{BASE_URL}/drivers").mock(side_effect=httpx.ConnectTimeout("slow"))
        respx.get(f"{BASE_URL}/laps").mock(side_effect=httpx.ConnectTimeout("slow"))
        browser = _browser()
        with pytest.raises(RemoteTimeoutError):
            await browser.load_driver_detail(1)
        await browser.gateway.close()
