"""Basic usage examples for the f1gallery data layer."""

import asyncio

from f1gallery import DriverBrowser, RaceDataGateway, RemoteUnavailable
from f1gallery.models import SortConfig


async def main() -> None:
    async with RaceDataGateway() as gateway:
        browser = DriverBrowser(gateway)

        print(f"=== Drivers (session_key={gateway.session_key}) ===")
        drivers = await browser.browse_drivers(sort_config=SortConfig(option="driver_number"))
        for d in drivers:
            print(f"  #{d.driver_number} {d.full_name} - {d.team_name} [{d.country_code}]")

        if not drivers:
            print("  No drivers found.")
            return

        print("\n=== Teams with two drivers ===")
        for team in await browser.browse_teams(min_drivers=2):
            names = ", ".join(d.name_acronym or str(d.driver_number) for d in team.drivers)
            print(f"  {team.team_name}: {names} ({'/'.join(team.country_codes)})")

        print("\n=== Recent sessions ===")
        for s in await gateway.fetch_sessions():
            when = f"{s.date_start:%Y-%m-%d}" if s.date_start else "TBA"
            length = f" ({s.duration})" if s.duration else ""
            print(f"  {when} {s.location} - {s.session_name}{length}")

        driver_number = drivers[0].driver_number
        print(f"\n=== Driver #{driver_number} ===")
        try:
            detail = await browser.load_driver_detail(driver_number)
        except RemoteUnavailable as exc:
            print(f"  Could not load driver: {exc}")
            return
        if detail is None:
            print("  Driver not found.")
            return

        nav = detail.navigation
        print(f"  Previous: {nav.previous.broadcast_name if nav.previous else '-'}")
        print(f"  Next: {nav.next.broadcast_name if nav.next else '-'}")
        for lap in detail.laps:
            lap_time = lap.lap_timedelta
            sectors = f" (sectors {lap.total_sector_time:.3f}s)" if lap.total_sector_time else ""
            print(f"  Lap {lap.lap_number}: {lap_time or 'N/A'}{sectors}")


if __name__ == "__main__":
    asyncio.run(main())
