"""Remote data gateway: the gallery's only source of OpenF1 data."""

from __future__ import annotations

import logging

from f1gallery.api_logging import log_api_call
from f1gallery.client import AsyncOpenF1Client
from f1gallery.config import Settings, get_settings
from f1gallery.exceptions import RemoteUnavailable
from f1gallery.models.driver import Driver
from f1gallery.models.lap import Lap
from f1gallery.models.meeting import Meeting
from f1gallery.models.position import Position
from f1gallery.models.session import Session
from f1gallery.models.session_result import SessionResult
from f1gallery.navigator import find_by_id
from f1gallery.normalizer import CountryCodeNormalizer

logger = logging.getLogger(__name__)


def most_recent_laps(laps: list[Lap], limit: int) -> list[Lap]:
    """Return up to *limit* laps, highest lap number first; a negative limit gives none."""
    numbered = sorted(
        (lap for lap in laps if lap.lap_number is not None),
        key=lambda lap: lap.lap_number,  # type: ignore[arg-type, return-value]
        reverse=True,
    )
    unnumbered = [lap for lap in laps if lap.lap_number is None]
    return (numbered + unnumbered)[:max(limit, 0)]


def most_recent_sessions(sessions: list[Session], limit: int) -> list[Session]:
    """Return up to *limit* sessions, latest start first; undated sessions last."""
    dated = sorted(
        (s for s in sessions if s.date_start is not None),
        key=lambda s: s.date_start,  # type: ignore[arg-type, return-value]
        reverse=True,
    )
    undated = [s for s in sessions if s.date_start is None]
    return (dated + undated)[:max(limit, 0)]


class RaceDataGateway:
    """Fetches and normalizes race data for the configured reference session.

    List operations never raise: on ``RemoteUnavailable`` they log a warning
    and return an empty list. ``fetch_driver`` propagates the error so the
    caller can offer a retry. Nothing is cached; every call re-fetches.

    Usage:
        async with RaceDataGateway() as gateway:
            drivers = await gateway.fetch_drivers()
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: AsyncOpenF1Client | None = None,
        normalizer: CountryCodeNormalizer | None = None,
    ) -> None:
        self.settings = settings or get_settings()
        self._owns_client = client is None
        self._client = client or AsyncOpenF1Client(
            base_url=self.settings.base_url,
            timeout=self.settings.timeout,
        )
        self.normalizer = normalizer or CountryCodeNormalizer()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(session_key={self.settings.session_key})"

    async def __aenter__(self) -> RaceDataGateway:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the client if this gateway created it."""
        if self._owns_client:
            await self._client.close()

    @property
    def session_key(self) -> int:
        return self.settings.session_key

    async def _load_drivers(self) -> list[Driver]:
        drivers = await self._client.drivers(session_key=self.session_key)
        return self.normalizer.normalize_all(drivers)

    # ── Single-entity lookup (propagates) ─────────────────────────

    @log_api_call
    async def fetch_driver(self, driver_number: int) -> Driver | None:
        """Return the normalized driver with *driver_number*, or None if absent.

        Raises:
            RemoteUnavailable: The driver list could not be fetched.
        """
        return find_by_id(await self._load_drivers(), driver_number)

    # ── List operations (degrade to empty) ────────────────────────

    @log_api_call
    async def fetch_drivers(self) -> list[Driver]:
        """Return every driver of the reference session, normalized."""
        try:
            return await self._load_drivers()
        except RemoteUnavailable as exc:
            logger.warning("Failed to fetch drivers for session %s: %s", self.session_key, exc)
            return []

    @log_api_call
    async def fetch_driver_laps(self, driver_number: int, limit: int | None = None) -> list[Lap]:
        """Return a driver's latest laps by lap number, at most *limit* of them."""
        limit = self.settings.lap_limit if limit is None else limit
        try:
            laps = await self._client.laps(
                session_key=self.session_key, driver_number=driver_number,
            )
        except RemoteUnavailable as exc:
            logger.warning("Failed to fetch laps for driver %s: %s", driver_number, exc)
            return []
        return most_recent_laps(laps, limit)

    @log_api_call
    async def fetch_sessions(self, limit: int | None = None) -> list[Session]:
        """Return the season's latest sessions by start date, at most *limit*."""
        limit = self.settings.session_limit if limit is None else limit
        try:
            sessions = await self._client.sessions(year=self.settings.season_year)
        except RemoteUnavailable as exc:
            logger.warning(
                "Failed to fetch sessions for %s: %s", self.settings.season_year, exc,
            )
            return []
        return most_recent_sessions(sessions, limit)

    @log_api_call
    async def fetch_meetings(self, year: int | None = None) -> list[Meeting]:
        year = self.settings.season_year if year is None else year
        try:
            return await self._client.meetings(year=year)
        except RemoteUnavailable as exc:
            logger.warning("Failed to fetch meetings for %s: %s", year, exc)
            return []

    @log_api_call
    async def fetch_positions(self, session_key: int | None = None) -> list[Position]:
        session_key = self.session_key if session_key is None else session_key
        try:
            return await self._client.position(session_key=session_key)
        except RemoteUnavailable as exc:
            logger.warning("Failed to fetch positions for session %s: %s", session_key, exc)
            return []

    @log_api_call
    async def fetch_session_results(self, session_key: int | None = None) -> list[SessionResult]:
        session_key = self.session_key if session_key is None else session_key
        try:
            return await self._client.session_result(session_key=session_key)
        except RemoteUnavailable as exc:
            logger.warning(
                "Failed to fetch session results for session %s: %s", session_key, exc,
            )
            return []
