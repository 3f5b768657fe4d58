"""Typed async client for the OpenF1 endpoints the gallery reads."""

from __future__ import annotations

from typing import Any, TypeVar

from pydantic import TypeAdapter, ValidationError

from f1gallery._http import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, AsyncTransport
from f1gallery._params import build_query_params
from f1gallery.exceptions import ResponseValidationError
from f1gallery.models.driver import Driver
from f1gallery.models.lap import Lap
from f1gallery.models.meeting import Meeting
from f1gallery.models.position import Position
from f1gallery.models.session import Session
from f1gallery.models.session_result import SessionResult

T = TypeVar("T")


def _validate_list(model_type: type[T], data: list[dict[str, Any]]) -> list[T]:
    """Validate a list of dicts against a Pydantic model."""
    try:
        adapter = TypeAdapter(list[model_type])
        return adapter.validate_python(data)
    except ValidationError as exc:
        raise ResponseValidationError(
            f"Failed to validate {model_type.__name__} response: {exc}"
        ) from exc


class AsyncOpenF1Client:
    """Asynchronous client for the OpenF1 API.

    Raises ``RemoteUnavailable`` subclasses on any failure; it never
    degrades results itself.

    Usage:
        async with AsyncOpenF1Client() as f1:
            drivers = await f1.drivers(session_key=9693)
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> None:
        self._transport = AsyncTransport(base_url=base_url, timeout=timeout)

    async def __aenter__(self) -> AsyncOpenF1Client:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Close the underlying HTTP connection."""
        await self._transport.close()

    async def _get(self, endpoint: str, model: type[T], **kwargs: Any) -> list[T]:
        params = build_query_params(**kwargs)
        data = await self._transport.get(endpoint, params)
        return _validate_list(model, data)

    # ── Endpoints ──────────────────────────────────────────────

    async def drivers(self, session_key: int | None = None) -> list[Driver]:
        """Get driver information for a session."""
        return await self._get("/drivers", Driver, session_key=session_key)

    async def laps(
        self, session_key: int | None = None, driver_number: int | None = None,
    ) -> list[Lap]:
        """Get lap data with sector times and speeds."""
        return await self._get(
            "/laps", Lap, driver_number=driver_number, session_key=session_key,
        )

    async def sessions(self, year: int | None = None) -> list[Session]:
        """Get sessions (practice, qualifying, sprint, race) of a season."""
        return await self._get("/sessions", Session, year=year)

    async def meetings(self, year: int | None = None) -> list[Meeting]:
        """Get Grand Prix weekends and test events."""
        return await self._get("/meetings", Meeting, year=year)

    async def position(self, session_key: int | None = None) -> list[Position]:
        """Get driver position changes throughout a session."""
        return await self._get("/position", Position, session_key=session_key)

    async def session_result(self, session_key: int | None = None) -> list[SessionResult]:
        """Get final standings after a session."""
        return await self._get("/session_result", SessionResult, session_key=session_key)
