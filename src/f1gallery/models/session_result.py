"""Session result model."""

from __future__ import annotations

from f1gallery.models._base import OpenF1Record


class SessionResult(OpenF1Record):
    """Final standing after a session."""

    dnf: bool | None = None
    dns: bool | None = None
    dsq: bool | None = None
    driver_number: int | None = None
    duration: float | list[float | None] | None = None
    gap_to_leader: float | str | list[float | str | None] | None = None
    number_of_laps: int | None = None
    meeting_key: int | None = None
    position: int | None = None
    session_key: int | None = None
