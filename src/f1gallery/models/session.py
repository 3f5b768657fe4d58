"""Session model (practice, qualifying, sprint, race)."""

from __future__ import annotations

from datetime import datetime, timedelta

from f1gallery.models._base import OpenF1Record


class Session(OpenF1Record):
    """A single timed on-track activity within a meeting."""

    circuit_key: int | None = None
    circuit_short_name: str | None = None
    country_code: str | None = None
    country_key: int | None = None
    country_name: str | None = None
    date_end: datetime | None = None
    date_start: datetime | None = None
    gmt_offset: str | None = None
    location: str | None = None
    meeting_key: int | None = None
    session_key: int | None = None
    session_name: str | None = None
    session_type: str | None = None
    year: int | None = None

    @property
    def duration(self) -> timedelta | None:
        """Scheduled length of the session, or None if either bound is missing."""
        if self.date_start is None or self.date_end is None:
            return None
        return self.date_end - self.date_start
