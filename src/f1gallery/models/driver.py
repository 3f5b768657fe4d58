"""Driver information model."""

from __future__ import annotations

from f1gallery.models._base import OpenF1Record


class Driver(OpenF1Record):
    """Driver info for a specific session.

    ``driver_number`` identifies the driver within a session; every other
    field may be missing from the upstream record.
    """

    broadcast_name: str | None = None
    country_code: str | None = None
    driver_number: int
    first_name: str | None = None
    full_name: str | None = None
    headshot_url: str | None = None
    last_name: str | None = None
    meeting_key: int | None = None
    name_acronym: str | None = None
    session_key: int | None = None
    team_colour: str | None = None
    team_name: str | None = None

    @property
    def surname_key(self) -> str:
        """Uppercased last token of ``full_name``, or an empty string."""
        tokens = (self.full_name or "").split()
        return tokens[-1].upper() if tokens else ""
