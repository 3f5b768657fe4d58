"""Lap telemetry model."""

from __future__ import annotations

from datetime import datetime, timedelta

from f1gallery.models._base import OpenF1Record


class Lap(OpenF1Record):
    """One lap of one driver with sector times and speed trap values.

    Missing timings stay ``None``; ``lap_number`` orders laps but is not
    guaranteed to be contiguous.
    """

    date_start: datetime | None = None
    driver_number: int | None = None
    duration_sector_1: float | None = None
    duration_sector_2: float | None = None
    duration_sector_3: float | None = None
    i1_speed: float | None = None
    i2_speed: float | None = None
    is_pit_out_lap: bool | None = None
    lap_duration: float | None = None
    lap_number: int | None = None
    meeting_key: int | None = None
    segments_sector_1: list[int | None] | None = None
    segments_sector_2: list[int | None] | None = None
    segments_sector_3: list[int | None] | None = None
    session_key: int | None = None
    st_speed: float | None = None

    @property
    def total_sector_time(self) -> float | None:
        """Sum of all three sector durations, or None if any is missing."""
        sectors = (self.duration_sector_1, self.duration_sector_2, self.duration_sector_3)
        if any(s is None for s in sectors):
            return None
        return sum(sectors)  # type: ignore[arg-type]

    @property
    def lap_timedelta(self) -> timedelta | None:
        if self.lap_duration is None:
            return None
        return timedelta(seconds=self.lap_duration)
