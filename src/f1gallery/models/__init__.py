"""f1gallery data models."""

from f1gallery.models.driver import Driver
from f1gallery.models.lap import Lap
from f1gallery.models.meeting import Meeting
from f1gallery.models.navigation import DriverDetail, NavigationResult
from f1gallery.models.position import Position
from f1gallery.models.query import FilterOptions, SortConfig, SortOption, SortOrder
from f1gallery.models.session import Session
from f1gallery.models.session_result import SessionResult
from f1gallery.models.team import Team

__all__ = [
    "Driver",
    "DriverDetail",
    "FilterOptions",
    "Lap",
    "Meeting",
    "NavigationResult",
    "Position",
    "Session",
    "SessionResult",
    "SortConfig",
    "SortOption",
    "SortOrder",
    "Team",
]
