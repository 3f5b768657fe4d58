"""f1gallery — OpenF1 driver and team gallery data layer."""

from f1gallery.aggregator import aggregate_teams
from f1gallery.client import AsyncOpenF1Client
from f1gallery.config import Settings, get_settings
from f1gallery.exceptions import (
    F1GalleryError,
    RemoteAPIError,
    RemoteConnectionError,
    RemoteTimeoutError,
    RemoteUnavailable,
    ResponseValidationError,
)
from f1gallery.gateway import RaceDataGateway
from f1gallery.navigator import find_by_id, navigate
from f1gallery.normalizer import CountryCodeNormalizer, normalize_driver
from f1gallery.query import filter_and_sort, filter_and_sort_teams
from f1gallery.services import DriverBrowser

__all__ = [
    "AsyncOpenF1Client",
    "CountryCodeNormalizer",
    "DriverBrowser",
    "F1GalleryError",
    "RaceDataGateway",
    "RemoteAPIError",
    "RemoteConnectionError",
    "RemoteTimeoutError",
    "RemoteUnavailable",
    "ResponseValidationError",
    "Settings",
    "aggregate_teams",
    "filter_and_sort",
    "filter_and_sort_teams",
    "find_by_id",
    "get_settings",
    "navigate",
    "normalize_driver",
]

__version__ = "0.1.0"
