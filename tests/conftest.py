"""Shared test fixtures and sample API responses."""

from __future__ import annotations

import logging

import pytest

from f1gallery.models.driver import Driver

BASE_URL = "https://api.openf1.org/v1"
SESSION_KEY = 9693


SAMPLE_DRIVER = {
    "broadcast_name": "M VERSTAPPEN",
    "country_code": "NED",
    "driver_number": 1,
    "first_name": "Max",
    "full_name": "Max VERSTAPPEN",
    "headshot_url": "https://example.com/ver.png",
    "last_name": "Verstappen",
    "meeting_key": 1254,
    "name_acronym": "VER",
    "session_key": SESSION_KEY,
    "team_colour": "3671C6",
    "team_name": "Red Bull Racing",
}

SAMPLE_SESSION = {
    "circuit_key": 10,
    "circuit_short_name": "Melbourne",
    "country_code": "AUS",
    "country_key": 5,
    "country_name": "Australia",
    "date_end": "2025-03-16T06:00:00+00:00",
    "date_start": "2025-03-16T04:00:00+00:00",
    "gmt_offset": "11:00:00",
    "location": "Melbourne",
    "meeting_key": 1254,
    "session_key": SESSION_KEY,
    "session_name": "Race",
    "session_type": "Race",
    "year": 2025,
}

SAMPLE_MEETING = {
    "circuit_key": 10,
    "circuit_short_name": "Melbourne",
    "country_code": "AUS",
    "country_key": 5,
    "country_name": "Australia",
    "date_start": "2025-03-14T01:30:00+00:00",
    "gmt_offset": "11:00:00",
    "location": "Melbourne",
    "meeting_key": 1254,
    "meeting_name": "Australian Grand Prix",
    "meeting_official_name": "FORMULA 1 LOUIS VUITTON AUSTRALIAN GRAND PRIX 2025",
    "year": 2025,
}

SAMPLE_LAP = {
    "date_start": "2025-03-16T04:10:00+00:00",
    "driver_number": 1,
    "duration_sector_1": 28.5,
    "duration_sector_2": 35.2,
    "duration_sector_3": 30.1,
    "i1_speed": 305.0,
    "i2_speed": 280.0,
    "is_pit_out_lap": False,
    "lap_duration": 93.8,
    "lap_number": 5,
    "meeting_key": 1254,
    "segments_sector_1": [2048, 2049, 2051],
    "segments_sector_2": [2048, 2049],
    "segments_sector_3": [2048, 2049, 2050],
    "session_key": SESSION_KEY,
    "st_speed": 310.0,
}

SAMPLE_POSITION = {
    "date": "2025-03-16T04:03:12+00:00",
    "driver_number": 1,
    "meeting_key": 1254,
    "position": 3,
    "session_key": SESSION_KEY,
}

SAMPLE_SESSION_RESULT = {
    "dnf": False,
    "dns": False,
    "dsq": False,
    "driver_number": 4,
    "duration": 5455.536,
    "gap_to_leader": 0,
    "number_of_laps": 57,
    "meeting_key": 1254,
    "position": 1,
    "session_key": SESSION_KEY,
}


def _driver_payload(
    driver_number: int,
    full_name: str,
    team_name: str | None = "Red Bull Racing",
    country_code: str | None = None,
    broadcast_name: str | None = None,
    team_colour: str | None = None,
) -> dict:
    return {
        "driver_number": driver_number,
        "full_name": full_name,
        "broadcast_name": broadcast_name or full_name.upper(),
        "name_acronym": full_name.split()[-1][:3].upper(),
        "country_code": country_code,
        "team_name": team_name,
        "team_colour": team_colour,
        "session_key": SESSION_KEY,
        "meeting_key": 1254,
    }


def _make_driver(driver_number: int, full_name: str = "Test DRIVER", **kwargs) -> Driver:
    return Driver.model_validate(_driver_payload(driver_number, full_name, **kwargs))


GRID_PAYLOAD = [
    _driver_payload(1, "Max VERSTAPPEN", "Red Bull Racing", "NED", "M VERSTAPPEN", "3671C6"),
    _driver_payload(4, "Lando NORRIS", "McLaren", None, "L NORRIS", "FF8000"),
    _driver_payload(16, "Charles LECLERC", "Ferrari", "MON", "C LECLERC", "E80020"),
    _driver_payload(44, "Lewis HAMILTON", "Ferrari", "GBR", "L HAMILTON", "E80020"),
    _driver_payload(81, "Oscar PIASTRI", "McLaren", "AUS", "O PIASTRI", "FF8000"),
    _driver_payload(22, "Yuki TSUNODA", "Racing Bulls", None, "Y TSUNODA", "6692FF"),
    _driver_payload(7, "Jack DOOHAN", "Alpine", None, "J DOOHAN", "0093CC"),
]


@pytest.fixture
def make_driver():
    return _make_driver


@pytest.fixture
def grid() -> list[Driver]:
    return [Driver.model_validate(p) for p in GRID_PAYLOAD]


@pytest.fixture
def base_url() -> str:
    return BASE_URL


def drop_file_handlers(logger: logging.Logger) -> None:
    """Close and detach file handlers, leaving pytest's capture handlers alone."""
    for h in logger.handlers[:]:
        if isinstance(h, logging.FileHandler):
            h.close()
            logger.removeHandler(h)


@pytest.fixture(autouse=True)
def _api_log_to_tmp(tmp_path):
    """Send the API call log to tmp_path and reset the cached logger."""
    import f1gallery.api_logging as mod

    old_logger = mod._logger
    old_dir = mod._LOG_DIR
    old_file = mod._LOG_FILE

    named_logger = logging.getLogger("f1gallery.api")
    drop_file_handlers(named_logger)

    mod._logger = None
    mod._LOG_DIR = str(tmp_path / "logs")
    mod._LOG_FILE = str(tmp_path / "logs" / "api_calls.log")

    yield tmp_path / "logs"

    drop_file_handlers(named_logger)
    mod._logger = old_logger
    mod._LOG_DIR = old_dir
    mod._LOG_FILE = old_file
