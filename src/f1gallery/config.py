"""Runtime configuration using Pydantic Settings.

Every value can be overridden with an ``OPENF1_``-prefixed environment
variable, e.g. ``OPENF1_SESSION_KEY=9165``.
"""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

# 2025 Australian GP race: every driver on the grid has a headshot.
REFERENCE_SESSION_KEY = 9693
REFERENCE_SEASON = 2025


class Settings(BaseSettings):
    """API location, request policy and the reference session."""

    model_config = SettingsConfigDict(env_prefix="OPENF1_", frozen=True)

    base_url: str = "https://api.openf1.org/v1"
    timeout: float = Field(default=10.0, gt=0)

    session_key: int = REFERENCE_SESSION_KEY
    season_year: int = REFERENCE_SEASON

    lap_limit: int = Field(default=10, ge=0)
    session_limit: int = Field(default=5, ge=0)


def get_settings() -> Settings:
    """Return settings read from the current environment."""
    return Settings()
