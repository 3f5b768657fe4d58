"""Shared base for records sourced from the OpenF1 API."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class OpenF1Record(BaseModel):
    """Immutable API record; fields the API adds later are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")
