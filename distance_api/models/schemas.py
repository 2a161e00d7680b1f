"""Pydantic schemas for the distance API."""
from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class DistanceRequest(BaseModel):
    """One origin to the configured destination."""

    model_config = ConfigDict(frozen=True)

    origin: str = ""
    destination: str


class DistanceResponse(BaseModel):
    """Body returned on success."""

    model_config = ConfigDict(extra="forbid")

    distance: str  # human readable, e.g. "5.2 km"
    ok: bool = True
