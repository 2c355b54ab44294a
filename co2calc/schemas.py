"""
schemas.py – Pydantic models for data crossing the package boundary.

* RouteRecord – one row of a routes file (JSON) or of the built-in table.
* TripRequest – what a user submits: two cities, a mode, and optionally a
  manually entered distance.
"""
from __future__ import annotations

from typing import Optional, Union

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


# ─────────────────────────────────────────────────────────────
# Routes
# ─────────────────────────────────────────────────────────────

class RouteRecord(BaseModel):
    """A stored road distance between two cities."""

    model_config = ConfigDict(frozen=True)

    origin: str = Field(..., description='City with state, e.g. "São Paulo, SP"')
    destination: str = Field(..., description="City with state")
    distance_km: float = Field(
        ...,
        gt=0,
        validation_alias=AliasChoices("distance_km", "distanceKm"),
        description="Road distance in kilometres",
    )

    @field_validator("origin", "destination")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("city name must not be blank")
        return value


# ─────────────────────────────────────────────────────────────
# Trip request
# ─────────────────────────────────────────────────────────────

class TripRequest(BaseModel):
    """Form values submitted for one calculation."""

    origin: str = Field("", description="Origin city (free text)")
    destination: str = Field("", description="Destination city (free text)")
    mode: str = Field(..., description="bicycle | car | bus | truck")
    distance_km: Optional[Union[float, str]] = Field(
        None,
        description="Manually entered distance; when absent the route table is used",
    )
