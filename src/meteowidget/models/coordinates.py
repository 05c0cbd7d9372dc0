"""Geographic coordinates model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class Coordinates(BaseModel):
    """A latitude/longitude pair in decimal degrees."""

    model_config = ConfigDict(frozen=True)

    latitude: float
    longitude: float
