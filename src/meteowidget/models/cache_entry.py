"""Cached snapshot model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from meteowidget.models.coordinates import Coordinates
from meteowidget.models.snapshot import WeatherSnapshot


class CacheEntry(BaseModel):
    """The last successful fetch together with where and when it happened."""

    model_config = ConfigDict(frozen=True)

    snapshot: WeatherSnapshot
    coords: Coordinates
    stored_at_ms: int
