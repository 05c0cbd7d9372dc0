"""Current weather snapshot models (Open-Meteo ``/v1/forecast`` body)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class CurrentConditions(BaseModel):
    """The ``current`` block of a forecast response."""

    model_config = ConfigDict(frozen=True, extra="allow")

    time: str | None = None
    interval: int | None = None
    temperature_2m: float | None = None
    relative_humidity_2m: float | None = None
    apparent_temperature: float | None = None
    precipitation: float | None = None
    weather_code: int | None = None
    wind_speed_10m: float | None = None


class WeatherSnapshot(BaseModel):
    """Current conditions for one location at one point in time.

    Unknown keys are kept so a cached snapshot round-trips the API payload
    unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    latitude: float | None = None
    longitude: float | None = None
    timezone: str | None = None
    current_units: dict[str, str] = {}
    current: CurrentConditions

    @property
    def is_empty(self) -> bool:
        """True when the ``current`` block carries no fields at all."""
        return not self.current.model_dump(exclude_none=True)
