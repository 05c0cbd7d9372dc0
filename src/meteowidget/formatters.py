"""Formatting helpers that turn a snapshot into display strings."""

from __future__ import annotations

import math
from dataclasses import dataclass

from meteowidget.codes import describe, icon
from meteowidget.models.snapshot import WeatherSnapshot

MISSING = "—"

# Open-Meteo spells some units differently from how they are usually shown.
_UNIT_LABELS = {"mp/h": "mph"}


@dataclass(frozen=True)
class WeatherView:
    """Display-ready strings for one snapshot."""

    location: str
    temperature: str
    description: str
    icon: str
    feels_like: str
    humidity: str
    wind_speed: str
    precipitation: str


def format_rounded(value: float | None, suffix: str = "") -> str:
    """Round half up to a whole number, or '—' if None."""
    if value is None:
        return MISSING
    return f"{math.floor(value + 0.5)}{suffix}"


def format_raw(value: float | None, suffix: str = "") -> str:
    if value is None:
        return MISSING
    return f"{value:g}{suffix}"


def format_view(snapshot: WeatherSnapshot, location: str) -> WeatherView:
    """Build the view for a snapshot; unit symbols follow ``current_units``."""
    current = snapshot.current
    units = snapshot.current_units
    temp_unit = units.get("apparent_temperature", "°F")
    wind_unit = units.get("wind_speed_10m", "mph")
    wind_unit = _UNIT_LABELS.get(wind_unit, wind_unit)
    precip_unit = units.get("precipitation", "mm")
    humidity_unit = units.get("relative_humidity_2m", "%")

    feels_like = format_rounded(current.apparent_temperature, temp_unit)
    return WeatherView(
        location=location,
        temperature=format_rounded(current.temperature_2m),
        description=describe(current.weather_code),
        icon=icon(current.weather_code),
        feels_like=f"Feels like: {feels_like}",
        humidity=format_raw(current.relative_humidity_2m, humidity_unit),
        wind_speed=format_rounded(current.wind_speed_10m, f" {wind_unit}"),
        precipitation=format_raw(current.precipitation, f" {precip_unit}"),
    )
