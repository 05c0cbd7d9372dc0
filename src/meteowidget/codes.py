"""WMO weather interpretation codes used by Open-Meteo."""

from __future__ import annotations

UNKNOWN_DESCRIPTION = "Unknown"
UNKNOWN_ICON = "\U0001f321️"  # thermometer

WEATHER_DESCRIPTIONS: dict[int, str] = {
    0: "Clear sky",
    1: "Mainly clear",
    2: "Partly cloudy",
    3: "Overcast",
    45: "Foggy",
    48: "Depositing rime fog",
    51: "Light drizzle",
    53: "Moderate drizzle",
    55: "Dense drizzle",
    61: "Slight rain",
    63: "Moderate rain",
    65: "Heavy rain",
    71: "Slight snow",
    73: "Moderate snow",
    75: "Heavy snow",
    80: "Slight rain showers",
    81: "Moderate rain showers",
    82: "Violent rain showers",
    95: "Thunderstorm",
    96: "Thunderstorm with hail",
    99: "Thunderstorm with heavy hail",
}

_SUN = "☀️"
_SUN_SMALL_CLOUD = "\U0001f324️"
_SUN_CLOUD = "⛅"
_CLOUD = "☁️"
_FOG = "\U0001f32b️"
_SUN_RAIN = "\U0001f326️"
_RAIN = "\U0001f327️"
_STORM = "⛈️"
_SNOW_CLOUD = "\U0001f328️"
_SNOWFLAKE = "❄️"

WEATHER_ICONS: dict[int, str] = {
    0: _SUN,
    1: _SUN_SMALL_CLOUD,
    2: _SUN_CLOUD,
    3: _CLOUD,
    45: _FOG,
    48: _FOG,
    51: _SUN_RAIN,
    53: _SUN_RAIN,
    55: _RAIN,
    61: _SUN_RAIN,
    63: _RAIN,
    65: _STORM,
    71: _SNOW_CLOUD,
    73: _SNOWFLAKE,
    75: _SNOWFLAKE,
    80: _SUN_RAIN,
    81: _STORM,
    82: _STORM,
    95: _STORM,
    96: _STORM,
    99: _STORM,
}


def describe(code: int | None) -> str:
    """Human label for a weather code, ``"Unknown"`` for anything unlisted."""
    if code is None:
        return UNKNOWN_DESCRIPTION
    return WEATHER_DESCRIPTIONS.get(code, UNKNOWN_DESCRIPTION)


def icon(code: int | None) -> str:
    if code is None:
        return UNKNOWN_ICON
    return WEATHER_ICONS.get(code, UNKNOWN_ICON)
