"""Widget configuration loaded from the environment."""

from __future__ import annotations

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

from meteowidget._http import DEFAULT_TIMEOUT
from meteowidget.cache import DEFAULT_TTL_MS
from meteowidget.fetcher import FORECAST_URL
from meteowidget.location import DEFAULT_LOCATION, DEFAULT_LOCATION_TIMEOUT, IP_LOCATION_URL
from meteowidget.naming import DEFAULT_LOCATION_LABEL, GEOCODING_URL

DEFAULT_CACHE_PATH = os.path.join(os.path.expanduser("~"), ".meteowidget", "weather_cache.json")


class WidgetSettings(BaseSettings):
    """Application configuration settings.

    Every field can be overridden with a ``METEOWIDGET_``-prefixed
    environment variable or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="METEOWIDGET_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Fallback location
    default_latitude: float = DEFAULT_LOCATION.latitude
    default_longitude: float = DEFAULT_LOCATION.longitude
    default_location_label: str = DEFAULT_LOCATION_LABEL

    # Live location
    use_ip_location: bool = True
    ip_location_url: str = IP_LOCATION_URL
    location_timeout: float = DEFAULT_LOCATION_TIMEOUT

    # Weather API
    forecast_url: str = FORECAST_URL
    geocoding_url: str = GEOCODING_URL
    temperature_unit: str = "fahrenheit"
    wind_speed_unit: str = "mph"
    request_timeout: float = DEFAULT_TIMEOUT

    # Cache
    cache_ttl_ms: int = DEFAULT_TTL_MS
    # empty or None keeps the cache in memory only
    cache_path: str | None = DEFAULT_CACHE_PATH
