"""meteowidget: current weather with stale-while-revalidate caching."""

from meteowidget.cache import SnapshotCache
from meteowidget.clock import FrozenClock, SystemClock
from meteowidget.config import WidgetSettings
from meteowidget.exceptions import (
    FetchError,
    FetchFailedError,
    LocationUnavailableError,
    MeteoWidgetError,
    NameLookupFailedError,
    ParseFailedError,
    StorageUnavailableError,
    WeatherAPIError,
    WeatherConnectionError,
    WeatherTimeoutError,
)
from meteowidget.fetcher import WeatherFetcher
from meteowidget.location import IPLocationProvider, LocationResolver
from meteowidget.models import CacheEntry, Coordinates, DisplayState, WeatherSnapshot, WidgetState
from meteowidget.naming import LocationNamer
from meteowidget.orchestrator import RefreshOrchestrator
from meteowidget.runtime import WidgetRuntime
from meteowidget.storage import JsonFileStore, MemoryStore
from meteowidget.surface import ConsoleSurface, PresentationSurface

__all__ = [
    "CacheEntry",
    "ConsoleSurface",
    "Coordinates",
    "DisplayState",
    "FetchError",
    "FetchFailedError",
    "FrozenClock",
    "IPLocationProvider",
    "JsonFileStore",
    "LocationNamer",
    "LocationResolver",
    "LocationUnavailableError",
    "MemoryStore",
    "MeteoWidgetError",
    "NameLookupFailedError",
    "ParseFailedError",
    "PresentationSurface",
    "RefreshOrchestrator",
    "SnapshotCache",
    "StorageUnavailableError",
    "SystemClock",
    "WeatherAPIError",
    "WeatherConnectionError",
    "WeatherFetcher",
    "WeatherSnapshot",
    "WeatherTimeoutError",
    "WidgetRuntime",
    "WidgetSettings",
    "WidgetState",
]

__version__ = "0.1.0"
