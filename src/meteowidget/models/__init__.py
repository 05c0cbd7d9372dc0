"""Weather widget data models."""

from meteowidget.models.cache_entry import CacheEntry
from meteowidget.models.coordinates import Coordinates
from meteowidget.models.snapshot import CurrentConditions, WeatherSnapshot
from meteowidget.models.state import DisplayState, WidgetState

__all__ = [
    "CacheEntry",
    "Coordinates",
    "CurrentConditions",
    "DisplayState",
    "WeatherSnapshot",
    "WidgetState",
]
