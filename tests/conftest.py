"""Shared test fixtures, fakes and sample API responses."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

import pytest

from meteowidget.cache import SnapshotCache
from meteowidget.clock import FrozenClock
from meteowidget.exceptions import LocationUnavailableError, StorageUnavailableError
from meteowidget.location import LocationResolver
from meteowidget.models.coordinates import Coordinates
from meteowidget.models.snapshot import WeatherSnapshot
from meteowidget.orchestrator import RefreshOrchestrator
from meteowidget.storage import MemoryStore

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"
GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
IP_LOCATION_URL = "https://ipapi.co/json/"

NOW_MS = 1_760_000_000_000
BERLIN = Coordinates(latitude=52.52, longitude=13.41)
VIENNA = Coordinates(latitude=48.21, longitude=16.37)


def make_forecast(temperature: float = 54.3, weather_code: int = 3) -> dict[str, Any]:
    return {
        "latitude": 52.52,
        "longitude": 13.419998,
        "generationtime_ms": 0.05,
        "utc_offset_seconds": 7200,
        "timezone": "Europe/Berlin",
        "timezone_abbreviation": "GMT+2",
        "elevation": 38.0,
        "current_units": {
            "time": "iso8601",
            "interval": "seconds",
            "temperature_2m": "°F",
            "relative_humidity_2m": "%",
            "apparent_temperature": "°F",
            "precipitation": "mm",
            "weather_code": "wmo code",
            "wind_speed_10m": "mp/h",
        },
        "current": {
            "time": "2026-10-19T12:00",
            "interval": 900,
            "temperature_2m": temperature,
            "relative_humidity_2m": 71,
            "apparent_temperature": 50.6,
            "precipitation": 0.0,
            "weather_code": weather_code,
            "wind_speed_10m": 8.4,
        },
    }


SAMPLE_FORECAST = make_forecast()

SAMPLE_GEOCODING = {
    "results": [
        {
            "id": 2950159,
            "name": "Berlin",
            "latitude": 52.52437,
            "longitude": 13.41053,
            "country_code": "DE",
            "country": "Germany",
        }
    ],
    "generationtime_ms": 0.7,
}

SAMPLE_IP_LOCATION = {
    "ip": "203.0.113.7",
    "city": "Vienna",
    "country_name": "Austria",
    "latitude": 48.21,
    "longitude": 16.37,
}


# ── Fakes ────────────────────────────────────────────────────────────────────


class RecordingSurface:
    """Presentation surface that records every call in order."""

    def __init__(self) -> None:
        self.events: list[tuple[Any, ...]] = []

    def show_loading(self) -> None:
        self.events.append(("loading",))

    def hide_loading(self) -> None:
        self.events.append(("hide_loading",))

    def render(self, snapshot: WeatherSnapshot, location: str) -> None:
        self.events.append(("render", snapshot, location))

    def show_warning(self, message: str) -> None:
        self.events.append(("warning", message))

    def show_error(self, message: str) -> None:
        self.events.append(("error", message))

    @property
    def rendered(self) -> list[tuple[WeatherSnapshot, str]]:
        return [(e[1], e[2]) for e in self.events if e[0] == "render"]

    def kinds(self) -> list[str]:
        return [e[0] for e in self.events]


class FakeFetcher:
    """Returns queued results in order; the last one repeats.

    A result that is an exception is raised instead of returned. With a gate,
    every fetch blocks until the gate is set.
    """

    def __init__(self, results: list[Any], gate: asyncio.Event | None = None) -> None:
        self._results = list(results)
        self.gate = gate
        self.calls: list[Coordinates] = []
        self.completed = 0

    async def fetch(self, coords: Coordinates) -> WeatherSnapshot:
        self.calls.append(coords)
        result = self._results.pop(0) if len(self._results) > 1 else self._results[0]
        if self.gate is not None:
            await self.gate.wait()
        else:
            await asyncio.sleep(0)
        self.completed += 1
        if isinstance(result, BaseException):
            raise result
        return result


class FakeNamer:
    """Returns a fixed label; with a gate, every lookup blocks until it is set."""

    def __init__(self, label: str = "Berlin, Germany", gate: asyncio.Event | None = None) -> None:
        self.label = label
        self.gate = gate
        self.calls: list[Coordinates] = []

    async def lookup(self, coords: Coordinates) -> str:
        self.calls.append(coords)
        if self.gate is not None:
            await self.gate.wait()
        return self.label


class FixedProvider:
    def __init__(self, coords: Coordinates) -> None:
        self.coords = coords

    async def current_position(self) -> Coordinates:
        return self.coords


class DenyingProvider:
    async def current_position(self) -> Coordinates:
        raise LocationUnavailableError("permission denied")


class HangingProvider:
    async def current_position(self) -> Coordinates:
        await asyncio.sleep(60)
        return VIENNA


class BrokenStore:
    """Key-value store whose every operation fails."""

    def __init__(self, exc: Exception | None = None) -> None:
        self.exc = exc or StorageUnavailableError("storage disabled")

    def get(self, key: str) -> str | None:
        raise self.exc

    def set(self, key: str, value: str) -> None:
        raise self.exc


# ── Fixtures ─────────────────────────────────────────────────────────────────


@pytest.fixture(autouse=True)
def api_log(tmp_path):
    """Redirect the API log file to tmp_path and yield its path."""
    import meteowidget.api_logging as mod

    named_logger = logging.getLogger(mod.LOGGER_NAME)
    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)

    old_logger, old_dir, old_file = mod._logger, mod._LOG_DIR, mod._LOG_FILE
    log_dir = tmp_path / "logs"
    mod._logger = None
    mod._LOG_DIR = str(log_dir)
    mod._LOG_FILE = str(log_dir / "api_calls.log")

    yield log_dir / "api_calls.log"

    for h in named_logger.handlers[:]:
        h.close()
        named_logger.removeHandler(h)
    mod._logger, mod._LOG_DIR, mod._LOG_FILE = old_logger, old_dir, old_file


@pytest.fixture
def snapshot() -> WeatherSnapshot:
    return WeatherSnapshot.model_validate(SAMPLE_FORECAST)


@pytest.fixture
def newer_snapshot() -> WeatherSnapshot:
    return WeatherSnapshot.model_validate(make_forecast(temperature=61.0, weather_code=0))


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock(NOW_MS)


@pytest.fixture
def cache() -> SnapshotCache:
    return SnapshotCache(MemoryStore())


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def namer() -> FakeNamer:
    return FakeNamer()


@pytest.fixture
def make_orchestrator(cache, surface, namer, clock):
    """Factory building an orchestrator around the shared fakes."""

    def _make(fetcher: Any, provider: Any = None) -> RefreshOrchestrator:
        return RefreshOrchestrator(
            resolver=LocationResolver(provider, default=BERLIN, timeout=0.05),
            fetcher=fetcher,
            cache=cache,
            surface=surface,
            namer=namer,
            clock=clock,
        )

    return _make
