"""Wiring of all widget collaborators from settings."""

from __future__ import annotations

from meteowidget._http import AsyncTransport
from meteowidget.cache import SnapshotCache
from meteowidget.clock import Clock
from meteowidget.config import WidgetSettings
from meteowidget.fetcher import WeatherFetcher
from meteowidget.location import IPLocationProvider, LocationResolver
from meteowidget.models.coordinates import Coordinates
from meteowidget.naming import LocationNamer
from meteowidget.orchestrator import RefreshOrchestrator
from meteowidget.storage import JsonFileStore, KeyValueStore, MemoryStore
from meteowidget.surface import PresentationSurface


def build_store(settings: WidgetSettings) -> KeyValueStore:
    """A file-backed store at ``cache_path``, or an in-memory one when it is empty."""
    if settings.cache_path:
        return JsonFileStore(settings.cache_path)
    return MemoryStore()


class WidgetRuntime:
    """Owns the shared HTTP transport and the orchestrator built on it.

    Usage:
        async with WidgetRuntime(ConsoleSurface()) as runtime:
            await runtime.orchestrator.start()
            await runtime.orchestrator.wait_for_background()
    """

    def __init__(
        self,
        surface: PresentationSurface,
        settings: WidgetSettings | None = None,
        store: KeyValueStore | None = None,
        clock: Clock | None = None,
    ) -> None:
        self.settings = settings or WidgetSettings()
        self._transport = AsyncTransport(timeout=self.settings.request_timeout)

        provider = None
        if self.settings.use_ip_location:
            provider = IPLocationProvider(self.settings.ip_location_url, transport=self._transport)
        resolver = LocationResolver(
            provider,
            default=Coordinates(
                latitude=self.settings.default_latitude,
                longitude=self.settings.default_longitude,
            ),
            timeout=self.settings.location_timeout,
        )
        self.orchestrator = RefreshOrchestrator(
            resolver=resolver,
            fetcher=WeatherFetcher(
                self.settings.forecast_url,
                temperature_unit=self.settings.temperature_unit,
                wind_speed_unit=self.settings.wind_speed_unit,
                transport=self._transport,
            ),
            cache=SnapshotCache(
                store if store is not None else build_store(self.settings),
                ttl_ms=self.settings.cache_ttl_ms,
            ),
            surface=surface,
            namer=LocationNamer(
                self.settings.geocoding_url,
                default_label=self.settings.default_location_label,
                transport=self._transport,
            ),
            clock=clock,
            default_label=self.settings.default_location_label,
        )

    async def __aenter__(self) -> WidgetRuntime:
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()

    async def close(self) -> None:
        """Let background refreshes finish, then close the HTTP connection."""
        await self.orchestrator.wait_for_background()
        await self._transport.close()
