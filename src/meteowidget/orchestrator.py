"""Stale-while-revalidate orchestration of location, fetch, cache and display."""

from __future__ import annotations

import asyncio
from typing import Any, Coroutine, Protocol

from meteowidget.api_logging import get_logger, log_service_call
from meteowidget.cache import SnapshotCache
from meteowidget.clock import Clock, SystemClock
from meteowidget.exceptions import FetchError
from meteowidget.location import LocationResolver
from meteowidget.models.coordinates import Coordinates
from meteowidget.models.snapshot import WeatherSnapshot
from meteowidget.models.state import DisplayState, WidgetState
from meteowidget.naming import DEFAULT_LOCATION_LABEL
from meteowidget.surface import PresentationSurface

LOAD_ERROR_MESSAGE = "Unable to load weather data."
CACHED_WARNING_MESSAGE = "Using cached data. Unable to fetch latest weather."
OFFLINE_MESSAGE = "You are currently offline. Weather data might not be up to date."


class Fetcher(Protocol):
    async def fetch(self, coords: Coordinates) -> WeatherSnapshot: ...


class Namer(Protocol):
    async def lookup(self, coords: Coordinates) -> str: ...


class RefreshOrchestrator:
    """Decides between cached data, background refresh and error display.

    A cached entry, fresh or stale, is rendered immediately and then
    revalidated by a detached background task. The cached render never waits
    on the network: it uses a place name already looked up in this process,
    or the default label until a detached lookup replaces it. Only when
    nothing is cached does a load wait on the network, and only then can a
    failure reach the user.

    Overlapping loads are not suppressed: every trigger starts its own run,
    background refreshes are never cancelled, and the last cache write wins.

    Usage:
        orchestrator = RefreshOrchestrator(
            resolver=LocationResolver(),
            fetcher=WeatherFetcher(),
            cache=SnapshotCache(MemoryStore()),
            surface=ConsoleSurface(),
            namer=LocationNamer(),
        )
        await orchestrator.start()
        await orchestrator.wait_for_background()
    """

    def __init__(
        self,
        *,
        resolver: LocationResolver,
        fetcher: Fetcher,
        cache: SnapshotCache,
        surface: PresentationSurface,
        namer: Namer,
        clock: Clock | None = None,
        default_label: str = DEFAULT_LOCATION_LABEL,
    ) -> None:
        self.resolver = resolver
        self.fetcher = fetcher
        self.cache = cache
        self.surface = surface
        self.namer = namer
        self.clock = clock or SystemClock()
        self.default_label = default_label
        self._state = WidgetState.IDLE
        self._background: set[asyncio.Task[None]] = set()
        self._labels: dict[Coordinates, str] = {}
        self._shown: WeatherSnapshot | None = None

    @property
    def state(self) -> WidgetState:
        return self._state

    @property
    def display_state(self) -> DisplayState | None:
        return self._state.display_state

    @property
    def background_pending(self) -> int:
        """Number of detached refreshes and label lookups still in flight."""
        return len(self._background)

    # ── Triggers ───────────────────────────────────────────────

    async def start(self) -> WidgetState:
        """Initial load when the widget comes up."""
        return await self.load_weather()

    async def refresh(self) -> WidgetState:
        return await self.load_weather()

    async def retry(self) -> WidgetState:
        return await self.load_weather()

    async def on_online(self) -> WidgetState:
        """Connectivity came back: run a full load."""
        return await self.load_weather()

    def on_offline(self) -> None:
        """Connectivity lost: warn without touching the cache or the network."""
        self._state = WidgetState.DISPLAYING_WITH_WARNING
        self.surface.show_warning(OFFLINE_MESSAGE)

    # ── Load sequence ──────────────────────────────────────────

    @log_service_call
    async def load_weather(self) -> WidgetState:
        """Show cached data at once, or fetch synchronously when there is none."""
        self._state = WidgetState.LOADING
        self.surface.show_loading()

        entry = self.cache.read()
        if entry is not None:
            self._render_cached(entry.snapshot, entry.coords)
            self._state = WidgetState.DISPLAYING
            self.surface.hide_loading()
            self._spawn(self.refresh_in_background())
            return self._state

        try:
            coords, snapshot = await self._fetch_current()
        except FetchError as exc:
            get_logger().error("LOAD FAIL: %s: %s", type(exc).__name__, exc)
            return await self._fall_back()

        await self._display(snapshot, coords)
        self._state = WidgetState.DISPLAYING
        self.surface.hide_loading()
        return self._state

    async def refresh_in_background(self) -> None:
        """Revalidate the cache; failures are logged and never displayed."""
        try:
            coords, snapshot = await self._fetch_current()
        except FetchError as exc:
            get_logger().error("BACKGROUND FAIL: %s: %s", type(exc).__name__, exc)
            return
        await self._display(snapshot, coords)

    async def wait_for_background(self) -> None:
        """Wait until every detached refresh and label lookup has finished."""
        while self._background:
            await asyncio.gather(*self._background, return_exceptions=True)

    # ── Helpers ────────────────────────────────────────────────

    async def _fetch_current(self) -> tuple[Coordinates, WeatherSnapshot]:
        coords = await self.resolver.resolve()
        snapshot = await self.fetcher.fetch(coords)
        self.cache.write(snapshot, coords, self.clock.now_ms())
        return coords, snapshot

    async def _fall_back(self) -> WidgetState:
        # Another run may have written the cache while this fetch was failing.
        entry = self.cache.read()
        if entry is not None:
            await self._display(entry.snapshot, entry.coords)
            self._state = WidgetState.DISPLAYING_WITH_WARNING
            self.surface.show_warning(CACHED_WARNING_MESSAGE)
        else:
            self._state = WidgetState.ERROR_NO_DATA
            self.surface.show_error(LOAD_ERROR_MESSAGE)
        return self._state

    async def _lookup(self, coords: Coordinates) -> str:
        label = await self.namer.lookup(coords)
        if label != self.default_label:
            self._labels[coords] = label
        return label

    async def _display(self, snapshot: WeatherSnapshot, coords: Coordinates) -> None:
        label = await self._lookup(coords)
        self._shown = snapshot
        self.surface.render(snapshot, label)

    def _render_cached(self, snapshot: WeatherSnapshot, coords: Coordinates) -> None:
        self._shown = snapshot
        label = self._labels.get(coords)
        if label is not None:
            self.surface.render(snapshot, label)
            return
        self.surface.render(snapshot, self.default_label)
        self._spawn(self._relabel(snapshot, coords))

    async def _relabel(self, snapshot: WeatherSnapshot, coords: Coordinates) -> None:
        label = await self._lookup(coords)
        # a newer snapshot may already be on screen
        if self._shown is snapshot and label != self.default_label:
            self.surface.render(snapshot, label)

    def _spawn(self, coro: Coroutine[Any, Any, None]) -> asyncio.Task[None]:
        task = asyncio.create_task(coro)
        self._background.add(task)
        task.add_done_callback(self._on_background_done)
        return task

    def _on_background_done(self, task: asyncio.Task[None]) -> None:
        self._background.discard(task)
        if task.cancelled():
            return
        exc = task.exception()
        if exc is not None:
            get_logger().error(
                "BACKGROUND FAIL: unexpected %s: %s", type(exc).__name__, exc, exc_info=exc,
            )
