"""Location resolution with a fixed fallback."""

from __future__ import annotations

import asyncio
from typing import Protocol

from pydantic import ValidationError

from meteowidget._http import AsyncTransport
from meteowidget.api_logging import get_logger, log_api_call
from meteowidget.exceptions import FetchError, LocationUnavailableError
from meteowidget.models.coordinates import Coordinates

DEFAULT_LOCATION = Coordinates(latitude=52.52, longitude=13.41)  # Berlin
DEFAULT_LOCATION_TIMEOUT = 5.0
IP_LOCATION_URL = "https://ipapi.co/json/"


class LocationProvider(Protocol):
    """A live location capability.

    Implementations raise ``LocationUnavailableError`` on denial; the
    resolver bounds the wait, so they may block for as long as they like.
    """

    async def current_position(self) -> Coordinates: ...


class IPLocationProvider:
    """Approximate device location from an IP geolocation service."""

    def __init__(
        self,
        url: str = IP_LOCATION_URL,
        transport: AsyncTransport | None = None,
    ) -> None:
        self.url = url
        self._owns_transport = transport is None
        self._transport = transport or AsyncTransport()

    async def close(self) -> None:
        if self._owns_transport:
            await self._transport.close()

    @log_api_call
    async def current_position(self) -> Coordinates:
        try:
            data = await self._transport.get(self.url, [])
        except FetchError as exc:
            raise LocationUnavailableError(f"IP lookup failed: {exc}") from exc
        try:
            return Coordinates.model_validate(data)
        except ValidationError as exc:
            raise LocationUnavailableError(f"IP lookup returned no coordinates: {exc}") from exc


class LocationResolver:
    """Resolves the coordinates to fetch weather for. Never raises.

    Usage:
        resolver = LocationResolver(IPLocationProvider())
        coords = await resolver.resolve()
    """

    def __init__(
        self,
        provider: LocationProvider | None = None,
        default: Coordinates = DEFAULT_LOCATION,
        timeout: float = DEFAULT_LOCATION_TIMEOUT,
    ) -> None:
        self.provider = provider
        self.default = default
        self.timeout = timeout

    async def resolve(self) -> Coordinates:
        """Return live coordinates, or the default on denial, timeout or no capability."""
        if self.provider is None:
            return self.default
        try:
            return await asyncio.wait_for(self.provider.current_position(), self.timeout)
        except TimeoutError:
            get_logger().warning(
                "LOCATION TIMEOUT: no position after %.1fs, using default %s", self.timeout, self.default,
            )
        except LocationUnavailableError as exc:
            get_logger().warning("LOCATION UNAVAILABLE: %s, using default %s", exc, self.default)
        return self.default
