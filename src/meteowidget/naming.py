"""Reverse lookup of a display name for coordinates."""

from __future__ import annotations

from typing import Any

from meteowidget._http import AsyncTransport
from meteowidget._query import build_query_params
from meteowidget.api_logging import get_logger, log_api_call
from meteowidget.exceptions import FetchError, NameLookupFailedError
from meteowidget.models.coordinates import Coordinates

GEOCODING_URL = "https://geocoding-api.open-meteo.com/v1/search"
DEFAULT_LOCATION_LABEL = "Current Location"


class LocationNamer:
    """Best-effort ``"<place>, <country>"`` label for a location. Never raises."""

    def __init__(
        self,
        url: str = GEOCODING_URL,
        default_label: str = DEFAULT_LOCATION_LABEL,
        transport: AsyncTransport | None = None,
    ) -> None:
        self.url = url
        self.default_label = default_label
        self._owns_transport = transport is None
        self._transport = transport or AsyncTransport()

    async def close(self) -> None:
        if self._owns_transport:
            await self._transport.close()

    async def lookup(self, coords: Coordinates) -> str:
        try:
            return await self._search(coords)
        except (FetchError, NameLookupFailedError) as exc:
            get_logger().warning("NAME LOOKUP FAIL: %s, using %r", exc, self.default_label)
            return self.default_label

    @log_api_call
    async def _search(self, coords: Coordinates) -> str:
        params = build_query_params(
            latitude=coords.latitude,
            longitude=coords.longitude,
            count=1,
            format="json",
        )
        data = await self._transport.get(self.url, params)
        return _first_label(data)


def _first_label(data: Any) -> str:
    results = data.get("results") if isinstance(data, dict) else None
    if not results:
        raise NameLookupFailedError("no geocoding results")
    first = results[0]
    name = first.get("name") if isinstance(first, dict) else None
    if not name:
        raise NameLookupFailedError("first geocoding result has no name")
    country = first.get("country")
    return f"{name}, {country}" if country else name
