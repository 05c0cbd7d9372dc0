"""Current weather fetcher for the Open-Meteo forecast API."""

from __future__ import annotations

from pydantic import ValidationError

from meteowidget._http import AsyncTransport
from meteowidget._query import build_query_params
from meteowidget.api_logging import log_api_call
from meteowidget.exceptions import ParseFailedError
from meteowidget.models.coordinates import Coordinates
from meteowidget.models.snapshot import WeatherSnapshot

FORECAST_URL = "https://api.open-meteo.com/v1/forecast"

CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "apparent_temperature",
    "precipitation",
    "weather_code",
    "wind_speed_10m",
)


class WeatherFetcher:
    """Fetches current conditions for a pair of coordinates.

    One attempt per call: no retries and no caching. Failures surface as
    ``FetchFailedError`` (transport or status) or ``ParseFailedError``
    (body is not a usable snapshot).
    """

    def __init__(
        self,
        url: str = FORECAST_URL,
        temperature_unit: str = "fahrenheit",
        wind_speed_unit: str = "mph",
        transport: AsyncTransport | None = None,
    ) -> None:
        self.url = url
        self.temperature_unit = temperature_unit
        self.wind_speed_unit = wind_speed_unit
        self._owns_transport = transport is None
        self._transport = transport or AsyncTransport()

    async def close(self) -> None:
        if self._owns_transport:
            await self._transport.close()

    def build_params(self, coords: Coordinates) -> list[tuple[str, str]]:
        return build_query_params(
            latitude=coords.latitude,
            longitude=coords.longitude,
            current=CURRENT_FIELDS,
            temperature_unit=self.temperature_unit,
            wind_speed_unit=self.wind_speed_unit,
            timezone="auto",
        )

    @log_api_call
    async def fetch(self, coords: Coordinates) -> WeatherSnapshot:
        data = await self._transport.get(self.url, self.build_params(coords))
        try:
            snapshot = WeatherSnapshot.model_validate(data)
        except ValidationError as exc:
            raise ParseFailedError(f"Failed to validate weather response: {exc}") from exc
        if snapshot.is_empty:
            raise ParseFailedError("Weather response has an empty 'current' block")
        return snapshot
