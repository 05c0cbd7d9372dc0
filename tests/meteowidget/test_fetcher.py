"""Tests for the Open-Meteo weather fetcher."""

from __future__ import annotations

import httpx
import pytest
import respx

from meteowidget.exceptions import FetchError, ParseFailedError, WeatherAPIError, WeatherConnectionError
from meteowidget.fetcher import WeatherFetcher
from meteowidget.models.snapshot import WeatherSnapshot
from tests.conftest import BERLIN, FORECAST_URL, SAMPLE_FORECAST


class TestWeatherFetcher:
    @respx.mock
    @pytest.mark.asyncio
    async def test_fetch(self) -> None:
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=SAMPLE_FORECAST))
        fetcher = WeatherFetcher()
        snapshot = await fetcher.fetch(BERLIN)
        await fetcher.close()
        assert isinstance(snapshot, WeatherSnapshot)
        assert snapshot.current.temperature_2m == 54.3

    @respx.mock
    @pytest.mark.asyncio
    async def test_request_params(self) -> None:
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=SAMPLE_FORECAST))
        fetcher = WeatherFetcher()
        await fetcher.fetch(BERLIN)
        await fetcher.close()
        params = route.calls.last.request.url.params
        assert params["latitude"] == "52.52"
        assert params["longitude"] == "13.41"
        assert params["current"] == (
            "temperature_2m,relative_humidity_2m,apparent_temperature,"
            "precipitation,weather_code,wind_speed_10m"
        )
        assert params["temperature_unit"] == "fahrenheit"
        assert params["wind_speed_unit"] == "mph"
        assert params["timezone"] == "auto"

    @respx.mock
    @pytest.mark.asyncio
    async def test_custom_units(self) -> None:
        route = respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=SAMPLE_FORECAST))
        fetcher = WeatherFetcher(temperature_unit="celsius", wind_speed_unit="kmh")
        await fetcher.fetch(BERLIN)
        await fetcher.close()
        params = route.calls.last.request.url.params
        assert params["temperature_unit"] == "celsius"
        assert params["wind_speed_unit"] == "kmh"

    @respx.mock
    @pytest.mark.asyncio
    async def test_single_attempt_on_failure_status(self) -> None:
        route = respx.get(FORECAST_URL).mock(
            return_value=httpx.Response(503, text="Service Unavailable")
        )
        fetcher = WeatherFetcher()
        with pytest.raises(WeatherAPIError) as exc_info:
            await fetcher.fetch(BERLIN)
        await fetcher.close()
        assert exc_info.value.status_code == 503
        assert route.call_count == 1

    @respx.mock
    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        respx.get(FORECAST_URL).mock(side_effect=httpx.ConnectError("unreachable"))
        fetcher = WeatherFetcher()
        with pytest.raises(WeatherConnectionError):
            await fetcher.fetch(BERLIN)
        await fetcher.close()

    @respx.mock
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "body",
        [
            {"latitude": 52.52},
            {"current": {}},
            {"current": {"temperature_2m": "warm"}},
            [SAMPLE_FORECAST],
        ],
    )
    async def test_malformed_body(self, body) -> None:
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=body))
        fetcher = WeatherFetcher()
        with pytest.raises(ParseFailedError):
            await fetcher.fetch(BERLIN)
        await fetcher.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_errors_share_fetch_error_base(self) -> None:
        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, text="not json"))
        fetcher = WeatherFetcher()
        with pytest.raises(FetchError):
            await fetcher.fetch(BERLIN)
        await fetcher.close()

    @respx.mock
    @pytest.mark.asyncio
    async def test_shared_transport_not_closed(self) -> None:
        from meteowidget._http import AsyncTransport

        respx.get(FORECAST_URL).mock(return_value=httpx.Response(200, json=SAMPLE_FORECAST))
        transport = AsyncTransport()
        fetcher = WeatherFetcher(transport=transport)
        await fetcher.close()
        # still usable after the fetcher is closed
        await fetcher.fetch(BERLIN)
        await transport.close()
