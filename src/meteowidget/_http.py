"""Low-level HTTP transport layer wrapping httpx."""

from __future__ import annotations

from typing import Any

import httpx

from meteowidget.exceptions import (
    FetchFailedError,
    ParseFailedError,
    WeatherAPIError,
    WeatherConnectionError,
    WeatherTimeoutError,
)

DEFAULT_TIMEOUT = 30.0


def _handle_response(response: httpx.Response) -> Any:
    """Validate response status and return parsed JSON."""
    if not response.is_success:
        raise WeatherAPIError(
            status_code=response.status_code,
            message=response.text,
        )
    try:
        return response.json()
    except ValueError as exc:
        raise ParseFailedError(f"Response from {response.url} is not JSON: {exc}") from exc


class AsyncTransport:
    """Asynchronous HTTP transport using httpx.AsyncClient.

    One transport can be shared by the fetcher, the namer and the location
    provider; whoever constructs it is responsible for closing it.
    """

    def __init__(self, timeout: float = DEFAULT_TIMEOUT) -> None:
        self._client = httpx.AsyncClient(
            timeout=timeout,
            headers={"Accept": "application/json"},
        )

    async def get(self, url: str, params: list[tuple[str, str]]) -> Any:
        """Perform an async GET request and return parsed JSON."""
        try:
            response = await self._client.get(url, params=params)
        except httpx.ConnectError as exc:
            raise WeatherConnectionError(str(exc)) from exc
        except httpx.TimeoutException as exc:
            raise WeatherTimeoutError(str(exc)) from exc
        except httpx.HTTPError as exc:
            raise FetchFailedError(str(exc)) from exc
        return _handle_response(response)

    async def close(self) -> None:
        await self._client.aclose()
