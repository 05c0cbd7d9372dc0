"""Custom exceptions for the weather widget."""

from __future__ import annotations


class MeteoWidgetError(Exception):
    """Base exception for all weather widget errors."""


class FetchError(MeteoWidgetError):
    """Raised when current weather could not be obtained for a location."""


class FetchFailedError(FetchError):
    """Raised when the weather request does not complete with a success status."""


class WeatherConnectionError(FetchFailedError):
    """Raised when the client cannot connect to the weather API."""


class WeatherTimeoutError(FetchFailedError):
    """Raised when a request to the weather API times out."""


class WeatherAPIError(FetchFailedError):
    """Raised when the API returns an error response (4xx/5xx)."""

    def __init__(self, status_code: int, message: str) -> None:
        self.status_code = status_code
        self.message = message
        super().__init__(f"HTTP {status_code}: {message}")


class ParseFailedError(FetchError):
    """Raised when the API response cannot be parsed as a weather snapshot."""


class LocationUnavailableError(MeteoWidgetError):
    """Raised by a location provider on denial or missing capability."""


class NameLookupFailedError(MeteoWidgetError):
    """Raised when reverse geocoding returns nothing usable."""


class StorageUnavailableError(MeteoWidgetError):
    """Raised by a key-value store that cannot be read or written."""
