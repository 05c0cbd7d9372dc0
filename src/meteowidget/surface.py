"""Presentation surface contract and a plain-text implementation."""

from __future__ import annotations

import sys
from typing import Protocol, TextIO

from meteowidget.formatters import format_view
from meteowidget.models.snapshot import WeatherSnapshot


class PresentationSurface(Protocol):
    """Whatever shows the widget. Holds no logic beyond field assignment."""

    def show_loading(self) -> None: ...

    def hide_loading(self) -> None: ...

    def render(self, snapshot: WeatherSnapshot, location: str) -> None: ...

    def show_warning(self, message: str) -> None: ...

    def show_error(self, message: str) -> None: ...


class ConsoleSurface:
    """Writes each display change as text lines to a stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def _write(self, line: str) -> None:
        print(line, file=self.stream, flush=True)

    def show_loading(self) -> None:
        self._write("Loading weather...")

    def hide_loading(self) -> None:
        pass

    def render(self, snapshot: WeatherSnapshot, location: str) -> None:
        view = format_view(snapshot, location)
        self._write(f"{view.icon} {view.location}: {view.temperature}° {view.description}")
        self._write(f"  {view.feels_like} | Humidity {view.humidity} | Wind {view.wind_speed} | Precip {view.precipitation}")

    def show_warning(self, message: str) -> None:
        self._write(f"! {message}")

    def show_error(self, message: str) -> None:
        self._write(f"Error: {message}")
