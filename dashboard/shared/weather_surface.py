"""Streamlit implementation of the widget presentation surface."""

from __future__ import annotations

from typing import Any

import streamlit as st

from meteowidget.formatters import format_view
from meteowidget.models.snapshot import WeatherSnapshot


class StreamlitSurface:
    """Renders into two placeholders: a status line and the weather card.

    Placeholders are replaced in place, so a background refresh overwrites
    the cached card instead of appending a second one.
    """

    def __init__(self, container: Any = None) -> None:
        root = container if container is not None else st
        self._status = root.empty()
        self._content = root.empty()

    def show_loading(self) -> None:
        self._status.info("Loading weather data...")

    def hide_loading(self) -> None:
        self._status.empty()

    def render(self, snapshot: WeatherSnapshot, location: str) -> None:
        view = format_view(snapshot, location)
        with self._content.container():
            st.subheader(f"{view.icon} {view.location}")
            st.markdown(f"### {view.temperature}° {view.description}")
            st.caption(view.feels_like)
            cols = st.columns(3)
            cols[0].metric("Humidity", view.humidity)
            cols[1].metric("Wind", view.wind_speed)
            cols[2].metric("Precipitation", view.precipitation)

    def show_warning(self, message: str) -> None:
        self._status.warning(message)

    def show_error(self, message: str) -> None:
        self._status.error(message)
