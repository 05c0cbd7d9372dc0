"""Current Weather Dashboard — Streamlit + meteowidget."""

from __future__ import annotations

import asyncio

import streamlit as st

from meteowidget import WidgetRuntime, WidgetSettings, WidgetState
from meteowidget.runtime import build_store

from shared import StreamlitSurface

# ── Page config ──────────────────────────────────────────────────────────────

st.set_page_config(
    page_title="Current Weather",
    page_icon="⛅",
    layout="centered",
)

settings = WidgetSettings()

# The snapshot store outlives reruns so cached data shows instantly.
if "weather_store" not in st.session_state:
    st.session_state["weather_store"] = build_store(settings)
store = st.session_state["weather_store"]


# ── Sidebar — triggers ───────────────────────────────────────────────────────

st.sidebar.title("Weather")
offline = st.sidebar.toggle("Offline", value=False)
# Any click reruns the script, which is a fresh load.
st.sidebar.button("Refresh")

surface = StreamlitSurface()


async def _run() -> WidgetState:
    async with WidgetRuntime(surface, settings=settings, store=store) as runtime:
        if offline:
            runtime.orchestrator.on_offline()
            return runtime.orchestrator.state
        return await runtime.orchestrator.start()


state = asyncio.run(_run())

if state is WidgetState.ERROR_NO_DATA:
    st.button("Retry")
