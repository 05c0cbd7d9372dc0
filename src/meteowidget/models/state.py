"""Display and lifecycle states."""

from __future__ import annotations

from enum import Enum


class DisplayState(str, Enum):
    """What the presentation surface is asked to show."""

    LOADING = "loading"
    CONTENT = "content"
    CONTENT_WITH_WARNING = "content_with_warning"
    ERROR = "error"


class WidgetState(str, Enum):
    """Lifecycle of the refresh orchestrator."""

    IDLE = "idle"
    LOADING = "loading"
    DISPLAYING = "displaying"
    DISPLAYING_WITH_WARNING = "displaying_with_warning"
    ERROR_NO_DATA = "error_no_data"

    @property
    def display_state(self) -> DisplayState | None:
        """The display signal for this state, or None before the first load."""
        return _DISPLAY_STATES.get(self)


_DISPLAY_STATES: dict[WidgetState, DisplayState] = {
    WidgetState.LOADING: DisplayState.LOADING,
    WidgetState.DISPLAYING: DisplayState.CONTENT,
    WidgetState.DISPLAYING_WITH_WARNING: DisplayState.CONTENT_WITH_WARNING,
    WidgetState.ERROR_NO_DATA: DisplayState.ERROR,
}
