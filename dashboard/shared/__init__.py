"""Shared dashboard utilities."""

from .weather_surface import StreamlitSurface

__all__ = ["StreamlitSurface"]
