"""Query parameter builder for the Open-Meteo endpoints."""

from __future__ import annotations

from typing import Any


def build_query_params(**kwargs: Any) -> list[tuple[str, str]]:
    """Build a list of query parameter tuples from keyword arguments.

    Plain values become ``key=value`` pairs. Lists and tuples are joined with
    commas, which is how Open-Meteo expects multi-valued fields such as
    ``current=temperature_2m,weather_code``.

    Args:
        **kwargs: Keyword arguments where keys are parameter names. ``None``
                  values are dropped.

    Returns:
        List of (key, value) tuples suitable for httpx params.
    """
    params: list[tuple[str, str]] = []
    for key, value in kwargs.items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.append((key, ",".join(str(v) for v in value)))
        else:
            params.append((key, str(value)))
    return params
