"""Single-entry snapshot cache with read-time freshness."""

from __future__ import annotations

from pydantic import ValidationError

from meteowidget.api_logging import get_logger
from meteowidget.exceptions import StorageUnavailableError
from meteowidget.models.cache_entry import CacheEntry
from meteowidget.models.coordinates import Coordinates
from meteowidget.models.snapshot import WeatherSnapshot
from meteowidget.storage import KeyValueStore

CACHE_KEY = "weatherData"
DEFAULT_TTL_MS = 10 * 60 * 1000


class SnapshotCache:
    """Holds the last successful (snapshot, coordinates) pair.

    Entries are never expired or evicted: staleness is judged by the reader
    through ``is_fresh``, and a stale entry stays usable as a fallback.
    Caching is an optimisation, so neither ``read`` nor ``write`` raises.
    """

    def __init__(
        self,
        store: KeyValueStore,
        ttl_ms: int = DEFAULT_TTL_MS,
        key: str = CACHE_KEY,
    ) -> None:
        self.store = store
        self.ttl_ms = ttl_ms
        self.key = key

    def read(self) -> CacheEntry | None:
        """Return the stored entry, or None if missing, unreadable or corrupt."""
        try:
            raw = self.store.get(self.key)
        except (StorageUnavailableError, OSError) as exc:
            get_logger().warning("CACHE READ FAIL: %s: %s", type(exc).__name__, exc)
            return None
        if raw is None:
            return None
        try:
            return CacheEntry.model_validate_json(raw)
        except ValidationError as exc:
            get_logger().warning(
                "CACHE CORRUPT: discarding entry under %r (%d errors)", self.key, exc.error_count(),
            )
            return None

    def write(self, snapshot: WeatherSnapshot, coords: Coordinates, now_ms: int) -> None:
        """Replace the single entry; storage failures are logged and dropped."""
        entry = CacheEntry(snapshot=snapshot, coords=coords, stored_at_ms=now_ms)
        try:
            self.store.set(self.key, entry.model_dump_json())
        except (StorageUnavailableError, OSError) as exc:
            get_logger().warning("CACHE WRITE FAIL: %s: %s", type(exc).__name__, exc)

    def is_fresh(self, entry: CacheEntry, now_ms: int) -> bool:
        return self.age_ms(entry, now_ms) < self.ttl_ms

    def age_ms(self, entry: CacheEntry, now_ms: int) -> int:
        return now_ms - entry.stored_at_ms
