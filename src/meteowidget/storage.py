"""Key-value stores that hold the cached snapshot blob."""

from __future__ import annotations

import json
import os
import tempfile
from pathlib import Path
from typing import Protocol

from meteowidget.exceptions import StorageUnavailableError


class KeyValueStore(Protocol):
    def get(self, key: str) -> str | None: ...

    def set(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Process-lifetime store backed by a dict."""

    def __init__(self) -> None:
        self._data: dict[str, str] = {}

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore:
    """Store persisted as a single JSON object on disk.

    Survives process restarts. Writes go through a temporary file in the same
    directory followed by ``os.replace`` so a crash never leaves a half
    written file behind.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        self.path = Path(path)

    def _load(self) -> dict[str, str]:
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot read {self.path}: {exc}") from exc
        except UnicodeDecodeError as exc:
            raise StorageUnavailableError(f"{self.path} is not UTF-8 text: {exc}") from exc
        try:
            data = json.loads(raw)
        except ValueError as exc:
            raise StorageUnavailableError(f"{self.path} is not valid JSON: {exc}") from exc
        if not isinstance(data, dict):
            raise StorageUnavailableError(f"{self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> str | None:
        value = self._load().get(key)
        return value if isinstance(value, str) else None

    def set(self, key: str, value: str) -> None:
        try:
            data = self._load()
        except StorageUnavailableError:
            data = {}
        data[key] = value
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh)
            os.replace(tmp_name, self.path)
        except OSError as exc:
            raise StorageUnavailableError(f"Cannot write {self.path}: {exc}") from exc
