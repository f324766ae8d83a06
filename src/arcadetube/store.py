from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from .paths import store_path

logger = logging.getLogger(__name__)


class PersistenceUnavailable(OSError):
    pass


class KeyValueStore(Protocol):
    def get(self, key: str, default: Any) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...


class JsonStore:
    def __init__(self, path: Path | None = None) -> None:
        self.path = path or store_path()
        self._data: dict[str, Any] | None = None

    def get(self, key: str, default: Any) -> Any:
        data = self._loaded()
        if key not in data:
            return default
        return data[key]

    def set(self, key: str, value: Any) -> None:
        data = self._loaded()
        data[key] = value
        try:
            self._write_all(data)
        except PersistenceUnavailable as exc:
            logger.warning("Error setting store key %r: %s", key, exc)

    def _loaded(self) -> dict[str, Any]:
        if self._data is None:
            try:
                self._data = self._read_all()
            except PersistenceUnavailable as exc:
                logger.warning("Error reading store %s: %s", self.path, exc)
                self._data = {}
        return self._data

    def _read_all(self) -> dict[str, Any]:
        if not self.path.exists():
            return {}
        try:
            raw = self.path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PersistenceUnavailable(f"Failed to read {self.path} ({exc})") from exc
        try:
            data = json.loads(raw)
        except json.JSONDecodeError as exc:
            raise PersistenceUnavailable(f"Store file is not valid JSON: {self.path}") from exc
        if not isinstance(data, dict):
            raise PersistenceUnavailable(f"Store file must be a JSON object: {self.path}")
        return data

    def _write_all(self, data: dict[str, Any]) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(
                json.dumps(data, ensure_ascii=False, indent=2),
                encoding="utf-8",
            )
        except (OSError, TypeError, ValueError) as exc:
            raise PersistenceUnavailable(f"Failed to write {self.path} ({exc})") from exc
