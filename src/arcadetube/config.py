from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from .metadata import DEFAULT_MAX_CONCURRENCY, DEFAULT_REQUEST_TIMEOUT, METADATA_ENDPOINT
from .paths import config_path

CONFIG_VERSION = 1
DEFAULT_TICK_INTERVAL_MS = 40
DEFAULT_KEY_RELEASE_MS = 700
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class AppConfig:
    version: int = CONFIG_VERSION
    metadata_endpoint: str = METADATA_ENDPOINT
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    max_concurrency: int = DEFAULT_MAX_CONCURRENCY
    tick_interval_ms: int = DEFAULT_TICK_INTERVAL_MS
    key_release_ms: int = DEFAULT_KEY_RELEASE_MS
    start_muted: bool = True
    log_level: str = DEFAULT_LOG_LEVEL

    @property
    def tick_interval(self) -> float:
        return self.tick_interval_ms / 1000.0

    @property
    def key_release_delay(self) -> float:
        return self.key_release_ms / 1000.0


def load_config(path: Path | None = None) -> tuple[AppConfig, str | None]:
    path = path or config_path()
    if not path.exists():
        return AppConfig(), None
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        return AppConfig(), f"Failed to read config: {path} ({exc})"
    try:
        data = json.loads(raw)
    except json.JSONDecodeError:
        return AppConfig(), f"Config file is not valid JSON: {path}"
    if not isinstance(data, dict):
        return AppConfig(), f"Config file must be a JSON object: {path}"
    return _parse_config_data(data), None


def save_config(config: AppConfig, path: Path | None = None) -> str | None:
    path = path or config_path()
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        return f"Failed to create config directory: {path.parent} ({exc})"
    payload = _config_to_dict(config)
    try:
        path.write_text(
            json.dumps(payload, ensure_ascii=True, indent=2),
            encoding="utf-8",
        )
    except OSError as exc:
        return f"Failed to write config: {path} ({exc})"
    return None


def _parse_config_data(data: dict[str, Any]) -> AppConfig:
    defaults = AppConfig()
    return AppConfig(
        version=_as_int(data.get("version")) or CONFIG_VERSION,
        metadata_endpoint=_as_url(data.get("metadata_endpoint")) or defaults.metadata_endpoint,
        request_timeout=_as_positive_float(data.get("request_timeout")) or defaults.request_timeout,
        max_concurrency=_as_positive_int(data.get("max_concurrency")) or defaults.max_concurrency,
        tick_interval_ms=_as_positive_int(data.get("tick_interval_ms")) or defaults.tick_interval_ms,
        key_release_ms=_as_positive_int(data.get("key_release_ms")) or defaults.key_release_ms,
        start_muted=_fallback_bool(data.get("start_muted"), defaults.start_muted),
        log_level=_as_log_level(data.get("log_level")) or defaults.log_level,
    )


def _config_to_dict(config: AppConfig) -> dict[str, Any]:
    return {
        "version": config.version,
        "metadata_endpoint": config.metadata_endpoint,
        "request_timeout": config.request_timeout,
        "max_concurrency": config.max_concurrency,
        "tick_interval_ms": config.tick_interval_ms,
        "key_release_ms": config.key_release_ms,
        "start_muted": config.start_muted,
        "log_level": config.log_level,
    }


def _as_str(value: Any) -> str | None:
    if isinstance(value, str):
        value = value.strip()
        return value or None
    return None


def _as_url(value: Any) -> str | None:
    text = _as_str(value)
    if text is None or not text.startswith(("http://", "https://")):
        return None
    return text


def _fallback_bool(value: Any, default: bool) -> bool:
    if isinstance(value, bool):
        return value
    return default


def _as_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return None


def _as_positive_int(value: Any) -> int | None:
    number = _as_int(value)
    if number is None or number <= 0:
        return None
    return number


def _as_positive_float(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0:
        return None
    return float(value)


def _as_log_level(value: Any) -> str | None:
    text = _as_str(value)
    if text is None:
        return None
    level = text.upper()
    if not isinstance(logging.getLevelName(level), int):
        return None
    return level
