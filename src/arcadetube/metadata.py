from __future__ import annotations

import asyncio
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Sequence

import httpx

from .resolve import fallback_thumbnail_url, watch_url

METADATA_ENDPOINT = "https://noembed.com/embed"
DEFAULT_REQUEST_TIMEOUT = 10.0
DEFAULT_MAX_CONCURRENCY = 16

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Video:
    video_id: str
    title: str
    thumbnail_url: str


def fallback_video(video_id: str) -> Video:
    return Video(
        video_id=video_id,
        title=f"Video (ID: {video_id})",
        thumbnail_url=fallback_thumbnail_url(video_id),
    )


class MetadataFetcher:
    def __init__(
        self,
        endpoint: str = METADATA_ENDPOINT,
        *,
        timeout: float = DEFAULT_REQUEST_TIMEOUT,
        max_concurrency: int = DEFAULT_MAX_CONCURRENCY,
        client: httpx.AsyncClient | None = None,
        cache_dir: Path | None = None,
    ) -> None:
        if max_concurrency < 1:
            raise ValueError("max_concurrency must be at least 1")
        self.endpoint = endpoint
        self._timeout = timeout
        self._max_concurrency = max_concurrency
        self._client = client
        self._cache_dir = cache_dir

    async def fetch_many(self, video_ids: Sequence[str]) -> list[Video]:
        if not video_ids:
            return []
        if self._client is not None:
            return await self._gather(self._client, video_ids)
        async with httpx.AsyncClient(timeout=self._timeout, follow_redirects=True) as client:
            return await self._gather(client, video_ids)

    async def _gather(self, client: httpx.AsyncClient, video_ids: Sequence[str]) -> list[Video]:
        semaphore = asyncio.Semaphore(self._max_concurrency)

        async def bounded(video_id: str) -> Video:
            async with semaphore:
                return await self._fetch_one(client, video_id)

        results = await asyncio.gather(*(bounded(video_id) for video_id in video_ids))
        return list(results)

    async def _fetch_one(self, client: httpx.AsyncClient, video_id: str) -> Video:
        cache_path = self._cache_path(video_id)
        if cache_path is not None:
            cached = _read_cached_json(cache_path)
            if cached is not None:
                return _parse_video(cached, video_id)

        try:
            response = await client.get(self.endpoint, params={"url": watch_url(video_id)})
        except Exception as exc:
            logger.info("Metadata lookup failed for %s: %s", video_id, exc)
            return fallback_video(video_id)
        if not response.is_success:
            logger.info("Metadata lookup for %s returned HTTP %s", video_id, response.status_code)
            return fallback_video(video_id)
        try:
            data = response.json()
        except ValueError:
            logger.info("Metadata lookup for %s returned invalid JSON", video_id)
            return fallback_video(video_id)
        if not isinstance(data, dict) or "error" in data:
            logger.info("Metadata service reported an error for %s", video_id)
            return fallback_video(video_id)

        if cache_path is not None:
            _write_json(cache_path, data)
        return _parse_video(data, video_id)

    def _cache_path(self, video_id: str) -> Path | None:
        if self._cache_dir is None:
            return None
        return self._cache_dir / f"{video_id}.json"


def _read_cached_json(path: Path) -> dict[str, Any] | None:
    if not path.exists():
        return None
    try:
        raw = path.read_text(encoding="utf-8")
        data = json.loads(raw)
    except (OSError, json.JSONDecodeError):
        return None
    if not isinstance(data, dict):
        return None
    return data


def _write_json(path: Path, data: dict[str, Any]) -> None:
    try:
        path.write_text(json.dumps(data, ensure_ascii=True, indent=2), encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to write metadata cache %s: %s", path, exc)


def _parse_video(data: dict[str, Any], video_id: str) -> Video:
    return Video(
        video_id=video_id,
        title=_as_str(data.get("title")) or f"Untitled video (ID: {video_id})",
        thumbnail_url=_as_str(data.get("thumbnail_url")) or fallback_thumbnail_url(video_id),
    )


def _as_str(value: Any) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None
