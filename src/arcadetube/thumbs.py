from __future__ import annotations

from pathlib import Path
from typing import Callable
from urllib.parse import urlparse

import httpx

from .metadata import Video
from .paths import thumbs_cache_dir

Fetcher = Callable[[str], bytes]

_VALID_EXTENSIONS = {".jpg", ".jpeg", ".png", ".webp"}


def download_thumbnail(
    video: Video,
    cache_dir: Path | None = None,
    fetcher: Fetcher | None = None,
) -> Path:
    url = video.thumbnail_url
    if not url:
        raise ValueError("Missing thumbnail URL")

    cache_dir = cache_dir or thumbs_cache_dir()
    ext = _guess_extension(url)
    path = cache_dir / f"{video.video_id}{ext}"
    if path.exists():
        return path

    fetcher = fetcher or _http_fetch
    data = fetcher(url)
    path.write_bytes(data)
    return path


def _guess_extension(url: str) -> str:
    suffix = Path(urlparse(url).path).suffix.lower()
    if suffix in _VALID_EXTENSIONS:
        return suffix
    return ".jpg"


def _http_fetch(url: str) -> bytes:
    with httpx.Client(follow_redirects=True, timeout=10.0) as client:
        response = client.get(url)
        response.raise_for_status()
        return response.content
