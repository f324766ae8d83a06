from __future__ import annotations

import re
from urllib.parse import urlencode

WATCH_URL = "https://www.youtube.com/watch"
EMBED_URL = "https://www.youtube.com/embed"
THUMBNAIL_TEMPLATE = "https://i.ytimg.com/vi/{video_id}/mqdefault.jpg"

_VIDEO_ID_RE = re.compile(r"^[A-Za-z0-9_-]{11}$")
_REFERENCE_RE = re.compile(
    r"(?:https?://)?(?:www\.|m\.)?"
    r"(?:youtube\.com/(?:[^/\s]+/\S+/|(?:v|e(?:mbed)?|shorts|live)/|\S*?[?&]v=)|youtu\.be/)"
    r"([A-Za-z0-9_-]{11})"
)


class InvalidReference(ValueError):
    pass


def extract_video_id(text: str) -> str:
    match = _REFERENCE_RE.search(text.strip())
    if match is None:
        raise InvalidReference("Not a valid YouTube URL")
    return match.group(1)


def is_video_id(value: str) -> bool:
    return bool(_VIDEO_ID_RE.match(value))


def watch_url(video_id: str) -> str:
    return f"{WATCH_URL}?{urlencode({'v': video_id})}"


def embed_url(video_id: str, *, muted: bool = True) -> str:
    params = {
        "autoplay": 0,
        "mute": 1 if muted else 0,
        "rel": 0,
        "playsinline": 1,
    }
    return f"{EMBED_URL}/{video_id}?{urlencode(params)}"


def fallback_thumbnail_url(video_id: str) -> str:
    return THUMBNAIL_TEMPLATE.format(video_id=video_id)
