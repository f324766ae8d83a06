from pathlib import Path

from arcadetube.metadata import Video, fallback_video
from arcadetube.thumbs import download_thumbnail


def test_download_thumbnail_cached(tmp_path: Path) -> None:
    calls = 0

    def fetch(_: str) -> bytes:
        nonlocal calls
        calls += 1
        return b"image"

    video = Video("abcdefghijk", "Clip", "https://example.com/thumb.png")
    path1 = download_thumbnail(video, cache_dir=tmp_path, fetcher=fetch)
    assert path1.exists()
    assert path1.name == "abcdefghijk.png"
    path2 = download_thumbnail(video, cache_dir=tmp_path, fetcher=fetch)
    assert path1 == path2
    assert calls == 1


def test_download_thumbnail_fallback_url(tmp_path: Path) -> None:
    requested: list[str] = []

    def fetch(url: str) -> bytes:
        requested.append(url)
        return b"image"

    path = download_thumbnail(fallback_video("xyz789xyz78"), cache_dir=tmp_path, fetcher=fetch)
    assert path.name == "xyz789xyz78.jpg"
    assert requested == ["https://i.ytimg.com/vi/xyz789xyz78/mqdefault.jpg"]
