import pytest

from arcadetube.resolve import (
    InvalidReference,
    embed_url,
    extract_video_id,
    fallback_thumbnail_url,
    is_video_id,
    watch_url,
)


@pytest.mark.parametrize(
    "text",
    [
        "https://youtu.be/abcdefghijk",
        "https://www.youtube.com/watch?v=abcdefghijk",
        "https://www.youtube.com/watch?feature=share&v=abcdefghijk&t=10",
        "youtube.com/watch?v=abcdefghijk",
        "https://www.youtube.com/embed/abcdefghijk?rel=0",
        "https://www.youtube.com/v/abcdefghijk",
        "https://m.youtube.com/shorts/abcdefghijk",
        "  check this out https://youtu.be/abcdefghijk?si=xyz  ",
    ],
)
def test_extract_video_id_known_shapes(text: str) -> None:
    assert extract_video_id(text) == "abcdefghijk"


def test_extract_video_id_allows_dash_and_underscore() -> None:
    assert extract_video_id("https://youtu.be/-Xh9NYCRw0M") == "-Xh9NYCRw0M"
    assert extract_video_id("https://youtu.be/_yyszvUE4r8") == "_yyszvUE4r8"


@pytest.mark.parametrize(
    "text",
    [
        "not a url",
        "",
        "https://example.com/watch?v=abcdefghijk",
        "https://youtu.be/short",
    ],
)
def test_extract_video_id_rejects_unknown_text(text: str) -> None:
    with pytest.raises(InvalidReference):
        extract_video_id(text)


def test_invalid_reference_is_value_error() -> None:
    with pytest.raises(ValueError, match="Not a valid YouTube URL"):
        extract_video_id("not a url")


def test_is_video_id() -> None:
    assert is_video_id("abcdefghijk")
    assert not is_video_id("abcdefghij")
    assert not is_video_id("abcdefghij!")


def test_canonical_urls() -> None:
    assert watch_url("abcdefghijk") == "https://www.youtube.com/watch?v=abcdefghijk"
    assert fallback_thumbnail_url("abcdefghijk") == "https://i.ytimg.com/vi/abcdefghijk/mqdefault.jpg"


def test_embed_url_mute_flag() -> None:
    muted = embed_url("abcdefghijk")
    assert muted.startswith("https://www.youtube.com/embed/abcdefghijk?")
    assert "mute=1" in muted
    assert "autoplay=0" in muted
    assert "playsinline=1" in muted
    assert "mute=0" in embed_url("abcdefghijk", muted=False)


def test_extract_video_id_takes_first_eleven_characters_of_longer_token() -> None:
    assert extract_video_id("https://www.youtube.com/watch?v=abcdefghijkl") == "abcdefghijk"
