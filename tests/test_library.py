import asyncio
import random
from typing import Any, Sequence

import pytest

from arcadetube.library import FAVORITES_KEY, AdditionFailed, VideoLibrary
from arcadetube.metadata import Video, fallback_video
from arcadetube.resolve import InvalidReference

SEED = ["AAAAAAAAAAA", "BBBBBBBBBBB", "CCCCCCCCCCC"]
USER_ID = "DDDDDDDDDDD"


class MemoryStore:
    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self.data = dict(data or {})
        self.writes: list[tuple[str, Any]] = []

    def get(self, key: str, default: Any) -> Any:
        return self.data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.data[key] = value
        self.writes.append((key, value))


class FakeFetcher:
    def __init__(self, fail: bool = False) -> None:
        self.calls: list[list[str]] = []
        self.fail = fail

    async def __call__(self, video_ids: Sequence[str]) -> list[Video]:
        self.calls.append(list(video_ids))
        await asyncio.sleep(0)
        if self.fail:
            raise RuntimeError("transport exploded")
        return [Video(video_id, f"Title {video_id}", f"thumb-{video_id}") for video_id in video_ids]


def _library(
    seed: Sequence[str] = SEED,
    store: MemoryStore | None = None,
    fetcher: FakeFetcher | None = None,
) -> VideoLibrary:
    return VideoLibrary(
        seed,
        fetcher or FakeFetcher(),
        store or MemoryStore(),
        rng=random.Random(7),
    )


def _loaded(**kwargs: Any) -> VideoLibrary:
    library = _library(**kwargs)
    asyncio.run(library.load_seed())
    return library


def _ids(videos: Sequence[Video]) -> list[str]:
    return [video.video_id for video in videos]


def test_seed_ids_are_deduplicated_in_order() -> None:
    library = _library(seed=["AAAAAAAAAAA", "BBBBBBBBBBB", "AAAAAAAAAAA"])
    assert library.seed_ids == ("AAAAAAAAAAA", "BBBBBBBBBBB")


def test_initial_selection_is_a_seed_id_before_load() -> None:
    library = _library()
    assert library.current_video_id in SEED
    assert library.videos == ()
    assert library.current_video is None


def test_empty_seed_means_empty_selection() -> None:
    library = _loaded(seed=[])
    assert library.current_video_id == ""
    assert library.videos == ()


def test_load_seed_installs_videos_and_clears_loading_flag() -> None:
    fetcher = FakeFetcher()
    library = _library(fetcher=fetcher)
    observed: list[bool] = []

    async def run() -> None:
        task = asyncio.create_task(library.load_seed())
        await asyncio.sleep(0)
        observed.append(library.is_loading)
        await task

    asyncio.run(run())
    assert observed == [True]
    assert library.is_loading is False
    assert _ids(library.videos) == SEED
    assert fetcher.calls == [SEED]


def test_load_seed_failure_clears_loading_flag() -> None:
    library = _library(fetcher=FakeFetcher(fail=True))
    with pytest.raises(RuntimeError):
        asyncio.run(library.load_seed())
    assert library.is_loading is False


def test_load_seed_keeps_videos_added_while_loading() -> None:
    library = _library()

    async def run() -> None:
        await library.add_by_reference(f"https://youtu.be/{USER_ID}")
        await library.load_seed()

    asyncio.run(run())
    assert _ids(library.videos) == [USER_ID, *SEED]
    assert library.current_video_id == USER_ID


def test_select_is_noop_when_already_selected() -> None:
    library = _loaded()
    current = library.current_video_id
    assert library.select(current) is False
    other = next(video_id for video_id in SEED if video_id != current)
    assert library.select(other) is True
    assert library.current_video_id == other


def test_select_does_not_validate_membership() -> None:
    library = _library()
    assert library.select("ZZZZZZZZZZZ") is True
    assert library.current_video_id == "ZZZZZZZZZZZ"


def test_toggle_favorite_pairs_and_persists() -> None:
    store = MemoryStore()
    library = _loaded(store=store)
    assert library.toggle_favorite("AAAAAAAAAAA") is True
    assert library.toggle_favorite("BBBBBBBBBBB") is True
    assert library.favorite_ids == ("AAAAAAAAAAA", "BBBBBBBBBBB")
    assert library.toggle_favorite("AAAAAAAAAAA") is False
    assert library.favorite_ids == ("BBBBBBBBBBB",)
    assert store.data[FAVORITES_KEY] == ["BBBBBBBBBBB"]
    assert len(store.writes) == 3


def test_toggle_favorite_membership_follows_toggle_parity() -> None:
    library = _loaded()
    rng = random.Random(3)
    counts = {video_id: 0 for video_id in SEED}
    for _ in range(200):
        video_id = rng.choice(SEED)
        counts[video_id] += 1
        library.toggle_favorite(video_id)
        favorites = library.favorite_ids
        assert len(favorites) == len(set(favorites))
    for video_id, count in counts.items():
        assert library.is_favorite(video_id) == (count % 2 == 1)


def test_favorites_loaded_from_store_are_sanitized() -> None:
    store = MemoryStore({FAVORITES_KEY: ["AAAAAAAAAAA", 3, "", "AAAAAAAAAAA", "CCCCCCCCCCC"]})
    library = _library(store=store)
    assert library.favorite_ids == ("AAAAAAAAAAA", "CCCCCCCCCCC")


def test_favorites_loaded_from_store_with_wrong_type() -> None:
    library = _library(store=MemoryStore({FAVORITES_KEY: {"oops": True}}))
    assert library.favorite_ids == ()


def test_favorites_view_skips_absent_ids() -> None:
    store = MemoryStore({FAVORITES_KEY: ["CCCCCCCCCCC", "GONEGONEGON", "AAAAAAAAAAA"]})
    library = _library(store=store)
    assert library.favorites_view() == []
    asyncio.run(library.load_seed())
    assert _ids(library.favorites_view()) == ["CCCCCCCCCCC", "AAAAAAAAAAA"]
    assert "GONEGONEGON" in library.favorite_ids


def test_add_by_reference_prepends_and_selects() -> None:
    library = _loaded()
    video_id = asyncio.run(library.add_by_reference(f"https://www.youtube.com/watch?v={USER_ID}"))
    assert video_id == USER_ID
    assert _ids(library.videos) == [USER_ID, *SEED]
    assert library.current_video_id == USER_ID
    assert library.current_video == Video(USER_ID, f"Title {USER_ID}", f"thumb-{USER_ID}")


def test_add_by_reference_twice_keeps_one_entry() -> None:
    fetcher = FakeFetcher()
    library = _loaded(fetcher=fetcher)
    asyncio.run(library.add_by_reference(f"https://youtu.be/{USER_ID}"))
    library.select("AAAAAAAAAAA")
    asyncio.run(library.add_by_reference(f"https://www.youtube.com/embed/{USER_ID}"))
    assert _ids(library.videos).count(USER_ID) == 1
    assert library.current_video_id == USER_ID
    assert fetcher.calls == [SEED, [USER_ID]]


def test_overlapping_adds_of_same_id_keep_one_entry() -> None:
    library = _loaded()

    async def run() -> None:
        await asyncio.gather(
            library.add_by_reference(f"https://youtu.be/{USER_ID}"),
            library.add_by_reference(f"https://youtu.be/{USER_ID}"),
        )

    asyncio.run(run())
    assert _ids(library.videos).count(USER_ID) == 1


def test_add_existing_seed_video_is_pure_selection() -> None:
    fetcher = FakeFetcher()
    library = _loaded(fetcher=fetcher)
    asyncio.run(library.add_by_reference("https://youtu.be/CCCCCCCCCCC"))
    assert library.current_video_id == "CCCCCCCCCCC"
    assert len(library.videos) == 3
    assert fetcher.calls == [SEED]


def test_add_by_reference_invalid_text_leaves_state_untouched() -> None:
    library = _loaded()
    before = (library.videos, library.current_video_id)
    with pytest.raises(InvalidReference):
        asyncio.run(library.add_by_reference("not a url"))
    assert (library.videos, library.current_video_id) == before


def test_add_by_reference_fetch_failure_raises_addition_failed() -> None:
    fetcher = FakeFetcher()
    library = _loaded(fetcher=fetcher)
    before = (library.videos, library.current_video_id)
    fetcher.fail = True
    with pytest.raises(AdditionFailed):
        asyncio.run(library.add_by_reference(f"https://youtu.be/{USER_ID}"))
    assert (library.videos, library.current_video_id) == before


def test_add_by_reference_accepts_fallback_video() -> None:
    async def fallback_only(video_ids: Sequence[str]) -> list[Video]:
        return [fallback_video(video_id) for video_id in video_ids]

    library = VideoLibrary(SEED, fallback_only, MemoryStore(), rng=random.Random(1))
    asyncio.run(library.add_by_reference(f"https://youtu.be/{USER_ID}"))
    assert library.current_video == fallback_video(USER_ID)


def test_reset_favorites() -> None:
    store = MemoryStore({FAVORITES_KEY: ["AAAAAAAAAAA"]})
    library = _loaded(store=store)
    assert library.is_favorites_resettable()
    library.reset_favorites()
    assert library.favorite_ids == ()
    assert store.data[FAVORITES_KEY] == []
    assert not library.is_favorites_resettable()


def test_reset_user_videos_repairs_selection() -> None:
    library = _loaded()
    asyncio.run(library.add_by_reference(f"https://youtu.be/{USER_ID}"))
    assert library.current_video_id == USER_ID
    assert library.is_user_videos_resettable()

    library.reset_user_videos()
    assert _ids(library.videos) == SEED
    assert library.current_video_id in SEED
    assert not library.is_user_videos_resettable()


def test_reset_user_videos_keeps_seed_selection() -> None:
    library = _loaded()
    library.select("BBBBBBBBBBB")
    asyncio.run(library.add_by_reference(f"https://youtu.be/{USER_ID}"))
    library.select("BBBBBBBBBBB")
    library.reset_user_videos()
    assert library.current_video_id == "BBBBBBBBBBB"


def test_reset_user_videos_is_idempotent() -> None:
    library = _loaded()
    asyncio.run(library.add_by_reference(f"https://youtu.be/{USER_ID}"))
    library.reset_user_videos()
    once = library.videos
    library.reset_user_videos()
    assert library.videos == once


def test_reset_user_videos_with_empty_seed_empties_selection() -> None:
    library = _loaded(seed=[])
    asyncio.run(library.add_by_reference(f"https://youtu.be/{USER_ID}"))
    library.reset_user_videos()
    assert library.videos == ()
    assert library.current_video_id == ""


def test_reset_user_videos_keeps_favorite_ids_but_hides_them() -> None:
    library = _loaded()
    asyncio.run(library.add_by_reference(f"https://youtu.be/{USER_ID}"))
    library.toggle_favorite(USER_ID)
    library.reset_user_videos()
    assert library.favorite_ids == (USER_ID,)
    assert library.favorites_view() == []


def test_pick_random_other_needs_two_videos() -> None:
    library = _loaded(seed=["AAAAAAAAAAA"])
    assert library.pick_random_other() is None
    assert library.current_video_id == "AAAAAAAAAAA"


def test_pick_random_other_changes_selection() -> None:
    library = _loaded()
    for _ in range(20):
        before = library.current_video_id
        picked = library.pick_random_other()
        assert picked is not None
        assert picked != before
        assert library.current_video_id == picked


def test_search_filters_titles_case_insensitively() -> None:
    library = _loaded()
    assert _ids(library.search("title bbb")) == ["BBBBBBBBBBB"]
    assert _ids(library.search("   ")) == SEED
    assert library.search("nothing matches") == []
