from __future__ import annotations

import logging
import random
from typing import Any, Awaitable, Callable, Iterable, Sequence

from .metadata import Video
from .resolve import extract_video_id
from .store import KeyValueStore

FAVORITES_KEY = "favoriteVideoIds"

FetchMany = Callable[[Sequence[str]], Awaitable[list[Video]]]

logger = logging.getLogger(__name__)


class AdditionFailed(RuntimeError):
    pass


class VideoLibrary:
    def __init__(
        self,
        seed_ids: Iterable[str],
        fetch_many: FetchMany,
        store: KeyValueStore,
        *,
        rng: random.Random | None = None,
    ) -> None:
        self._seed_order = tuple(dict.fromkeys(seed_ids))
        self._seed_ids = frozenset(self._seed_order)
        self._fetch_many = fetch_many
        self._store = store
        self._rng = rng or random.Random()
        self._videos: list[Video] = []
        self._favorite_ids = _coerce_ids(store.get(FAVORITES_KEY, []))
        self._current_video_id = self._random_seed_id()
        self.is_loading = False

    @property
    def seed_ids(self) -> tuple[str, ...]:
        return self._seed_order

    @property
    def videos(self) -> tuple[Video, ...]:
        return tuple(self._videos)

    @property
    def favorite_ids(self) -> tuple[str, ...]:
        return tuple(self._favorite_ids)

    @property
    def current_video_id(self) -> str:
        return self._current_video_id

    @property
    def current_video(self) -> Video | None:
        return self.get(self._current_video_id)

    def get(self, video_id: str) -> Video | None:
        for video in self._videos:
            if video.video_id == video_id:
                return video
        return None

    def contains(self, video_id: str) -> bool:
        return self.get(video_id) is not None

    async def load_seed(self) -> None:
        self.is_loading = True
        try:
            fetched = await self._fetch_many(list(self._seed_order))
        finally:
            self.is_loading = False
        seed_videos = _dedupe([video for video in fetched if video.video_id in self._seed_ids])
        seed_set = {video.video_id for video in seed_videos}
        added = [video for video in self._videos if video.video_id not in seed_set]
        self._videos = added + seed_videos

    def select(self, video_id: str) -> bool:
        if video_id == self._current_video_id:
            return False
        self._current_video_id = video_id
        return True

    def is_favorite(self, video_id: str) -> bool:
        return video_id in self._favorite_ids

    def toggle_favorite(self, video_id: str) -> bool:
        if video_id in self._favorite_ids:
            self._favorite_ids = [fav for fav in self._favorite_ids if fav != video_id]
            favorite = False
        else:
            self._favorite_ids = [*self._favorite_ids, video_id]
            favorite = True
        self._persist_favorites()
        return favorite

    async def add_by_reference(self, text: str) -> str:
        video_id = extract_video_id(text)
        if self.contains(video_id):
            self.select(video_id)
            return video_id

        try:
            fetched = await self._fetch_many([video_id])
        except Exception as exc:
            logger.error("Fetching metadata for %s failed: %s", video_id, exc)
            raise AdditionFailed("Failed to add the video. Check the URL.") from exc
        video = next((item for item in fetched if item.video_id == video_id), None)
        if video is None:
            raise AdditionFailed("Failed to fetch video details.")

        if not self.contains(video_id):
            self._videos.insert(0, video)
        self.select(video_id)
        return video_id

    def reset_favorites(self) -> None:
        self._favorite_ids = []
        self._persist_favorites()

    def reset_user_videos(self) -> None:
        self._videos = [video for video in self._videos if video.video_id in self._seed_ids]
        if self._current_video_id not in self._seed_ids:
            self._current_video_id = self._random_seed_id()

    def favorites_view(self) -> list[Video]:
        by_id = {video.video_id: video for video in self._videos}
        return [by_id[video_id] for video_id in self._favorite_ids if video_id in by_id]

    def is_favorites_resettable(self) -> bool:
        return len(self._favorite_ids) > 0

    def is_user_videos_resettable(self) -> bool:
        return len(self._videos) > len(self._seed_ids)

    def pick_random_other(self) -> str | None:
        if len(self._videos) <= 1:
            return None
        while True:
            video_id = self._rng.choice(self._videos).video_id
            if video_id != self._current_video_id:
                break
        self.select(video_id)
        return video_id

    def search(self, term: str) -> list[Video]:
        needle = term.strip().lower()
        if not needle:
            return list(self._videos)
        return [video for video in self._videos if needle in video.title.lower()]

    def _random_seed_id(self) -> str:
        if not self._seed_order:
            return ""
        return self._rng.choice(self._seed_order)

    def _persist_favorites(self) -> None:
        self._store.set(FAVORITES_KEY, list(self._favorite_ids))


def _coerce_ids(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    ids = [item for item in value if isinstance(item, str) and item]
    return list(dict.fromkeys(ids))


def _dedupe(videos: Sequence[Video]) -> list[Video]:
    seen: set[str] = set()
    unique: list[Video] = []
    for video in videos:
        if video.video_id in seen:
            continue
        seen.add(video.video_id)
        unique.append(video)
    return unique
