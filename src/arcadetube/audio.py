from __future__ import annotations

import logging
import math
import os
import time
from array import array
from functools import lru_cache
from typing import Any, Callable

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame

TICK_FREQUENCY = 1200.0
TICK_DURATION = 0.03
TICK_GAIN = 0.2
TICK_FLOOR = 0.0001
SAMPLE_RATE = 44100
RETRY_DELAY = 2.0

logger = logging.getLogger(__name__)


class AudioUnavailable(RuntimeError):
    pass


class TickEngine:
    def __init__(
        self,
        mixer: Any = None,
        *,
        sample_rate: int = SAMPLE_RATE,
        retry_delay: float = RETRY_DELAY,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._mixer = mixer if mixer is not None else pygame.mixer
        self._sample_rate = sample_rate
        self._retry_delay = retry_delay
        self._clock = clock
        self._sound: Any = None
        self._retry_at: float | None = None

    @property
    def ready(self) -> bool:
        return self._sound is not None and self._mixer.get_init() is not None

    def tick(self) -> None:
        if self._retry_at is not None and self._clock() < self._retry_at:
            return
        try:
            sound = self._ensure_sound()
        except AudioUnavailable as exc:
            self._retry_at = self._clock() + self._retry_delay
            logger.debug("Tick skipped: %s", exc)
            return
        except Exception as exc:
            logger.debug("Tick skipped: %s", exc)
            return
        self._retry_at = None
        try:
            sound.play()
        except Exception as exc:
            logger.debug("Tick skipped: %s", exc)

    def _ensure_sound(self) -> Any:
        if self._mixer.get_init() is None:
            self._sound = None
            try:
                self._mixer.init(frequency=self._sample_rate, size=-16, channels=1)
            except pygame.error as exc:
                raise AudioUnavailable(f"Audio device unavailable ({exc})") from exc
        if self._sound is None:
            init = self._mixer.get_init()
            if init is None:
                raise AudioUnavailable("Mixer failed to initialize")
            frequency, _, channels = init
            self._sound = self._mixer.Sound(buffer=_tick_samples(frequency, channels).tobytes())
        return self._sound


@lru_cache(maxsize=None)
def shared_tick_engine() -> TickEngine:
    return TickEngine()


def _tick_samples(sample_rate: int, channels: int = 1) -> array:
    count = max(1, int(sample_rate * TICK_DURATION))
    decay = math.log(TICK_FLOOR / TICK_GAIN) / count
    period = sample_rate / TICK_FREQUENCY
    samples = array("h")
    for index in range(count):
        phase = (index % period) / period
        wave = 4.0 * abs(phase - 0.5) - 1.0
        gain = TICK_GAIN * math.exp(decay * index)
        value = int(wave * gain * 32767)
        samples.extend([value] * channels)
    return samples
