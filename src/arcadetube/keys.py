from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Mapping

from .controls import ArcadeColor, ButtonEvent, ButtonEventKind, ControlPanel, InputSource, TimerHandle

DEFAULT_KEY_MAP: dict[str, ArcadeColor] = {
    "w": ArcadeColor.RED,
    "W": ArcadeColor.RED,
    "a": ArcadeColor.GREEN,
    "A": ArcadeColor.GREEN,
    "d": ArcadeColor.YELLOW,
    "D": ArcadeColor.YELLOW,
}

ScheduleOnce = Callable[[float, Callable[[], None]], TimerHandle]


@dataclass(frozen=True)
class KeyEvent:
    key: str
    repeat: bool = False
    in_text_field: bool = False


class KeyDispatcher:
    def __init__(
        self,
        panel: ControlPanel,
        key_map: Mapping[str, ArcadeColor] | None = None,
    ) -> None:
        self._panel = panel
        self._key_map = dict(DEFAULT_KEY_MAP if key_map is None else key_map)

    def button_for(self, key: str) -> ArcadeColor | None:
        return self._key_map.get(key)

    def key_down(self, event: KeyEvent) -> bool:
        button = self._key_map.get(event.key)
        if button is None:
            return False
        if event.repeat or event.in_text_field:
            return False
        self._panel.handle(ButtonEvent(ButtonEventKind.PRESS, button, InputSource.KEYBOARD))
        return True

    def key_up(self, event: KeyEvent) -> bool:
        button = self._key_map.get(event.key)
        if button is None:
            return False
        self._panel.handle(ButtonEvent(ButtonEventKind.RELEASE, button, InputSource.KEYBOARD))
        return True


# Terminals repeat a held key but never report its release.
class KeyHoldRelay:
    def __init__(
        self,
        dispatcher: KeyDispatcher,
        schedule_once: ScheduleOnce,
        *,
        release_delay: float,
    ) -> None:
        self._dispatcher = dispatcher
        self._schedule_once = schedule_once
        self._release_delay = release_delay
        self._held: dict[str, TimerHandle] = {}

    def keystroke(self, key: str, *, in_text_field: bool = False) -> bool:
        if self._dispatcher.button_for(key) is None:
            return False
        if in_text_field:
            return self._dispatcher.key_down(KeyEvent(key, in_text_field=True))
        timer = self._held.pop(key, None)
        if timer is not None:
            timer.stop()
        handled = self._dispatcher.key_down(KeyEvent(key, repeat=timer is not None))
        self._held[key] = self._schedule_once(self._release_delay, lambda: self._release(key))
        return handled or timer is not None

    def release_all(self) -> None:
        for key, timer in list(self._held.items()):
            timer.stop()
            self._release(key)

    def held_keys(self) -> list[str]:
        return list(self._held)

    def _release(self, key: str) -> None:
        if self._held.pop(key, None) is None:
            return
        self._dispatcher.key_up(KeyEvent(key))
