from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Protocol

DEFAULT_TICK_INTERVAL = 0.04


class ArcadeColor(Enum):
    RED = "red"
    GREEN = "green"
    YELLOW = "yellow"


class InputSource(Enum):
    POINTER = "pointer"
    TOUCH = "touch"
    KEYBOARD = "keyboard"


class ButtonEventKind(Enum):
    PRESS = "press"
    RELEASE = "release"


@dataclass(frozen=True)
class ButtonEvent:
    kind: ButtonEventKind
    button: ArcadeColor
    source: InputSource


class TimerHandle(Protocol):
    def stop(self) -> None: ...


ScheduleRepeating = Callable[[float, Callable[[], None]], TimerHandle]
ChangeListener = Callable[[ArcadeColor, bool], None]


class ControlPanel:
    def __init__(
        self,
        tick: Callable[[], None],
        schedule_repeating: ScheduleRepeating,
        *,
        interval: float = DEFAULT_TICK_INTERVAL,
        on_change: ChangeListener | None = None,
    ) -> None:
        if interval <= 0:
            raise ValueError("Tick interval must be positive")
        self._tick = tick
        self._schedule_repeating = schedule_repeating
        self._interval = interval
        self._on_change = on_change
        self._pressed: dict[ArcadeColor, bool] = {color: False for color in ArcadeColor}
        self._timers: dict[ArcadeColor, TimerHandle | None] = {color: None for color in ArcadeColor}

    def handle(self, event: ButtonEvent) -> bool:
        if event.kind is ButtonEventKind.PRESS:
            return self.press(event.button)
        return self.release(event.button)

    def press(self, button: ArcadeColor) -> bool:
        if self._pressed[button]:
            return False
        self._pressed[button] = True
        self._stop_timer(button)
        self._tick()
        self._timers[button] = self._schedule_repeating(self._interval, self._tick)
        self._notify(button, True)
        return True

    def release(self, button: ArcadeColor) -> bool:
        if not self._pressed[button]:
            return False
        self._pressed[button] = False
        self._stop_timer(button)
        self._notify(button, False)
        return True

    def release_all(self) -> None:
        for button in ArcadeColor:
            self.release(button)

    def is_pressed(self, button: ArcadeColor) -> bool:
        return self._pressed[button]

    def pressed_buttons(self) -> list[ArcadeColor]:
        return [button for button in ArcadeColor if self._pressed[button]]

    def active_timer_count(self) -> int:
        return sum(1 for timer in self._timers.values() if timer is not None)

    def _stop_timer(self, button: ArcadeColor) -> None:
        timer = self._timers[button]
        if timer is None:
            return
        self._timers[button] = None
        timer.stop()

    def _notify(self, button: ArcadeColor, pressed: bool) -> None:
        if self._on_change is not None:
            self._on_change(button, pressed)
