from __future__ import annotations

from rich.text import Text
from textual import events
from textual.message import Message
from textual.widgets import Label, ListItem, Static

from ..controls import ArcadeColor
from ..metadata import Video

BUTTON_KEYS = {
    ArcadeColor.RED: "W",
    ArcadeColor.GREEN: "A",
    ArcadeColor.YELLOW: "D",
}


class ArcadeButton(Static):
    DEFAULT_CSS = """
    ArcadeButton {
        width: 16;
        height: 5;
        content-align: center middle;
        text-style: bold;
        border: round $panel-lighten-2;
        margin: 0 2;
    }

    ArcadeButton.red {
        background: #c0392b;
    }

    ArcadeButton.green {
        background: #27ae60;
    }

    ArcadeButton.yellow {
        background: #d4ac0d;
        color: #1a1b26;
    }

    ArcadeButton.pressed {
        border: heavy $text;
        text-style: bold reverse;
    }
    """

    class Down(Message):
        def __init__(self, color: ArcadeColor) -> None:
            super().__init__()
            self.color = color

    class Up(Message):
        def __init__(self, color: ArcadeColor) -> None:
            super().__init__()
            self.color = color

    def __init__(self, color: ArcadeColor) -> None:
        self.color = color
        super().__init__(
            _button_label(color),
            markup=False,
            id=f"button_{color.value}",
            classes=f"arcade {color.value}",
        )

    def set_pressed(self, pressed: bool) -> None:
        self.set_class(pressed, "pressed")

    def on_mouse_down(self, event: events.MouseDown) -> None:
        event.stop()
        self.post_message(self.Down(self.color))

    def on_mouse_up(self, event: events.MouseUp) -> None:
        event.stop()
        self.post_message(self.Up(self.color))

    def on_leave(self, event: events.Leave) -> None:
        self.post_message(self.Up(self.color))


class VideoListItem(ListItem):
    def __init__(self, video: Video, favorite: bool = False, current: bool = False) -> None:
        self.video = video
        self._favorite = favorite
        self._current = current
        self._label = Label(format_video_label(video, favorite, current))
        super().__init__(self._label, classes="video-item")

    def set_favorite(self, favorite: bool) -> None:
        if self._favorite == favorite:
            return
        self._favorite = favorite
        self._label.update(format_video_label(self.video, favorite, self._current))


def format_video_label(video: Video, favorite: bool, current: bool) -> Text:
    text = Text()
    text.append("★ " if favorite else "☆ ", style="bold yellow" if favorite else "dim")
    text.append(video.title, style="bold" if current else "")
    text.append(f"  {video.video_id}", style="dim")
    return text


def _button_label(color: ArcadeColor) -> str:
    return f"{color.value.upper()}\n[{BUTTON_KEYS[color]}]"
