from __future__ import annotations

import argparse
import logging
import webbrowser
from functools import partial
from pathlib import Path
from typing import Iterable

import httpx
from textual import events
from textual.app import App, ComposeResult
from textual.containers import Horizontal, Vertical
from textual.theme import Theme
from textual.widgets import Input, Label, ListView, Static
from textual_image.widget import Image as PreviewImage

from .audio import TickEngine, shared_tick_engine
from .config import AppConfig, load_config
from .controls import ArcadeColor, ButtonEvent, ButtonEventKind, ControlPanel, InputSource
from .keys import KeyDispatcher, KeyHoldRelay
from .library import VideoLibrary
from .metadata import MetadataFetcher, Video
from .paths import config_path, log_path, metadata_cache_dir, store_path
from .resolve import embed_url
from .seeds import SEED_VIDEO_IDS
from .store import JsonStore, KeyValueStore
from .thumbs import download_thumbnail
from .ui.screens import HelpScreen, VideoPickerScreen
from .ui.widgets import ArcadeButton, VideoListItem

THEME_KEY = "theme"
TIP_TEXT = "Tip: hold W / A / D for the buttons, press ? for help"
HELP_TEXT = """Keyboard shortcuts
q  quit
s  choose a video
f  favorite / unfavorite the current video
l  feeling lucky (random video)
m  mute / unmute the player
p  open the player in the browser
t  toggle light / dark theme
?  help

Arcade buttons
W  red
A  green
D  yellow
Hold a key (or the mouse button) to keep ticking.

Video picker
type in the search box to filter by title
paste a YouTube URL and press enter to add it
f/space  favorite the highlighted video
enter  play the highlighted video
esc  close
"""

TOKYO_NIGHT_THEME = Theme(
    name="tokyo-night",
    primary="#7aa2f7",
    secondary="#7dcfff",
    accent="#bb9af7",
    warning="#e0af68",
    error="#f7768e",
    success="#9ece6a",
    foreground="#c0caf5",
    background="#1a1b26",
    surface="#1f2335",
    panel="#24283b",
    boost="#2f334d",
    dark=True,
)

TOKYO_DAY_THEME = Theme(
    name="tokyo-day",
    primary="#2e7de9",
    secondary="#007197",
    accent="#9854f1",
    warning="#8c6c3e",
    error="#f52a65",
    success="#587539",
    foreground="#3760bf",
    background="#e1e2e7",
    surface="#d0d5e3",
    panel="#c4c8da",
    boost="#b7c1e3",
    dark=False,
)

THEMES = {"dark": TOKYO_NIGHT_THEME, "light": TOKYO_DAY_THEME}

logger = logging.getLogger(__name__)


class ArcadeTubeApp(App):
    BINDINGS = [
        ("q", "quit", "Quit"),
        ("s", "pick_video", "Videos"),
        ("f", "toggle_favorite", "Favorite"),
        ("l", "feeling_lucky", "Lucky"),
        ("m", "toggle_mute", "Mute"),
        ("p", "play", "Play"),
        ("t", "toggle_theme", "Theme"),
        ("?", "help", "Help"),
    ]

    CSS = """
    Screen {
        background: $background;
        color: $text;
    }

    #root {
        height: 100%;
    }

    #title_bar {
        width: 100%;
        text-style: bold;
        color: $accent;
        padding: 0 1;
    }

    #main {
        height: 1fr;
        padding: 1 1;
    }

    #now_playing {
        width: 2fr;
        padding: 0 1;
        border: round $primary;
    }

    #video_title {
        text-style: bold;
    }

    #video_embed {
        color: $text-muted;
    }

    #thumb_image {
        height: 1fr;
        width: 100%;
    }

    #favorites_panel {
        width: 1fr;
        padding: 0 1;
        border: round $secondary;
    }

    #favorites_empty {
        color: $text-muted;
    }

    #controls {
        height: auto;
        align: center middle;
    }

    #controls_top, #controls_bottom {
        height: auto;
        align: center middle;
    }

    #status_bar {
        height: 1;
        padding: 0 1;
        color: $text-muted;
        background: $panel;
    }

    .hidden {
        display: none;
    }
    """

    def __init__(
        self,
        config: AppConfig | None = None,
        *,
        store: KeyValueStore | None = None,
        fetcher: MetadataFetcher | None = None,
        tick_engine: TickEngine | None = None,
        seed_ids: Iterable[str] = SEED_VIDEO_IDS,
        startup_message: str | None = None,
    ) -> None:
        super().__init__()
        self.config = config or AppConfig()
        self.register_theme(TOKYO_NIGHT_THEME)
        self.register_theme(TOKYO_DAY_THEME)
        self._store = store or JsonStore()
        self._fetcher = fetcher or MetadataFetcher(
            self.config.metadata_endpoint,
            timeout=self.config.request_timeout,
            max_concurrency=self.config.max_concurrency,
        )
        self._tick_engine = tick_engine or shared_tick_engine()
        self._startup_message = startup_message
        self.library = VideoLibrary(seed_ids, self._fetcher.fetch_many, self._store)
        self.control_panel = ControlPanel(
            self._tick_engine.tick,
            self.set_interval,
            interval=self.config.tick_interval,
            on_change=self._on_button_change,
        )
        self.key_relay = KeyHoldRelay(
            KeyDispatcher(self.control_panel),
            self.set_timer,
            release_delay=self.config.key_release_delay,
        )
        self.muted = self.config.start_muted
        self._theme_name = _coerce_theme(self._store.get(THEME_KEY, "dark"))
        self.theme = THEMES[self._theme_name].name
        self._buttons: dict[ArcadeColor, ArcadeButton] = {}
        self._thumb_cache: dict[str, Path] = {}
        self._thumb_errors: dict[str, str] = {}
        self._video_title: Static | None = None
        self._video_embed: Static | None = None
        self._thumb_image: PreviewImage | None = None
        self._thumb_fallback: Static | None = None
        self._favorites_list: ListView | None = None
        self._favorites_empty: Label | None = None
        self._status_bar: Static | None = None

    def compose(self) -> ComposeResult:
        with Vertical(id="root"):
            yield Label("ArcadeTube", id="title_bar")
            with Horizontal(id="main"):
                with Vertical(id="now_playing"):
                    yield Static("", id="video_title", markup=False)
                    yield Static("", id="video_embed", markup=False)
                    yield PreviewImage(None, id="thumb_image")
                    yield Static(
                        "Thumbnail: loading...",
                        id="thumb_fallback",
                        classes="hidden",
                        markup=False,
                    )
                with Vertical(id="favorites_panel"):
                    yield Label("Favorites", id="favorites_label")
                    yield Label("", id="favorites_empty")
                    yield ListView(id="favorites_list")
            with Vertical(id="controls"):
                with Horizontal(id="controls_top"):
                    yield ArcadeButton(ArcadeColor.RED)
                with Horizontal(id="controls_bottom"):
                    yield ArcadeButton(ArcadeColor.GREEN)
                    yield ArcadeButton(ArcadeColor.YELLOW)
            yield Static(TIP_TEXT, id="status_bar", markup=False)

    def on_mount(self) -> None:
        self._video_title = self.query_one("#video_title", Static)
        self._video_embed = self.query_one("#video_embed", Static)
        self._thumb_image = self.query_one("#thumb_image", PreviewImage)
        self._thumb_fallback = self.query_one("#thumb_fallback", Static)
        self._favorites_list = self.query_one("#favorites_list", ListView)
        self._favorites_empty = self.query_one("#favorites_empty", Label)
        self._status_bar = self.query_one("#status_bar", Static)
        for button in self.query(ArcadeButton):
            self._buttons[button.color] = button
        if self._startup_message:
            self._set_status(self._startup_message)
        self._refresh_view()
        self.run_worker(self._load_seed(), exclusive=True, group="seed")

    def on_unmount(self) -> None:
        self.key_relay.release_all()
        self.control_panel.release_all()

    def on_app_blur(self, event: events.AppBlur) -> None:
        self.key_relay.release_all()
        self.control_panel.release_all()

    def on_key(self, event: events.Key) -> None:
        key = event.character or event.key
        in_text_field = isinstance(self.focused, Input)
        if self.key_relay.keystroke(key, in_text_field=in_text_field):
            event.stop()
            event.prevent_default()

    def on_arcade_button_down(self, message: ArcadeButton.Down) -> None:
        self.control_panel.handle(
            ButtonEvent(ButtonEventKind.PRESS, message.color, InputSource.POINTER)
        )

    def on_arcade_button_up(self, message: ArcadeButton.Up) -> None:
        self.control_panel.handle(
            ButtonEvent(ButtonEventKind.RELEASE, message.color, InputSource.POINTER)
        )

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if event.list_view.id != "favorites_list":
            return
        if isinstance(event.item, VideoListItem):
            self._select(event.item.video.video_id)

    def action_help(self) -> None:
        self.push_screen(HelpScreen(HELP_TEXT))

    def action_pick_video(self) -> None:
        self.push_screen(VideoPickerScreen(self.library), self._handle_picker)

    def action_toggle_favorite(self) -> None:
        video_id = self.library.current_video_id
        if not video_id:
            self._set_status("No video selected.")
            return
        favorite = self.library.toggle_favorite(video_id)
        self._set_status("Added to favorites." if favorite else "Removed from favorites.")
        self._refresh_favorites()

    def action_feeling_lucky(self) -> None:
        if self.library.pick_random_other() is None:
            self._set_status("Need at least two videos to pick at random.")
            return
        self._refresh_view()

    def action_toggle_mute(self) -> None:
        self.muted = not self.muted
        self._set_status("Muted." if self.muted else "Unmuted.")
        self._refresh_now_playing()

    def action_play(self) -> None:
        video_id = self.library.current_video_id
        if not video_id:
            self._set_status("No video selected.")
            return
        url = embed_url(video_id, muted=self.muted)
        if not webbrowser.open(url):
            self._set_status(f"Open in a browser: {url}")

    def action_toggle_theme(self) -> None:
        self._theme_name = "light" if self._theme_name == "dark" else "dark"
        self.theme = THEMES[self._theme_name].name
        self._store.set(THEME_KEY, self._theme_name)

    async def _load_seed(self) -> None:
        self._set_status("Loading videos...")
        try:
            await self.library.load_seed()
        except Exception as exc:
            logger.error("Loading seed videos failed: %s", exc)
            self._set_status("Failed to load videos.")
            return
        self._set_status(self._startup_message or TIP_TEXT)
        self._refresh_view()
        if isinstance(self.screen, VideoPickerScreen):
            self.screen.refresh_videos()

    def _handle_picker(self, video_id: str | None) -> None:
        if video_id:
            self.library.select(video_id)
        self._refresh_view()

    def _select(self, video_id: str) -> None:
        if self.library.select(video_id):
            self._refresh_view()

    def _on_button_change(self, button: ArcadeColor, pressed: bool) -> None:
        widget = self._buttons.get(button)
        if widget is not None:
            widget.set_pressed(pressed)

    def _refresh_view(self) -> None:
        self._refresh_now_playing()
        self._refresh_favorites()

    def _refresh_now_playing(self) -> None:
        if self._video_title is None or self._video_embed is None:
            return
        video_id = self.library.current_video_id
        video = self.library.current_video
        if not video_id:
            self._video_title.update("No videos available.")
            self._video_embed.update("")
            self._set_thumbnail_message("No thumbnail.")
            return
        if video is None:
            title = "Loading..." if self.library.is_loading else f"Video (ID: {video_id})"
            self._video_title.update(title)
        else:
            self._video_title.update(video.title)
        mute_label = "muted" if self.muted else "sound on"
        self._video_embed.update(f"{embed_url(video_id, muted=self.muted)}  ({mute_label})")
        if video is not None:
            self._show_thumbnail(video)
        else:
            self._set_thumbnail_message("Thumbnail: loading...")

    def _refresh_favorites(self) -> None:
        if self._favorites_list is None or self._favorites_empty is None:
            return
        favorites = self.library.favorites_view()
        current = self.library.current_video_id
        self._favorites_list.clear()
        for video in favorites:
            self._favorites_list.append(
                VideoListItem(video, favorite=True, current=video.video_id == current)
            )
        if favorites:
            self._favorites_empty.update("")
        elif self.library.is_loading:
            self._favorites_empty.update("Loading...")
        else:
            self._favorites_empty.update("No favorites yet. Press f to add one.")

    def _show_thumbnail(self, video: Video) -> None:
        cached = self._thumb_cache.get(video.video_id)
        if cached is not None:
            self._apply_thumbnail(video.video_id, cached)
            return
        error = self._thumb_errors.get(video.video_id)
        if error is not None:
            self._set_thumbnail_message(f"Thumbnail: {error}")
            return
        self._set_thumbnail_message("Thumbnail: loading...")
        self.run_worker(
            partial(self._fetch_thumbnail, video),
            thread=True,
            exclusive=True,
            group="thumbnail",
        )

    def _fetch_thumbnail(self, video: Video) -> None:
        try:
            path = download_thumbnail(video)
        except (httpx.HTTPError, OSError, ValueError) as exc:
            self.call_from_thread(self._apply_thumbnail_error, video.video_id, str(exc))
            return
        self.call_from_thread(self._apply_thumbnail, video.video_id, path)

    def _apply_thumbnail(self, video_id: str, path: Path) -> None:
        self._thumb_cache[video_id] = path
        if video_id != self.library.current_video_id:
            return
        if self._thumb_image is None or self._thumb_fallback is None:
            return
        _update_image_widget(self._thumb_image, path)
        self._thumb_image.remove_class("hidden")
        self._thumb_fallback.add_class("hidden")

    def _apply_thumbnail_error(self, video_id: str, message: str) -> None:
        logger.info("Thumbnail for %s unavailable: %s", video_id, message)
        self._thumb_errors[video_id] = message
        if video_id == self.library.current_video_id:
            self._set_thumbnail_message(f"Thumbnail: {message}")

    def _set_thumbnail_message(self, message: str) -> None:
        if self._thumb_image is None or self._thumb_fallback is None:
            return
        self._thumb_image.add_class("hidden")
        self._thumb_fallback.update(message)
        self._thumb_fallback.remove_class("hidden")

    def _set_status(self, message: str) -> None:
        if self._status_bar is not None:
            self._status_bar.update(message)


def _coerce_theme(value: object) -> str:
    if isinstance(value, str) and value in THEMES:
        return value
    return "dark"


def _update_image_widget(widget: PreviewImage, path: Path) -> None:
    setter = getattr(widget, "set_image", None)
    if callable(setter):
        setter(path)
        return
    if hasattr(widget, "image"):
        setattr(widget, "image", path)
        return
    widget.update(str(path))


def _cli_help_text() -> str:
    return (
        "usage: arcadetube [--config PATH] [--store PATH] [--no-cache] [--unmuted]\n"
        "\n"
        "Browse a video library, keep favorites, and play along with three\n"
        "arcade buttons (W/A/D or the mouse).\n"
        "\n"
        "options:\n"
        "  -h, -help, --help  show this help and exit\n"
        "  --config PATH      config file to load\n"
        "  --store PATH       file holding favorites and theme\n"
        "  --no-cache         skip the on-disk metadata cache\n"
        "  --unmuted          start with the player unmuted\n"
        "\n"
        f"Config file: {config_path()}\n"
        f"Log file: {log_path()}\n"
        "\n"
        f"{HELP_TEXT}"
    )


def main() -> None:
    parser = argparse.ArgumentParser(prog="arcadetube", add_help=False)
    parser.add_argument("-h", "-help", "--help", action="store_true", dest="show_help")
    parser.add_argument("--config", help="Path to config file")
    parser.add_argument("--store", help="Path to favorites/theme store")
    parser.add_argument("--no-cache", action="store_true", help="Disable metadata cache")
    parser.add_argument("--unmuted", action="store_true", help="Start unmuted")
    args = parser.parse_args()
    if args.show_help:
        print(_cli_help_text())
        return

    path = Path(args.config).expanduser() if args.config else None
    config, config_error = load_config(path)
    if args.unmuted:
        config.start_muted = False
    logging.basicConfig(
        filename=str(log_path()),
        level=config.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    if config_error:
        logger.warning(config_error)

    store = JsonStore(Path(args.store).expanduser() if args.store else store_path())
    fetcher = MetadataFetcher(
        config.metadata_endpoint,
        timeout=config.request_timeout,
        max_concurrency=config.max_concurrency,
        cache_dir=None if args.no_cache else metadata_cache_dir(),
    )
    app = ArcadeTubeApp(
        config,
        store=store,
        fetcher=fetcher,
        startup_message=config_error,
    )
    app.run()
