from __future__ import annotations

from textual import events
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, ListView, Static

from ..library import AdditionFailed, VideoLibrary
from ..resolve import InvalidReference
from .widgets import VideoListItem


class HelpScreen(ModalScreen[None]):
    BINDINGS = [("escape", "close", "Close"), ("?", "close", "Close")]

    CSS = """
    HelpScreen {
        align: center middle;
        background: $surface 80%;
    }

    #help_dialog {
        width: 70%;
        max-width: 80;
        height: 80%;
        max-height: 90%;
        padding: 1 2;
        border: heavy $accent;
        background: $panel;
    }

    #help_scroll {
        height: 1fr;
    }

    #help_text {
        width: 100%;
    }
    """

    def __init__(self, help_text: str) -> None:
        super().__init__()
        self._help_text = help_text

    def compose(self) -> ComposeResult:
        with Vertical(id="help_dialog"):
            with VerticalScroll(id="help_scroll"):
                yield Static(self._help_text, id="help_text", markup=False)
            yield Button("Close", id="help_close")

    def on_mount(self) -> None:
        self.query_one("#help_scroll", VerticalScroll).focus()

    def action_close(self) -> None:
        self.dismiss(None)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "help_close":
            self.dismiss(None)


class ConfirmScreen(ModalScreen[bool]):
    BINDINGS = [("escape", "cancel", "Cancel")]

    CSS = """
    ConfirmScreen {
        align: center middle;
        background: $surface 80%;
    }

    #confirm_dialog {
        width: 60%;
        max-width: 70;
        height: auto;
        padding: 1 2;
        border: heavy $error;
        background: $panel;
    }

    #confirm_title {
        text-style: bold;
    }

    #confirm_message {
        color: $text-muted;
        margin: 1 0;
    }
    """

    def __init__(self, title: str, message: str, confirm_label: str = "Reset") -> None:
        super().__init__()
        self._title = title
        self._message = message
        self._confirm_label = confirm_label

    def compose(self) -> ComposeResult:
        with Vertical(id="confirm_dialog"):
            yield Label(self._title, id="confirm_title")
            yield Label(self._message, id="confirm_message")
            with Horizontal():
                yield Button("Cancel", id="confirm_cancel")
                yield Button(self._confirm_label, id="confirm_ok", variant="error")

    def on_mount(self) -> None:
        self.query_one("#confirm_cancel", Button).focus()

    def action_cancel(self) -> None:
        self.dismiss(False)

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "confirm_cancel":
            self.dismiss(False)
        elif event.button.id == "confirm_ok":
            self.dismiss(True)


class VideoPickerScreen(ModalScreen[str | None]):
    BINDINGS = [("escape", "close", "Close")]

    CSS = """
    VideoPickerScreen {
        align: center middle;
        background: $surface 80%;
    }

    #picker_dialog {
        width: 90%;
        max-width: 120;
        height: 90%;
        padding: 1 2;
        border: heavy $accent;
        background: $panel;
    }

    #picker_header {
        height: 3;
    }

    #picker_title {
        width: 1fr;
        text-style: bold;
        padding: 1 0;
    }

    #add_row {
        height: 3;
    }

    #url_input {
        width: 1fr;
    }

    #add_error {
        color: $error;
        height: 1;
    }

    #video_list {
        height: 1fr;
    }

    #picker_empty {
        color: $text-muted;
        height: 1;
    }
    """

    def __init__(self, library: VideoLibrary) -> None:
        super().__init__()
        self._library = library
        self._adding = False

    def compose(self) -> ComposeResult:
        with Vertical(id="picker_dialog"):
            with Horizontal(id="picker_header"):
                yield Label("Choose a video", id="picker_title")
                yield Button("Reset favorites", id="reset_favorites")
                yield Button("Reset added", id="reset_added")
                yield Button("Close", id="picker_close")
            yield Input(placeholder="Search by title...", id="search_input")
            with Horizontal(id="add_row"):
                yield Input(placeholder="Add by YouTube URL...", id="url_input")
                yield Button("Add", id="add_submit", variant="primary")
            yield Label("", id="add_error")
            yield Label("", id="picker_empty")
            yield ListView(id="video_list")

    def on_mount(self) -> None:
        self.refresh_videos()
        self._sync_add_button()
        self.query_one("#video_list", ListView).focus()

    def action_close(self) -> None:
        self.dismiss(None)

    def refresh_videos(self) -> None:
        term = self.query_one("#search_input", Input).value
        list_view = self.query_one("#video_list", ListView)
        empty_label = self.query_one("#picker_empty", Label)
        videos = self._library.search(term)
        current = self._library.current_video_id
        list_view.clear()
        for video in videos:
            list_view.append(
                VideoListItem(
                    video,
                    favorite=self._library.is_favorite(video.video_id),
                    current=video.video_id == current,
                )
            )
        if self._library.is_loading and not videos:
            empty_label.update("Loading videos...")
        elif not videos:
            empty_label.update("No matching videos.")
        else:
            empty_label.update("")
        self._sync_reset_buttons()

    def on_input_changed(self, event: Input.Changed) -> None:
        if event.input.id == "search_input":
            self.refresh_videos()
        elif event.input.id == "url_input":
            self.query_one("#add_error", Label).update("")
            self._sync_add_button()

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input.id == "url_input":
            self._submit_add()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button_id = event.button.id
        if button_id == "picker_close":
            self.dismiss(None)
        elif button_id == "add_submit":
            self._submit_add()
        elif button_id == "reset_favorites":
            self.app.push_screen(
                ConfirmScreen(
                    "Reset favorites",
                    "Remove every favorite? This cannot be undone.",
                ),
                self._handle_reset_favorites,
            )
        elif button_id == "reset_added":
            self.app.push_screen(
                ConfirmScreen(
                    "Reset added videos",
                    "Remove every video you added? This cannot be undone.",
                ),
                self._handle_reset_added,
            )

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if isinstance(event.item, VideoListItem):
            self.dismiss(event.item.video.video_id)

    def on_key(self, event: events.Key) -> None:
        list_view = self.query_one("#video_list", ListView)
        if not list_view.has_focus:
            return
        if event.key in {"f", "space"}:
            self._toggle_highlighted(list_view)
            event.stop()

    def _toggle_highlighted(self, list_view: ListView) -> None:
        item = list_view.highlighted_child
        if not isinstance(item, VideoListItem):
            return
        favorite = self._library.toggle_favorite(item.video.video_id)
        item.set_favorite(favorite)
        self._sync_reset_buttons()

    def _submit_add(self) -> None:
        if self._adding:
            return
        url_input = self.query_one("#url_input", Input)
        error_label = self.query_one("#add_error", Label)
        value = url_input.value.strip()
        if not value:
            error_label.update("Please enter a URL.")
            return
        error_label.update("")
        self._set_adding(True)
        self.run_worker(self._add_video(value), exclusive=True, group="add_video")

    async def _add_video(self, url: str) -> None:
        try:
            video_id = await self._library.add_by_reference(url)
        except (InvalidReference, AdditionFailed) as exc:
            self.query_one("#add_error", Label).update(str(exc))
            self._set_adding(False)
            return
        self._set_adding(False)
        self.query_one("#url_input", Input).value = ""
        self.dismiss(video_id)

    def _set_adding(self, adding: bool) -> None:
        self._adding = adding
        button = self.query_one("#add_submit", Button)
        button.label = "Adding..." if adding else "Add"
        self.query_one("#url_input", Input).disabled = adding
        self._sync_add_button()

    def _sync_add_button(self) -> None:
        value = self.query_one("#url_input", Input).value
        self.query_one("#add_submit", Button).disabled = self._adding or not value.strip()

    def _sync_reset_buttons(self) -> None:
        self.query_one("#reset_favorites", Button).disabled = (
            not self._library.is_favorites_resettable()
        )
        self.query_one("#reset_added", Button).disabled = (
            not self._library.is_user_videos_resettable()
        )

    def _handle_reset_favorites(self, confirmed: bool | None) -> None:
        if confirmed:
            self._library.reset_favorites()
            self.refresh_videos()

    def _handle_reset_added(self, confirmed: bool | None) -> None:
        if confirmed:
            self._library.reset_user_videos()
            self.refresh_videos()
