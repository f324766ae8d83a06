import json
from pathlib import Path

from arcadetube.store import JsonStore


def test_get_missing_file_returns_default(tmp_path: Path) -> None:
    store = JsonStore(tmp_path / "store.json")
    assert store.get("favoriteVideoIds", []) == []


def test_set_then_get_and_reload(tmp_path: Path) -> None:
    path = tmp_path / "nested" / "store.json"
    store = JsonStore(path)
    store.set("favoriteVideoIds", ["abcdefghijk"])
    store.set("theme", "light")
    assert store.get("theme", "dark") == "light"

    reloaded = JsonStore(path)
    assert reloaded.get("favoriteVideoIds", []) == ["abcdefghijk"]
    assert json.loads(path.read_text(encoding="utf-8"))["theme"] == "light"


def test_invalid_json_falls_back_to_default(tmp_path: Path, caplog) -> None:
    path = tmp_path / "store.json"
    path.write_text("{not-json", encoding="utf-8")
    store = JsonStore(path)
    assert store.get("favoriteVideoIds", []) == []
    assert "Error reading store" in caplog.text


def test_non_object_file_falls_back_to_default(tmp_path: Path) -> None:
    path = tmp_path / "store.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert JsonStore(path).get("theme", "dark") == "dark"


def test_failed_write_keeps_value_in_memory(tmp_path: Path, caplog) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("file, not a directory", encoding="utf-8")
    store = JsonStore(blocker / "store.json")
    store.set("favoriteVideoIds", ["abcdefghijk"])
    assert store.get("favoriteVideoIds", []) == ["abcdefghijk"]
    assert "Error setting store key" in caplog.text
