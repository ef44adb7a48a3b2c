from __future__ import annotations

import json
from pathlib import Path

from programmer_life.app.services.settings_store import SettingsStore


def test_settings_store_read_write(tmp_path: Path) -> None:
    path = tmp_path / "config" / "settings.json"
    store = SettingsStore(path)
    loaded = store.load()
    assert path.exists()
    assert loaded.gameplay.total_months == 36
    assert loaded.gameplay.seeded_mode is False

    loaded.gameplay.seeded_mode = True
    loaded.gameplay.base_seed = 99
    loaded.video.resolution = [1600, 900]
    loaded.ui.theme = "paper"
    store.save(loaded)

    reloaded = store.load()
    assert reloaded.gameplay.seeded_mode is True
    assert reloaded.gameplay.base_seed == 99
    assert reloaded.video.resolution == [1600, 900]
    assert reloaded.ui.theme == "paper"


def test_invalid_section_resets_only_that_section(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text(
        json.dumps({"gameplay": {"total_months": 5}, "ui": {"theme": "solarized"}, "legacy": {"x": 1}}),
        encoding="utf-8",
    )
    loaded = SettingsStore(path).load()
    assert loaded.gameplay.total_months == 36
    assert loaded.ui.theme == "solarized"
    assert "legacy" not in json.loads(path.read_text(encoding="utf-8"))


def test_corrupt_settings_file_falls_back_to_defaults(tmp_path: Path) -> None:
    path = tmp_path / "settings.json"
    path.write_text("{not json", encoding="utf-8")
    loaded = SettingsStore(path).load()
    assert loaded.video.fps == 60
    assert json.loads(path.read_text(encoding="utf-8"))["video"]["fps"] == 60
