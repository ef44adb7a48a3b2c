from __future__ import annotations

from pathlib import Path

from programmer_life.app.services import career
from programmer_life.core.character import create_player
from programmer_life.core.loader import builtin_content
from programmer_life.core.settings import GameplaySettings


def test_env_seed_wins(monkeypatch) -> None:
    monkeypatch.setenv(career.SEED_ENV_VAR, "  4242 ")
    assert career.compute_run_seed(GameplaySettings(seeded_mode=True, base_seed=1), 3) == 4242

    monkeypatch.setenv(career.SEED_ENV_VAR, "daily-run")
    assert career.compute_run_seed(GameplaySettings(), 0) == "daily-run"


def test_seeded_mode_offsets_by_run_counter(monkeypatch) -> None:
    monkeypatch.delenv(career.SEED_ENV_VAR, raising=False)
    gameplay = GameplaySettings(seeded_mode=True, base_seed=1337)
    assert career.compute_run_seed(gameplay, 0) == 1337
    assert career.compute_run_seed(gameplay, 4) == 1341


def test_unseeded_mode_uses_clock(monkeypatch) -> None:
    monkeypatch.delenv(career.SEED_ENV_VAR, raising=False)
    monkeypatch.setattr(career.time, "time_ns", lambda: (1 << 40) + 77)
    assert career.compute_run_seed(GameplaySettings(), 0) == 77


def test_start_session_uses_settings(monkeypatch) -> None:
    monkeypatch.setenv(career.SEED_ENV_VAR, "7")
    content = builtin_content()
    player = create_player("Ada", content.traits[0])
    session = career.start_session(player, content, GameplaySettings(total_months=12), run_counter=0)

    assert session.total_months == 12
    assert session.rng.seed == 7
    assert session.current_event is not None


def test_load_game_content_falls_back_for_missing_dir(tmp_path: Path) -> None:
    content = career.load_game_content(GameplaySettings(content_dir=str(tmp_path / "missing")))
    assert content.source == "builtin"
    assert career.load_game_content(GameplaySettings()).source == "disk"
