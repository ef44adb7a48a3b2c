from __future__ import annotations

from rich.console import Console

from programmer_life.app import screens
from programmer_life.app.widgets import (
    career_widget,
    ending_widget,
    event_widget,
    highlights_widget,
    log_widget,
    player_widget,
    trait_table,
    warnings_widget,
)
from programmer_life.core.character import create_player
from programmer_life.core.engine import GameEngineService
from programmer_life.core.loader import builtin_content
from programmer_life.core.rng import DeterministicRNG
from programmer_life.core.session import GameSession


def _console() -> Console:
    return Console(record=True, width=110, color_system=None)


def _session(total_months: int = 36) -> GameSession:
    content = builtin_content()
    rng = DeterministicRNG.from_seed(21)
    return GameSession(create_player("Ada", content.traits[0]), content, GameEngineService(rng), rng, total_months=total_months)


def _answers(monkeypatch, prompts: list[str], confirms: list[bool] | None = None) -> None:
    prompt_iter = iter(prompts)
    confirm_iter = iter(confirms or [])
    monkeypatch.setattr(screens.Prompt, "ask", lambda *args, **kwargs: next(prompt_iter))
    monkeypatch.setattr(screens.Confirm, "ask", lambda *args, **kwargs: next(confirm_iter))


def test_hud_widgets_render_session_state() -> None:
    console = _console()
    session = _session()
    console.print(player_widget(session.player))
    console.print(career_widget(session))
    console.print(event_widget(session.current_event))
    text = console.export_text()

    assert "Ada · age 22" in text
    assert "Algorithms" in text
    assert "Year 1 · Month 1" in text
    assert "Promotion 0/100" in text
    assert f"[1] {session.current_event.options[0].text}" in text


def test_optional_panels_are_skipped_when_empty() -> None:
    assert warnings_widget([]) is None
    assert highlights_widget([]) is None

    console = _console()
    console.print(warnings_widget(["Stress is running high; be careful with further risks."]))
    console.print(log_widget([]))
    text = console.export_text()
    assert "! Stress is running high" in text
    assert "(no log entries yet)" in text


def test_trait_table_lists_every_trait() -> None:
    console = _console()
    console.print(trait_table(builtin_content().traits))
    text = console.export_text()
    assert "Work-Life Balance" in text
    assert "Algorithms +15 / Programming +5" in text


def test_character_creation_screen_builds_player(monkeypatch) -> None:
    _answers(monkeypatch, ["   ", "Grace", "3"])
    console = _console()
    player = screens.CharacterCreationScreen(console, builtin_content()).run()

    assert player is not None
    assert player.name == "Grace"
    assert player.communication_skill == 50
    assert "A name is required." in console.export_text()


def test_character_creation_gives_up_after_blank_names(monkeypatch) -> None:
    _answers(monkeypatch, [""] * screens.MAX_INPUT_RETRIES)
    assert screens.CharacterCreationScreen(_console(), builtin_content()).run() is None


def test_game_screen_plays_to_completion(monkeypatch) -> None:
    _answers(monkeypatch, ["h", "1", "l", "9", "1"])
    console = _console()
    session = _session(total_months=2)

    assert screens.GameScreen(console, session).run() == "completed"
    assert session.is_completed
    text = console.export_text()
    assert "Controls:" in text
    assert "Unknown choice." in text
    assert "[CHOICE]" in text


def test_game_screen_returns_at_once_for_finished_career(monkeypatch) -> None:
    _answers(monkeypatch, [])
    session = _session(total_months=1)
    session.choose(0)
    assert screens.GameScreen(_console(), session).run() == "completed"


def test_game_screen_quit_needs_confirmation(monkeypatch) -> None:
    _answers(monkeypatch, ["q", "q"], confirms=[False, True])
    session = _session()
    assert screens.GameScreen(_console(), session).run() == "quit"
    assert session.events_completed == 0


def test_ending_screen_shows_summary(monkeypatch) -> None:
    _answers(monkeypatch, [], confirms=[False])
    session = _session(total_months=1)
    session.choose(0)
    console = _console()

    assert screens.EndingScreen(console).show(session) is False
    assert session.ending_title in console.export_text()


def test_ending_widget_includes_goals() -> None:
    session = _session(total_months=1)
    session.choose(0)
    console = _console()
    console.print(ending_widget(session))
    assert "Startup spark" in console.export_text()
