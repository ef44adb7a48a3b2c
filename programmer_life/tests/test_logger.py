from __future__ import annotations

import io
import logging
from pathlib import Path

from rich.console import Console

from programmer_life.app.services.logger import configure_logging
from programmer_life.core.character import create_player
from programmer_life.core.engine import GameEngineService
from programmer_life.core.loader import builtin_content
from programmer_life.core.rng import DeterministicRNG
from programmer_life.core.session import GameSession


def _close(bundle) -> None:
    for logger in (bundle.app, bundle.gameplay):
        for handler in list(logger.handlers):
            handler.close()
            logger.removeHandler(handler)
        logger.propagate = True


def test_session_writes_gameplay_log(tmp_path: Path) -> None:
    bundle = configure_logging(tmp_path, console=Console(file=io.StringIO()))
    try:
        content = builtin_content()
        rng = DeterministicRNG.from_seed(5)
        GameSession(create_player("Ada", content.traits[0]), content, GameEngineService(rng), rng)
        for handler in bundle.gameplay.handlers:
            handler.flush()
        text = bundle.gameplay_log_path.read_text(encoding="utf-8")
        assert "[START] Ada starts a career at age 22." in text
        assert "[EVENT]" in text
    finally:
        _close(bundle)


def test_app_logger_writes_latest_log(tmp_path: Path) -> None:
    bundle = configure_logging(tmp_path, console=Console(file=io.StringIO()))
    try:
        logging.getLogger("programmer_life.core.loader").info("content ready")
        for handler in bundle.app.handlers:
            handler.flush()
        assert "content ready" in bundle.latest_log_path.read_text(encoding="utf-8")
    finally:
        _close(bundle)


def test_previous_logs_are_archived(tmp_path: Path) -> None:
    (tmp_path / "latest.log").write_text("old run", encoding="utf-8")
    bundle = configure_logging(tmp_path, console=Console(file=io.StringIO()))
    _close(bundle)

    archives = list(tmp_path.glob("latest_*.log"))
    assert len(archives) == 1
    assert archives[0].read_text(encoding="utf-8") == "old run"
