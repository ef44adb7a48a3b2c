from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

APP_LOGGER_NAME = "programmer_life"
GAMEPLAY_LOGGER_NAME = "programmer_life.gameplay"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@dataclass(slots=True)
class AppLoggerBundle:
    app: logging.Logger
    gameplay: logging.Logger
    latest_log_path: Path
    gameplay_log_path: Path


def _rotate_log(logs_dir: Path, stem: str, keep_archives: int = 5) -> Path:
    logs_dir.mkdir(parents=True, exist_ok=True)
    current = logs_dir / f"{stem}.log"
    if current.exists():
        stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        current.replace(logs_dir / f"{stem}_{stamp}.log")

    archives = sorted(
        [path for path in logs_dir.glob(f"{stem}_*.log") if path.is_file()],
        key=lambda p: p.stat().st_mtime,
        reverse=True,
    )
    for stale in archives[keep_archives:]:
        stale.unlink(missing_ok=True)
    return current


def configure_logging(
    logs_dir: Path,
    console: Console | None = None,
    console_level: int = logging.WARNING,
) -> AppLoggerBundle:
    """Route the package loggers to rotating files and a rich console handler.

    The terminal frontend draws its own screens, so the console handler only
    shows warnings by default; ``latest.log`` always receives INFO and above.
    """
    latest = _rotate_log(logs_dir, "latest")
    gameplay_log_path = _rotate_log(logs_dir, "gameplay")

    app_logger = logging.getLogger(APP_LOGGER_NAME)
    app_logger.setLevel(logging.INFO)
    app_logger.handlers.clear()
    app_logger.propagate = False

    console_handler = RichHandler(console=console, show_path=False, markup=False)
    console_handler.setLevel(console_level)

    file_handler = logging.FileHandler(latest, mode="w", encoding="utf-8")
    file_handler.setFormatter(logging.Formatter(LOG_FORMAT))

    app_logger.addHandler(console_handler)
    app_logger.addHandler(file_handler)

    gameplay_logger = logging.getLogger(GAMEPLAY_LOGGER_NAME)
    gameplay_logger.setLevel(logging.INFO)
    gameplay_logger.handlers.clear()
    gameplay_logger.propagate = False

    gameplay_handler = logging.FileHandler(gameplay_log_path, mode="w", encoding="utf-8")
    gameplay_handler.setFormatter(logging.Formatter("%(asctime)s %(message)s"))
    gameplay_logger.addHandler(gameplay_handler)

    return AppLoggerBundle(
        app=app_logger,
        gameplay=gameplay_logger,
        latest_log_path=latest,
        gameplay_log_path=gameplay_log_path,
    )
