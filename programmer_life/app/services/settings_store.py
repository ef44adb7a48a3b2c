from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from programmer_life.core.settings import AppSettings

logger = logging.getLogger(__name__)


def _merge_defaults(data: dict[str, Any]) -> AppSettings:
    """Keep every valid section from ``data``; invalid sections reset to defaults."""
    defaults = AppSettings()
    merged: dict[str, Any] = {}
    for section, section_model in defaults:
        section_values = data.get(section)
        if not isinstance(section_values, dict):
            continue
        try:
            merged[section] = type(section_model).model_validate(section_values)
        except ValidationError as exc:
            logger.warning("Ignoring invalid '%s' settings: %s", section, exc.error_count())
    return defaults.model_copy(update=merged)


class SettingsStore:
    def __init__(self, settings_path: Path) -> None:
        self.settings_path = settings_path

    def load(self) -> AppSettings:
        if not self.settings_path.exists():
            settings = AppSettings()
            self.save(settings)
            return settings
        try:
            payload = json.loads(self.settings_path.read_text(encoding="utf-8"))
        except json.JSONDecodeError:
            logger.warning("Settings file %s is not valid JSON; using defaults.", self.settings_path)
            payload = {}
        if not isinstance(payload, dict):
            payload = {}
        settings = _merge_defaults(payload)
        self.save(settings)
        return settings

    def save(self, settings: AppSettings) -> None:
        self.settings_path.parent.mkdir(parents=True, exist_ok=True)
        self.settings_path.write_text(json.dumps(settings.as_dict(), indent=2), encoding="utf-8")
