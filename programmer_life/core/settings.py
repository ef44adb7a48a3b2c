from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GameplaySettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total_months: int = Field(default=36, ge=12, le=120)
    seeded_mode: bool = False
    base_seed: int = 1337
    content_dir: str | None = None


class VideoSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    fullscreen: bool = False
    resolution: list[int] = Field(default_factory=lambda: [1280, 720], min_length=2, max_length=2)
    fps: int = Field(default=60, ge=15, le=240)


class UISettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    theme: str = "midnight_ide"
    font_scale: float = Field(default=1.0, ge=0.75, le=1.6)


class AppSettings(BaseModel):
    model_config = ConfigDict(extra="ignore")

    gameplay: GameplaySettings = Field(default_factory=GameplaySettings)
    video: VideoSettings = Field(default_factory=VideoSettings)
    ui: UISettings = Field(default_factory=UISettings)

    def as_dict(self) -> dict[str, Any]:
        return json.loads(self.model_dump_json())
