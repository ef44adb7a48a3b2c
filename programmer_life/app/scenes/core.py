from __future__ import annotations

from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from programmer_life.app.desktop import GameApp


class Scene:
    def on_enter(self, app: "GameApp") -> None:
        return

    def handle_event(self, app: "GameApp", event: pygame.event.Event) -> None:
        return

    def render(self, app: "GameApp", surface: pygame.Surface) -> None:
        return
