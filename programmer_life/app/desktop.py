from __future__ import annotations

import logging

import pygame
from rich.console import Console

from programmer_life.app.scenes.character_creation import CharacterCreationScene
from programmer_life.app.scenes.core import Scene
from programmer_life.app.services.career import load_game_content, start_session
from programmer_life.app.services.logger import configure_logging
from programmer_life.app.services.paths import UserPaths, resolve_user_paths
from programmer_life.app.services.settings_store import SettingsStore
from programmer_life.app.ui import theme
from programmer_life.core.loader import ContentBundle
from programmer_life.core.models import Player
from programmer_life.core.session import GameSession
from programmer_life.core.settings import AppSettings

logger = logging.getLogger(__name__)


class GameApp:
    """Window, frame loop and scene switching for the desktop frontend."""

    def __init__(self, settings: AppSettings, content: ContentBundle, user_paths: UserPaths | None = None) -> None:
        self.settings = settings
        self.content = content
        self.user_paths = user_paths
        self.session: GameSession | None = None
        self.run_counter = 0
        self.running = False

        pygame.init()
        pygame.display.set_caption(theme.WINDOW_TITLE)
        theme.apply_theme(settings.ui.theme)
        theme.set_font_scale(settings.ui.font_scale)
        self.window = self._create_window()
        self.screen = pygame.Surface(theme.VIRTUAL_RESOLUTION)
        self.clock = pygame.time.Clock()
        self.scene: Scene = CharacterCreationScene()
        self.scene.on_enter(self)

    def _create_window(self) -> pygame.Surface:
        flags = pygame.FULLSCREEN if self.settings.video.fullscreen else pygame.RESIZABLE
        width, height = self.settings.video.resolution
        return pygame.display.set_mode((width, height), flags)

    def _viewport(self) -> pygame.Rect:
        window_w, window_h = self.window.get_size()
        virtual_w, virtual_h = self.screen.get_size()
        scale = min(window_w / virtual_w, window_h / virtual_h)
        width, height = int(virtual_w * scale), int(virtual_h * scale)
        return pygame.Rect((window_w - width) // 2, (window_h - height) // 2, width, height)

    def virtual_mouse_pos(self) -> tuple[int, int]:
        viewport = self._viewport()
        if viewport.width == 0 or viewport.height == 0:
            return (0, 0)
        mx, my = pygame.mouse.get_pos()
        x = (mx - viewport.left) * self.screen.get_width() // viewport.width
        y = (my - viewport.top) * self.screen.get_height() // viewport.height
        return (x, y)

    def _to_virtual(self, event: pygame.event.Event) -> pygame.event.Event:
        if event.type not in {pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP, pygame.MOUSEMOTION}:
            return event
        viewport = self._viewport()
        if viewport.width == 0 or viewport.height == 0:
            return event
        x = (event.pos[0] - viewport.left) * self.screen.get_width() // viewport.width
        y = (event.pos[1] - viewport.top) * self.screen.get_height() // viewport.height
        payload = dict(event.dict)
        payload["pos"] = (x, y)
        return pygame.event.Event(event.type, payload)

    def change_scene(self, scene: Scene) -> None:
        logger.info("Scene change: %s -> %s", type(self.scene).__name__, type(scene).__name__)
        self.scene = scene
        self.scene.on_enter(self)

    def start_career(self, player: Player) -> GameSession:
        self.session = start_session(player, self.content, self.settings.gameplay, self.run_counter)
        self.run_counter += 1
        return self.session

    def end_career(self) -> None:
        if self.session is not None and self.session.ending is not None:
            logger.info("Run finished with ending '%s'.", self.session.ending.key)
        self.session = None

    def quit(self) -> None:
        self.running = False

    def run(self) -> None:
        self.running = True
        while self.running:
            for event in pygame.event.get():
                if event.type == pygame.VIDEORESIZE and not self.settings.video.fullscreen:
                    self.window = pygame.display.set_mode(event.size, pygame.RESIZABLE)
                    continue
                self.scene.handle_event(self, self._to_virtual(event))
            self.scene.render(self, self.screen)
            self.window.fill((0, 0, 0))
            self.window.blit(pygame.transform.smoothscale(self.screen, self._viewport().size), self._viewport())
            pygame.display.flip()
            self.clock.tick(self.settings.video.fps)
        pygame.quit()


def main() -> None:
    console = Console()
    paths = resolve_user_paths()
    loggers = configure_logging(paths.logs, console=console)
    settings = SettingsStore(paths.settings_file).load()
    loggers.app.info("Starting desktop frontend.")

    content = load_game_content(settings.gameplay)
    try:
        GameApp(settings=settings, content=content, user_paths=paths).run()
    except Exception:
        loggers.app.exception("Unhandled exception in desktop loop.")
        console.print(f"[bold red]A fatal error occurred.[/bold red] See {loggers.latest_log_path}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
