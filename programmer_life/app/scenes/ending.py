from __future__ import annotations

import pygame

from programmer_life.app.ui import theme
from programmer_life.app.ui.layout import clamp_rect, split_columns, split_rows
from programmer_life.app.ui.widgets import Button, Panel, SectionCard, StatChip, draw_text, draw_wrapped_text_clamped

from .core import Scene


class EndingScene(Scene):
    def __init__(self) -> None:
        self.buttons: list[Button] = []
        self._last_size: tuple[int, int] | None = None
        self._panel_rect = pygame.Rect(0, 0, 0, 0)
        self._title_rect = pygame.Rect(0, 0, 0, 0)
        self._chips_rect = pygame.Rect(0, 0, 0, 0)
        self._summary_rect = pygame.Rect(0, 0, 0, 0)

    def _new_game(self, app) -> None:
        from .character_creation import CharacterCreationScene

        app.end_career()
        app.change_scene(CharacterCreationScene())

    def _build_layout(self, app) -> None:
        if self._last_size == app.screen.get_size() and self.buttons:
            return
        self._last_size = app.screen.get_size()
        self._panel_rect = clamp_rect(app.screen.get_rect(), min_w=860, min_h=560, max_w=1080, max_h=660)
        content = pygame.Rect(self._panel_rect.left + 20, self._panel_rect.top + 48, self._panel_rect.width - 40, self._panel_rect.height - 68)
        self._title_rect, self._chips_rect, self._summary_rect, footer = split_rows(content, [0.14, 0.10, 0.62, 0.14], gap=10)
        left, right = split_columns(footer, [1, 1], gap=16)
        self.buttons = [
            Button(
                pygame.Rect(left.right - 240, left.top + 6, 240, left.height - 12),
                "New Game",
                hotkey=pygame.K_RETURN,
                on_click=lambda: self._new_game(app),
            ),
            Button(
                pygame.Rect(right.left, right.top + 6, 240, right.height - 12),
                "Quit",
                hotkey=pygame.K_ESCAPE,
                on_click=app.quit,
            ),
        ]

    def handle_event(self, app, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            app.quit()
            return
        self._build_layout(app)
        for button in self.buttons:
            if button.handle_event(event):
                return

    def render(self, app, surface: pygame.Surface) -> None:
        self._build_layout(app)
        session = app.session
        surface.fill(theme.COLOR_BG)
        Panel(self._panel_rect, title="Career Complete").draw(surface)
        if session is None or session.ending is None:
            return

        draw_text(surface, session.ending.title, theme.get_font(34, bold=True), theme.COLOR_ACCENT, self._title_rect.center, "center")

        stats = session.stats()
        chips = split_columns(self._chips_rect, [1, 1, 1, 1], gap=8)
        values = [
            ("Months", str(stats.total_months_played)),
            ("Events", str(stats.total_events_completed)),
            ("Best skill", f"{stats.highest_skill_name} {stats.highest_skill}"),
            ("Salary", f"{stats.final_salary:,}"),
        ]
        for rect, (label, value) in zip(chips, values):
            StatChip(rect, label, value).draw(surface)

        body = SectionCard(self._summary_rect, "Summary").draw(surface)
        draw_wrapped_text_clamped(surface, session.game_summary, theme.get_role_font("body"), theme.COLOR_TEXT, body, line_spacing=4)

        mouse = app.virtual_mouse_pos()
        for button in self.buttons:
            button.draw(surface, mouse)
