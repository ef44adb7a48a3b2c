from __future__ import annotations

import pygame

from programmer_life.app.ui import theme
from programmer_life.app.ui.layout import split_columns, split_rows, stack_rows
from programmer_life.app.ui.widgets import (
    Button,
    Panel,
    ProgressBar,
    SectionCard,
    StatChip,
    draw_text,
    draw_wrapped_text_clamped,
    wrap_text,
)
from programmer_life.core.models import PROGRESS_MAX, SKILL_LABELS, SKILL_NAMES, STAT_MAX, GameEvent
from programmer_life.core.session import GameSession

from .core import Scene

OPTION_HOTKEYS = (pygame.K_1, pygame.K_2, pygame.K_3, pygame.K_4, pygame.K_5, pygame.K_6)


class GameScene(Scene):
    def __init__(self) -> None:
        self.option_buttons: list[Button] = []
        self._bound_event: GameEvent | None = None
        self._last_size: tuple[int, int] | None = None
        self._header_rect = pygame.Rect(0, 0, 0, 0)
        self._stats_rect = pygame.Rect(0, 0, 0, 0)
        self._status_rect = pygame.Rect(0, 0, 0, 0)
        self._event_rect = pygame.Rect(0, 0, 0, 0)
        self._options_rect = pygame.Rect(0, 0, 0, 0)
        self._result_rect = pygame.Rect(0, 0, 0, 0)

    def _session(self, app) -> GameSession:
        if app.session is None:
            raise RuntimeError("No career is in progress.")
        return app.session

    def _build_layout(self, app) -> None:
        session = self._session(app)
        if self._last_size != app.screen.get_size():
            self._last_size = app.screen.get_size()
            screen = app.screen.get_rect().inflate(-24, -24)
            self._header_rect, body = split_rows(screen, [0.12, 0.88], gap=10)
            left, right = split_columns(body, [0.38, 0.62], gap=12)
            self._stats_rect, self._status_rect = split_rows(left, [0.58, 0.42], gap=10)
            self._event_rect, self._options_rect, self._result_rect = split_rows(right, [0.42, 0.36, 0.22], gap=10)
            self._bound_event = None
        if session.current_event is not self._bound_event:
            self._bind_options(app, session.current_event)

    def _bind_options(self, app, event: GameEvent | None) -> None:
        self._bound_event = event
        self.option_buttons = []
        if event is None:
            return
        count = len(event.options)
        row_h = min(52, max(30, (self._options_rect.height - 8 * (count - 1)) // max(1, count)))
        rows = stack_rows(self._options_rect, [row_h] * count, gap=8)
        for index, (row, option) in enumerate(zip(rows, event.options)):
            self.option_buttons.append(
                Button(
                    row,
                    f"{index + 1}. {option.text}",
                    hotkey=OPTION_HOTKEYS[index] if index < len(OPTION_HOTKEYS) else None,
                    on_click=lambda i=index: self._choose(app, i),
                    tooltip=option.impact_summary(),
                    text_align="left",
                    max_font_role="body",
                )
            )

    def _choose(self, app, index: int) -> None:
        session = self._session(app)
        session.choose(index)
        if session.is_completed:
            from .ending import EndingScene

            app.change_scene(EndingScene())

    def handle_event(self, app, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            app.quit()
            return
        self._build_layout(app)
        for button in self.option_buttons:
            if button.handle_event(event):
                return

    def _draw_header(self, surface: pygame.Surface, session: GameSession) -> None:
        _draw_card_background(surface, self._header_rect)
        inner = self._header_rect.inflate(-20, -12)
        draw_text(surface, session.time_display, theme.get_role_font("title", bold=True), theme.COLOR_TEXT, inner.topleft)
        draw_text(surface, session.career_phase, theme.get_role_font("meta"), theme.COLOR_TEXT_MUTED, (inner.left, inner.bottom), "bottomleft")
        bar_rect = pygame.Rect(inner.right - 420, inner.top + 4, 420, 24)
        ProgressBar(bar_rect, session.timeline_progress, 1.0, label=session.timeline_display).draw(surface)
        draw_text(
            surface,
            f"{session.player.name} · age {session.player.age} · salary {session.player.salary:,}",
            theme.get_role_font("meta", bold=True),
            theme.COLOR_TEXT_MUTED,
            (inner.right, inner.bottom),
            "bottomright",
        )

    def _draw_stats(self, surface: pygame.Surface, session: GameSession) -> None:
        body = SectionCard(self._stats_rect, "Stats").draw(surface)
        player = session.player
        rows: list[tuple[str, int, tuple[int, int, int]]] = [
            (SKILL_LABELS[skill], getattr(player, skill), theme.COLOR_ACCENT) for skill in SKILL_NAMES
        ]
        rows += [(name.title(), getattr(player, name), theme.stat_color(name)) for name in ("stress", "health", "motivation")]
        row_h = max(18, min(28, (body.height - 6 * (len(rows) - 1)) // len(rows)))
        label_w = 120
        for row, (label, value, color) in zip(stack_rows(body, [row_h] * len(rows), gap=6), rows):
            draw_text(surface, label, theme.get_role_font("meta", bold=True), theme.COLOR_TEXT, (row.left, row.centery), "midleft")
            bar = pygame.Rect(row.left + label_w, row.top, row.width - label_w, row.height)
            ProgressBar(bar, value, STAT_MAX, label=str(value), color=color).draw(surface)

    def _draw_status(self, surface: pygame.Surface, session: GameSession) -> None:
        body = SectionCard(self._status_rect, "Career goals").draw(surface)
        chip_row, bars, notes = split_rows(body, [0.18, 0.30, 0.52], gap=6)
        chip_a, chip_b = split_columns(chip_row, [1, 1], gap=8)
        StatChip(chip_a, "Events", str(session.events_completed)).draw(surface)
        StatChip(chip_b, "Highest", "{} {}".format(*session.player.highest_skill())).draw(surface)
        lead_rect, innov_rect = split_rows(bars, [1, 1], gap=4)
        ProgressBar(lead_rect, session.progress.leadership, PROGRESS_MAX, label=f"Promotion {session.progress.leadership}/100").draw(surface)
        ProgressBar(innov_rect, session.progress.innovation, PROGRESS_MAX, label=f"Startup spark {session.progress.innovation}/100", color=theme.COLOR_SUCCESS).draw(surface)

        y = notes.top
        font = theme.get_role_font("meta")
        lines = [(line, theme.COLOR_DANGER) for line in session.status_warnings]
        lines += [(line, theme.COLOR_TEXT_MUTED) for line in session.recent_highlights]
        for text, color in lines:
            for wrapped in wrap_text(text, font, notes.width):
                if y + font.get_linesize() > notes.bottom:
                    return
                draw_text(surface, wrapped, font, color, (notes.left, y))
                y += font.get_linesize()

    def _draw_event(self, surface: pygame.Surface, session: GameSession) -> None:
        event = session.current_event
        if event is None:
            return
        body = Panel(self._event_rect, title=event.title).draw(surface)
        draw_text(surface, f"{event.category} · {event.rarity}", theme.get_role_font("meta", bold=True), theme.COLOR_ACCENT, body.topleft)
        text_rect = pygame.Rect(body.left, body.top + 24, body.width, body.height - 24)
        draw_wrapped_text_clamped(surface, event.description, theme.get_role_font("body"), theme.COLOR_TEXT, text_rect)

    def _draw_result(self, surface: pygame.Surface, session: GameSession) -> None:
        body = SectionCard(self._result_rect, "Last month", muted=not session.event_result_message).draw(surface)
        if not session.event_result_message:
            draw_text(surface, "Your first decision awaits.", theme.get_role_font("meta"), theme.COLOR_TEXT_MUTED, body.topleft)
            return
        bottom, _ = draw_wrapped_text_clamped(
            surface,
            session.event_result_message,
            theme.get_role_font("body"),
            theme.COLOR_TEXT,
            pygame.Rect(body.left, body.top, body.width, max(0, body.height - 20)),
        )
        draw_text(surface, session.last_impact_details, theme.get_role_font("meta"), theme.COLOR_TEXT_MUTED, (body.left, min(bottom, body.bottom - 18)))

    def render(self, app, surface: pygame.Surface) -> None:
        self._build_layout(app)
        session = self._session(app)
        surface.fill(theme.COLOR_BG)
        self._draw_header(surface, session)
        self._draw_stats(surface, session)
        self._draw_status(surface, session)
        self._draw_event(surface, session)
        mouse = app.virtual_mouse_pos()
        for button in self.option_buttons:
            button.draw(surface, mouse)
        self._draw_result(surface, session)
        hovered = next((button.tooltip for button in self.option_buttons if button.hovered and button.tooltip), None)
        if hovered:
            draw_text(surface, hovered, theme.get_role_font("meta", bold=True), theme.COLOR_WARNING, (self._options_rect.left, self._options_rect.bottom), "bottomleft")


def _draw_card_background(surface: pygame.Surface, rect: pygame.Rect) -> None:
    pygame.draw.rect(surface, theme.COLOR_PANEL, rect, border_radius=theme.BORDER_RADIUS)
    pygame.draw.rect(surface, theme.COLOR_BORDER, rect, width=theme.BORDER_WIDTH, border_radius=theme.BORDER_RADIUS)
