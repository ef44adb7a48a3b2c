from __future__ import annotations

import pygame

from programmer_life.app.ui import theme
from programmer_life.app.ui.layout import clamp_rect, split_columns, split_rows
from programmer_life.app.ui.widgets import Button, Panel, SectionCard, SelectList, TextInput, draw_text, draw_wrapped_text_clamped
from programmer_life.core.character import CharacterDraft

from .core import Scene


class CharacterCreationScene(Scene):
    def __init__(self, message: str = "") -> None:
        self.message = message
        self.draft: CharacterDraft | None = None
        self.name_input: TextInput | None = None
        self.trait_list: SelectList | None = None
        self.start_button: Button | None = None
        self.quit_button: Button | None = None
        self._last_size: tuple[int, int] | None = None
        self._panel_rect = pygame.Rect(0, 0, 0, 0)
        self._intro_rect = pygame.Rect(0, 0, 0, 0)
        self._preview_rect = pygame.Rect(0, 0, 0, 0)

    def on_enter(self, app) -> None:
        pygame.key.start_text_input()

    def _ensure_draft(self, app) -> CharacterDraft:
        if self.draft is None:
            self.draft = CharacterDraft(traits=list(app.content.traits))
        return self.draft

    def _build_layout(self, app) -> None:
        if self._last_size == app.screen.get_size() and self.start_button:
            return
        draft = self._ensure_draft(app)
        self._last_size = app.screen.get_size()
        self._panel_rect = clamp_rect(app.screen.get_rect(), min_w=900, min_h=600, max_w=1160, max_h=680)
        content = pygame.Rect(self._panel_rect.left + 20, self._panel_rect.top + 48, self._panel_rect.width - 40, self._panel_rect.height - 68)
        self._intro_rect, body, footer = split_rows(content, [0.16, 0.70, 0.14], gap=12)
        left, self._preview_rect = split_columns(body, [0.58, 0.42], gap=14)
        name_rect, list_rect = split_rows(left, [0.16, 0.84], gap=10)

        self.name_input = TextInput(
            name_rect,
            text=draft.name,
            placeholder="Type your name...",
            on_change=lambda value: setattr(draft, "name", value),
        )
        self.trait_list = SelectList(
            list_rect,
            row_height=max(48, list_rect.height // max(1, len(draft.traits))),
            items=[(trait.name, trait.description) for trait in draft.traits],
            selected_index=draft.selected_index,
            on_select=draft.select,
        )
        start_w, quit_w = 260, 160
        self.start_button = Button(
            pygame.Rect(footer.right - start_w, footer.top + 6, start_w, footer.height - 12),
            "Start Career",
            hotkey=pygame.K_RETURN,
            on_click=lambda: self._start(app),
            tooltip="Begin month one with this character.",
        )
        self.quit_button = Button(
            pygame.Rect(footer.left, footer.top + 6, quit_w, footer.height - 12),
            "Quit",
            hotkey=pygame.K_ESCAPE,
            on_click=app.quit,
        )
        self._refresh_start()

    def _refresh_start(self) -> None:
        if self.start_button is not None:
            self.start_button.enabled = bool(self.draft and self.draft.can_start())

    def _start(self, app) -> None:
        draft = self._ensure_draft(app)
        if not draft.can_start():
            self.message = "Enter a name and pick a trait first."
            return
        session = app.start_career(draft.build())
        if session.is_completed:
            from .ending import EndingScene

            app.change_scene(EndingScene())
            return
        from .game import GameScene

        app.change_scene(GameScene())

    def handle_event(self, app, event: pygame.event.Event) -> None:
        if event.type == pygame.QUIT:
            app.quit()
            return
        self._build_layout(app)
        self._refresh_start()
        if self.name_input is None or self.trait_list is None or self.start_button is None or self.quit_button is None:
            return
        if self.start_button.handle_event(event):
            return
        if self.quit_button.handle_event(event):
            return
        if self.name_input.handle_event(event):
            self.message = ""
            return
        self.trait_list.handle_event(event)

    def _draw_preview(self, surface: pygame.Surface) -> None:
        draft = self.draft
        body = SectionCard(self._preview_rect, "Selected trait").draw(surface)
        trait = draft.selected_trait if draft else None
        if trait is None:
            draw_text(surface, "No trait selected.", theme.get_role_font("body"), theme.COLOR_TEXT_MUTED, body.topleft)
            return
        title_font = theme.get_role_font("title", bold=True)
        draw_text(surface, trait.name, title_font, theme.COLOR_ACCENT, body.topleft)
        y = body.top + title_font.get_linesize() + 8
        draw_text(surface, trait.description, theme.get_role_font("body"), theme.COLOR_TEXT, (body.left, y))
        y += 40
        hint = (
            "Everyone starts at 22 with programming 50, algorithms 45, debugging 40, "
            "communication 35, stress 20, health 80, motivation 70 and a salary of 8,000. "
            "Your trait shifts these starting values."
        )
        draw_wrapped_text_clamped(surface, hint, theme.get_role_font("meta"), theme.COLOR_TEXT_MUTED, pygame.Rect(body.left, y, body.width, body.bottom - y))

    def render(self, app, surface: pygame.Surface) -> None:
        self._build_layout(app)
        if self.name_input is None or self.trait_list is None or self.start_button is None or self.quit_button is None:
            return
        surface.fill(theme.COLOR_BG)
        Panel(self._panel_rect, title="Create Your Programmer").draw(surface)

        draw_text(surface, "Name yourself and pick the trait that shapes your first years.", theme.get_role_font("body"), theme.COLOR_TEXT, self._intro_rect.topleft)
        if self.message:
            draw_text(surface, self.message, theme.get_role_font("meta", bold=True), theme.COLOR_WARNING, (self._intro_rect.left, self._intro_rect.top + 26))

        self.name_input.draw(surface)
        self.trait_list.draw(surface)
        self._draw_preview(surface)

        self._refresh_start()
        mouse = app.virtual_mouse_pos()
        self.start_button.draw(surface, mouse)
        self.quit_button.draw(surface, mouse)
