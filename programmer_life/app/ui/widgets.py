from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Literal

import pygame

from . import theme

Color = tuple[int, int, int]


def draw_text(
    surface: pygame.Surface,
    text: str,
    font: pygame.font.Font,
    color: Color,
    pos: tuple[int, int],
    anchor: str = "topleft",
) -> pygame.Rect:
    rendered = font.render(text, True, color)
    rect = rendered.get_rect()
    setattr(rect, anchor, pos)
    surface.blit(rendered, rect)
    return rect


def wrap_text(text: str, font: pygame.font.Font, max_width: int) -> list[str]:
    if max_width <= 0:
        return [text]
    lines: list[str] = []
    for paragraph in text.split("\n"):
        words = paragraph.split()
        if not words:
            lines.append("")
            continue
        current = words[0]
        for word in words[1:]:
            candidate = f"{current} {word}"
            if font.size(candidate)[0] <= max_width:
                current = candidate
            else:
                lines.append(current)
                current = word
        lines.append(current)
    return lines


def clamp_wrapped_lines(
    text: str,
    font: pygame.font.Font,
    max_width: int,
    max_height: int,
    line_spacing: int = 2,
) -> tuple[list[str], bool]:
    if max_height <= 0:
        return [], bool(text)
    lines = wrap_text(text, font, max_width)
    line_height = max(1, font.get_linesize())
    visible = max(1, (max_height + line_spacing) // (line_height + line_spacing))
    clipped = len(lines) > visible
    if not clipped:
        return lines, False
    kept = lines[:visible]
    kept[-1] = _fit_text_ellipsis(font, f"{kept[-1]}...", max_width)
    return kept, True


def draw_wrapped_text_clamped(
    surface: pygame.Surface,
    text: str,
    font: pygame.font.Font,
    color: Color,
    rect: pygame.Rect,
    line_spacing: int = 2,
) -> tuple[int, bool]:
    lines, clipped = clamp_wrapped_lines(text, font, rect.width, rect.height, line_spacing=line_spacing)
    y = rect.top
    for line in lines:
        draw_text(surface, line, font, color, (rect.left, y))
        y += font.get_linesize() + line_spacing
    return y, clipped


@dataclass(slots=True)
class Panel:
    rect: pygame.Rect
    title: str | None = None

    def draw(self, surface: pygame.Surface) -> pygame.Rect:
        _draw_frame(surface, self.rect, theme.COLOR_PANEL, theme.COLOR_BORDER, draw_shadow=True)
        if not self.title:
            return self.rect.inflate(-16, -16)
        title_rect = pygame.Rect(self.rect.left + 4, self.rect.top + 4, self.rect.width - 8, 30)
        pygame.draw.rect(surface, _mix_color(theme.COLOR_PANEL_ALT, theme.COLOR_ACCENT_SOFT, 0.2), title_rect, border_radius=theme.BORDER_RADIUS)
        accent = pygame.Rect(title_rect.left + 4, title_rect.top + 5, 4, title_rect.height - 10)
        pygame.draw.rect(surface, theme.COLOR_ACCENT, accent, border_radius=1)
        draw_text(
            surface,
            self.title,
            theme.get_role_font("section", bold=True),
            theme.COLOR_TEXT,
            (title_rect.left + 14, title_rect.centery),
            "midleft",
        )
        return pygame.Rect(self.rect.left + 12, title_rect.bottom + 8, self.rect.width - 24, self.rect.bottom - title_rect.bottom - 16)


@dataclass(slots=True)
class Button:
    rect: pygame.Rect
    text: str
    on_click: Callable[[], None] | None = None
    hotkey: int | None = None
    tooltip: str | None = None
    enabled: bool = True
    selected: bool = False
    hovered: bool = False
    text_align: Literal["center", "left"] = "center"
    max_font_role: theme.FontRole = "section"

    def handle_event(self, event: pygame.event.Event) -> bool:
        if not self.enabled:
            return False
        if self.hotkey is not None and event.type == pygame.KEYDOWN and event.key == self.hotkey:
            if self.on_click:
                self.on_click()
            return True
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.rect.collidepoint(event.pos):
            if self.on_click:
                self.on_click()
            return True
        return False

    def draw(self, surface: pygame.Surface, mouse_pos: tuple[int, int]) -> None:
        self.hovered = self.enabled and self.rect.collidepoint(mouse_pos)
        if not self.enabled:
            tone = theme.COLOR_BUTTON_DISABLED
        elif self.selected:
            tone = theme.COLOR_ACCENT_SOFT
        elif self.hovered:
            tone = _brighten_color(theme.COLOR_BUTTON, 18)
        else:
            tone = theme.COLOR_BUTTON
        border = theme.COLOR_ACCENT if (self.selected or self.hovered) else theme.COLOR_BORDER
        _draw_frame(surface, self.rect, tone, border)

        fg = _best_contrast_text(tone, preferred=theme.COLOR_TEXT) if self.enabled else theme.COLOR_TEXT_MUTED
        role_caps = {
            "title": theme.FONT_SIZE_TITLE,
            "section": theme.FONT_SIZE_SECTION,
            "body": theme.FONT_SIZE_BODY,
            "meta": theme.FONT_SIZE_META,
        }
        font_size = max(theme.FONT_SIZE_META, min(role_caps[self.max_font_role], int(self.rect.height * 0.46)))
        font = theme.get_font(font_size, bold=self.max_font_role in {"title", "section"})
        text_rect = self.rect.inflate(-16, -8)
        text = _fit_text_ellipsis(font, self.text, max(8, text_rect.width))
        if self.text_align == "left":
            draw_text(surface, text, font, fg, (text_rect.left, text_rect.centery), "midleft")
        else:
            draw_text(surface, text, font, fg, text_rect.center, "center")


@dataclass(slots=True)
class ProgressBar:
    rect: pygame.Rect
    value: float
    max_value: float
    label: str = ""
    color: Color | None = None

    @property
    def ratio(self) -> float:
        return 0.0 if self.max_value <= 0 else max(0.0, min(1.0, self.value / self.max_value))

    def draw(self, surface: pygame.Surface) -> None:
        _draw_frame(surface, self.rect, theme.COLOR_PROGRESS_BG, theme.COLOR_BORDER)
        fill = pygame.Rect(
            self.rect.left + theme.BORDER_WIDTH,
            self.rect.top + theme.BORDER_WIDTH,
            max(0, int((self.rect.width - theme.BORDER_WIDTH * 2) * self.ratio)),
            max(0, self.rect.height - theme.BORDER_WIDTH * 2),
        )
        if fill.width > 0:
            pygame.draw.rect(surface, self.color or theme.COLOR_ACCENT, fill, border_radius=theme.BORDER_RADIUS)
        if self.label:
            font = theme.get_role_font("meta", bold=True)
            draw_text(surface, self.label, font, _best_contrast_text(theme.COLOR_PROGRESS_BG), self.rect.center, "center")


@dataclass(slots=True)
class SectionCard:
    rect: pygame.Rect
    title: str
    muted: bool = False

    def draw(self, surface: pygame.Surface) -> pygame.Rect:
        bg = theme.COLOR_PANEL_ALT if not self.muted else theme.COLOR_PROGRESS_BG
        _draw_frame(surface, self.rect, bg, theme.COLOR_BORDER)
        title_rect = pygame.Rect(self.rect.left + 2, self.rect.top + 2, self.rect.width - 4, 22)
        pygame.draw.line(surface, theme.COLOR_BORDER, (title_rect.left, title_rect.bottom), (title_rect.right, title_rect.bottom), 1)
        draw_text(
            surface,
            self.title,
            theme.get_role_font("meta", bold=True),
            theme.COLOR_TEXT_MUTED,
            (title_rect.left + 8, title_rect.centery),
            "midleft",
        )
        return pygame.Rect(self.rect.left + 8, self.rect.top + 30, self.rect.width - 16, self.rect.height - 38)


@dataclass(slots=True)
class StatChip:
    rect: pygame.Rect
    label: str
    value: str
    tone: Color | None = None

    def draw(self, surface: pygame.Surface) -> None:
        _draw_frame(surface, self.rect, self.tone or theme.COLOR_PANEL_ALT, theme.COLOR_BORDER)
        font = theme.get_role_font("meta", bold=True)
        draw_text(surface, self.label, font, theme.COLOR_TEXT_MUTED, (self.rect.left + 8, self.rect.centery), "midleft")
        draw_text(surface, self.value, font, theme.COLOR_TEXT, (self.rect.right - 8, self.rect.centery), "midright")


@dataclass(slots=True)
class TextInput:
    rect: pygame.Rect
    text: str = ""
    placeholder: str = ""
    max_length: int = 24
    focused: bool = True
    on_change: Callable[[str], None] | None = None

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.focused = self.rect.collidepoint(event.pos)
            return self.focused
        if not self.focused:
            return False
        if event.type == pygame.KEYDOWN and event.key == pygame.K_BACKSPACE:
            self._set(self.text[:-1])
            return True
        if event.type == pygame.TEXTINPUT:
            self._set((self.text + event.text)[: self.max_length])
            return True
        return False

    def _set(self, value: str) -> None:
        if value == self.text:
            return
        self.text = value
        if self.on_change:
            self.on_change(value)

    def draw(self, surface: pygame.Surface) -> None:
        border = theme.COLOR_ACCENT if self.focused else theme.COLOR_BORDER
        _draw_frame(surface, self.rect, theme.COLOR_PROGRESS_BG, border)
        font = theme.get_role_font("body", kind="mono")
        inner = self.rect.inflate(-16, 0)
        if self.text:
            shown = self.text + ("_" if self.focused and (pygame.time.get_ticks() // 500) % 2 == 0 else "")
            draw_text(surface, _fit_text_ellipsis(font, shown, inner.width), font, theme.COLOR_TEXT, (inner.left, inner.centery), "midleft")
        else:
            draw_text(surface, self.placeholder, font, theme.COLOR_TEXT_MUTED, (inner.left, inner.centery), "midleft")


@dataclass(slots=True)
class SelectList:
    rect: pygame.Rect
    row_height: int = 56
    items: list[tuple[str, str]] = field(default_factory=list)
    selected_index: int | None = None
    on_select: Callable[[int], None] | None = None

    def visible_rows(self) -> int:
        return max(1, self.rect.height // self.row_height)

    def row_rect(self, index: int) -> pygame.Rect:
        return pygame.Rect(self.rect.left + 2, self.rect.top + index * self.row_height + 2, self.rect.width - 4, self.row_height - 4)

    def _select(self, index: int) -> None:
        self.selected_index = index
        if self.on_select:
            self.on_select(index)

    def handle_event(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1 and self.rect.collidepoint(event.pos):
            index = (event.pos[1] - self.rect.top) // self.row_height
            if 0 <= index < min(len(self.items), self.visible_rows()):
                self._select(index)
                return True
        if event.type == pygame.KEYDOWN and self.items:
            if event.key == pygame.K_UP:
                self._select(0 if self.selected_index is None else max(0, self.selected_index - 1))
                return True
            if event.key == pygame.K_DOWN:
                last = min(len(self.items), self.visible_rows()) - 1
                self._select(0 if self.selected_index is None else min(last, self.selected_index + 1))
                return True
        return False

    def draw(self, surface: pygame.Surface) -> None:
        _draw_frame(surface, self.rect, theme.COLOR_PANEL_ALT, theme.COLOR_BORDER)
        title_font = theme.get_role_font("body", bold=True)
        meta_font = theme.get_role_font("meta")
        for index, (title, subtitle) in enumerate(self.items[: self.visible_rows()]):
            row = self.row_rect(index)
            if index == self.selected_index:
                pygame.draw.rect(surface, theme.COLOR_ACCENT_SOFT, row, border_radius=theme.BORDER_RADIUS)
                pygame.draw.rect(surface, theme.COLOR_ACCENT, row, width=1, border_radius=theme.BORDER_RADIUS)
            width = max(8, row.width - 20)
            draw_text(surface, _fit_text_ellipsis(title_font, title, width), title_font, theme.COLOR_TEXT, (row.left + 10, row.top + 6))
            draw_text(surface, _fit_text_ellipsis(meta_font, subtitle, width), meta_font, theme.COLOR_TEXT_MUTED, (row.left + 10, row.top + 8 + title_font.get_linesize()))


def _draw_frame(
    surface: pygame.Surface,
    rect: pygame.Rect,
    fill_color: Color,
    border_color: Color,
    draw_shadow: bool = False,
) -> None:
    if draw_shadow:
        shadow_rect = rect.move(2, 3)
        shadow = pygame.Surface(shadow_rect.size, pygame.SRCALPHA)
        pygame.draw.rect(shadow, (0, 0, 0, 56), shadow.get_rect(), border_radius=theme.BORDER_RADIUS + 1)
        surface.blit(shadow, shadow_rect.topleft)
    pygame.draw.rect(surface, border_color, rect, border_radius=theme.BORDER_RADIUS)
    inner = rect.inflate(-theme.BORDER_WIDTH * 2, -theme.BORDER_WIDTH * 2)
    if inner.width <= 0 or inner.height <= 0:
        return
    pygame.draw.rect(surface, fill_color, inner, border_radius=theme.BORDER_RADIUS)
    if inner.width > 6 and inner.height > 6:
        pygame.draw.line(surface, _mix_color(fill_color, theme.COLOR_BORDER_HIGHLIGHT, 0.35), (inner.left + 2, inner.top + 1), (inner.right - 3, inner.top + 1), 1)


def _mix_color(a: Color, b: Color, t: float) -> Color:
    return (
        int(a[0] * (1.0 - t) + b[0] * t),
        int(a[1] * (1.0 - t) + b[1] * t),
        int(a[2] * (1.0 - t) + b[2] * t),
    )


def _brighten_color(color: Color, delta: int) -> Color:
    return (
        max(0, min(255, color[0] + delta)),
        max(0, min(255, color[1] + delta)),
        max(0, min(255, color[2] + delta)),
    )


def _channel_luminance(channel: int) -> float:
    value = float(channel) / 255.0
    if value <= 0.03928:
        return value / 12.92
    return ((value + 0.055) / 1.055) ** 2.4


def _relative_luminance(color: Color) -> float:
    return (
        0.2126 * _channel_luminance(color[0])
        + 0.7152 * _channel_luminance(color[1])
        + 0.0722 * _channel_luminance(color[2])
    )


def _contrast_ratio(foreground: Color, background: Color) -> float:
    lum_fg = _relative_luminance(foreground)
    lum_bg = _relative_luminance(background)
    return (max(lum_fg, lum_bg) + 0.05) / (min(lum_fg, lum_bg) + 0.05)


def _best_contrast_text(background: Color, preferred: Color | None = None) -> Color:
    candidates = [theme.COLOR_TEXT, theme.COLOR_BG, (250, 250, 250), (12, 12, 12)]
    if preferred is not None:
        candidates.insert(0, preferred)
    return max(candidates, key=lambda candidate: _contrast_ratio(candidate, background))


def _fit_text_ellipsis(font: pygame.font.Font, text: str, max_width: int) -> str:
    if max_width <= 0:
        return ""
    if font.size(text)[0] <= max_width:
        return text
    ellipsis = "..."
    if font.size(ellipsis)[0] > max_width:
        return ""
    clipped = text
    while clipped and font.size(f"{clipped}{ellipsis}")[0] > max_width:
        clipped = clipped[:-1]
    return f"{clipped}{ellipsis}"
