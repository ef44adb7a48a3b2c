from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

import pygame

WINDOW_TITLE = "Programmer Life Simulator"
VIRTUAL_RESOLUTION = (1280, 720)


@dataclass(frozen=True)
class Palette:
    bg: tuple[int, int, int]
    panel: tuple[int, int, int]
    panel_alt: tuple[int, int, int]
    text: tuple[int, int, int]
    text_muted: tuple[int, int, int]
    accent: tuple[int, int, int]
    accent_soft: tuple[int, int, int]
    success: tuple[int, int, int]
    warning: tuple[int, int, int]
    danger: tuple[int, int, int]
    border: tuple[int, int, int]
    border_highlight: tuple[int, int, int]
    progress_bg: tuple[int, int, int]
    button: tuple[int, int, int]
    button_disabled: tuple[int, int, int]


THEMES: dict[str, Palette] = {
    "midnight_ide": Palette(
        bg=(20, 22, 30),
        panel=(32, 36, 48),
        panel_alt=(42, 47, 62),
        text=(230, 234, 242),
        text_muted=(160, 170, 190),
        accent=(97, 175, 239),
        accent_soft=(58, 104, 150),
        success=(152, 195, 121),
        warning=(229, 192, 123),
        danger=(224, 108, 117),
        border=(70, 78, 98),
        border_highlight=(120, 132, 160),
        progress_bg=(26, 29, 40),
        button=(58, 66, 88),
        button_disabled=(44, 46, 56),
    ),
    "solarized": Palette(
        bg=(0, 43, 54),
        panel=(7, 54, 66),
        panel_alt=(17, 66, 79),
        text=(238, 232, 213),
        text_muted=(147, 161, 161),
        accent=(38, 139, 210),
        accent_soft=(28, 96, 140),
        success=(133, 153, 0),
        warning=(181, 137, 0),
        danger=(220, 50, 47),
        border=(88, 110, 117),
        border_highlight=(131, 148, 150),
        progress_bg=(0, 36, 46),
        button=(30, 84, 98),
        button_disabled=(20, 54, 62),
    ),
    "terminal_green": Palette(
        bg=(10, 18, 14),
        panel=(20, 44, 30),
        panel_alt=(30, 60, 42),
        text=(226, 244, 226),
        text_muted=(164, 208, 168),
        accent=(122, 210, 124),
        accent_soft=(62, 132, 72),
        success=(132, 222, 144),
        warning=(226, 198, 98),
        danger=(214, 102, 108),
        border=(64, 126, 74),
        border_highlight=(128, 188, 130),
        progress_bg=(16, 34, 24),
        button=(52, 108, 66),
        button_disabled=(40, 62, 46),
    ),
    "paper": Palette(
        bg=(236, 232, 222),
        panel=(250, 248, 242),
        panel_alt=(240, 236, 226),
        text=(40, 40, 46),
        text_muted=(104, 104, 114),
        accent=(46, 110, 180),
        accent_soft=(170, 196, 226),
        success=(58, 140, 76),
        warning=(186, 128, 24),
        danger=(190, 60, 60),
        border=(170, 164, 150),
        border_highlight=(210, 204, 190),
        progress_bg=(222, 218, 206),
        button=(214, 208, 194),
        button_disabled=(226, 224, 218),
    ),
}

DEFAULT_THEME = "midnight_ide"
CURRENT_THEME = DEFAULT_THEME

COLOR_BG: tuple[int, int, int]
COLOR_PANEL: tuple[int, int, int]
COLOR_PANEL_ALT: tuple[int, int, int]
COLOR_TEXT: tuple[int, int, int]
COLOR_TEXT_MUTED: tuple[int, int, int]
COLOR_ACCENT: tuple[int, int, int]
COLOR_ACCENT_SOFT: tuple[int, int, int]
COLOR_SUCCESS: tuple[int, int, int]
COLOR_WARNING: tuple[int, int, int]
COLOR_DANGER: tuple[int, int, int]
COLOR_BORDER: tuple[int, int, int]
COLOR_BORDER_HIGHLIGHT: tuple[int, int, int]
COLOR_PROGRESS_BG: tuple[int, int, int]
COLOR_BUTTON: tuple[int, int, int]
COLOR_BUTTON_DISABLED: tuple[int, int, int]

BORDER_RADIUS = 4
BORDER_WIDTH = 2

FONT_SIZE_TITLE = 26
FONT_SIZE_SECTION = 18
FONT_SIZE_BODY = 16
FONT_SIZE_META = 13

FontKind = Literal["body", "mono"]
FontRole = Literal["title", "section", "body", "meta"]
_FONT_SCALE = 1.0
_SYS_FALLBACK: dict[str, list[str]] = {
    "body": ["Segoe UI", "Helvetica Neue", "DejaVu Sans", "Arial"],
    "mono": ["JetBrains Mono", "Cascadia Mono", "Consolas", "DejaVu Sans Mono", "Courier New"],
}

# Colours used by stat bars; keyed by stat attribute name.
STAT_COLORS: dict[str, str] = {
    "stress": "danger",
    "health": "success",
    "motivation": "warning",
}


def available_themes() -> tuple[str, ...]:
    return tuple(THEMES.keys())


def apply_theme(theme_name: str | None) -> str:
    global CURRENT_THEME
    palette = THEMES.get(theme_name or "")
    if palette is None:
        theme_name = DEFAULT_THEME
        palette = THEMES[theme_name]
    CURRENT_THEME = theme_name
    globals().update(
        {
            "COLOR_BG": palette.bg,
            "COLOR_PANEL": palette.panel,
            "COLOR_PANEL_ALT": palette.panel_alt,
            "COLOR_TEXT": palette.text,
            "COLOR_TEXT_MUTED": palette.text_muted,
            "COLOR_ACCENT": palette.accent,
            "COLOR_ACCENT_SOFT": palette.accent_soft,
            "COLOR_SUCCESS": palette.success,
            "COLOR_WARNING": palette.warning,
            "COLOR_DANGER": palette.danger,
            "COLOR_BORDER": palette.border,
            "COLOR_BORDER_HIGHLIGHT": palette.border_highlight,
            "COLOR_PROGRESS_BG": palette.progress_bg,
            "COLOR_BUTTON": palette.button,
            "COLOR_BUTTON_DISABLED": palette.button_disabled,
        }
    )
    return CURRENT_THEME


def stat_color(stat: str) -> tuple[int, int, int]:
    return globals()[f"COLOR_{STAT_COLORS.get(stat, 'accent').upper()}"]


def set_font_scale(scale: float) -> None:
    global _FONT_SCALE
    _FONT_SCALE = max(0.75, min(1.6, float(scale)))
    _load_font.cache_clear()


@lru_cache(maxsize=256)
def _load_font(kind: FontKind, size: int, bold: bool) -> pygame.font.Font:
    if not pygame.font.get_init():
        pygame.font.init()
    for fallback in _SYS_FALLBACK.get(kind, _SYS_FALLBACK["body"]):
        font = pygame.font.SysFont(fallback, size, bold=bold)
        if font:
            return font
    return pygame.font.Font(None, size)


def get_font(size: int, bold: bool = False, kind: FontKind = "body") -> pygame.font.Font:
    scaled = max(10, int(round(float(size) * _FONT_SCALE)))
    return _load_font(kind, scaled, bold)


def get_role_font(role: FontRole, bold: bool = False, kind: FontKind = "body") -> pygame.font.Font:
    role_sizes = {
        "title": FONT_SIZE_TITLE,
        "section": FONT_SIZE_SECTION,
        "body": FONT_SIZE_BODY,
        "meta": FONT_SIZE_META,
    }
    return get_font(role_sizes[role], bold=bold, kind=kind)


apply_theme(DEFAULT_THEME)
