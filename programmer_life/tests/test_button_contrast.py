from __future__ import annotations

from programmer_life.app.ui import theme
from programmer_life.app.ui.widgets import _best_contrast_text, _contrast_ratio


def test_button_labels_keep_minimum_contrast_across_themes() -> None:
    try:
        for theme_name in theme.available_themes():
            theme.apply_theme(theme_name)
            text_color = _best_contrast_text(theme.COLOR_BUTTON, preferred=theme.COLOR_TEXT)
            ratio = _contrast_ratio(text_color, theme.COLOR_BUTTON)
            assert ratio >= 4.5, f"{theme_name} button contrast too low: {ratio:.2f}"
    finally:
        theme.apply_theme(theme.DEFAULT_THEME)


def test_contrast_ratio_is_symmetric() -> None:
    assert _contrast_ratio((0, 0, 0), (255, 255, 255)) == _contrast_ratio((255, 255, 255), (0, 0, 0))
    assert round(_contrast_ratio((0, 0, 0), (255, 255, 255)), 1) == 21.0
