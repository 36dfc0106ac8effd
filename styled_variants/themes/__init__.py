"""Built-in themes.

Themes are built on first use and cached, so every caller asking for
"light" gets the same Theme object (and therefore the same cached
resolvers).
"""

import threading

from styled_variants.exceptions import ThemeNotFoundError
from styled_variants.models import Theme

from .builder import build_theme
from .palettes import PALETTES, SHADOWS, ThemeMode

_THEMES: dict[str, Theme] = {}
_lock = threading.Lock()

THEME_ORDER: tuple[ThemeMode, ...] = ("light", "dark", "sakura")


def available_themes() -> list[str]:
    """Get the names of all built-in themes."""
    return list(THEME_ORDER)


def get_theme(name: str) -> Theme:
    """Get a built-in theme by name.

    Args:
        name: Theme name ('light', 'dark', or 'sakura')

    Returns:
        The cached Theme instance

    Raises:
        ThemeNotFoundError: If no built-in theme has that name
    """
    if name not in PALETTES:
        raise ThemeNotFoundError(
            f"Unknown theme '{name}'. Available: {', '.join(available_themes())}"
        )
    with _lock:
        if name not in _THEMES:
            _THEMES[name] = build_theme(name, PALETTES[name], SHADOWS[name])
        return _THEMES[name]


def next_theme_name(current: str) -> ThemeMode:
    """Get the theme that follows ``current`` (light → dark → sakura → light)."""
    if current not in THEME_ORDER:
        return THEME_ORDER[0]
    index = THEME_ORDER.index(current)  # type: ignore[arg-type]
    return THEME_ORDER[(index + 1) % len(THEME_ORDER)]


__all__ = ["ThemeMode", "available_themes", "get_theme", "next_theme_name", "build_theme"]
