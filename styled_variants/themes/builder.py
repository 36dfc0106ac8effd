"""Expand a base palette into a complete Theme."""

import logging
from collections.abc import Mapping

from styled_variants.models import Theme

from .color_scale import alpha_scale, shade_scale
from .palettes import BORDERS, FONT_SIZES, FONT_WEIGHTS, FONTS, LINE_HEIGHTS, RADII, SPACE

logger = logging.getLogger(__name__)

# Palette keys that get full shade + alpha scales
SCALED_COLORS = ("primary", "success", "warning", "danger", "info")

# Palette keys copied through as single tokens
FLAT_COLORS = (
    "background",
    "surface",
    "border",
    "foreground",
    "muted_foreground",
    "primary_foreground",
)


def build_colors(palette: Mapping[str, str]) -> dict[str, str]:
    """Build the colors section from a base palette.

    Args:
        palette: Base colors; must contain every key in SCALED_COLORS,
            FLAT_COLORS and "neutral"

    Returns:
        Dictionary of color tokens
    """
    colors: dict[str, str] = {}
    for name in SCALED_COLORS:
        colors.update(shade_scale(name, palette[name]))
        colors.update(alpha_scale(name, palette[name]))
    colors.update(alpha_scale("neutral", palette["neutral"]))
    for name in FLAT_COLORS:
        colors[name] = palette[name]
    colors["transparent"] = "transparent"
    return colors


def build_theme(name: str, palette: Mapping[str, str], shadows: Mapping[str, str]) -> Theme:
    """Build a Theme from a palette plus the shared spacing/typography scales.

    Args:
        name: Theme name
        palette: Base colors (see build_colors)
        shadows: Shadow tokens for this theme

    Returns:
        Fully populated Theme
    """
    colors = build_colors(palette)
    logger.debug(f"Built theme '{name}' with {len(colors)} color tokens")
    return Theme(
        name=name,
        colors=colors,
        space=SPACE,
        radii=RADII,
        shadows=shadows,
        borders=BORDERS,
        font_sizes=FONT_SIZES,
        font_weights=FONT_WEIGHTS,
        line_heights=LINE_HEIGHTS,
        fonts=FONTS,
    )
