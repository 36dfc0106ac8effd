"""Style definitions for the built-in primitives."""

from styled_variants.styled_system import StyleVariants

from .badge import badge_styles, badge_vars
from .text import text_styles

PRIMITIVES: dict[str, StyleVariants] = {
    "badge": badge_styles,
    "text": text_styles,
}

__all__ = ["PRIMITIVES", "badge_styles", "badge_vars", "text_styles"]
