"""Shared variant presets and style fragments.

Presets are plain functions of the theme so that several component
schemas can reference the same typographic scale instead of redefining it:

    "variants": {"text_variant": common.text_variants(theme), ...}

Every call returns fresh dicts; nothing here is shared mutable state.
"""

from typing import Any

from styled_variants.models import Theme


def text_variants(theme: Theme) -> dict[str, dict[str, Any]]:
    """Typography presets for the ``text_variant`` axis."""
    base = {
        "font-family": theme.fonts.main,
        "letter-spacing": "normal",
    }

    def preset(size: str, weight: str, line_height: str) -> dict[str, Any]:
        return {
            **base,
            "font-size": theme.font_sizes[size],
            "font-weight": theme.font_weights[weight],
            "line-height": theme.line_heights[line_height],
        }

    return {
        "h1": preset("xxl", "semibold", "tight"),
        "h2": preset("xl", "semibold", "tight"),
        "h3": preset("lg", "semibold", "tight"),
        "subtitle": preset("md", "medium", "normal"),
        "body": preset("md", "regular", "normal"),
        "caption": preset("sm", "medium", "normal"),
        "button_large": preset("md", "semibold", "tight"),
        "button_small": preset("sm", "semibold", "tight"),
    }


def font_size_variants(theme: Theme) -> dict[str, dict[str, Any]]:
    """Font-size-only presets for a ``size`` axis."""
    return {size: {"font-size": theme.font_sizes[size]} for size in ("xs", "sm", "md", "lg", "xl")}


def border_variants(theme: Theme, *, has_error: bool = False) -> dict[str, dict[str, Any]]:
    """Border presets; ``has_error`` swaps the border color for the danger color."""
    color = theme.colors.danger500 if has_error else theme.colors.neutral_alpha150
    hover_color = theme.colors.danger500 if has_error else theme.colors.neutral_alpha300
    return {
        "normal": {
            "border": f"{theme.borders.normal} {color}",
            "border-radius": theme.radii.md,
            ":hover": {"border-color": hover_color},
        },
        "none": {"border": "none"},
    }


def focus_ring(theme: Theme) -> dict[str, Any]:
    """Outline shown on keyboard focus."""
    return {
        ":focus": {
            "outline": f"2px solid {theme.colors.primary_alpha300}",
            "outline-offset": "2px",
        },
    }


def disabled(theme: Theme) -> dict[str, Any]:
    """Style fragment for disabled elements."""
    return {
        ":disabled": {
            "cursor": "not-allowed",
            "opacity": 0.5,
            "color": theme.colors.muted_foreground,
        },
    }


def centered_flex(display: str = "flex") -> dict[str, Any]:
    return {
        "display": display,
        "justify-content": "center",
        "align-items": "center",
    }


def visually_hidden() -> dict[str, Any]:
    # Hidden on screen but still read by assistive technology
    return {
        "clip": "rect(0 0 0 0)",
        "clip-path": "inset(50%)",
        "height": 1,
        "overflow": "hidden",
        "position": "absolute",
        "white-space": "nowrap",
        "width": 1,
    }
