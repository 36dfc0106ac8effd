"""Badge primitive: a small pill-shaped status label."""

from styled_variants.styled_system import common, create_css_variables, create_variants

badge_vars = create_css_variables("accent", "bg", "border_color")


def _color_scheme(accent: str, bg: str, border_color: str) -> dict[str, str]:
    return {
        badge_vars.accent: accent,
        badge_vars.bg: bg,
        badge_vars.border_color: border_color,
    }


badge_styles = create_variants(
    lambda theme: {
        "base": {
            "color": badge_vars.accent,
            "flex-shrink": 0,
            "background-color": badge_vars.bg,
            "box-shadow": theme.shadows.badge,
            "border": theme.borders.normal,
            "border-color": badge_vars.border_color,
            "border-radius": theme.radii.sm,
            "padding": f"{theme.space.xxxs} {theme.space.xs}",
            "display": "inline-flex",
            "margin-right": 1,
        },
        "variants": {
            "text_variant": common.text_variants(theme),
            "color_scheme": {
                "primary": _color_scheme(
                    theme.colors.neutral_alpha600,
                    theme.colors.neutral_alpha50,
                    theme.colors.neutral_alpha150,
                ),
                "danger": _color_scheme(
                    theme.colors.danger500,
                    theme.colors.danger_alpha50,
                    theme.colors.danger100,
                ),
                "success": _color_scheme(
                    theme.colors.success500,
                    theme.colors.success_alpha50,
                    theme.colors.success100,
                ),
                "warning": _color_scheme(
                    theme.colors.warning500,
                    theme.colors.warning_alpha50,
                    theme.colors.warning100,
                ),
            },
        },
        "default_variants": {
            "color_scheme": "primary",
            "text_variant": "caption",
        },
    }
)
