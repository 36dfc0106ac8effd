"""Text primitive: themed typography with an optional color scheme."""

from styled_variants.styled_system import common, create_variants

text_styles = create_variants(
    lambda theme: {
        "base": {
            "margin": 0,
            "font-size": "inherit",
        },
        "variants": {
            "text_variant": common.text_variants(theme),
            "color_scheme": {
                "neutral": {"color": theme.colors.foreground},
                "secondary": {"color": theme.colors.muted_foreground},
                "danger": {"color": theme.colors.danger500},
                "success": {"color": theme.colors.success500},
                "warning": {"color": theme.colors.warning500},
                "inherit": {"color": "inherit"},
            },
            "truncate": {
                "true": {
                    "overflow": "hidden",
                    "white-space": "nowrap",
                    "text-overflow": "ellipsis",
                },
            },
        },
        "default_variants": {
            "color_scheme": "inherit",
            "text_variant": "body",
        },
    }
)
