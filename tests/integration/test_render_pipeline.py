"""Integration tests: component definition → theme binding → rendered style sheet."""

import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from styled_variants.rendering import render_css, render_qss
from styled_variants.styled_system import common, create_css_variables, create_variants
from styled_variants.themes import available_themes, get_theme


@pytest.fixture
def button_definition():
    """Provide a button-like component defined the way primitives are."""
    button_vars = create_css_variables("accent", "accent_hover")
    button_styles = create_variants(
        lambda theme: {
            "base": {
                **common.centered_flex("inline-flex"),
                "color": theme.colors.primary_foreground,
                "background-color": button_vars.accent,
                "border-radius": theme.radii.md,
                ":hover": {"background-color": button_vars.accent_hover},
                **common.focus_ring(theme),
            },
            "variants": {
                "text_variant": common.text_variants(theme),
                "color_scheme": {
                    "primary": {
                        button_vars.accent: theme.colors.primary500,
                        button_vars.accent_hover: theme.colors.primary600,
                    },
                    "danger": {
                        button_vars.accent: theme.colors.danger500,
                        button_vars.accent_hover: theme.colors.danger600,
                    },
                },
                "block": {"true": {"width": "100%"}},
            },
            "default_variants": {"color_scheme": "primary", "text_variant": "button_small"},
            "compound_variants": [
                {
                    "conditions": {"color_scheme": "danger", "block": True},
                    "styles": {"font-weight": theme.font_weights.bold},
                }
            ],
        }
    )
    return button_vars, button_styles


class TestRenderPipeline:
    """End-to-end resolution and rendering across built-in themes."""

    @pytest.mark.parametrize("theme_name", available_themes())
    def test_css_declares_and_references_variables(self, button_definition, theme_name):
        button_vars, button_styles = button_definition
        theme = get_theme(theme_name)
        style, forwarded = button_styles.resolve(theme, {"color_scheme": "danger", "id": "delete"})

        css = render_css(style, ".button")
        assert f"{button_vars.accent}: {theme.colors.danger500};" in css
        assert f"background-color: var({button_vars.accent});" in css
        assert f".button:hover {{\n  background-color: var({button_vars.accent_hover});\n}}" in css
        assert forwarded == {"id": "delete"}

    def test_qss_substitutes_hover_variable(self, button_definition, light_theme):
        _, button_styles = button_definition
        style = button_styles.bind(light_theme).apply_variants({})
        qss = render_qss(style, "QPushButton")
        hover = light_theme.colors.primary600
        assert f"QPushButton:hover {{\n  background-color: {hover};\n}}" in qss
        assert "outline-offset" not in qss

    def test_compound_variant_applies_only_in_combination(self, button_definition, light_theme):
        _, button_styles = button_definition
        resolver = button_styles.bind(light_theme)
        bold = light_theme.font_weights.bold
        assert resolver.apply_variants({"color_scheme": "danger"})["font-weight"] != bold
        style = resolver.apply_variants({"color_scheme": "danger", "block": True})
        assert style["font-weight"] == bold
        assert style["width"] == "100%"

    def test_concurrent_binds_build_once(self, light_theme):
        calls = []
        lock = threading.Lock()

        def factory(theme):
            with lock:
                calls.append(theme)
            return {"base": {"color": theme.colors.foreground}}

        styles = create_variants(factory)
        with ThreadPoolExecutor(max_workers=8) as pool:
            resolvers = list(pool.map(lambda _: styles.bind(light_theme), range(32)))

        assert len(calls) == 1
        assert all(r is resolvers[0] for r in resolvers)
