"""Tests for CSS and QSS rendering."""

import pytest

from styled_variants.config import create_default_config
from styled_variants.exceptions import RenderError
from styled_variants.rendering import render_css, render_qss, resolve_css_variables
from styled_variants.rendering.css import format_value, nested_selector


class TestRenderCss:
    """Tests for render_css."""

    def test_declarations_and_references(self):
        style = {
            "--sv-a-1": "red",
            "color": "--sv-a-1",
            "padding": 4,
            ":hover": {"opacity": 0.5},
        }
        assert render_css(style, ".b") == (
            ".b {\n"
            "  --sv-a-1: red;\n"
            "  color: var(--sv-a-1);\n"
            "  padding: 4px;\n"
            "}\n"
            "\n"
            ".b:hover {\n"
            "  opacity: 0.5;\n"
            "}"
        )

    def test_reference_inside_shorthand(self):
        css = render_css({"border": "1px solid --sv-b-2"}, ".x")
        assert "border: 1px solid var(--sv-b-2);" in css

    def test_existing_var_not_double_wrapped(self):
        css = render_css({"color": "var(--sv-a-1)"}, ".x")
        assert "color: var(--sv-a-1);" in css
        assert "var(var(" not in css

    def test_none_values_skipped(self):
        assert render_css({"color": None, "margin": 0}, ".x") == ".x {\n  margin: 0;\n}"

    def test_empty_style(self):
        assert render_css({}, ".x") == ""

    def test_nested_descendant_selector(self):
        css = render_css({"span": {"color": "red"}, "&.active": {"color": "blue"}}, ".x")
        assert ".x span {" in css
        assert ".x.active {" in css

    def test_unrenderable_value(self):
        with pytest.raises(RenderError, match="margin"):
            render_css({"margin": [1, 2]}, ".x")


class TestFormatValue:
    """Tests for format_value unit handling."""

    def test_px_appended(self):
        assert format_value("width", 10, create_default_config()) == "10px"

    def test_zero_unitless(self):
        assert format_value("width", 0, create_default_config()) == "0"

    def test_unitless_property(self):
        assert format_value("font-weight", 600, create_default_config()) == "600"
        assert format_value("flex-shrink", 1, create_default_config()) == "1"

    def test_booleans_rejected(self):
        with pytest.raises(RenderError):
            format_value("width", True, create_default_config())


class TestNestedSelector:
    """Tests for nested_selector."""

    def test_pseudo_class(self):
        assert nested_selector("QLabel#badge", ":hover") == "QLabel#badge:hover"

    def test_ampersand(self):
        assert nested_selector(".b", "&:focus") == ".b:focus"

    def test_descendant(self):
        assert nested_selector(".b", "span") == ".b span"


class TestResolveCssVariables:
    """Tests for resolve_css_variables."""

    def test_substitutes_and_drops_declarations(self):
        style = {
            "--x": "red",
            "color": "--x",
            "border": "1px solid var(--x)",
            ":hover": {"--x": "blue", "color": "--x"},
        }
        assert resolve_css_variables(style) == {
            "color": "red",
            "border": "1px solid red",
            ":hover": {"color": "blue"},
        }

    def test_nested_declaration_does_not_leak_up(self):
        style = {"color": "--x", ":hover": {"--x": "blue"}}
        assert resolve_css_variables(style) == {"color": "--x", ":hover": {}}

    def test_undeclared_reference_kept(self):
        assert resolve_css_variables({"color": "var(--y)"}) == {"color": "var(--y)"}

    def test_variable_referencing_variable(self):
        style = {"--a": "green", "--b": "--a", "color": "--b"}
        assert resolve_css_variables(style) == {"color": "green"}

    def test_numbers_untouched(self):
        assert resolve_css_variables({"--w": 4, "width": 10}) == {"width": 10}


class TestRenderQss:
    """Tests for render_qss."""

    def test_variables_substituted(self):
        qss = render_qss({"--sv-a-1": "#EF4444", "color": "--sv-a-1"}, "QLabel#badge")
        assert qss == "QLabel#badge {\n  color: #EF4444;\n}"

    def test_unsupported_properties_dropped(self):
        qss = render_qss(
            {"color": "red", "box-shadow": "0 1px 1px black", "display": "inline-flex"},
            "QLabel",
        )
        assert "color: red;" in qss
        assert "box-shadow" not in qss
        assert "display" not in qss

    def test_pseudo_state_block(self):
        qss = render_qss({"color": "red", ":hover": {"color": "blue"}}, "QLabel")
        assert "QLabel:hover {\n  color: blue;\n}" in qss

    def test_custom_supported_properties(self):
        config = create_default_config(qss_properties=["color", "display"])
        qss = render_qss({"color": "red", "display": "block", "padding": 4}, "QLabel", config)
        assert "display: block;" in qss
        assert "padding" not in qss
