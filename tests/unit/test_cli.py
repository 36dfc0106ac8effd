"""Tests for the command-line interface."""

import argparse
import json

import pytest

from styled_variants.cli.commands.resolve import parse_assignment, resolve_command
from styled_variants.cli.commands.tokens import tokens_command
from styled_variants.cli.main import build_parser, main
from styled_variants.primitives import badge_vars
from styled_variants.themes import get_theme


def _resolve_args(**overrides):
    values = {
        "primitive": "badge",
        "theme": "light",
        "set": None,
        "format": "json",
        "selector": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestParseAssignment:
    """Tests for key=value parsing."""

    def test_valid(self):
        assert parse_assignment("color_scheme=danger") == ("color_scheme", "danger")

    def test_value_may_contain_equals(self):
        assert parse_assignment("title=a=b") == ("title", "a=b")

    @pytest.mark.parametrize("text", ["color_scheme", "=danger"])
    def test_invalid(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_assignment(text)


class TestResolveCommand:
    """Tests for resolve_command."""

    def test_json_output(self, recording_presenter):
        args = _resolve_args(set=[("color_scheme", "danger"), ("id", "beta")])
        assert resolve_command(args, recording_presenter) == 0

        title, text = recording_presenter.styles[0]
        assert title == "badge (light)"
        payload = json.loads(text)
        assert payload["style"][badge_vars.accent] == get_theme("light").colors.danger500
        assert payload["props"] == {"id": "beta"}

    def test_css_output(self, recording_presenter):
        args = _resolve_args(format="css", selector=".my-badge")
        assert resolve_command(args, recording_presenter) == 0
        _, text = recording_presenter.styles[0]
        assert text.startswith(".my-badge {")
        assert f"color: var({badge_vars.accent});" in text

    def test_qss_output(self, recording_presenter):
        args = _resolve_args(format="qss", theme="dark")
        assert resolve_command(args, recording_presenter) == 0
        title, text = recording_presenter.styles[0]
        assert title == "badge (dark)"
        assert text.startswith(".badge {")
        assert "--sv-" not in text

    def test_unknown_primitive(self, recording_presenter):
        assert resolve_command(_resolve_args(primitive="slider"), recording_presenter) == 1
        assert "slider" in recording_presenter.errors[0]

    def test_unknown_theme(self, recording_presenter):
        assert resolve_command(_resolve_args(theme="neon"), recording_presenter) == 1
        assert "neon" in recording_presenter.errors[0]


class TestTokensCommand:
    """Tests for tokens_command."""

    def test_all_sections(self, recording_presenter):
        args = argparse.Namespace(theme="sakura", section=None)
        assert tokens_command(args, recording_presenter) == 0
        name, sections = recording_presenter.tokens[0]
        assert name == "sakura"
        assert "colors" in sections
        assert sections["space"]["md"] == "16px"

    def test_single_section(self, recording_presenter):
        args = argparse.Namespace(theme="light", section="radii")
        assert tokens_command(args, recording_presenter) == 0
        _, sections = recording_presenter.tokens[0]
        assert list(sections) == ["radii"]

    def test_empty_section_reports_info(self, recording_presenter, minimal_theme, monkeypatch):
        """Should report an empty section as info instead of an empty listing."""
        monkeypatch.setattr(
            "styled_variants.cli.commands.tokens.get_theme", lambda name: minimal_theme
        )
        args = argparse.Namespace(theme="minimal", section="shadows")
        assert tokens_command(args, recording_presenter) == 0
        assert recording_presenter.tokens == []
        assert len(recording_presenter.infos) == 1
        assert "minimal" in recording_presenter.infos[0]
        assert "shadows" in recording_presenter.infos[0]


class TestMain:
    """Tests for the argparse entry point."""

    def test_resolve_prints_json(self, capsys):
        assert main(["resolve", "text", "--set", "truncate=true"]) == 0
        out = capsys.readouterr().out
        header, _, body = out.partition("\n")
        assert header == "/* text (light) */"
        assert json.loads(body)["style"]["white-space"] == "nowrap"

    def test_tokens_prints_section(self, capsys):
        assert main(["tokens", "--section", "radii"]) == 0
        out = capsys.readouterr().out
        assert "Theme: light" in out
        assert "pill" in out

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out

    def test_invalid_theme_choice_exits(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["resolve", "badge", "--theme", "neon"])
