"""Tests for presenter implementations."""

from styled_variants.presenters import ConsolePresenter, NullPresenter


class TestConsolePresenter:
    """Tests for ConsolePresenter output."""

    def test_error_prefix(self, capsys):
        ConsolePresenter().show_error("boom")
        assert capsys.readouterr().out == "[ERROR] boom\n"

    def test_style(self, capsys):
        ConsolePresenter().show_style("badge (light)", ".badge {}")
        assert capsys.readouterr().out == "/* badge (light) */\n.badge {}\n"

    def test_tokens_aligned(self, capsys):
        ConsolePresenter().show_tokens("light", {"radii": {"sm": "4px", "pill": "9999px"}})
        out = capsys.readouterr().out
        assert "radii (2):" in out
        assert "  sm    4px" in out
        assert "  pill  9999px" in out


class TestNullPresenter:
    """Tests for NullPresenter."""

    def test_silent(self, capsys):
        presenter = NullPresenter()
        presenter.show_info("x")
        presenter.show_error("x")
        presenter.show_style("x", "y")
        presenter.show_tokens("x", {})
        assert capsys.readouterr().out == ""
