"""Pytest configuration and shared fixtures."""

import pytest

from styled_variants.models import Theme
from styled_variants.styled_system import create_css_variables
from styled_variants.themes import get_theme


@pytest.fixture
def light_theme():
    """Provide the built-in light theme."""
    return get_theme("light")


@pytest.fixture
def dark_theme():
    """Provide the built-in dark theme."""
    return get_theme("dark")


@pytest.fixture
def minimal_theme():
    """Provide a small hand-written theme with only a few tokens."""
    return Theme.from_dict(
        "minimal",
        {
            "colors": {"primary": "#111111", "danger": "#EE0000", "muted": "#888888"},
            "space": {"sm": "4px", "md": "8px"},
            "radii": {"sm": "2px"},
        },
    )


@pytest.fixture
def color_scheme_factory():
    """Factory fixture building the two-scheme accent schema used across tests."""

    def _make(default="primary"):
        def factory(theme):
            return {
                "base": {"display": "inline-flex"},
                "variants": {
                    "color_scheme": {
                        "primary": {"accent": "A"},
                        "danger": {"accent": "B"},
                    },
                },
                "default_variants": {"color_scheme": default},
            }

        return factory

    return _make


@pytest.fixture
def accent_vars():
    """Provide a fresh CSS variable set."""
    return create_css_variables("accent", "bg")


class RecordingPresenter:
    """A real PresenterProtocol implementation that records all calls for assertion."""

    def __init__(self):
        self.infos = []
        self.errors = []
        self.styles = []
        self.tokens = []

    def show_info(self, message: str) -> None:
        self.infos.append(message)

    def show_error(self, message: str) -> None:
        self.errors.append(message)

    def show_style(self, title: str, text: str) -> None:
        self.styles.append((title, text))

    def show_tokens(self, theme_name, sections) -> None:
        self.tokens.append((theme_name, sections))


@pytest.fixture
def recording_presenter():
    """Provide a presenter that records all calls for assertion."""
    return RecordingPresenter()
