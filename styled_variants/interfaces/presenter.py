"""Presenter protocol for output abstraction."""

from collections.abc import Mapping
from typing import Protocol

from styled_variants.models import TokenValue


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    This protocol abstracts all output operations, allowing the same
    commands to work with different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_style(self, title: str, text: str) -> None:
        """Display a rendered style.

        Args:
            title: What was rendered (e.g. "badge (dark)")
            text: Rendered JSON, CSS or QSS text
        """
        ...

    def show_tokens(
        self, theme_name: str, sections: Mapping[str, Mapping[str, TokenValue]]
    ) -> None:
        """Display theme tokens grouped by section.

        Args:
            theme_name: Name of the theme
            sections: Mapping of section name to tokens
        """
        ...
