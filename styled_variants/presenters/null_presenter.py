"""Null presenter for testing (no output)."""

from collections.abc import Mapping

from styled_variants.models import TokenValue


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_style(self, title: str, text: str) -> None:
        """Display a rendered style (no-op)."""
        pass

    def show_tokens(
        self, theme_name: str, sections: Mapping[str, Mapping[str, TokenValue]]
    ) -> None:
        """Display theme tokens (no-op)."""
        pass
