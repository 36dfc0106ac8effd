"""Console presenter for CLI output."""

from collections.abc import Mapping

from styled_variants.models import TokenValue


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_style(self, title: str, text: str) -> None:
        """Display a rendered style."""
        print(f"/* {title} */")
        print(text)

    def show_tokens(
        self, theme_name: str, sections: Mapping[str, Mapping[str, TokenValue]]
    ) -> None:
        """Display theme tokens grouped by section."""
        print(f"Theme: {theme_name}")
        for section, tokens in sections.items():
            print(f"\n{section} ({len(tokens)}):")
            width = max((len(name) for name in tokens), default=0)
            for name, value in tokens.items():
                print(f"  {name.ljust(width)}  {value}")
