"""Text widget backed by the text variant styles."""

from styled_variants.primitives import text_styles

from .styled_label import StyledLabel


class Text(StyledLabel):
    """Label with text_variant, color_scheme and truncate variants."""

    STYLES = text_styles
    OBJECT_NAME = "text"

    def _apply_styles(self) -> None:
        """Apply variant styles; truncated text does not wrap."""
        self.setWordWrap(not self._props.get("truncate"))
        super()._apply_styles()
