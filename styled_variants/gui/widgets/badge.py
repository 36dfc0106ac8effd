"""Badge widget backed by the badge variant styles."""

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import QSizePolicy

from styled_variants.primitives import badge_styles

from .styled_label import StyledLabel


class Badge(StyledLabel):
    """Pill-shaped label with color_scheme and text_variant variants.

    Usage:
        badge = Badge("Beta", color_scheme="warning")
        badge.set_variants(color_scheme="success")

    The current color scheme is also exposed as the ``color_scheme`` dynamic
    property so QSS property selectors can target it.
    """

    STYLES = badge_styles
    OBJECT_NAME = "badge"

    def _setup_ui(self) -> None:
        """Set up the badge UI."""
        self.setAlignment(Qt.AlignmentFlag.AlignCenter)
        # Auto-size to content
        self.setSizePolicy(QSizePolicy.Policy.Maximum, QSizePolicy.Policy.Fixed)

    def _apply_styles(self) -> None:
        """Apply variant styles and mirror the selected color scheme."""
        self.setProperty("color_scheme", self._props.get("color_scheme") or "primary")
        super()._apply_styles()

    @property
    def color_scheme(self) -> str:
        """Get the effective color scheme."""
        return self.property("color_scheme")
