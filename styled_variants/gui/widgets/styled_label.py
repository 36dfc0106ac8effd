"""QLabel whose stylesheet is resolved from a variant definition."""

from typing import Any

from PyQt6.QtWidgets import QLabel

from styled_variants.config import DEFAULT_CONFIG
from styled_variants.gui.utils import apply_stylesheet
from styled_variants.models import Theme
from styled_variants.rendering import render_qss
from styled_variants.styled_system import StyleVariants
from styled_variants.themes import get_theme


class StyledLabel(QLabel):
    """Base label that renders its props through a StyleVariants definition.

    Variant props select the stylesheet; every other prop is forwarded to
    the widget as a dynamic Qt property.

    Subclasses set STYLES and OBJECT_NAME.
    """

    STYLES: StyleVariants
    OBJECT_NAME = "styled-label"

    def __init__(self, text: str = "", theme: Theme | None = None, parent=None, **props: Any):
        """Initialize the label.

        Args:
            text: Label text
            theme: Theme to resolve against (configured default if None)
            parent: Parent widget
            **props: Variant choices and forwarded properties
        """
        super().__init__(text, parent)
        self._theme = theme or get_theme(DEFAULT_CONFIG.default_theme)
        self._props: dict[str, Any] = dict(props)

        self.setObjectName(self.OBJECT_NAME)
        self._setup_ui()
        self._apply_styles()

    def _setup_ui(self) -> None:
        """Hook for subclasses to configure the widget once."""
        pass

    def _apply_styles(self) -> None:
        """Resolve props and apply the stylesheet and forwarded properties."""
        resolver = self.STYLES.bind(self._theme)

        forwarded = resolver.filter_props(self._props)
        for key, value in forwarded.items():
            self.setProperty(key, value)

        style = resolver.apply_variants(self._props)
        apply_stylesheet(
            self, render_qss(style, f"QLabel#{self.objectName()}"), force=bool(forwarded)
        )

    def set_variants(self, **props: Any) -> None:
        """Update props and restyle.

        Args:
            **props: Props to add or replace; None resets a variant to its default
        """
        self._props.update(props)
        self._apply_styles()

    def set_theme(self, theme: Theme) -> None:
        """Switch to another theme and restyle."""
        self._theme = theme
        self._apply_styles()

    @property
    def props(self) -> dict[str, Any]:
        """Get a copy of the current props."""
        return dict(self._props)

    @property
    def theme(self) -> Theme:
        """Get the current theme."""
        return self._theme
