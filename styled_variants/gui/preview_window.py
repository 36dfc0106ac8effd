"""Preview window showing every primitive variant under the current theme."""

import logging

from PyQt6.QtWidgets import QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from styled_variants.gui.utils import ThemePreference
from styled_variants.gui.widgets import Badge, StyledLabel, Text
from styled_variants.themes import get_theme, next_theme_name

logger = logging.getLogger(__name__)

COLOR_SCHEMES = ("primary", "danger", "success", "warning")
TEXT_VARIANTS = ("h1", "h2", "h3", "subtitle", "body", "caption")


class PreviewWindow(QWidget):
    """Gallery of badges and text styles with a theme switcher."""

    def __init__(self, preference: ThemePreference | None = None, parent=None):
        """Initialize the preview window.

        Args:
            preference: Theme preference store (QSettings-backed if None)
            parent: Parent widget
        """
        super().__init__(parent)
        self._preference = preference or ThemePreference()
        self._theme = get_theme(self._preference.load())
        self._styled: list[StyledLabel] = []

        self._setup_ui()
        self._apply_window_style()

    def _setup_ui(self) -> None:
        """Set up the window layout."""
        self.setWindowTitle("Styled Variants Preview")
        layout = QVBoxLayout(self)

        self.theme_label = QLabel()
        self.theme_button = QPushButton("Cycle theme")
        self.theme_button.clicked.connect(self.cycle_theme)
        header = QHBoxLayout()
        header.addWidget(self.theme_label)
        header.addStretch()
        header.addWidget(self.theme_button)
        layout.addLayout(header)

        badges = QHBoxLayout()
        for scheme in COLOR_SCHEMES:
            badges.addWidget(self._track(Badge(scheme.title(), self._theme, color_scheme=scheme)))
        badges.addStretch()
        layout.addLayout(badges)

        for variant in TEXT_VARIANTS:
            text = Text(f"{variant} text", self._theme, text_variant=variant)
            layout.addWidget(self._track(text))
        layout.addStretch()

    def _track(self, widget: StyledLabel) -> StyledLabel:
        self._styled.append(widget)
        return widget

    def _apply_window_style(self) -> None:
        colors = self._theme.colors
        self.setStyleSheet(f"PreviewWindow {{ background-color: {colors.background}; }}")
        self.theme_label.setText(f"Theme: {self._theme.name}")

    def cycle_theme(self) -> str:
        """Switch to the next theme, restyle every widget and save the choice.

        Returns:
            The new theme name
        """
        name = next_theme_name(self._theme.name)
        self._theme = get_theme(name)
        for widget in self._styled:
            widget.set_theme(self._theme)
        self._apply_window_style()
        self._preference.save(name)
        logger.info(f"Switched preview to theme '{name}'")
        return name

    @property
    def styled_widgets(self) -> list[StyledLabel]:
        """Get the styled widgets shown in the window."""
        return list(self._styled)
