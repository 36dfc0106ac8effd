"""Persisted theme preference for the GUI."""

from PyQt6.QtCore import QSettings

from styled_variants.config import DEFAULT_CONFIG
from styled_variants.themes import available_themes


class ThemePreference:
    """Load and save the user's chosen theme with QSettings."""

    ORGANIZATION = "StyledVariants"
    APPLICATION = "GUI"

    def __init__(self, settings: QSettings | None = None):
        """Initialize the preference store.

        Args:
            settings: QSettings to use (application defaults if None)
        """
        self._settings = settings or QSettings(self.ORGANIZATION, self.APPLICATION)

    def load(self) -> str:
        """Get the saved theme name, or the configured default if unset/invalid."""
        saved = self._settings.value("theme", DEFAULT_CONFIG.default_theme)
        if saved in available_themes():
            return saved
        return DEFAULT_CONFIG.default_theme

    def save(self, name: str) -> None:
        """Save the theme name."""
        self._settings.setValue("theme", name)
