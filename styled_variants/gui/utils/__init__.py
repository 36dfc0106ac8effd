"""GUI utility helpers."""

from .style_utils import apply_stylesheet
from .theme_settings import ThemePreference

__all__ = ["apply_stylesheet", "ThemePreference"]
