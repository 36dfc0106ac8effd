"""Custom exceptions for Styled Variants."""

from .base import StyledVariantsException
from .configuration import ConfigurationError
from .rendering import RenderError
from .theme import MissingTokenAttributeError, MissingTokenError, ThemeNotFoundError

__all__ = [
    "StyledVariantsException",
    "ConfigurationError",
    "MissingTokenError",
    "MissingTokenAttributeError",
    "ThemeNotFoundError",
    "RenderError",
]
