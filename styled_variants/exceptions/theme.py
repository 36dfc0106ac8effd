"""Theme and token lookup exceptions."""

from .base import StyledVariantsException


class MissingTokenError(StyledVariantsException, KeyError):
    """Raised when a theme section or token does not exist."""

    def __init__(self, section: str, token: str | None = None):
        self.section = section
        self.token = token
        if token is None:
            message = f"Theme has no section '{section}'"
        else:
            message = f"Theme section '{section}' has no token '{token}'"
        super().__init__(message)

    def __str__(self) -> str:
        # KeyError quotes its argument; keep the message readable
        return str(self.args[0])


class ThemeNotFoundError(StyledVariantsException, KeyError):
    """Raised when a built-in theme name is unknown."""

    def __str__(self) -> str:
        return str(self.args[0])


class MissingTokenAttributeError(MissingTokenError, AttributeError):
    """Raised when a section or token is read as an attribute and does not exist.

    Being an AttributeError as well keeps hasattr() and getattr() defaults working.
    """
