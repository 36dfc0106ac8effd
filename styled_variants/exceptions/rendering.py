"""Style rendering exceptions."""

from .base import StyledVariantsException


class RenderError(StyledVariantsException):
    """Raised when a style value cannot be serialised."""

    pass
