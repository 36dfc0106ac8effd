"""Schema and variable-set configuration exceptions."""

from .base import StyledVariantsException


class ConfigurationError(StyledVariantsException):
    """Raised when a variant schema or variable set is internally inconsistent.

    Only raised while a schema is being built, never while resolving props.
    """

    pass
