"""Base exception classes for Styled Variants."""


class StyledVariantsException(Exception):
    """Base exception for all Styled Variants errors.

    All custom exceptions in the styled_variants package should inherit
    from this base class for consistent error handling.
    """

    pass
