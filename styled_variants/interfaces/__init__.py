"""Interface protocols for Styled Variants."""

from .presenter import PresenterProtocol

__all__ = ["PresenterProtocol"]
