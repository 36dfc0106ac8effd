"""Styled widget classes."""

from .badge import Badge
from .styled_label import StyledLabel
from .text import Text

__all__ = ["Badge", "StyledLabel", "Text"]
