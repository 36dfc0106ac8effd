"""Data models for Styled Variants."""

from .theme import THEME_SECTIONS, Theme, TokenScale, TokenValue
from .variants import CompoundVariant, PropertyBag, StyleDescription, VariantSchema

__all__ = [
    "Theme",
    "TokenScale",
    "TokenValue",
    "THEME_SECTIONS",
    "VariantSchema",
    "CompoundVariant",
    "StyleDescription",
    "PropertyBag",
]
