"""Theme token model.

A theme is a read-only table of design tokens grouped into sections
(colors, space, radii, ...). Tokens are looked up by key or by attribute:

    theme.colors["danger500"]
    theme.colors.danger500

A missing section or token raises MissingTokenError, which is a LookupError,
so a schema factory that references an absent token fails when it is bound.
Attribute lookups raise the MissingTokenAttributeError subclass, which is
also an AttributeError, so hasattr() and getattr() defaults keep working.
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, fields
from types import MappingProxyType
from typing import Any, Union

from styled_variants.exceptions import MissingTokenAttributeError, MissingTokenError

logger = logging.getLogger(__name__)

TokenValue = Union[str, int, float]

THEME_SECTIONS = (
    "colors",
    "space",
    "radii",
    "shadows",
    "borders",
    "font_sizes",
    "font_weights",
    "line_heights",
    "fonts",
)


class TokenScale(Mapping):
    """Read-only mapping from token name to value for one theme section."""

    __slots__ = ("_section", "_tokens")

    def __init__(self, section: str, tokens: Mapping[str, TokenValue] | None = None):
        self._section = section
        self._tokens = MappingProxyType(dict(tokens or {}))

    @property
    def section(self) -> str:
        """Name of the theme section this scale belongs to."""
        return self._section

    def __getitem__(self, token: str) -> TokenValue:
        try:
            return self._tokens[token]
        except KeyError:
            raise MissingTokenError(self._section, token) from None

    def __getattr__(self, token: str) -> TokenValue:
        if token.startswith("_"):
            raise AttributeError(token)
        try:
            return self._tokens[token]
        except KeyError:
            raise MissingTokenAttributeError(self._section, token) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __repr__(self) -> str:
        return f"TokenScale({self._section!r}, {len(self._tokens)} tokens)"


@dataclass(frozen=True, eq=False)
class Theme:
    """Immutable set of design tokens.

    Themes compare and hash by identity: a resolver bound to one theme
    object never sees tokens from another.
    """

    name: str
    colors: TokenScale
    space: TokenScale
    radii: TokenScale
    shadows: TokenScale
    borders: TokenScale
    font_sizes: TokenScale
    font_weights: TokenScale
    line_heights: TokenScale
    fonts: TokenScale

    def __post_init__(self):
        """Wrap plain dict sections in TokenScale."""
        for section in THEME_SECTIONS:
            value = getattr(self, section)
            if not isinstance(value, TokenScale):
                object.__setattr__(self, section, TokenScale(section, value))

    def __getattr__(self, name: str) -> TokenScale:
        # Only reached when normal lookup fails, i.e. for unknown sections
        if name.startswith("_"):
            raise AttributeError(name)
        raise MissingTokenAttributeError(name)

    def section(self, name: str) -> TokenScale:
        """Get a theme section by name.

        Args:
            name: Section name (e.g. "colors")

        Returns:
            The section's token scale

        Raises:
            MissingTokenError: If the section does not exist
        """
        if name not in THEME_SECTIONS:
            raise MissingTokenError(name)
        return getattr(self, name)

    @classmethod
    def from_dict(cls, name: str, data: Mapping[str, Mapping[str, Any]]) -> "Theme":
        """Build a theme from plain nested mappings (e.g. loaded from JSON).

        Sections absent from ``data`` are empty; unknown sections are ignored.

        Args:
            name: Theme name
            data: Mapping of section name to token mapping

        Returns:
            New Theme instance
        """
        unknown = [key for key in data if key not in THEME_SECTIONS]
        if unknown:
            logger.warning(f"Ignoring unknown theme sections for '{name}': {', '.join(unknown)}")
        return cls(name=name, **{section: data.get(section, {}) for section in THEME_SECTIONS})

    def to_dict(self) -> dict[str, dict[str, TokenValue]]:
        """Export the theme tokens as plain nested dicts."""
        return {
            f.name: dict(getattr(self, f.name)) for f in fields(self) if f.name in THEME_SECTIONS
        }

    def __repr__(self) -> str:
        return f"Theme({self.name!r})"
