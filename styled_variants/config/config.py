"""Configuration classes for Styled Variants."""

import re
from dataclasses import dataclass, field

_PREFIX_PATTERN = re.compile(r"^[a-z][a-z0-9-]*$")


@dataclass(frozen=True)
class StyleSystemConfig:
    """Immutable configuration for the style system.

    All configuration is frozen (immutable) so that variable sets and
    renderers created from it can be shared freely.
    """

    # CSS variable naming
    variable_prefix: str = "sv"  # Generated names look like --sv-accent-3

    # Theme settings
    default_theme: str = "light"

    # Rendering settings
    unitless_properties: frozenset[str] = field(
        default_factory=lambda: frozenset(
            {
                "flex",
                "flex-grow",
                "flex-shrink",
                "font-weight",
                "line-height",
                "opacity",
                "order",
                "z-index",
            }
        )
    )
    # Properties understood by Qt style sheets; anything else is skipped for QSS
    qss_properties: frozenset[str] = field(
        default_factory=lambda: frozenset(
            {
                "background",
                "background-color",
                "border",
                "border-color",
                "border-style",
                "border-width",
                "border-radius",
                "border-top",
                "border-right",
                "border-bottom",
                "border-left",
                "color",
                "font",
                "font-family",
                "font-size",
                "font-style",
                "font-weight",
                "height",
                "margin",
                "margin-top",
                "margin-right",
                "margin-bottom",
                "margin-left",
                "max-height",
                "max-width",
                "min-height",
                "min-width",
                "outline",
                "padding",
                "padding-top",
                "padding-right",
                "padding-bottom",
                "padding-left",
                "selection-background-color",
                "selection-color",
                "text-align",
                "text-decoration",
                "width",
            }
        )
    )

    def __post_init__(self):
        """Normalise collection inputs and validate the variable prefix."""
        if not _PREFIX_PATTERN.match(self.variable_prefix):
            raise ValueError(
                "variable_prefix must be lowercase alphanumeric or '-', "
                f"got {self.variable_prefix!r}"
            )
        # Accept lists/sets from callers (e.g. parsed JSON)
        if not isinstance(self.unitless_properties, frozenset):
            object.__setattr__(self, "unitless_properties", frozenset(self.unitless_properties))
        if not isinstance(self.qss_properties, frozenset):
            object.__setattr__(self, "qss_properties", frozenset(self.qss_properties))
