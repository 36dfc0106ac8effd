"""Data models for variant schemas."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

StyleDescription = dict[str, Any]
PropertyBag = Mapping[str, Any]


@dataclass(frozen=True)
class CompoundVariant:
    """Extra styles applied when several variant groups match at once.

    Example: a "danger" color scheme combined with a "large" size.
    """

    conditions: Mapping[str, Any]
    styles: Mapping[str, Any]

    def matches(self, selection: Mapping[str, Any]) -> bool:
        """Check whether every condition equals the selected variant value."""
        return all(selection.get(group) == value for group, value in self.conditions.items())


@dataclass(frozen=True)
class VariantSchema:
    """Validated base style, variant groups and defaults for one theme."""

    base: Mapping[str, Any]
    variants: Mapping[str, Mapping[Any, Mapping[str, Any]]]
    default_variants: Mapping[str, Any] = field(default_factory=dict)
    compound_variants: tuple[CompoundVariant, ...] = ()

    @property
    def group_names(self) -> tuple[str, ...]:
        """Variant group names in declaration order."""
        return tuple(self.variants)
