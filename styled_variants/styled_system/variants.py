"""Variant schema builder and resolver.

A component describes its styles with a factory that receives the theme:

    badge = create_variants(lambda theme: {
        "base": {"color": vars.accent, "border-radius": theme.radii.sm},
        "variants": {
            "color_scheme": {
                "primary": {vars.accent: theme.colors.primary500},
                "danger": {vars.accent: theme.colors.danger500},
            },
        },
        "default_variants": {"color_scheme": "primary"},
    })

Binding a theme runs the factory (once per theme) and validates the result:

    resolver = badge.bind(theme)
    style = resolver.apply_variants(props)
    forwarded = resolver.filter_props(props)
"""

import logging
import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any

from styled_variants.exceptions import ConfigurationError
from styled_variants.models import (
    CompoundVariant,
    PropertyBag,
    StyleDescription,
    Theme,
    VariantSchema,
)

from .merge import copy_style, merge_styles

logger = logging.getLogger(__name__)

SchemaFactory = Callable[[Theme], Mapping[str, Any]]

_SCHEMA_KEYS = frozenset({"base", "variants", "default_variants", "compound_variants"})
_KEY_ALIASES = {
    "defaultVariants": "default_variants",
    "compoundVariants": "compound_variants",
}


def _normalise_value(value: Any) -> Any:
    """Map boolean variant values onto the "true"/"false" value names."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return value


def _fail(message: str) -> ConfigurationError:
    logger.error(message)
    return ConfigurationError(message)


def build_schema(definition: Mapping[str, Any]) -> VariantSchema:
    """Validate a factory result and freeze it into a VariantSchema.

    Args:
        definition: Mapping with "base", "variants", "default_variants"
            and optionally "compound_variants"

    Returns:
        Validated, read-only VariantSchema

    Raises:
        ConfigurationError: If the definition is internally inconsistent
    """
    if not isinstance(definition, Mapping):
        raise _fail(f"Variant factory must return a mapping, got {type(definition).__name__}")

    normalised = {_KEY_ALIASES.get(key, key): value for key, value in definition.items()}
    unknown = set(normalised) - _SCHEMA_KEYS
    if unknown:
        raise _fail(f"Unknown variant schema keys: {', '.join(sorted(unknown))}")

    base = normalised.get("base") or {}
    if not isinstance(base, Mapping):
        raise _fail("Variant schema 'base' must be a mapping")

    declared = normalised.get("variants") or {}
    if not isinstance(declared, Mapping):
        raise _fail("Variant schema 'variants' must be a mapping of group name to values")

    variants: dict[str, Mapping[Any, Mapping[str, Any]]] = {}
    for group_name, group in declared.items():
        if not isinstance(group, Mapping):
            raise _fail(f"Variant group '{group_name}' must be a mapping")
        values = {}
        for value_name, styles in group.items():
            if not isinstance(styles, Mapping):
                raise _fail(f"Variant '{group_name}.{value_name}' must map to a style mapping")
            key = _normalise_value(value_name)
            if key in values:
                raise _fail(f"Variant group '{group_name}' declares '{key}' more than once")
            values[key] = MappingProxyType(copy_style(styles))
        variants[group_name] = MappingProxyType(values)

    default_variants = normalised.get("default_variants") or {}
    if not isinstance(default_variants, Mapping):
        raise _fail("Variant schema 'default_variants' must be a mapping")

    defaults = {}
    for group_name, value in default_variants.items():
        if group_name not in variants:
            raise _fail(f"Default given for undeclared variant group '{group_name}'")
        value = _normalise_value(value)
        if value not in variants[group_name]:
            raise _fail(
                f"Default '{value}' for variant group '{group_name}' is not one of: "
                f"{', '.join(map(str, variants[group_name]))}"
            )
        defaults[group_name] = value

    compounds = []
    for entry in normalised.get("compound_variants") or ():
        if not isinstance(entry, Mapping) or not isinstance(entry.get("conditions"), Mapping):
            raise _fail("Compound variants must be mappings with 'conditions' and 'styles'")
        conditions = {}
        for group_name, value in entry["conditions"].items():
            value = _normalise_value(value)
            if group_name not in variants or value not in variants[group_name]:
                raise _fail(f"Compound variant condition {group_name}={value!r} is not declared")
            conditions[group_name] = value
        styles = entry.get("styles") or {}
        if not isinstance(styles, Mapping):
            raise _fail("Compound variant 'styles' must be a style mapping")
        compounds.append(
            CompoundVariant(
                conditions=MappingProxyType(conditions),
                styles=MappingProxyType(copy_style(styles)),
            )
        )

    return VariantSchema(
        base=MappingProxyType(copy_style(base)),
        variants=MappingProxyType(variants),
        default_variants=MappingProxyType(defaults),
        compound_variants=tuple(compounds),
    )


class Resolver:
    """A variant schema bound to one theme.

    Both methods are pure: they never mutate the schema or the props and
    never raise for any property bag.
    """

    def __init__(self, theme: Theme, schema: VariantSchema):
        """Initialize the resolver.

        Args:
            theme: Theme the schema was built from
            schema: Validated variant schema
        """
        self._theme = theme
        self._schema = schema
        self._variant_keys = frozenset(schema.group_names)

    @property
    def theme(self) -> Theme:
        """Theme this resolver is bound to."""
        return self._theme

    @property
    def schema(self) -> VariantSchema:
        """Underlying variant schema."""
        return self._schema

    @property
    def variant_keys(self) -> frozenset[str]:
        """Names of the declared variant groups."""
        return self._variant_keys

    def selection(self, props: PropertyBag | None = None) -> dict[str, Any]:
        """Get the effective value of every variant group for ``props``.

        A missing or None prop falls back to the group's default. Groups
        with neither are omitted.
        """
        props = props or {}
        selected = {}
        for group_name in self._schema.group_names:
            value = props.get(group_name)
            if value is None:
                value = self._schema.default_variants.get(group_name)
            if value is not None:
                selected[group_name] = _normalise_value(value)
        return selected

    def apply_variants(self, props: PropertyBag | None = None) -> StyleDescription:
        """Resolve ``props`` into a concrete style description.

        Starts from a copy of the base style, merges each group's selected
        variant in declaration order, then any matching compound variants.
        A value the group does not declare contributes nothing.

        Args:
            props: Caller's property bag

        Returns:
            New style description dict
        """
        style = copy_style(self._schema.base)
        selected = self.selection(props)

        for group_name, group in self._schema.variants.items():
            if group_name not in selected:
                continue
            try:
                contribution = group.get(selected[group_name])
            except TypeError:
                # Unhashable prop value can't name a variant
                contribution = None
            if contribution is None:
                logger.debug(f"No '{group_name}' variant named {selected[group_name]!r}")
                continue
            merge_styles(style, contribution)

        for compound in self._schema.compound_variants:
            if compound.matches(selected):
                merge_styles(style, compound.styles)

        return style

    def filter_props(self, props: PropertyBag | None = None) -> dict[str, Any]:
        """Drop variant-selection keys from ``props``.

        Args:
            props: Caller's property bag

        Returns:
            New dict with the remaining props in their original order
        """
        return {key: value for key, value in (props or {}).items() if key not in self._variant_keys}

    def __repr__(self) -> str:
        return f"Resolver(theme={self._theme!r}, variants={list(self._schema.group_names)})"


class StyleVariants:
    """Reusable variant definition that builds one Resolver per theme.

    The factory is called at most once per theme object; the resulting
    resolver is cached and reused for every later call with that theme.
    """

    def __init__(self, factory: SchemaFactory):
        """Initialize with a schema factory.

        Args:
            factory: Callable receiving a Theme and returning the schema mapping
        """
        if not callable(factory):
            raise _fail("create_variants() needs a callable factory")
        self._factory = factory
        self._resolvers: dict[Theme, Resolver] = {}
        self._lock = threading.RLock()

    def bind(self, theme: Theme) -> Resolver:
        """Get the resolver for ``theme``, building the schema on first use.

        Args:
            theme: Theme to bind

        Returns:
            Cached Resolver for this theme

        Raises:
            ConfigurationError: If the factory result is inconsistent
            MissingTokenError: If the factory references an absent token
        """
        with self._lock:
            resolver = self._resolvers.get(theme)
            if resolver is None:
                logger.debug(f"Building variant schema for theme {theme!r}")
                schema = build_schema(self._factory(theme))
                resolver = Resolver(theme, schema)
                self._resolvers[theme] = resolver
            return resolver

    def resolve(
        self, theme: Theme, props: PropertyBag | None = None
    ) -> tuple[StyleDescription, dict[str, Any]]:
        """Resolve ``props`` against ``theme`` into (style, forwarded props)."""
        resolver = self.bind(theme)
        return resolver.apply_variants(props), resolver.filter_props(props)

    def apply_variants(
        self, props: PropertyBag | None = None
    ) -> Callable[[Theme], StyleDescription]:
        """Defer resolution until a theme is available.

        Returns:
            Callable taking a Theme and returning the resolved style
        """
        return lambda theme: self.bind(theme).apply_variants(props)


def create_variants(factory: SchemaFactory, *, theme: Theme | None = None) -> StyleVariants:
    """Create a reusable variant definition.

    Args:
        factory: Callable receiving a Theme and returning a mapping with
            "base", "variants", "default_variants" and optionally
            "compound_variants"
        theme: Optional theme to bind eagerly, so misconfiguration surfaces
            immediately

    Returns:
        StyleVariants; call ``bind(theme)`` to get a Resolver
    """
    styles = StyleVariants(factory)
    if theme is not None:
        styles.bind(theme)
    return styles
