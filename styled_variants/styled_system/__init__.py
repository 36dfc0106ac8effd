"""Variant-based styling: CSS variables, variant schemas and shared presets."""

from . import common
from .css_variables import CssVariable, CssVariables, create_css_variables
from .merge import copy_style, merge_styles
from .variants import Resolver, SchemaFactory, StyleVariants, build_schema, create_variants

__all__ = [
    "common",
    "CssVariable",
    "CssVariables",
    "create_css_variables",
    "copy_style",
    "merge_styles",
    "Resolver",
    "SchemaFactory",
    "StyleVariants",
    "build_schema",
    "create_variants",
]
