"""Serialise style descriptions into CSS rule text."""

import logging
import re
from collections.abc import Callable, Mapping
from typing import Any

from styled_variants.config import DEFAULT_CONFIG, StyleSystemConfig
from styled_variants.exceptions import RenderError

logger = logging.getLogger(__name__)

# A bare custom property reference, not already wrapped in var(...)
_BARE_VARIABLE = re.compile(r"(?<![\w(-])(--[A-Za-z0-9_-]+)")
_VAR_FUNCTION = re.compile(r"var\((--[A-Za-z0-9_-]+)\)")


def is_variable(key: Any) -> bool:
    """Check whether a style key declares a CSS custom property."""
    return isinstance(key, str) and key.startswith("--")


def nested_selector(selector: str, key: str) -> str:
    """Combine a parent selector with a nested style key.

    ``"&:hover"`` and ``":hover"`` attach to the parent; anything else is a
    descendant selector.
    """
    if "&" in key:
        return key.replace("&", selector)
    if key.startswith(":"):
        return f"{selector}{key}"
    return f"{selector} {key}"


def format_value(prop: str, value: Any, config: StyleSystemConfig) -> str:
    """Format one property value as CSS text.

    Raises:
        RenderError: If the value is not a string or a number
    """
    if isinstance(value, bool) or not isinstance(value, (str, int, float)):
        raise RenderError(f"Cannot render value {value!r} for property '{prop}'")
    if isinstance(value, str):
        return value
    if value == 0 or prop in config.unitless_properties or is_variable(prop):
        return str(value)
    return f"{value}px"


def render_rules(
    style: Mapping[str, Any],
    selector: str,
    config: StyleSystemConfig,
    transform: Callable[[str, str], str] | None = None,
    include: Callable[[str], bool] | None = None,
) -> str:
    """Render a style description and its nested blocks as rule text.

    Args:
        style: Style description
        selector: Selector for the top-level block
        config: Style system configuration
        transform: Optional hook applied to each (property, text) value
        include: Optional predicate deciding which properties are emitted

    Returns:
        Rule text; blocks without declarations are omitted
    """
    lines = []
    nested = []
    for prop, value in style.items():
        if isinstance(value, Mapping):
            child = nested_selector(selector, prop)
            nested.append(render_rules(value, child, config, transform, include))
            continue
        if value is None:
            continue
        if include is not None and not include(prop):
            continue
        text = format_value(prop, value, config)
        if transform is not None:
            text = transform(prop, text)
        lines.append(f"  {prop}: {text};")

    blocks = []
    if lines:
        blocks.append(selector + " {\n" + "\n".join(lines) + "\n}")
    blocks.extend(block for block in nested if block)
    return "\n\n".join(blocks)


def _wrap_variables(prop: str, text: str) -> str:
    return _BARE_VARIABLE.sub(r"var(\1)", text)


def render_css(
    style: Mapping[str, Any], selector: str = ".root", config: StyleSystemConfig | None = None
) -> str:
    """Render a style description as CSS.

    Variable declarations are emitted as custom properties and bare variable
    references are wrapped in ``var(...)``.

    Example:
        render_css({"--sv-accent-1": "red", "color": "--sv-accent-1"}, ".badge")
        # .badge {
        #   --sv-accent-1: red;
        #   color: var(--sv-accent-1);
        # }
    """
    return render_rules(style, selector, config or DEFAULT_CONFIG, transform=_wrap_variables)


def resolve_css_variables(
    style: Mapping[str, Any], inherited: Mapping[str, str] | None = None
) -> dict[str, Any]:
    """Substitute declared variable values into the references that use them.

    Declarations are removed from the result. A declaration made inside a
    nested block only applies within that block. References to undeclared
    variables are left untouched.

    Args:
        style: Style description with variable declarations
        inherited: Declarations visible from enclosing blocks

    Returns:
        New style description without custom properties
    """
    declarations = dict(inherited or {})

    def substitute(text: str) -> str:
        text = _VAR_FUNCTION.sub(lambda m: declarations.get(m.group(1), m.group(0)), text)
        return _BARE_VARIABLE.sub(lambda m: declarations.get(m.group(1), m.group(0)), text)

    for key, value in style.items():
        if is_variable(key) and not isinstance(value, Mapping) and value is not None:
            declarations[key] = substitute(str(value))

    resolved: dict[str, Any] = {}
    for key, value in style.items():
        if is_variable(key):
            continue
        if isinstance(value, Mapping):
            resolved[key] = resolve_css_variables(value, declarations)
        elif isinstance(value, str):
            resolved[key] = substitute(value)
        else:
            resolved[key] = value
    return resolved
