"""Merging of style descriptions."""

from collections.abc import Mapping
from typing import Any


def copy_style(style: Mapping[str, Any]) -> dict[str, Any]:
    """Copy a style description, copying nested mappings as plain dicts."""
    return {
        key: copy_style(value) if isinstance(value, Mapping) else value
        for key, value in style.items()
    }


def merge_styles(target: dict[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """Merge ``source`` into ``target`` in place and return ``target``.

    Scalars in ``source`` replace those in ``target``. Nested mappings are
    merged key by key, so two variant groups can each declare different
    variables inside the same block. ``source`` is never mutated and nothing
    from it is shared with ``target``.
    """
    for key, value in source.items():
        if isinstance(value, Mapping):
            existing = target.get(key)
            if isinstance(existing, dict):
                merge_styles(existing, value)
            else:
                target[key] = copy_style(value)
        else:
            target[key] = value
    return target
