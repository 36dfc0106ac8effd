"""CSS custom property (variable) naming.

A component declares its variables once, at definition time:

    vars = create_css_variables("accent", "bg")

Each name maps to a process-unique identifier such as ``--sv-accent-3``.
Variant branches use the identifier as a key to set a value, and the base
style uses it as a value to reference it:

    base = {"color": vars.accent}
    variants = {"color_scheme": {"danger": {vars.accent: theme.colors.danger500}}}
"""

import itertools
import logging
import re
import threading
from collections.abc import Iterator, Mapping

from styled_variants.config import DEFAULT_CONFIG, StyleSystemConfig
from styled_variants.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

_counter = itertools.count(1)
_counter_lock = threading.Lock()


class CssVariable(str):
    """Generated CSS variable identifier that remembers its logical name."""

    def __new__(cls, identifier: str, name: str | None = None):
        instance = super().__new__(cls, identifier)
        instance.name = name or identifier
        return instance

    def __getnewargs__(self):
        return str(self), self.name

    def var(self, fallback: str | None = None) -> str:
        """Return the ``var(...)`` reference form used in CSS text."""
        if fallback is None:
            return f"var({self})"
        return f"var({self}, {fallback})"


class CssVariables(Mapping):
    """Immutable mapping of logical name to CssVariable, with attribute access."""

    def __init__(self, variables: dict[str, CssVariable]):
        self._variables = dict(variables)

    def __getitem__(self, name: str) -> CssVariable:
        return self._variables[name]

    def __getattr__(self, name: str) -> CssVariable:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._variables[name]
        except KeyError:
            raise AttributeError(f"No CSS variable named '{name}'") from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def __repr__(self) -> str:
        return f"CssVariables({self._variables!r})"


def _next_id() -> int:
    with _counter_lock:
        return next(_counter)


def create_css_variables(*names: str, config: StyleSystemConfig | None = None) -> CssVariables:
    """Allocate a set of uniquely named CSS variables.

    Args:
        *names: Logical variable names (e.g. "accent", "bg")
        config: Style system configuration (uses defaults if None)

    Returns:
        CssVariables mapping each logical name to its generated identifier

    Raises:
        ConfigurationError: If a name is duplicated or not a valid identifier
    """
    config = config or DEFAULT_CONFIG

    seen = set()
    for name in names:
        if not isinstance(name, str) or not _NAME_PATTERN.match(name):
            logger.error(f"Invalid CSS variable name: {name!r}")
            raise ConfigurationError(f"Invalid CSS variable name: {name!r}")
        if name in seen:
            logger.error(f"Duplicate CSS variable name: {name!r}")
            raise ConfigurationError(f"Duplicate CSS variable name: {name!r}")
        seen.add(name)

    variables = {
        name: CssVariable(f"--{config.variable_prefix}-{name}-{_next_id()}", name) for name in names
    }
    logger.debug(f"Allocated CSS variables: {', '.join(variables.values())}")
    return CssVariables(variables)
