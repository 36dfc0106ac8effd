"""Serialise style descriptions into Qt style sheets (QSS).

Qt has no custom properties, so variables are substituted before
rendering, and properties Qt does not understand are dropped.
"""

import logging
from collections.abc import Mapping
from typing import Any

from styled_variants.config import DEFAULT_CONFIG, StyleSystemConfig

from .css import render_rules, resolve_css_variables

logger = logging.getLogger(__name__)


def render_qss(
    style: Mapping[str, Any], selector: str = "QWidget", config: StyleSystemConfig | None = None
) -> str:
    """Render a style description as a Qt style sheet.

    Args:
        style: Style description (may contain variable declarations)
        selector: QSS selector (e.g. "QLabel#badge")
        config: Style system configuration (uses defaults if None)

    Returns:
        QSS text suitable for QWidget.setStyleSheet()
    """
    config = config or DEFAULT_CONFIG
    skipped: list[str] = []

    def supported(prop: str) -> bool:
        if prop in config.qss_properties:
            return True
        skipped.append(prop)
        return False

    qss = render_rules(resolve_css_variables(style), selector, config, include=supported)
    if skipped:
        logger.debug(f"Skipped properties unsupported by Qt for {selector}: {', '.join(skipped)}")
    return qss
