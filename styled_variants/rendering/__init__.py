"""Renderers turning resolved style descriptions into style sheet text."""

from .css import render_css, resolve_css_variables
from .qss import render_qss

__all__ = ["render_css", "render_qss", "resolve_css_variables"]
