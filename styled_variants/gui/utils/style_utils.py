"""Utility functions for widget styling."""

from PyQt6.QtWidgets import QWidget


def apply_stylesheet(widget: QWidget, stylesheet: str, *, force: bool = False) -> bool:
    """Set a widget's stylesheet and re-polish it when anything changed.

    Re-polishing makes Qt re-evaluate the new rules together with the
    dynamic properties set through setProperty(). An unchanged stylesheet is
    left alone unless ``force`` is set, e.g. after forwarded properties changed.

    Args:
        widget: The widget to style
        stylesheet: Rendered QSS text
        force: Re-polish even if the stylesheet text is unchanged

    Returns:
        True if the widget was restyled
    """
    if not force and widget.styleSheet() == stylesheet:
        return False

    widget.setStyleSheet(stylesheet)
    if style := widget.style():
        style.unpolish(widget)
        style.polish(widget)
    return True
