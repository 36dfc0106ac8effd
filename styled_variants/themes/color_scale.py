"""Derive shade and alpha scales from a single base color.

Shades lighter than 500 are mixed towards white, darker shades towards black.
Alpha scales keep the base color and vary only the opacity, which lets
translucent backgrounds adapt to whatever surface they sit on.
"""

import re

SHADE_STEPS = (25, 50, 100, 150, 200, 300, 400, 500, 600, 700, 750, 800, 850, 900, 950)

# Fraction of white (below 500) or black (above 500) mixed into the base color
_LIGHTEN = {25: 0.95, 50: 0.9, 100: 0.8, 150: 0.7, 200: 0.6, 300: 0.45, 400: 0.25}
_DARKEN = {600: 0.15, 700: 0.3, 750: 0.38, 800: 0.45, 850: 0.55, 900: 0.65, 950: 0.75}

_ALPHA = {
    25: 0.02,
    50: 0.03,
    100: 0.07,
    150: 0.11,
    200: 0.15,
    300: 0.28,
    400: 0.41,
    500: 0.53,
    600: 0.62,
    700: 0.73,
    750: 0.78,
    800: 0.81,
    850: 0.84,
    900: 0.87,
    950: 0.92,
}

_HEX_PATTERN = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_hex(color: str) -> tuple[int, int, int]:
    """Parse a #RGB or #RRGGBB color into an (r, g, b) tuple.

    Raises:
        ValueError: If the string is not a hex color
    """
    match = _HEX_PATTERN.match(color.strip())
    if not match:
        raise ValueError(f"Not a hex color: {color!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)


def to_hex(rgb: tuple[int, int, int]) -> str:
    """Format an (r, g, b) tuple as #RRGGBB."""
    return "#{:02X}{:02X}{:02X}".format(*rgb)


def _mix(rgb: tuple[int, int, int], target: int, amount: float) -> tuple[int, int, int]:
    r, g, b = (round(channel + (target - channel) * amount) for channel in rgb)
    return r, g, b


def shade_scale(name: str, base: str) -> dict[str, str]:
    """Build a {name}{step} -> hex color scale around ``base`` (step 500).

    Example:
        shade_scale("danger", "#EF4444")["danger500"] == "#EF4444"
    """
    rgb = parse_hex(base)
    scale = {}
    for step in SHADE_STEPS:
        if step in _LIGHTEN:
            scale[f"{name}{step}"] = to_hex(_mix(rgb, 255, _LIGHTEN[step]))
        elif step in _DARKEN:
            scale[f"{name}{step}"] = to_hex(_mix(rgb, 0, _DARKEN[step]))
        else:
            scale[f"{name}{step}"] = to_hex(rgb)
    return scale


def alpha_scale(name: str, base: str) -> dict[str, str]:
    """Build a {name}_alpha{step} -> rgba() color scale from ``base``."""
    r, g, b = parse_hex(base)
    return {
        f"{name}_alpha{step}": f"rgba({r}, {g}, {b}, {alpha})" for step, alpha in _ALPHA.items()
    }
