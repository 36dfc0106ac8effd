"""Base palettes for the built-in themes.

Each palette names a handful of base colors; ``build_theme`` expands them
into full shade and alpha scales.
"""

from typing import Literal

ThemeMode = Literal["light", "dark", "sakura"]

LIGHT_PALETTE = {
    # Brand / status base colors (step 500 of each scale)
    "primary": "#6366F1",  # Indigo 500
    "success": "#10B981",  # Emerald 500
    "warning": "#F59E0B",  # Amber 500
    "danger": "#EF4444",  # Red 500
    "info": "#3B82F6",  # Blue 500
    # Alpha overlays are built from this color
    "neutral": "#000000",
    # Surfaces
    "background": "#F9FAFB",  # Gray 50
    "surface": "#FFFFFF",  # White
    "border": "#E5E7EB",  # Gray 200
    # Text
    "foreground": "#111827",  # Gray 900
    "muted_foreground": "#6B7280",  # Gray 500
    "primary_foreground": "#FFFFFF",
}

DARK_PALETTE = {
    "primary": "#818CF8",  # Indigo 400
    "success": "#10B981",
    "warning": "#F59E0B",
    "danger": "#EF4444",
    "info": "#3B82F6",
    "neutral": "#FFFFFF",
    "background": "#0F172A",  # Slate 900
    "surface": "#1E293B",  # Slate 800
    "border": "#475569",  # Slate 600
    "foreground": "#F1F5F9",  # Slate 100
    "muted_foreground": "#94A3B8",  # Slate 400
    "primary_foreground": "#FFFFFF",
}

SAKURA_PALETTE = {
    "primary": "#D946A6",  # Sakura Pink
    "success": "#4CAF50",  # Natural Green
    "warning": "#FF9800",  # Autumn Orange
    "danger": "#E53935",  # Red Torii
    "info": "#1976D2",  # Sky Blue
    "neutral": "#2C1810",  # Sumi Ink
    "background": "#FFF8F5",  # Washi Paper White
    "surface": "#FFFBF7",  # Soft Cream
    "border": "#E8D5D9",  # Soft Pink-Gray
    "foreground": "#2C1810",
    "muted_foreground": "#8B7355",  # Tea Brown
    "primary_foreground": "#FFFFFF",
}

SHADOWS = {
    "light": {
        "sm": "0 1px 3px rgba(0, 0, 0, 0.1)",
        "md": "0 4px 6px rgba(0, 0, 0, 0.1)",
        "lg": "0 10px 15px rgba(0, 0, 0, 0.1)",
        "badge": "0 1px 1px rgba(0, 0, 0, 0.08)",
    },
    "dark": {
        "sm": "0 1px 3px rgba(0, 0, 0, 0.3)",
        "md": "0 4px 6px rgba(0, 0, 0, 0.3)",
        "lg": "0 10px 15px rgba(0, 0, 0, 0.3)",
        "badge": "0 1px 1px rgba(0, 0, 0, 0.24)",
    },
    "sakura": {
        "sm": "0 1px 2px rgba(44, 24, 16, 0.08)",
        "md": "0 2px 4px rgba(44, 24, 16, 0.08)",
        "lg": "0 4px 8px rgba(44, 24, 16, 0.08)",
        "badge": "0 1px 1px rgba(44, 24, 16, 0.06)",
    },
}

PALETTES: dict[str, dict[str, str]] = {
    "light": LIGHT_PALETTE,
    "dark": DARK_PALETTE,
    "sakura": SAKURA_PALETTE,
}

# ============== SHARED SCALES (4px/8px grid) ==============

SPACE = {
    "none": "0px",
    "xxxs": "2px",
    "xxs": "4px",
    "xs": "8px",
    "sm": "12px",
    "md": "16px",
    "lg": "24px",
    "xl": "32px",
    "xxl": "48px",
}

RADII = {
    "none": "0px",
    "sm": "4px",
    "md": "6px",
    "lg": "8px",
    "pill": "9999px",
}

BORDERS = {
    "normal": "1px solid",
    "heavy": "2px solid",
}

FONT_SIZES = {
    "xs": "11px",  # Status bar, badges
    "sm": "12px",  # Helper text, captions
    "md": "14px",  # Default body text
    "lg": "16px",  # Section headers
    "xl": "20px",  # Dialog headers
    "xxl": "24px",  # Main window title
}

FONT_WEIGHTS = {
    "regular": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
}

LINE_HEIGHTS = {
    "tight": "1.25",  # Headings
    "normal": "1.5",  # Body
    "relaxed": "1.75",  # Japanese text
}

FONTS = {
    "main": "'Segoe UI', 'SF Pro Display', -apple-system, BlinkMacSystemFont, sans-serif",
    "japanese": "'Noto Sans JP', 'Yu Gothic', 'Meiryo', sans-serif",
    "mono": "'JetBrains Mono', 'Consolas', 'SF Mono', monospace",
}
