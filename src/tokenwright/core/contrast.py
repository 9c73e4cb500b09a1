"""
WCAG 2.x contrast and accessibility evaluation.

Relative luminance uses the WCAG 2.0 linearization (threshold 0.03928),
which differs slightly from the sRGB constant used by the OKLCH converter.
"""

from __future__ import annotations

from typing import NamedTuple

from .oklch import parse_hex

WHITE = "#FFFFFF"
BLACK = "#000000"

# Fixed foreground colors for explicit light/dark text strategies
TEXT_LIGHT = "#FFFFFF"
TEXT_DARK = "#09090B"

# WCAG AA for normal-size text
MIN_CONTRAST_RATIO = 4.5


class AccessibilityLevel(NamedTuple):
    """Independent WCAG threshold checks for a contrast ratio."""

    normal_aa: bool
    normal_aaa: bool
    large_aa: bool
    large_aaa: bool


def _linear_channel(c: int) -> float:
    v = c / 255.0
    if v <= 0.03928:
        return v / 12.92
    return ((v + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str) -> float:
    """WCAG relative luminance of a hex color (0 for black, 1 for white)."""
    r, g, b = parse_hex(color)
    return 0.2126 * _linear_channel(r) + 0.7152 * _linear_channel(g) + 0.0722 * _linear_channel(b)


def contrast_ratio(color_a: str, color_b: str) -> float:
    """Contrast ratio between two colors, in [1, 21]. Symmetric in its arguments."""
    l1 = relative_luminance(color_a)
    l2 = relative_luminance(color_b)
    lighter = max(l1, l2)
    darker = min(l1, l2)
    return (lighter + 0.05) / (darker + 0.05)


def accessibility_level(ratio: float) -> AccessibilityLevel:
    """Classify a contrast ratio against the four WCAG text thresholds."""
    return AccessibilityLevel(
        normal_aa=ratio >= 4.5,
        normal_aaa=ratio >= 7.0,
        large_aa=ratio >= 3.0,
        large_aaa=ratio >= 4.5,
    )


def best_text_color(bg: str) -> str:
    """Pure white or pure black, whichever contrasts more with ``bg``.

    White wins only when strictly better; ties go to black.
    """
    white_contrast = contrast_ratio(bg, WHITE)
    black_contrast = contrast_ratio(bg, BLACK)
    return WHITE if white_contrast > black_contrast else BLACK


def resolve_text_color(mode: str, bg: str) -> str:
    """Foreground color for a text strategy (auto, light or dark) on a background."""
    if mode == "light":
        return TEXT_LIGHT
    if mode == "dark":
        return TEXT_DARK
    return best_text_color(bg)


__all__ = [
    "AccessibilityLevel",
    "MIN_CONTRAST_RATIO",
    "TEXT_DARK",
    "TEXT_LIGHT",
    "accessibility_level",
    "best_text_color",
    "contrast_ratio",
    "relative_luminance",
    "resolve_text_color",
]
