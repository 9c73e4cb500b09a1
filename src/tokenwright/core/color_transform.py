"""
Linear sRGB color transforms for state and scale modifiers.

These blend directly in gamma-encoded sRGB, not in a perceptual space.
Tonal scales use OKLCH instead (see ``tonal_scale``).
"""

from __future__ import annotations

from typing import Literal

from .oklch import parse_hex, round_half_up, to_hex

TransformKind = Literal["lighten", "darken", "opacity", "none"]


def lighten(color: str, percent: float) -> str:
    """Move each channel ``percent`` of the way toward 255."""
    amount = percent / 100
    r, g, b = parse_hex(color)
    return to_hex(*(round_half_up(c + (255 - c) * amount) for c in (r, g, b)))


def darken(color: str, percent: float) -> str:
    """Scale each channel down by ``percent``."""
    amount = 1 - percent / 100
    r, g, b = parse_hex(color)
    return to_hex(*(round_half_up(c * amount) for c in (r, g, b)))


def apply_color_transform(color: str, transform: TransformKind, amount: float) -> str:
    """Apply a named modifier transform.

    ``opacity`` blends toward white exactly like ``lighten``; no alpha
    channel is produced. ``none`` returns the input unchanged.
    """
    if transform in ("lighten", "opacity"):
        return lighten(color, amount)
    if transform == "darken":
        return darken(color, amount)
    return color


__all__ = [
    "TransformKind",
    "apply_color_transform",
    "darken",
    "lighten",
]
