"""
Foundation token scales for spacing, typography, radius, shadow, and motion.

Static non-color tokens that can be exported alongside the semantic color
tokens. Each category is a fixed, ordered table.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from pydantic import BaseModel, ConfigDict

from .ir.tokenspec import FoundationCategory


class FoundationToken(BaseModel):
    """One foundation token with its DTCG type."""

    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    dtcg_type: str
    description: str | None = None


class FoundationScale(BaseModel):
    """A category of foundation tokens."""

    model_config = ConfigDict(frozen=True)

    id: FoundationCategory
    label: str
    description: str
    tokens: tuple[FoundationToken, ...]


def _tokens(dtcg_type: str, rows: list[tuple[str, str]]) -> list[FoundationToken]:
    return [FoundationToken(name=name, value=value, dtcg_type=dtcg_type) for name, value in rows]


# =============================================================================
# Spacing
# =============================================================================

_SPACING: list[tuple[str, str]] = [
    ("spacing-0", "0px"),
    ("spacing-px", "1px"),
    ("spacing-0.5", "2px"),
    ("spacing-1", "4px"),
    ("spacing-1.5", "6px"),
    ("spacing-2", "8px"),
    ("spacing-2.5", "10px"),
    ("spacing-3", "12px"),
    ("spacing-4", "16px"),
    ("spacing-5", "20px"),
    ("spacing-6", "24px"),
    ("spacing-8", "32px"),
    ("spacing-10", "40px"),
    ("spacing-12", "48px"),
    ("spacing-16", "64px"),
    ("spacing-20", "80px"),
    ("spacing-24", "96px"),
]

# =============================================================================
# Typography
# =============================================================================

# (name, rem, px description)
_FONT_SIZES: list[tuple[str, str, str]] = [
    ("font-size-xs", "0.75rem", "12px - Extra small text"),
    ("font-size-sm", "0.875rem", "14px - Small text"),
    ("font-size-base", "1rem", "16px - Base/body text"),
    ("font-size-lg", "1.125rem", "18px - Large text"),
    ("font-size-xl", "1.25rem", "20px - Extra large text"),
    ("font-size-2xl", "1.5rem", "24px - 2X large heading"),
    ("font-size-3xl", "1.875rem", "30px - 3X large heading"),
    ("font-size-4xl", "2.25rem", "36px - 4X large heading"),
    ("font-size-5xl", "3rem", "48px - 5X large heading"),
]

_FONT_WEIGHTS: list[tuple[str, str]] = [
    ("font-weight-light", "300"),
    ("font-weight-regular", "400"),
    ("font-weight-medium", "500"),
    ("font-weight-semibold", "600"),
    ("font-weight-bold", "700"),
]

_LINE_HEIGHTS: list[tuple[str, str]] = [
    ("line-height-tight", "1.25"),
    ("line-height-snug", "1.375"),
    ("line-height-normal", "1.5"),
    ("line-height-relaxed", "1.625"),
    ("line-height-loose", "2"),
]

_LETTER_SPACINGS: list[tuple[str, str]] = [
    ("letter-spacing-tighter", "-0.05em"),
    ("letter-spacing-tight", "-0.025em"),
    ("letter-spacing-normal", "0em"),
    ("letter-spacing-wide", "0.025em"),
    ("letter-spacing-wider", "0.05em"),
]

# =============================================================================
# Radius, shadow, motion
# =============================================================================

_RADII: list[tuple[str, str]] = [
    ("radius-none", "0px"),
    ("radius-sm", "2px"),
    ("radius-md", "4px"),
    ("radius-lg", "8px"),
    ("radius-xl", "12px"),
    ("radius-2xl", "16px"),
    ("radius-3xl", "24px"),
    ("radius-full", "9999px"),
]

_SHADOWS: list[tuple[str, str]] = [
    ("shadow-none", "none"),
    ("shadow-xs", "0 1px 2px 0 rgba(0,0,0,0.05)"),
    ("shadow-sm", "0 1px 3px 0 rgba(0,0,0,0.1), 0 1px 2px -1px rgba(0,0,0,0.1)"),
    ("shadow-md", "0 4px 6px -1px rgba(0,0,0,0.1), 0 2px 4px -2px rgba(0,0,0,0.1)"),
    ("shadow-lg", "0 10px 15px -3px rgba(0,0,0,0.1), 0 4px 6px -4px rgba(0,0,0,0.1)"),
    ("shadow-xl", "0 20px 25px -5px rgba(0,0,0,0.1), 0 8px 10px -6px rgba(0,0,0,0.1)"),
    ("shadow-2xl", "0 25px 50px -12px rgba(0,0,0,0.25)"),
    ("shadow-inner", "inset 0 2px 4px 0 rgba(0,0,0,0.05)"),
]

_DURATIONS: list[tuple[str, str]] = [
    ("duration-instant", "0ms"),
    ("duration-fast", "100ms"),
    ("duration-normal", "200ms"),
    ("duration-slow", "300ms"),
    ("duration-slower", "500ms"),
    ("duration-slowest", "1000ms"),
]

_EASINGS: list[tuple[str, str]] = [
    ("easing-linear", "cubic-bezier(0, 0, 1, 1)"),
    ("easing-ease-in", "cubic-bezier(0.4, 0, 1, 1)"),
    ("easing-ease-out", "cubic-bezier(0, 0, 0.2, 1)"),
    ("easing-ease-in-out", "cubic-bezier(0.4, 0, 0.2, 1)"),
    ("easing-spring", "cubic-bezier(0.175, 0.885, 0.32, 1.275)"),
]


FOUNDATION_SCALES: dict[FoundationCategory, FoundationScale] = {
    FoundationCategory.SPACING: FoundationScale(
        id=FoundationCategory.SPACING,
        label="Spacing",
        description="Consistent spacing scale for margins, padding, and gaps",
        tokens=tuple(_tokens("dimension", _SPACING)),
    ),
    FoundationCategory.TYPOGRAPHY: FoundationScale(
        id=FoundationCategory.TYPOGRAPHY,
        label="Typography",
        description="Type scale, weights, and line heights",
        tokens=(
            *(
                FoundationToken(name=n, value=v, dtcg_type="dimension", description=d)
                for n, v, d in _FONT_SIZES
            ),
            *_tokens("fontWeight", _FONT_WEIGHTS),
            *_tokens("number", _LINE_HEIGHTS),
            *_tokens("dimension", _LETTER_SPACINGS),
        ),
    ),
    FoundationCategory.RADIUS: FoundationScale(
        id=FoundationCategory.RADIUS,
        label="Border Radius",
        description="Corner rounding scale from sharp to circular",
        tokens=tuple(_tokens("dimension", _RADII)),
    ),
    FoundationCategory.SHADOW: FoundationScale(
        id=FoundationCategory.SHADOW,
        label="Shadow & Elevation",
        description="Layered shadow scale for depth and elevation",
        tokens=tuple(_tokens("shadow", _SHADOWS)),
    ),
    FoundationCategory.MOTION: FoundationScale(
        id=FoundationCategory.MOTION,
        label="Motion",
        description="Duration and easing tokens for animations and transitions",
        tokens=(*_tokens("duration", _DURATIONS), *_tokens("cubicBezier", _EASINGS)),
    ),
}


def _scales(categories: Iterable[str]) -> list[FoundationScale]:
    result: list[FoundationScale] = []
    for category in categories:
        scale = FOUNDATION_SCALES.get(category)  # type: ignore[call-overload]
        if scale is not None:
            result.append(scale)
    return result


def get_foundation_tokens(category: str) -> list[FoundationToken]:
    """Tokens for one category; empty for an unknown category."""
    scale = FOUNDATION_SCALES.get(category)  # type: ignore[call-overload]
    return list(scale.tokens) if scale else []


def foundation_tokens_to_dtcg(categories: Iterable[str]) -> dict[str, Any]:
    """DTCG groups for the enabled categories, keyed by category id.

    Unknown categories are skipped.
    """
    dtcg: dict[str, Any] = {}
    for scale in _scales(categories):
        group: dict[str, Any] = {"$description": scale.description}
        for token in scale.tokens:
            entry: dict[str, Any] = {"$value": token.value, "$type": token.dtcg_type}
            if token.description:
                entry["$description"] = token.description
            group[token.name] = entry
        dtcg[scale.id.value] = group
    return dtcg


def foundation_tokens_to_css(categories: Iterable[str]) -> str:
    """A ``:root`` block of CSS custom properties for the enabled categories."""
    lines = [":root {"]
    for scale in _scales(categories):
        lines.append("")
        lines.append(f"  /* {scale.label} */")
        for token in scale.tokens:
            lines.append(f"  --{token.name}: {token.value};")
    lines.append("")
    lines.append("}")
    return "\n".join(lines) + "\n"
