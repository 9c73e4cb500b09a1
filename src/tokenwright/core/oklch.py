"""
Pure-Python sRGB <-> OKLCH conversion.

Converts hex colors to and from OKLCH using Björn Ottosson's Oklab
matrices. The pipeline goes straight from linear sRGB to LMS without an
XYZ step. No external color libraries required.

    hex -> sRGB -> linear RGB -> LMS (M1) -> cbrt -> Oklab (M2) -> OKLCH
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple

from .errors import make_color_error

Vec3 = tuple[float, float, float]
Mat3 = tuple[Vec3, Vec3, Vec3]

# M1: linear sRGB -> approximate cone response (LMS)
_LINEAR_SRGB_TO_LMS: Mat3 = (
    (0.4122214708, 0.5363325363, 0.0514459929),
    (0.2119034982, 0.6806995451, 0.1073969566),
    (0.0883024619, 0.2817188376, 0.6299787005),
)

# M1 inverse
_LMS_TO_LINEAR_SRGB: Mat3 = (
    (4.0767416621, -3.3077115913, 0.2309699292),
    (-1.2684380046, 2.6097574011, -0.3413193965),
    (-0.0041960863, -0.7034186147, 1.7076147010),
)

# M2: LMS' (cube root of LMS) -> Oklab
_LMS_PRIME_TO_OKLAB: Mat3 = (
    (0.2104542553, 0.7936177850, -0.0040720468),
    (1.9779984951, -2.4285922050, 0.4505937099),
    (0.0259040371, 0.7827717662, -0.8086757660),
)

# M2 inverse
_OKLAB_TO_LMS_PRIME: Mat3 = (
    (1.0, 0.3963377774, 0.2158037573),
    (1.0, -0.1055613458, -0.0638541728),
    (1.0, -0.0894841775, -1.2914855480),
)

SRGB_GAMMA = 2.4
SRGB_LINEAR_THRESHOLD = 0.04045
SRGB_LINEAR_SCALE = 12.92
_SRGB_ENCODE_THRESHOLD = 0.0031308

_STRICT_HEX = re.compile(r"^#[0-9A-Fa-f]{6}$")
_HEX_DIGITS = re.compile(r"^[0-9A-Fa-f]+$")


class OKLCH(NamedTuple):
    """An OKLCH color: lightness (0-1), chroma (0-~0.4), hue (0-360)."""

    l: float  # noqa: E741
    c: float
    h: float


# =============================================================================
# Hex helpers
# =============================================================================


def is_valid_hex(value: str) -> bool:
    """Strict ``#RRGGBB`` check callers use before handing colors to the engine."""
    return isinstance(value, str) and bool(_STRICT_HEX.match(value))


def _expand_hex(value: str) -> str:
    if not isinstance(value, str):
        raise make_color_error(value)
    h = value.strip().removeprefix("#")
    if len(h) == 3:
        h = "".join(ch * 2 for ch in h)
    if len(h) != 6 or not _HEX_DIGITS.match(h):
        raise make_color_error(value)
    return h


def parse_hex(value: str) -> tuple[int, int, int]:
    """Parse a 3- or 6-digit hex color (``#`` optional) into 0-255 channels.

    Raises:
        InvalidColorFormat: If the string is not a 3- or 6-digit hex color.
    """
    h = _expand_hex(value)
    return int(h[0:2], 16), int(h[2:4], 16), int(h[4:6], 16)


def round_half_up(x: float) -> int:
    """Round .5 away from zero for positive values, as 8-bit quantization expects."""
    return math.floor(x + 0.5)


def _clamp_byte(v: int) -> int:
    return 0 if v < 0 else 255 if v > 255 else v


def to_hex(r: int, g: int, b: int) -> str:
    """Format 0-255 channels as uppercase ``#RRGGBB``, clamping out-of-range values."""
    return f"#{_clamp_byte(r):02X}{_clamp_byte(g):02X}{_clamp_byte(b):02X}"


def normalize_hex(value: str) -> str:
    """Return ``value`` as uppercase 6-digit ``#RRGGBB``."""
    return to_hex(*parse_hex(value))


# =============================================================================
# Linear-light helpers
# =============================================================================


def srgb_to_linear(c: float) -> float:
    """Remove sRGB gamma from a 0-1 channel value."""
    if c <= SRGB_LINEAR_THRESHOLD:
        return c / SRGB_LINEAR_SCALE
    return ((c + 0.055) / 1.055) ** SRGB_GAMMA


def linear_to_srgb(c: float) -> float:
    """Apply sRGB gamma to a linear 0-1 channel value."""
    if c <= _SRGB_ENCODE_THRESHOLD:
        return SRGB_LINEAR_SCALE * c
    return 1.055 * c ** (1 / SRGB_GAMMA) - 0.055


def _mul3(m: Mat3, v: Vec3) -> Vec3:
    a, b, c = v
    return (
        m[0][0] * a + m[0][1] * b + m[0][2] * c,
        m[1][0] * a + m[1][1] * b + m[1][2] * c,
        m[2][0] * a + m[2][1] * b + m[2][2] * c,
    )


def _signed_cbrt(x: float) -> float:
    # A plain ** (1/3) on a negative float yields a complex number.
    return x ** (1 / 3) if x >= 0 else -((-x) ** (1 / 3))


def _srgb_to_hex(r: float, g: float, b: float) -> str:
    def channel(v: float) -> int:
        return round_half_up(max(0.0, min(1.0, v)) * 255)

    return to_hex(channel(r), channel(g), channel(b))


# =============================================================================
# Public API
# =============================================================================


def hex_to_oklch(value: str) -> OKLCH:
    """Convert a hex color to OKLCH.

    Args:
        value: 3- or 6-digit hex color, ``#`` optional.

    Returns:
        OKLCH tuple with hue normalized into [0, 360).

    Raises:
        InvalidColorFormat: If ``value`` is not a valid hex color.
    """
    r, g, b = parse_hex(value)
    linear = (srgb_to_linear(r / 255), srgb_to_linear(g / 255), srgb_to_linear(b / 255))

    lms = _mul3(_LINEAR_SRGB_TO_LMS, linear)
    lms_prime = (_signed_cbrt(lms[0]), _signed_cbrt(lms[1]), _signed_cbrt(lms[2]))
    lightness, a, b_axis = _mul3(_LMS_PRIME_TO_OKLAB, lms_prime)

    chroma = math.hypot(a, b_axis)
    hue = math.degrees(math.atan2(b_axis, a))
    if hue < 0:
        hue += 360.0
    return OKLCH(lightness, chroma, hue % 360.0)


def oklch_to_hex(lightness: float, chroma: float, hue: float) -> str:
    """Convert OKLCH to an uppercase ``#RRGGBB`` string.

    Colors outside the sRGB gamut are clamped per channel rather than
    rejected.

    Args:
        lightness: Oklab L (0-1).
        chroma: Chroma (0-~0.4).
        hue: Hue in degrees.

    Returns:
        Uppercase hex string.
    """
    h_rad = math.radians(hue)
    lab = (lightness, chroma * math.cos(h_rad), chroma * math.sin(h_rad))

    lms_prime = _mul3(_OKLAB_TO_LMS_PRIME, lab)
    lms = (lms_prime[0] ** 3, lms_prime[1] ** 3, lms_prime[2] ** 3)
    linear = _mul3(_LMS_TO_LINEAR_SRGB, lms)

    return _srgb_to_hex(
        linear_to_srgb(linear[0]), linear_to_srgb(linear[1]), linear_to_srgb(linear[2])
    )
