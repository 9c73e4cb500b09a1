"""
Tonal scale generation in OKLCH.

Builds an 11-stop ramp (50 through 950) from one seed color. Hue is held
constant; lightness follows a fixed curve and chroma tapers toward both
ends. The seed itself becomes stop 500, untouched.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .ir.palette import PrimitivePalette, Shade
from .oklch import hex_to_oklch, oklch_to_hex

# (stop, lightness, chroma multiplier). Hand-tuned for perceptual balance.
_STOPS: tuple[tuple[int, float, float], ...] = (
    (50, 0.97, 0.30),  # very light, minimal chroma
    (100, 0.93, 0.50),
    (200, 0.87, 0.70),
    (300, 0.78, 0.88),
    (400, 0.68, 0.96),
    (500, 0.57, 1.00),  # seed
    (600, 0.48, 0.96),
    (700, 0.39, 0.88),
    (800, 0.30, 0.80),
    (900, 0.22, 0.65),
    (950, 0.15, 0.40),  # very dark, minimal chroma
)

SEED_STOP = 500
STOP_NUMBERS: tuple[int, ...] = tuple(stop for stop, _, _ in _STOPS)


class ScaleStop(BaseModel):
    """One stop of a tonal scale."""

    model_config = ConfigDict(frozen=True)

    stop: int
    hex: str


class TonalScale(BaseModel):
    """A named tonal scale, stops ascending by stop number."""

    model_config = ConfigDict(frozen=True)

    name: str
    stops: list[ScaleStop] = Field(default_factory=list)

    def get(self, stop: int) -> str | None:
        """Hex value for a stop number, or None if absent."""
        for s in self.stops:
            if s.stop == stop:
                return s.hex
        return None


def generate_tonal_scale(seed: str, name: str) -> TonalScale:
    """Generate an 11-stop tonal scale from a seed color.

    Args:
        seed: Hex color; returned verbatim as stop 500.
        name: Scale name.

    Returns:
        TonalScale with stops 50, 100, ..., 900, 950.

    Raises:
        InvalidColorFormat: If ``seed`` is not a valid hex color.
    """
    base = hex_to_oklch(seed)

    stops: list[ScaleStop] = []
    for stop, lightness, chroma_mul in _STOPS:
        if stop == SEED_STOP:
            # No round trip through OKLCH, so no quantization drift.
            stops.append(ScaleStop(stop=stop, hex=seed))
            continue
        stops.append(ScaleStop(stop=stop, hex=oklch_to_hex(lightness, base.c * chroma_mul, base.h)))

    return TonalScale(name=name, stops=stops)


def tonal_scale_to_palette(scale: TonalScale, library_id: str = "custom") -> PrimitivePalette:
    """Convert a tonal scale into a primitive palette.

    Stop 500 becomes the palette's base value and shades are named
    ``<scale name>-<stop>``.
    """
    return PrimitivePalette(
        library_id=library_id,
        collection_name=scale.name,
        base_value=scale.get(SEED_STOP) or "#000000",
        shades=[Shade(name=f"{scale.name}-{s.stop}", value=s.hex) for s in scale.stops],
    )
