"""
Built-in primitive palette library.

Sample collections users can select instead of entering a seed color.
Custom palettes are generated from a seed with ``palette_from_seed``.
"""

from __future__ import annotations

from .ir.palette import PrimitivePalette, Shade
from .tonal_scale import generate_tonal_scale, tonal_scale_to_palette

SAMPLE_LIBRARY_ID = "sample"

# (collection name, shade prefix, base value, shades 100..900)
_SAMPLE_COLLECTIONS: list[tuple[str, str, str, list[str]]] = [
    (
        "Cerulean",
        "cerulean",
        "#4183CA",
        ["#ECF3FA", "#C6DAEF", "#A0C1E4", "#85A7DA", "#588DCF",
         "#3B72AF", "#356194", "#2E4E75", "#0D1A28"],
    ),
    (
        "Indigo",
        "indigo",
        "#6610F2",
        ["#E0CFFC", "#C29FFA", "#A370F7", "#8540F5", "#6610F2",
         "#520DC2", "#3D0A91", "#290661", "#140330"],
    ),
    (
        "Purple",
        "purple",
        "#6F42C1",
        ["#E2D9F3", "#C5B3E6", "#A98EDA", "#8C68CD", "#6F42C1",
         "#59359A", "#432874", "#2C1A4D", "#160D27"],
    ),
    (
        "Success",
        "green",
        "#198754",
        ["#D1E7DD", "#A3CFBB", "#75B798", "#479F76", "#198754",
         "#146C43", "#0F5132", "#0A3622", "#051B11"],
    ),
    (
        "Danger",
        "red",
        "#DC3545",
        ["#F8D7DA", "#F1AEB5", "#EA868F", "#E35D6A", "#DC3545",
         "#B02A37", "#842029", "#58151C", "#2C0B0E"],
    ),
    (
        "Warning",
        "yellow",
        "#FFC107",
        ["#FFF3CD", "#FFE69C", "#FFDA6A", "#FFCD39", "#FFC107",
         "#CC9A06", "#997404", "#664D03", "#332701"],
    ),
]  # fmt: skip

_STEP_NUMBERS = (100, 200, 300, 400, 500, 600, 700, 800, 900)


def _build_sample(name: str, prefix: str, base: str, values: list[str]) -> PrimitivePalette:
    return PrimitivePalette(
        library_id=SAMPLE_LIBRARY_ID,
        collection_name=name,
        base_value=base,
        shades=[
            Shade(name=f"${prefix}-{step}", value=value)
            for step, value in zip(_STEP_NUMBERS, values, strict=True)
        ],
    )


SAMPLE_PALETTES: tuple[PrimitivePalette, ...] = tuple(
    _build_sample(*row) for row in _SAMPLE_COLLECTIONS
)


def get_library_palette(name: str) -> PrimitivePalette | None:
    """Look up a sample palette by collection name (case-insensitive)."""
    wanted = name.strip().lower()
    for palette in SAMPLE_PALETTES:
        if palette.collection_name.lower() == wanted:
            return palette
    return None


def palette_from_seed(seed: str, name: str, library_id: str = "custom") -> PrimitivePalette:
    """Generate a custom palette from a hand-entered seed color and name.

    Raises:
        InvalidColorFormat: If ``seed`` is not a valid hex color.
    """
    return tonal_scale_to_palette(generate_tonal_scale(seed, name), library_id=library_id)
