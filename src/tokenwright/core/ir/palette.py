"""
Primitive palette IR types.

A primitive palette is a base color plus its shade ramp, with no semantic
meaning attached. Hex values are normalized to uppercase ``#RRGGBB`` on
construction, so anything downstream can compare them directly.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..errors import InvalidColorFormat
from ..oklch import normalize_hex

_TRAILING_NUMBER = re.compile(r"(\d+)$")


def _validate_hex(value: str) -> str:
    try:
        return normalize_hex(value)
    except InvalidColorFormat as e:
        # pydantic only wraps ValueError/AssertionError into ValidationError
        raise ValueError(e.message) from e


class Shade(BaseModel):
    """One named color in a palette's ramp."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Shade name, e.g. 'indigo-500'")
    value: str = Field(description="Hex color")

    @field_validator("value")
    @classmethod
    def _normalize_value(cls, v: str) -> str:
        return _validate_hex(v)


class PrimitivePalette(BaseModel):
    """A selected primitive palette."""

    model_config = ConfigDict(frozen=True)

    library_id: str = Field(default="custom", description="Source library identifier")
    collection_name: str = Field(description="Palette name, e.g. 'Indigo'")
    base_value: str = Field(description="Base hex color; one shade equals it by convention")
    shades: list[Shade] = Field(default_factory=list, description="Ordered shade ramp")

    @field_validator("base_value")
    @classmethod
    def _normalize_base(cls, v: str) -> str:
        return _validate_hex(v)

    @property
    def ref(self) -> str:
        """Reference string used by semantic variants: ``library_id:collection_name``."""
        return f"{self.library_id}:{self.collection_name}"

    def base_shade(self) -> Shade | None:
        """The shade whose value equals the base value, if any."""
        for shade in self.shades:
            if shade.value == self.base_value:
                return shade
        return None

    def shade_color(self, shade_index: int | None) -> str:
        """Color for an optional shade index, falling back to the base value."""
        if shade_index is not None and 0 <= shade_index < len(self.shades):
            return self.shades[shade_index].value
        return self.base_value

    def base_stop_number(self) -> str:
        """Trailing number of the base shade's name (``'500'`` for ``indigo-500``), or ``''``."""
        shade = self.base_shade()
        name = shade.name if shade else self.collection_name
        match = _TRAILING_NUMBER.search(name)
        return match.group(1) if match else ""
