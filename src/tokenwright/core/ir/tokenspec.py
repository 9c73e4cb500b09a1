"""
TokenSpec YAML IR types for declarative token configuration.

Defines the structure of tokenspec.yaml: the palettes, naming convention,
semantic groups and modifiers that drive one generation pass, plus the
foundation categories to include on export.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

from .naming import NamingConfig
from .palette import PrimitivePalette
from .semantic import (
    DEFAULT_SCALES,
    DEFAULT_STATES,
    ScaleConfig,
    SemanticGroup,
    StateConfig,
)


class FoundationCategory(StrEnum):
    """Non-color foundation token categories."""

    SPACING = "spacing"
    TYPOGRAPHY = "typography"
    RADIUS = "radius"
    SHADOW = "shadow"
    MOTION = "motion"


DEFAULT_FOUNDATIONS: tuple[FoundationCategory, ...] = (
    FoundationCategory.SPACING,
    FoundationCategory.RADIUS,
)


class TokenSpecMeta(BaseModel):
    """Metadata about the token specification."""

    model_config = ConfigDict(frozen=True)

    version: int = Field(default=1, description="TokenSpec schema version")
    generated_by: str | None = Field(default=None, description="Tool that generated this")
    product_name: str | None = Field(default=None, description="Product the tokens belong to")


class TokenSpecYAML(BaseModel):
    """Root TokenSpec YAML configuration."""

    model_config = ConfigDict(frozen=True)

    palettes: list[PrimitivePalette] = Field(
        default_factory=list, description="Selected primitive palettes"
    )
    naming: NamingConfig = Field(default_factory=NamingConfig, description="Naming convention")
    groups: list[SemanticGroup] = Field(default_factory=list, description="Semantic groups")
    states: list[StateConfig] = Field(
        default_factory=lambda: list(DEFAULT_STATES), description="Interactive states"
    )
    scales: list[ScaleConfig] = Field(
        default_factory=lambda: list(DEFAULT_SCALES), description="Intensity scales"
    )
    foundations: list[FoundationCategory] = Field(
        default_factory=lambda: list(DEFAULT_FOUNDATIONS),
        description="Foundation categories included on export",
    )
    meta: TokenSpecMeta = Field(default_factory=TokenSpecMeta)

    def get_palette(self, ref: str) -> PrimitivePalette | None:
        """Find a palette by its ``library_id:collection_name`` reference."""
        for palette in self.palettes:
            if palette.ref == ref:
                return palette
        return None

