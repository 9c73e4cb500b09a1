"""
Semantic mapping IR types.

Groups hold variants; each variant points at one primitive palette and
lists the elements (background, text, border, icon) to generate. States
and scales are independent modifiers layered on every element.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Enums
# =============================================================================


class GroupType(StrEnum):
    """Whether a semantic group is a cross-cutting concept or a UI component."""

    GROUP = "group"
    COMPONENT = "component"


class TextMode(StrEnum):
    """Foreground text color strategy for a variant."""

    AUTO = "auto"
    LIGHT = "light"
    DARK = "dark"


class ColorTransform(StrEnum):
    """Color transform kind carried by a state or scale."""

    LIGHTEN = "lighten"
    DARKEN = "darken"
    OPACITY = "opacity"
    NONE = "none"


# Name that is omitted from generated token names
DEFAULT_MODIFIER_NAME = "default"


# =============================================================================
# Semantic groups
# =============================================================================


class SemanticElement(BaseModel):
    """A visual part of a variant that receives its own token."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(description="background, text, border, icon or shadow")
    property: str = Field(default="color", description="Visual property, normally 'color'")


DEFAULT_ELEMENTS: tuple[SemanticElement, ...] = (
    SemanticElement(id="bg", name="background", property="color"),
    SemanticElement(id="text", name="text", property="color"),
    SemanticElement(id="border", name="border", property="color"),
    SemanticElement(id="icon", name="icon", property="color"),
)


class SemanticVariant(BaseModel):
    """A named role inside a group, mapped to one primitive palette."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    palette_ref: str = Field(
        default="",
        description="'library_id:collection_name'; empty means unmapped",
    )
    shade_index: int | None = Field(
        default=None, description="Index into the palette's shades; defaults to base value"
    )
    text_mode: TextMode = Field(default=TextMode.AUTO, description="Foreground text strategy")
    elements: list[SemanticElement] = Field(default_factory=lambda: list(DEFAULT_ELEMENTS))

    @property
    def is_mapped(self) -> bool:
        return bool(self.palette_ref)

    @property
    def collection_name(self) -> str:
        """Collection part of the palette reference."""
        _, _, name = self.palette_ref.partition(":")
        return name


class SemanticGroup(BaseModel):
    """A named collection of variants."""

    model_config = ConfigDict(frozen=True)

    id: str
    type: GroupType = Field(default=GroupType.GROUP)
    name: str
    variants: list[SemanticVariant] = Field(default_factory=list)


def _preset_group(name: str, variant_names: list[str]) -> SemanticGroup:
    return SemanticGroup(
        id=name,
        type=GroupType.GROUP,
        name=name,
        variants=[SemanticVariant(id=f"{name}-{v}", name=v) for v in variant_names],
    )


PRESET_GROUPS: tuple[SemanticGroup, ...] = (
    _preset_group("action", ["primary", "secondary", "danger"]),
    _preset_group("feedback", ["success", "warning", "error", "info"]),
    _preset_group("surface", ["default", "raised", "overlay"]),
    _preset_group("control", ["default", "checked"]),
)


# =============================================================================
# Modifiers
# =============================================================================


class StateConfig(BaseModel):
    """An interactive state modifier (hover, active, ...)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    enabled: bool = True
    color_transform: ColorTransform = ColorTransform.NONE
    amount: float = Field(default=0, ge=0, le=100)


class ScaleConfig(BaseModel):
    """An intensity scale modifier (subtle, strong, ...)."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    enabled: bool = True
    color_transform: ColorTransform = ColorTransform.NONE
    amount: float = Field(default=0, ge=0, le=100)

    @field_validator("color_transform")
    @classmethod
    def _no_opacity(cls, v: ColorTransform) -> ColorTransform:
        if v == ColorTransform.OPACITY:
            raise ValueError("scales support lighten, darken or none")
        return v


DEFAULT_STATES: tuple[StateConfig, ...] = (
    StateConfig(id="default", name="default", color_transform=ColorTransform.NONE, amount=0),
    StateConfig(id="hover", name="hover", color_transform=ColorTransform.DARKEN, amount=8),
    StateConfig(id="active", name="active", color_transform=ColorTransform.DARKEN, amount=16),
    StateConfig(id="focus", name="focus", color_transform=ColorTransform.LIGHTEN, amount=20),
    StateConfig(id="disabled", name="disabled", color_transform=ColorTransform.OPACITY, amount=40),
)

DEFAULT_SCALES: tuple[ScaleConfig, ...] = (
    ScaleConfig(id="subtle", name="subtle", color_transform=ColorTransform.LIGHTEN, amount=80),
    ScaleConfig(id="default", name="default", color_transform=ColorTransform.NONE, amount=0),
    ScaleConfig(id="strong", name="strong", color_transform=ColorTransform.DARKEN, amount=20),
)
