"""
Generated token IR types.

Output of the generation pass. Tokens and warnings are rebuilt from
scratch on every run and always travel together in a GenerationResult.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class TokenParts(BaseModel):
    """Semantic breakdown of a generated token.

    Exactly one of ``group`` / ``component`` is set, depending on the
    semantic group's type. ``scale`` and ``state`` are None for the
    "default" modifier.
    """

    model_config = ConfigDict(frozen=True)

    group: str | None = None
    component: str | None = None
    variant: str | None = None
    element: str | None = None
    property: str | None = None
    scale: str | None = None
    state: str | None = None


class GeneratedToken(BaseModel):
    """One named, colored semantic token."""

    model_config = ConfigDict(frozen=True)

    full_name: str = Field(description="Assembled name joined with the configured separator")
    parts: TokenParts = Field(default_factory=TokenParts)
    slot_values: dict[str, str] = Field(
        default_factory=dict, description="Slot id -> value, only for supplied values"
    )
    value: str = Field(description="Uppercase #RRGGBB")
    reference: str | None = Field(default=None, description="Source palette collection name")
    primitive_ref: str | None = Field(default=None, description="Primitive token name")


class ContrastWarning(BaseModel):
    """A background/text pair below the WCAG AA threshold."""

    model_config = ConfigDict(frozen=True)

    group_name: str
    variant_name: str
    scale: str | None = None
    state: str | None = None
    bg_token: str
    bg_color: str
    text_token: str
    text_color: str
    contrast_ratio: float


class GenerationResult(BaseModel):
    """Tokens and warnings from one generation pass."""

    model_config = ConfigDict(frozen=True)

    tokens: list[GeneratedToken] = Field(default_factory=list)
    warnings: list[ContrastWarning] = Field(default_factory=list)

    def find(self, full_name: str) -> GeneratedToken | None:
        """Look up a token by its full name."""
        for token in self.tokens:
            if token.full_name == full_name:
                return token
        return None
