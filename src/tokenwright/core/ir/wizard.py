"""
Wizard session IR types.

The wizard is modelled as a plain immutable record; all changes go
through ``tokenwright.core.wizard.reduce``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .naming import NamingConfig
from .palette import PrimitivePalette
from .semantic import DEFAULT_SCALES, DEFAULT_STATES, ScaleConfig, SemanticGroup, StateConfig
from .tokens import ContrastWarning, GeneratedToken
from .tokenspec import DEFAULT_FOUNDATIONS, FoundationCategory


class StepLabel(BaseModel):
    """Title and description of one wizard step."""

    model_config = ConfigDict(frozen=True)

    title: str
    description: str


STEP_LABELS: tuple[StepLabel, ...] = (
    StepLabel(title="Base Palette", description="Select primitive colors"),
    StepLabel(title="Naming Convention", description="Configure the semantic naming structure"),
    StepLabel(title="Semantic Tokens", description="Define groups and color mapping"),
    StepLabel(title="States & Scales", description="Configure interactive modifiers"),
    StepLabel(
        title="Foundation Tokens",
        description="Add spacing, typography, radius, shadow and motion scales",
    ),
    StepLabel(title="Review & Export", description="Final view and export"),
    StepLabel(title="Theme Preview", description="Live preview of your design system"),
)

STEP_PALETTE = 0
STEP_NAMING = 1
STEP_SEMANTIC = 2
STEP_MODIFIERS = 3
STEP_FOUNDATIONS = 4
STEP_REVIEW = 5
STEP_PREVIEW = 6


class WizardState(BaseModel):
    """Complete state of one wizard session."""

    model_config = ConfigDict(frozen=True)

    current_step: int = Field(default=STEP_PALETTE, ge=0, lt=len(STEP_LABELS))
    selected_palettes: list[PrimitivePalette] = Field(default_factory=list)
    naming: NamingConfig = Field(default_factory=NamingConfig)
    groups: list[SemanticGroup] = Field(default_factory=list)
    states: list[StateConfig] = Field(default_factory=lambda: list(DEFAULT_STATES))
    scales: list[ScaleConfig] = Field(default_factory=lambda: list(DEFAULT_SCALES))
    generated_tokens: list[GeneratedToken] = Field(default_factory=list)
    contrast_warnings: list[ContrastWarning] = Field(default_factory=list)
    enabled_foundations: list[FoundationCategory] = Field(
        default_factory=lambda: list(DEFAULT_FOUNDATIONS)
    )
