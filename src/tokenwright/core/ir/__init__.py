"""
Intermediate representation for tokenwright.

Frozen pydantic models for palettes, naming, semantic mapping, generated
tokens, the tokenspec.yaml root and the wizard session record.
"""

from .naming import (
    DEFAULT_TOKEN_SLOTS,
    TOKEN_SLOT_GROUPS,
    Casing,
    NamingConfig,
    Separator,
    SlotGroupId,
    TokenSlot,
    TokenSlotGroup,
)
from .palette import PrimitivePalette, Shade
from .semantic import (
    DEFAULT_ELEMENTS,
    DEFAULT_MODIFIER_NAME,
    DEFAULT_SCALES,
    DEFAULT_STATES,
    PRESET_GROUPS,
    ColorTransform,
    GroupType,
    ScaleConfig,
    SemanticElement,
    SemanticGroup,
    SemanticVariant,
    StateConfig,
    TextMode,
)
from .tokens import ContrastWarning, GeneratedToken, GenerationResult, TokenParts
from .tokenspec import DEFAULT_FOUNDATIONS, FoundationCategory, TokenSpecMeta, TokenSpecYAML
from .wizard import (
    STEP_FOUNDATIONS,
    STEP_LABELS,
    STEP_MODIFIERS,
    STEP_NAMING,
    STEP_PALETTE,
    STEP_PREVIEW,
    STEP_REVIEW,
    STEP_SEMANTIC,
    StepLabel,
    WizardState,
)

__all__ = [
    # Naming
    "Casing",
    "DEFAULT_TOKEN_SLOTS",
    "NamingConfig",
    "Separator",
    "SlotGroupId",
    "TOKEN_SLOT_GROUPS",
    "TokenSlot",
    "TokenSlotGroup",
    # Palettes
    "PrimitivePalette",
    "Shade",
    # Semantic mapping
    "ColorTransform",
    "DEFAULT_ELEMENTS",
    "DEFAULT_MODIFIER_NAME",
    "DEFAULT_SCALES",
    "DEFAULT_STATES",
    "GroupType",
    "PRESET_GROUPS",
    "ScaleConfig",
    "SemanticElement",
    "SemanticGroup",
    "SemanticVariant",
    "StateConfig",
    "TextMode",
    # Output
    "ContrastWarning",
    "GeneratedToken",
    "GenerationResult",
    "TokenParts",
    # TokenSpec
    "DEFAULT_FOUNDATIONS",
    "FoundationCategory",
    "TokenSpecMeta",
    "TokenSpecYAML",
    # Wizard
    "STEP_FOUNDATIONS",
    "STEP_LABELS",
    "STEP_MODIFIERS",
    "STEP_NAMING",
    "STEP_PALETTE",
    "STEP_PREVIEW",
    "STEP_REVIEW",
    "STEP_SEMANTIC",
    "StepLabel",
    "WizardState",
]
