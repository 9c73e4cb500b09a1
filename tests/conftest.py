"""Shared pytest fixtures for tokenwright tests."""

import pytest

from tokenwright.core.ir import (
    DEFAULT_TOKEN_SLOTS,
    NamingConfig,
    PrimitivePalette,
    ScaleConfig,
    SemanticElement,
    SemanticGroup,
    SemanticVariant,
    Separator,
    Shade,
    StateConfig,
)

# component-role-element-property-scale-state, e.g. feedback-success-bg-hover
SHORT_SLOT_ORDER = ["component", "role", "element", "property", "scale", "state"]


@pytest.fixture
def success_palette() -> PrimitivePalette:
    """Bootstrap green with its base shade at index 4."""
    return PrimitivePalette(
        library_id="sample",
        collection_name="Success",
        base_value="#198754",
        shades=[
            Shade(name="$green-100", value="#D1E7DD"),
            Shade(name="$green-200", value="#A3CFBB"),
            Shade(name="$green-300", value="#75B798"),
            Shade(name="$green-400", value="#479F76"),
            Shade(name="$green-500", value="#198754"),
            Shade(name="$green-600", value="#146C43"),
        ],
    )


@pytest.fixture
def short_naming() -> NamingConfig:
    """Dash-separated kebab naming with role before element and abbreviation on."""
    by_id = {slot.id: slot for slot in DEFAULT_TOKEN_SLOTS}
    return NamingConfig(
        separator=Separator.DASH,
        abbreviate=True,
        slots=[by_id[slot_id].model_copy(update={"enabled": True}) for slot_id in SHORT_SLOT_ORDER],
    )


@pytest.fixture
def bg_text_elements() -> list[SemanticElement]:
    return [
        SemanticElement(id="bg", name="background"),
        SemanticElement(id="text", name="text"),
    ]


@pytest.fixture
def feedback_group(
    success_palette: PrimitivePalette, bg_text_elements: list[SemanticElement]
) -> SemanticGroup:
    return SemanticGroup(
        id="feedback",
        name="feedback",
        variants=[
            SemanticVariant(
                id="feedback-success",
                name="success",
                palette_ref=success_palette.ref,
                elements=bg_text_elements,
            )
        ],
    )


@pytest.fixture
def default_state_only() -> list[StateConfig]:
    return [StateConfig(id="default", name="default")]


@pytest.fixture
def default_scale_only() -> list[ScaleConfig]:
    return [ScaleConfig(id="default", name="default")]
