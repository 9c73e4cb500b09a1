"""
Wizard session reducer.

Every change to a WizardState goes through ``reduce(state, action)``,
which returns a new state and never mutates its input. Actions are small
frozen models; ``can_advance`` tells a front end whether the current
step's requirements are met.
"""

from __future__ import annotations

import logging
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .generator import generate_all_tokens_for_state
from .ir.naming import Casing, NamingConfig, Separator
from .ir.palette import PrimitivePalette, Shade
from .ir.semantic import ScaleConfig, SemanticGroup, StateConfig
from .ir.tokenspec import FoundationCategory
from .ir.wizard import (
    STEP_LABELS,
    STEP_MODIFIERS,
    STEP_PALETTE,
    STEP_SEMANTIC,
    WizardState,
)

logger = logging.getLogger(__name__)

LAST_STEP = len(STEP_LABELS) - 1


# =============================================================================
# Actions
# =============================================================================


class _Action(BaseModel):
    model_config = ConfigDict(frozen=True)


class SetStep(_Action):
    """Jump to a step; out-of-range values are clamped."""

    step: int


class NextStep(_Action):
    """Advance one step. Leaving the modifiers step runs generation."""


class PrevStep(_Action):
    pass


class AddPalette(_Action):
    """Select a palette; re-adding the same ref replaces it in place."""

    palette: PrimitivePalette


class RemovePalette(_Action):
    ref: str


class UpdateShade(_Action):
    """Manual edit of one shade's name and/or hex value."""

    ref: str
    index: int
    name: str | None = None
    value: str | None = None


class SetNaming(_Action):
    """Update naming fields; None leaves a field unchanged."""

    separator: Separator | None = None
    prefix: str | None = None
    casing: Casing | None = None
    abbreviate: bool | None = None


class ToggleSlot(_Action):
    slot_id: str


class MoveSlot(_Action):
    """Move a slot one position up (-1) or down (+1)."""

    slot_id: str
    direction: Literal[-1, 1]


class AddGroup(_Action):
    """Append a group; an existing group with the same id is replaced."""

    group: SemanticGroup


class RemoveGroup(_Action):
    group_id: str


class MapVariant(_Action):
    """Point a variant at a palette (empty ref unmaps it)."""

    group_id: str
    variant_id: str
    palette_ref: str
    shade_index: int | None = None


class SetStates(_Action):
    states: list[StateConfig]


class SetScales(_Action):
    scales: list[ScaleConfig]


class SetFoundations(_Action):
    foundations: list[FoundationCategory] = Field(default_factory=list)


class Generate(_Action):
    """Regenerate tokens and warnings without changing step."""


WizardAction = (
    SetStep
    | NextStep
    | PrevStep
    | AddPalette
    | RemovePalette
    | UpdateShade
    | SetNaming
    | ToggleSlot
    | MoveSlot
    | AddGroup
    | RemoveGroup
    | MapVariant
    | SetStates
    | SetScales
    | SetFoundations
    | Generate
)


# =============================================================================
# Helpers
# =============================================================================


def _clamp_step(step: int) -> int:
    return max(STEP_PALETTE, min(step, LAST_STEP))


def _with_generation(state: WizardState, **update: object) -> WizardState:
    result = generate_all_tokens_for_state(state)
    return state.model_copy(
        update={
            **update,
            "generated_tokens": result.tokens,
            "contrast_warnings": result.warnings,
        }
    )


def _update_shade(palette: PrimitivePalette, action: UpdateShade) -> PrimitivePalette:
    if not 0 <= action.index < len(palette.shades):
        logger.debug(f"Shade index {action.index} out of range for {palette.ref}")
        return palette
    shade = palette.shades[action.index]
    new_shade = Shade(
        name=shade.name if action.name is None else action.name,
        value=shade.value if action.value is None else action.value,
    )
    shades = list(palette.shades)
    shades[action.index] = new_shade

    base_value = palette.base_value
    if shade.value == palette.base_value:
        base_value = new_shade.value
    return PrimitivePalette(
        library_id=palette.library_id,
        collection_name=palette.collection_name,
        base_value=base_value,
        shades=shades,
    )


def _move_slot(naming: NamingConfig, slot_id: str, direction: int) -> NamingConfig:
    slots = list(naming.slots)
    index = next((i for i, s in enumerate(slots) if s.id == slot_id), None)
    if index is None:
        return naming
    target = index + direction
    if not 0 <= target < len(slots):
        return naming
    slots[index], slots[target] = slots[target], slots[index]
    return naming.model_copy(update={"slots": slots})


def _map_variant(group: SemanticGroup, action: MapVariant) -> SemanticGroup:
    variants = [
        v.model_copy(update={"palette_ref": action.palette_ref, "shade_index": action.shade_index})
        if v.id == action.variant_id
        else v
        for v in group.variants
    ]
    return group.model_copy(update={"variants": variants})


# =============================================================================
# Public API
# =============================================================================


def can_advance(state: WizardState) -> bool:
    """Whether the current step's requirements are met."""
    step = state.current_step
    if step == STEP_PALETTE:
        return len(state.selected_palettes) > 0
    if step == STEP_SEMANTIC:
        return bool(state.groups) and all(
            v.is_mapped for g in state.groups for v in g.variants
        )
    if step == STEP_MODIFIERS:
        return any(s.enabled for s in state.states) and any(s.enabled for s in state.scales)
    return True


def reduce(state: WizardState, action: WizardAction) -> WizardState:
    """Apply one action and return the new state.

    Generated tokens and contrast warnings are only ever replaced
    together, by ``NextStep`` out of the modifiers step or ``Generate``.
    """
    if isinstance(action, SetStep):
        return state.model_copy(update={"current_step": _clamp_step(action.step)})

    if isinstance(action, NextStep):
        next_step = _clamp_step(state.current_step + 1)
        if state.current_step == STEP_MODIFIERS:
            return _with_generation(state, current_step=next_step)
        return state.model_copy(update={"current_step": next_step})

    if isinstance(action, PrevStep):
        return state.model_copy(update={"current_step": _clamp_step(state.current_step - 1)})

    if isinstance(action, AddPalette):
        palettes = list(state.selected_palettes)
        for i, palette in enumerate(palettes):
            if palette.ref == action.palette.ref:
                palettes[i] = action.palette
                break
        else:
            palettes.append(action.palette)
        return state.model_copy(update={"selected_palettes": palettes})

    if isinstance(action, RemovePalette):
        palettes = [p for p in state.selected_palettes if p.ref != action.ref]
        return state.model_copy(update={"selected_palettes": palettes})

    if isinstance(action, UpdateShade):
        palettes = [
            _update_shade(p, action) if p.ref == action.ref else p
            for p in state.selected_palettes
        ]
        return state.model_copy(update={"selected_palettes": palettes})

    if isinstance(action, SetNaming):
        changes = action.model_dump(exclude_none=True)
        return state.model_copy(update={"naming": state.naming.model_copy(update=changes)})

    if isinstance(action, ToggleSlot):
        slots = [
            s.model_copy(update={"enabled": not s.enabled}) if s.id == action.slot_id else s
            for s in state.naming.slots
        ]
        return state.model_copy(update={"naming": state.naming.model_copy(update={"slots": slots})})

    if isinstance(action, MoveSlot):
        naming = _move_slot(state.naming, action.slot_id, action.direction)
        return state.model_copy(update={"naming": naming})

    if isinstance(action, AddGroup):
        groups = [g for g in state.groups if g.id != action.group.id]
        if len(groups) == len(state.groups):
            groups.append(action.group)
        else:
            groups = [action.group if g.id == action.group.id else g for g in state.groups]
        return state.model_copy(update={"groups": groups})

    if isinstance(action, RemoveGroup):
        groups = [g for g in state.groups if g.id != action.group_id]
        return state.model_copy(update={"groups": groups})

    if isinstance(action, MapVariant):
        groups = [
            _map_variant(g, action) if g.id == action.group_id else g for g in state.groups
        ]
        return state.model_copy(update={"groups": groups})

    if isinstance(action, SetStates):
        return state.model_copy(update={"states": list(action.states)})

    if isinstance(action, SetScales):
        return state.model_copy(update={"scales": list(action.scales)})

    if isinstance(action, SetFoundations):
        return state.model_copy(update={"enabled_foundations": list(action.foundations)})

    if isinstance(action, Generate):
        return _with_generation(state)

    raise TypeError(f"Unknown wizard action: {type(action).__name__}")
