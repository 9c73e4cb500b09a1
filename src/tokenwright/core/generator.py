"""
Semantic token generation.

Expands every mapped variant into group x variant x element x scale x
state tokens, then checks each background/text pair for WCAG AA
contrast. Iteration order is fixed so identical inputs always produce an
identical token list.

Color pipeline for one token:

    palette base (or shade) -> scale transform -> element offset -> state transform
"""

from __future__ import annotations

import logging
from collections.abc import Sequence

from .color_transform import apply_color_transform, darken, lighten
from .contrast import MIN_CONTRAST_RATIO, best_text_color, contrast_ratio, resolve_text_color
from .ir.naming import NamingConfig
from .ir.palette import PrimitivePalette
from .ir.semantic import (
    DEFAULT_MODIFIER_NAME,
    GroupType,
    ScaleConfig,
    SemanticGroup,
    SemanticVariant,
    StateConfig,
    TextMode,
)
from .ir.tokens import ContrastWarning, GeneratedToken, GenerationResult, TokenParts
from .ir.wizard import WizardState
from .naming import build_token_name, build_token_from_slots

logger = logging.getLogger(__name__)

# Element offsets applied to the scaled base color
TEXT_TINT_PERCENT = 90
BORDER_DARKEN_PERCENT = 10
ICON_TINT_PERCENT = 85


def _find_palette(ref: str, palettes: Sequence[PrimitivePalette]) -> PrimitivePalette | None:
    for palette in palettes:
        if palette.ref == ref:
            return palette
    return None


def _modifier_slot(name: str) -> str | None:
    """Modifier name as a slot value; "default" is omitted from names."""
    return None if name == DEFAULT_MODIFIER_NAME else name


def build_primitive_ref(palette: PrimitivePalette, naming: NamingConfig) -> str:
    """Name of the primitive a variant resolves to, e.g. ``indigo.500``.

    Built from the collection name plus the numeric suffix of the base
    shade, using the session's casing and separator.
    """
    clean_name = "-".join(palette.collection_name.lower().split())
    return build_token_name([clean_name, palette.base_stop_number()], naming)


def derive_text_color(bg: str, text_mode: TextMode | str = TextMode.AUTO) -> str:
    """Text color synthesized from a background.

    ``auto`` uses a light tint of the background and falls back to pure
    black or white when the tint misses AA against it. ``light`` and
    ``dark`` use fixed colors.
    """
    if text_mode != TextMode.AUTO:
        return resolve_text_color(text_mode, bg)
    tint = lighten(bg, TEXT_TINT_PERCENT)
    if contrast_ratio(bg, tint) >= MIN_CONTRAST_RATIO:
        return tint
    return best_text_color(bg)


def element_color(element: str, base: str, text_mode: TextMode | str = TextMode.AUTO) -> str:
    """Synthesize an element's color from the shared variant base."""
    if element == "text":
        return derive_text_color(base, text_mode)
    if element == "border":
        return darken(base, BORDER_DARKEN_PERCENT)
    if element == "icon":
        return lighten(base, ICON_TINT_PERCENT)
    return base


def _generate_variant(
    group: SemanticGroup,
    variant: SemanticVariant,
    palette: PrimitivePalette,
    naming: NamingConfig,
    scales: Sequence[ScaleConfig],
    states: Sequence[StateConfig],
    by_context: dict[tuple[str, str, str, str], dict[str, GeneratedToken]],
) -> list[GeneratedToken]:
    base_color = palette.shade_color(variant.shade_index)
    primitive_ref = build_primitive_ref(palette, naming) or None
    is_component = group.type == GroupType.COMPONENT

    tokens: list[GeneratedToken] = []
    for element in variant.elements:
        for scale in scales:
            scaled = apply_color_transform(base_color, scale.color_transform, scale.amount)
            with_element = element_color(element.name, scaled, variant.text_mode)

            for state in states:
                color = apply_color_transform(with_element, state.color_transform, state.amount)

                slot_values = {
                    "component": group.name,
                    "role": variant.name,
                    "element": element.name,
                    "property": element.property,
                    "scale": _modifier_slot(scale.name),
                    "state": _modifier_slot(state.name),
                }
                slot_values = {k: v for k, v in slot_values.items() if v}

                token = GeneratedToken(
                    full_name=build_token_from_slots(slot_values, naming),
                    parts=TokenParts(
                        group=None if is_component else group.name,
                        component=group.name if is_component else None,
                        variant=variant.name,
                        element=element.name,
                        property=element.property,
                        scale=_modifier_slot(scale.name),
                        state=_modifier_slot(state.name),
                    ),
                    slot_values=slot_values,
                    value=color,
                    reference=variant.collection_name or None,
                    primitive_ref=primitive_ref,
                )
                tokens.append(token)

                key = (group.name, variant.name, scale.name, state.name)
                by_context.setdefault(key, {})[element.name] = token

    return tokens


def _check_contrast(
    by_context: dict[tuple[str, str, str, str], dict[str, GeneratedToken]],
) -> list[ContrastWarning]:
    warnings: list[ContrastWarning] = []
    for (group_name, variant_name, scale_name, state_name), elements in by_context.items():
        bg = elements.get("background")
        text = elements.get("text")
        if bg is None or text is None:
            continue
        ratio = contrast_ratio(bg.value, text.value)
        if ratio < MIN_CONTRAST_RATIO:
            warnings.append(
                ContrastWarning(
                    group_name=group_name,
                    variant_name=variant_name,
                    scale=_modifier_slot(scale_name),
                    state=_modifier_slot(state_name),
                    bg_token=bg.full_name,
                    bg_color=bg.value,
                    text_token=text.full_name,
                    text_color=text.value,
                    contrast_ratio=ratio,
                )
            )
    return warnings


def generate_all_tokens(
    palettes: Sequence[PrimitivePalette],
    naming: NamingConfig,
    groups: Sequence[SemanticGroup],
    states: Sequence[StateConfig],
    scales: Sequence[ScaleConfig],
) -> GenerationResult:
    """Run one full generation pass.

    Args:
        palettes: Selected primitive palettes.
        naming: Naming convention.
        groups: Semantic groups, in output order.
        states: State modifiers; disabled ones are ignored.
        scales: Scale modifiers; disabled ones are ignored.

    Returns:
        GenerationResult with tokens in group -> variant -> element ->
        scale -> state order, and one warning per background/text pair
        below 4.5:1.
    """
    enabled_scales = [s for s in scales if s.enabled]
    enabled_states = [s for s in states if s.enabled]

    tokens: list[GeneratedToken] = []
    by_context: dict[tuple[str, str, str, str], dict[str, GeneratedToken]] = {}

    for group in groups:
        for variant in group.variants:
            if not variant.is_mapped:
                logger.debug(f"Skipping unmapped variant {group.name}/{variant.name}")
                continue
            palette = _find_palette(variant.palette_ref, palettes)
            if palette is None:
                logger.debug(
                    f"Skipping {group.name}/{variant.name}: "
                    f"palette {variant.palette_ref!r} not selected"
                )
                continue
            tokens.extend(
                _generate_variant(
                    group, variant, palette, naming, enabled_scales, enabled_states, by_context
                )
            )

    warnings = _check_contrast(by_context)
    logger.info(f"Generated {len(tokens)} tokens with {len(warnings)} contrast warning(s)")
    return GenerationResult(tokens=tokens, warnings=warnings)


def generate_all_tokens_for_state(state: WizardState) -> GenerationResult:
    """Run generation against a wizard session record."""
    return generate_all_tokens(
        state.selected_palettes, state.naming, state.groups, state.states, state.scales
    )
