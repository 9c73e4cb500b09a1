"""Tests for semantic token generation and contrast warnings."""

from __future__ import annotations

import pytest


def _generate(palettes, naming, groups, states, scales):
    from tokenwright.core.generator import generate_all_tokens

    return generate_all_tokens(palettes, naming, groups, states, scales)


class TestEndToEnd:
    def test_single_variant(
        self, success_palette, short_naming, feedback_group, default_state_only, default_scale_only
    ):
        result = _generate(
            [success_palette], short_naming, [feedback_group], default_state_only,
            default_scale_only,
        )

        assert [t.full_name for t in result.tokens] == [
            "feedback-success-bg",
            "feedback-success-text",
        ]
        bg = result.find("feedback-success-bg")
        assert bg is not None
        assert bg.value == "#198754"
        assert result.warnings == []

    def test_auto_text_passes_aa(
        self, success_palette, short_naming, feedback_group, default_state_only, default_scale_only
    ):
        from tokenwright.core.contrast import contrast_ratio

        result = _generate(
            [success_palette], short_naming, [feedback_group], default_state_only,
            default_scale_only,
        )
        text = result.find("feedback-success-text")
        assert text is not None
        # The 90% tint only reaches ~4:1 here, so black is used instead
        assert text.value == "#000000"
        assert contrast_ratio("#198754", text.value) >= 4.5

    def test_unabbreviated_name(
        self, success_palette, short_naming, feedback_group, default_state_only, default_scale_only
    ):
        naming = short_naming.model_copy(update={"abbreviate": False})
        result = _generate(
            [success_palette], naming, [feedback_group], default_state_only, default_scale_only
        )
        assert result.tokens[0].full_name == "feedback-success-background-color"

    def test_token_metadata(
        self, success_palette, short_naming, feedback_group, default_state_only, default_scale_only
    ):
        result = _generate(
            [success_palette], short_naming, [feedback_group], default_state_only,
            default_scale_only,
        )
        bg = result.tokens[0]
        assert bg.parts.group == "feedback"
        assert bg.parts.component is None
        assert bg.parts.variant == "success"
        assert bg.parts.element == "background"
        assert bg.parts.scale is None
        assert bg.parts.state is None
        assert bg.reference == "Success"
        assert bg.primitive_ref == "success-500"
        assert bg.slot_values == {
            "component": "feedback",
            "role": "success",
            "element": "background",
            "property": "color",
        }


class TestModifiers:
    def test_default_names_omitted(self, success_palette, short_naming, feedback_group):
        from tokenwright.core.ir import DEFAULT_SCALES, DEFAULT_STATES

        result = _generate(
            [success_palette], short_naming, [feedback_group], DEFAULT_STATES, DEFAULT_SCALES
        )
        assert len(result.tokens) == 2 * len(DEFAULT_SCALES) * len(DEFAULT_STATES)
        for token in result.tokens:
            assert "default" not in token.full_name.split("-")

    def test_iteration_order(self, success_palette, short_naming, feedback_group):
        from tokenwright.core.ir import DEFAULT_SCALES, DEFAULT_STATES

        result = _generate(
            [success_palette], short_naming, [feedback_group], DEFAULT_STATES, DEFAULT_SCALES
        )
        names = [t.full_name for t in result.tokens[:6]]
        assert names == [
            "feedback-success-bg-subtle",
            "feedback-success-bg-subtle-hover",
            "feedback-success-bg-subtle-active",
            "feedback-success-bg-subtle-focus",
            "feedback-success-bg-subtle-disabled",
            "feedback-success-bg",
        ]

    def test_state_applied_after_scale(self, success_palette, short_naming, feedback_group):
        from tokenwright.core.color_transform import darken, lighten
        from tokenwright.core.ir import ColorTransform, ScaleConfig, StateConfig

        states = [
            StateConfig(id="hover", name="hover", color_transform=ColorTransform.DARKEN, amount=8)
        ]
        subtle = ColorTransform.LIGHTEN
        scales = [ScaleConfig(id="subtle", name="subtle", color_transform=subtle, amount=80)]
        result = _generate([success_palette], short_naming, [feedback_group], states, scales)
        bg = result.find("feedback-success-bg-subtle-hover")
        assert bg is not None
        assert bg.value == darken(lighten("#198754", 80), 8)

    def test_disabled_modifiers_skipped(self, success_palette, short_naming, feedback_group):
        from tokenwright.core.ir import ScaleConfig, StateConfig

        states = [
            StateConfig(id="default", name="default"),
            StateConfig(id="hover", name="hover", enabled=False),
        ]
        scales = [ScaleConfig(id="default", name="default")]
        result = _generate([success_palette], short_naming, [feedback_group], states, scales)
        assert len(result.tokens) == 2
        assert all("hover" not in t.full_name for t in result.tokens)

    def test_all_states_disabled_generates_nothing(
        self, success_palette, short_naming, feedback_group, default_scale_only
    ):
        from tokenwright.core.ir import StateConfig

        states = [StateConfig(id="default", name="default", enabled=False)]
        result = _generate(
            [success_palette], short_naming, [feedback_group], states, default_scale_only
        )
        assert result.tokens == []
        assert result.warnings == []

    def test_deterministic(self, success_palette, short_naming, feedback_group):
        from tokenwright.core.ir import DEFAULT_SCALES, DEFAULT_STATES

        args = ([success_palette], short_naming, [feedback_group], DEFAULT_STATES, DEFAULT_SCALES)
        assert _generate(*args) == _generate(*args)


class TestMapping:
    def test_unmapped_variant_is_noop(
        self, success_palette, short_naming, default_state_only, default_scale_only
    ):
        from tokenwright.core.ir import SemanticGroup, SemanticVariant

        group = SemanticGroup(
            id="feedback",
            name="feedback",
            variants=[SemanticVariant(id="feedback-info", name="info")],
        )
        result = _generate(
            [success_palette], short_naming, [group], default_state_only, default_scale_only
        )
        assert result.tokens == []

    def test_unknown_palette_is_noop(
        self, success_palette, short_naming, default_state_only, default_scale_only
    ):
        from tokenwright.core.ir import SemanticGroup, SemanticVariant

        group = SemanticGroup(
            id="feedback",
            name="feedback",
            variants=[SemanticVariant(id="x", name="info", palette_ref="sample:Missing")],
        )
        result = _generate(
            [success_palette], short_naming, [group], default_state_only, default_scale_only
        )
        assert result.tokens == []

    def test_shade_index_selects_shade(
        self, success_palette, short_naming, bg_text_elements, default_state_only,
        default_scale_only,
    ):
        from tokenwright.core.ir import SemanticGroup, SemanticVariant

        group = SemanticGroup(
            id="feedback",
            name="feedback",
            variants=[
                SemanticVariant(
                    id="s",
                    name="success",
                    palette_ref=success_palette.ref,
                    shade_index=0,
                    elements=bg_text_elements,
                )
            ],
        )
        result = _generate(
            [success_palette], short_naming, [group], default_state_only, default_scale_only
        )
        assert result.tokens[0].value == "#D1E7DD"

    def test_component_group_parts(
        self, success_palette, short_naming, bg_text_elements, default_state_only,
        default_scale_only,
    ):
        from tokenwright.core.ir import GroupType, SemanticGroup, SemanticVariant

        group = SemanticGroup(
            id="button",
            type=GroupType.COMPONENT,
            name="button",
            variants=[
                SemanticVariant(
                    id="b",
                    name="primary",
                    palette_ref=success_palette.ref,
                    elements=bg_text_elements,
                )
            ],
        )
        result = _generate(
            [success_palette], short_naming, [group], default_state_only, default_scale_only
        )
        assert result.tokens[0].parts.component == "button"
        assert result.tokens[0].parts.group is None
        assert result.tokens[0].full_name == "button-primary-bg"

    def test_all_four_elements(
        self, success_palette, short_naming, default_state_only, default_scale_only
    ):
        from tokenwright.core.color_transform import darken, lighten
        from tokenwright.core.ir import SemanticGroup, SemanticVariant

        group = SemanticGroup(
            id="feedback",
            name="feedback",
            variants=[SemanticVariant(id="s", name="success", palette_ref=success_palette.ref)],
        )
        result = _generate(
            [success_palette], short_naming, [group], default_state_only, default_scale_only
        )
        values = {t.parts.element: t.value for t in result.tokens}
        assert values["background"] == "#198754"
        assert values["border"] == darken("#198754", 10)
        assert values["icon"] == lighten("#198754", 85)


class TestContrastWarnings:
    def _pastel_group(self, text_mode):
        from tokenwright.core.ir import SemanticElement, SemanticGroup, SemanticVariant

        return SemanticGroup(
            id="feedback",
            name="feedback",
            variants=[
                SemanticVariant(
                    id="w",
                    name="warning",
                    palette_ref="sample:Warning",
                    shade_index=0,
                    text_mode=text_mode,
                    elements=[
                        SemanticElement(id="bg", name="background"),
                        SemanticElement(id="text", name="text"),
                    ],
                )
            ],
        )

    def test_light_text_on_pastel_warns(self, short_naming, default_state_only, default_scale_only):
        from tokenwright.core.contrast import contrast_ratio
        from tokenwright.core.library import get_library_palette

        palette = get_library_palette("Warning")
        result = _generate(
            [palette], short_naming, [self._pastel_group("light")], default_state_only,
            default_scale_only,
        )

        assert len(result.warnings) == 1
        warning = result.warnings[0]
        assert warning.bg_color == "#FFF3CD"
        assert warning.text_color == "#FFFFFF"
        assert warning.bg_token == "feedback-warning-bg"
        assert warning.text_token == "feedback-warning-text"
        assert warning.group_name == "feedback"
        assert warning.variant_name == "warning"
        assert warning.scale is None
        assert warning.state is None
        assert warning.contrast_ratio == pytest.approx(contrast_ratio("#FFF3CD", "#FFFFFF"))
        assert warning.contrast_ratio < 4.5

    def test_auto_text_on_pastel_is_clean(
        self, short_naming, default_state_only, default_scale_only
    ):
        from tokenwright.core.library import get_library_palette

        palette = get_library_palette("Warning")
        result = _generate(
            [palette], short_naming, [self._pastel_group("auto")], default_state_only,
            default_scale_only,
        )
        assert result.warnings == []
        assert result.find("feedback-warning-text").value == "#000000"

    def test_warning_per_state(self, short_naming, default_scale_only):
        from tokenwright.core.ir import DEFAULT_STATES
        from tokenwright.core.library import get_library_palette

        palette = get_library_palette("Warning")
        result = _generate(
            [palette], short_naming, [self._pastel_group("light")], DEFAULT_STATES,
            default_scale_only,
        )
        states = {w.state for w in result.warnings}
        # white on the pastel misses AA in the default state too
        assert None in states
        assert all(w.contrast_ratio < 4.5 for w in result.warnings)


class TestGenerateForState:
    def test_uses_wizard_state(self, success_palette, short_naming, feedback_group):
        from tokenwright.core.generator import generate_all_tokens_for_state
        from tokenwright.core.ir import ScaleConfig, StateConfig, WizardState

        state = WizardState(
            selected_palettes=[success_palette],
            naming=short_naming,
            groups=[feedback_group],
            states=[StateConfig(id="default", name="default")],
            scales=[ScaleConfig(id="default", name="default")],
        )
        result = generate_all_tokens_for_state(state)
        assert len(result.tokens) == 2


class TestPrimitiveRef:
    def test_uses_naming(self, success_palette):
        from tokenwright.core.generator import build_primitive_ref
        from tokenwright.core.ir import NamingConfig

        assert build_primitive_ref(success_palette, NamingConfig()) == "success.500"

    def test_multiword_collection(self):
        from tokenwright.core.generator import build_primitive_ref
        from tokenwright.core.ir import NamingConfig, PrimitivePalette, Shade, Separator

        palette = PrimitivePalette(
            collection_name="Sky Blue",
            base_value="#4183CA",
            shades=[Shade(name="sky-300", value="#4183CA")],
        )
        naming = NamingConfig(separator=Separator.DASH)
        assert build_primitive_ref(palette, naming) == "sky-blue-300"
