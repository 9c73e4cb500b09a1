"""Tests for linear lighten/darken modifiers."""

from __future__ import annotations

import pytest


class TestLightenDarken:
    def test_lighten_half(self):
        from tokenwright.core.color_transform import lighten

        # 127.5 rounds up
        assert lighten("#000000", 50) == "#808080"

    def test_darken_half(self):
        from tokenwright.core.color_transform import darken

        assert darken("#FFFFFF", 50) == "#808080"

    def test_zero_is_identity(self):
        from tokenwright.core.color_transform import darken, lighten

        assert lighten("#198754", 0) == "#198754"
        assert darken("#198754", 0) == "#198754"

    def test_full_amounts(self):
        from tokenwright.core.color_transform import darken, lighten

        assert lighten("#198754", 100) == "#FFFFFF"
        assert darken("#198754", 100) == "#000000"

    def test_lighten_green(self):
        from tokenwright.core.color_transform import lighten

        # (25,135,84) -> (232, 243, 237.9)
        assert lighten("#198754", 90) == "#E8F3EE"

    def test_output_uppercase(self):
        from tokenwright.core.color_transform import darken

        assert darken("#abcdef", 10) == darken("#abcdef", 10).upper()

    def test_invalid_color(self):
        from tokenwright.core.color_transform import lighten
        from tokenwright.core.errors import InvalidColorFormat

        with pytest.raises(InvalidColorFormat):
            lighten("nope", 10)


class TestApplyColorTransform:
    def test_dispatch(self):
        from tokenwright.core.color_transform import apply_color_transform, darken, lighten

        assert apply_color_transform("#198754", "lighten", 20) == lighten("#198754", 20)
        assert apply_color_transform("#198754", "darken", 20) == darken("#198754", 20)
        assert apply_color_transform("#198754", "none", 20) == "#198754"

    def test_opacity_matches_lighten(self):
        from tokenwright.core.color_transform import apply_color_transform, lighten

        assert apply_color_transform("#198754", "opacity", 40) == lighten("#198754", 40)

    def test_accepts_enum(self):
        from tokenwright.core.color_transform import apply_color_transform, darken
        from tokenwright.core.ir import ColorTransform

        assert apply_color_transform("#198754", ColorTransform.DARKEN, 8) == darken("#198754", 8)
