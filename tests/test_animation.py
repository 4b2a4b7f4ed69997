"""Tests for animation and typography synthesis."""

import pytest

from designgen.art.animation import (
    ANIMATION_STYLES,
    DURATION_RANGES,
    EASINGS,
    resolve_style,
    synthesize_animation,
)
from designgen.art.typography import FONT_FAMILIES, rem, synthesize_typography
from designgen.rng import SeededRandom


class TestAnimation:
    @pytest.mark.parametrize("alias, style", [
        ("subtle", "fade"), ("minimal", "fade"), ("dynamic", "bounce"), ("zoom", "zoom"),
    ])
    def test_aliases(self, alias, style):
        rng = SeededRandom("x")
        assert resolve_style(alias, rng) == style
        assert rng.draws == 0

    def test_no_preference_draws_a_style(self):
        rng = SeededRandom("x")
        assert resolve_style(None, rng) in ANIMATION_STYLES
        assert rng.draws == 1

    def test_fixed_animation_is_enabled(self):
        config = synthesize_animation("slide", False, SeededRandom("x"))
        assert config.enabled is True
        assert config.style == "slide"

    def test_duration_and_easing_within_style_ranges(self):
        for i in range(50):
            config = synthesize_animation(None, True, SeededRandom(f"anim-{i}"))
            lo, spread = DURATION_RANGES[config.style]
            assert lo <= config.duration <= lo + spread
            assert config.easing in EASINGS[config.style]

    def test_unknown_style_uses_defaults(self):
        config = synthesize_animation("wiggle", True, SeededRandom("x"))
        assert config.style == "wiggle"
        assert config.duration == 500
        assert config.easing == "ease-in-out"

    def test_reduced_motion(self):
        rng = SeededRandom
        assert synthesize_animation("fade", True, rng("x")).reduced_motion is True
        assert synthesize_animation("fade", True, rng("x"), reduced_motion=False).reduced_motion is False
        assert synthesize_animation("fade", True, rng("x"), reduced_motion=True).reduced_motion is True

    def test_serialized_key(self):
        config = synthesize_animation("fade", False, SeededRandom("x"))
        assert "reducedMotion" in config.to_dict()


class TestTypography:
    def test_one_family_for_all_roles(self):
        config = synthesize_typography(SeededRandom("type"))
        assert config.font_family in FONT_FAMILIES
        assert config.heading_font == config.font_family == config.body_font

    def test_scale_bounds(self):
        for i in range(30):
            sizes = synthesize_typography(SeededRandom(f"type-{i}")).sizes
            assert 3.0 <= float(sizes.h1[:-3]) <= 5.0
            assert 2.0 <= float(sizes.h2[:-3]) <= 3.5
            assert 1.5 <= float(sizes.h3[:-3]) <= 2.5
            assert 0.875 <= float(sizes.body[:-3]) <= 1.125
            assert 0.75 <= float(sizes.small[:-3]) <= 0.875

    def test_draw_count(self):
        rng = SeededRandom("type")
        synthesize_typography(rng)
        assert rng.draws == 6

    def test_rem_formatting(self):
        assert rem(2.0) == "2rem"
        assert rem(1.23456) == "1.235rem"
        assert rem(0) == "0rem"

    def test_weights(self):
        weights = synthesize_typography(SeededRandom("w")).to_dict()["weights"]
        assert weights == {"light": 300, "normal": 400, "medium": 500, "bold": 700}
