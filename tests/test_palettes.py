"""Tests for color conversion, taste classification and palette synthesis."""

import numpy as np
import pytest

from designgen.art.palettes import (
    COLOR_SCHEMES,
    DARK_NEUTRALS,
    HEX_COLOR,
    NEUTRAL_OPTIONS,
    STATUS_COLORS,
    InvalidPaletteError,
    classify_taste,
    get_palette_array,
    hex_to_rgb,
    hsl_to_rgb,
    jitter_color,
    rgb_to_hex,
    rgb_to_hsl,
    synthesize_palette,
    validate_palette,
)
from designgen.rng import SeededRandom


class TestColorConversion:
    def test_hex_to_rgb(self):
        assert hex_to_rgb("#1E40AF") == (30, 64, 175)
        assert hex_to_rgb("#ffffff") == (255, 255, 255)

    @pytest.mark.parametrize("bad", ["1E40AF", "#1E40A", "#GGGGGG", "", "#1E40AF0"])
    def test_hex_to_rgb_rejects_malformed(self, bad):
        with pytest.raises(ValueError):
            hex_to_rgb(bad)

    def test_rgb_to_hex_clamps_and_uppercases(self):
        assert rgb_to_hex(300, -4, 171) == "#FF00AB"

    def test_hsl_round_trip(self):
        r, g, b = hsl_to_rgb(*rgb_to_hsl(30, 64, 175))
        assert abs(r - 30) <= 1
        assert abs(g - 64) <= 1
        assert abs(b - 175) <= 1

    def test_grey_has_no_hue(self):
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert h == 0.0 and s == 0.0
        assert l == pytest.approx(128 / 255)

    def test_jitter_yields_valid_hex(self):
        rng = SeededRandom("jitter")
        for _ in range(100):
            assert HEX_COLOR.match(jitter_color("#1E40AF", rng))
        assert rng.draws == 300


class TestClassifyTaste:
    @pytest.mark.parametrize("industry, expected", [
        ("technology", "professional"),
        ("Fintech startup", "professional"),
        ("Graphic design", "creative"),
        ("banking", "corporate"),
        ("", "corporate"),
        ("agriculture", "corporate"),
    ])
    def test_categories(self, industry, expected):
        assert classify_taste(industry) == expected

    def test_first_category_wins(self):
        # "tech" (professional) and "media" (creative) both match.
        assert classify_taste("tech media") == "professional"


class TestSynthesizePalette:
    def test_base_scheme_with_dark_neutrals(self):
        palette = synthesize_palette("professional", False, SeededRandom("abc"))
        bases = [(s["primary"], s["secondary"], s["accent"])
                 for s in COLOR_SCHEMES["professional"]]
        assert (palette.primary, palette.secondary, palette.accent) in bases
        assert palette.background == "#0F172A"
        assert palette.surface == "#1E293B"
        assert palette.text == "#FFFFFF"
        assert palette.text_muted == "#94A3B8"

    def test_fixed_palette_uses_one_draw(self):
        rng = SeededRandom("abc")
        synthesize_palette("creative", False, rng)
        assert rng.draws == 1

    def test_jittered_palette_draws_neutrals_from_options(self):
        rng = SeededRandom("jittered")
        palette = synthesize_palette("creative", True, rng)
        validate_palette(palette)
        for role, options in NEUTRAL_OPTIONS.items():
            assert getattr(palette, role) in options
        assert palette.success == STATUS_COLORS["success"]
        # index + 3 colors x 3 jitters + 4 neutrals
        assert rng.draws == 14

    def test_unknown_category_falls_back(self):
        palette = synthesize_palette("brutalist", False, SeededRandom("x"))
        primaries = [s["primary"] for s in COLOR_SCHEMES["corporate"]]
        assert palette.primary in primaries

    def test_malformed_scheme_raises(self):
        schemes = {"corporate": ({"primary": "#XYZXYZ", "secondary": "#000000",
                                  "accent": "#000000"},)}
        with pytest.raises(InvalidPaletteError):
            synthesize_palette("corporate", True, SeededRandom("x"), schemes=schemes)
        palette = synthesize_palette("corporate", False, SeededRandom("x"), schemes=schemes)
        with pytest.raises(InvalidPaletteError, match="primary"):
            validate_palette(palette)

    def test_invalid_palette_is_value_error(self):
        assert issubclass(InvalidPaletteError, ValueError)


class TestPaletteArray:
    def test_shape_and_range(self):
        palette = synthesize_palette("professional", False, SeededRandom("arr"))
        arr = get_palette_array(palette)
        assert arr.shape == (10, 3)
        assert np.all((arr >= 0.0) & (arr <= 1.0))
        assert tuple(np.round(arr[3] * 255).astype(int)) == hex_to_rgb(DARK_NEUTRALS["background"])
