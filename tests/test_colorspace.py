# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""Tests for the color codec (hex ↔ RGB ↔ HSL)."""

import numpy as np
import pytest

from ecopalette.engine.colorspace import (
    hex_to_hsl,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    normalize_hex,
    rgb_to_hex,
    rgb_to_hsl,
    round_half_up,
)
from ecopalette.errors import InvalidColorFormat


class TestHexParsing:

    def test_channels(self):
        rgb = hex_to_rgb("#1A2B3C")
        assert (rgb.r, rgb.g, rgb.b) == (26, 43, 60)

    def test_lowercase_accepted(self):
        assert hex_to_rgb("#ff8000") == hex_to_rgb("#FF8000")

    def test_normalize_uppercases(self):
        assert normalize_hex("#abcdef") == "#ABCDEF"

    @pytest.mark.parametrize("value", [
        "123456",      # no '#'
        "#12345",      # too short
        "#1234567",    # too long
        "#GGGGGG",     # not hex
        "# 12345",
        "",
        None,
        0x123456,
    ])
    def test_malformed_rejected(self, value):
        with pytest.raises(InvalidColorFormat):
            hex_to_rgb(value)

    def test_invalid_format_is_value_error(self):
        with pytest.raises(ValueError):
            normalize_hex("red")


class TestHexEncoding:

    def test_rgb_to_hex(self):
        assert rgb_to_hex(26, 43, 60) == "#1A2B3C"

    def test_rounds_and_clamps(self):
        assert rgb_to_hex(255.6, -3, 12.5) == "#FF000D"

    def test_round_half_up(self):
        assert round_half_up(2.5) == 3
        assert round_half_up(0.5) == 1
        assert round_half_up(1.4999) == 1


class TestRGBToHSL:

    def test_primary_red(self):
        assert rgb_to_hsl(255, 0, 0) == pytest.approx((0.0, 100.0, 50.0))

    def test_primary_green(self):
        assert rgb_to_hsl(0, 255, 0) == pytest.approx((120.0, 100.0, 50.0))

    def test_primary_blue(self):
        assert rgb_to_hsl(0, 0, 255) == pytest.approx((240.0, 100.0, 50.0))

    def test_achromatic_has_no_hue_or_saturation(self):
        h, s, l = rgb_to_hsl(128, 128, 128)
        assert h == 0.0
        assert s == 0.0
        assert l == pytest.approx(50.196, abs=0.01)

    def test_steel_blue(self):
        h, s, l = hex_to_hsl("#336699")
        assert h == pytest.approx(210.0)
        assert s == pytest.approx(50.0)
        assert l == pytest.approx(40.0)

    def test_hue_range(self):
        h, _, _ = rgb_to_hsl(255, 0, 1)  # just short of a full turn
        assert 0.0 <= h < 360.0


class TestHSLToRGB:

    def test_primaries(self):
        assert hsl_to_hex(0, 100, 50) == "#FF0000"
        assert hsl_to_hex(120, 100, 50) == "#00FF00"
        assert hsl_to_hex(240, 100, 50) == "#0000FF"

    def test_black_and_white(self):
        assert hsl_to_hex(0, 0, 0) == "#000000"
        assert hsl_to_hex(0, 0, 100) == "#FFFFFF"

    def test_hue_wraps(self):
        assert hsl_to_hex(360, 100, 50) == "#FF0000"
        assert hsl_to_hex(-120, 100, 50) == "#0000FF"

    def test_known_color(self):
        assert hsl_to_hex(180, 50, 40) == "#339999"

    def test_channels_in_range(self):
        rgb = hsl_to_rgb(300, 100, 99)
        assert all(0 <= c <= 255 for c in rgb)


class TestRoundtrip:

    def test_hex_hsl_hex_within_one(self):
        channels = np.random.default_rng(42).integers(0, 256, size=(200, 3))
        for r, g, b in channels:
            original = rgb_to_hex(int(r), int(g), int(b))
            recovered = hex_to_rgb(hsl_to_hex(*hex_to_hsl(original)))
            assert abs(recovered.r - r) <= 1
            assert abs(recovered.g - g) <= 1
            assert abs(recovered.b - b) <= 1

    def test_extremes_exact(self):
        for color in ("#000000", "#FFFFFF", "#FF0000", "#336699"):
            assert hsl_to_hex(*hex_to_hsl(color)) == color
