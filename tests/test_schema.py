# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""Tests for schema types, invariants and serialization roundtrips."""

import json

import pytest

from ecopalette.errors import InvalidColorFormat, InvariantViolation
from ecopalette.schema import (
    MAX_SIZE,
    HarmonyStrategy,
    Palette,
    PaletteEntry,
    RGBColor,
    WidthDirection,
)


class TestRGBColor:

    def test_hex(self):
        assert RGBColor(26, 43, 60).hex == "#1A2B3C"

    def test_css(self):
        assert RGBColor(26, 43, 60).css == "rgb(26, 43, 60)"

    def test_unpacks(self):
        r, g, b = RGBColor(1, 2, 3)
        assert (r, g, b) == (1, 2, 3)

    def test_invalid_channel(self):
        with pytest.raises(ValueError, match="Channel g"):
            RGBColor(0, 256, 0)

    def test_frozen(self):
        c = RGBColor(1, 2, 3)
        with pytest.raises(AttributeError):
            c.r = 4


class TestPaletteEntry:

    def test_color_normalized(self):
        assert PaletteEntry("#abcdef", 100.0).color == "#ABCDEF"

    def test_defaults_unlocked(self):
        assert PaletteEntry("#000000", 100.0).locked is False

    def test_bad_color(self):
        with pytest.raises(InvalidColorFormat):
            PaletteEntry("abcdef", 100.0)

    def test_width_out_of_range(self):
        with pytest.raises(InvariantViolation):
            PaletteEntry("#000000", 120.0)
        with pytest.raises(InvariantViolation):
            PaletteEntry("#000000", -1.0)

    def test_with_width_keeps_lock(self):
        e = PaletteEntry("#000000", 40.0, locked=True).with_width(60.0)
        assert e.width == 60.0
        assert e.locked

    def test_sustainability(self):
        assert PaletteEntry("#000000", 100.0).sustainability == 100

    def test_to_dict_roundtrip(self):
        e = PaletteEntry("#123456", 42.5, locked=True)
        assert PaletteEntry.from_dict(e.to_dict()) == e

    def test_from_dict_default_lock(self):
        e = PaletteEntry.from_dict({"color": "#123456", "width": 100})
        assert e.locked is False
        assert e.width == 100.0


class TestPaletteInvariants:

    def test_empty_is_valid(self):
        p = Palette.empty()
        assert len(p) == 0
        assert p.colors == ()

    def test_widths_must_sum_to_100(self):
        with pytest.raises(InvariantViolation, match="sum to 100"):
            Palette((PaletteEntry("#000000", 50.0), PaletteEntry("#FFFFFF", 40.0)))

    def test_tolerance(self):
        p = Palette((PaletteEntry("#000000", 50.05), PaletteEntry("#FFFFFF", 50.0)))
        assert len(p) == 2

    def test_unlocked_minimum(self):
        with pytest.raises(InvariantViolation, match="narrower"):
            Palette((PaletteEntry("#000000", 97.0), PaletteEntry("#FFFFFF", 3.0)))

    def test_locked_may_be_narrow(self):
        p = Palette((PaletteEntry("#000000", 97.0), PaletteEntry("#FFFFFF", 3.0, locked=True)))
        assert p.locked_width == 3.0

    def test_unique_colors(self):
        with pytest.raises(InvariantViolation, match="unique"):
            Palette((PaletteEntry("#000000", 50.0), PaletteEntry("#000000", 50.0)))

    def test_unique_is_case_insensitive(self):
        with pytest.raises(InvariantViolation):
            Palette((PaletteEntry("#abcdef", 50.0), PaletteEntry("#ABCDEF", 50.0)))

    def test_max_size(self):
        entries = tuple(PaletteEntry(f"#00000{i}", 100.0 / 6) for i in range(6))
        with pytest.raises(InvariantViolation, match="at most"):
            Palette(entries)

    def test_list_coerced_to_tuple(self):
        p = Palette([PaletteEntry("#000000", 100.0)])
        assert isinstance(p.entries, tuple)


class TestPaletteAccessors:

    @pytest.fixture
    def palette(self):
        return Palette((
            PaletteEntry("#000000", 40.0, locked=True),
            PaletteEntry("#808080", 35.0),
            PaletteEntry("#FFFFFF", 25.0),
        ))

    def test_sequence_protocol(self, palette):
        assert len(palette) == 3
        assert palette[1].color == "#808080"
        assert [e.color for e in palette] == list(palette.colors)

    def test_widths(self, palette):
        assert palette.widths == (40.0, 35.0, 25.0)

    def test_lock_totals(self, palette):
        assert palette.locked_width == 40.0
        assert palette.unlocked_count == 2

    def test_index_of(self, palette):
        assert palette.index_of("#ffffff") == 2
        assert palette.index_of("#123456") is None
        assert palette.contains("#808080")

    def test_is_full(self, palette):
        assert not palette.is_full
        full = Palette(tuple(PaletteEntry(f"#00000{i}", 20.0) for i in range(MAX_SIZE)))
        assert full.is_full

    def test_json_roundtrip(self, palette):
        assert Palette.from_json(palette.to_json()) == palette

    def test_json_shape(self, palette):
        data = json.loads(palette.to_json())
        assert data["entries"][0] == {"color": "#000000", "width": 40.0, "locked": True}

    def test_from_dict_validates(self):
        with pytest.raises(InvariantViolation):
            Palette.from_dict({"entries": [{"color": "#000000", "width": 10}]})


class TestEnums:

    def test_strategy_values(self):
        assert HarmonyStrategy("complementary") is HarmonyStrategy.COMPLEMENTARY
        assert {s.value for s in HarmonyStrategy} == {
            "random", "analogous", "monochromatic", "triad", "complementary",
        }

    def test_strategy_descriptions(self):
        for s in HarmonyStrategy:
            assert s.description

    def test_width_direction(self):
        assert WidthDirection("up") is WidthDirection.UP
