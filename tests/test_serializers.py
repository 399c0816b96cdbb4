# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""Tests for the palette summary serializer."""

import json

import pytest

from ecopalette.runtime import SerializerFormat, to_summary
from ecopalette.schema import Palette, PaletteEntry


@pytest.fixture
def palette():
    return Palette((
        PaletteEntry("#000000", 75.0, locked=True),
        PaletteEntry("#FFFFFF", 25.0),
    ))


class TestNatural:

    def test_full_output(self, palette):
        assert to_summary(palette) == "\n".join([
            "## Palette Summary",
            "",
            "**Overall Sustainability:** 75% (Moderately Sustainable)",
            "",
            "1. #000000 rgb(0, 0, 0) -- 75% usage, 100% sustainable (Excellent) [locked]",
            "2. #FFFFFF rgb(255, 255, 255) -- 25% usage, 0% sustainable (Poor)",
        ])

    def test_no_preamble(self, palette):
        text = to_summary(palette, preamble=False)
        assert not text.startswith("##")
        assert text.startswith("**Overall Sustainability:**")

    def test_usage_rounded(self):
        p = Palette((
            PaletteEntry("#000000", 100 / 3),
            PaletteEntry("#111111", 100 / 3),
            PaletteEntry("#222222", 100 / 3),
        ))
        assert "33% usage" in to_summary(p)

    def test_empty(self):
        assert to_summary(Palette.empty()).endswith("Empty palette")


class TestJSON:

    def test_compact(self, palette):
        text = to_summary(palette, format=SerializerFormat.JSON)
        assert "\n" not in text
        assert ", " not in text
        data = json.loads(text)
        assert data["sustainability"] == 75
        assert data["status"] == "Moderately Sustainable"

    def test_pretty(self, palette):
        text = to_summary(palette, format=SerializerFormat.JSON_PRETTY)
        assert "\n  " in text
        assert json.loads(text) == json.loads(to_summary(palette, format=SerializerFormat.JSON))

    def test_color_fields(self, palette):
        data = json.loads(to_summary(palette, format=SerializerFormat.JSON))
        black, white = data["colors"]
        assert black == {
            "hex": "#000000",
            "rgb": {"r": 0, "g": 0, "b": 0},
            "width": 75.0,
            "locked": True,
            "sustainability": 100,
            "rating": "Excellent",
            "text": "light",
        }
        assert white["text"] == "dark"
        assert white["rating"] == "Poor"

    def test_empty_has_no_status(self):
        data = json.loads(to_summary(Palette.empty(), format=SerializerFormat.JSON))
        assert data == {"sustainability": 0, "status": None, "colors": []}
