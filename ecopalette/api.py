# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Functional API.

Thin wrappers over ``ecopalette.engine`` that take and return Palette
values directly. Use the ``engine.edit`` functions when the edit status
is needed, or PaletteSession for selection and drag-resize state.
"""

from __future__ import annotations

from typing import Optional, Union

import numpy as np

from ecopalette.engine import edit
from ecopalette.engine.colorspace import hex_to_rgb
from ecopalette.engine.generate import GenerationConfig, generate_sustainable_palette
from ecopalette.engine.sustainability import palette_sustainability, sustainability
from ecopalette.schema import HarmonyStrategy, Palette, RGBColor, WidthDirection


def generate(
    strategy: Union[HarmonyStrategy, str] = HarmonyStrategy.RANDOM,
    *,
    config: Optional[GenerationConfig] = None,
    seed: Optional[int] = None,
) -> Palette:
    """Generate a sustainable palette for a harmony strategy."""
    rng = np.random.default_rng(seed)
    return generate_sustainable_palette(strategy, config, rng).palette


def add(palette: Palette, color: str) -> Palette:
    return edit.add_color(palette, color).palette


def remove(palette: Palette, color: str) -> Palette:
    return edit.remove_color(palette, color).palette


def swap(palette: Palette, color_a: str, color_b: str) -> Palette:
    return edit.swap_colors(palette, color_a, color_b).palette


def toggle_lock(palette: Palette, index: int) -> Palette:
    return edit.toggle_lock(palette, index).palette


def adjust_width(
    palette: Palette,
    index: int,
    direction: Union[WidthDirection, str],
) -> Palette:
    return edit.adjust_width(palette, index, direction).palette


def sustainability_of(color: str) -> int:
    return sustainability(color)


def palette_sustainability_of(palette: Palette) -> int:
    return palette_sustainability(palette)


def rgb_of(color: str) -> RGBColor:
    return hex_to_rgb(color)
