# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Harmony generation on the HSL color wheel.

Each strategy derives three core colors from the base color's hue,
saturation and lightness, then adds two brightened variants:

    light      lightness 85, saturation reduced toward a floor
    mid-light  lightness 70, smaller reduction, higher floor

The variants are inserted at uniformly random slots of the growing list,
so generated palettes have no fixed visual ordering.

RANDOM is not a harmony: it ignores the base color and returns an
unconstrained random color set.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from ecopalette.engine.allocate import AllocationConfig, allocate_widths
from ecopalette.engine.colorspace import hex_to_hsl, hsl_to_hex
from ecopalette.engine.sampling import insert_at_random, random_colors
from ecopalette.schema.palette import HarmonyStrategy, Palette


# Fixed lightness of the brightened variants (percent)
LIGHT_LIGHTNESS = 85.0
MID_LIGHT_LIGHTNESS = 70.0


@dataclass(frozen=True)
class _Shade:
    """A core color: hue offset plus a floored lightness drop."""
    hue_offset: float
    lightness_drop: float = 0.0
    lightness_floor: float = 0.0


@dataclass(frozen=True)
class _Variant:
    """A brightened variant: candidate hue offsets plus a floored saturation drop."""
    hue_offsets: tuple[float, ...]
    saturation_drop: float
    saturation_floor: float


@dataclass(frozen=True)
class HarmonyRule:
    core: tuple[_Shade, _Shade, _Shade]
    light: _Variant
    mid_light: _Variant


HARMONY_RULES: dict[HarmonyStrategy, HarmonyRule] = {
    HarmonyStrategy.ANALOGOUS: HarmonyRule(
        core=(_Shade(30), _Shade(60), _Shade(-30)),
        light=_Variant((30, -30), 10, 30),
        mid_light=_Variant((60, -60), 5, 40),
    ),
    HarmonyStrategy.MONOCHROMATIC: HarmonyRule(
        core=(_Shade(0, 30, 10), _Shade(0), _Shade(0, 45, 5)),
        light=_Variant((0,), 20, 20),
        mid_light=_Variant((0,), 10, 30),
    ),
    HarmonyStrategy.TRIAD: HarmonyRule(
        core=(_Shade(120), _Shade(240), _Shade(0, 20, 20)),
        light=_Variant((0, 120, 240), 15, 25),
        mid_light=_Variant((0, 120, 240), 10, 35),
    ),
    HarmonyStrategy.COMPLEMENTARY: HarmonyRule(
        core=(_Shade(180), _Shade(0, 20, 20), _Shade(180, 20, 20)),
        light=_Variant((0, 180), 15, 25),
        mid_light=_Variant((0, 180), 10, 35),
    ),
}


def _shade_color(h: float, s: float, l: float, shade: _Shade) -> str:
    lightness = max(l - shade.lightness_drop, shade.lightness_floor)
    return hsl_to_hex((h + shade.hue_offset) % 360.0, s, lightness)


def _variant_color(
    rng: np.random.Generator,
    h: float,
    s: float,
    variant: _Variant,
    lightness: float,
) -> str:
    offset = variant.hue_offsets[int(rng.integers(len(variant.hue_offsets)))]
    saturation = max(s - variant.saturation_drop, variant.saturation_floor)
    return hsl_to_hex((h + offset) % 360.0, saturation, lightness)


def harmony_colors(
    base_color: str,
    strategy: HarmonyStrategy,
    rng: np.random.Generator,
) -> list[str]:
    """
    Derive the five colors of a harmony.

    Args:
        base_color: Seed hex color
        strategy: Harmony rule to apply
        rng: Source of randomness for variant hues and insertion slots

    Returns:
        List of 5 hex colors. Harmony math can map two rules onto the same
        hex (e.g. any hue rotation of a gray), so entries are not
        guaranteed distinct.
    """
    if strategy is HarmonyStrategy.RANDOM:
        return random_colors(rng)

    rule = HARMONY_RULES[strategy]
    h, s, l = hex_to_hsl(base_color)

    colors = [_shade_color(h, s, l, shade) for shade in rule.core]
    insert_at_random(rng, colors, _variant_color(rng, h, s, rule.light, LIGHT_LIGHTNESS))
    insert_at_random(rng, colors, _variant_color(rng, h, s, rule.mid_light, MID_LIGHT_LIGHTNESS))
    return colors


def harmony_palette(
    base_color: str,
    strategy: HarmonyStrategy,
    rng: np.random.Generator,
    config: Optional[AllocationConfig] = None,
) -> Palette:
    """
    Build a width-allocated palette from a harmony.

    Repeated colors are dropped (first occurrence wins) before widths are
    allocated, so the palette may hold fewer than five entries.
    """
    colors = list(dict.fromkeys(harmony_colors(base_color, strategy, rng)))
    return allocate_widths(colors, config)
