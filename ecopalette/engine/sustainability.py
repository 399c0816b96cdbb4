# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Sustainability scoring.

A color's score is a fixed heuristic for how cheap it is to show on an
emissive display: the darker the color, the higher the score.

    luminance(c)      = 0.299 R + 0.587 G + 0.114 B      (ITU-R BT.601)
    sustainability(c) = round((255 - luminance) / 255 * 100)

A palette's score is the width-weighted average of its entries' scores.
Widths already sum to 100, so no further normalization is applied.
"""

from __future__ import annotations

from typing import Iterable, Union

import numpy as np

from ecopalette.engine.colorspace import hex_to_rgb, round_half_up
from ecopalette.schema.palette import (
    Palette,
    PaletteEntry,
    PaletteStatus,
    SustainabilityRating,
)


# Perceptual luminance weights, in thousandths
_LUMA_WEIGHTS = (299, 587, 114)


def luminance(hex_color: str) -> float:
    """Perceptual luminance of a color on a 0-255 scale."""
    rgb = hex_to_rgb(hex_color)
    wr, wg, wb = _LUMA_WEIGHTS
    return (rgb.r * wr + rgb.g * wg + rgb.b * wb) / 1000.0


def sustainability(hex_color: str) -> int:
    """
    Sustainability score of a single color.

    Returns:
        Integer in [0, 100]; "#000000" scores 100, "#FFFFFF" scores 0
    """
    return round_half_up((255.0 - luminance(hex_color)) / 255.0 * 100.0)


def palette_sustainability(
    palette: Union[Palette, Iterable[PaletteEntry]],
) -> int:
    """
    Width-weighted sustainability of a palette.

    Args:
        palette: A Palette or any iterable of PaletteEntry

    Returns:
        round(Σ score(entry) * width / 100), or 0 for an empty palette
    """
    entries = list(palette)
    if not entries:
        return 0

    scores = np.array([sustainability(e.color) for e in entries], dtype=np.float64)
    widths = np.array([e.width for e in entries], dtype=np.float64)
    return round_half_up(float(np.dot(scores, widths / 100.0)))


def rate_color(score: int) -> SustainabilityRating:
    """Label a single color's score."""
    if score > 75:
        return SustainabilityRating.EXCELLENT
    if score > 50:
        return SustainabilityRating.GOOD
    if score > 25:
        return SustainabilityRating.FAIR
    return SustainabilityRating.POOR


def rate_palette(score: int) -> PaletteStatus:
    """Label a palette's overall score."""
    if score > 75:
        return PaletteStatus.HIGHLY_SUSTAINABLE
    if score > 60:
        return PaletteStatus.MODERATELY_SUSTAINABLE
    if score > 45:
        return PaletteStatus.LIMITED_SUSTAINABILITY
    return PaletteStatus.POOR_SUSTAINABILITY


def prefers_dark_text(hex_color: str) -> bool:
    """True when a label drawn on this color should be dark (light background)."""
    return sustainability(hex_color) < 50
