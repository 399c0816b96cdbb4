# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Schema definitions for palettes.

All types in this module are immutable (frozen dataclasses).
Editing a palette produces a new Palette; an existing one never changes.
"""

from ecopalette.schema.palette import (
    MAX_SIZE,
    MAX_STEP_WIDTH,
    MIN_WIDTH,
    WIDTH_TOLERANCE,
    HarmonyStrategy,
    Palette,
    PaletteEntry,
    PaletteStatus,
    RGBColor,
    SustainabilityRating,
    WidthDirection,
)

__all__ = [
    # Limits
    "MAX_SIZE",
    "MIN_WIDTH",
    "MAX_STEP_WIDTH",
    "WIDTH_TOLERANCE",
    # Core types
    "RGBColor",
    "PaletteEntry",
    "Palette",
    # Selectors and labels
    "HarmonyStrategy",
    "WidthDirection",
    "SustainabilityRating",
    "PaletteStatus",
]
