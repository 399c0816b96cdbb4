# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Ecopalette -- Sustainable color palette engine.

Generates small harmonious palettes weighted toward dark, display-efficient
colors, and keeps their usage shares consistent through interactive edits.

Quick start::

    from ecopalette import PaletteSession

    session = PaletteSession()
    session.generate("triad")
    session.adjust_width(0, "up")
    session.sustainability   # weighted score, 0-100
"""

from __future__ import annotations

__version__ = "1.0.0"

from ecopalette.api import (
    add,
    adjust_width,
    generate,
    palette_sustainability_of,
    remove,
    rgb_of,
    sustainability_of,
    swap,
    toggle_lock,
)
from ecopalette.engine import EditResult, EditStatus, GenerationConfig, PaletteSession
from ecopalette.errors import EcopaletteError, InvalidColorFormat, ResizeError
from ecopalette.schema import (
    HarmonyStrategy,
    Palette,
    PaletteEntry,
    RGBColor,
    WidthDirection,
)

__all__ = [
    # Session
    "PaletteSession",
    # Functional API
    "generate",
    "add",
    "remove",
    "swap",
    "toggle_lock",
    "adjust_width",
    "sustainability_of",
    "palette_sustainability_of",
    "rgb_of",
    # Types (commonly needed)
    "Palette",
    "PaletteEntry",
    "RGBColor",
    "HarmonyStrategy",
    "WidthDirection",
    "EditResult",
    "EditStatus",
    "GenerationConfig",
    # Errors
    "EcopaletteError",
    "InvalidColorFormat",
    "ResizeError",
    # Version
    "__version__",
]
