# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Palette engine for Ecopalette.

Color codec, harmony generation, width allocation, palette edits and the
interactive session. Everything except PaletteSession is a pure function
of its arguments (and an explicit random generator).
"""

from ecopalette.engine.edit import EditResult, EditStatus
from ecopalette.engine.generate import (
    GenerationConfig,
    GenerationResult,
    generate_sustainable_palette,
)
from ecopalette.engine.session import PaletteSession

__all__ = [
    "EditResult",
    "EditStatus",
    "GenerationConfig",
    "GenerationResult",
    "generate_sustainable_palette",
    "PaletteSession",
]
