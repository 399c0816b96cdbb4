# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Presentation hand-off for Ecopalette.

Renders a palette's details (colors, usage, scores, ratings) for a
presentation layer. Rendering never modifies the palette.
"""

from ecopalette.runtime.serializers import SerializerFormat, to_summary

__all__ = [
    "to_summary",
    "SerializerFormat",
]
