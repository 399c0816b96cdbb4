# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Serializers for palette summaries.

All serializers report the palette exactly as given; derived values
(scores, ratings) are recomputed from the colors and widths.
"""

from ecopalette.runtime.serializers.base import SerializerFormat
from ecopalette.runtime.serializers.summary import to_summary

__all__ = [
    "SerializerFormat",
    "to_summary",
]
