# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Palette summary serializer.

Formats a Palette as the details a presentation layer shows next to the
color strip: each color's hex and rgb values, usage share, sustainability
score and rating, plus the overall weighted score and status.
"""

from __future__ import annotations

import json

from ecopalette.engine.colorspace import hex_to_rgb, round_half_up
from ecopalette.engine.sustainability import (
    prefers_dark_text,
    rate_color,
    rate_palette,
    sustainability,
)
from ecopalette.runtime.serializers.base import SerializerFormat
from ecopalette.schema import Palette


def to_summary(
    palette: Palette,
    *,
    format: SerializerFormat = SerializerFormat.NATURAL,
    preamble: bool = True,
) -> str:
    """Serialize a palette summary.

    Args:
        palette: The palette to describe.
        format: NATURAL (human-readable), JSON or JSON_PRETTY.
        preamble: Include a heading (NATURAL only).

    Returns:
        Summary string.

    Example (NATURAL)::

        ## Palette Summary

        **Overall Sustainability:** 81% (Highly Sustainable)

        1. #1B2430 rgb(27, 36, 48) -- 45% usage, 87% sustainable (Excellent) [locked]
        2. #D8E1EE rgb(216, 225, 238) -- 5% usage, 12% sustainable (Poor)
    """
    data = _build_summary_data(palette)

    if format == SerializerFormat.NATURAL:
        return _to_natural(data, preamble)
    if format == SerializerFormat.JSON_PRETTY:
        return json.dumps(data, indent=2)
    return json.dumps(data, separators=(",", ":"))


def _build_summary_data(palette: Palette) -> dict:
    """Build the summary data structure."""
    score = palette.sustainability
    colors = []
    for entry in palette:
        entry_score = sustainability(entry.color)
        colors.append({
            "hex": entry.color,
            "rgb": hex_to_rgb(entry.color).to_dict(),
            "width": round(entry.width, 2),
            "locked": entry.locked,
            "sustainability": entry_score,
            "rating": rate_color(entry_score).value,
            "text": "dark" if prefers_dark_text(entry.color) else "light",
        })

    return {
        "sustainability": score,
        "status": rate_palette(score).value if colors else None,
        "colors": colors,
    }


def _to_natural(data: dict, preamble: bool) -> str:
    """Generate natural language representation."""
    lines: list[str] = []

    if preamble:
        lines.extend([
            "## Palette Summary",
            "",
        ])

    if not data["colors"]:
        lines.append("Empty palette")
        return "\n".join(lines)

    lines.append(
        f"**Overall Sustainability:** {data['sustainability']}% ({data['status']})"
    )
    lines.append("")

    for i, c in enumerate(data["colors"], 1):
        rgb = c["rgb"]
        usage = round_half_up(c["width"])
        line = (
            f"{i}. {c['hex']} rgb({rgb['r']}, {rgb['g']}, {rgb['b']}) -- "
            f"{usage}% usage, {c['sustainability']}% sustainable ({c['rating']})"
        )
        if c["locked"]:
            line += " [locked]"
        lines.append(line)

    return "\n".join(lines)
