# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Width allocation for freshly generated colors.

Darker (more sustainable) colors get larger usage shares; very light
colors are kept to the minimum share. The last color in score order takes
whatever remains, so the total is exactly 100 by construction.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ecopalette.engine.colorspace import normalize_hex, round_half_up
from ecopalette.engine.sustainability import sustainability
from ecopalette.schema.palette import MIN_WIDTH, Palette, PaletteEntry


@dataclass(frozen=True)
class AllocationConfig:
    """Configuration for score-based width allocation."""

    # Smallest share any color receives (percent)
    min_width: float = MIN_WIDTH

    # Largest share any color but the last receives (percent)
    max_share: float = 50.0

    # Colors scoring below this get min_width outright
    low_score_threshold: int = 30


def allocate_widths(
    colors: Sequence[str],
    config: Optional[AllocationConfig] = None,
) -> Palette:
    """
    Assign usage widths to colors from their sustainability scores.

    Colors are stable-sorted by score, highest first. Every color but the
    last gets either ``min_width`` (score below ``low_score_threshold``) or
    its proportional share of the total score, clamped to
    [min_width, max_share] and further capped so each remaining color can
    still receive ``min_width``. The last color gets the remainder.

    Args:
        colors: Distinct hex colors
        config: Allocation settings (uses defaults if None)

    Returns:
        Palette in descending score order, all entries unlocked.

    Raises:
        InvariantViolation: if ``colors`` contains duplicates or more than
            MAX_SIZE entries
    """
    cfg = config or AllocationConfig()
    if not colors:
        return Palette.empty()

    scored = [(normalize_hex(c), sustainability(c)) for c in colors]
    total_score = sum(score for _, score in scored)

    # sorted() is stable: ties keep their original order
    scored = sorted(scored, key=lambda item: item[1], reverse=True)

    remaining = 100.0
    entries: list[PaletteEntry] = []
    last = len(scored) - 1

    for i, (color, score) in enumerate(scored):
        if i == last:
            width = remaining
        elif score < cfg.low_score_threshold:
            width = cfg.min_width
        else:
            share = round_half_up(score / total_score * 100) if total_score else 0
            width = float(min(cfg.max_share, max(cfg.min_width, share)))
            width = min(width, remaining - cfg.min_width * (last - i))

        remaining -= width
        entries.append(PaletteEntry(color=color, width=width))

    return Palette(tuple(entries))
