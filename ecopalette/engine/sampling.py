# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Random color samplers.

Every sampler draws from an explicit ``numpy.random.Generator`` so that a
seeded generator reproduces the same palette.
"""

from __future__ import annotations

from typing import Optional

import numpy as np

from ecopalette.engine.colorspace import rgb_to_hex
from ecopalette.schema.palette import MAX_SIZE


def make_rng(seed: Optional[int] = None) -> np.random.Generator:
    """Create a generator (None for OS entropy)."""
    return np.random.default_rng(seed)


def _uniform_channels(rng: np.random.Generator, low: int, high: int) -> str:
    r, g, b = rng.integers(low, high, size=3)
    return rgb_to_hex(int(r), int(g), int(b))


def random_base_color(rng: np.random.Generator) -> str:
    """
    Sample a dark-to-mid base color.

    A channel cap is drawn uniformly from [50, 150), then each channel is
    drawn uniformly from [0, cap).
    """
    cap = int(rng.integers(50, 150))
    return _uniform_channels(rng, 0, cap)


def random_light_color(rng: np.random.Generator) -> str:
    """Channels uniform in [180, 255)."""
    return _uniform_channels(rng, 180, 255)


def random_mid_light_color(rng: np.random.Generator) -> str:
    """Channels uniform in [140, 200)."""
    return _uniform_channels(rng, 140, 200)


def insert_at_random(
    rng: np.random.Generator,
    colors: list[str],
    color: str,
) -> None:
    """Insert ``color`` in place at one of the len(colors) + 1 slots."""
    colors.insert(int(rng.integers(0, len(colors) + 1)), color)


def random_colors(rng: np.random.Generator, size: int = MAX_SIZE) -> list[str]:
    """
    Unconstrained random color set.

    ``size - 2`` distinct base colors, then one light and one mid-light
    color, each inserted at a random slot.
    """
    colors: list[str] = []
    while len(colors) < size - 2:
        color = random_base_color(rng)
        if color not in colors:
            colors.append(color)

    insert_at_random(rng, colors, random_light_color(rng))

    mid_light = random_mid_light_color(rng)
    while mid_light in colors:
        mid_light = random_mid_light_color(rng)
    insert_at_random(rng, colors, mid_light)
    return colors
