# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Sustainable palette generation.

Samples base colors and builds harmonies until one clears the acceptance
threshold. When no attempt succeeds, falls back to an unconstrained
random palette that is accepted unconditionally.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Optional

import numpy as np

from ecopalette.engine.allocate import AllocationConfig, allocate_widths
from ecopalette.engine.harmony import harmony_palette
from ecopalette.engine.sampling import random_base_color, random_colors
from ecopalette.engine.sustainability import sustainability
from ecopalette.schema.palette import MAX_SIZE, HarmonyStrategy, Palette

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationConfig:
    """Policy constants for the generation retry loop."""

    # Number of base colors sampled before falling back
    max_attempts: int = 100

    # Minimum weighted palette sustainability to accept a harmony
    acceptance_threshold: int = 75

    # Base colors scoring below this are skipped without building a harmony
    min_base_sustainability: int = 60

    # Harmonies that collapse to fewer colors (repeated hex) are skipped
    palette_size: int = MAX_SIZE

    allocation: AllocationConfig = field(default_factory=AllocationConfig)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    """
    Outcome of a generation run.

    Attributes:
        palette: The accepted palette
        base_color: Seed color of the accepted harmony (None for fallback)
        attempts: Number of base colors sampled
        fallback: True if the random fallback palette was used
    """
    palette: Palette
    base_color: Optional[str]
    attempts: int
    fallback: bool = False


def generate_random_palette(
    rng: np.random.Generator,
    config: Optional[AllocationConfig] = None,
) -> Palette:
    """Unconstrained random palette: random colors with allocated widths."""
    return allocate_widths(random_colors(rng), config)


def _meets_threshold(palette: Palette, config: GenerationConfig) -> bool:
    return palette.sustainability >= config.acceptance_threshold


def generate_sustainable_palette(
    strategy: HarmonyStrategy = HarmonyStrategy.RANDOM,
    config: Optional[GenerationConfig] = None,
    rng: Optional[np.random.Generator] = None,
    accept: Optional[Callable[[Palette], bool]] = None,
) -> GenerationResult:
    """
    Generate a palette whose weighted sustainability clears the threshold.

    Args:
        strategy: Harmony strategy (or HarmonyStrategy value string)
        config: Retry policy (uses defaults if None)
        rng: Random generator (fresh unseeded generator if None)
        accept: Acceptance gate for candidate palettes. Defaults to
            ``palette.sustainability >= config.acceptance_threshold``.

    Returns:
        GenerationResult; ``fallback`` is set when every attempt failed.

    Example:
        >>> rng = np.random.default_rng(7)
        >>> result = generate_sustainable_palette(HarmonyStrategy.TRIAD, rng=rng)
        >>> len(result.palette)
        5
    """
    cfg = config or GenerationConfig()
    strategy = HarmonyStrategy(strategy)
    rng = rng if rng is not None else np.random.default_rng()
    if accept is None:
        accept = lambda p: _meets_threshold(p, cfg)

    for attempt in range(1, cfg.max_attempts + 1):
        base = random_base_color(rng)
        if sustainability(base) < cfg.min_base_sustainability:
            continue

        candidate = harmony_palette(base, strategy, rng, cfg.allocation)
        if len(candidate) < cfg.palette_size:
            logger.debug("Attempt %d: harmony of %s collapsed to %d colors",
                         attempt, base, len(candidate))
            continue

        if accept(candidate):
            logger.debug("Attempt %d accepted %s palette from %s (score %d)",
                         attempt, strategy.value, base, candidate.sustainability)
            return GenerationResult(candidate, base_color=base, attempts=attempt)

    logger.info("No %s palette accepted after %d attempts; using random fallback",
                strategy.value, cfg.max_attempts)
    palette = generate_random_palette(rng, cfg.allocation)
    return GenerationResult(palette, base_color=None, attempts=cfg.max_attempts, fallback=True)
