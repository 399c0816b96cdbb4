# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Palette state transitions.

Every operation takes a Palette and returns an EditResult holding the
next Palette and a status. Operations never raise for well-formed input;
a malformed hex color raises InvalidColorFormat.

Edits are commit-or-reject: a candidate palette is built and validated
as a whole. If it would break the width invariants the prior palette is
returned with status REJECTED, never a partially applied state.

Locked entries keep their width through every operation here. Only the
unlocked entries absorb redistribution.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Iterable, Union

import numpy as np
from numpy.typing import NDArray

from ecopalette.engine.colorspace import normalize_hex
from ecopalette.errors import InvariantViolation
from ecopalette.schema.palette import (
    MAX_STEP_WIDTH,
    MIN_WIDTH,
    WIDTH_TOLERANCE,
    Palette,
    PaletteEntry,
    WidthDirection,
)

logger = logging.getLogger(__name__)

# Default step for adjust_width (percentage points)
WIDTH_STEP = 1.0


class EditStatus(Enum):
    """Outcome of a palette edit."""
    APPLIED = "applied"
    UNCHANGED = "unchanged"                  # valid request with nothing to do
    CAPACITY_EXCEEDED = "capacity_exceeded"  # add on a full palette
    DUPLICATE_COLOR = "duplicate_color"      # color already in the palette
    NOT_FOUND = "not_found"                  # color not in the palette
    INVALID_INDEX = "invalid_index"
    LOCKED = "locked"                        # entry is locked
    AT_BOUND = "at_bound"                    # width already at its limit
    REJECTED = "rejected"                    # would break the width invariants


@dataclass(frozen=True, slots=True)
class EditResult:
    """
    Result of a palette edit.

    Attributes:
        palette: The next palette (the prior one unless status is APPLIED)
        status: What happened
    """
    palette: Palette
    status: EditStatus

    @property
    def changed(self) -> bool:
        return self.status is EditStatus.APPLIED


# =============================================================================
# Helpers
# =============================================================================


def _attempt(
    prior: Palette,
    build: Callable[[], Iterable[PaletteEntry]],
    operation: str,
) -> EditResult:
    """Build a candidate palette; fall back to ``prior`` if it is illegal."""
    try:
        candidate = Palette(tuple(build()))
    except InvariantViolation as exc:
        logger.debug("%s rejected: %s", operation, exc)
        return EditResult(prior, EditStatus.REJECTED)
    return EditResult(candidate, EditStatus.APPLIED)


def _unchanged(palette: Palette, status: EditStatus, operation: str) -> EditResult:
    logger.debug("%s skipped: %s", operation, status.value)
    return EditResult(palette, status)


def _valid_index(palette: Palette, index: int) -> bool:
    return 0 <= index < len(palette)


def _equal_split(entries: list[PaletteEntry]) -> list[PaletteEntry]:
    """Give every unlocked entry an equal share of what locked entries leave."""
    unlocked = sum(1 for e in entries if not e.locked)
    if unlocked == 0:
        return entries
    locked_width = sum(e.width for e in entries if e.locked)
    share = (100.0 - locked_width) / unlocked
    return [e if e.locked else e.with_width(share) for e in entries]


def _distribute(
    total: float,
    weights: NDArray[np.float64],
    floor: float = MIN_WIDTH,
) -> NDArray[np.float64]:
    """
    Split ``total`` proportionally to ``weights`` with a per-item floor.

    Items whose proportional share falls below ``floor`` are pinned at the
    floor and the rest of the budget is re-split among the others.
    """
    weights = np.asarray(weights, dtype=np.float64)
    result = np.zeros_like(weights)
    free = np.ones(len(weights), dtype=bool)
    budget = total

    while free.any():
        share = budget * weights[free] / weights[free].sum()
        pinned = share < floor
        if not pinned.any():
            result[free] = share
            break
        idx = np.flatnonzero(free)[pinned]
        result[idx] = floor
        free[idx] = False
        budget -= floor * len(idx)

    return result


# =============================================================================
# Operations
# =============================================================================


def add_color(palette: Palette, color: str) -> EditResult:
    """
    Append a color and rebalance.

    Every unlocked entry, the new one included, gets an equal share of
    the width not held by locked entries.
    """
    color = normalize_hex(color)
    if palette.is_full:
        return _unchanged(palette, EditStatus.CAPACITY_EXCEEDED, "add")
    if palette.contains(color):
        return _unchanged(palette, EditStatus.DUPLICATE_COLOR, "add")

    def build() -> list[PaletteEntry]:
        return _equal_split([*palette.entries, PaletteEntry(color=color, width=0.0)])

    return _attempt(palette, build, "add")


def remove_color(palette: Palette, color: str) -> EditResult:
    """Drop a color; surviving unlocked entries split the freed width equally."""
    index = palette.index_of(color)
    if index is None:
        return _unchanged(palette, EditStatus.NOT_FOUND, "remove")

    def build() -> list[PaletteEntry]:
        survivors = [e for i, e in enumerate(palette.entries) if i != index]
        return _equal_split(survivors)

    return _attempt(palette, build, "remove")


def swap_colors(palette: Palette, color_a: str, color_b: str) -> EditResult:
    """
    Exchange the positions of two colors.

    Width and lock belong to the slot: after the swap, slot A holds
    color B with slot A's original width and lock, and vice versa.
    """
    color_a, color_b = normalize_hex(color_a), normalize_hex(color_b)
    index_a = palette.index_of(color_a)
    index_b = palette.index_of(color_b)
    if index_a is None or index_b is None:
        return _unchanged(palette, EditStatus.NOT_FOUND, "swap")
    if index_a == index_b:
        return _unchanged(palette, EditStatus.UNCHANGED, "swap")

    def build() -> list[PaletteEntry]:
        entries = list(palette.entries)
        slot_a, slot_b = entries[index_a], entries[index_b]
        entries[index_a] = PaletteEntry(color=color_b, width=slot_a.width, locked=slot_a.locked)
        entries[index_b] = PaletteEntry(color=color_a, width=slot_b.width, locked=slot_b.locked)
        return entries

    return _attempt(palette, build, "swap")


def toggle_lock(palette: Palette, index: int) -> EditResult:
    """Flip the lock on one entry. Widths are not rebalanced."""
    if not _valid_index(palette, index):
        return _unchanged(palette, EditStatus.INVALID_INDEX, "toggle_lock")

    def build() -> list[PaletteEntry]:
        entries = list(palette.entries)
        e = entries[index]
        entries[index] = PaletteEntry(color=e.color, width=e.width, locked=not e.locked)
        return entries

    return _attempt(palette, build, "toggle_lock")


def _rebalance(
    palette: Palette,
    index: int,
    new_width: float,
    operation: str,
) -> EditResult:
    """
    Set one entry's width and let the other unlocked entries absorb it.

    The other unlocked entries share what is left in proportion to their
    current widths, each floored at MIN_WIDTH. Locked widths never move.
    """
    others = [
        i for i, e in enumerate(palette.entries)
        if i != index and not e.locked
    ]
    remaining = 100.0 - palette.locked_width - new_width
    if not others or remaining < MIN_WIDTH * len(others) - WIDTH_TOLERANCE:
        return _unchanged(palette, EditStatus.REJECTED, operation)

    def build() -> list[PaletteEntry]:
        shares = _distribute(remaining, np.array([palette[i].width for i in others]))
        widths = list(palette.widths)
        widths[index] = new_width
        for i, share in zip(others, shares):
            widths[i] = float(share)
        return [e.with_width(w) for e, w in zip(palette.entries, widths)]

    return _attempt(palette, build, operation)


def adjust_width(
    palette: Palette,
    index: int,
    direction: Union[WidthDirection, str],
    step: float = WIDTH_STEP,
) -> EditResult:
    """
    Widen or narrow one entry by a fixed step.

    The new width is clamped to [MIN_WIDTH, MAX_STEP_WIDTH]; a step that
    cannot move the entry in the requested direction is AT_BOUND. The other
    unlocked entries scale by ``(others - delta) / others``. Any entry that
    would drop under MIN_WIDTH is held there and the shortfall is taken
    from the rest, so the total stays 100 without touching locked entries.
    """
    direction = WidthDirection(direction)
    if not _valid_index(palette, index):
        return _unchanged(palette, EditStatus.INVALID_INDEX, "adjust_width")

    target = palette[index]
    if target.locked:
        return _unchanged(palette, EditStatus.LOCKED, "adjust_width")

    delta = step if direction is WidthDirection.UP else -step
    new_width = min(MAX_STEP_WIDTH, max(MIN_WIDTH, target.width + delta))
    moved = new_width - target.width
    if moved == 0 or (moved > 0) != (delta > 0):
        return _unchanged(palette, EditStatus.AT_BOUND, "adjust_width")

    return _rebalance(palette, index, new_width, "adjust_width")


def resize_entry(palette: Palette, index: int, delta: float) -> EditResult:
    """
    Resize one entry by a continuous amount (a pointer drag, in percent).

    The entry may grow until every other unlocked entry is down to
    MIN_WIDTH. The rest is redistributed as in ``adjust_width``. The step is
    rejected as a whole if the result does not sum to 100 with every
    unlocked entry at or above MIN_WIDTH.
    """
    if not _valid_index(palette, index):
        return _unchanged(palette, EditStatus.INVALID_INDEX, "resize")

    target = palette[index]
    if target.locked:
        return _unchanged(palette, EditStatus.LOCKED, "resize")

    max_allowed = 100.0 - palette.locked_width - MIN_WIDTH * (palette.unlocked_count - 1)
    new_width = min(max(target.width + delta, MIN_WIDTH), max_allowed)
    if new_width == target.width:
        status = EditStatus.UNCHANGED if delta == 0 else EditStatus.AT_BOUND
        return _unchanged(palette, status, "resize")

    return _rebalance(palette, index, new_width, "resize")


def update_color(palette: Palette, index: int, color: str) -> EditResult:
    """Recolor one entry, keeping its width and lock."""
    color = normalize_hex(color)
    if not _valid_index(palette, index):
        return _unchanged(palette, EditStatus.INVALID_INDEX, "update_color")

    current = palette[index]
    if current.color == color:
        return _unchanged(palette, EditStatus.UNCHANGED, "update_color")
    if palette.contains(color):
        return _unchanged(palette, EditStatus.DUPLICATE_COLOR, "update_color")

    def build() -> list[PaletteEntry]:
        entries = list(palette.entries)
        entries[index] = PaletteEntry(color=color, width=current.width, locked=current.locked)
        return entries

    return _attempt(palette, build, "update_color")
