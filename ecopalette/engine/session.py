# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Interactive palette session.

PaletteSession is the single owner of a live palette. A presentation
layer translates clicks and drags into calls on it and reads back
``palette``, ``selected`` and ``sustainability``. All state changes go
through the pure functions in ``ecopalette.engine.edit``; the session only
keeps bookkeeping (editing selection, drag state, last edit status).

Every method returns synchronously with derived values already current.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Union

from ecopalette.engine import edit
from ecopalette.engine.colorspace import hex_to_rgb
from ecopalette.engine.edit import EditResult, EditStatus
from ecopalette.engine.generate import GenerationConfig, generate_sustainable_palette
from ecopalette.engine.sampling import make_rng
from ecopalette.engine.sustainability import sustainability
from ecopalette.errors import ResizeError
from ecopalette.schema.palette import (
    HarmonyStrategy,
    Palette,
    RGBColor,
    WidthDirection,
)

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ResizeSession:
    """
    State of an in-progress drag resize.

    Attributes:
        index: Entry being dragged
        origin: Palette when the drag started
        offset: Accumulated pointer movement of the applied steps (percent)
    """
    index: int
    origin: Palette
    offset: float = 0.0


class PaletteSession:
    """
    Mutable owner of one palette.

    Args:
        strategy: Harmony strategy used by ``generate`` when none is given
        config: Generation policy
        seed: Seed for the random generator (None for OS entropy)

    Example:
        >>> session = PaletteSession(seed=1)
        >>> session.add("#101010").widths
        (100.0,)
    """

    def __init__(
        self,
        strategy: Union[HarmonyStrategy, str] = HarmonyStrategy.RANDOM,
        config: Optional[GenerationConfig] = None,
        seed: Optional[int] = None,
    ) -> None:
        self.strategy = HarmonyStrategy(strategy)
        self.config = config or GenerationConfig()
        self.palette = Palette.empty()
        self.selected: Optional[int] = None
        self.last_status: Optional[EditStatus] = None
        self._rng = make_rng(seed)
        self._resize: Optional[ResizeSession] = None

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    @property
    def sustainability(self) -> int:
        """Weighted sustainability of the current palette."""
        return self.palette.sustainability

    @property
    def resizing(self) -> bool:
        return self._resize is not None

    @staticmethod
    def sustainability_of(color: str) -> int:
        return sustainability(color)

    @staticmethod
    def rgb_of(color: str) -> RGBColor:
        return hex_to_rgb(color)

    # -------------------------------------------------------------------------
    # Whole-palette operations
    # -------------------------------------------------------------------------

    def generate(self, strategy: Union[HarmonyStrategy, str, None] = None) -> Palette:
        """Replace the palette with a freshly generated one."""
        if strategy is not None:
            self.strategy = HarmonyStrategy(strategy)
        result = generate_sustainable_palette(self.strategy, self.config, self._rng)
        self._replace(result.palette)
        self.last_status = EditStatus.APPLIED
        return self.palette

    def reset(self) -> Palette:
        """Clear the palette."""
        self._replace(Palette.empty())
        self.last_status = EditStatus.APPLIED
        return self.palette

    def _replace(self, palette: Palette) -> None:
        self.palette = palette
        self.selected = None
        self._resize = None

    def _apply(self, result: EditResult) -> Palette:
        self.last_status = result.status
        if result.changed:
            # A drag started on the old palette no longer applies
            self._resize = None
        self.palette = result.palette
        return self.palette

    # -------------------------------------------------------------------------
    # Entry edits
    # -------------------------------------------------------------------------

    def add(self, color: str) -> Palette:
        return self._apply(edit.add_color(self.palette, color))

    def remove(self, color: str) -> Palette:
        """Remove a color, keeping the editing selection on the same entry."""
        index = self.palette.index_of(color)
        result = edit.remove_color(self.palette, color)
        if result.changed and self.selected is not None:
            if self.selected == index:
                self.selected = None
            elif self.selected > index:
                self.selected -= 1
        return self._apply(result)

    def swap(self, color_a: str, color_b: str) -> Palette:
        return self._apply(edit.swap_colors(self.palette, color_a, color_b))

    def toggle_lock(self, index: int) -> Palette:
        return self._apply(edit.toggle_lock(self.palette, index))

    def adjust_width(self, index: int, direction: Union[WidthDirection, str]) -> Palette:
        return self._apply(edit.adjust_width(self.palette, index, direction))

    # -------------------------------------------------------------------------
    # Editing selection
    # -------------------------------------------------------------------------

    def select(self, index: int) -> Optional[str]:
        """Select an entry for recoloring; returns its color."""
        if not 0 <= index < len(self.palette):
            self.last_status = EditStatus.INVALID_INDEX
            return None
        self.selected = index
        return self.palette[index].color

    def clear_selection(self) -> None:
        self.selected = None

    def update_selected(self, color: str) -> Palette:
        """Recolor the selected entry, keeping its width and lock."""
        if self.selected is None:
            self.last_status = EditStatus.UNCHANGED
            return self.palette
        return self._apply(edit.update_color(self.palette, self.selected, color))

    # -------------------------------------------------------------------------
    # Drag resize
    # -------------------------------------------------------------------------

    def begin_resize(self, index: int) -> Palette:
        """Start dragging the edge of entry ``index``."""
        if not 0 <= index < len(self.palette):
            self.last_status = EditStatus.INVALID_INDEX
            return self.palette
        if self.palette[index].locked:
            self.last_status = EditStatus.LOCKED
            return self.palette
        self._resize = ResizeSession(index=index, origin=self.palette)
        self.last_status = EditStatus.UNCHANGED
        return self.palette

    def continue_resize(self, delta: float) -> Palette:
        """
        Apply one pointer move of ``delta`` percent.

        The resize is recomputed from the palette at drag start using the
        accumulated offset. A rejected step leaves both the palette and
        the offset as they were.

        Raises:
            ResizeError: if no drag is in progress
        """
        drag = self._require_resize()
        offset = drag.offset + delta
        result = edit.resize_entry(drag.origin, drag.index, offset)
        self.last_status = result.status
        if result.status is EditStatus.REJECTED:
            return self.palette
        if result.changed:
            self.palette = result.palette
        elif offset == 0 or result.status is EditStatus.AT_BOUND:
            self.palette = drag.origin
        drag.offset = offset
        return self.palette

    def end_resize(self) -> Palette:
        """
        Finish the drag and return the committed palette.

        Raises:
            ResizeError: if no drag is in progress
        """
        drag = self._require_resize()
        logger.debug("Resize of entry %d ended at offset %.2f", drag.index, drag.offset)
        self._resize = None
        return self.palette

    def _require_resize(self) -> ResizeSession:
        if self._resize is None:
            raise ResizeError("No resize in progress; call begin_resize first")
        return self._resize
