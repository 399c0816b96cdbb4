# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Palette schema: the values every engine operation consumes and returns.

Design principles:
- Immutable: All types are frozen dataclasses
- Validated: A Palette that exists satisfies the width invariants
- Canonical colors: hex strings are stored uppercase as ``#RRGGBB``

Width invariants (checked on every Palette construction):
    - at most MAX_SIZE entries
    - widths of a non-empty palette sum to 100 (within WIDTH_TOLERANCE)
    - every unlocked entry is at least MIN_WIDTH wide; locked entries
      keep whatever width they had when they were locked
    - no color appears twice

Editing never mutates a Palette. Operations build a candidate and let
construction decide whether it is legal.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional

from ecopalette.errors import InvariantViolation


# =============================================================================
# Limits
# =============================================================================

MAX_SIZE = 5

# Smallest share an unlocked entry may hold (percent)
MIN_WIDTH = 5.0

# Upper bound for step adjustments (percent)
MAX_STEP_WIDTH = 70.0

# Allowed deviation of the width total from 100
WIDTH_TOLERANCE = 0.1

_EPS = 1e-9


# =============================================================================
# Enumerations
# =============================================================================


class HarmonyStrategy(Enum):
    """Rule used to derive related colors from a base color."""
    RANDOM = "random"
    ANALOGOUS = "analogous"
    MONOCHROMATIC = "monochromatic"
    TRIAD = "triad"
    COMPLEMENTARY = "complementary"

    @property
    def description(self) -> str:
        return _STRATEGY_DESCRIPTIONS[self]


_STRATEGY_DESCRIPTIONS = {
    HarmonyStrategy.RANDOM: "Generate random colour combinations",
    HarmonyStrategy.ANALOGOUS: "Colours next to each other on the wheel",
    HarmonyStrategy.MONOCHROMATIC: "Different shades of the same colour",
    HarmonyStrategy.TRIAD: "Three evenly spaced colours",
    HarmonyStrategy.COMPLEMENTARY: "Opposite colours on the wheel",
}


class WidthDirection(Enum):
    """Direction of a one-step width adjustment."""
    UP = "up"
    DOWN = "down"


class SustainabilityRating(Enum):
    """Label for a single color's sustainability score."""
    EXCELLENT = "Excellent"  # > 75
    GOOD = "Good"            # > 50
    FAIR = "Fair"            # > 25
    POOR = "Poor"


class PaletteStatus(Enum):
    """Label for a whole palette's weighted sustainability score."""
    HIGHLY_SUSTAINABLE = "Highly Sustainable"          # > 75
    MODERATELY_SUSTAINABLE = "Moderately Sustainable"  # > 60
    LIMITED_SUSTAINABILITY = "Limited Sustainability"  # > 45
    POOR_SUSTAINABILITY = "Poor Sustainability"


# =============================================================================
# Color Types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBColor:
    """
    A 24-bit color split into channels.

    Attributes:
        r, g, b: Channel values in [0, 255]
    """
    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        """Validate channel ranges."""
        for name, value in (("r", self.r), ("g", self.g), ("b", self.b)):
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    def __iter__(self) -> Iterator[int]:
        return iter((self.r, self.g, self.b))

    @property
    def hex(self) -> str:
        """Canonical hex string like "#3941C8"."""
        return f"#{self.r:02X}{self.g:02X}{self.b:02X}"

    @property
    def css(self) -> str:
        return f"rgb({self.r}, {self.g}, {self.b})"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b}


@dataclass(frozen=True, slots=True)
class PaletteEntry:
    """
    One color in a palette with its usage share.

    Attributes:
        color: Hex color, normalized to uppercase ``#RRGGBB`` on construction
        width: Share of total usage in percent
        locked: Locked entries are skipped by every redistribution
    """
    color: str
    width: float
    locked: bool = False

    def __post_init__(self) -> None:
        """Normalize the color and check the width is a percentage."""
        from ecopalette.engine.colorspace import normalize_hex
        object.__setattr__(self, "color", normalize_hex(self.color))
        if not -_EPS <= self.width <= 100.0 + WIDTH_TOLERANCE:
            raise InvariantViolation(
                f"Width must be 0-100, got {self.width} for {self.color}"
            )

    @property
    def sustainability(self) -> int:
        from ecopalette.engine.sustainability import sustainability
        return sustainability(self.color)

    def with_width(self, width: float) -> PaletteEntry:
        return PaletteEntry(color=self.color, width=width, locked=self.locked)

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"color": self.color, "width": self.width, "locked": self.locked}

    @classmethod
    def from_dict(cls, data: dict) -> PaletteEntry:
        """Deserialize from dictionary."""
        return cls(
            color=data["color"],
            width=float(data["width"]),
            locked=bool(data.get("locked", False)),
        )


# =============================================================================
# Palette
# =============================================================================


@dataclass(frozen=True, slots=True)
class Palette:
    """
    An ordered set of up to MAX_SIZE weighted colors.

    Construction enforces the width invariants listed in the module
    docstring and raises InvariantViolation when any of them fails.

    Usage:
        palette = Palette((
            PaletteEntry("#000000", 50.0),
            PaletteEntry("#FFFFFF", 50.0),
        ))
        palette.sustainability   # 50
    """
    entries: tuple[PaletteEntry, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        """Validate the width invariants."""
        entries = tuple(self.entries)
        object.__setattr__(self, "entries", entries)

        if len(entries) > MAX_SIZE:
            raise InvariantViolation(
                f"Palette holds at most {MAX_SIZE} colors, got {len(entries)}"
            )

        colors = [e.color for e in entries]
        if len(set(colors)) != len(colors):
            raise InvariantViolation(f"Palette colors must be unique, got {colors}")

        for e in entries:
            if not e.locked and e.width < MIN_WIDTH - _EPS:
                raise InvariantViolation(
                    f"Unlocked entry {e.color} is narrower than {MIN_WIDTH:g}%: "
                    f"{e.width:.3f}"
                )

        if entries:
            total = sum(e.width for e in entries)
            if abs(total - 100.0) > WIDTH_TOLERANCE:
                raise InvariantViolation(
                    f"Palette widths must sum to 100, got {total:.3f}"
                )

    @classmethod
    def empty(cls) -> Palette:
        return cls(())

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[PaletteEntry]:
        return iter(self.entries)

    def __getitem__(self, index: int) -> PaletteEntry:
        return self.entries[index]

    @property
    def colors(self) -> tuple[str, ...]:
        return tuple(e.color for e in self.entries)

    @property
    def widths(self) -> tuple[float, ...]:
        return tuple(e.width for e in self.entries)

    @property
    def is_full(self) -> bool:
        return len(self.entries) >= MAX_SIZE

    @property
    def locked_width(self) -> float:
        """Total width held by locked entries."""
        return sum(e.width for e in self.entries if e.locked)

    @property
    def unlocked_count(self) -> int:
        return sum(1 for e in self.entries if not e.locked)

    @property
    def sustainability(self) -> int:
        """Width-weighted sustainability of the whole palette (0 when empty)."""
        from ecopalette.engine.sustainability import palette_sustainability
        return palette_sustainability(self)

    def index_of(self, color: str) -> Optional[int]:
        """Position of ``color`` (case-insensitive), or None if absent."""
        from ecopalette.engine.colorspace import normalize_hex
        target = normalize_hex(color)
        for i, e in enumerate(self.entries):
            if e.color == target:
                return i
        return None

    def contains(self, color: str) -> bool:
        return self.index_of(color) is not None

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"entries": [e.to_dict() for e in self.entries]}

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        return cls(tuple(PaletteEntry.from_dict(e) for e in data.get("entries", [])))

    @classmethod
    def from_json(cls, json_str: str) -> Palette:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
