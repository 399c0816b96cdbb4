# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Error taxonomy for Ecopalette.

Only malformed input is raised to callers. Edits that cannot be applied
(full palette, duplicate color, a step that would break the width
invariants) are reported as an ``EditStatus`` on the returned result.
"""


class EcopaletteError(Exception):
    """Base class for all Ecopalette errors."""


class InvalidColorFormat(EcopaletteError, ValueError):
    """A color string is not of the form ``#RRGGBB``."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Expected a color like '#1A2B3C', got {value!r}")


class InvariantViolation(EcopaletteError, ValueError):
    """A proposed palette state breaks a width or uniqueness invariant.

    Raised by ``Palette`` validation. The edit functions catch it and
    return the prior palette unchanged, so it never escapes a mutator.
    """


class ResizeError(EcopaletteError, RuntimeError):
    """A drag-resize call was made with no active resize session."""
