# Copyright (c) 2026 Ecopalette
# SPDX-License-Identifier: MIT

"""
Color codec: hex ↔ RGB ↔ HSL.

Conventions:
- Hex: exactly "#RRGGBB", case-insensitive on input, uppercase on output
- RGB: integer channels [0, 255]
- HSL: H in degrees [0, 360), S and L in percent [0, 100]

Channel rounding is half-up (x.5 rounds away from zero for positive
values), so conversions match what a browser color picker displays.
"""

from __future__ import annotations

import re

import numpy as np

from ecopalette.errors import InvalidColorFormat
from ecopalette.schema.palette import RGBColor


_HEX_RE = re.compile(r"#[0-9A-Fa-f]{6}")

# Channel order produced by the k(n) formulation of HSL → RGB
_HSL_OFFSETS = np.array([0.0, 8.0, 4.0], dtype=np.float64)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties toward +infinity."""
    return int(np.floor(value + 0.5))


# =============================================================================
# Hex ↔ RGB
# =============================================================================


def normalize_hex(hex_color: str) -> str:
    """
    Validate a hex color and return its canonical uppercase form.

    Raises:
        InvalidColorFormat: if the value is not a string of the form #RRGGBB
    """
    if not isinstance(hex_color, str) or not _HEX_RE.fullmatch(hex_color):
        raise InvalidColorFormat(hex_color)
    return hex_color.upper()


def hex_to_rgb(hex_color: str) -> RGBColor:
    """
    Parse "#RRGGBB" into channels.

    Bytes are read at fixed offsets 1-3, 3-5 and 5-7.
    """
    hex_color = normalize_hex(hex_color)
    return RGBColor(
        r=int(hex_color[1:3], 16),
        g=int(hex_color[3:5], 16),
        b=int(hex_color[5:7], 16),
    )


def rgb_to_hex(r: float, g: float, b: float) -> str:
    """Encode channels as "#RRGGBB", rounding and clamping each to [0, 255]."""
    channels = [min(255, max(0, round_half_up(c))) for c in (r, g, b)]
    return "#{:02X}{:02X}{:02X}".format(*channels)


# =============================================================================
# RGB ↔ HSL
# =============================================================================


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[float, float, float]:
    """
    Convert RGB channels to HSL.

    Achromatic colors (max == min) get hue and saturation 0.

    Returns:
        (h, s, l) with h in [0, 360), s and l in [0, 100]
    """
    rf, gf, bf = r / 255.0, g / 255.0, b / 255.0
    hi = max(rf, gf, bf)
    lo = min(rf, gf, bf)
    light = (hi + lo) / 2.0

    if hi == lo:
        return 0.0, 0.0, light * 100.0

    d = hi - lo
    sat = d / (2.0 - hi - lo) if light > 0.5 else d / (hi + lo)

    if hi == rf:
        hue = (gf - bf) / d + (6.0 if gf < bf else 0.0)
    elif hi == gf:
        hue = (bf - rf) / d + 2.0
    else:
        hue = (rf - gf) / d + 4.0

    return (hue * 60.0) % 360.0, sat * 100.0, light * 100.0


def hsl_to_rgb(h: float, s: float, l: float) -> RGBColor:
    """
    Convert HSL to RGB channels.

    Uses the piecewise k(n) = (n + h/30) mod 12 formulation. Hue wraps
    modulo 360; saturation and lightness are clipped to [0, 100].
    Channels are rounded to the nearest integer and clamped to [0, 255].
    """
    hue = float(h) % 360.0
    sat = float(np.clip(s, 0.0, 100.0)) / 100.0
    light = float(np.clip(l, 0.0, 100.0)) / 100.0

    k = (_HSL_OFFSETS + hue / 30.0) % 12.0
    a = sat * min(light, 1.0 - light)
    f = light - a * np.maximum(-1.0, np.minimum(np.minimum(k - 3.0, 9.0 - k), 1.0))

    channels = np.clip(np.floor(f * 255.0 + 0.5), 0, 255).astype(int)
    r, g, b = (int(c) for c in channels)
    return RGBColor(r=r, g=g, b=b)


# =============================================================================
# Convenience: hex ↔ HSL
# =============================================================================


def hex_to_hsl(hex_color: str) -> tuple[float, float, float]:
    """Convert "#RRGGBB" to (h, s, l)."""
    rgb = hex_to_rgb(hex_color)
    return rgb_to_hsl(rgb.r, rgb.g, rgb.b)


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """Convert (h, s, l) to canonical "#RRGGBB"."""
    return hsl_to_rgb(h, s, l).hex
