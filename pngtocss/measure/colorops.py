# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Tolerance-based color comparison and averaging.

Compositing an RGBA image can leave arbitrary color payload under fully
transparent pixels. Both operations here treat an alpha-0 pixel as carrying
no color information:

- two fully transparent pixels are always equal
- a fully transparent pixel takes its partner's r/g/b when averaged
"""

from __future__ import annotations

from typing import Sequence

from pngtocss.schema import RGBAColor

# Maximum per-channel difference (out of 255) for two colors to be equal
DEFAULT_TOLERANCE = 2


def colors_equal(
    a: RGBAColor,
    b: RGBAColor,
    tolerance: int = DEFAULT_TOLERANCE,
) -> bool:
    """
    True if every channel of ``a`` and ``b`` differs by at most ``tolerance``.

    Two fully transparent colors are equal regardless of their r/g/b.
    """
    if a.a == 0 and b.a == 0:
        return True
    return (
        abs(a.r - b.r) <= tolerance
        and abs(a.g - b.g) <= tolerance
        and abs(a.b - b.b) <= tolerance
        and abs(a.a - b.a) <= tolerance
    )


def average_colors(a: RGBAColor, b: RGBAColor) -> RGBAColor:
    """
    Channel-wise integer mean of two colors.

    A fully transparent input contributes its partner's r/g/b, so a
    transparent edge does not pull the average toward black. Alpha is
    averaged as-is.
    """
    ar, ag, ab = (b.r, b.g, b.b) if a.a == 0 else (a.r, a.g, a.b)
    br, bg, bb = (a.r, a.g, a.b) if b.a == 0 else (b.r, b.g, b.b)
    return RGBAColor(
        r=(ar + br) // 2,
        g=(ag + bg) // 2,
        b=(ab + bb) // 2,
        a=(a.a + b.a) // 2,
    )


def midpoint_color(colors: Sequence[RGBAColor], start: int, end: int) -> RGBAColor:
    """
    The color halfway along the inclusive window ``[start, end]``.

    For an odd-length window this is the centre pixel; for an even-length
    window it is the average of the two pixels straddling the centre.
    """
    length = end - start + 1
    half = start + length // 2
    if length % 2:
        return colors[half]
    return average_colors(colors[half], colors[half - 1])


def is_linear(
    colors: Sequence[RGBAColor],
    start: int,
    end: int,
    tolerance: int = DEFAULT_TOLERANCE,
) -> bool:
    """True if the window's midpoint matches the average of its endpoints."""
    return colors_equal(
        average_colors(colors[start], colors[end]),
        midpoint_color(colors, start, end),
        tolerance,
    )
