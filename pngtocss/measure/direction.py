# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Gradient direction detection from corner colors.

Only four linear shapes can be told apart by looking at the corners alone:

    TOP         LEFT        TOP_LEFT     TOP_RIGHT
    A ─── A     A ─── B     A ─── B      B ─── A
    │     │     │     │     │     │      │     │
    B ─── B     A ─── B     B ─── C      C ─── B

An image matching none of them is treated as TOP rather than rejected.
"""

from __future__ import annotations

from dataclasses import dataclass

from pngtocss.schema import GradientDirection, RGBAColor
from pngtocss.measure.colorops import DEFAULT_TOLERANCE, colors_equal
from pngtocss.measure.pixels import Corners


@dataclass(frozen=True, slots=True)
class DirectionDecision:
    """
    Outcome of corner comparison.

    Attributes:
        direction: Detected (or fallback) gradient direction
        start: Color at the start of the gradient axis
        end: Color at the end of the gradient axis
        axis_length: Number of pixels along the axis that varies
        is_fallback: True if no corner pattern matched
    """
    direction: GradientDirection
    start: RGBAColor
    end: RGBAColor
    axis_length: int
    is_fallback: bool = False


def detect_direction(
    corners: Corners,
    width: int,
    height: int,
    tolerance: int = DEFAULT_TOLERANCE,
) -> DirectionDecision:
    """
    Pick the gradient direction from the four corner colors.

    First match wins:
        1. top-left == top-right       → TOP (rows are uniform)
        2. top-left == bottom-left     → LEFT (columns are uniform)
        3. top-right == bottom-left
           and top-left != bottom-right → TOP_LEFT diagonal
        4. top-left == bottom-right
           and top-right != bottom-left → TOP_RIGHT diagonal
        5. otherwise                   → TOP, flagged as fallback

    Args:
        corners: The four corner colors
        width: Image width in pixels
        height: Image height in pixels
        tolerance: Per-channel equality tolerance

    Returns:
        DirectionDecision with the start/end colors of the axis
    """
    tl, tr = corners.top_left, corners.top_right
    bl, br = corners.bottom_left, corners.bottom_right

    def eq(a: RGBAColor, b: RGBAColor) -> bool:
        return colors_equal(a, b, tolerance)

    if eq(tl, tr):
        return DirectionDecision(GradientDirection.TOP, tl, br, height)
    if eq(tl, bl):
        return DirectionDecision(GradientDirection.LEFT, tl, br, width)
    if eq(tr, bl) and not eq(tl, br):
        return DirectionDecision(GradientDirection.TOP_LEFT, tl, br, height)
    if eq(tl, br) and not eq(tr, bl):
        return DirectionDecision(GradientDirection.TOP_RIGHT, tr, bl, height)

    return DirectionDecision(
        GradientDirection.TOP, tl, br, height, is_fallback=True
    )
