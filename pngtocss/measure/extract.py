# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Main gradient extraction API.

This is the primary entry point for pngtocss's measurement core.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import numpy as np
from numpy.typing import NDArray

from pngtocss.schema import ColorStop, Gradient, GradientDirection
from pngtocss.measure.colorops import DEFAULT_TOLERANCE
from pngtocss.measure.direction import detect_direction
from pngtocss.measure.errors import UnsupportedGradient
from pngtocss.measure.pixels import PixelSource, load_pixels
from pngtocss.measure.stops import find_stops

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExtractionConfig:
    """Configuration for gradient extraction."""

    # Maximum per-channel difference (0-255) for two colors to count as equal
    # 0 = exact match only
    # 2 = absorbs 8-bit rounding in exported gradients
    tolerance: int = DEFAULT_TOLERANCE

    # Shortest axis (in pixels) on which interior stops are searched for.
    # Shorter axes always produce just the two endpoint stops.
    min_search_length: int = 3

    def __post_init__(self) -> None:
        if self.tolerance < 0:
            raise ValueError(f"Tolerance must be >= 0, got {self.tolerance}")
        if self.min_search_length < 3:
            raise ValueError(
                f"min_search_length must be >= 3, got {self.min_search_length}"
            )


def extract_gradient(
    image: Union[str, Path, NDArray[np.uint8], PixelSource, None],
    *,
    config: Optional[ExtractionConfig] = None,
) -> Gradient:
    """
    Extract a linear gradient description from an image.

    The direction is chosen from the four corner colors. For horizontal and
    vertical gradients, the left column (TOP) or top row (LEFT) is then
    searched for the minimal set of interior stops. Diagonal gradients
    always come back with exactly two stops.

    Args:
        image: One of:
            - Path to image file (str or Path)
            - NumPy array of shape (H, W, 3) or (H, W, 4) with uint8 values
            - A PixelSource
            - None when no pixels could be decoded
        config: Extraction settings (uses defaults if None)

    Returns:
        Gradient with at least two stops

    Raises:
        UnsupportedGradient: If there are no pixels to work from or no stops
            could be produced

    Example:
        >>> from pngtocss import extract_gradient
        >>> g = extract_gradient("button.png")
        >>> g.direction
        <GradientDirection.TOP: 'top'>
        >>> print(g.to_css("button"))
    """
    if image is None:
        raise UnsupportedGradient("No pixel source available")

    cfg = config or ExtractionConfig()
    source = load_pixels(image)

    decision = detect_direction(
        source.corners(), source.width, source.height, cfg.tolerance
    )
    if decision.is_fallback:
        logger.info(
            f"No corner pattern matched in {source.width}x{source.height} image, "
            f"treating as {decision.direction.name}"
        )

    if decision.direction.is_diagonal or decision.axis_length < cfg.min_search_length:
        stops: tuple[ColorStop, ...] = (
            ColorStop(decision.start),
            ColorStop(decision.end),
        )
    else:
        if decision.direction == GradientDirection.TOP:
            axis = source.column(0)
        else:
            axis = source.row(0)
        stops = find_stops(axis, cfg.tolerance)

        if decision.is_fallback and len(stops) >= 2:
            # Corner endpoints win when no pattern matched
            stops = (
                (ColorStop(decision.start),)
                + stops[1:-1]
                + (ColorStop(decision.end),)
            )

    if len(stops) < 2:
        raise UnsupportedGradient(
            f"Stop search produced {len(stops)} colors, need at least 2"
        )

    logger.debug(
        f"Extracted {decision.direction.name} gradient with {len(stops)} stops"
    )
    return Gradient(direction=decision.direction, stops=stops)
