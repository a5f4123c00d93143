# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Adaptive color-stop search along one gradient axis.

The axis is decomposed left to right into the longest possible linear runs.
For each run starting at ``base``, a window ``[base, base + probe]`` is
tested for linearity (its midpoint equals the average of its endpoints):

- widening: while windows stay linear the probe doubles, so long ramps
  are crossed in O(log L) tests
- narrowing: once a non-linear window is seen, the probe bisects between
  the largest known-linear offset (``search_floor``) and the smallest
  known-non-linear offset (``search_ceiling``)

When the bounds converge, the right edge of the run becomes a stop and the
search restarts from there.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from pngtocss.schema import ColorStop, RGBAColor
from pngtocss.measure.colorops import DEFAULT_TOLERANCE, is_linear

logger = logging.getLogger(__name__)


class StopFinder:
    """
    State machine for the segmented stop search.

    Attributes:
        colors: Sampled colors along the axis, P(0..L-1)
        tolerance: Per-channel equality tolerance
        base: Absolute start of the run being searched
        search_floor: Largest offset from ``base`` known to be linear
        search_ceiling: Smallest offset from ``base`` known to be non-linear
            (or the widest offset probed so far while still widening)
        probe: Offset from ``base`` of the window under test
        iterations: Number of transitions taken so far
        stops: Stops found so far, starting with the implicit first stop
    """

    def __init__(
        self,
        colors: Sequence[RGBAColor],
        tolerance: int = DEFAULT_TOLERANCE,
    ) -> None:
        if len(colors) < 3:
            raise ValueError(f"Stop search needs at least 3 colors, got {len(colors)}")
        self.colors = colors
        self.tolerance = tolerance
        self.base = 0
        self.search_floor = 0
        self.search_ceiling = 2
        self.probe = 2
        self.iterations = 0
        self.stops: list[ColorStop] = [ColorStop(colors[0])]
        self._last_position: Optional[int] = None

    @property
    def length(self) -> int:
        return len(self.colors)

    @property
    def done(self) -> bool:
        return self.base + self.probe >= self.length

    @property
    def converged(self) -> bool:
        return (
            self.search_ceiling - self.probe <= 1
            and self.probe - self.search_floor <= 1
        )

    def window_is_linear(self) -> bool:
        return is_linear(
            self.colors, self.base, self.base + self.probe, self.tolerance
        )

    def step(self) -> None:
        """Test the current window and advance the search by one transition."""
        self.iterations += 1

        if not self.window_is_linear():
            self._narrow()
        elif self.converged:
            if self.base + self.probe >= self.length - 1:
                # The run reaches the last pixel; that stop is added by run()
                self.probe += 1
            else:
                self._commit()
        else:
            self._widen()

    def run(self) -> tuple[ColorStop, ...]:
        """Search until the whole axis is covered and return all stops."""
        while not self.done:
            self.step()
        return tuple(self.stops) + (ColorStop(self.colors[-1]),)

    def _narrow(self) -> None:
        if self.search_floor == self.search_ceiling:
            # No linear lower bound to bisect against; probe a fresh window
            self.search_floor += 1
            self.search_ceiling = self.probe = self.search_floor + 2
        else:
            self.search_ceiling = self.probe
            self.probe = (self.probe + self.search_floor) // 2

    def _widen(self) -> None:
        self.search_floor = self.probe
        if self.probe == self.search_ceiling:
            self.probe = min(self.probe * 2, self.length - self.base - 1)
            self.search_ceiling = self.probe
        else:
            self.probe = (self.probe + self.search_ceiling) // 2

    def _commit(self) -> None:
        index = self.base + self.probe
        position = index * 100 // self.length

        # Integer rounding can map neighbouring pixels to the same percentage
        if position != 0 and position != self._last_position:
            self.stops.append(ColorStop(self.colors[index], position))
            self._last_position = position
        else:
            logger.debug(f"Dropping stop at pixel {index}: duplicate position {position}%")

        self.base += self.probe if self.probe else 1
        self.search_floor = 0
        self.search_ceiling = self.probe = self.length - self.base - 1


def is_single_ramp(
    colors: Sequence[RGBAColor],
    tolerance: int = DEFAULT_TOLERANCE,
) -> bool:
    """
    True if the whole axis is one linear run.

    Besides the whole axis, each half is tested too: a hard step sitting
    exactly on the centre pixel passes the whole-axis midpoint test.
    """
    last = len(colors) - 1
    centre = last // 2
    return (
        is_linear(colors, 0, last, tolerance)
        and is_linear(colors, 0, centre, tolerance)
        and is_linear(colors, centre, last, tolerance)
    )


def find_stops(
    colors: Sequence[RGBAColor],
    tolerance: int = DEFAULT_TOLERANCE,
) -> tuple[ColorStop, ...]:
    """
    Find the minimal ordered stops reproducing ``colors`` by linear interpolation.

    Args:
        colors: Colors sampled along the gradient axis
        tolerance: Per-channel equality tolerance

    Returns:
        Stops in axis order. The first and last stops are ``colors[0]`` and
        ``colors[-1]`` with implicit positions; interior stops have strictly
        increasing integer percentages in (0, 100).
    """
    if not colors:
        return ()
    if len(colors) < 3 or is_single_ramp(colors, tolerance):
        return (ColorStop(colors[0]), ColorStop(colors[-1]))

    finder = StopFinder(colors, tolerance)
    stops = finder.run()
    logger.debug(
        f"Stop search over {len(colors)} pixels: "
        f"{len(stops)} stops in {finder.iterations} iterations"
    )
    return stops
