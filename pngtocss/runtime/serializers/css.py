# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
CSS serializer.

Formats a Gradient as a CSS rule with one ``background-image`` declaration
per rendering engine, so the same rule works on old and current browsers.
"""

from __future__ import annotations

from pathlib import Path
from typing import Union

from pngtocss.runtime.serializers.base import format_color
from pngtocss.schema import ColorStop, Gradient, GradientDirection

# Legacy WebKit takes explicit start and end points
_WEBKIT_POINTS = {
    GradientDirection.TOP: ("left top", "left bottom"),
    GradientDirection.LEFT: ("left top", "right top"),
    GradientDirection.TOP_LEFT: ("left top", "right bottom"),
    GradientDirection.TOP_RIGHT: ("right top", "left bottom"),
}

# Unprefixed syntax names the edge the gradient runs towards
_STANDARD_DIRECTIONS = {
    GradientDirection.TOP: "to bottom",
    GradientDirection.LEFT: "to right",
    GradientDirection.TOP_LEFT: "to bottom right",
    GradientDirection.TOP_RIGHT: "to bottom left",
}

_PREFIXES = ("-moz-", "-webkit-", "-o-", "-ms-")


def class_name_for(path: Union[str, Path]) -> str:
    """CSS class name for an image file: its name up to the first dot."""
    return Path(path).name.split(".", 1)[0]


def to_css(
    gradient: Gradient,
    class_name: str = "gradient",
    *,
    prefixes: bool = True,
) -> str:
    """Serialize a Gradient as a CSS rule.

    Args:
        gradient: The Gradient to serialize.
        class_name: Class selector for the rule (without the leading dot).
        prefixes: Include vendor-prefixed declarations for older engines.

    Returns:
        CSS rule string.

    Example::

        .button {
        	background-image: -moz-linear-gradient(top, #ff0000, #00ff00 40%, #0000ff);
        	background-image: -webkit-gradient(linear, left top, left bottom, from(#ff0000), color-stop(0.40, #00ff00), to(#0000ff));
        	background-image: -webkit-linear-gradient(top, #ff0000, #00ff00 40%, #0000ff);
        	background-image: -o-linear-gradient(top, #ff0000, #00ff00 40%, #0000ff);
        	background-image: -ms-linear-gradient(top, #ff0000, #00ff00 40%, #0000ff);
        	background-image: linear-gradient(to bottom, #ff0000, #00ff00 40%, #0000ff);
        }
    """
    stops = _stop_list(gradient.stops)
    keyword = gradient.direction.value

    declarations: list[str] = []
    if prefixes:
        for prefix in _PREFIXES:
            if prefix == "-webkit-":
                declarations.append(_legacy_webkit(gradient))
            declarations.append(f"{prefix}linear-gradient({keyword}, {stops})")
    standard = _STANDARD_DIRECTIONS[gradient.direction]
    declarations.append(f"linear-gradient({standard}, {stops})")

    lines = [f".{class_name} {{"]
    lines.extend(f"\tbackground-image: {d};" for d in declarations)
    lines.append("}")
    return "\n".join(lines)


def _stop_list(stops: tuple[ColorStop, ...]) -> str:
    """Comma-separated stops, interior ones with a percentage."""
    parts = []
    for stop in stops:
        color = format_color(stop.color)
        if stop.position is not None:
            parts.append(f"{color} {stop.position}%")
        else:
            parts.append(color)
    return ", ".join(parts)


def _legacy_webkit(gradient: Gradient) -> str:
    """``-webkit-gradient(linear, ...)`` with from()/color-stop()/to()."""
    start, end = _WEBKIT_POINTS[gradient.direction]
    first, *interior, last = gradient.stops

    parts = [f"from({format_color(first.color)})"]
    for stop in interior:
        parts.append(
            f"color-stop({stop.position / 100:.2f}, {format_color(stop.color)})"
        )
    parts.append(f"to({format_color(last.color)})")
    return f"-webkit-gradient(linear, {start}, {end}, {', '.join(parts)})"
