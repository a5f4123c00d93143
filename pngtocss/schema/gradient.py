# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Gradient v1.0: canonical schema for an extracted linear gradient.

Design principles:
- Immutable: All types are frozen dataclasses
- Deterministic: Same pixels → same gradient
- Minimal: Only the stops needed to reproduce the image within tolerance
- Serializable: JSON-ready, renderable to CSS

Stop positions:
    The first and last stops never carry an explicit position; they sit at
    0% and 100% of the gradient axis. Interior stops carry an integer
    percentage, strictly increasing, strictly between 0 and 100.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


# =============================================================================
# Schema Version
# =============================================================================

SCHEMA_VERSION = "1.0"


# =============================================================================
# Core Color Type
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBAColor:
    """
    A single sRGB color with straight (non-premultiplied) alpha.

    Channels are plain ints so that two channel values can be summed
    before averaging without overflow.

    Attributes:
        r: Red (0-255)
        g: Green (0-255)
        b: Blue (0-255)
        a: Alpha (0-255). 0 means fully transparent; r/g/b of such a
           pixel is whatever the decoder left there and is not trusted.
    """
    r: int
    g: int
    b: int
    a: int = 255

    def __post_init__(self) -> None:
        """Validate channels are within 0-255."""
        for name in ("r", "g", "b", "a"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Channel {name} must be 0-255, got {value}")

    @property
    def is_opaque(self) -> bool:
        return self.a == 255

    @property
    def is_transparent(self) -> bool:
        return self.a == 0

    @property
    def hex(self) -> str:
        """Hex string of the color channels, ignoring alpha (e.g. "#3941c8")."""
        return f"#{self.r:02x}{self.g:02x}{self.b:02x}"

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}

    @classmethod
    def from_dict(cls, data: dict) -> RGBAColor:
        """Deserialize from dictionary."""
        return cls(
            r=data["r"],
            g=data["g"],
            b=data["b"],
            a=data.get("a", 255),
        )


# =============================================================================
# Gradient Types
# =============================================================================


class GradientDirection(Enum):
    """
    Edge (or corner) a gradient starts from.

    The value is the CSS keyword used by prefixed ``linear-gradient()``.
    """
    TOP = "top"              # top → bottom, varies along y
    LEFT = "left"            # left → right, varies along x
    TOP_LEFT = "left top"    # top-left → bottom-right
    TOP_RIGHT = "right top"  # top-right → bottom-left

    @property
    def is_diagonal(self) -> bool:
        return self in (GradientDirection.TOP_LEFT, GradientDirection.TOP_RIGHT)


@dataclass(frozen=True, slots=True)
class ColorStop:
    """
    A single stop in a gradient.

    Attributes:
        color: Color at this stop
        position: Integer percentage along the gradient axis (0-100), or
            None for the implicit first (0%) and last (100%) stops
    """
    color: RGBAColor
    position: Optional[int] = None

    def __post_init__(self) -> None:
        """Validate position is in range."""
        if self.position is not None and not 0 <= self.position <= 100:
            raise ValueError(f"Position must be 0-100, got {self.position}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"color": self.color.to_dict(), "position": self.position}

    @classmethod
    def from_dict(cls, data: dict) -> ColorStop:
        """Deserialize from dictionary."""
        return cls(
            color=RGBAColor.from_dict(data["color"]),
            position=data.get("position"),
        )


# =============================================================================
# Top-Level Gradient Container
# =============================================================================


@dataclass(frozen=True, slots=True)
class Gradient:
    """
    A linear gradient extracted from an image.

    This is the value handed to renderers. It is built once per image and
    never modified afterwards.

    Attributes:
        direction: Edge or corner the gradient starts from
        stops: Ordered stops along the axis (at least 2). The first and
            last stops have implicit positions; interior stops have strictly
            increasing percentages in (0, 100).
        version: Schema version (e.g., "1.0")

    Usage:
        gradient = Gradient(
            direction=GradientDirection.TOP,
            stops=(
                ColorStop(RGBAColor(255, 0, 0)),
                ColorStop(RGBAColor(0, 255, 0), 40),
                ColorStop(RGBAColor(0, 0, 255)),
            ),
        )
    """
    direction: GradientDirection
    stops: tuple[ColorStop, ...]
    version: str = field(default=SCHEMA_VERSION)

    def __post_init__(self) -> None:
        """Validate gradient structure."""
        if len(self.stops) < 2:
            raise ValueError("Gradient must have at least 2 stops")
        if self.stops[0].position is not None or self.stops[-1].position is not None:
            raise ValueError("First and last stops must have implicit positions")

        previous = 0
        for stop in self.stops[1:-1]:
            if stop.position is None:
                raise ValueError("Interior stops must have explicit positions")
            if stop.position <= previous or stop.position >= 100:
                raise ValueError(
                    f"Interior stop positions must be strictly increasing "
                    f"within (0, 100), got {stop.position} after {previous}"
                )
            previous = stop.position

    @property
    def colors(self) -> tuple[RGBAColor, ...]:
        """Stop colors in axis order (convenience accessor)."""
        return tuple(stop.color for stop in self.stops)

    @property
    def interior_stops(self) -> tuple[ColorStop, ...]:
        return self.stops[1:-1]

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {
            "version": self.version,
            "direction": self.direction.name.lower(),
            "stops": [stop.to_dict() for stop in self.stops],
        }

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    def to_css(self, class_name: str = "gradient", prefixes: bool = True) -> str:
        """
        Render as a CSS rule.

        Example output:
            .gradient {
            	background-image: -moz-linear-gradient(top, #ff0000, #0000ff);
            	...
            }
        """
        # Import here to avoid circular imports
        from pngtocss.runtime.serializers.css import to_css
        return to_css(self, class_name, prefixes=prefixes)

    @classmethod
    def from_dict(cls, data: dict) -> Gradient:
        """Deserialize from dictionary."""
        return cls(
            version=data.get("version", SCHEMA_VERSION),
            direction=GradientDirection[data["direction"].upper()],
            stops=tuple(ColorStop.from_dict(s) for s in data["stops"]),
        )

    @classmethod
    def from_json(cls, json_str: str) -> Gradient:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
