# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
pngtocss -- Turn an image of a linear gradient into CSS.

Finds the direction of the gradient and the minimal set of color stops
that reproduce the image, then renders them as CSS.

Quick start::

    from pngtocss import extract_gradient

    g = extract_gradient("button.png")
    g.stops              # ColorStop tuple, first and last implicit
    g.to_css("button")   # Vendor-prefixed CSS rule
    g.to_json()          # Compact JSON
"""

from __future__ import annotations

__version__ = "0.2.0"

from pngtocss.measure import (
    ExtractionConfig,
    PixelSource,
    UnsupportedGradient,
    extract_gradient,
)
from pngtocss.schema import (
    ColorStop,
    Gradient,
    GradientDirection,
    RGBAColor,
)

__all__ = [
    # Core API
    "extract_gradient",
    "ExtractionConfig",
    "UnsupportedGradient",
    "Gradient",
    # Types (commonly needed)
    "RGBAColor",
    "ColorStop",
    "GradientDirection",
    "PixelSource",
    # Version
    "__version__",
]
