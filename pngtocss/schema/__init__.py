# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Schema definitions for extracted gradients.

All types in this module are immutable (frozen dataclasses).
Once a gradient is extracted, it is handed to a renderer as-is.
"""

from pngtocss.schema.gradient import (
    SCHEMA_VERSION,
    ColorStop,
    Gradient,
    GradientDirection,
    RGBAColor,
)

__all__ = [
    # Version
    "SCHEMA_VERSION",
    # Core types
    "RGBAColor",
    # Gradient types
    "GradientDirection",
    "ColorStop",
    "Gradient",
]
