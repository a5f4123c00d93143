# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Measurement core for pngtocss.

This module provides deterministic gradient extraction from images.
All operations are pixel-based; rendering lives in pngtocss.runtime.
"""

from pngtocss.measure.errors import UnsupportedGradient
from pngtocss.measure.extract import ExtractionConfig, extract_gradient
from pngtocss.measure.pixels import PixelSource, load_pixels

__all__ = [
    "extract_gradient",
    "ExtractionConfig",
    "UnsupportedGradient",
    "PixelSource",
    "load_pixels",
]
