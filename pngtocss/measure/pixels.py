# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Image decoding into an addressable pixel grid.

Everything downstream of this module reads pixels through
``PixelSource.color_at(x, y)``; nothing else knows about array layout.
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Union

import numpy as np
from numpy.typing import NDArray

from pngtocss.schema import RGBAColor

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Corners:
    """The four extreme pixels of an image."""
    top_left: RGBAColor
    top_right: RGBAColor
    bottom_left: RGBAColor
    bottom_right: RGBAColor


class PixelSource:
    """
    Read-only RGBA pixel grid.

    Wraps an array of shape (H, W, 4) uint8. Coordinates are (x, y) with
    the origin at the top-left pixel.
    """

    __slots__ = ("_pixels",)

    def __init__(self, pixels: NDArray[np.uint8]) -> None:
        if pixels.ndim != 3 or pixels.shape[2] != 4:
            raise ValueError(f"Expected (H, W, 4) array, got shape {pixels.shape}")
        if pixels.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {pixels.dtype}")
        if pixels.shape[0] == 0 or pixels.shape[1] == 0:
            raise ValueError(f"Image has no pixels: shape {pixels.shape}")
        self._pixels = pixels

    @property
    def width(self) -> int:
        return int(self._pixels.shape[1])

    @property
    def height(self) -> int:
        return int(self._pixels.shape[0])

    def color_at(self, x: int, y: int) -> RGBAColor:
        """Color of the pixel at column ``x``, row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside {self.width}x{self.height} image"
            )
        r, g, b, a = (int(v) for v in self._pixels[y, x])
        return RGBAColor(r, g, b, a)

    def corners(self) -> Corners:
        right, bottom = self.width - 1, self.height - 1
        return Corners(
            top_left=self.color_at(0, 0),
            top_right=self.color_at(right, 0),
            bottom_left=self.color_at(0, bottom),
            bottom_right=self.color_at(right, bottom),
        )

    def row(self, y: int = 0) -> list[RGBAColor]:
        """Colors along row ``y``, left to right."""
        return [self.color_at(x, y) for x in range(self.width)]

    def column(self, x: int = 0) -> list[RGBAColor]:
        """Colors down column ``x``, top to bottom."""
        return [self.color_at(x, y) for y in range(self.height)]


def load_pixels(
    image: Union[str, Path, NDArray[np.uint8], PixelSource],
) -> PixelSource:
    """
    Load an image from file or wrap an array.

    Files are decoded with Pillow. An embedded ICC profile is converted to
    sRGB so colors match what a browser shows. Images without an alpha
    channel come back fully opaque.

    Args:
        image: One of:
            - Path to an image file (str or Path)
            - NumPy array of shape (H, W, 3) or (H, W, 4) with uint8 values
            - An existing PixelSource (returned unchanged)

    Returns:
        PixelSource over an (H, W, 4) uint8 array

    Raises:
        FileNotFoundError: If the path does not exist
        PIL.UnidentifiedImageError: If Pillow cannot decode the file
        ValueError: If an array has the wrong shape or dtype
        TypeError: For any other input type
    """
    if isinstance(image, PixelSource):
        return image

    if isinstance(image, (str, Path)):
        from PIL import Image

        with Image.open(image) as img:
            img = _to_srgba(img)
            pixels = np.array(img, dtype=np.uint8)
        return PixelSource(pixels)

    if isinstance(image, np.ndarray):
        if image.ndim != 3 or image.shape[2] not in (3, 4):
            raise ValueError(
                f"Expected (H, W, 3) or (H, W, 4) array, got shape {image.shape}"
            )
        if image.dtype != np.uint8:
            raise ValueError(f"Expected uint8 array, got {image.dtype}")
        if image.shape[2] == 3:
            alpha = np.full(image.shape[:2] + (1,), 255, dtype=np.uint8)
            image = np.concatenate([image, alpha], axis=2)
        return PixelSource(image)

    raise TypeError(
        f"Expected file path, numpy array or PixelSource, got {type(image)}"
    )


def _to_srgba(img: "Image.Image") -> "Image.Image":
    """Convert a decoded image to RGBA, applying any embedded ICC profile."""
    from PIL import Image, ImageCms

    if img.mode != "RGBA":
        img = img.convert("RGBA")

    icc_profile = img.info.get("icc_profile")
    if not icc_profile:
        return img

    try:
        embedded_profile = ImageCms.ImageCmsProfile(io.BytesIO(icc_profile))
        srgb_profile = ImageCms.createProfile("sRGB")
        converted = ImageCms.profileToProfile(
            img, embedded_profile, srgb_profile, outputMode="RGBA"
        )
    except (ImageCms.PyCMSError, OSError, ValueError) as e:
        logger.warning(f"ICC profile conversion failed, using raw RGBA: {e}")
        return img

    return converted if isinstance(converted, Image.Image) else img
