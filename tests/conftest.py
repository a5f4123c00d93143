# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""Shared fixtures."""

import pytest
from PIL import Image


@pytest.fixture
def png_path(tmp_path):
    """Write an (H, W, 3|4) uint8 array to a PNG file and return its path."""
    def _write(pixels, name="gradient.png"):
        path = tmp_path / name
        Image.fromarray(pixels).save(path)
        return path

    return _write
