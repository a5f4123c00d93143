# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Rendering runtime for pngtocss.

Turns an extracted Gradient into text:

1. CSS -- Vendor-prefixed ``background-image`` rule
2. Context Block -- XML, JSON or Markdown block listing the stops

The rendering layer never modifies gradient content.
"""

from pngtocss.runtime.serializers import (
    BlockFormat,
    SerializerFormat,
    class_name_for,
    to_context_block,
    to_css,
)

__all__ = [
    "to_css",
    "class_name_for",
    "to_context_block",
    "SerializerFormat",
    "BlockFormat",
]
