# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Serializers for Gradient output.

Each serializer formats a Gradient for one kind of consumer.
All serializers preserve the gradient exactly -- no stop is added or dropped.
"""

from pngtocss.runtime.serializers.base import SerializerFormat, format_color
from pngtocss.runtime.serializers.block import BlockFormat, to_context_block
from pngtocss.runtime.serializers.css import class_name_for, to_css

__all__ = [
    "SerializerFormat",
    "BlockFormat",
    "format_color",
    "to_css",
    "class_name_for",
    "to_context_block",
]
