# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""Base types and utilities for serializers."""

from enum import Enum

from pngtocss.schema import RGBAColor


class SerializerFormat(Enum):
    """Output format for serializers."""

    CSS = "css"
    JSON = "json"
    XML = "xml"
    MARKDOWN = "markdown"


def format_color(color: RGBAColor) -> str:
    """Solid hex for opaque colors, ``rgba()`` otherwise."""
    if color.is_opaque:
        return color.hex
    return f"rgba({color.r}, {color.g}, {color.b}, {color.a / 255:.2f})"
