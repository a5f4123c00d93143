# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""
Context block serializer for structured output.

Formats a Gradient as a structured block (XML, JSON, or Markdown) for
tools that consume the stops themselves rather than CSS.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Optional

from pngtocss.runtime.serializers.base import format_color
from pngtocss.schema import Gradient


class BlockFormat(Enum):
    """Block format options."""

    XML = "xml"
    JSON = "json"
    MARKDOWN = "markdown"


def to_context_block(
    gradient: Gradient,
    *,
    format: BlockFormat = BlockFormat.XML,
    tag_name: str = "gradient",
    source: Optional[str] = None,
) -> str:
    """Serialize a Gradient as a structured block.

    Args:
        gradient: The Gradient to serialize.
        format: Block format (XML, JSON, or MARKDOWN).
        tag_name: XML/markdown tag name for the block.
        source: Optional name of the image the gradient came from.

    Returns:
        Formatted block string.

    Example (XML)::

        <gradient version="1.0" direction="top" source="button.png">
          <stop color="#ff0000" r="255" g="0" b="0" a="255"/>
          <stop position="40" color="#00ff00" r="0" g="255" b="0" a="255"/>
          <stop color="#0000ff" r="0" g="0" b="255" a="255"/>
        </gradient>
    """
    if format == BlockFormat.XML:
        return _to_xml(gradient, tag_name, source)
    elif format == BlockFormat.JSON:
        return _to_json(gradient, tag_name, source)
    else:
        return _to_markdown(gradient, tag_name, source)


def _to_xml(gradient: Gradient, tag_name: str, source: Optional[str]) -> str:
    """Generate XML block."""
    direction = gradient.direction.name.lower()
    source_attr = f' source="{_escape(source)}"' if source else ""
    lines = [
        f'<{tag_name} version="{gradient.version}" '
        f'direction="{direction}"{source_attr}>'
    ]

    for stop in gradient.stops:
        c = stop.color
        pos_attr = f'position="{stop.position}" ' if stop.position is not None else ""
        lines.append(
            f'  <stop {pos_attr}color="{_escape(format_color(c))}" '
            f'r="{c.r}" g="{c.g}" b="{c.b}" a="{c.a}"/>'
        )

    lines.append(f"</{tag_name}>")
    return "\n".join(lines)


def _to_json(gradient: Gradient, tag_name: str, source: Optional[str]) -> str:
    """Generate JSON block with wrapper."""
    data = gradient.to_dict()
    if source:
        data["source"] = source

    wrapped = {tag_name: data}
    return json.dumps(wrapped, indent=2)


def _to_markdown(gradient: Gradient, tag_name: str, source: Optional[str]) -> str:
    """Generate markdown block with code fence."""
    data = gradient.to_dict()
    if source:
        data["source"] = source

    lines = [
        f"<!-- {tag_name} -->",
        "```json",
        json.dumps(data, indent=2),
        "```",
        f"<!-- /{tag_name} -->",
    ]
    return "\n".join(lines)


def _escape(value: str) -> str:
    return (
        value.replace("&", "&amp;")
        .replace('"', "&quot;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
    )
