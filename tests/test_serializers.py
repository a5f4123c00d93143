# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""Tests for the runtime serializers (css, block)."""

import json

import pytest

from pngtocss.runtime import (
    BlockFormat,
    class_name_for,
    to_context_block,
    to_css,
)
from pngtocss.runtime.serializers import format_color
from pngtocss.schema import ColorStop, Gradient, GradientDirection, RGBAColor


RED = RGBAColor(255, 0, 0)
GREEN = RGBAColor(0, 255, 0)
BLUE = RGBAColor(0, 0, 255)


@pytest.fixture
def three_stop_gradient():
    return Gradient(
        direction=GradientDirection.TOP,
        stops=(ColorStop(RED), ColorStop(GREEN, 40), ColorStop(BLUE)),
    )


@pytest.fixture
def diagonal_gradient():
    return Gradient(
        direction=GradientDirection.TOP_RIGHT,
        stops=(ColorStop(RED), ColorStop(BLUE)),
    )


# ---------------------------------------------------------------------------
# Colors
# ---------------------------------------------------------------------------

class TestFormatColor:

    def test_opaque_is_hex(self):
        assert format_color(RGBAColor(18, 52, 86)) == "#123456"

    def test_translucent_is_rgba(self):
        assert format_color(RGBAColor(255, 0, 0, 128)) == "rgba(255, 0, 0, 0.50)"

    def test_transparent_is_rgba(self):
        assert format_color(RGBAColor(1, 2, 3, 0)) == "rgba(1, 2, 3, 0.00)"


# ---------------------------------------------------------------------------
# to_css
# ---------------------------------------------------------------------------

class TestToCss:

    def test_rule_shape(self, three_stop_gradient):
        css = to_css(three_stop_gradient, "button")
        lines = css.split("\n")
        assert lines[0] == ".button {"
        assert lines[-1] == "}"
        assert all(line.startswith("\tbackground-image: ") for line in lines[1:-1])
        assert all(line.endswith(";") for line in lines[1:-1])

    def test_declaration_order(self, three_stop_gradient):
        lines = to_css(three_stop_gradient, "button").split("\n")[1:-1]
        assert [line.split(": ", 1)[1].split("(", 1)[0] for line in lines] == [
            "-moz-linear-gradient",
            "-webkit-gradient",
            "-webkit-linear-gradient",
            "-o-linear-gradient",
            "-ms-linear-gradient",
            "linear-gradient",
        ]

    def test_prefixed_stops(self, three_stop_gradient):
        css = to_css(three_stop_gradient, "button")
        assert (
            "\tbackground-image: -moz-linear-gradient(top, #ff0000, #00ff00 40%, #0000ff);"
            in css
        )

    def test_legacy_webkit(self, three_stop_gradient):
        css = to_css(three_stop_gradient, "button")
        assert (
            "-webkit-gradient(linear, left top, left bottom, "
            "from(#ff0000), color-stop(0.40, #00ff00), to(#0000ff))"
        ) in css

    def test_standard_syntax(self, three_stop_gradient):
        css = to_css(three_stop_gradient, "button")
        assert "linear-gradient(to bottom, #ff0000, #00ff00 40%, #0000ff);" in css

    def test_no_prefixes(self, three_stop_gradient):
        css = to_css(three_stop_gradient, "button", prefixes=False)
        assert css == (
            ".button {\n"
            "\tbackground-image: linear-gradient(to bottom, #ff0000, #00ff00 40%, #0000ff);\n"
            "}"
        )

    def test_diagonal_keywords(self, diagonal_gradient):
        css = to_css(diagonal_gradient, "d")
        assert "-moz-linear-gradient(right top, #ff0000, #0000ff)" in css
        assert "-webkit-gradient(linear, right top, left bottom, from(#ff0000), to(#0000ff))" in css
        assert "linear-gradient(to bottom left, #ff0000, #0000ff)" in css

    def test_left_keywords(self):
        g = Gradient(direction=GradientDirection.LEFT, stops=(ColorStop(RED), ColorStop(BLUE)))
        css = to_css(g, "h")
        assert "-o-linear-gradient(left, #ff0000, #0000ff)" in css
        assert "-webkit-gradient(linear, left top, right top," in css
        assert "linear-gradient(to right, #ff0000, #0000ff)" in css

    def test_translucent_stops(self):
        g = Gradient(
            direction=GradientDirection.TOP,
            stops=(ColorStop(RGBAColor(255, 0, 0, 0)), ColorStop(RED)),
        )
        css = to_css(g, "fade", prefixes=False)
        assert "linear-gradient(to bottom, rgba(255, 0, 0, 0.00), #ff0000)" in css

    def test_gradient_to_css_delegates(self, three_stop_gradient):
        assert three_stop_gradient.to_css("button") == to_css(three_stop_gradient, "button")


class TestClassName:

    def test_strips_directory_and_extension(self):
        assert class_name_for("images/button.png") == "button"

    def test_stops_at_first_dot(self):
        assert class_name_for("header.large.png") == "header"

    def test_no_extension(self):
        assert class_name_for("plain") == "plain"


# ---------------------------------------------------------------------------
# to_context_block
# ---------------------------------------------------------------------------

class TestContextBlock:

    def test_xml(self, three_stop_gradient):
        block = to_context_block(three_stop_gradient, source="button.png")
        lines = block.split("\n")
        assert lines[0] == '<gradient version="1.0" direction="top" source="button.png">'
        assert lines[1] == '  <stop color="#ff0000" r="255" g="0" b="0" a="255"/>'
        assert lines[2] == '  <stop position="40" color="#00ff00" r="0" g="255" b="0" a="255"/>'
        assert lines[-1] == "</gradient>"

    def test_xml_escapes_source(self, three_stop_gradient):
        block = to_context_block(three_stop_gradient, source='a"b.png')
        assert 'source="a&quot;b.png"' in block

    def test_json(self, three_stop_gradient):
        block = to_context_block(three_stop_gradient, format=BlockFormat.JSON)
        data = json.loads(block)
        assert data["gradient"]["direction"] == "top"
        assert len(data["gradient"]["stops"]) == 3
        assert "source" not in data["gradient"]

    def test_json_custom_tag(self, diagonal_gradient):
        block = to_context_block(
            diagonal_gradient, format=BlockFormat.JSON, tag_name="css_gradient", source="d.png"
        )
        data = json.loads(block)
        assert data["css_gradient"]["direction"] == "top_right"
        assert data["css_gradient"]["source"] == "d.png"

    def test_markdown(self, three_stop_gradient):
        block = to_context_block(three_stop_gradient, format=BlockFormat.MARKDOWN)
        assert block.startswith("<!-- gradient -->\n```json\n")
        assert block.endswith("```\n<!-- /gradient -->")
