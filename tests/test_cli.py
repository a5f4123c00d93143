# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""Tests for the command-line interface."""

import importlib
import json

import numpy as np
import pytest
import PIL
from PIL import Image

from pngtocss import __version__
from pngtocss.cli import main
from pngtocss.measure import UnsupportedGradient


def _vertical_ramp(height=64, width=8):
    img = np.zeros((height, width, 3), dtype=np.uint8)
    img[:, :, 2] = np.round(np.linspace(0, 255, height)).astype(np.uint8)[:, None]
    return img


class TestNoArguments:

    def test_prints_banner_and_usage(self, capsys):
        assert main([]) == 0
        err = capsys.readouterr().err
        assert f"pngtocss v{__version__}" in err
        assert "Usage: pngtocss" in err

    def test_banner_lists_library_versions(self, capsys):
        main([])
        err = capsys.readouterr().err
        assert f"Pillow {PIL.__version__}" in err
        assert f"numpy {np.__version__}" in err

    def test_version_flag(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])
        assert exc.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestProcessing:

    def test_css_for_one_file(self, png_path, capsys):
        path = png_path(_vertical_ramp(), name="button.png")
        assert main([str(path)]) == 0
        out = capsys.readouterr().out
        assert out.startswith(".button {")
        assert "-moz-linear-gradient(top, #000000, #0000ff);" in out

    def test_no_prefixes(self, png_path, capsys):
        path = png_path(_vertical_ramp(), name="button.png")
        assert main(["--no-prefixes", str(path)]) == 0
        out = capsys.readouterr().out
        assert "-moz-" not in out
        assert "linear-gradient(to bottom, #000000, #0000ff);" in out

    def test_json_format(self, png_path, capsys):
        path = png_path(_vertical_ramp(), name="button.png")
        assert main(["--format", "json", str(path)]) == 0
        data = json.loads(capsys.readouterr().out)
        assert data["gradient"]["direction"] == "top"
        assert data["gradient"]["source"] == str(path)

    def test_xml_format(self, png_path, capsys):
        path = png_path(_vertical_ramp(), name="button.png")
        assert main(["-f", "xml", str(path)]) == 0
        assert capsys.readouterr().out.startswith('<gradient version="1.0" direction="top"')

    def test_multiple_files(self, png_path, capsys):
        first = png_path(_vertical_ramp(), name="one.png")
        second = png_path(_vertical_ramp(), name="two.png")
        assert main([str(first), str(second)]) == 0
        out = capsys.readouterr().out
        assert ".one {" in out
        assert ".two {" in out

    def test_negative_tolerance_is_usage_error(self, png_path):
        path = png_path(_vertical_ramp())
        with pytest.raises(SystemExit) as exc:
            main(["--tolerance", "-1", str(path)])
        assert exc.value.code == 2


class TestFailures:

    def test_missing_file_reported_and_processing_continues(self, tmp_path, png_path, capsys):
        good = png_path(_vertical_ramp(), name="good.png")
        missing = tmp_path / "missing.png"

        assert main([str(missing), str(good)]) == 1
        captured = capsys.readouterr()
        assert f"Error with ``{missing}''; Could not open file" in captured.err
        assert ".good {" in captured.out

    def test_not_an_image(self, tmp_path, capsys):
        bogus = tmp_path / "bogus.png"
        bogus.write_text("definitely not a png")

        assert main([str(bogus)]) == 1
        assert "File is not an image" in capsys.readouterr().err

    def test_unsupported_gradient(self, png_path, capsys, monkeypatch):
        path = png_path(_vertical_ramp())

        def fake_extract_gradient(image, **kwargs):
            raise UnsupportedGradient("no stops")

        cli_module = importlib.import_module("pngtocss.cli")
        monkeypatch.setattr(cli_module, "extract_gradient", fake_extract_gradient)

        assert main([str(path)]) == 1
        assert "Gradient not supported" in capsys.readouterr().err

    def test_oversized_image_reported_and_processing_continues(self, png_path, capsys, monkeypatch):
        big = png_path(_vertical_ramp(height=40, width=40), name="big.png")
        good = png_path(_vertical_ramp(height=8, width=8), name="good.png")
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 100)

        assert main([str(big), str(good)]) == 1
        captured = capsys.readouterr()
        assert f"Error with ``{big}''; Image too large to decode" in captured.err
        assert ".good {" in captured.out
