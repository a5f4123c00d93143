# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""Command-line interface for pngtocss."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

import numpy as np
import PIL
from PIL import Image, UnidentifiedImageError

from pngtocss import __version__
from pngtocss.measure import ExtractionConfig, UnsupportedGradient, extract_gradient
from pngtocss.runtime import (
    BlockFormat,
    SerializerFormat,
    class_name_for,
    to_context_block,
    to_css,
)
from pngtocss.schema import Gradient

logger = logging.getLogger(__name__)

USAGE = "Usage: pngtocss <image1.png> <image2.png> ..."


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog="pngtocss",
        description="Read images containing a linear gradient and print the CSS for it",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # CSS rule per image, class named after the file
  pngtocss button.png header.png

  # Only the unprefixed linear-gradient() declaration
  pngtocss --no-prefixes button.png

  # Stops as JSON, stricter color matching
  pngtocss --format json --tolerance 0 button.png
        """,
    )

    parser.add_argument("files", nargs="*", help="Image files to read")

    parser.add_argument(
        "-f",
        "--format",
        choices=[f.value for f in SerializerFormat],
        default=SerializerFormat.CSS.value,
        help="Output format (default: css)",
    )

    parser.add_argument(
        "-t",
        "--tolerance",
        type=int,
        default=ExtractionConfig.tolerance,
        help="Per-channel difference (0-255) under which colors are equal (default: 2)",
    )

    parser.add_argument(
        "--no-prefixes",
        action="store_true",
        help="Emit only the unprefixed linear-gradient() declaration",
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log extraction details"
    )

    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    return parser


def version_info() -> str:
    """Version banner shown when no files are given."""
    return "\n".join([
        f"pngtocss v{__version__}",
        "   Distributed under the terms of the MIT license",
        "",
        f"   Using Pillow {PIL.__version__}; numpy {np.__version__}.",
        "",
    ])


def render(gradient: Gradient, path: str, output_format: SerializerFormat, prefixes: bool) -> str:
    """Render one gradient in the requested format."""
    if output_format == SerializerFormat.CSS:
        return to_css(gradient, class_name_for(path), prefixes=prefixes)
    return to_context_block(
        gradient, format=BlockFormat(output_format.value), source=path
    )


def process_file(
    path: str,
    config: ExtractionConfig,
    output_format: SerializerFormat,
    prefixes: bool = True,
) -> str:
    """Extract and render the gradient of a single image.

    Raises:
        FileNotFoundError, PermissionError: If the file cannot be opened
        UnidentifiedImageError: If the file is not a decodable image
        PIL.Image.DecompressionBombError: If the image exceeds Pillow's pixel limit
        UnsupportedGradient: If no gradient could be extracted
    """
    gradient = extract_gradient(path, config=config)
    logger.debug(
        f"{path}: {gradient.direction.name} gradient, {len(gradient.stops)} stops"
    )
    return render(gradient, path, output_format, prefixes)


def main(args: Optional[list] = None) -> int:
    """Main entry point for CLI.

    Args:
        args: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 if every file was processed, 1 otherwise)
    """
    parser = create_parser()
    parsed = parser.parse_args(args)

    logging.basicConfig(
        level=logging.DEBUG if parsed.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not parsed.files:
        print(version_info(), file=sys.stderr)
        print(USAGE, file=sys.stderr)
        return 0

    try:
        config = ExtractionConfig(tolerance=parsed.tolerance)
    except ValueError as e:
        parser.error(str(e))
    output_format = SerializerFormat(parsed.format)

    failed = False
    for path in parsed.files:
        try:
            print(process_file(path, config, output_format, not parsed.no_prefixes))
        except (FileNotFoundError, IsADirectoryError, PermissionError):
            _report(path, "Could not open file")
            failed = True
        except UnidentifiedImageError:
            _report(path, "File is not an image")
            failed = True
        except UnsupportedGradient as e:
            logger.debug(f"{path}: {e}")
            _report(path, "Gradient not supported")
            failed = True
        except Image.DecompressionBombError as e:
            _report(path, f"Image too large to decode: {e}")
            failed = True
        except OSError as e:
            _report(path, f"Could not decode image: {e}")
            failed = True

    return 1 if failed else 0


def _report(path: str, reason: str) -> None:
    print(f"Error with ``{path}''; {reason}", file=sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
