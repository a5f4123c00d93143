# Copyright (c) 2026 pngtocss contributors
# SPDX-License-Identifier: MIT

"""Errors raised by gradient extraction."""


class UnsupportedGradient(ValueError):
    """The image has no gradient structure that can be described as stops."""
