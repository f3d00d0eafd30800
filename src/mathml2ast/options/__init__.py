#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for the mathml2ast parser.

Options are frozen dataclasses, so a configured instance can be shared freely
between threads and derived variants are created with ``create_updated``.
"""

from __future__ import annotations

from mathml2ast.options.base import BaseParserOptions, CloneFrozenMixin
from mathml2ast.options.mathml import MathMLOptions

__all__ = [
    "BaseParserOptions",
    "CloneFrozenMixin",
    "MathMLOptions",
]
