#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/utils/__init__.py
"""Internal helpers shared across mathml2ast modules."""
