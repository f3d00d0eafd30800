#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Configuration options for MathML Content Markup parsing.

This module defines the options controlling how MathML documents are loaded
and translated into the AST.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from mathml2ast.constants import (
    DEFAULT_ALLOW_BARE_EXPRESSION,
    DEFAULT_ALLOW_SYMBOL_OPERATORS,
    DEFAULT_INTERPRET_NUMBERS,
    DEFAULT_MAX_DEPTH,
    DEFAULT_REPLACE_NAMED_ENTITIES,
    MAX_DEPTH_LIMIT,
)
from mathml2ast.options.base import BaseParserOptions


@dataclass(frozen=True)
class MathMLOptions(BaseParserOptions):
    """Configuration options for MathML-to-AST conversion.

    Parameters
    ----------
    max_depth : int, default 256
        Maximum element nesting depth, counting the root element as 1.
        Deeper documents fail with DepthExceededError. Values above
        MAX_DEPTH_LIMIT (256) are rejected.
    allow_bare_expression : bool, default False
        Accept a document whose root is a content element (e.g. ``<apply>``)
        instead of ``<math>``. The expression is wrapped in a Root node.
    allow_symbol_operators : bool, default True
        Represent an unknown childless element in operator position of an
        ``<apply>`` as ``Op(Symbol(tag))`` instead of failing.
    interpret_numbers : bool, default False
        Interpret ``<cn>`` literals according to their ``type`` and ``base``
        attributes and store the result in ``Cn.value``.
    replace_named_entities : bool, default True
        Replace HTML named entity references (``&alpha;``, ``&pi;``) with their
        characters before XML parsing, since the XML parser rejects
        undeclared entities.

    """

    max_depth: int = field(
        default=DEFAULT_MAX_DEPTH,
        metadata={
            "help": "Maximum element nesting depth before parsing fails",
            "type": int,
            "importance": "security",
        },
    )
    allow_bare_expression: bool = field(
        default=DEFAULT_ALLOW_BARE_EXPRESSION,
        metadata={
            "help": "Accept documents rooted at a content element instead of <math>",
            "importance": "core",
        },
    )
    allow_symbol_operators: bool = field(
        default=DEFAULT_ALLOW_SYMBOL_OPERATORS,
        metadata={
            "help": "Treat unknown childless elements in operator position as user-defined symbols",
            "cli_name": "no-symbol-operators",
            "importance": "core",
        },
    )
    interpret_numbers: bool = field(
        default=DEFAULT_INTERPRET_NUMBERS,
        metadata={
            "help": "Interpret <cn> literals as numeric values",
            "importance": "core",
        },
    )
    replace_named_entities: bool = field(
        default=DEFAULT_REPLACE_NAMED_ENTITIES,
        metadata={
            "help": "Replace HTML named entities with their characters before XML parsing",
            "cli_name": "no-replace-entities",
            "importance": "advanced",
        },
    )

    def __post_init__(self) -> None:
        """Validate option values.

        Raises
        ------
        ValueError
            If max_depth is not an integer between 1 and MAX_DEPTH_LIMIT.

        """
        super().__post_init__()
        if isinstance(self.max_depth, bool) or not isinstance(self.max_depth, int):
            raise ValueError(f"max_depth must be an integer, got {type(self.max_depth).__name__}")
        if self.max_depth <= 0:
            raise ValueError(f"max_depth must be positive, got {self.max_depth}")
        if self.max_depth > MAX_DEPTH_LIMIT:
            raise ValueError(f"max_depth must not exceed {MAX_DEPTH_LIMIT}, got {self.max_depth}")
