"""mathml2ast - translate MathML 2.0 Content Markup into a typed abstract syntax tree.

mathml2ast reads MathML documents written in the Content Markup vocabulary
(``<apply>``, ``<ci>``, ``<cn>``, operator tokens such as ``<plus/>``) and
produces an immutable AST for evaluation, transformation or indexing.
Presentation Markup is not supported.

Key Features
------------
- Full MathML 2.0 content token vocabulary as the BuiltinOp enum
- Structured errors carrying the tag and tree path of the offending element
- Configurable nesting depth limit for untrusted input
- Optional numeric interpretation of ``<cn>`` literals
- JSON serialization of the AST

Requirements
------------
- Python 3.10+

Examples
--------
Parse a document:

    >>> from mathml2ast import parse_mathml
    >>> root = parse_mathml(
    ...     '<math xmlns="http://www.w3.org/1998/Math/MathML">'
    ...     '<apply><plus/><ci>x</ci><cn>1</cn></apply></math>'
    ... )
    >>> root.children[0].operator.name
    'plus'

Handle translation failures as values:

    >>> from mathml2ast import try_parse_mathml
    >>> result = try_parse_mathml("formula.mml")
    >>> if not result.ok:
    ...     print(result.error.path)

See Also
--------
mathml2ast.ast : AST node definitions and utilities
mathml2ast.options : Parser configuration

"""

#  Copyright (c) 2025 Tom Villani, Ph.D.

# Check Python version before any imports
import sys

if sys.version_info < (3, 10):
    raise ImportError(
        "mathml2ast requires Python 3.10 or later. "
        f"You are using Python {sys.version_info.major}.{sys.version_info.minor}."
    )

__version__ = "0.1.0"

from mathml2ast.api import ParseResult, parse_mathml, translate_tree, try_parse_mathml
from mathml2ast.ast import Apply, Ci, Cn, Csymbol, Node, Op, Root, Sep, Symbol, Text
from mathml2ast.exceptions import (
    DepthExceededError,
    Mathml2AstError,
    NamespaceError,
    NumberFormatError,
    ParseError,
    ParsingError,
    StructureError,
    UnknownElementError,
    XmlSyntaxError,
)
from mathml2ast.operators import BuiltinOp, lookup_operator
from mathml2ast.options import MathMLOptions
from mathml2ast.parser import MathMLParser

__all__ = [
    "__version__",
    # API
    "parse_mathml",
    "try_parse_mathml",
    "translate_tree",
    "ParseResult",
    "MathMLParser",
    "MathMLOptions",
    # AST
    "Apply",
    "BuiltinOp",
    "Ci",
    "Cn",
    "Csymbol",
    "Node",
    "Op",
    "Root",
    "Sep",
    "Symbol",
    "Text",
    "lookup_operator",
    # Exceptions
    "DepthExceededError",
    "Mathml2AstError",
    "NamespaceError",
    "NumberFormatError",
    "ParseError",
    "ParsingError",
    "StructureError",
    "UnknownElementError",
    "XmlSyntaxError",
]
