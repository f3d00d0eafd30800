#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Public entry points for parsing MathML Content Markup."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Optional

from mathml2ast.ast.nodes import Root
from mathml2ast.exceptions import Mathml2AstError, ParseError, ParsingError, ValidationError
from mathml2ast.options.mathml import MathMLOptions
from mathml2ast.parser import MathMLInput, MathMLParser
from mathml2ast.translator import ContentMarkupTranslator
from mathml2ast.xml_tree import XmlElement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParseResult:
    """Outcome of try_parse_mathml: exactly one of ``root`` and ``error`` is set."""

    root: Optional[Root] = None
    error: Optional[ParseError] = None

    @property
    def ok(self) -> bool:
        """Whether the document translated successfully."""
        return self.error is None


def _resolve_options(options: Optional[MathMLOptions], kwargs: dict[str, Any]) -> MathMLOptions:
    base = options or MathMLOptions()
    if not kwargs:
        return base
    unknown = sorted(set(kwargs) - MathMLOptions.field_names())
    if unknown:
        raise ValidationError(
            f"Unknown MathML option(s): {', '.join(unknown)}",
            parameter_name=unknown[0],
            parameter_value=kwargs[unknown[0]],
        )
    try:
        return base.create_updated(**kwargs)
    except ValueError as e:
        raise ValidationError(str(e), original_error=e) from e


def parse_mathml(source: MathMLInput, *, options: Optional[MathMLOptions] = None, **kwargs: Any) -> Root:
    """Parse a MathML Content Markup document into an AST.

    Parameters
    ----------
    source : str, Path, IO[bytes], IO[str] or bytes
        File path, XML text, raw bytes or a file-like object
    options : MathMLOptions, optional
        Pre-configured parser options
    kwargs : Any
        Individual options that override settings in ``options``
        (e.g. ``max_depth=64``, ``interpret_numbers=True``)

    Returns
    -------
    Root
        The translated tree

    Raises
    ------
    ValidationError
        If an option name or value is invalid, or the input type is unsupported
    FileError
        If the input file is missing or unreadable
    XmlSyntaxError
        If the document is not well-formed XML
    ParseError
        If the document is not valid Content Markup

    Examples
    --------
    Parse markup held in a string:

        >>> root = parse_mathml(
        ...     '<math xmlns="http://www.w3.org/1998/Math/MathML">'
        ...     '<apply><plus/><ci>x</ci><cn>1</cn></apply></math>'
        ... )
        >>> root.children[0].operator.name
        'plus'

    Interpret number literals:

        >>> root = parse_mathml("formula.mml", interpret_numbers=True)

    """
    parser = MathMLParser(_resolve_options(options, kwargs))
    try:
        return parser.parse(source)
    except Mathml2AstError:
        raise
    except Exception as e:
        raise ParsingError(f"MathML parsing failed: {e!r}", parsing_stage="ast_conversion", original_error=e) from e


def try_parse_mathml(
    source: MathMLInput, *, options: Optional[MathMLOptions] = None, **kwargs: Any
) -> ParseResult:
    """Parse a document, returning translation failures as a value.

    Only Content Markup translation failures (ParseError) are captured. Input
    and XML syntax errors are still raised.

    Examples
    --------
        >>> result = try_parse_mathml("<math xmlns='http://www.w3.org/1998/Math/MathML'><apply/></math>")
        >>> result.ok, type(result.error).__name__
        (False, 'StructureError')

    """
    try:
        return ParseResult(root=parse_mathml(source, options=options, **kwargs))
    except ParseError as e:
        logger.debug("MathML translation failed: %s", e)
        return ParseResult(error=e)


def translate_tree(element: XmlElement, options: Optional[MathMLOptions] = None) -> Root:
    """Translate an already loaded adapter tree into an AST.

    Parameters
    ----------
    element : XmlElement
        Document element produced by mathml2ast.xml_tree.load_tree or built by hand
    options : MathMLOptions, optional
        Translation options

    Returns
    -------
    Root
        The translated tree

    """
    return ContentMarkupTranslator(options).translate(element)


__all__ = ["ParseResult", "parse_mathml", "translate_tree", "try_parse_mathml"]
