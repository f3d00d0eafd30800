#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/cli.py
"""Command-line interface for mathml2ast.

Parses a MathML Content Markup document and prints its AST, either as JSON
(the default, suitable for piping into other tools) or as a tree rendered
with rich.

Examples
--------
    $ mathml2ast formula.mml
    $ cat formula.mml | mathml2ast - --format tree
    $ mathml2ast formula.mml --interpret-numbers --indent 4

Exit codes
----------
0 success, 1 unexpected error, 3 invalid arguments, 4 file error,
6 XML or Content Markup error.

"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from mathml2ast.ast.nodes import Apply, Ci, Cn, Csymbol, Node, Op, Root, Sep, Text, get_node_children
from mathml2ast.ast.serialization import ast_to_json
from mathml2ast.constants import (
    DEFAULT_JSON_INDENT,
    DEFAULT_MAX_DEPTH,
    DEFAULT_OUTPUT_FORMAT,
    EXIT_ERROR,
    EXIT_FILE_ERROR,
    EXIT_PARSING_ERROR,
    EXIT_SUCCESS,
    EXIT_VALIDATION_ERROR,
    MAX_DEPTH_LIMIT,
)
from mathml2ast.exceptions import FileError, ParseError, ParsingError, ValidationError
from mathml2ast.logging_utils import configure_logging
from mathml2ast.options.mathml import MathMLOptions
from mathml2ast.parser import MathMLParser

logger = logging.getLogger(__name__)


def get_version() -> str:
    """Get the installed version of mathml2ast."""
    try:
        from importlib.metadata import PackageNotFoundError, version

        return version("mathml2ast")
    except PackageNotFoundError:
        from mathml2ast import __version__

        return __version__


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the mathml2ast command."""
    parser = argparse.ArgumentParser(
        prog="mathml2ast",
        description="Translate a MathML 2.0 Content Markup document into an abstract syntax tree.",
    )
    parser.add_argument(
        "input", metavar="INPUT", help="MathML file to parse, '-' to read from stdin, or inline markup starting with '<'"
    )

    output_group = parser.add_argument_group("output options")
    output_group.add_argument(
        "--format",
        choices=["json", "tree"],
        default=DEFAULT_OUTPUT_FORMAT,
        help=f"Output format (default: {DEFAULT_OUTPUT_FORMAT})",
    )
    output_group.add_argument(
        "--indent",
        type=int,
        default=DEFAULT_JSON_INDENT,
        metavar="N",
        help=f"JSON indentation; 0 for compact output (default: {DEFAULT_JSON_INDENT})",
    )

    parser_group = parser.add_argument_group("parser options")
    parser_group.add_argument(
        "--max-depth",
        type=int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Maximum element nesting depth, at most {MAX_DEPTH_LIMIT} (default: {DEFAULT_MAX_DEPTH})",
    )
    parser_group.add_argument(
        "--allow-bare-expression",
        action="store_true",
        help="Accept documents rooted at a content element instead of <math>",
    )
    parser_group.add_argument(
        "--no-symbol-operators",
        dest="allow_symbol_operators",
        action="store_false",
        help="Reject unknown elements in operator position instead of treating them as symbols",
    )
    parser_group.add_argument(
        "--interpret-numbers",
        action="store_true",
        help="Interpret <cn> literals and include their numeric values",
    )
    parser_group.add_argument(
        "--no-replace-entities",
        dest="replace_named_entities",
        action="store_false",
        help="Do not replace HTML named entities (&alpha; etc.) before XML parsing",
    )

    # Logging and verbosity options
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Enable verbose output with detailed logging (equivalent to --log-level DEBUG)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level (default: WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        metavar="PATH",
        help="Write log messages to specified file in addition to console output",
    )
    parser.add_argument(
        "--trace",
        action="store_true",
        help="Enable trace mode with timestamps, logger names and timing information",
    )
    parser.add_argument("--version", "-V", action="version", version=f"mathml2ast {get_version()}")
    return parser


def _setup_logging_level(parsed_args: argparse.Namespace) -> None:
    # --trace takes highest precedence, then --verbose, then --log-level
    if parsed_args.trace:
        log_level = logging.DEBUG
    elif parsed_args.verbose and parsed_args.log_level == "WARNING":
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, parsed_args.log_level.upper())

    configure_logging(log_level, log_file=parsed_args.log_file, trace_mode=parsed_args.trace)


def get_exit_code_for_exception(exception: Exception) -> int:
    """Map an exception to a CLI exit code.

    Parameters
    ----------
    exception : Exception
        The exception to map

    Returns
    -------
    int
        The exit code for the exception type

    """
    if isinstance(exception, ValidationError):
        return EXIT_VALIDATION_ERROR

    if isinstance(exception, FileError):
        return EXIT_FILE_ERROR

    if isinstance(exception, ParsingError):
        return EXIT_PARSING_ERROR

    return EXIT_ERROR


def format_error(exception: Exception) -> str:
    """Format an exception for display on stderr."""
    if isinstance(exception, ParseError):
        lines = [f"{type(exception).__name__}: {exception.message}"]
        tag = getattr(exception, "tag", None)
        if tag:
            lines.append(f"  tag:  <{tag}>")
        if exception.path:
            lines.append(f"  path: {exception.path}")
        return "\n".join(lines)
    return f"Error: {exception}"


def _node_label(node: Node) -> str:
    from rich.markup import escape

    if isinstance(node, Op):
        kind = "built-in" if node.is_builtin else "symbol"
        return f"[bold magenta]Op[/] {escape(node.name)} [dim]({kind})[/]"
    if isinstance(node, Text):
        return f"[green]{escape(repr(node.content))}[/]"
    if isinstance(node, Cn):
        details = [f"type={escape(node.num_type)}"] if node.num_type else []
        if node.base != 10:
            details.append(f"base={node.base}")
        if node.value is not None:
            details.append(f"value={escape(repr(node.value.as_python()))}")
        suffix = f" [dim]({', '.join(details)})[/]" if details else ""
        return f"[bold cyan]Cn[/]{suffix}"
    if isinstance(node, Csymbol) and node.definition_url:
        return f"[bold cyan]Csymbol[/] [dim]({escape(node.definition_url)})[/]"
    if isinstance(node, (Ci, Csymbol)):
        return f"[bold cyan]{type(node).__name__}[/]"
    if isinstance(node, Sep):
        return "[dim]Sep[/]"
    if isinstance(node, (Root, Apply)):
        return f"[bold]{type(node).__name__}[/]"
    return type(node).__name__


def render_tree(root: Node) -> None:
    """Print ``root`` to stdout as a rich tree."""
    from rich.console import Console
    from rich.tree import Tree

    tree = Tree(_node_label(root))
    stack = [(root, tree)]
    while stack:
        node, branch = stack.pop()
        for child in get_node_children(node):
            stack.append((child, branch.add(_node_label(child))))

    Console().print(tree)


def _read_input(input_arg: str) -> bytes | str:
    if input_arg == "-":
        return sys.stdin.buffer.read()
    return input_arg


def main(args: Optional[list[str]] = None) -> int:
    """Execute the mathml2ast command."""
    parser = create_parser()
    parsed_args = parser.parse_args(args)

    _setup_logging_level(parsed_args)

    if parsed_args.indent < 0:
        print("Error: --indent must not be negative", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        options = MathMLOptions(
            max_depth=parsed_args.max_depth,
            allow_bare_expression=parsed_args.allow_bare_expression,
            allow_symbol_operators=parsed_args.allow_symbol_operators,
            interpret_numbers=parsed_args.interpret_numbers,
            replace_named_entities=parsed_args.replace_named_entities,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_VALIDATION_ERROR

    try:
        source = _read_input(parsed_args.input)
        root = MathMLParser(options).parse(source)
    except Exception as e:
        logger.debug("Parsing failed", exc_info=True)
        print(format_error(e), file=sys.stderr)
        return get_exit_code_for_exception(e)

    if parsed_args.format == "tree":
        render_tree(root)
    else:
        print(ast_to_json(root, indent=parsed_args.indent or None))

    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
