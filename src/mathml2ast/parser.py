#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/parser.py
"""MathML document parser.

This module ties the XML loader and the Content Markup translator together.
It accepts the same input shapes as the rest of the library: file paths, raw
XML text, bytes and file-like objects.

"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import IO, Optional, Union

from mathml2ast.ast.nodes import Root
from mathml2ast.exceptions import FileError, FileNotFoundError, InvalidOptionsError, ValidationError
from mathml2ast.utils.decorators import debug_timer
from mathml2ast.options.mathml import MathMLOptions
from mathml2ast.translator import ContentMarkupTranslator
from mathml2ast.xml_tree import load_tree

logger = logging.getLogger(__name__)

MathMLInput = Union[str, Path, IO[bytes], IO[str], bytes]


class MathMLParser:
    """Parse MathML Content Markup documents into AST Root nodes.

    Parameters
    ----------
    options : MathMLOptions or None, default = None
        Parser configuration options

    Examples
    --------
    Parse a file:

        >>> parser = MathMLParser()
        >>> root = parser.parse("formula.mml")

    Parse markup held in memory with a larger depth limit:

        >>> parser = MathMLParser(MathMLOptions(max_depth=1024))
        >>> root = parser.parse(b"<math xmlns='http://www.w3.org/1998/Math/MathML'><ci>x</ci></math>")

    """

    def __init__(self, options: Optional[MathMLOptions] = None):
        """Initialize the parser.

        Raises
        ------
        InvalidOptionsError
            If ``options`` is not a MathMLOptions instance

        """
        if options is not None and not isinstance(options, MathMLOptions):
            raise InvalidOptionsError(
                component_name="MathMLParser",
                expected_type=MathMLOptions,
                received_type=type(options),
            )
        self.options: MathMLOptions = options or MathMLOptions()
        self._translator = ContentMarkupTranslator(self.options)

    def parse(self, input_data: MathMLInput) -> Root:
        """Parse a MathML document into an AST Root.

        Parameters
        ----------
        input_data : str, Path, IO[bytes], IO[str] or bytes
            The document to parse. A ``str`` whose first non-blank character
            is ``<`` is treated as XML text; any other ``str`` is a file path.

        Returns
        -------
        Root
            The translated tree

        Raises
        ------
        FileNotFoundError
            If a path is given and the file does not exist
        FileError
            If the file cannot be read
        ValidationError
            If ``input_data`` has an unsupported type
        XmlSyntaxError
            If the document is not well-formed XML
        ParseError
            If the document is not valid Content Markup

        """
        source = self._load_source(input_data)
        with debug_timer(logger, "Parsing MathML document"):
            tree = load_tree(source, replace_named_entities=self.options.replace_named_entities)
            root = self._translator.translate(tree)
        logger.debug("Translated MathML document into %d top-level expression(s)", len(root.children))
        return root

    def _load_source(self, input_data: MathMLInput) -> Union[str, bytes]:
        if isinstance(input_data, str) and input_data.lstrip().startswith("<"):
            return input_data

        if isinstance(input_data, (str, Path)):
            path = Path(input_data)
            if not path.is_file():
                raise FileNotFoundError(str(path))
            try:
                return path.read_bytes()
            except OSError as e:
                raise FileError(f"Failed to read {path}: {e}", file_path=str(path), original_error=e) from e

        if isinstance(input_data, (bytes, bytearray)):
            return bytes(input_data)

        if hasattr(input_data, "read"):
            data = input_data.read()
            if isinstance(data, (str, bytes)):
                return data
            raise ValidationError(
                f"Stream returned unsupported data type: {type(data).__name__}",
                parameter_name="input_data",
                parameter_value=type(data).__name__,
            )

        raise ValidationError(
            f"Unsupported input type for MathML parser: {type(input_data).__name__}",
            parameter_name="input_data",
            parameter_value=type(input_data).__name__,
        )
