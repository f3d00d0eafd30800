#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Custom exceptions for the mathml2ast library.

This module defines specialized exception classes for the error conditions
that can occur while loading MathML documents and translating Content Markup
into the AST. Translation failures carry enough structure (tag name, tree
path, limits) for a caller to produce an actionable diagnostic without
walking the input again.

Exception Hierarchy
-------------------
- Mathml2AstError (base exception)

  - ValidationError (parameter/option validation)
    - InvalidOptionsError (wrong options class for a component)

  - FileError (file access and I/O)
    - FileNotFoundError (file doesn't exist)

  - ParsingError (input document parsing failures)
    - XmlSyntaxError (malformed XML)
    - ParseError (Content Markup translation failures)
      - NamespaceError (missing or mismatched MathML namespace)
      - StructureError (structurally invalid element)
        - NumberFormatError (uninterpretable <cn> literal)
      - UnknownElementError (tag outside the vocabulary)
      - DepthExceededError (nesting deeper than the configured limit)

"""

from typing import Any

from mathml2ast.constants import MATHML_NAMESPACE


class Mathml2AstError(Exception):
    """Base exception class for all mathml2ast-specific errors.

    Catching this will catch all library-specific errors.

    Parameters
    ----------
    message : str
        Human-readable description of the error
    original_error : Exception, optional
        The original exception that caused this error, if applicable

    Attributes
    ----------
    message : str
        The error message
    original_error : Exception or None
        The wrapped original exception, if any

    """

    def __init__(self, message: str, original_error: Exception | None = None):
        """Initialize the error with a message and optional original exception."""
        super().__init__(message)
        self.message = message
        self.original_error = original_error


class ValidationError(Mathml2AstError):
    """Exception raised for invalid input parameters or options.

    Parameters
    ----------
    message : str
        Description of the validation error
    parameter_name : str, optional
        Name of the invalid parameter
    parameter_value : any, optional
        The invalid value that was provided
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        message: str,
        parameter_name: str | None = None,
        parameter_value: Any = None,
        original_error: Exception | None = None,
    ):
        """Initialize the validation error with parameter details."""
        super().__init__(message, original_error=original_error)
        self.parameter_name = parameter_name
        self.parameter_value = parameter_value


class InvalidOptionsError(ValidationError):
    """Exception raised when an options object of the wrong class is provided.

    Parameters
    ----------
    component_name : str
        Name of the parser or translator that received invalid options
    expected_type : type
        The expected options class type
    received_type : type
        The actual options class type that was received
    message : str, optional
        Custom error message. If not provided, generates a helpful message
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(
        self,
        component_name: str,
        expected_type: type,
        received_type: type,
        message: str | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the invalid options error."""
        if message is None:
            message = (
                f"{component_name} expected options of type '{expected_type.__name__}' "
                f"but received '{received_type.__name__}'."
            )
        super().__init__(
            message, parameter_name="options", parameter_value=received_type, original_error=original_error
        )
        self.component_name = component_name
        self.expected_type = expected_type
        self.received_type = received_type


class FileError(Mathml2AstError):
    """Base exception for file access and I/O errors.

    Parameters
    ----------
    message : str
        Description of the file error
    file_path : str, optional
        Path to the problematic file
    original_error : Exception, optional
        The original exception that caused this error

    """

    def __init__(self, message: str, file_path: str | None = None, original_error: Exception | None = None):
        """Initialize the file error with path and message."""
        super().__init__(message, original_error=original_error)
        self.file_path = file_path


class FileNotFoundError(FileError):
    """Exception raised when an input file cannot be found."""

    def __init__(self, file_path: str, message: str | None = None, original_error: Exception | None = None):
        """Initialize the file not found error."""
        if message is None:
            message = f"File not found: {file_path}"
        super().__init__(message, file_path=file_path, original_error=original_error)


class ParsingError(Mathml2AstError):
    """Exception raised when document parsing fails.

    Parameters
    ----------
    message : str
        Description of the parsing failure
    parsing_stage : str, optional
        The stage of parsing where the error occurred
    original_error : Exception, optional
        The underlying exception that caused the parsing failure

    Attributes
    ----------
    parsing_stage : str or None
        Where in the parsing process the error occurred

    """

    def __init__(self, message: str, parsing_stage: str | None = None, original_error: Exception | None = None):
        """Initialize the parsing error."""
        super().__init__(message, original_error)
        self.parsing_stage = parsing_stage


class XmlSyntaxError(ParsingError):
    """Exception raised when the input is not well-formed XML.

    Parameters
    ----------
    message : str
        Description of the syntax problem
    line : int, optional
        Line reported by the XML parser
    column : int, optional
        Column reported by the XML parser
    original_error : Exception, optional
        The XML parser's exception

    """

    def __init__(
        self,
        message: str,
        line: int | None = None,
        column: int | None = None,
        original_error: Exception | None = None,
    ):
        """Initialize the XML syntax error."""
        super().__init__(message, parsing_stage="xml_parsing", original_error=original_error)
        self.line = line
        self.column = column


class ParseError(ParsingError):
    """Base class for Content Markup translation failures.

    Every translation failure is fatal to the whole document: no partial tree
    is ever returned alongside one of these errors.

    Parameters
    ----------
    message : str
        Description of the failure
    path : str, optional
        Slash-separated locator of the offending element (e.g. ``/math/apply[0]``)

    """

    def __init__(self, message: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the translation error."""
        super().__init__(message, parsing_stage="translation", original_error=original_error)
        self.path = path


class NamespaceError(ParseError):
    """Exception raised when the document root is not a MathML ``<math>`` element.

    Parameters
    ----------
    found : str or None
        The namespace URI found on the root element, or None when absent
    message : str, optional
        Custom error message

    """

    def __init__(self, found: str | None, message: str | None = None, path: str | None = "/math"):
        """Initialize the namespace error."""
        if message is None:
            if found is None:
                message = f"<math> element has no namespace; expected '{MATHML_NAMESPACE}'"
            else:
                message = f"<math> element has namespace '{found}'; expected '{MATHML_NAMESPACE}'"
        super().__init__(message, path=path)
        self.found = found


class StructureError(ParseError):
    """Exception raised when an element is recognized but structurally invalid.

    Examples are an empty ``<apply>`` or an operator token with children.

    Parameters
    ----------
    tag : str
        Tag name of the offending element
    reason : str
        What is wrong with it
    path : str, optional
        Location of the element in the tree

    """

    def __init__(self, tag: str, reason: str, path: str | None = None, original_error: Exception | None = None):
        """Initialize the structure error."""
        location = f" at {path}" if path else ""
        super().__init__(f"Invalid <{tag}>{location}: {reason}", path=path, original_error=original_error)
        self.tag = tag
        self.reason = reason


class NumberFormatError(StructureError):
    """Exception raised when a ``<cn>`` literal cannot be interpreted as a number.

    Parameters
    ----------
    reason : str
        Why the literal is not valid for its declared type
    path : str, optional
        Location of the ``<cn>`` element
    text : str, optional
        The offending literal text

    """

    def __init__(
        self, reason: str, path: str | None = None, text: str | None = None, original_error: Exception | None = None
    ):
        """Initialize the number format error."""
        super().__init__("cn", reason, path=path, original_error=original_error)
        self.text = text


class UnknownElementError(ParseError):
    """Exception raised for a tag outside the Content Markup vocabulary.

    Unknown elements are never skipped, since dropping them would silently
    change the meaning of the expression.

    Parameters
    ----------
    tag : str
        The unrecognized tag name
    path : str
        Location of the element in the tree

    """

    def __init__(self, tag: str, path: str):
        """Initialize the unknown element error."""
        super().__init__(f"Unknown element <{tag}> at {path}", path=path)
        self.tag = tag


class DepthExceededError(ParseError):
    """Exception raised when element nesting exceeds the configured limit.

    Parameters
    ----------
    limit : int
        The configured maximum depth
    path : str, optional
        Location of the first element beyond the limit

    """

    def __init__(self, limit: int, path: str | None = None, original_error: Exception | None = None):
        """Initialize the depth exceeded error."""
        location = f" at {path}" if path else ""
        super().__init__(
            f"Maximum nesting depth of {limit} exceeded{location}", path=path, original_error=original_error
        )
        self.limit = limit
