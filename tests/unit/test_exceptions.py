#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the exception hierarchy."""

import pytest

from mathml2ast import exceptions
from mathml2ast.constants import MATHML_NAMESPACE
from mathml2ast.exceptions import (
    DepthExceededError,
    FileError,
    FileNotFoundError,
    InvalidOptionsError,
    Mathml2AstError,
    NamespaceError,
    NumberFormatError,
    ParseError,
    ParsingError,
    StructureError,
    UnknownElementError,
    ValidationError,
    XmlSyntaxError,
)


@pytest.mark.unit
class TestHierarchy:
    """Test exception inheritance."""

    @pytest.mark.parametrize(
        "cls,parent",
        [
            (ValidationError, Mathml2AstError),
            (InvalidOptionsError, ValidationError),
            (FileError, Mathml2AstError),
            (FileNotFoundError, FileError),
            (ParsingError, Mathml2AstError),
            (XmlSyntaxError, ParsingError),
            (ParseError, ParsingError),
            (NamespaceError, ParseError),
            (StructureError, ParseError),
            (NumberFormatError, StructureError),
            (UnknownElementError, ParseError),
            (DepthExceededError, ParseError),
        ],
    )
    def test_subclass(self, cls, parent):
        assert issubclass(cls, parent)

    def test_xml_syntax_error_is_not_parse_error(self):
        assert not issubclass(XmlSyntaxError, ParseError)

    def test_file_not_found_is_library_error(self):
        assert exceptions.FileNotFoundError is FileNotFoundError
        assert not issubclass(FileNotFoundError, OSError)


@pytest.mark.unit
class TestErrorDetails:
    """Test structured error attributes and messages."""

    def test_base_error(self):
        cause = RuntimeError("boom")
        error = Mathml2AstError("failed", original_error=cause)

        assert error.message == "failed"
        assert error.original_error is cause
        assert str(error) == "failed"

    def test_namespace_error_missing(self):
        error = NamespaceError(None)

        assert error.found is None
        assert error.path == "/math"
        assert "no namespace" in error.message
        assert MATHML_NAMESPACE in error.message

    def test_namespace_error_mismatch(self):
        error = NamespaceError("http://example.com")

        assert "http://example.com" in error.message
        assert error.parsing_stage == "translation"

    def test_structure_error(self):
        error = StructureError("apply", "must contain at least one element", "/math/apply[0]")

        assert error.tag == "apply"
        assert error.reason == "must contain at least one element"
        assert error.path == "/math/apply[0]"
        assert str(error) == "Invalid <apply> at /math/apply[0]: must contain at least one element"

    def test_structure_error_without_path(self):
        assert str(StructureError("plus", "element must be empty")) == "Invalid <plus>: element must be empty"

    def test_number_format_error(self):
        error = NumberFormatError("bad digits", path="/math/cn[0]", text="xyz")

        assert error.tag == "cn"
        assert error.text == "xyz"
        assert "bad digits" in str(error)

    def test_unknown_element_error(self):
        error = UnknownElementError("foo", "/math/apply[0]/foo[2]")

        assert error.tag == "foo"
        assert str(error) == "Unknown element <foo> at /math/apply[0]/foo[2]"

    def test_depth_exceeded_error(self):
        error = DepthExceededError(256, path="/math/apply[0]")

        assert error.limit == 256
        assert "256" in str(error)
        assert "/math/apply[0]" in str(error)

    def test_invalid_options_error(self):
        error = InvalidOptionsError("MathMLParser", expected_type=dict, received_type=list)

        assert error.parameter_name == "options"
        assert "MathMLParser" in error.message
        assert "'dict'" in error.message

    def test_xml_syntax_error(self):
        error = XmlSyntaxError("bad", line=3, column=7)

        assert (error.line, error.column) == (3, 7)
        assert error.parsing_stage == "xml_parsing"

    def test_file_not_found_error(self):
        error = FileNotFoundError("missing.mml")

        assert error.file_path == "missing.mml"
        assert "missing.mml" in str(error)
