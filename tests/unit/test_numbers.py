#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for numeric interpretation of <cn> literals."""

import cmath
from fractions import Fraction

import pytest

from mathml2ast.ast import Ci, Cn, NumberKind, NumberValue, Sep, Text
from mathml2ast.exceptions import NumberFormatError, StructureError
from mathml2ast.numbers import interpret_cn, split_parts


def cn(*children, num_type=None, base=10):
    """Build a Cn node from text strings and Sep markers."""
    nodes = [Sep() if child is Sep else Text(child) for child in children]
    return Cn(nodes, num_type=num_type, base=base)


@pytest.mark.unit
class TestSplitParts:
    """Test splitting leaf content at separators."""

    def test_single_part(self):
        assert split_parts([Text("3")]) == ["3"]

    def test_two_parts(self):
        assert split_parts([Text("22"), Sep(), Text("7")]) == ["22", "7"]

    def test_empty_parts(self):
        assert split_parts([]) == [""]
        assert split_parts([Sep()]) == ["", ""]

    def test_non_text_content(self):
        with pytest.raises(NumberFormatError):
            split_parts([Text("1"), Ci([Text("x")])])


@pytest.mark.unit
class TestInterpretCn:
    """Test interpretation of each number type."""

    def test_default_type_is_real(self):
        value = interpret_cn(cn("3.25"))

        assert value == NumberValue(NumberKind.REAL, (3.25,))
        assert value.as_python() == 3.25

    @pytest.mark.parametrize(
        "text,base,expected",
        [
            ("42", 10, 42),
            ("-7", 10, -7),
            ("FF", 16, 255),
            ("ff", 16, 255),
            ("101", 2, 5),
            ("zz", 36, 1295),
            ("+42", 10, 42),
            (" 12 ", 10, 12),
        ],
    )
    def test_integer(self, text, base, expected):
        assert interpret_cn(cn(text, num_type="integer", base=base)).as_python() == expected

    @pytest.mark.parametrize(
        "text,base,expected",
        [
            ("1.5", 10, 1.5),
            ("-2", 10, -2.0),
            ("1e3", 10, 1000.0),
            ("A.8", 16, 10.5),
            ("-10.1", 2, -2.5),
            (".4", 8, 0.5),
        ],
    )
    def test_real(self, text, base, expected):
        assert interpret_cn(cn(text, num_type="real", base=base)).as_python() == pytest.approx(expected)

    def test_rational(self):
        value = interpret_cn(cn("22", Sep, "7", num_type="rational"))

        assert value.parts == (22, 7)
        assert value.as_python() == Fraction(22, 7)

    def test_rational_in_base(self):
        assert interpret_cn(cn("A", Sep, "F", num_type="rational", base=16)).as_python() == Fraction(10, 15)

    def test_rational_zero_denominator(self):
        with pytest.raises(NumberFormatError, match="denominator"):
            interpret_cn(cn("1", Sep, "0", num_type="rational"))

    def test_complex_cartesian(self):
        assert interpret_cn(cn("1.5", Sep, "-2", num_type="complex-cartesian")).as_python() == complex(1.5, -2)

    def test_complex_polar(self):
        value = interpret_cn(cn("2", Sep, "3.141592653589793", num_type="complex-polar")).as_python()

        assert value == pytest.approx(cmath.rect(2, cmath.pi))

    def test_e_notation_with_sep(self):
        value = interpret_cn(cn("6.02", Sep, "23", num_type="e-notation"))

        assert value.parts == (6.02, 23)
        assert value.as_python() == pytest.approx(6.02e23)

    @pytest.mark.parametrize("text", ["2e-5", "2E-5", "2 e -5"])
    def test_e_notation_single_text(self, text):
        value = interpret_cn(cn(text, num_type="e-notation"))

        assert value.parts == (2.0, -5)

    def test_e_notation_invalid(self):
        with pytest.raises(NumberFormatError):
            interpret_cn(cn("2.5", num_type="e-notation"))

    def test_constant(self):
        assert interpret_cn(cn("π", num_type="constant")) == NumberValue(NumberKind.CONSTANT, ("π",))

    @pytest.mark.parametrize(
        "node",
        [
            cn("abc", num_type="integer"),
            cn("1.5", num_type="integer"),
            cn("abc"),
            cn("G", num_type="integer", base=16),
            cn("1.2.3", num_type="real", base=16),
            cn("", num_type="real"),
            cn("1", num_type="rational"),
            cn("1", Sep, "2", Sep, "3", num_type="complex-cartesian"),
            cn("1", Sep, num_type="rational"),
            cn("-", num_type="integer"),
        ],
    )
    def test_invalid_literals(self, node):
        with pytest.raises(NumberFormatError):
            interpret_cn(node)

    @pytest.mark.parametrize(
        "node",
        [
            cn("1_000", num_type="integer"),
            cn("1_0.5"),
            cn("1_0", Sep, "7", num_type="rational"),
            cn("6.02", Sep, "2_3", num_type="e-notation"),
            cn("0x1F", num_type="integer", base=16),
            cn("0o17", num_type="integer", base=8),
            cn("0b1", num_type="integer", base=2),
        ],
    )
    def test_separators_and_prefixes_rejected(self, node):
        with pytest.raises(NumberFormatError):
            interpret_cn(node)

    def test_unknown_type(self):
        with pytest.raises(NumberFormatError, match="unsupported number type"):
            interpret_cn(cn("1", num_type="hexadecimal"))

    def test_error_is_structure_error(self):
        with pytest.raises(StructureError) as exc_info:
            interpret_cn(cn("abc", num_type="integer"))

        assert exc_info.value.tag == "cn"
        assert exc_info.value.text == "abc"


@pytest.mark.unit
class TestNumberValue:
    """Test the NumberValue value type."""

    def test_kind_coerced_from_string(self):
        assert NumberValue("integer", [3]) == NumberValue(NumberKind.INTEGER, (3,))

    def test_invalid_kind(self):
        with pytest.raises(ValueError):
            NumberValue("octal", (1,))
