#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/numbers.py
"""Numeric interpretation of ``<cn>`` literals.

A ``<cn>`` element carries its value as text, read according to the ``type``
and ``base`` attributes. Compound types split their parts with ``<sep/>``::

    <cn type="rational"> 22 <sep/> 7 </cn>
    <cn type="complex-cartesian"> 1.5 <sep/> -2 </cn>
    <cn type="e-notation"> 2 <sep/> -5 </cn>

The e-notation type also accepts the single-text form used by SBML tools
(``<cn type="e-notation"> 2e-5 </cn>``).

Functions
---------
interpret_cn : Interpret a Cn node into a NumberValue
split_parts : Split leaf content into the text of each sep-delimited part

NumberKind and NumberValue live in mathml2ast.ast.nodes and are re-exported
here for convenience.

"""

from __future__ import annotations

import re
from typing import Sequence

from mathml2ast.ast.nodes import Cn, Node, NumberKind, NumberValue, Sep, Text
from mathml2ast.constants import DEFAULT_CN_TYPE, DEFAULT_NUMBER_BASE
from mathml2ast.exceptions import NumberFormatError

__all__ = ["NumberKind", "NumberValue", "interpret_cn", "split_parts"]

_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"
_SBML_E_NOTATION = re.compile(r"^\s*([^eE]+?)\s*[eE]\s*([+-]?\d+)\s*$")


def split_parts(children: Sequence[Node]) -> list[str]:
    """Split leaf content into the text of each sep-delimited part.

    Parameters
    ----------
    children : sequence of Node
        Children of a Cn node

    Returns
    -------
    list of str
        One entry per part; a part without text yields an empty string

    Raises
    ------
    NumberFormatError
        If the content holds anything but Text and Sep nodes

    """
    parts: list[str] = [""]
    for child in children:
        if isinstance(child, Sep):
            parts.append("")
        elif isinstance(child, Text):
            parts[-1] = f"{parts[-1]} {child.content}".strip()
        else:
            raise NumberFormatError(f"unexpected <{type(child).__name__.lower()}> content in number literal")
    return parts


def _parse_int(text: str, base: int) -> int:
    # int() alone would also accept "_" separators and 0x/0o/0b prefixes
    body = text.strip()
    digits = body[1:] if body[:1] in ("+", "-") else body
    valid = _DIGITS[:base]
    if not digits or any(ch not in valid for ch in digits.lower()):
        raise NumberFormatError(f"'{text}' is not an integer in base {base}", text=text)
    try:
        return int(body, base)
    except ValueError as e:
        # digit count above sys.get_int_max_str_digits()
        raise NumberFormatError(f"'{text}' is too long to convert", text=text, original_error=e) from e


def _parse_real(text: str, base: int) -> float:
    text = text.strip()
    if base == DEFAULT_NUMBER_BASE:
        if "_" in text:
            raise NumberFormatError(f"'{text}' is not a real number", text=text)
        try:
            return float(text)
        except ValueError as e:
            raise NumberFormatError(f"'{text}' is not a real number", text=text, original_error=e) from e

    # Non-decimal reals: optional sign, digits, optional radix point
    sign = 1.0
    body = text.lower()
    if body and body[0] in "+-":
        sign = -1.0 if body[0] == "-" else 1.0
        body = body[1:]
    whole, _, fraction = body.partition(".")
    valid = _DIGITS[:base]
    if not (whole or fraction) or any(ch not in valid for ch in whole + fraction):
        raise NumberFormatError(f"'{text}' is not a real number in base {base}", text=text)

    value = 0.0
    for ch in whole:
        value = value * base + valid.index(ch)
    scale = 1.0
    for ch in fraction:
        scale /= base
        value += valid.index(ch) * scale
    return sign * value


def _require_parts(parts: list[str], count: int, kind: NumberKind) -> list[str]:
    if len(parts) != count or any(not part for part in parts):
        raise NumberFormatError(
            f"type '{kind.value}' requires {count} non-empty part(s) separated by <sep/>, got {len(parts)}",
            text=" <sep/> ".join(parts),
        )
    return parts


def interpret_cn(cn: Cn) -> NumberValue:
    """Interpret a Cn node according to its type and base.

    Parameters
    ----------
    cn : Cn
        A translated number literal

    Returns
    -------
    NumberValue
        The interpreted value

    Raises
    ------
    NumberFormatError
        If the type is unknown or the text does not match the type

    Examples
    --------
    >>> from mathml2ast.ast import Cn, Sep, Text
    >>> interpret_cn(Cn([Text("AB3")], num_type="integer", base=16)).as_python()
    2739
    >>> interpret_cn(Cn([Text("22"), Sep(), Text("7")], num_type="rational")).as_python()
    Fraction(22, 7)

    """
    type_name = cn.num_type or DEFAULT_CN_TYPE
    try:
        kind = NumberKind(type_name)
    except ValueError as e:
        raise NumberFormatError(f"unsupported number type '{type_name}'", original_error=e) from e

    parts = split_parts(cn.children)
    base = cn.base

    if kind is NumberKind.REAL:
        (text,) = _require_parts(parts, 1, kind)
        return NumberValue(kind, (_parse_real(text, base),))

    if kind is NumberKind.INTEGER:
        (text,) = _require_parts(parts, 1, kind)
        return NumberValue(kind, (_parse_int(text, base),))

    if kind is NumberKind.CONSTANT:
        (text,) = _require_parts(parts, 1, kind)
        return NumberValue(kind, (text,))

    if kind is NumberKind.RATIONAL:
        numerator, denominator = (_parse_int(p, base) for p in _require_parts(parts, 2, kind))
        if denominator == 0:
            raise NumberFormatError("rational denominator is zero", text=" <sep/> ".join(parts))
        return NumberValue(kind, (numerator, denominator))

    if kind in (NumberKind.COMPLEX_CARTESIAN, NumberKind.COMPLEX_POLAR):
        first, second = (_parse_real(p, base) for p in _require_parts(parts, 2, kind))
        return NumberValue(kind, (first, second))

    # e-notation: "m <sep/> e" or the single-text "2e-5" form
    if len(parts) == 1:
        match = _SBML_E_NOTATION.match(parts[0])
        if match is None:
            raise NumberFormatError(f"'{parts[0]}' is not in e-notation", text=parts[0])
        mantissa_text, exponent_text = match.groups()
    else:
        mantissa_text, exponent_text = _require_parts(parts, 2, kind)
    return NumberValue(kind, (_parse_real(mantissa_text, DEFAULT_NUMBER_BASE), _parse_int(exponent_text, 10)))
