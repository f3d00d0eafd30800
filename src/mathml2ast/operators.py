#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/operators.py
"""Built-in operator table for MathML Content Markup.

MathML 2.0 defines a fixed vocabulary of childless content token elements
whose tag name alone denotes an operator, function or constant (``<plus/>``,
``<sin/>``, ``<pi/>``). This module enumerates that vocabulary and provides
the lookup used by the translator.

The lookup table is built once at import time and exposed read-only, so it
can be shared between threads without locking.

Examples
--------
    >>> from mathml2ast.operators import lookup_operator, BuiltinOp
    >>> lookup_operator("plus") is BuiltinOp.PLUS
    True
    >>> lookup_operator("apply") is None
    True

"""

from __future__ import annotations

from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


class OperatorCategory(str, Enum):
    """Grouping of the built-in operators, following the MathML 2.0 chapters."""

    ARITHMETIC = "arithmetic"
    LOGIC = "logic"
    RELATION = "relation"
    FUNCTION = "function"
    ELEMENTARY = "elementary"
    CALCULUS = "calculus"
    SET = "set"
    SEQUENCE = "sequence"
    STATISTICS = "statistics"
    LINEAR_ALGEBRA = "linear-algebra"
    CONSTANT = "constant"


class BuiltinOp(str, Enum):
    """Closed enumeration of the MathML 2.0 content token elements.

    The value of each member is the element's tag name. Members whose tag is
    a Python keyword (``and``, ``or``, ``not``, ``in``) or builtin name keep the
    plain tag as value and an upper-case member name.
    """

    # Arithmetic and algebra
    PLUS = "plus"
    MINUS = "minus"
    TIMES = "times"
    DIVIDE = "divide"
    POWER = "power"
    ROOT = "root"
    QUOTIENT = "quotient"
    REM = "rem"
    FACTORIAL = "factorial"
    MAX = "max"
    MIN = "min"
    GCD = "gcd"
    LCM = "lcm"
    ABS = "abs"
    CONJUGATE = "conjugate"
    ARG = "arg"
    REAL = "real"
    IMAGINARY = "imaginary"
    FLOOR = "floor"
    CEILING = "ceiling"

    # Logic
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOT = "not"
    IMPLIES = "implies"
    FORALL = "forall"
    EXISTS = "exists"

    # Relations
    EQ = "eq"
    NEQ = "neq"
    LT = "lt"
    GT = "gt"
    LEQ = "leq"
    GEQ = "geq"
    EQUIVALENT = "equivalent"
    APPROX = "approx"
    FACTOROF = "factorof"

    # Functions
    FN = "fn"
    COMPOSE = "compose"
    IDENT = "ident"
    DOMAIN = "domain"
    CODOMAIN = "codomain"
    IMAGE = "image"
    INVERSE = "inverse"

    # Elementary classical functions
    EXP = "exp"
    LN = "ln"
    LOG = "log"
    SIN = "sin"
    COS = "cos"
    TAN = "tan"
    SEC = "sec"
    CSC = "csc"
    COT = "cot"
    SINH = "sinh"
    COSH = "cosh"
    TANH = "tanh"
    SECH = "sech"
    CSCH = "csch"
    COTH = "coth"
    ARCSIN = "arcsin"
    ARCCOS = "arccos"
    ARCTAN = "arctan"
    ARCSEC = "arcsec"
    ARCCSC = "arccsc"
    ARCCOT = "arccot"
    ARCSINH = "arcsinh"
    ARCCOSH = "arccosh"
    ARCTANH = "arctanh"
    ARCSECH = "arcsech"
    ARCCSCH = "arccsch"
    ARCCOTH = "arccoth"

    # Calculus and vector calculus
    INT = "int"
    DIFF = "diff"
    PARTIALDIFF = "partialdiff"
    DIVERGENCE = "divergence"
    GRAD = "grad"
    CURL = "curl"
    LAPLACIAN = "laplacian"

    # Set theory
    UNION = "union"
    INTERSECT = "intersect"
    IN = "in"
    NOTIN = "notin"
    SUBSET = "subset"
    PRSUBSET = "prsubset"
    NOTSUBSET = "notsubset"
    NOTPRSUBSET = "notprsubset"
    SETDIFF = "setdiff"
    CARD = "card"
    CARTESIANPRODUCT = "cartesianproduct"

    # Sequences and series
    SUM = "sum"
    PRODUCT = "product"
    LIMIT = "limit"
    TENDSTO = "tendsto"

    # Statistics
    MEAN = "mean"
    SDEV = "sdev"
    VARIANCE = "variance"
    MEDIAN = "median"
    MODE = "mode"
    MOMENT = "moment"

    # Linear algebra
    DETERMINANT = "determinant"
    TRANSPOSE = "transpose"
    SELECTOR = "selector"
    VECTORPRODUCT = "vectorproduct"
    SCALARPRODUCT = "scalarproduct"
    OUTERPRODUCT = "outerproduct"

    # Constants and symbols
    INTEGERS = "integers"
    REALS = "reals"
    RATIONALS = "rationals"
    NATURALNUMBERS = "naturalnumbers"
    COMPLEXES = "complexes"
    PRIMES = "primes"
    EXPONENTIALE = "exponentiale"
    IMAGINARYI = "imaginaryi"
    NOTANUMBER = "notanumber"
    TRUE = "true"
    FALSE = "false"
    EMPTYSET = "emptyset"
    PI = "pi"
    EULERGAMMA = "eulergamma"
    INFINITY = "infinity"

    def __str__(self) -> str:
        return self.value


def _build_categories() -> dict[BuiltinOp, OperatorCategory]:
    groups: dict[OperatorCategory, tuple[BuiltinOp, ...]] = {
        OperatorCategory.ARITHMETIC: (
            BuiltinOp.PLUS, BuiltinOp.MINUS, BuiltinOp.TIMES, BuiltinOp.DIVIDE, BuiltinOp.POWER,
            BuiltinOp.ROOT, BuiltinOp.QUOTIENT, BuiltinOp.REM, BuiltinOp.FACTORIAL, BuiltinOp.MAX,
            BuiltinOp.MIN, BuiltinOp.GCD, BuiltinOp.LCM, BuiltinOp.ABS, BuiltinOp.CONJUGATE,
            BuiltinOp.ARG, BuiltinOp.REAL, BuiltinOp.IMAGINARY, BuiltinOp.FLOOR, BuiltinOp.CEILING,
        ),
        OperatorCategory.LOGIC: (
            BuiltinOp.AND, BuiltinOp.OR, BuiltinOp.XOR, BuiltinOp.NOT, BuiltinOp.IMPLIES,
            BuiltinOp.FORALL, BuiltinOp.EXISTS,
        ),
        OperatorCategory.RELATION: (
            BuiltinOp.EQ, BuiltinOp.NEQ, BuiltinOp.LT, BuiltinOp.GT, BuiltinOp.LEQ, BuiltinOp.GEQ,
            BuiltinOp.EQUIVALENT, BuiltinOp.APPROX, BuiltinOp.FACTOROF,
        ),
        OperatorCategory.FUNCTION: (
            BuiltinOp.FN, BuiltinOp.COMPOSE, BuiltinOp.IDENT, BuiltinOp.DOMAIN, BuiltinOp.CODOMAIN,
            BuiltinOp.IMAGE, BuiltinOp.INVERSE,
        ),
        OperatorCategory.ELEMENTARY: (
            BuiltinOp.EXP, BuiltinOp.LN, BuiltinOp.LOG, BuiltinOp.SIN, BuiltinOp.COS, BuiltinOp.TAN,
            BuiltinOp.SEC, BuiltinOp.CSC, BuiltinOp.COT, BuiltinOp.SINH, BuiltinOp.COSH, BuiltinOp.TANH,
            BuiltinOp.SECH, BuiltinOp.CSCH, BuiltinOp.COTH, BuiltinOp.ARCSIN, BuiltinOp.ARCCOS,
            BuiltinOp.ARCTAN, BuiltinOp.ARCSEC, BuiltinOp.ARCCSC, BuiltinOp.ARCCOT, BuiltinOp.ARCSINH,
            BuiltinOp.ARCCOSH, BuiltinOp.ARCTANH, BuiltinOp.ARCSECH, BuiltinOp.ARCCSCH, BuiltinOp.ARCCOTH,
        ),
        OperatorCategory.CALCULUS: (
            BuiltinOp.INT, BuiltinOp.DIFF, BuiltinOp.PARTIALDIFF, BuiltinOp.DIVERGENCE, BuiltinOp.GRAD,
            BuiltinOp.CURL, BuiltinOp.LAPLACIAN,
        ),
        OperatorCategory.SET: (
            BuiltinOp.UNION, BuiltinOp.INTERSECT, BuiltinOp.IN, BuiltinOp.NOTIN, BuiltinOp.SUBSET,
            BuiltinOp.PRSUBSET, BuiltinOp.NOTSUBSET, BuiltinOp.NOTPRSUBSET, BuiltinOp.SETDIFF,
            BuiltinOp.CARD, BuiltinOp.CARTESIANPRODUCT,
        ),
        OperatorCategory.SEQUENCE: (BuiltinOp.SUM, BuiltinOp.PRODUCT, BuiltinOp.LIMIT, BuiltinOp.TENDSTO),
        OperatorCategory.STATISTICS: (
            BuiltinOp.MEAN, BuiltinOp.SDEV, BuiltinOp.VARIANCE, BuiltinOp.MEDIAN, BuiltinOp.MODE,
            BuiltinOp.MOMENT,
        ),
        OperatorCategory.LINEAR_ALGEBRA: (
            BuiltinOp.DETERMINANT, BuiltinOp.TRANSPOSE, BuiltinOp.SELECTOR, BuiltinOp.VECTORPRODUCT,
            BuiltinOp.SCALARPRODUCT, BuiltinOp.OUTERPRODUCT,
        ),
        OperatorCategory.CONSTANT: (
            BuiltinOp.INTEGERS, BuiltinOp.REALS, BuiltinOp.RATIONALS, BuiltinOp.NATURALNUMBERS,
            BuiltinOp.COMPLEXES, BuiltinOp.PRIMES, BuiltinOp.EXPONENTIALE, BuiltinOp.IMAGINARYI,
            BuiltinOp.NOTANUMBER, BuiltinOp.TRUE, BuiltinOp.FALSE, BuiltinOp.EMPTYSET, BuiltinOp.PI,
            BuiltinOp.EULERGAMMA, BuiltinOp.INFINITY,
        ),
    }
    return {op: category for category, ops in groups.items() for op in ops}


_OPERATORS: Mapping[str, BuiltinOp] = MappingProxyType({op.value: op for op in BuiltinOp})
_CATEGORIES: Mapping[BuiltinOp, OperatorCategory] = MappingProxyType(_build_categories())


def lookup_operator(tag: str) -> Optional[BuiltinOp]:
    """Look up a built-in operator by tag name.

    Parameters
    ----------
    tag : str
        Local tag name of the element (no namespace)

    Returns
    -------
    BuiltinOp or None
        The matching operator, or None if ``tag`` is not a built-in token

    """
    return _OPERATORS.get(tag)


def is_builtin_operator(tag: str) -> bool:
    """Return True if ``tag`` names a built-in content token element."""
    return tag in _OPERATORS


def operator_category(op: BuiltinOp) -> OperatorCategory:
    """Return the category a built-in operator belongs to."""
    return _CATEGORIES[op]


def builtin_operator_names() -> frozenset[str]:
    """Return the tag names of all built-in operators."""
    return frozenset(_OPERATORS)
