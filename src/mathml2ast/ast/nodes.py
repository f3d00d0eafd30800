#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/ast/nodes.py
"""AST node classes for MathML Content Markup.

This module defines the closed set of node types produced by the translator.
Each node corresponds to one supported Content Markup construct.

Node Hierarchy
--------------
All nodes inherit from the base Node class and support the visitor pattern.

Container nodes:
    - Root: the top-level expressions of a ``<math>`` element
    - Apply: an operator applied to operands

Token and leaf nodes:
    - Op: a built-in operator or user-defined symbol in token form
    - Ci, Cn, Csymbol: identifier, number and symbol citations
    - Sep: the separator inside compound number literals
    - Text: normalized text content

Value types carried by nodes:
    - Symbol: a user-defined operator identity held by Op
    - NumberKind, NumberValue: the interpreted value of a Cn

Nodes are frozen dataclasses. Child sequences are stored as tuples, so a tree
is immutable, hashable and compared structurally::

    >>> Ci([Text("x")]) == Ci((Text("x"),))
    True

"""

from __future__ import annotations

import cmath
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum
from fractions import Fraction
from typing import Any, Optional, Union

from mathml2ast.constants import DEFAULT_NUMBER_BASE
from mathml2ast.operators import BuiltinOp

Attributes = tuple[tuple[str, str], ...]


def _freeze_children(node: Node, children: Iterable[Node]) -> None:
    object.__setattr__(node, "children", tuple(children))


def _freeze_attributes(node: Node, attributes: Union[Mapping[str, str], Iterable[tuple[str, str]]]) -> None:
    items = attributes.items() if isinstance(attributes, Mapping) else attributes
    object.__setattr__(node, "attributes", tuple((str(k), str(v)) for k, v in items))


@dataclass(frozen=True)
class Symbol:
    """A user-defined operator identity.

    Produced when an element outside the built-in vocabulary appears, without
    children, in operator position of an ``<apply>``.

    Parameters
    ----------
    name : str
        Tag name of the element

    """

    name: str

    def __str__(self) -> str:
        return self.name


Operator = Union[BuiltinOp, Symbol]


# ============================================================================
# Numeric Values
# ============================================================================


class NumberKind(str, Enum):
    """Numeric literal kinds defined by MathML 2.0 for ``<cn type=...>``."""

    REAL = "real"
    INTEGER = "integer"
    RATIONAL = "rational"
    COMPLEX_CARTESIAN = "complex-cartesian"
    COMPLEX_POLAR = "complex-polar"
    CONSTANT = "constant"
    E_NOTATION = "e-notation"


@dataclass(frozen=True)
class NumberValue:
    """Interpreted value of a number literal.

    Parameters
    ----------
    kind : NumberKind
        The literal's type
    parts : tuple
        Parsed components: one for real, integer and constant; two for
        rational (numerator, denominator), complex (real/imaginary or
        modulus/argument) and e-notation (mantissa, exponent)

    """

    kind: NumberKind
    parts: tuple[Union[int, float, str], ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", NumberKind(self.kind))
        object.__setattr__(self, "parts", tuple(self.parts))

    def as_python(self) -> Union[int, float, Fraction, complex, str]:
        """Convert to the closest Python value.

        Returns
        -------
        int, float, Fraction, complex or str
            ``Fraction`` for rationals, ``complex`` for both complex kinds,
            ``float`` for e-notation and reals, ``str`` for constants

        """
        if self.kind is NumberKind.RATIONAL:
            return Fraction(int(self.parts[0]), int(self.parts[1]))
        if self.kind is NumberKind.COMPLEX_CARTESIAN:
            return complex(float(self.parts[0]), float(self.parts[1]))
        if self.kind is NumberKind.COMPLEX_POLAR:
            return cmath.rect(float(self.parts[0]), float(self.parts[1]))
        if self.kind is NumberKind.E_NOTATION:
            return float(self.parts[0]) * 10.0 ** int(self.parts[1])
        return self.parts[0]


class Node(ABC):
    """Base class for all AST nodes.

    All nodes support the visitor pattern for traversal.
    """

    @abstractmethod
    def accept(self, visitor: Any) -> Any:
        """Accept a visitor for processing this node.

        Parameters
        ----------
        visitor : Any
            A visitor object with visit_* methods

        Returns
        -------
        Any
            Result from the visitor's processing

        """
        pass


# ============================================================================
# Container Nodes
# ============================================================================


@dataclass(frozen=True)
class Root(Node):
    """Root node holding the top-level expressions of a ``<math>`` element.

    MathML permits several content expressions directly under ``<math>``,
    so the root keeps an ordered sequence.

    Parameters
    ----------
    children : tuple of Node
        Top-level expression nodes in document order

    """

    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_root(self)``."""
        return visitor.visit_root(self)


@dataclass(frozen=True)
class Apply(Node):
    """Application of an operator to operands.

    By MathML convention the first child denotes the operator and the
    remaining children are its operands. Arity is not checked.

    Parameters
    ----------
    children : tuple of Node
        Operator followed by operands, in document order

    """

    children: tuple[Node, ...] = ()

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)

    @property
    def operator(self) -> Optional[Node]:
        """The operator node (first child), or None for an empty apply."""
        return self.children[0] if self.children else None

    @property
    def operands(self) -> tuple[Node, ...]:
        """The operand nodes (all children after the first)."""
        return self.children[1:]

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_apply(self)``."""
        return visitor.visit_apply(self)


# ============================================================================
# Token and Leaf Nodes
# ============================================================================


@dataclass(frozen=True)
class Op(Node):
    """A content token element naming an operator, function or constant.

    Parameters
    ----------
    operator : BuiltinOp or Symbol
        The built-in operator, or a Symbol for a user-defined one
    attributes : tuple of (str, str)
        Attributes of the token element in source order (e.g. definitionURL)

    """

    operator: Operator
    attributes: Attributes = ()

    def __post_init__(self) -> None:
        if not isinstance(self.operator, (BuiltinOp, Symbol)):
            raise TypeError(f"Op operator must be BuiltinOp or Symbol, got {type(self.operator).__name__}")
        _freeze_attributes(self, self.attributes)

    @property
    def name(self) -> str:
        """Tag name of the operator."""
        return self.operator.value if isinstance(self.operator, BuiltinOp) else self.operator.name

    @property
    def is_builtin(self) -> bool:
        """True if the operator is part of the built-in vocabulary."""
        return isinstance(self.operator, BuiltinOp)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_op(self)``."""
        return visitor.visit_op(self)


@dataclass(frozen=True)
class Ci(Node):
    """Content identifier: a variable or symbol citation.

    Parameters
    ----------
    children : tuple of Node
        Leaf content, normally a single Text run
    attributes : tuple of (str, str)
        Attributes of the ``<ci>`` element in source order (e.g. type)

    """

    children: tuple[Node, ...] = ()
    attributes: Attributes = ()

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)
        _freeze_attributes(self, self.attributes)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_ci(self)``."""
        return visitor.visit_ci(self)


@dataclass(frozen=True)
class Cn(Node):
    """Content number literal.

    The ``type`` and ``base`` attributes describe how the literal text is to
    be read; they are kept as metadata rather than producing separate node
    types.

    Parameters
    ----------
    children : tuple of Node
        Text runs, separated by Sep nodes for compound literals
    num_type : str or None
        Value of the ``type`` attribute; None means the MathML default ("real")
    base : int
        Value of the ``base`` attribute
    definition_url : str or None
        Value of the ``definitionURL`` attribute
    encoding : str or None
        Value of the ``encoding`` attribute
    attributes : tuple of (str, str)
        Remaining attributes in source order
    value : NumberValue or None
        Interpreted numeric value, when number interpretation is enabled

    """

    children: tuple[Node, ...] = ()
    num_type: Optional[str] = None
    base: int = DEFAULT_NUMBER_BASE
    definition_url: Optional[str] = None
    encoding: Optional[str] = None
    attributes: Attributes = ()
    value: Optional[NumberValue] = field(default=None)

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)
        _freeze_attributes(self, self.attributes)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_cn(self)``."""
        return visitor.visit_cn(self)


@dataclass(frozen=True)
class Csymbol(Node):
    """Symbol whose meaning is given by an external definition.

    Parameters
    ----------
    children : tuple of Node
        Leaf content naming the symbol
    definition_url : str or None
        Value of the ``definitionURL`` attribute
    encoding : str or None
        Value of the ``encoding`` attribute
    attributes : tuple of (str, str)
        Remaining attributes in source order

    """

    children: tuple[Node, ...] = ()
    definition_url: Optional[str] = None
    encoding: Optional[str] = None
    attributes: Attributes = ()

    def __post_init__(self) -> None:
        _freeze_children(self, self.children)
        _freeze_attributes(self, self.attributes)

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_csymbol(self)``."""
        return visitor.visit_csymbol(self)


@dataclass(frozen=True)
class Sep(Node):
    """Separator between the parts of a compound ``<cn>`` literal."""

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_sep(self)``."""
        return visitor.visit_sep(self)


@dataclass(frozen=True)
class Text(Node):
    """Normalized text content of a token element.

    Parameters
    ----------
    content : str
        Text with surrounding whitespace trimmed and internal runs collapsed

    """

    content: str

    def accept(self, visitor: Any) -> Any:
        """Return ``visitor.visit_text(self)``."""
        return visitor.visit_text(self)


LeafContainer = Union[Ci, Cn, Csymbol]

ALL_NODE_TYPES: tuple[type[Node], ...] = (Root, Apply, Op, Ci, Cn, Csymbol, Sep, Text)


def get_node_children(node: Node) -> tuple[Node, ...]:
    """Return the child nodes of ``node`` (empty for token and text nodes).

    Parameters
    ----------
    node : Node
        Any AST node

    Returns
    -------
    tuple of Node
        The node's children in document order

    """
    return getattr(node, "children", ())
