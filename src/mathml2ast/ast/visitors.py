#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/ast/visitors.py
"""Visitor pattern implementation for AST traversal.

This module provides the visitor base class for traversing and processing
Content Markup AST nodes, and a validating visitor that re-checks the
structural invariants of a tree. Translated trees satisfy them by
construction; the validator is meant for trees assembled by hand or
deserialized from JSON.

"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Any

from mathml2ast.ast.nodes import Apply, Ci, Cn, Csymbol, Node, Op, Root, Sep, Text
from mathml2ast.constants import MAX_NUMBER_BASE, MIN_NUMBER_BASE

_WHITESPACE_RUN = re.compile(r"\s{2,}|[^\S ]")


class NodeVisitor(ABC):
    """Abstract base class for AST node visitors.

    Subclasses implement one ``visit_*`` method per node type. Visitors that
    only care about some node types can subclass GenericVisitor instead.

    Examples
    --------
    Collect operator names:

        >>> class OperatorCollector(GenericVisitor):
        ...     def __init__(self):
        ...         self.names = []
        ...
        ...     def visit_op(self, node):
        ...         self.names.append(node.name)
        ...
        >>> collector = OperatorCollector()
        >>> root.accept(collector)
        >>> collector.names
        ['plus']

    """

    @abstractmethod
    def visit_root(self, node: Root) -> Any:
        """Visit a Root node."""
        pass

    @abstractmethod
    def visit_apply(self, node: Apply) -> Any:
        """Visit an Apply node."""
        pass

    @abstractmethod
    def visit_op(self, node: Op) -> Any:
        """Visit an Op node."""
        pass

    @abstractmethod
    def visit_ci(self, node: Ci) -> Any:
        """Visit a Ci node."""
        pass

    @abstractmethod
    def visit_cn(self, node: Cn) -> Any:
        """Visit a Cn node."""
        pass

    @abstractmethod
    def visit_csymbol(self, node: Csymbol) -> Any:
        """Visit a Csymbol node."""
        pass

    @abstractmethod
    def visit_sep(self, node: Sep) -> Any:
        """Visit a Sep node."""
        pass

    @abstractmethod
    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass


class GenericVisitor(NodeVisitor):
    """Visitor that walks every node, dispatching to ``generic_visit`` by default.

    Container visits recurse into children; leaf visits do nothing. Override
    individual ``visit_*`` methods to act on specific node types.
    """

    def generic_visit(self, node: Node) -> None:
        """Visit the children of ``node``."""
        for child in getattr(node, "children", ()):
            child.accept(self)

    def visit_root(self, node: Root) -> Any:
        """Visit a Root node."""
        self.generic_visit(node)

    def visit_apply(self, node: Apply) -> Any:
        """Visit an Apply node."""
        self.generic_visit(node)

    def visit_op(self, node: Op) -> Any:
        """Visit an Op node."""
        pass

    def visit_ci(self, node: Ci) -> Any:
        """Visit a Ci node."""
        self.generic_visit(node)

    def visit_cn(self, node: Cn) -> Any:
        """Visit a Cn node."""
        self.generic_visit(node)

    def visit_csymbol(self, node: Csymbol) -> Any:
        """Visit a Csymbol node."""
        self.generic_visit(node)

    def visit_sep(self, node: Sep) -> Any:
        """Visit a Sep node."""
        pass

    def visit_text(self, node: Text) -> Any:
        """Visit a Text node."""
        pass


class ValidationVisitor(NodeVisitor):
    """Visitor that validates AST structure.

    This visitor checks the invariants the translator guarantees:
    - Root appears only at the top of the tree
    - Apply nodes are non-empty
    - Sep appears only directly inside Cn
    - Text appears only inside Ci, Cn and Csymbol
    - Text is trimmed and its internal whitespace collapsed
    - Cn bases are within 2..36

    Parameters
    ----------
    strict : bool, default = True
        Whether to raise ValueError on the first validation failure. When
        False, failures are collected in ``errors``.

    Examples
    --------
        >>> validator = ValidationVisitor(strict=False)
        >>> root.accept(validator)
        >>> validator.errors
        []

    """

    def __init__(self, strict: bool = True):
        """Initialize the validator."""
        self.strict = strict
        self.errors: list[str] = []
        self._depth = 0

    def _add_error(self, message: str) -> None:
        self.errors.append(message)
        if self.strict:
            raise ValueError(message)

    def _visit_children(self, node: Node, context: str, allow_sep: bool = False, allow_text: bool = True) -> None:
        self._depth += 1
        try:
            for i, child in enumerate(getattr(node, "children", ())):
                if not isinstance(child, Node):
                    self._add_error(f"{context} child {i} is not a Node: {type(child).__name__}")
                    continue
                if isinstance(child, Sep) and not allow_sep:
                    self._add_error(f"{context} child {i} is a Sep; Sep is only valid inside Cn")
                if isinstance(child, Text) and not allow_text:
                    self._add_error(f"{context} child {i} is bare Text; Text is only valid inside Ci, Cn or Csymbol")
                child.accept(self)
        finally:
            self._depth -= 1

    def visit_root(self, node: Root) -> None:
        """Validate a Root node."""
        if self._depth > 0:
            self._add_error("Root can only appear at the top of the tree")
        self._visit_children(node, "Root", allow_text=False)

    def visit_apply(self, node: Apply) -> None:
        """Validate an Apply node."""
        if not node.children:
            self._add_error("Apply must have at least one child")
        self._visit_children(node, "Apply", allow_text=False)

    def visit_op(self, node: Op) -> None:
        """Validate an Op node."""
        if not node.name:
            self._add_error("Op must have a non-empty name")

    def visit_ci(self, node: Ci) -> None:
        """Validate a Ci node."""
        self._visit_children(node, "Ci")

    def visit_cn(self, node: Cn) -> None:
        """Validate a Cn node."""
        if not MIN_NUMBER_BASE <= node.base <= MAX_NUMBER_BASE:
            self._add_error(f"Cn base must be between {MIN_NUMBER_BASE} and {MAX_NUMBER_BASE}, got {node.base}")
        self._visit_children(node, "Cn", allow_sep=True)

    def visit_csymbol(self, node: Csymbol) -> None:
        """Validate a Csymbol node."""
        self._visit_children(node, "Csymbol")

    def visit_sep(self, node: Sep) -> None:
        """Validate a Sep node."""
        pass

    def visit_text(self, node: Text) -> None:
        """Validate a Text node."""
        if self._depth == 0:
            self._add_error("Text cannot be the root of a tree")
        if node.content != node.content.strip():
            self._add_error(f"Text has surrounding whitespace: {node.content!r}")
        elif _WHITESPACE_RUN.search(node.content):
            self._add_error(f"Text has uncollapsed whitespace: {node.content!r}")
