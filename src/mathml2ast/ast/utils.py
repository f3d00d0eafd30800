#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/ast/utils.py
"""Utility functions for working with AST nodes.

Functions
---------
iter_nodes : Iterate over a tree in pre-order
extract_text : Extract plain text from a node or list of nodes
tree_depth : Nesting depth of a tree
collect_identifiers : Names cited by Ci nodes, in first-appearance order
collect_operators : Operator names used by Op nodes, in first-appearance order

All traversals are iterative, so they work on trees of any depth.

Examples
--------
    >>> from mathml2ast import parse_mathml
    >>> from mathml2ast.ast.utils import collect_identifiers
    >>> root = parse_mathml(
    ...     '<math xmlns="http://www.w3.org/1998/Math/MathML">'
    ...     '<apply><plus/><ci>x</ci><ci>y</ci><ci>x</ci></apply></math>'
    ... )
    >>> collect_identifiers(root)
    ['x', 'y']

"""

from __future__ import annotations

from typing import Iterator, Union

from mathml2ast.ast.nodes import Ci, Node, Op, Text, get_node_children


def iter_nodes(node: Node) -> Iterator[Node]:
    """Iterate over ``node`` and all its descendants in pre-order.

    Parameters
    ----------
    node : Node
        Root of the traversal

    Yields
    ------
    Node
        Each node, parents before children, siblings in document order

    """
    stack: list[Node] = [node]
    while stack:
        current = stack.pop()
        yield current
        stack.extend(reversed(get_node_children(current)))


def extract_text(node_or_nodes: Union[Node, list[Node]], joiner: str = " ") -> str:
    """Extract plain text from a node or list of nodes.

    Parameters
    ----------
    node_or_nodes : Node or list of Node
        A single node or list of nodes to extract text from
    joiner : str, default = " "
        String used to join the text of separate Text nodes

    Returns
    -------
    str
        The joined content of all Text nodes, in document order

    """
    nodes = node_or_nodes if isinstance(node_or_nodes, list) else [node_or_nodes]
    parts = [n.content for root in nodes for n in iter_nodes(root) if isinstance(n, Text) and n.content]
    return joiner.join(parts)


def tree_depth(node: Node) -> int:
    """Return the nesting depth of ``node`` (a lone leaf has depth 1)."""
    deepest = 0
    stack: list[tuple[Node, int]] = [(node, 1)]
    while stack:
        current, depth = stack.pop()
        deepest = max(deepest, depth)
        stack.extend((child, depth + 1) for child in get_node_children(current))
    return deepest


def collect_identifiers(node: Node) -> list[str]:
    """Return the distinct identifier names cited by Ci nodes.

    Parameters
    ----------
    node : Node
        Tree to search

    Returns
    -------
    list of str
        Names in order of first appearance. A Ci whose content is not plain
        text contributes its joined text.

    """
    seen: dict[str, None] = {}
    for current in iter_nodes(node):
        if isinstance(current, Ci):
            name = extract_text(list(current.children), joiner="")
            if name:
                seen.setdefault(name, None)
    return list(seen)


def collect_operators(node: Node) -> list[str]:
    """Return the distinct operator names used by Op nodes, in first-appearance order."""
    seen: dict[str, None] = {}
    for current in iter_nodes(node):
        if isinstance(current, Op):
            seen.setdefault(current.name, None)
    return list(seen)
