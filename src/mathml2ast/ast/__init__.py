#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/ast/__init__.py
"""Abstract Syntax Tree (AST) module for MathML Content Markup.

The module consists of several components:

- nodes: AST node classes and the value types they carry
- visitors: Visitor pattern implementation for AST traversal and validation
- serialization: JSON serialization and deserialization of AST structures
- utils: Traversal and text extraction helpers

Examples
--------
Build a tree by hand:

    >>> from mathml2ast.ast import Apply, BuiltinOp, Ci, Op, Root, Text
    >>> root = Root([Apply([Op(BuiltinOp.PLUS), Ci([Text("x")]), Ci([Text("y")])])])
    >>> root.children[0].operator
    Op(operator=<BuiltinOp.PLUS: 'plus'>, attributes=())

"""

from __future__ import annotations

from mathml2ast.ast.nodes import (
    ALL_NODE_TYPES,
    Apply,
    Ci,
    Cn,
    Csymbol,
    LeafContainer,
    Node,
    NumberKind,
    NumberValue,
    Op,
    Operator,
    Root,
    Sep,
    Symbol,
    Text,
    get_node_children,
)
from mathml2ast.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from mathml2ast.ast.utils import collect_identifiers, collect_operators, extract_text, iter_nodes, tree_depth
from mathml2ast.ast.visitors import GenericVisitor, NodeVisitor, ValidationVisitor
from mathml2ast.operators import BuiltinOp

__all__ = [
    # Nodes
    "ALL_NODE_TYPES",
    "Apply",
    "Ci",
    "Cn",
    "Csymbol",
    "LeafContainer",
    "Node",
    "Op",
    "Root",
    "Sep",
    "Text",
    # Values
    "BuiltinOp",
    "NumberKind",
    "NumberValue",
    "Operator",
    "Symbol",
    # Visitors
    "GenericVisitor",
    "NodeVisitor",
    "ValidationVisitor",
    # Serialization
    "ast_to_dict",
    "ast_to_json",
    "dict_to_ast",
    "json_to_ast",
    # Utilities
    "collect_identifiers",
    "collect_operators",
    "extract_text",
    "get_node_children",
    "iter_nodes",
    "tree_depth",
]
