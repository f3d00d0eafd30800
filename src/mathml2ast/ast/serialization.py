#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/ast/serialization.py
"""JSON serialization and deserialization for AST nodes.

This module converts AST trees to and from plain dictionaries and JSON, so
parsed formulas can be cached, indexed or handed to tools in other languages.
It does not produce MathML.

Every node is written as an object with a ``node_type`` discriminator::

    {"schema_version": 1, "node_type": "Root", "children": [
        {"node_type": "Apply", "children": [
            {"node_type": "Op", "operator": "plus", "builtin": true, "attributes": []},
            {"node_type": "Ci", "children": [{"node_type": "Text", "content": "x"}], "attributes": []}
        ]}
    ]}

Examples
--------
    >>> from mathml2ast.ast import Ci, Text
    >>> from mathml2ast.ast.serialization import ast_to_json, json_to_ast
    >>> json_to_ast(ast_to_json(Ci([Text("x")]))) == Ci([Text("x")])
    True

"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

from mathml2ast.ast.nodes import (
    Apply,
    Ci,
    Cn,
    Csymbol,
    Node,
    NumberKind,
    NumberValue,
    Op,
    Root,
    Sep,
    Symbol,
    Text,
)
from mathml2ast.constants import AST_SCHEMA_VERSION, DEFAULT_NUMBER_BASE
from mathml2ast.operators import lookup_operator

logger = logging.getLogger(__name__)


def _serialize_attributes(node: Op | Ci | Cn | Csymbol) -> list[list[str]]:
    return [[name, value] for name, value in node.attributes]


def _serialize_number_value(value: NumberValue | None) -> dict[str, Any] | None:
    if value is None:
        return None
    return {"kind": value.kind.value, "parts": list(value.parts)}


def _serialize_op(node: Op) -> dict[str, Any]:
    return {
        "node_type": "Op",
        "operator": node.name,
        "builtin": node.is_builtin,
        "attributes": _serialize_attributes(node),
    }


def _serialize_ci(node: Ci) -> dict[str, Any]:
    return {"node_type": "Ci", "children": [], "attributes": _serialize_attributes(node)}


def _serialize_cn(node: Cn) -> dict[str, Any]:
    return {
        "node_type": "Cn",
        "children": [],
        "num_type": node.num_type,
        "base": node.base,
        "definition_url": node.definition_url,
        "encoding": node.encoding,
        "attributes": _serialize_attributes(node),
        "value": _serialize_number_value(node.value),
    }


def _serialize_csymbol(node: Csymbol) -> dict[str, Any]:
    return {
        "node_type": "Csymbol",
        "children": [],
        "definition_url": node.definition_url,
        "encoding": node.encoding,
        "attributes": _serialize_attributes(node),
    }


_SERIALIZATION_DISPATCH: dict[type, Callable[[Any], dict[str, Any]]] = {
    Root: lambda n: {"node_type": "Root", "children": []},
    Apply: lambda n: {"node_type": "Apply", "children": []},
    Op: _serialize_op,
    Ci: _serialize_ci,
    Cn: _serialize_cn,
    Csymbol: _serialize_csymbol,
    Sep: lambda n: {"node_type": "Sep"},
    Text: lambda n: {"node_type": "Text", "content": n.content},
}


def ast_to_dict(node: Node) -> dict[str, Any]:
    """Convert an AST node to a dictionary representation.

    Parameters
    ----------
    node : Node
        The AST node to convert

    Returns
    -------
    dict
        Dictionary representation of the node

    Raises
    ------
    ValueError
        If ``node`` is not one of the AST node types

    Notes
    -----
    The tree is walked with an explicit stack, so the nesting depth of
    ``node`` is not limited by the Python recursion limit.

    Examples
    --------
    >>> from mathml2ast.ast import Text
    >>> ast_to_dict(Text("x"))
    {'node_type': 'Text', 'content': 'x'}

    """
    result = _serialize_node(node)
    stack: list[tuple[Node, dict[str, Any]]] = [(node, result)]
    while stack:
        current, data = stack.pop()
        if "children" not in data:
            continue
        for child in current.children:
            child_data = _serialize_node(child)
            data["children"].append(child_data)
            stack.append((child, child_data))
    return result


def _serialize_node(node: Node) -> dict[str, Any]:
    # Serializers emit an empty "children" list; ast_to_dict fills it in
    serializer = _SERIALIZATION_DISPATCH.get(type(node))
    if serializer:
        return serializer(node)

    raise ValueError(f"Unknown node type for serialization: {type(node).__name__}")


# Helper functions for deserialization


def _deserialize_children(data: dict[str, Any], strict_mode: bool) -> list[Node]:
    children: list[Node] = []
    for child_data in data.get("children", []):
        node_type = child_data.get("node_type")
        if node_type not in _DESERIALIZATION_DISPATCH and not strict_mode:
            logger.warning(f"Unknown node type '{node_type}', skipping")
            continue
        children.append(dict_to_ast(child_data, strict_mode=strict_mode))
    return children


def _deserialize_attributes(data: dict[str, Any]) -> tuple[tuple[str, str], ...]:
    return tuple((str(name), str(value)) for name, value in data.get("attributes", []))


def _deserialize_number_value(data: dict[str, Any] | None) -> NumberValue | None:
    if data is None:
        return None
    return NumberValue(NumberKind(data["kind"]), tuple(data["parts"]))


def _deserialize_op(data: dict[str, Any], strict_mode: bool) -> Op:
    name = data["operator"]
    builtin = lookup_operator(name) if data.get("builtin", True) else None
    if builtin is None and data.get("builtin", False):
        raise ValueError(f"Unknown built-in operator: {name}")
    return Op(builtin if builtin is not None else Symbol(name), attributes=_deserialize_attributes(data))


def _deserialize_cn(data: dict[str, Any], strict_mode: bool) -> Cn:
    return Cn(
        children=_deserialize_children(data, strict_mode),
        num_type=data.get("num_type"),
        base=int(data.get("base", DEFAULT_NUMBER_BASE)),
        definition_url=data.get("definition_url"),
        encoding=data.get("encoding"),
        attributes=_deserialize_attributes(data),
        value=_deserialize_number_value(data.get("value")),
    )


def _deserialize_csymbol(data: dict[str, Any], strict_mode: bool) -> Csymbol:
    return Csymbol(
        children=_deserialize_children(data, strict_mode),
        definition_url=data.get("definition_url"),
        encoding=data.get("encoding"),
        attributes=_deserialize_attributes(data),
    )


# Dispatch table mapping node type strings to deserializer functions
_DESERIALIZATION_DISPATCH: dict[str, Callable[[dict[str, Any], bool], Node]] = {
    "Root": lambda d, s: Root(_deserialize_children(d, s)),
    "Apply": lambda d, s: Apply(_deserialize_children(d, s)),
    "Op": _deserialize_op,
    "Ci": lambda d, s: Ci(_deserialize_children(d, s), attributes=_deserialize_attributes(d)),
    "Cn": _deserialize_cn,
    "Csymbol": _deserialize_csymbol,
    "Sep": lambda d, s: Sep(),
    "Text": lambda d, s: Text(str(d["content"])),
}


def dict_to_ast(data: dict[str, Any], strict_mode: bool = True) -> Node:
    """Convert a dictionary representation back to an AST node.

    Parameters
    ----------
    data : dict
        Dictionary representation of a node
    strict_mode : bool, default True
        If True, raise ValueError on unknown node types anywhere in the tree.
        If False, unknown child nodes are skipped with a warning.

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the dictionary has no ``node_type``, or the top-level node type is
        unknown, or an unknown child is found in strict mode

    """
    node_type = data.get("node_type")
    if not node_type:
        raise ValueError("Dictionary must contain 'node_type' field")

    deserializer = _DESERIALIZATION_DISPATCH.get(node_type)
    if not deserializer:
        raise ValueError(f"Unknown node type: {node_type}")

    try:
        return deserializer(data, strict_mode)
    except KeyError as e:
        raise ValueError(f"{node_type} is missing required field {e}") from e


def ast_to_json(node: Node, indent: int | None = None) -> str:
    """Serialize an AST node to a JSON string with schema versioning.

    Parameters
    ----------
    node : Node
        The AST node to serialize
    indent : int or None, default = None
        Number of spaces for indentation (None for compact format)

    Returns
    -------
    str
        JSON string with a top-level ``schema_version`` field

    """
    node_dict = ast_to_dict(node)
    versioned_dict = {"schema_version": AST_SCHEMA_VERSION, **node_dict}
    return json.dumps(versioned_dict, indent=indent, ensure_ascii=False)


def json_to_ast(json_str: str, validate_schema: bool = True, strict_mode: bool = True) -> Node:
    """Deserialize a JSON string to an AST node.

    JSON without a ``schema_version`` field is read as version 1.

    Parameters
    ----------
    json_str : str
        JSON string representation
    validate_schema : bool, default True
        If True, raise ValueError on an unsupported schema version.
        If False, log a warning and attempt to parse anyway.
    strict_mode : bool, default True
        Passed through to dict_to_ast

    Returns
    -------
    Node
        Reconstructed AST node

    Raises
    ------
    ValueError
        If the JSON does not describe a valid tree
    json.JSONDecodeError
        If the JSON string is malformed

    """
    data = json.loads(json_str)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

    schema_version = data.pop("schema_version", AST_SCHEMA_VERSION)
    if schema_version != AST_SCHEMA_VERSION:
        if validate_schema:
            raise ValueError(
                f"Unsupported schema version: {schema_version}. "
                f"This version of mathml2ast supports schema version {AST_SCHEMA_VERSION} only."
            )
        logger.warning(
            f"Schema version {schema_version} differs from supported version {AST_SCHEMA_VERSION}. "
            f"Attempting to parse anyway (schema validation disabled)."
        )

    return dict_to_ast(data, strict_mode=strict_mode)


__all__ = [
    "ast_to_dict",
    "dict_to_ast",
    "ast_to_json",
    "json_to_ast",
]
