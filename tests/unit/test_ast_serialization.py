#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for AST serialization and deserialization."""

import json

import pytest

from mathml2ast.ast import Apply, Ci, Cn, Csymbol, NumberKind, NumberValue, Op, Root, Sep, Symbol, Text
from mathml2ast.ast.serialization import ast_to_dict, ast_to_json, dict_to_ast, json_to_ast
from mathml2ast.operators import BuiltinOp


@pytest.mark.unit
class TestAstToDictConversion:
    """Test AST to dictionary conversion."""

    def test_text_node_to_dict(self):
        assert ast_to_dict(Text("x")) == {"node_type": "Text", "content": "x"}

    def test_builtin_op_to_dict(self):
        result = ast_to_dict(Op(BuiltinOp.PLUS))

        assert result == {"node_type": "Op", "operator": "plus", "builtin": True, "attributes": []}

    def test_symbol_op_to_dict(self):
        result = ast_to_dict(Op(Symbol("myop"), attributes=(("definitionURL", "http://example.com"),)))

        assert result["operator"] == "myop"
        assert result["builtin"] is False
        assert result["attributes"] == [["definitionURL", "http://example.com"]]

    def test_cn_to_dict(self):
        cn = Cn(
            [Text("22"), Sep(), Text("7")],
            num_type="rational",
            value=NumberValue(NumberKind.RATIONAL, (22, 7)),
        )
        result = ast_to_dict(cn)

        assert result["node_type"] == "Cn"
        assert result["num_type"] == "rational"
        assert result["base"] == 10
        assert [child["node_type"] for child in result["children"]] == ["Text", "Sep", "Text"]
        assert result["value"] == {"kind": "rational", "parts": [22, 7]}

    def test_root_to_dict(self):
        result = ast_to_dict(Root([Apply([Op(BuiltinOp.PLUS), Ci([Text("x")])])]))

        assert result["node_type"] == "Root"
        assert result["children"][0]["node_type"] == "Apply"
        assert result["children"][0]["children"][1]["children"][0]["content"] == "x"

    def test_children_keep_document_order(self):
        result = ast_to_dict(Apply([Op(BuiltinOp.MINUS), Ci([Text("a")]), Ci([Text("b")]), Ci([Text("c")])]))

        names = [child["children"][0]["content"] for child in result["children"][1:]]
        assert names == ["a", "b", "c"]

    def test_deep_tree_to_dict(self):
        depth = 5000
        node = Ci([Text("x")])
        for _ in range(depth):
            node = Apply([Op(BuiltinOp.PLUS), node])

        result = ast_to_dict(node)

        levels = 0
        while result["node_type"] == "Apply":
            result = result["children"][1]
            levels += 1
        assert levels == depth
        assert result == {"node_type": "Ci", "children": [{"node_type": "Text", "content": "x"}], "attributes": []}

    def test_unknown_node_type(self):
        with pytest.raises(ValueError, match="Unknown node type"):
            ast_to_dict("not a node")


@pytest.mark.unit
class TestDictToAstConversion:
    """Test dictionary to AST conversion."""

    def test_builtin_op(self):
        assert dict_to_ast({"node_type": "Op", "operator": "sin", "builtin": True}) == Op(BuiltinOp.SIN)

    def test_symbol_op(self):
        assert dict_to_ast({"node_type": "Op", "operator": "myop", "builtin": False}) == Op(Symbol("myop"))

    def test_unknown_builtin_operator(self):
        with pytest.raises(ValueError, match="Unknown built-in operator"):
            dict_to_ast({"node_type": "Op", "operator": "frobnicate", "builtin": True})

    def test_missing_node_type(self):
        with pytest.raises(ValueError, match="node_type"):
            dict_to_ast({"content": "x"})

    def test_unknown_node_type(self):
        with pytest.raises(ValueError, match="Unknown node type"):
            dict_to_ast({"node_type": "Matrix"})

    def test_missing_required_field(self):
        with pytest.raises(ValueError, match="missing required field"):
            dict_to_ast({"node_type": "Text"})

    def test_unknown_child_strict(self):
        data = {"node_type": "Root", "children": [{"node_type": "Matrix"}]}

        with pytest.raises(ValueError):
            dict_to_ast(data)

    def test_unknown_child_lenient(self):
        data = {"node_type": "Root", "children": [{"node_type": "Matrix"}, {"node_type": "Sep"}]}

        assert dict_to_ast(data, strict_mode=False) == Root([Sep()])


@pytest.mark.unit
class TestJsonSerialization:
    """Test JSON serialization with schema versioning."""

    def test_schema_version_included(self):
        data = json.loads(ast_to_json(Root()))

        assert data["schema_version"] == 1
        assert data["node_type"] == "Root"

    def test_non_ascii_preserved(self):
        assert "α" in ast_to_json(Ci([Text("α")]))

    def test_indent(self):
        assert "\n" in ast_to_json(Root([Sep()]), indent=2)
        assert "\n" not in ast_to_json(Root([Sep()]))

    def test_full_tree_round_trip(self):
        root = Root(
            [
                Apply(
                    [
                        Op(BuiltinOp.TIMES),
                        Csymbol([Text("t")], definition_url="http://example.com/time", encoding="text"),
                        Cn(
                            [Text("1.5"), Sep(), Text("-3")],
                            num_type="e-notation",
                            attributes=(("id", "k"),),
                            value=NumberValue(NumberKind.E_NOTATION, (1.5, -3)),
                        ),
                        Cn([Text("FF")], num_type="integer", base=16),
                        Ci([Text("x")], attributes=(("type", "real"),)),
                    ]
                ),
                Apply([Op(Symbol("myop")), Ci()]),
            ]
        )

        assert json_to_ast(ast_to_json(root, indent=2)) == root

    def test_missing_schema_version_read_as_current(self):
        assert json_to_ast('{"node_type": "Text", "content": "x"}') == Text("x")

    def test_unsupported_schema_version(self):
        with pytest.raises(ValueError, match="Unsupported schema version"):
            json_to_ast('{"schema_version": 99, "node_type": "Sep"}')

    def test_unsupported_schema_version_without_validation(self):
        assert json_to_ast('{"schema_version": 99, "node_type": "Sep"}', validate_schema=False) == Sep()

    def test_non_object_json(self):
        with pytest.raises(ValueError, match="Expected a JSON object"):
            json_to_ast("[1, 2]")

    def test_malformed_json(self):
        with pytest.raises(json.JSONDecodeError):
            json_to_ast("{not json")
