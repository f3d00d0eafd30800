#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for AST node classes."""

import dataclasses

import pytest

from mathml2ast.ast import (
    ALL_NODE_TYPES,
    Apply,
    Ci,
    Cn,
    Csymbol,
    Op,
    Root,
    Sep,
    Symbol,
    Text,
    get_node_children,
)
from mathml2ast.operators import BuiltinOp


@pytest.mark.unit
class TestNodeConstruction:
    """Test node construction and immutability."""

    def test_children_frozen_to_tuple(self):
        root = Root([Ci([Text("x")])])

        assert isinstance(root.children, tuple)
        assert isinstance(root.children[0].children, tuple)

    def test_attribute_mapping_accepted(self):
        ci = Ci([Text("v")], attributes={"type": "vector"})

        assert ci.attributes == (("type", "vector"),)

    def test_nodes_are_frozen(self):
        text = Text("x")

        with pytest.raises(dataclasses.FrozenInstanceError):
            text.content = "y"

    def test_nodes_are_hashable(self):
        expr = Apply([Op(BuiltinOp.PLUS), Ci([Text("x")]), Cn([Text("1")])])

        assert len({expr, Apply((Op(BuiltinOp.PLUS), Ci((Text("x"),)), Cn((Text("1"),))))}) == 1

    def test_structural_equality(self):
        assert Ci([Text("x")]) == Ci((Text("x"),))
        assert Ci([Text("x")]) != Ci([Text("y")])
        assert Sep() == Sep()

    def test_cn_defaults(self):
        cn = Cn([Text("1")])

        assert cn.num_type is None
        assert cn.base == 10
        assert cn.definition_url is None
        assert cn.value is None

    def test_csymbol_defaults(self):
        symbol = Csymbol([Text("t")])

        assert symbol.definition_url is None
        assert symbol.encoding is None


@pytest.mark.unit
class TestOp:
    """Test the Op node."""

    def test_builtin(self):
        op = Op(BuiltinOp.SIN)

        assert op.name == "sin"
        assert op.is_builtin

    def test_symbol(self):
        op = Op(Symbol("myop"))

        assert op.name == "myop"
        assert not op.is_builtin
        assert str(op.operator) == "myop"

    def test_invalid_operator_type(self):
        with pytest.raises(TypeError):
            Op("plus")


@pytest.mark.unit
class TestApply:
    """Test the Apply node."""

    def test_operator_and_operands(self):
        apply = Apply([Op(BuiltinOp.MINUS), Ci([Text("a")]), Ci([Text("b")])])

        assert apply.operator == Op(BuiltinOp.MINUS)
        assert apply.operands == (Ci([Text("a")]), Ci([Text("b")]))

    def test_empty_apply_accessors(self):
        apply = Apply()

        assert apply.operator is None
        assert apply.operands == ()


@pytest.mark.unit
class TestVisitorDispatch:
    """Test that accept() dispatches to the matching visit method."""

    @pytest.mark.parametrize(
        "node,method",
        [
            (Root(), "visit_root"),
            (Apply(), "visit_apply"),
            (Op(BuiltinOp.PLUS), "visit_op"),
            (Ci(), "visit_ci"),
            (Cn(), "visit_cn"),
            (Csymbol(), "visit_csymbol"),
            (Sep(), "visit_sep"),
            (Text("x"), "visit_text"),
        ],
    )
    def test_accept(self, node, method):
        class Recorder:
            def __getattr__(self, name):
                return lambda visited: (name, visited)

        assert node.accept(Recorder()) == (method, node)

    def test_all_node_types_listed(self):
        assert set(ALL_NODE_TYPES) == {Root, Apply, Op, Ci, Cn, Csymbol, Sep, Text}


@pytest.mark.unit
def test_get_node_children():
    ci = Ci([Text("x")])

    assert get_node_children(Root([ci])) == (ci,)
    assert get_node_children(Text("x")) == ()
    assert get_node_children(Op(BuiltinOp.PLUS)) == ()
