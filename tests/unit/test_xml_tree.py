#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Tests for the XML tree adapter."""

import xml.etree.ElementTree as StdET

import pytest

from mathml2ast.constants import MATHML_NAMESPACE
from mathml2ast.exceptions import ParsingError, XmlSyntaxError
from mathml2ast.xml_tree import XmlElement, from_element, load_tree, sanitize_entities, split_qualified_name


@pytest.mark.unit
class TestLoadTree:
    """Test XML loading."""

    def test_namespace_resolved(self):
        tree = load_tree(f'<math xmlns="{MATHML_NAMESPACE}"><ci>x</ci></math>')

        assert tree.tag == "math"
        assert tree.namespace == MATHML_NAMESPACE
        # Default namespace is inherited by descendants
        assert tree.element_children[0].namespace == MATHML_NAMESPACE

    def test_no_namespace(self):
        tree = load_tree("<apply><plus/></apply>")

        assert tree.namespace is None
        assert tree.element_children[0].tag == "plus"

    def test_text_and_tail_flattened(self):
        tree = load_tree("<ci>a<plus/>b<minus/>c</ci>")

        assert tree.children[0] == "a"
        assert tree.children[1].tag == "plus"
        assert tree.children[2] == "b"
        assert tree.children[3].tag == "minus"
        assert tree.children[4] == "c"

    def test_attributes_in_source_order(self):
        tree = load_tree('<cn type="integer" base="16" id="n1">FF</cn>')

        assert tree.attributes == (("type", "integer"), ("base", "16"), ("id", "n1"))
        assert tree.get("base") == "16"
        assert tree.get("missing") is None
        assert tree.get("missing", "x") == "x"

    def test_bytes_input(self):
        tree = load_tree(b'<?xml version="1.0" encoding="UTF-8"?><ci>\xce\xb1</ci>')

        assert tree.text == "α"

    def test_bytes_entities_replaced(self):
        assert load_tree(b"<ci>&beta;</ci>").text == "β"

    def test_malformed_xml(self):
        with pytest.raises(XmlSyntaxError) as exc_info:
            load_tree("<math><ci>x</math>")

        assert exc_info.value.parsing_stage == "xml_parsing"
        assert exc_info.value.line == 1
        assert exc_info.value.column is not None

    def test_undeclared_entity_without_replacement(self):
        with pytest.raises(XmlSyntaxError):
            load_tree("<ci>&alpha;</ci>", replace_named_entities=False)

    def test_entity_declarations_rejected(self):
        document = '<!DOCTYPE ci [<!ENTITY x "boom">]><ci>&x;</ci>'

        with pytest.raises(ParsingError) as exc_info:
            load_tree(document, replace_named_entities=False)

        assert exc_info.value.parsing_stage == "xml_security"

    def test_comments_dropped(self):
        tree = load_tree("<apply><!-- operator --><plus/></apply>")

        assert [child.tag for child in tree.element_children] == ["plus"]

    def test_deep_document(self):
        depth = 3000
        tree = load_tree("<apply>" * depth + "</apply>" * depth)

        assert sum(1 for _ in tree.iter()) == depth


@pytest.mark.unit
class TestFromElement:
    """Test conversion from ElementTree elements."""

    def test_converts_stdlib_element(self):
        element = StdET.fromstring('<a x="1">t<b/>u</a>')

        assert from_element(element) == XmlElement(
            "a", None, (("x", "1"),), ("t", XmlElement("b"), "u")
        )

    def test_processing_instruction_dropped_tail_kept(self):
        root = StdET.Element("ci")
        root.text = "a"
        pi = StdET.ProcessingInstruction("target", "data")
        pi.tail = "b"
        root.append(pi)

        assert from_element(root).children == ("a", "b")


@pytest.mark.unit
class TestXmlElement:
    """Test the XmlElement adapter node."""

    def test_lists_frozen_to_tuples(self):
        element = XmlElement("ci", None, [("type", "real")], ["x"])

        assert element.attributes == (("type", "real"),)
        assert element.children == ("x",)

    def test_text_joins_runs(self):
        element = XmlElement("ci", children=("a", XmlElement("plus"), "b"))

        assert element.text == "ab"
        assert element.element_children == (XmlElement("plus"),)

    def test_iter_preorder(self):
        tree = load_tree("<a><b><c/></b><d/></a>")

        assert [e.tag for e in tree.iter()] == ["a", "b", "c", "d"]


@pytest.mark.unit
class TestSanitizeEntities:
    """Test named entity replacement."""

    @pytest.mark.parametrize(
        "source,expected",
        [
            ("&alpha;", "α"),
            ("&Omega;&pi;", "Ωπ"),
            ("&infin;", "∞"),
            ("&amp;&lt;&gt;&quot;&apos;", "&amp;&lt;&gt;&quot;&apos;"),
            ("&notarealentity;", "&notarealentity;"),
            ("&#945;", "&#945;"),
            ("plain text", "plain text"),
        ],
    )
    def test_replacement(self, source, expected):
        assert sanitize_entities(source) == expected

    def test_markup_significant_replacement_stays_escaped(self):
        # &lt; has the HTML5 alias &LT;, which must not become a literal "<"
        assert sanitize_entities("&LT;") == "&#60;"

    def test_result_parses(self):
        tree = load_tree("<ci>&LT;&alpha;</ci>")

        assert tree.text == "<α"

    def test_multi_character_replacement_escaped(self):
        # &nvlt; is "<" followed by a combining long vertical line overlay
        assert sanitize_entities("&nvlt;") == "&#60;\u20d2"

    def test_multi_character_replacement_parses(self):
        tree = load_tree("<ci>&nvlt;&nvgt;</ci>")

        assert tree.text == "<\u20d2>\u20d2"

    @pytest.mark.parametrize(
        "source",
        [
            "<ci><![CDATA[&alpha;]]></ci>",
            "<ci><!-- &alpha; --></ci>",
            "<?note &alpha;?><ci/>",
            "<![CDATA[a\n&pi;\nb]]>",
        ],
    )
    def test_cdata_comments_and_instructions_untouched(self, source):
        assert sanitize_entities(source) == source

    def test_references_around_cdata_replaced(self):
        source = "&alpha;<![CDATA[&beta;]]>&gamma;"

        assert sanitize_entities(source) == "α<![CDATA[&beta;]]>γ"

    def test_cdata_content_kept_literally(self):
        tree = load_tree("<ci><![CDATA[&alpha;]]></ci>")

        assert tree.text == "&alpha;"


@pytest.mark.unit
def test_split_qualified_name():
    assert split_qualified_name("{http://example.com}math") == ("http://example.com", "math")
    assert split_qualified_name("math") == (None, "math")
