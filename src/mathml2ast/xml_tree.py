#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/xml_tree.py
"""XML tree adapter used as input to the Content Markup translator.

The translator does not work on ElementTree objects directly. It consumes a
small immutable tree in which every element exposes its local tag name, its
resolved namespace URI, its attributes in source order and an ordered list of
children that are either nested elements or text runs. ElementTree's
``text``/``tail`` model is flattened into that list here.

XML is parsed with defusedxml, which rejects entity declarations and other
constructs used for entity-expansion attacks.

Examples
--------
    >>> from mathml2ast.xml_tree import load_tree
    >>> tree = load_tree('<math xmlns="http://www.w3.org/1998/Math/MathML"><ci> x </ci></math>')
    >>> tree.tag, tree.namespace
    ('math', 'http://www.w3.org/1998/Math/MathML')
    >>> tree.element_children[0].children
    (' x ',)

"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from html.entities import html5
from typing import Iterator, Optional, Union
from xml.etree.ElementTree import Element

import defusedxml
import defusedxml.ElementTree as ET

from mathml2ast.constants import XML_PREDEFINED_ENTITIES
from mathml2ast.exceptions import ParsingError, XmlSyntaxError

logger = logging.getLogger(__name__)

# CDATA sections, comments and processing instructions are matched so they pass through untouched
_ENTITY_REFERENCE = re.compile(r"<!\[CDATA\[.*?\]\]>|<!--.*?-->|<\?.*?\?>|&([A-Za-z][A-Za-z0-9]*);", re.DOTALL)
_MARKUP_CHARACTERS = frozenset("<>&\"'")


@dataclass(frozen=True)
class XmlElement:
    """An element of the adapter tree.

    Parameters
    ----------
    tag : str
        Local tag name, without namespace
    namespace : str or None
        Resolved namespace URI (declared on the element or inherited), or None
    attributes : tuple of (str, str)
        Attribute name/value pairs in source order. Namespaced attribute names
        use ElementTree's ``{uri}local`` notation.
    children : tuple of XmlElement or str
        Child elements and text runs in document order

    """

    tag: str
    namespace: Optional[str] = None
    attributes: tuple[tuple[str, str], ...] = ()
    children: tuple[Union[XmlElement, str], ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "attributes", tuple(self.attributes))
        object.__setattr__(self, "children", tuple(self.children))

    def get(self, name: str, default: Optional[str] = None) -> Optional[str]:
        """Return the value of attribute ``name``, or ``default`` if absent."""
        for key, value in self.attributes:
            if key == name:
                return value
        return default

    @property
    def element_children(self) -> tuple[XmlElement, ...]:
        """Child elements only, in document order."""
        return tuple(child for child in self.children if isinstance(child, XmlElement))

    @property
    def text(self) -> str:
        """Concatenation of the element's direct text runs."""
        return "".join(child for child in self.children if isinstance(child, str))

    def iter(self) -> Iterator[XmlElement]:
        """Iterate over this element and all descendant elements in pre-order."""
        stack: list[XmlElement] = [self]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.element_children))


def split_qualified_name(tag: str) -> tuple[Optional[str], str]:
    """Split an ElementTree ``{uri}local`` tag into namespace and local name."""
    if tag.startswith("{") and "}" in tag:
        namespace, local = tag[1:].split("}", 1)
        return namespace, local
    return None, tag


def _convert_single(element: Element, children: list[Union[XmlElement, str]]) -> XmlElement:
    namespace, local = split_qualified_name(element.tag)
    return XmlElement(
        tag=local,
        namespace=namespace,
        attributes=tuple(element.attrib.items()),
        children=tuple(children),
    )


def from_element(element: Element) -> XmlElement:
    """Convert an ElementTree element into an adapter tree.

    The conversion is iterative, so arbitrarily deep documents are converted
    without growing the Python call stack. Comments and processing
    instructions are dropped; their tail text is kept.

    Parameters
    ----------
    element : xml.etree.ElementTree.Element
        Root of the tree to convert

    Returns
    -------
    XmlElement
        The converted tree

    """
    converted: dict[int, XmlElement] = {}
    stack: list[tuple[Element, bool]] = [(element, False)]

    while stack:
        current, expanded = stack.pop()
        if not expanded:
            stack.append((current, True))
            stack.extend((child, False) for child in reversed(list(current)) if isinstance(child.tag, str))
            continue

        children: list[Union[XmlElement, str]] = []
        if current.text:
            children.append(current.text)
        for child in current:
            if isinstance(child.tag, str):
                children.append(converted.pop(id(child)))
            if child.tail:
                children.append(child.tail)
        converted[id(current)] = _convert_single(current, children)

    return converted[id(element)]


def sanitize_entities(text: str) -> str:
    """Replace HTML named entity references with the characters they denote.

    XML only predefines ``&amp;``, ``&lt;``, ``&gt;``, ``&quot;`` and ``&apos;``,
    while MathML documents routinely use names such as ``&alpha;`` or ``&pi;``
    without declaring them. Those references are replaced using the HTML5
    entity table. Predefined and unknown names are left for the XML parser,
    and references inside CDATA sections, comments and processing
    instructions are not touched.

    Parameters
    ----------
    text : str
        XML source text

    Returns
    -------
    str
        Text with known named references replaced

    Examples
    --------
    >>> sanitize_entities("<cn type='constant'>&pi;&amp;</cn>")
    "<cn type='constant'>π&amp;</cn>"

    """
    replaced = 0

    def _replace(match: re.Match[str]) -> str:
        nonlocal replaced
        name = match.group(1)
        if name is None or name in XML_PREDEFINED_ENTITIES:
            return match.group(0)
        replacement = html5.get(f"{name};")
        if replacement is None:
            return match.group(0)
        replaced += 1
        # Markup-significant characters (e.g. in &nvlt;) stay escaped
        return "".join(f"&#{ord(ch)};" if ch in _MARKUP_CHARACTERS else ch for ch in replacement)

    result = _ENTITY_REFERENCE.sub(_replace, text)
    if replaced:
        logger.debug("Replaced %d named entity reference(s)", replaced)
    return result


def load_tree(source: Union[str, bytes], replace_named_entities: bool = True) -> XmlElement:
    """Parse XML text into an adapter tree.

    Parameters
    ----------
    source : str or bytes
        XML document. Bytes are handed to the XML parser undecoded so that the
        document's encoding declaration is honoured.
    replace_named_entities : bool, default True
        Apply sanitize_entities before parsing. For bytes input this only
        happens when the bytes decode as UTF-8.

    Returns
    -------
    XmlElement
        The document element as an adapter tree

    Raises
    ------
    XmlSyntaxError
        If the document is not well-formed
    ParsingError
        If the document uses constructs rejected for security reasons
        (entity declarations, external references)

    """
    if replace_named_entities:
        if isinstance(source, bytes):
            try:
                source = sanitize_entities(source.decode("utf-8")).encode("utf-8")
            except UnicodeDecodeError:
                logger.debug("Input is not UTF-8; skipping named entity replacement")
        else:
            source = sanitize_entities(source)

    try:
        root = ET.fromstring(source)
    except ET.ParseError as e:
        line, column = getattr(e, "position", (None, None))
        raise XmlSyntaxError(f"Failed to parse XML: {e}", line=line, column=column, original_error=e) from e
    except defusedxml.DefusedXmlException as e:
        raise ParsingError(
            f"XML document rejected for security reasons: {e}", parsing_stage="xml_security", original_error=e
        ) from e

    return from_element(root)
