#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/translator.py
"""Content Markup to AST translator.

This module implements the recursive-descent mapping from an XML adapter tree
(see mathml2ast.xml_tree) to the Content Markup AST. Each element is
dispatched on its local tag name:

- ``math``: the document root; its namespace must be the MathML namespace
- ``apply``: an operator applied to operands
- ``ci``, ``cn``, ``csymbol``: leaf containers holding text
- ``sep``: separator, only valid directly inside ``cn``
- built-in operator tokens (``plus``, ``sin``, ...): Op nodes
- anything else: UnknownElementError

Errors carry a slash-separated path to the offending element, in which every
step after the root is ``tag[i]`` with ``i`` the element's position among its
parent's child elements::

    /math/apply[0]/foo[2]

The first error aborts the translation. No partial tree is returned.

Examples
--------
    >>> from mathml2ast.xml_tree import load_tree
    >>> from mathml2ast.translator import ContentMarkupTranslator
    >>> tree = load_tree(
    ...     '<math xmlns="http://www.w3.org/1998/Math/MathML">'
    ...     '<apply><plus/><ci>x</ci><cn>1</cn></apply></math>'
    ... )
    >>> ContentMarkupTranslator().translate(tree)
    Root(children=(Apply(children=(Op(...), Ci(...), Cn(...))),))

"""

from __future__ import annotations

import logging
import re
from dataclasses import replace
from typing import Callable, Optional

from mathml2ast.ast.nodes import Apply, Ci, Cn, Csymbol, Node, Op, Root, Sep, Symbol, Text
from mathml2ast.constants import (
    ATTR_BASE,
    ATTR_ENCODING,
    ATTR_TYPE,
    DEFAULT_NUMBER_BASE,
    DEFINITION_URL_ALIASES,
    MATHML_NAMESPACE,
    MAX_NUMBER_BASE,
    MIN_NUMBER_BASE,
    STRUCTURAL_TAGS,
    TAG_APPLY,
    TAG_CI,
    TAG_CN,
    TAG_CSYMBOL,
    TAG_MATH,
    TAG_SEP,
)
from mathml2ast.exceptions import (
    DepthExceededError,
    InvalidOptionsError,
    NamespaceError,
    NumberFormatError,
    StructureError,
    UnknownElementError,
)
from mathml2ast.numbers import interpret_cn
from mathml2ast.operators import lookup_operator
from mathml2ast.options.mathml import MathMLOptions
from mathml2ast.xml_tree import XmlElement

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")

_CN_PROMOTED = frozenset({ATTR_TYPE, ATTR_BASE, ATTR_ENCODING, *DEFINITION_URL_ALIASES})
_CSYMBOL_PROMOTED = frozenset({ATTR_ENCODING, *DEFINITION_URL_ALIASES})


def normalize_text(text: str) -> str:
    """Trim ``text`` and collapse internal whitespace runs to a single space.

    Examples
    --------
    >>> normalize_text("  a \\n\\t b  ")
    'a b'

    """
    return _WHITESPACE.sub(" ", text).strip()


def child_path(parent_path: str, tag: str, index: int) -> str:
    """Return the path of the ``index``-th child element of ``parent_path``."""
    return f"{parent_path}/{tag}[{index}]"


class ContentMarkupTranslator:
    """Translate MathML Content Markup adapter trees into AST nodes.

    A translator holds only its options, so one instance may be reused for
    any number of documents and shared between threads.

    Parameters
    ----------
    options : MathMLOptions or None, default = None
        Translation options. If None, default options are used.

    Raises
    ------
    InvalidOptionsError
        If ``options`` is not a MathMLOptions instance

    """

    def __init__(self, options: Optional[MathMLOptions] = None):
        """Initialize the translator."""
        if options is not None and not isinstance(options, MathMLOptions):
            raise InvalidOptionsError(
                component_name="ContentMarkupTranslator",
                expected_type=MathMLOptions,
                received_type=type(options),
            )
        self.options: MathMLOptions = options or MathMLOptions()
        self._handlers: dict[str, Callable[[XmlElement, str, int], Node]] = {
            TAG_APPLY: self._translate_apply,
            TAG_CI: self._translate_ci,
            TAG_CN: self._translate_cn,
            TAG_CSYMBOL: self._translate_csymbol,
        }

    def translate(self, element: XmlElement) -> Root:
        """Translate a whole document into a Root node.

        Parameters
        ----------
        element : XmlElement
            The document element. It must be ``<math>`` in the MathML
            namespace, unless ``allow_bare_expression`` is set, in which case
            a content element root is translated and wrapped in a Root.

        Returns
        -------
        Root
            The translated tree

        Raises
        ------
        NamespaceError
            If the root is not a MathML ``<math>`` element
        StructureError, UnknownElementError, DepthExceededError
            If any part of the document cannot be translated

        """
        path = f"/{element.tag}"
        try:
            if element.tag == TAG_MATH:
                return self._translate_math(element, path)
            if self.options.allow_bare_expression:
                logger.debug("Translating bare <%s> root as a single expression", element.tag)
                return Root((self._translate_element(element, path, 1),))
        except RecursionError as e:
            raise DepthExceededError(self.options.max_depth, original_error=e) from e

        raise NamespaceError(
            element.namespace,
            message=f"Document root is <{element.tag}>; expected <math> in namespace '{MATHML_NAMESPACE}'",
            path=path,
        )

    def translate_expression(self, element: XmlElement, path: Optional[str] = None, depth: int = 1) -> Node:
        """Translate a single content element into an AST node.

        Parameters
        ----------
        element : XmlElement
            A content element (``apply``, ``ci``, an operator token, ...)
        path : str, optional
            Path of ``element`` used in error messages. Defaults to ``/tag``.
        depth : int, default = 1
            Nesting depth of ``element``, counted against ``max_depth``

        Returns
        -------
        Node
            The translated node

        """
        if path is None:
            path = f"/{element.tag}"
        try:
            return self._translate_element(element, path, depth)
        except RecursionError as e:
            raise DepthExceededError(self.options.max_depth, path=path, original_error=e) from e

    # ------------------------------------------------------------------
    # Dispatch
    # ------------------------------------------------------------------
    def _check_depth(self, path: str, depth: int) -> None:
        if depth > self.options.max_depth:
            raise DepthExceededError(self.options.max_depth, path=path)

    def _translate_math(self, element: XmlElement, path: str) -> Root:
        if element.namespace != MATHML_NAMESPACE:
            raise NamespaceError(element.namespace, path=path)
        self._check_depth(path, 1)
        self._reject_text(element, path)
        return Root(tuple(self._translate_children(element, path, 1)))

    def _translate_element(
        self, element: XmlElement, path: str, depth: int, parent_tag: Optional[str] = None
    ) -> Node:
        self._check_depth(path, depth)
        tag = element.tag

        handler = self._handlers.get(tag)
        if handler is not None:
            return handler(element, path, depth)

        if tag == TAG_SEP:
            if parent_tag != TAG_CN:
                raise StructureError(tag, "<sep/> is only valid directly inside <cn>", path)
            self._require_empty(element, path)
            return Sep()

        if tag == TAG_MATH:
            raise StructureError(tag, "nested <math> elements are not allowed", path)

        operator = lookup_operator(tag)
        if operator is not None:
            self._require_empty(element, path)
            return Op(operator, attributes=element.attributes)

        raise UnknownElementError(tag, path)

    def _translate_children(self, element: XmlElement, path: str, depth: int) -> list[Node]:
        return [
            self._translate_element(child, child_path(path, child.tag, index), depth + 1, element.tag)
            for index, child in enumerate(element.element_children)
        ]

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------
    def _translate_apply(self, element: XmlElement, path: str, depth: int) -> Apply:
        self._reject_text(element, path)
        children = element.element_children
        if not children:
            raise StructureError(TAG_APPLY, "must contain at least one element", path)

        nodes: list[Node] = []
        for index, child in enumerate(children):
            current_path = child_path(path, child.tag, index)
            if index == 0 and self._is_symbol_operator(child):
                self._check_depth(current_path, depth + 1)
                logger.debug("Treating unknown operator <%s> at %s as a user-defined symbol", child.tag, current_path)
                nodes.append(Op(Symbol(child.tag), attributes=child.attributes))
                continue
            nodes.append(self._translate_element(child, current_path, depth + 1, TAG_APPLY))
        return Apply(tuple(nodes))

    def _is_symbol_operator(self, element: XmlElement) -> bool:
        return (
            self.options.allow_symbol_operators
            and element.tag not in STRUCTURAL_TAGS
            and lookup_operator(element.tag) is None
            and not element.element_children
            and not normalize_text(element.text)
        )

    # ------------------------------------------------------------------
    # Leaf containers
    # ------------------------------------------------------------------
    def _translate_leaf_content(self, element: XmlElement, path: str, depth: int) -> list[Node]:
        """Translate mixed text and element content of a leaf container.

        Contiguous text runs are joined and normalized into one Text node;
        whitespace-only runs produce nothing. Child elements are translated in
        place, so text is never merged across an element boundary.
        """
        nodes: list[Node] = []
        pending: list[str] = []
        index = 0

        def flush() -> None:
            content = normalize_text("".join(pending))
            pending.clear()
            if content:
                nodes.append(Text(content))

        for child in element.children:
            if isinstance(child, str):
                pending.append(child)
                continue
            flush()
            nodes.append(self._translate_element(child, child_path(path, child.tag, index), depth + 1, element.tag))
            index += 1
        flush()
        return nodes

    def _translate_ci(self, element: XmlElement, path: str, depth: int) -> Ci:
        return Ci(tuple(self._translate_leaf_content(element, path, depth)), attributes=element.attributes)

    def _translate_cn(self, element: XmlElement, path: str, depth: int) -> Cn:
        children = self._translate_leaf_content(element, path, depth)
        cn = Cn(
            tuple(children),
            num_type=element.get(ATTR_TYPE),
            base=self._parse_base(element, path),
            definition_url=_definition_url(element),
            encoding=element.get(ATTR_ENCODING),
            attributes=_unpromoted(element, _CN_PROMOTED),
        )
        if not self.options.interpret_numbers:
            return cn

        try:
            value = interpret_cn(cn)
        except NumberFormatError as e:
            raise NumberFormatError(e.reason, path=path, text=e.text, original_error=e.original_error) from e
        return replace(cn, value=value)

    def _translate_csymbol(self, element: XmlElement, path: str, depth: int) -> Csymbol:
        return Csymbol(
            tuple(self._translate_leaf_content(element, path, depth)),
            definition_url=_definition_url(element),
            encoding=element.get(ATTR_ENCODING),
            attributes=_unpromoted(element, _CSYMBOL_PROMOTED),
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _parse_base(self, element: XmlElement, path: str) -> int:
        raw = element.get(ATTR_BASE)
        if raw is None:
            return DEFAULT_NUMBER_BASE
        if "_" in raw:
            raise StructureError(TAG_CN, f"base '{raw}' is not an integer", path)
        try:
            base = int(raw.strip())
        except ValueError as e:
            raise StructureError(TAG_CN, f"base '{raw}' is not an integer", path, original_error=e) from e
        if not MIN_NUMBER_BASE <= base <= MAX_NUMBER_BASE:
            raise StructureError(TAG_CN, f"base {base} is outside {MIN_NUMBER_BASE}..{MAX_NUMBER_BASE}", path)
        return base

    def _reject_text(self, element: XmlElement, path: str) -> None:
        text = normalize_text(element.text)
        if text:
            raise StructureError(element.tag, f"unexpected text content {text!r}", path)

    def _require_empty(self, element: XmlElement, path: str) -> None:
        if element.element_children:
            raise StructureError(element.tag, "element must be empty but has child elements", path)
        self._reject_text(element, path)


def _definition_url(element: XmlElement) -> Optional[str]:
    for name in DEFINITION_URL_ALIASES:
        value = element.get(name)
        if value is not None:
            return value
    return None


def _unpromoted(element: XmlElement, promoted: frozenset[str]) -> tuple[tuple[str, str], ...]:
    return tuple((name, value) for name, value in element.attributes if name not in promoted)
