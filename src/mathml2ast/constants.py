#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/mathml2ast/constants.py
"""Constants shared across the mathml2ast package.

This module centralizes namespace URIs, structural tag names, defaults for
parser options and the exit codes used by the command-line interface.
"""

from __future__ import annotations

from typing import Literal

# =============================================================================
# Namespaces
# =============================================================================

MATHML_NAMESPACE = "http://www.w3.org/1998/Math/MathML"

# =============================================================================
# Structural vocabulary
# =============================================================================

TAG_MATH = "math"
TAG_APPLY = "apply"
TAG_CI = "ci"
TAG_CN = "cn"
TAG_CSYMBOL = "csymbol"
TAG_SEP = "sep"

STRUCTURAL_TAGS = frozenset({TAG_MATH, TAG_APPLY, TAG_CI, TAG_CN, TAG_CSYMBOL, TAG_SEP})

# Attribute names promoted to dedicated fields on Cn / Csymbol nodes
ATTR_TYPE = "type"
ATTR_BASE = "base"
ATTR_ENCODING = "encoding"

# MathML 2.0 spells it definitionURL; some producers (SBML tools) emit definitionUrl
DEFINITION_URL_ALIASES = ("definitionURL", "definitionUrl")

# =============================================================================
# Numbers
# =============================================================================

DEFAULT_CN_TYPE = "real"
DEFAULT_NUMBER_BASE = 10
MIN_NUMBER_BASE = 2
MAX_NUMBER_BASE = 36

# =============================================================================
# Parser defaults
# =============================================================================

DEFAULT_MAX_DEPTH = 256

# Translation and deserialization use up to three Python frames per nesting
# level, so deeper limits would hit the interpreter recursion limit first
MAX_DEPTH_LIMIT = 256
DEFAULT_ALLOW_BARE_EXPRESSION = False
DEFAULT_ALLOW_SYMBOL_OPERATORS = True
DEFAULT_INTERPRET_NUMBERS = False
DEFAULT_REPLACE_NAMED_ENTITIES = True

# Entities the XML parser resolves on its own
XML_PREDEFINED_ENTITIES = frozenset({"amp", "lt", "gt", "quot", "apos"})

# =============================================================================
# Serialization
# =============================================================================

AST_SCHEMA_VERSION = 1
DEFAULT_JSON_INDENT = 2

# =============================================================================
# CLI
# =============================================================================

OutputFormat = Literal["json", "tree"]
DEFAULT_OUTPUT_FORMAT: OutputFormat = "json"

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_VALIDATION_ERROR = 3
EXIT_FILE_ERROR = 4
EXIT_PARSING_ERROR = 6
