#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Constants and lookup tables for the adoc2confluence library.

This module centralizes the fixed vocabularies of the Confluence storage
format together with the default configuration values used by the renderer.
Every table is built once at import time and exposed as an immutable object
(``frozenset`` or a read-only mapping proxy).

Constants are organized by category:
1. Type Definitions - Literal types and type aliases
2. Markup Vocabulary - void elements, quote tags, role aliases
3. Code Macro Languages - supported set and alias table
4. Cross-References and Footnotes
5. Confluence Macros
6. Renderer Defaults
"""

from __future__ import annotations

import re
from types import MappingProxyType
from typing import Literal, Mapping

# =============================================================================
# Type Definitions
# =============================================================================

QuoteType = Literal[
    "emphasis",
    "strong",
    "monospaced",
    "mark",
    "superscript",
    "subscript",
    "double",
    "single",
    "asciimath",
    "latexmath",
    "unquoted",
]
AnchorType = Literal["xref", "ref", "bibref", "link"]
UnsupportedLanguageMode = Literal["omit", "pass-through"]
AdmonitionName = Literal["NOTE", "TIP", "IMPORTANT", "WARNING", "CAUTION"]

# =============================================================================
# Markup Vocabulary
# =============================================================================

# Elements that never carry content or a closing tag
VOID_ELEMENTS: frozenset[str] = frozenset(
    {
        "area",
        "base",
        "br",
        "col",
        "command",
        "embed",
        "hr",
        "img",
        "input",
        "keygen",
        "link",
        "meta",
        "param",
        "source",
        "track",
        "wbr",
    }
)

# (open tag, close tag, is a native element whose open tag can take attributes)
QUOTE_TAGS: Mapping[str, tuple[str, str, bool]] = MappingProxyType(
    {
        "monospaced": ("<code>", "</code>", True),
        "emphasis": ("<em>", "</em>", True),
        "strong": ("<strong>", "</strong>", True),
        "mark": ("<mark>", "</mark>", True),
        "superscript": ("<sup>", "</sup>", True),
        "subscript": ("<sub>", "</sub>", True),
        "double": ("&#8220;", "&#8221;", False),
        "single": ("&#8216;", "&#8217;", False),
        "asciimath": ("\\$", "\\$", False),
        "latexmath": ("\\(", "\\)", False),
    }
)
DEFAULT_QUOTE_TAG: tuple[str, str, bool] = ("", "", False)

ROLE_ALIAS_TAGS: Mapping[str, str] = MappingProxyType(
    {
        "strike-through": "s",
        "line-through": "del",
        "underline": "u",
    }
)

# =============================================================================
# Code Macro Languages
# =============================================================================

SUPPORTED_LANGUAGES: frozenset[str] = frozenset(
    {
        "actionscript3",
        "applescript",
        "bash",
        "c#",
        "cpp",
        "css",
        "coldfusion",
        "delphi",
        "diff",
        "erl",
        "groovy",
        "xml",
        "java",
        "jfx",
        "js",
        "php",
        "perl",
        "text",
        "powershell",
        "py",
        "ruby",
        "sql",
        "sass",
        "scala",
        "vb",
        "yml",
    }
)

LANGUAGE_ALIASES: Mapping[str, str] = MappingProxyType(
    {
        # ActionScript
        "actionscript": "actionscript3",
        "as3": "actionscript3",
        # Shells
        "sh": "bash",
        "shell": "bash",
        "zsh": "bash",
        "console": "bash",
        # C family
        "csharp": "c#",
        "cs": "c#",
        "c": "cpp",
        "h": "cpp",
        "hpp": "cpp",
        "cc": "cpp",
        "hh": "cpp",
        "c++": "cpp",
        "h++": "cpp",
        "cxx": "cpp",
        "hxx": "cpp",
        # ColdFusion / Pascal
        "cfm": "coldfusion",
        "cfc": "coldfusion",
        "pascal": "delphi",
        "pas": "delphi",
        # Diffs
        "patch": "diff",
        "udiff": "diff",
        # Erlang
        "erlang": "erl",
        # Markup
        "html": "xml",
        "xhtml": "xml",
        "xslt": "xml",
        "xsd": "xml",
        "svg": "xml",
        # JVM
        "javafx": "jfx",
        # JavaScript
        "javascript": "js",
        "jscript": "js",
        "json": "js",
        # Perl / PowerShell
        "pl": "perl",
        "ps1": "powershell",
        "posh": "powershell",
        "pwsh": "powershell",
        # Python / Ruby
        "python": "py",
        "python3": "py",
        "rb": "ruby",
        "jruby": "ruby",
        # Stylesheets
        "scss": "sass",
        # Plain text
        "plain": "text",
        "txt": "text",
        # Visual Basic
        "vbnet": "vb",
        "vb.net": "vb",
        # YAML
        "yaml": "yml",
    }
)

# =============================================================================
# Cross-References and Footnotes
# =============================================================================

CROSS_PAGE_MARKER = ".html"
ANCHOR_SEPARATOR = "#"

# Resembles a URI scheme prefix: http://, file:///, data:; never c:/ or c:\
URI_SNIFF_PATTERN = re.compile(r"^[a-zA-Z][a-zA-Z0-9.+-]+:/{0,2}")

FOOTNOTE_DEF_PREFIX = "_footnotedef_"
FOOTNOTE_REF_PREFIX = "_footnoteref_"

# =============================================================================
# Confluence Macros
# =============================================================================

ADMONITION_MACROS: Mapping[str, str] = MappingProxyType(
    {
        "NOTE": "info",
        "TIP": "info",
        "IMPORTANT": "warning",
        "WARNING": "note",
        "CAUTION": "note",
    }
)
ADMONITION_MACRO_NAMES: frozenset[str] = frozenset({"info", "note", "tip", "warning"})

JIRA_SCHEMA_VERSION = 1

CDATA_END = "]]>"

# =============================================================================
# Renderer Defaults
# =============================================================================

DEFAULT_SECTNUMLEVELS = 3
DEFAULT_NORMALIZE_LANGUAGES = True
DEFAULT_UNSUPPORTED_LANGUAGE_MODE: UnsupportedLanguageMode = "omit"
DEFAULT_FOOTNOTE_SUPERSCRIPT = True
DEFAULT_VALIDATE_FRAGMENTS = False
MAX_HEADING_LEVEL = 6
