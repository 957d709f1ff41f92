"""adoc2confluence - render parsed AsciiDoc nodes as Confluence storage format.

Confluence pages accept a constrained, macro-based XML vocabulary (structured
``ac:`` macros, ``ri:`` resource identifiers, CDATA link bodies) instead of
raw HTML. This library holds the formatting rules that map the attributes of
an already-parsed document node onto that vocabulary. Parsing, tree walking
and publishing belong to the caller.

Key Features
------------
- Markup element construction with lazy content and void-element handling
- Inline style serialization
- Code macro language normalization
- Cross-reference classification and display text resolution
- Footnote anchor identifiers
- Role-aware inline quote rendering
- Anchor, link, code, panel, image and issue-tracker macro templates

Examples
--------
    >>> from adoc2confluence import ConfluenceRenderer, DocumentContext, DocumentNode
    >>> context = DocumentContext.build(references={"install": "Installation"})
    >>> renderer = ConfluenceRenderer(context=context)
    >>> renderer.render_inline_anchor(DocumentNode(type="xref", target="#install", attributes={"refid": "install"}))
    '<ac:link ac:anchor="install"><ac:plain-text-link-body><![CDATA[Installation]]></ac:plain-text-link-body></ac:link>'

"""

from __future__ import annotations

from adoc2confluence.ast import DocumentContext, DocumentNode, SectionNode, section_level, section_title
from adoc2confluence.exceptions import (
    Adoc2ConfluenceError,
    InvalidOptionsError,
    RenderingError,
    ValidationError,
)
from adoc2confluence.languages import is_supported_language, normalize_language, resolve_code_language
from adoc2confluence.macros import (
    admonition_macro,
    anchor_link_macro,
    anchor_macro,
    attachment_image_macro,
    code_macro,
    jira_issue_macro,
    noformat_macro,
    page_link_macro,
)
from adoc2confluence.options import ConfluenceRendererOptions
from adoc2confluence.quotes import format_inline_quoted
from adoc2confluence.renderers import ConfluenceRenderer
from adoc2confluence.utils import footnote_def_id, footnote_ref_id, html_tag, html_tag_if, style_value
from adoc2confluence.xref import (
    anchor_name,
    is_cross_page_anchor_xref,
    is_cross_page_xref,
    looks_like_uri,
    xref_text,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Adoc2ConfluenceError",
    "ConfluenceRenderer",
    "ConfluenceRendererOptions",
    "DocumentContext",
    "DocumentNode",
    "InvalidOptionsError",
    "RenderingError",
    "SectionNode",
    "ValidationError",
    "admonition_macro",
    "anchor_link_macro",
    "anchor_macro",
    "anchor_name",
    "attachment_image_macro",
    "code_macro",
    "footnote_def_id",
    "footnote_ref_id",
    "format_inline_quoted",
    "html_tag",
    "html_tag_if",
    "is_cross_page_anchor_xref",
    "is_cross_page_xref",
    "is_supported_language",
    "jira_issue_macro",
    "looks_like_uri",
    "noformat_macro",
    "normalize_language",
    "page_link_macro",
    "resolve_code_language",
    "section_level",
    "section_title",
    "style_value",
    "xref_text",
]
